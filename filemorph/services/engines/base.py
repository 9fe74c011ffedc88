from abc import ABC, abstractmethod
from typing import ClassVar

from filemorph.core.config import Settings
from filemorph.core.exceptions import InvalidArgumentError
from filemorph.models.schemas import CipherFamily, CipherKey, CipherType, Operation


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine adapts one of the pure cipher modules to the dispatch layer.
    Each implementation must provide:
    - encode(): Transform plaintext into ciphertext
    - decode(): Transform ciphertext back into plaintext
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    requires_key: ClassVar[bool] = False

    @abstractmethod
    def encode(self, text: str, key: CipherKey | None = None) -> str:
        """
        Encode text with the given key.

        Args:
            text: The plaintext to encode
            key: The cipher key, if the cipher takes one

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decode(self, text: str, key: CipherKey | None = None) -> str:
        """
        Decode text with the given key.

        Args:
            text: The ciphertext to decode
            key: The cipher key, if the cipher takes one

        Returns:
            Plaintext
        """
        pass

    @abstractmethod
    def explain(
        self,
        operation: Operation,
        key: CipherKey | None = None,
        text: str | None = None,
    ) -> str:
        """
        Generate human-readable explanation of a transformation.

        Args:
            operation: Whether the text was encoded or decoded
            key: The key used
            text: The input text, when the explanation depends on it

        Returns:
            Explanation string
        """
        pass

    def transform(
        self,
        operation: Operation,
        text: str,
        key: CipherKey | None = None,
    ) -> str:
        """Run encode or decode depending on the operation."""
        if operation == Operation.ENCODE:
            return self.encode(text, key)
        return self.decode(text, key)

    def default_key(self, settings: Settings) -> CipherKey | None:
        """Key to use when the caller did not supply one."""
        return None

    @staticmethod
    def _parse_int_key(key: CipherKey | None, argument: str) -> int | None:
        """
        Parse an integer key as sent by form-based clients.

        Accepts an int or a string of decimal digits. Signs, floats and
        booleans are rejected rather than coerced.
        """
        if key is None:
            return None
        if isinstance(key, bool):
            raise InvalidArgumentError(
                f"{argument} must be an integer",
                {"argument": argument, "value": key},
            )
        if isinstance(key, int):
            return key
        if isinstance(key, str):
            stripped = key.strip()
            if not stripped:
                return None
            if stripped.isascii() and stripped.isdigit():
                return int(stripped)
            if stripped.startswith("-") and stripped[1:].isascii() and stripped[1:].isdigit():
                return int(stripped)
        raise InvalidArgumentError(
            f"{argument} must be an integer",
            {"argument": argument, "value": key},
        )
