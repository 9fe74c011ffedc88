import string
from typing import ClassVar

from filemorph.core.exceptions import InvalidArgumentError, MissingArgumentError
from filemorph.models.schemas import CipherFamily, CipherKey, CipherType, Operation
from filemorph.services.engines.base import CipherEngine
from filemorph.services.engines.registry import EngineRegistry

ALPHABET_SIZE = 26


def _validate(text: object, shift: object) -> int:
    """Check argument types and return the shift normalized to 0-25."""
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "Text must be a string",
            {"argument": "text", "type": type(text).__name__},
        )
    if shift is None:
        raise MissingArgumentError("shift", "Shift cipher requires a shift value")
    if isinstance(shift, bool) or not isinstance(shift, int):
        raise InvalidArgumentError(
            "Shift must be a non-negative integer",
            {"argument": "shift", "type": type(shift).__name__},
        )
    if shift < 0:
        raise InvalidArgumentError(
            "Shift must be a non-negative integer",
            {"argument": "shift", "value": shift},
        )
    return shift % ALPHABET_SIZE


def _rotate(text: str, shift: int) -> str:
    """Rotate ASCII letters by shift, keeping case and other characters."""
    result = []

    for char in text:
        if char in string.ascii_lowercase:
            idx = ord(char) - ord("a")
            result.append(chr((idx + shift) % ALPHABET_SIZE + ord("a")))
        elif char in string.ascii_uppercase:
            idx = ord(char) - ord("A")
            result.append(chr((idx + shift) % ALPHABET_SIZE + ord("A")))
        else:
            result.append(char)

    return "".join(result)


def encode(text: str, shift: int) -> str:
    """
    Encode text with the shift cipher.

    Lowercase and uppercase letters each rotate within their own alphabet;
    everything else passes through unchanged.

    Raises:
        InvalidArgumentError: If text is not a string or shift is not a
            non-negative integer
        MissingArgumentError: If shift is None
    """
    return _rotate(text, _validate(text, shift))


def decode(text: str, shift: int) -> str:
    """Decode text by rotating back by the same shift."""
    normalized = _validate(text, shift)
    return _rotate(text, (ALPHABET_SIZE - normalized) % ALPHABET_SIZE)


@EngineRegistry.register
class ShiftEngine(CipherEngine):
    """
    Shift (Caesar) cipher engine.

    Each letter is moved a fixed number of positions along the alphabet,
    wrapping from Z back to A. Case is preserved and non-letters are left
    untouched.
    """

    name = "Shift Cipher"
    cipher_type = CipherType.SHIFT
    cipher_family = CipherFamily.SUBSTITUTION
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Also known as the Caesar cipher."
    )
    requires_key: ClassVar[bool] = True

    def encode(self, text: str, key: CipherKey | None = None) -> str:
        """Encode text with the given shift."""
        return encode(text, self._parse_int_key(key, "shift"))

    def decode(self, text: str, key: CipherKey | None = None) -> str:
        """Decode text with the given shift."""
        return decode(text, self._parse_int_key(key, "shift"))

    def explain(
        self,
        operation: Operation,
        key: CipherKey | None = None,
        text: str | None = None,
    ) -> str:
        """Generate human-readable explanation."""
        shift = self._parse_int_key(key, "shift") or 0
        direction = "forward" if operation == Operation.ENCODE else "back"

        return (
            f"Shift cipher with shift of {shift}. "
            f"Each letter was moved {direction} {shift % ALPHABET_SIZE} positions "
            f"in the alphabet; other characters were left unchanged."
        )
