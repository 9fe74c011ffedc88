import logging
from dataclasses import dataclass

from filemorph.core.config import Settings
from filemorph.core.exceptions import EngineNotFoundError, InvalidArgumentError
from filemorph.models.schemas import CipherKey, CipherType, Operation, RequestKey
from filemorph.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@dataclass
class TransformResult:
    """Result of a single encode or decode call."""

    cipher_type: CipherType
    operation: Operation
    text: str
    result: str
    key_used: CipherKey | None
    explanation: str


class CipherDispatcher:
    """
    Selects an engine by cipher name and runs one operation on it.

    Keys the caller leaves out are filled from the engine's default
    (only zigzag transposition has one); every other check is left to
    the engine so errors carry the cipher's own message.
    """

    def __init__(self, settings: Settings, registry: EngineRegistry | None = None):
        self.settings = settings
        self.registry = registry or EngineRegistry()

    def run(
        self,
        cipher_type: CipherType | str,
        operation: Operation,
        text: str,
        key: RequestKey | None = None,
    ) -> TransformResult:
        """
        Run an encode or decode operation.

        Raises:
            EngineNotFoundError: If the cipher name is unknown
            InvalidArgumentError: If the text exceeds the configured maximum
            MissingArgumentError: If a required key or text is missing
        """
        resolved = EngineRegistry.resolve(cipher_type)
        engine = self.registry.get_engine(resolved)
        if engine is None:
            raise EngineNotFoundError(resolved.value)

        if isinstance(text, str) and len(text) > self.settings.max_text_length:
            raise InvalidArgumentError(
                f"Text exceeds maximum length of {self.settings.max_text_length}",
                {"length": len(text), "max_length": self.settings.max_text_length},
            )

        if key is None or (isinstance(key, str) and not key.strip()):
            key = engine.default_key(self.settings)

        result = engine.transform(operation, text, key)
        logger.debug(
            "%s %s: %d chars in, %d chars out",
            resolved.value,
            operation.value,
            len(text),
            len(result),
        )

        return TransformResult(
            cipher_type=resolved,
            operation=operation,
            text=text,
            result=result,
            key_used=key,
            explanation=engine.explain(operation, key, text),
        )
