from typing import Any


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when a cipher rejects its input."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when a parameter has the wrong type or is out of range."""

    pass


class MissingArgumentError(ValidationError):
    """Raised when a required text or key parameter is absent or empty."""

    def __init__(self, argument: str, message: str | None = None):
        super().__init__(
            message or f"Missing required argument: {argument}",
            {"argument": argument},
        )


class EngineError(CipherError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
