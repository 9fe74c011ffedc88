from typing import Iterator

from filemorph.core.config import Settings
from filemorph.core.exceptions import InvalidArgumentError, MissingArgumentError
from filemorph.models.schemas import CipherFamily, CipherKey, CipherType, Operation
from filemorph.services.engines.base import CipherEngine
from filemorph.services.engines.registry import EngineRegistry


def _validate(text: object, rails: object) -> None:
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "Text must be a string",
            {"argument": "text", "type": type(text).__name__},
        )
    if rails is None:
        raise MissingArgumentError("rails", "Zigzag transposition requires a number of rails")
    if isinstance(rails, bool) or not isinstance(rails, int):
        raise InvalidArgumentError(
            "Rails must be an integer",
            {"argument": "rails", "type": type(rails).__name__},
        )


def _is_degenerate(text: str, rails: int) -> bool:
    """A single rail, or more rails than characters, leaves text unchanged."""
    return rails <= 1 or rails >= len(text)


def _rail_pattern(length: int, rails: int) -> Iterator[int]:
    """Yield the rail index for each position, bouncing between top and bottom."""
    rail = 0
    direction = 1  # 1 = down, -1 = up

    for _ in range(length):
        yield rail

        # Change direction at top or bottom
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1

        rail += direction


def encode(text: str, rails: int) -> str:
    """
    Encode text by writing it in a zigzag across rails and reading each rail.

    Returns the text unchanged when rails <= 1 or rails >= len(text).
    """
    _validate(text, rails)

    if _is_degenerate(text, rails):
        return text

    fence: list[list[str]] = [[] for _ in range(rails)]
    for char, rail in zip(text, _rail_pattern(len(text), rails)):
        fence[rail].append(char)

    return "".join("".join(row) for row in fence)


def decode(text: str, rails: int) -> str:
    """
    Decode zigzag ciphertext.

    The bounce pattern is replayed once to size each rail, then again to
    read the rails back in original position order.
    """
    _validate(text, rails)

    if _is_degenerate(text, rails):
        return text

    n = len(text)

    # Calculate how many characters go in each rail
    rail_lengths = [0] * rails
    for rail in _rail_pattern(n, rails):
        rail_lengths[rail] += 1

    # Split ciphertext into rails
    fence = []
    idx = 0
    for length in rail_lengths:
        fence.append(text[idx:idx + length])
        idx += length

    # Read off in zigzag pattern
    result = []
    rail_indices = [0] * rails
    for rail in _rail_pattern(n, rails):
        result.append(fence[rail][rail_indices[rail]])
        rail_indices[rail] += 1

    return "".join(result)


@EngineRegistry.register
class ZigzagEngine(CipherEngine):
    """
    Zigzag transposition (Rail Fence) engine.

    The plaintext is written in a zigzag across a number of rails, then each
    rail is read in turn.

    Example with 3 rails:
    Plaintext: WEAREDISCOVEREDFLEEATONCE

    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

    Ciphertext: WECRLTE + ERDSOEEFEAOC + AIVDEN
    """

    name = "Zigzag Transposition Cipher"
    cipher_type = CipherType.ZIGZAG_TRANSPOSITION
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher that writes plaintext in a zigzag pattern "
        "across multiple rails (rows), then reads each rail in sequence. "
        "The number of rails is the key."
    )

    def encode(self, text: str, key: CipherKey | None = None) -> str:
        """Encode using the specified number of rails."""
        return encode(text, self._parse_int_key(key, "rails"))

    def decode(self, text: str, key: CipherKey | None = None) -> str:
        """Decode using the specified number of rails."""
        return decode(text, self._parse_int_key(key, "rails"))

    def default_key(self, settings: Settings) -> CipherKey | None:
        """Fall back to the configured rail count."""
        return settings.default_rails

    def explain(
        self,
        operation: Operation,
        key: CipherKey | None = None,
        text: str | None = None,
    ) -> str:
        """Generate human-readable explanation."""
        rails = self._parse_int_key(key, "rails")

        if rails is None or rails <= 1:
            return "Zigzag transposition with a single rail leaves the text unchanged."
        if text is not None and _is_degenerate(text, rails):
            return (
                f"Zigzag transposition with {rails} rails. The text has no more "
                f"characters than rails, so it was returned unchanged."
            )

        return (
            f"Zigzag transposition with {rails} rails. "
            f"The plaintext is written in a zigzag pattern across {rails} rows, "
            f"then each row is read in sequence to form the ciphertext. "
            f"Decoding replays the same pattern to put characters back in place."
        )
