from types import MappingProxyType
from typing import Mapping

from filemorph.core.exceptions import InvalidArgumentError
from filemorph.models.schemas import CipherFamily, CipherKey, CipherType, Operation
from filemorph.services.engines.base import CipherEngine
from filemorph.services.engines.registry import EngineRegistry

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, J shares I's cell
GRID_SIZE = 5
SPACE_TOKEN = "/"
SEPARATOR = " "


def _build_tables() -> tuple[Mapping[str, str], Mapping[str, str]]:
    """Build the letter-to-coordinate and coordinate-to-letter tables."""
    letter_to_coords: dict[str, str] = {}
    coords_to_letter: dict[str, str] = {}

    for index, letter in enumerate(ALPHABET):
        row, col = divmod(index, GRID_SIZE)
        coords = f"{row + 1}{col + 1}"
        letter_to_coords[letter] = coords
        coords_to_letter[coords] = letter

    letter_to_coords["J"] = letter_to_coords["I"]

    return MappingProxyType(letter_to_coords), MappingProxyType(coords_to_letter)


LETTER_TO_COORDS, COORDS_TO_LETTER = _build_tables()


def _check_text(text: object) -> None:
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "Text must be a string",
            {"argument": "text", "type": type(text).__name__},
        )


def encode(text: str) -> str:
    """
    Encode text as space-separated Polybius coordinates.

    Letters become two-digit "row col" pairs, a space becomes "/", and any
    other character is kept verbatim as its own token. A literal "/" in the
    text is therefore indistinguishable from a space and decodes as one.
    """
    _check_text(text)
    tokens = []

    for char in text:
        upper = char.upper()
        if upper in LETTER_TO_COORDS:
            tokens.append(LETTER_TO_COORDS[upper])
        elif char == " ":
            tokens.append(SPACE_TOKEN)
        else:
            tokens.append(upper)

    return SEPARATOR.join(tokens).strip()


def decode(text: str) -> str:
    """
    Decode space-separated coordinates back to letters.

    Unknown coordinates and any other tokens are passed through unchanged,
    so malformed input never raises.
    """
    _check_text(text)
    result = []

    for token in text.split(SEPARATOR):
        if token == SPACE_TOKEN:
            result.append(" ")
        else:
            result.append(COORDS_TO_LETTER.get(token, token))

    return "".join(result)


@EngineRegistry.register
class GridSubstitutionEngine(CipherEngine):
    """
    Grid substitution (Polybius square) engine.

    Letters are replaced by their coordinates in a fixed 5x5 square:

          1 2 3 4 5
        1 A B C D E
        2 F G H I K
        3 L M N O P
        4 Q R S T U
        5 V W X Y Z

    I and J share cell 24, which always decodes to I. A literal "/" shares
    the space token, so "A/B" comes back as "A B".
    """

    name = "Grid Substitution Cipher"
    cipher_type = CipherType.GRID_SUBSTITUTION
    cipher_family = CipherFamily.SUBSTITUTION
    description = (
        "A keyless substitution cipher that replaces each letter with its "
        "row and column in a 5x5 Polybius square. I and J share a cell."
    )

    def encode(self, text: str, key: CipherKey | None = None) -> str:
        """Encode text; the key is ignored."""
        return encode(text)

    def decode(self, text: str, key: CipherKey | None = None) -> str:
        """Decode text; the key is ignored."""
        return decode(text)

    def explain(
        self,
        operation: Operation,
        key: CipherKey | None = None,
        text: str | None = None,
    ) -> str:
        """Generate human-readable explanation."""
        if operation == Operation.ENCODE:
            return (
                "Polybius square substitution. Each letter was replaced by its "
                "row and column in a fixed 5x5 grid (I and J share 24), spaces "
                "were written as '/'."
            )
        return (
            "Polybius square substitution. Each coordinate pair was looked up "
            "in a fixed 5x5 grid, '/' became a space, and unknown tokens were "
            "kept as-is."
        )
