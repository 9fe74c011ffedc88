import math
import re
from typing import ClassVar

from filemorph.core.exceptions import InvalidArgumentError, MissingArgumentError
from filemorph.models.schemas import CipherFamily, CipherKey, CipherType, Operation
from filemorph.services.engines.base import CipherEngine
from filemorph.services.engines.registry import EngineRegistry

FILLER = "X"

_WHITESPACE = re.compile(r"\s+")


def _require(value: object, argument: str) -> str:
    if value is None or value == "":
        raise MissingArgumentError(argument, "Both text and key are required")
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{argument.capitalize()} must be a string",
            {"argument": argument, "type": type(value).__name__},
        )
    return value


def column_order(key: str) -> list[int]:
    """
    Return column indices in reading order.

    Columns are sorted by the key's character at each index; sorted() is
    stable, so repeated letters keep their left-to-right order.
    """
    return sorted(range(len(key)), key=lambda i: key[i])


def encode(text: str, key: str) -> str:
    """
    Encode text with a keyed columnar transposition.

    Whitespace is removed and text and key are upper-cased. The text is
    written into rows of len(key) columns, the last row padded with X, and
    the columns are read top to bottom in key order.
    """
    clean_text = _WHITESPACE.sub("", _require(text, "text")).upper()
    clean_key = _require(key, "key").upper()

    key_length = len(clean_key)
    num_rows = math.ceil(len(clean_text) / key_length)

    # Pad plaintext to fill grid
    padded = clean_text.ljust(num_rows * key_length, FILLER)
    grid = [padded[row * key_length:(row + 1) * key_length] for row in range(num_rows)]

    # Read columns in order
    result = []
    for col in column_order(clean_key):
        for row in grid:
            result.append(row[col])

    return "".join(result)


def decode(text: str, key: str) -> str:
    """
    Decode a keyed columnar transposition.

    Every X read back from the grid is dropped, so a plaintext X (trailing
    or otherwise) does not survive the round trip.
    """
    clean_text = _WHITESPACE.sub("", _require(text, "text")).upper()
    clean_key = _require(key, "key").upper()

    key_length = len(clean_key)
    num_rows = math.ceil(len(clean_text) / key_length)

    # Fill the grid column by column in key order
    grid: list[list[str | None]] = [[None] * key_length for _ in range(num_rows)]
    idx = 0
    for col in column_order(clean_key):
        for row in range(num_rows):
            if idx < len(clean_text):
                grid[row][col] = clean_text[idx]
                idx += 1

    # Read row by row
    result = []
    for row in grid:
        for char in row:
            if char is not None and char != FILLER:
                result.append(char)

    return "".join(result)


@EngineRegistry.register
class KeyedColumnarEngine(CipherEngine):
    """
    Keyed columnar transposition engine.

    The plaintext is written into a grid row by row, then the columns
    are read out in the alphabetical order of a keyword.

    Example with keyword "KEY" (order: E, K, Y):

    Key:    K E Y
            ─────
            H E L
            L O W
            O R L
            D X X  (padded)

    Read columns in sorted order: EORX, HLOD, LWLX
    """

    name = "Keyed Columnar Transposition Cipher"
    cipher_type = CipherType.KEYED_COLUMNAR
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where plaintext is written into a grid "
        "by rows, then read out by columns in an order determined by "
        "a keyword. Spaces are removed and output is upper-case."
    )
    requires_key: ClassVar[bool] = True

    def encode(self, text: str, key: CipherKey | None = None) -> str:
        """Encode using the keyword."""
        return encode(text, key)

    def decode(self, text: str, key: CipherKey | None = None) -> str:
        """Decode using the keyword."""
        return decode(text, key)

    def explain(
        self,
        operation: Operation,
        key: CipherKey | None = None,
        text: str | None = None,
    ) -> str:
        """Generate human-readable explanation."""
        keyword = str(key or "").upper()
        order = [keyword[i] for i in column_order(keyword)]

        if operation == Operation.ENCODE:
            return (
                f"Keyed columnar transposition with keyword '{keyword}'. "
                f"The text was written in rows of {len(keyword)}, padded with "
                f"'{FILLER}', then columns were read in the order {''.join(order)}."
            )
        return (
            f"Keyed columnar transposition with keyword '{keyword}'. "
            f"The ciphertext was written column by column in the order "
            f"{''.join(order)}, then read row by row with '{FILLER}' padding removed."
        )
