import logging
from collections.abc import Iterator

from cipherbench.core.exceptions import CipherErrorKind
from cipherbench.models.schemas import CipherFamily, CipherType, KeyKind
from cipherbench.services.engines.base import CipherEngine, reject
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.preprocessing.sanitizer import TextSanitizer

logger = logging.getLogger(__name__)


def grid_shape(length: int, columns: int) -> tuple[int, int]:
    """Rows and columns of the table holding ``length`` characters."""
    return (length + columns - 1) // columns, columns


def fill_mask(length: int, columns: int) -> list[list[bool]]:
    """
    Which cells of the table hold a character.

    The first ``length`` cells in row-major order are filled; only the
    last row can be partial.
    """
    rows, _ = grid_shape(length, columns)
    return [
        [row * columns + col < length for col in range(columns)]
        for row in range(rows)
    ]


def route(rows: int, columns: int) -> Iterator[tuple[int, int]]:
    """Cells from the rightmost column to the leftmost, bottom to top in each."""
    for col in range(columns - 1, -1, -1):
        for row in range(rows - 1, -1, -1):
            yield row, col


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


@EngineRegistry.register
class TableRouteEngine(CipherEngine):
    """
    Table route transposition cipher engine.

    The text is written into a table with a fixed number of columns row by
    row, left to right. The ciphertext is read column by column, starting
    from the rightmost column, going from the bottom row up. Blank cells of
    the last row are skipped.

    Example with 4 columns and "TRANSPOSITION":

            T R A N
            S P O S
            I T I O
            N

    Read columns 4, 3, 2, 1 upwards: OSN, IOA, TPR, NIST -> "OSNIOATPRNIST"

    Decryption recomputes which cells were filled from the text length and
    column count alone, fills them in the same route and reads row by row.
    """

    name = "Table Route Cipher"
    cipher_type = CipherType.TABLE_ROUTE
    cipher_family = CipherFamily.TRANSPOSITION
    key_kind = KeyKind.COLUMNS
    description = (
        "A transposition cipher where text is written into a table row by row "
        "and read out column by column, from the rightmost column to the "
        "leftmost and from the bottom row to the top."
    )

    def __init__(self, columns: int):
        if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
            raise reject(logger, CipherErrorKind.INVALID_COLUMN_COUNT, {"columns": columns})
        self._columns = columns
        logger.debug("Key accepted, %d columns", columns)

    @property
    def key(self) -> int:
        return self._columns

    @property
    def columns(self) -> int:
        return self._columns

    def sanitize(self, plaintext: str) -> str:
        return self._get_valid_text(plaintext)

    def encrypt(self, plaintext: str) -> str:
        """Write rows, read the route."""
        valid_text = self._get_valid_text(plaintext)
        length = len(valid_text)
        rows, columns = grid_shape(length, self._columns)

        table: list[list[str | None]] = [[None] * columns for _ in range(rows)]
        for index, char in enumerate(valid_text):
            table[index // columns][index % columns] = char

        result = []
        for row, col in route(rows, columns):
            if table[row][col] is not None:
                result.append(table[row][col])

        logger.debug("Encrypted %d letters in a %dx%d table", length, rows, columns)
        return "".join(result)

    def decrypt(self, ciphertext: str) -> str:
        """Write the route, read rows."""
        valid_text = self._get_valid_text(ciphertext)
        length = len(valid_text)
        rows, columns = grid_shape(length, self._columns)
        filled = fill_mask(length, columns)

        table: list[list[str | None]] = [[None] * columns for _ in range(rows)]
        chars = iter(valid_text)
        for row, col in route(rows, columns):
            if filled[row][col]:
                table[row][col] = next(chars)

        result = []
        for row in range(rows):
            for col in range(columns):
                if filled[row][col]:
                    result.append(table[row][col])

        logger.debug("Decrypted %d letters in a %dx%d table", length, rows, columns)
        return "".join(result)

    def grid(self, text: str) -> list[list[str | None]]:
        """
        Lay sanitized text out as the encryption table.

        Unfilled cells of the last row are None.
        """
        valid_text = self._get_valid_text(text)
        mask = fill_mask(len(valid_text), self._columns)
        chars = iter(valid_text)
        return [[next(chars) if cell else None for cell in row] for row in mask]

    def explain(self, plaintext: str, ciphertext: str) -> str:
        """Generate human-readable explanation."""
        rows, columns = grid_shape(len(plaintext), self._columns)
        blanks = rows * columns - len(plaintext)
        last_row = (
            f"{_count(blanks, 'blank cell')} in the last row" if blanks else "no blank cells"
        )
        return (
            f"Table route cipher with {_count(columns, 'column')}. "
            f"The {_count(len(plaintext), 'letter')} fill a {rows}x{columns} table "
            f"row by row ({last_row}). "
            f"The ciphertext is read column by column from right to left, "
            f"bottom to top within each column."
        )

    def _get_valid_text(self, text: str) -> str:
        if not text:
            raise reject(logger, CipherErrorKind.EMPTY_PLAINTEXT)

        sanitized = TextSanitizer().latin_letters(text)
        if sanitized.removed_count:
            logger.debug("Dropped %d non-letter characters", sanitized.removed_count)
        if not sanitized.text:
            raise reject(logger, CipherErrorKind.NO_LETTERS_IN_PLAINTEXT)

        if len(sanitized.text) <= self._columns:
            raise reject(
                logger,
                CipherErrorKind.TEXT_TOO_SHORT,
                {"length": len(sanitized.text), "columns": self._columns},
            )

        return sanitized.text
