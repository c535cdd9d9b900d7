from dataclasses import dataclass, field
from functools import lru_cache

RUSSIAN_UPPERCASE = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"


@dataclass(frozen=True)
class Alphabet:
    """
    Ordered symbol set used for index arithmetic.

    Symbols are stored uppercase. Each symbol maps to its zero-based
    position, and its lowercase form maps back to the symbol, so
    ``Ё``/``ё`` are handled like every other letter pair.
    """

    symbols: str
    index: dict[str, int] = field(init=False, repr=False, compare=False)
    uppercase: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("Alphabet symbols must be distinct")
        object.__setattr__(self, "index", {s: i for i, s in enumerate(self.symbols)})
        upper = {s: s for s in self.symbols}
        upper.update({s.lower(): s for s in self.symbols})
        object.__setattr__(self, "uppercase", upper)

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, char: object) -> bool:
        return char in self.uppercase

    def is_upper(self, char: str) -> bool:
        """True only for the uppercase symbols themselves."""
        return char in self.index

    def to_upper(self, char: str) -> str:
        return self.uppercase.get(char, char)

    def to_indices(self, text: str) -> list[int]:
        """Convert uppercase text to indices, skipping unknown characters."""
        return [self.index[c] for c in text if c in self.index]

    def to_text(self, indices: list[int]) -> str:
        """Convert indices back to symbols, skipping out-of-range values."""
        size = len(self.symbols)
        return "".join(self.symbols[i] for i in indices if 0 <= i < size)


@lru_cache
def russian_alphabet() -> Alphabet:
    """The 33-letter Russian alphabet, built once per process."""
    return Alphabet(RUSSIAN_UPPERCASE)
