import string
from collections.abc import Callable, Container
from dataclasses import dataclass


@dataclass
class SanitizedText:
    """Result of text sanitization."""

    text: str
    original: str
    removed_chars: dict[str, int]

    @property
    def removed_count(self) -> int:
        return sum(self.removed_chars.values())


class TextSanitizer:
    """
    Filters raw input down to the character domain of a cipher.

    Handles:
    - Dropping characters outside the allowed set
    - Per-character case normalization
    - Counting what was removed
    """

    LATIN_LETTERS = frozenset(string.ascii_letters)

    def filter_to(
        self,
        text: str,
        allowed: Container[str],
        normalize: Callable[[str], str] | None = None,
    ) -> SanitizedText:
        """
        Keep only characters in ``allowed``, normalizing the survivors.

        Args:
            text: Raw input text
            allowed: Characters to keep (checked before normalization)
            normalize: Optional per-character mapping applied to kept characters

        Returns:
            SanitizedText with the filtered text and removal counts
        """
        result = []
        removed_chars: dict[str, int] = {}

        for char in text:
            if char in allowed:
                result.append(normalize(char) if normalize else char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return SanitizedText(
            text="".join(result),
            original=text,
            removed_chars=removed_chars,
        )

    def latin_letters(self, text: str) -> SanitizedText:
        """Keep ASCII Latin letters only, uppercased."""
        return self.filter_to(text, self.LATIN_LETTERS, str.upper)
