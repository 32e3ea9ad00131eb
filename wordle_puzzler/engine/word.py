"""
Five-letter words as ordered tuples of Letters.

A Word is created unscored (every Letter NOT_SCORED) from user text or a
dictionary line, and a separate scored Word is produced by `score()`. Both
are frozen values, so a Word can be shared between games and solvers freely.

Positions are 1-based (as reported to players); indexing `word[i]` is
0-based like any Python sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Container, Iterable, Iterator, Optional, Tuple

from .letter import CorrectnessLevel, Letter, is_valid_letter

WORD_LENGTH = 5


@dataclass(frozen=True)
class Word:
    letters: Tuple[Letter, ...]

    # ---- construction ----

    @classmethod
    def create(
            cls,
            value: Optional[str],
            allowed: Optional[Container[str]] = None,
            validate: bool = True,
    ) -> Optional["Word"]:
        """
        Build an unscored Word from text, or return None if it is rejected.

        Args:
          value    : raw text; case is normalized to upper
          allowed  : recognized words (uppercase); membership is required
                     when `validate` is set and this is given
          validate : check alphabet and dictionary membership. Bulk loading
                     of the dictionary itself passes False.

        Length is always checked.
        """
        if not isinstance(value, str):
            return None
        text = value.strip().upper()
        if len(text) != WORD_LENGTH:
            return None

        word = cls.from_letters(
            Letter(ch, i) for i, ch in enumerate(text, start=1)
        )
        if word is None:
            return None
        if validate:
            if not word.is_valid():
                return None
            if allowed is not None and text not in allowed:
                return None
        return word

    @classmethod
    def from_letters(cls, letters: Iterable[Letter]) -> Optional["Word"]:
        letters = tuple(letters)
        if len(letters) != WORD_LENGTH:
            return None
        return cls(letters)

    # ---- sequence protocol ----

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, index: int) -> Letter:
        return self.letters[index]

    def __str__(self) -> str:
        return "".join(l.value for l in self.letters)

    # ---- state ----

    @property
    def pattern(self) -> str:
        """Feedback pattern, e.g. 'YG-YG' (all '.' when unscored)."""
        return "".join(l.correctness.symbol for l in self.letters)

    @property
    def is_scored(self) -> bool:
        return all(l.is_scored for l in self.letters)

    def is_solved(self) -> bool:
        return all(
            l.correctness is CorrectnessLevel.IN_WORD_CORRECT_POSITION for l in self.letters
        )

    def is_valid(self) -> bool:
        return all(is_valid_letter(l.value) for l in self.letters)

    # ---- lookups ----

    def letter_position(self, value: str) -> Optional[int]:
        """1-based position of the first letter equal to `value`, else None."""
        if not value:
            return None
        index = str(self).find(value)
        return None if index == -1 else index + 1

    def matches_on(self, value: str, position: int) -> bool:
        return self.letters[position - 1].value == value

    def has_all_letters(self, values: Iterable[str]) -> bool:
        return all(self.letter_position(v) is not None for v in values)

    def has_any_letter(self, values: Iterable[str]) -> bool:
        return any(self.letter_position(v) is not None for v in values)

    def has_at_least_one_letter_in_same_position(self, letters: Iterable[Letter]) -> bool:
        return any(self.matches_on(l.value, l.position) for l in letters)
