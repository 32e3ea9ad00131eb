"""
Letters and their correctness tags.

A Letter is a single uppercase character at a 1-based position inside a word,
plus the feedback tag scoring gave it. Letters are frozen: scoring never
edits a Letter in place, it builds a new one with the tag filled in.

Pattern symbols (used in CSV output and debug logs):
  - 'G'  : in word, correct position
  - 'Y'  : in word, different position
  - '-'  : not in word
  - '.'  : not scored yet
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class CorrectnessLevel(Enum):
    NOT_SCORED = "."
    NOT_IN_WORD = "-"
    IN_WORD_DIFFERENT_POSITION = "Y"
    IN_WORD_CORRECT_POSITION = "G"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class Letter:
    value: str
    position: int
    correctness: CorrectnessLevel = CorrectnessLevel.NOT_SCORED

    @property
    def is_scored(self) -> bool:
        return self.correctness is not CorrectnessLevel.NOT_SCORED

    def scored(self, correctness: CorrectnessLevel) -> "Letter":
        """Return a copy of this letter carrying `correctness`."""
        if self.is_scored:
            raise ValueError(f"letter {self.value}@{self.position} is already scored")
        return replace(self, correctness=correctness)


def is_valid_letter(value: str) -> bool:
    """True for a single character in A-Z (either case)."""
    return isinstance(value, str) and len(value) == 1 and value.upper() in ALPHABET
