"""
Knowledge extracted from a game's guess history.

Given:
  - the scored words played so far (oldest first)

Collect:
  - correct    : letters tagged 'G' (value + position), across all guesses
  - misplaced  : letters tagged 'Y' (value + the position they are NOT at)
  - required   : distinct letter values known to be in the solution ('G' or 'Y')
  - excluded   : distinct letter values tagged '-'
  - played     : the guessed words as uppercase text
  - last       : the most recent scored word (None before the first guess)

Solver filters read these sets instead of re-walking the history each time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from .letter import CorrectnessLevel, Letter
from .word import Word

# History is the sequence of scored Words a Game has recorded.
History = Iterable[Word]


@dataclass(frozen=True)
class Constraints:
    correct: FrozenSet[Letter]
    misplaced: FrozenSet[Letter]
    required: FrozenSet[str]
    excluded: FrozenSet[str]
    played: FrozenSet[str]
    last: Optional[Word] = None

    @classmethod
    def from_history(cls, history: History) -> "Constraints":
        words: Tuple[Word, ...] = tuple(history)
        letters = [l for w in words for l in w]

        correct = frozenset(
            l for l in letters if l.correctness is CorrectnessLevel.IN_WORD_CORRECT_POSITION
        )
        misplaced = frozenset(
            l for l in letters if l.correctness is CorrectnessLevel.IN_WORD_DIFFERENT_POSITION
        )
        excluded = frozenset(
            l.value for l in letters if l.correctness is CorrectnessLevel.NOT_IN_WORD
        )
        required = frozenset(l.value for l in correct | misplaced)

        return cls(
            correct=correct,
            misplaced=misplaced,
            required=required,
            excluded=excluded,
            played=frozenset(str(w).upper() for w in words),
            last=words[-1] if words else None,
        )
