"""
Feedback scoring for a single (guess, solution) pair.

Conventions (see letter.CorrectnessLevel):
  - 'G'  : letter equals the solution letter at the same position
  - 'Y'  : letter occurs somewhere else in the solution
  - '-'  : letter does not occur in the solution at all

This is a membership test, NOT the duplicate-aware two-pass rule of the
official game: a guess letter that appears once in the solution is marked
'Y' at every non-matching occurrence in the guess. For example
score(SPEED, ABIDE) -> "--YYY" where official Wordle gives "--Y-Y".

The guess is never modified; a new scored Word is returned.
"""

from __future__ import annotations

from .letter import CorrectnessLevel
from .word import WORD_LENGTH, Word


def score(guess: Word, solution: Word) -> Word:
    """
    Score `guess` against `solution`.

    Preconditions:
      - both are Words of WORD_LENGTH letters
      - `guess` is unscored

    Examples:
      score(CRANE, TRACE) -> "YGG-G"
      score(TRACE, TRACE) -> "GGGGG"
    """
    if not isinstance(guess, Word) or not isinstance(solution, Word):
        raise ValueError("score() requires two Word instances")
    if len(guess) != WORD_LENGTH or len(solution) != WORD_LENGTH:
        raise ValueError(f"score() requires {WORD_LENGTH}-letter words")

    present = set(str(solution))
    letters = []
    for g, s in zip(guess, solution):
        if g.value == s.value:
            level = CorrectnessLevel.IN_WORD_CORRECT_POSITION
        elif g.value in present:
            level = CorrectnessLevel.IN_WORD_DIFFERENT_POSITION
        else:
            level = CorrectnessLevel.NOT_IN_WORD
        letters.append(g.scored(level))

    return Word(tuple(letters))
