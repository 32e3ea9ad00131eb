"""
Lightweight guess validation.

This module answers the question: "Is this text acceptable as a guess?"
A guess is valid iff:
  - it is a string
  - it is alphabetic A-Z only (either case)
  - it has exactly WORD_LENGTH letters
  - it exists in the provided `allowed` collection (the Complete dictionary)

Game.guess() relies on the same rules through Word.create(); this helper is
for callers that only have text, e.g. the CLI checking a start word.
"""

from typing import Container

from .letter import ALPHABET
from .word import WORD_LENGTH


def validate_guess(word: str, allowed: Container[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : uppercase recognized words; pass a set (or a WordsLibrary)
                for O(1) membership checks
    """
    if not isinstance(word, str):
        return False

    w = word.strip().upper()

    # Shape/characters check
    if len(w) != WORD_LENGTH or any(ch not in ALPHABET for ch in w):
        return False

    return w in allowed
