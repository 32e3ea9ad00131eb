"""
Filter-chain solver (ranked dictionary + ordered constraint filters).

Idea:
  - Rank the chosen dictionary once: a word scores the sum, over its
    DISTINCT letters, of how often that letter occurs anywhere in the
    dictionary. Sort descending, ties in dictionary order.
  - Each turn, run the ordered filter chain (see filters.py) from the full
    ranked list and play the first survivor.
  - If nothing survives, guess blind: a uniform draw from the dictionary.

Notes:
  - The opening word is the caller's choice; solve_one() returns None for a
    game with no guesses.
  - A solved game returns its last (winning) word again.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from wordle_puzzler.datasets.library import OccurrenceTable, WordleDictionary, WordsLibrary
from wordle_puzzler.engine.game import Game
from wordle_puzzler.engine.word import Word
from . import filters as F
from .base import BaseSolver, register

log = logging.getLogger(__name__)


def rank_word(word: Word, table: OccurrenceTable) -> int:
    """Sum of the total occurrence counts of the word's distinct letters."""
    return sum(table.total(ch) for ch in set(str(word)))


def rank_dictionary(words, table: OccurrenceTable) -> List[Word]:
    return sorted(words, key=lambda w: rank_word(w, table), reverse=True)


@register
class FilterChainSolver(BaseSolver):
    id = "filter_chain"
    name = "Ranked Filter Chain"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.ranked: List[Word] = []
        self.filters: List[F.Filter] = []

    def reset(self, library: WordsLibrary, *,
              source: WordleDictionary = WordleDictionary.COMPLETE) -> None:
        super().reset(library, source=source)
        table = library.occurrences(source)
        self.ranked = rank_dictionary(library.words(source), table)
        self.filters = self.build_filters(table)

    def build_filters(self, table: OccurrenceTable) -> List[F.Filter]:
        # Order is load-bearing: later stages assume the earlier ones ran.
        return [
            F.make_reset(self.ranked),
            F.correct_position,
            F.misplaced_position,
            F.required_letters,
            F.excluded_letters,
            F.no_repeat,
            F.make_last_letter(table),
        ]

    def solve_one(self, game: Game) -> Optional[Word]:
        if self.library is None:
            raise RuntimeError(f"{self.id}: call reset() before solve_one()")
        history = game.words
        if not history:
            return None
        if game.is_solved():
            return history[-1]

        matches = F.run_pipeline(self.filters, history, [])
        if not matches:
            fallback = self.library.random_word(self.source)
            log.debug("no candidates left; guessing %s at random", fallback)
            return fallback
        return matches[0]
