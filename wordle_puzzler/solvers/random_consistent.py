"""
Random Consistent solver.

Strategy:
  - Narrow the dictionary with the same constraint filters as the
    filter-chain solver (stages 1-6, no last-letter ranking).
  - Choose uniformly at random among the survivors.
  - If the candidate set is empty, fall back to a random dictionary word.

Notes:
  - Deterministic across runs with the same library seed (it draws from
    WordsLibrary.rng).
  - This is a baseline to compare the ranking heuristic against.
"""

from __future__ import annotations

from typing import List, Optional

from wordle_puzzler.datasets.library import WordleDictionary, WordsLibrary
from wordle_puzzler.engine.game import Game
from wordle_puzzler.engine.word import Word
from . import filters as F
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.filters: List[F.Filter] = []

    def reset(self, library: WordsLibrary, *,
              source: WordleDictionary = WordleDictionary.COMPLETE) -> None:
        super().reset(library, source=source)
        self.filters = [
            F.make_reset(library.words(source)),
            F.correct_position,
            F.misplaced_position,
            F.required_letters,
            F.excluded_letters,
            F.no_repeat,
        ]

    def solve_one(self, game: Game) -> Optional[Word]:
        """
        Pick any consistent candidate uniformly at random (library RNG).
        """
        if self.library is None:
            raise RuntimeError(f"{self.id}: call reset() before solve_one()")
        history = game.words
        if not history:
            return None
        if game.is_solved():
            return history[-1]

        # Primary pool = candidates; fallback to the whole dictionary if empty.
        pool = F.run_pipeline(self.filters, history, [])
        if not pool:
            return self.library.random_word(self.source)
        return self.library.rng.choice(pool)
