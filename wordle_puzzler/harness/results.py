"""
Aggregate statistics over a batch of finished games.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Optional

from wordle_puzzler.engine.game import WORD_LIMIT, Game


class GamePlayResults:
    def __init__(self, games: Optional[Iterable[Game]] = None):
        self._games: List[Game] = []
        for g in games or ():
            self.add_game(g)

    @property
    def games(self) -> List[Game]:
        return list(self._games)

    def add_game(self, game: Optional[Game]) -> None:
        if game is not None:
            self._games.append(game)

    def __len__(self) -> int:
        return len(self._games)

    @property
    def solved(self) -> List[Game]:
        return [g for g in self._games if g.is_solved()]

    @property
    def lost_games(self) -> List[Game]:
        return [g for g in self._games if not g.is_solved()]

    @property
    def not_solved(self) -> int:
        return len(self.lost_games)

    @property
    def win_loss(self) -> float:
        """Percentage of games solved (0.0 for an empty batch)."""
        if not self._games:
            return 0.0
        return len(self.solved) / len(self._games) * 100.0

    @property
    def words_per_solved_game_average(self) -> float:
        """Mean guess count over solved games; the turn limit if none solved."""
        solved = self.solved
        if not solved:
            return float(WORD_LIMIT)
        return sum(len(g) for g in solved) / len(solved)

    def solved_histogram(self) -> Dict[int, int]:
        """
        Guess count -> number of solved games, ascending.
        One-guess wins are left out, as in the console report.
        """
        counts = Counter(len(g) for g in self.solved)
        return {k: counts[k] for k in sorted(counts) if k > 1}
