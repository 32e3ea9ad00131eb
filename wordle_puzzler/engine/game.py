"""
One Wordle game: a hidden solution plus the scored guesses made so far.

States:
  Created -> InProgress(n guesses, 0 <= n < WORD_LIMIT) -> Solved | Lost

Rules:
  - guess() rejects blank, wrongly shaped, non A-Z or unrecognized text by
    returning None; nothing is recorded in that case.
  - An accepted guess is scored and recorded while fewer than WORD_LIMIT
    words are recorded. At the limit, further guesses are still scored and
    returned, but never recorded.
  - The solution is revealed in the GuessResult only when the game is over
    and was not solved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .scoring import score
from .word import Word

if TYPE_CHECKING:
    from wordle_puzzler.datasets.library import WordsLibrary

log = logging.getLogger(__name__)

# Single source of truth for the Wordle turn budget.
WORD_LIMIT = 6


@dataclass(frozen=True)
class GuessResult:
    word: Optional[Word]
    solution: Optional[Word] = None


class Game:
    def __init__(self, library: "WordsLibrary", solution: Word):
        self._library = library
        self._solution = solution
        self._words: List[Word] = []

    @classmethod
    def create(cls, library: "WordsLibrary", solution: Optional[str] = None) -> "Game":
        """
        Start a game. Without `solution`, one is drawn uniformly at random
        from the library's Solutions list (using the library RNG).
        """
        if solution is None:
            word = library.random_solution()
        else:
            word = Word.create(solution, validate=False)
            if word is None or not word.is_valid():
                raise ValueError(f"invalid solution word: {solution!r}")
        return cls(library, word)

    # ---- read-only views ----

    @property
    def solution(self) -> Word:
        return self._solution

    @property
    def words(self) -> Tuple[Word, ...]:
        return tuple(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(tuple(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def is_solved(self) -> bool:
        return any(w.is_solved() for w in self._words)

    def is_complete(self) -> bool:
        return len(self._words) >= WORD_LIMIT or self.is_solved()

    # ---- transitions ----

    def guess(self, text: Optional[str]) -> Optional[GuessResult]:
        """
        Play `text` as the next guess.

        Returns None if the text is rejected (no state change), otherwise a
        GuessResult with the scored word (and the solution if the game ended
        unsolved).
        """
        if text is None or not str(text).strip():
            return None

        word = Word.create(text, allowed=self._library, validate=True)
        if word is None:
            log.debug("rejected guess %r", text)
            return None

        scored = score(word, self._solution)
        if len(self._words) < WORD_LIMIT:
            self._words.append(scored)
        else:
            log.debug("turn limit reached; %s not recorded", scored)

        reveal = self._solution if self.is_complete() and not self.is_solved() else None
        return GuessResult(scored, reveal)
