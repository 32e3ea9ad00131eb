"""
Experiment harness core primitives.

- play_game: autoplay one Game with a solver (start word, then solver picks).
- run_case:  play one game and flatten it into a result dict for reports.
- run_batch: run many cases, either over a list of hidden answers or a
             number of randomly drawn games.
- The 6-turn limit is enforced by Game itself.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

from wordle_puzzler.datasets.library import WordsLibrary
from wordle_puzzler.engine.game import Game

log = logging.getLogger(__name__)

DEFAULT_START_WORD = "CRANE"


def play_game(
        solver,
        library: WordsLibrary,
        *,
        start_word: str = DEFAULT_START_WORD,
        solution: Optional[str] = None,
) -> Game:
    """
    Play until the game is solved or out of turns.

    Args:
        solver:     a BaseSolver already reset() against `library`
        library:    word library (dictionaries + RNG)
        start_word: opening guess; must be in the Complete dictionary
        solution:   hidden word; drawn from Solutions when None

    Raises:
        ValueError if any guess (start word or solver pick) is rejected.
    """
    game = Game.create(library, solution)
    while not game.is_complete():
        if len(game) == 0:
            guess = start_word
        else:
            word = solver.solve_one(game)
            guess = None if word is None else str(word)

        if game.guess(guess) is None:
            raise ValueError(f"guess not recognized: {guess!r}")

    log.debug("%s: %s in %d", game.solution,
              "solved" if game.is_solved() else "lost", len(game))
    return game


def game_record(game: Game, *, solver_id: str = "?", time_ms: float = 0.0) -> Dict:
    """Flatten a finished game into the harness result schema."""
    return {
        "solver_id": solver_id,
        "answer": str(game.solution),
        "success": game.is_solved(),
        "guesses": len(game),
        "time_ms": time_ms,
        "history": [(str(w), w.pattern) for w in game.words],
        "game": game,
    }


def run_case(
        solver,
        library: WordsLibrary,
        *,
        answer: Optional[str] = None,
        start_word: str = DEFAULT_START_WORD,
        seed: Optional[int] = None,
) -> Dict:
    """
    Execute one game and return its result dict.

    Returns:
        dict with keys:
            solver_id, answer, success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), game (the Game itself)
    """
    if seed is not None:
        library.seed(seed)

    t0 = time.perf_counter_ns()
    game = play_game(solver, library, start_word=start_word, solution=answer)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return game_record(game, solver_id=getattr(solver, "id", "?"), time_ms=dt)


def run_batch(
        solver,
        library: WordsLibrary,
        *,
        answers: Optional[Iterable[str]] = None,
        iterations: int = 10,
        start_word: str = DEFAULT_START_WORD,
        seed: Optional[int] = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back.

    With `answers`, each one is played as the hidden word (the first
    `sample` only, if given). Without, `iterations` games are played with
    solutions drawn from the library.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    if answers is not None:
        cases: List[Optional[str]] = [str(a) for a in answers]
        if sample is not None:
            cases = cases[:sample]
    else:
        cases = [None] * iterations

    out: List[Dict] = []
    for idx, ans in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, library, answer=ans, start_word=start_word, seed=case_seed))
    return out
