# apps/cli/play.py
"""
Interactive Wordle in the terminal.

Type five-letter guesses; each accepted guess is echoed in color. Rejected
text prints "Not recognized" and does not use up a turn. With --hint the
filter-chain solver suggests a next word after every guess.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from wordle_puzzler.datasets import WordsLibrary
from wordle_puzzler.datasets.library import DEFAULT_COMPLETE, DEFAULT_SOLUTIONS
from wordle_puzzler.engine import Game
from wordle_puzzler.harness.display import format_word
from wordle_puzzler.solvers import create_solver

YES = {"y", "yes"}


def play_one(
        game: Game,
        *,
        read: Callable[[], str],
        write: Callable[[str], None],
        solver=None,
) -> bool:
    """
    Run the guess loop for one game. Returns True if it was solved.
    Stops early (returning False) when input runs out.
    """
    while not game.is_complete():
        try:
            text = read()
        except EOFError:
            return False

        result = game.guess(text)
        if result is None or result.word is None:
            write("Not recognized")
            continue

        write(format_word(result.word))
        if game.is_solved():
            write("Solved!")
            break
        if game.is_complete():
            write(f"You lose; the answer was {result.solution}")
            break

        if solver is not None:
            write(f"Suggested: {solver.solve_one(game)}")

    return game.is_solved()


def session(
        library: WordsLibrary,
        *,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
        hint: bool = False,
) -> int:
    """Play games until the player declines another. Returns games solved."""
    solver = None
    if hint:
        solver = create_solver("filter_chain")
        solver.reset(library)

    solved = 0
    write("Enter a start word to begin a game")
    while True:
        game = Game.create(library)
        if play_one(game, read=read, write=write, solver=solver):
            solved += 1

        write("Play again? (yes | no)")
        try:
            again = read()
        except EOFError:
            break
        if again.strip().lower() not in YES:
            break
    return solved


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-puzzler — play interactively")
    ap.add_argument("--complete", default=str(DEFAULT_COMPLETE))
    ap.add_argument("--solutions", default=str(DEFAULT_SOLUTIONS))
    ap.add_argument("--seed", type=int, help="fix the hidden words (for practice runs)")
    ap.add_argument("--hint", action="store_true", help="print a solver suggestion after each guess")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    print("Simple Wordle Puzzler & Solver")
    library = WordsLibrary.load(args.complete, args.solutions, seed=args.seed)
    session(library, hint=args.hint)
    return 0


if __name__ == "__main__":
    sys.exit(main())
