# apps/cli/run.py
"""
CLI entry point for solver runs.

This script:
  1) Validates the word lists (prints counts + SHA, checks solutions ⊆ complete).
  2) Loads the library and instantiates the requested solver.
  3) Plays either --iterations random games or, with --all, every solution
     word as the hidden answer, opening with --start-word each time.
  4) Prints one line per game, the lost games in color, and the summary;
     writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word list hashes, git commit, stats
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Dict, List, Optional

from tqdm import tqdm

from wordle_puzzler.datasets import WordleDictionary, WordsLibrary, pretty_summary, validate_wordlists
from wordle_puzzler.datasets.library import DEFAULT_COMPLETE, DEFAULT_SOLUTIONS
from wordle_puzzler.engine import WORD_LIMIT, validate_guess
from wordle_puzzler.harness import DEFAULT_START_WORD, GamePlayResults, run_case
from wordle_puzzler.harness.display import format_summary, format_word
from wordle_puzzler.harness.io import write_run
from wordle_puzzler.solvers import create_solver, get_solver_ids


def build_parser() -> argparse.ArgumentParser:
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-puzzler — run the solver over many games")
    ap.add_argument("--solver", default="filter_chain",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--iterations", type=int, default=10,
                    help="number of random games to play (ignored with --all)")
    ap.add_argument("--start-word", default=DEFAULT_START_WORD,
                    help="word to open every game with")
    ap.add_argument("--dictionary", choices=[d.value for d in WordleDictionary],
                    default=WordleDictionary.COMPLETE.value,
                    help="dictionary the solver draws candidates and statistics from")
    ap.add_argument("--all", action="store_true",
                    help="play every solution word as the hidden answer")
    ap.add_argument("--sample", type=int,
                    help="with --all, play only the first K solution words")
    ap.add_argument("--complete", default=str(DEFAULT_COMPLETE),
                    help="path to the complete (accepted guesses) list")
    ap.add_argument("--solutions", default=str(DEFAULT_SOLUTIONS),
                    help="path to the solutions list (should be a subset of complete)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    return ap


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate datasets, run the games with progress, and write outputs.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-liner summary (counts, SHAs, subset check)
    rep = validate_wordlists(args.solutions, args.complete)
    print(pretty_summary(rep))

    # 2) Load the library; the same seed drives solution draws and fallbacks
    library = WordsLibrary.load(args.complete, args.solutions, seed=args.seed)
    dictionary = WordleDictionary.parse(args.dictionary)

    start_word = args.start_word.strip().upper()
    if not validate_guess(start_word, library):
        print(f"Start word not recognized; using {DEFAULT_START_WORD}")
        start_word = DEFAULT_START_WORD

    # 3) Instantiate solver by id
    solver = create_solver(args.solver)
    solver.reset(library, source=dictionary)

    if args.all:
        cases: List[Optional[str]] = [str(w) for w in library.solutions]
        if args.sample is not None:
            cases = cases[: args.sample]
    else:
        cases = [None] * args.iterations
    total = len(cases)

    mode = _progress_mode(args.progress)
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game", file=sys.stderr) \
        if mode == "bar" else cases

    results: List[Dict] = []
    stats = GamePlayResults()
    start = time.time()
    last_print = 0.0

    # 4) Run games with live progress
    for idx, ans in enumerate(iterator, 1):
        r = run_case(solver, library, answer=ans, start_word=start_word,
                     seed=args.seed + idx)
        results.append(r)
        stats.add_game(r["game"])

        if args.all:
            print(f"{r['answer']}\t{r['success']} ({r['guesses']})")
        else:
            print(f"Success? {'Yes' if r['success'] else 'No'} "
                  f"({r['guesses'] if r['success'] else WORD_LIMIT})")

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Report
    print()
    if args.all:
        for guesses, count in stats.solved_histogram().items():
            print(f"Solved in {guesses}: {count}")
        print(f"Not solved: {stats.not_solved}")
    else:
        for lost in stats.lost_games:
            for word in lost:
                print(format_word(word))
            print("===============")
            print(format_word(lost.solution))
            print()
        print(format_summary(stats, dictionary.value))

    # 6) Write outputs (CSV + manifest)
    csv_path, manifest_path = write_run(args.outdir, results, stats, solver_id=solver.id,
                                        config=vars(args), wordlists=rep)
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
