"""
Candidate filters for the filter-chain solver.

Every filter has the same shape:

    filter(history, candidates) -> candidates

where `history` is the game's scored words (oldest first) and `candidates`
is an ordered list of unscored dictionary Words. Filters keep the incoming
order unless they say otherwise. Two of them need solver data and are built
by factories (`make_reset`, `make_last_letter`).

The order of the chain matters:
  1) reset               start over from the ranked dictionary
  2) correct_position    keep words with every green letter in place
  3) misplaced_position  drop words repeating a yellow letter at its slot
  4) required_letters    keep words containing every green/yellow letter
  5) excluded_letters    drop words containing any gray letter
  6) no_repeat           drop words already guessed
  7) last_letter         one slot left: rank by letter frequency at it

run_pipeline() applies them in order and stops as soon as a stage leaves a
single candidate.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from wordle_puzzler.datasets.library import OccurrenceTable
from wordle_puzzler.engine.constraints import Constraints
from wordle_puzzler.engine.letter import CorrectnessLevel
from wordle_puzzler.engine.word import Word

log = logging.getLogger(__name__)

History = Sequence[Word]
Filter = Callable[[History, List[Word]], List[Word]]


def make_reset(ranked: Sequence[Word]) -> Filter:
    """Stage 1: ignore the incoming list and return the full ranked dictionary."""
    ranked = list(ranked)

    def reset(history: History, candidates: List[Word]) -> List[Word]:
        return list(ranked)

    return reset


def correct_position(history: History, candidates: List[Word]) -> List[Word]:
    correct = Constraints.from_history(history).correct
    return [
        w for w in candidates
        if all(w.matches_on(l.value, l.position) for l in correct)
    ]


def misplaced_position(history: History, candidates: List[Word]) -> List[Word]:
    misplaced = Constraints.from_history(history).misplaced
    return [w for w in candidates if not w.has_at_least_one_letter_in_same_position(misplaced)]


def required_letters(history: History, candidates: List[Word]) -> List[Word]:
    required = Constraints.from_history(history).required
    return [w for w in candidates if w.has_all_letters(required)]


def excluded_letters(history: History, candidates: List[Word]) -> List[Word]:
    excluded = Constraints.from_history(history).excluded
    return [w for w in candidates if not w.has_any_letter(excluded)]


def no_repeat(history: History, candidates: List[Word]) -> List[Word]:
    played = Constraints.from_history(history).played
    return [w for w in candidates if str(w).upper() not in played]


def make_last_letter(table: OccurrenceTable) -> Filter:
    """
    Stage 7: when the latest guess has exactly four greens, drop
    candidates that repeat the missed letter at the open slot and order the
    rest by how often their letter appears at that slot (most common first,
    ties keep the incoming order).
    """

    def last_letter(history: History, candidates: List[Word]) -> List[Word]:
        previous = Constraints.from_history(history).last
        if previous is None:
            return candidates
        open_slots = [
            l for l in previous
            if l.correctness is not CorrectnessLevel.IN_WORD_CORRECT_POSITION
        ]
        if len(open_slots) != 1:
            return candidates

        missed = open_slots[0]
        kept = [w for w in candidates if not w.matches_on(missed.value, missed.position)]
        return sorted(
            kept,
            key=lambda w: table.at(w[missed.position - 1].value, missed.position),
            reverse=True,
        )

    return last_letter


def run_pipeline(filters: Sequence[Filter], history: History,
                 candidates: List[Word]) -> List[Word]:
    """
    Apply `filters` in order; a stage that leaves a single survivor ends the
    chain early.
    """
    for f in filters:
        candidates = f(history, candidates)
        log.debug("%s -> %d candidate(s)", getattr(f, "__name__", f), len(candidates))
        if len(candidates) == 1:
            break
    return candidates
