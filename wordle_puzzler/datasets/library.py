"""
The word library: both dictionaries, their occurrence tables and the RNG.

What this module provides:
- WordleDictionary: which list a caller means (Complete = every accepted
  guess, Solutions = the answer pool).
- OccurrenceTable: per-letter-per-position counts over one dictionary, a
  26 x 5 numpy array, read-only once built.
- WordsLibrary: the context object handed to Game and solvers. It owns the
  two word tuples, one OccurrenceTable per dictionary and the random.Random
  used for solution draws and solver fallbacks. Nothing is global: build one
  per process (or per test) and pass it around.

Typical use:
    from wordle_puzzler.datasets import WordsLibrary, WordleDictionary
    lib = WordsLibrary.load(seed=123)
    lib.occurrences(WordleDictionary.COMPLETE).total("E")

Data contract:
    Solutions is expected to be a subset of Complete. It is checked at
    construction; a violation is logged, or raised with strict=True.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from wordle_puzzler.engine.letter import ALPHABET
from wordle_puzzler.engine.word import WORD_LENGTH, Word
from .io import read_words

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_COMPLETE = DATA_DIR / "complete.txt"
DEFAULT_SOLUTIONS = DATA_DIR / "solutions.txt"


class WordleDictionary(Enum):
    COMPLETE = "complete"
    SOLUTIONS = "solutions"

    @classmethod
    def parse(cls, text: str) -> "WordleDictionary":
        """Case-insensitive lookup by name, e.g. 'Solutions' -> SOLUTIONS."""
        try:
            return cls(text.strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Unknown dictionary: {text}. Available: {[d.value for d in cls]}") from e


class OccurrenceTable:
    """
    Letter counts over a list of words.

    counts[row, col] = number of words with letter ALPHABET[row] at
    position col + 1. Row sums give the count ignoring position.
    """

    def __init__(self, counts: np.ndarray):
        counts = np.array(counts, dtype=np.int64)
        if counts.shape != (len(ALPHABET), WORD_LENGTH):
            raise ValueError(f"occurrence table must be {len(ALPHABET)}x{WORD_LENGTH}")
        counts.flags.writeable = False
        self.counts = counts
        self._totals = counts.sum(axis=1)
        self._totals.flags.writeable = False

    @classmethod
    def build(cls, words: Iterable[Word]) -> "OccurrenceTable":
        counts = np.zeros((len(ALPHABET), WORD_LENGTH), dtype=np.int64)
        for w in words:
            for l in w:
                row = ALPHABET.find(l.value)
                if row != -1:
                    counts[row, l.position - 1] += 1
        return cls(counts)

    def at(self, letter: str, position: int) -> int:
        """Words with `letter` at 1-based `position`."""
        row = ALPHABET.find(letter.upper())
        if row == -1:
            return 0
        return int(self.counts[row, position - 1])

    def total(self, letter: str) -> int:
        """Occurrences of `letter` across all positions."""
        row = ALPHABET.find(letter.upper())
        if row == -1:
            return 0
        return int(self._totals[row])

    def to_csv(self) -> str:
        """
        Report layout: one row per letter, then one column per position and a
        total, e.g. "E,303,242,177,318,424,1464".
        """
        header = ",".join(["Letter"] + [str(i) for i in range(1, WORD_LENGTH + 1)] + ["Total"])
        rows = [header]
        for row, letter in enumerate(ALPHABET):
            cells = [str(int(c)) for c in self.counts[row]]
            rows.append(",".join([letter] + cells + [str(int(self._totals[row]))]))
        return "\n".join(rows)


def _parse_words(lines: Iterable[str], label: str) -> Tuple[Word, ...]:
    words: List[Word] = []
    skipped = 0
    for line in lines:
        if not line or not line.strip():
            continue
        w = Word.create(line, validate=False)
        if w is None or not w.is_valid():
            skipped += 1
            continue
        words.append(w)
    if skipped:
        log.warning("%s: skipped %d malformed line(s)", label, skipped)
    return tuple(words)


class WordsLibrary:
    def __init__(
            self,
            complete: Iterable[Word],
            solutions: Iterable[Word],
            *,
            seed: Optional[int] = None,
            strict: bool = False,
    ):
        self.complete: Tuple[Word, ...] = tuple(complete)
        self.solutions: Tuple[Word, ...] = tuple(solutions)
        self._recognized = frozenset(str(w) for w in self.complete)
        self._tables: Dict[WordleDictionary, OccurrenceTable] = {
            WordleDictionary.COMPLETE: OccurrenceTable.build(self.complete),
            WordleDictionary.SOLUTIONS: OccurrenceTable.build(self.solutions),
        }
        self.rng = random.Random(seed)

        missing = [str(w) for w in self.solutions if str(w) not in self._recognized]
        if missing:
            msg = (f"{len(missing)} solution word(s) missing from the complete "
                   f"dictionary (e.g., {missing[:5]})")
            if strict:
                raise ValueError(msg)
            log.warning(msg)

    # ---- constructors ----

    @classmethod
    def from_words(
            cls,
            complete: Iterable[str],
            solutions: Iterable[str],
            *,
            seed: Optional[int] = None,
            strict: bool = False,
    ) -> "WordsLibrary":
        return cls(
            _parse_words(complete, "complete"),
            _parse_words(solutions, "solutions"),
            seed=seed,
            strict=strict,
        )

    @classmethod
    def load(
            cls,
            complete_path: Path | str | None = None,
            solutions_path: Path | str | None = None,
            *,
            seed: Optional[int] = None,
            strict: bool = False,
    ) -> "WordsLibrary":
        """Load both dictionaries from disk (defaults to the packaged lists)."""
        complete_path = Path(complete_path or DEFAULT_COMPLETE)
        solutions_path = Path(solutions_path or DEFAULT_SOLUTIONS)
        lib = cls.from_words(
            read_words(complete_path),
            read_words(solutions_path),
            seed=seed,
            strict=strict,
        )
        log.info("loaded %d complete / %d solution words", len(lib.complete), len(lib.solutions))
        return lib

    # ---- lookups ----

    def words(self, source: WordleDictionary) -> Tuple[Word, ...]:
        return self.solutions if source is WordleDictionary.SOLUTIONS else self.complete

    def occurrences(self, source: WordleDictionary) -> OccurrenceTable:
        return self._tables[source]

    def exists(self, word: Word | str) -> bool:
        return word is not None and str(word).strip().upper() in self._recognized

    def __contains__(self, word: object) -> bool:
        return isinstance(word, (str, Word)) and self.exists(word)

    # ---- randomness ----

    def seed(self, value: Optional[int]) -> None:
        self.rng.seed(value)

    def random_word(self, source: WordleDictionary) -> Word:
        """Uniform draw over the whole dictionary `source`."""
        words = self.words(source)
        if not words:
            raise ValueError(f"{source.value} dictionary is empty")
        return self.rng.choice(words)

    def random_solution(self) -> Word:
        return self.random_word(WordleDictionary.SOLUTIONS)
