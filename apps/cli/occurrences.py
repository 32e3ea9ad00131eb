# apps/cli/occurrences.py
"""
Print how often each letter occurs at each position in a dictionary.

Output is CSV (Letter,1,2,3,4,5,Total) so it can be piped into a
spreadsheet.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from wordle_puzzler.datasets import WordleDictionary, WordsLibrary
from wordle_puzzler.datasets.library import DEFAULT_COMPLETE, DEFAULT_SOLUTIONS


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-puzzler — letter occurrence table")
    ap.add_argument("--dictionary", choices=[d.value for d in WordleDictionary],
                    default=WordleDictionary.COMPLETE.value)
    ap.add_argument("--complete", default=str(DEFAULT_COMPLETE))
    ap.add_argument("--solutions", default=str(DEFAULT_SOLUTIONS))
    args = ap.parse_args(argv)

    library = WordsLibrary.load(args.complete, args.solutions)
    source = WordleDictionary.parse(args.dictionary)

    print(f"The occurrences of each letter in the {source.value} dictionary")
    print(library.occurrences(source).to_csv())
    return 0


if __name__ == "__main__":
    sys.exit(main())
