"""
Scrape past Wordle answers from wordlehints.co.uk and write a Solutions list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- De-duplicates while preserving calendar order and writes one uppercase
  word per line (the format WordsLibrary.load reads).

Usage:
    python -m script.extract_wordle_answers --out wordle_puzzler/datasets/data/solutions.txt
    # or alphabetically sorted:
    python -m script.extract_wordle_answers --sort --out wordle_puzzler/datasets/data/solutions.txt

Remember to keep complete.txt a superset of the new list
(see wordle_puzzler.datasets.validate_wordlists).
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from wordle_puzzler.datasets.io import write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> list[str]:
    """Answers found in the page text, uppercase, first occurrence kept."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).upper() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Extract unique Wordle answers")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="wordle_puzzler/datasets/data/solutions.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
