"""
Normalize and de-duplicate a word list.

Features:
- Preserves original order by default (stable dedupe).
- Optional case-insensitive mode (treat 'TEARS' == 'tears').
- Optional uppercasing, the form the dictionary loader expects.
- Optional stripping of blank/whitespace-only lines.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in wordle_puzzler/datasets/data/complete.txt \
        --case-insensitive --upper --strip-blanks
"""

import argparse
from pathlib import Path

from wordle_puzzler.datasets.io import read_lines, write_lines


def unique_preserve_order(lines: list[str], key=None) -> list[str]:
    seen, out = set(), []
    for s in lines:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def clean(lines: list[str], *, case_insensitive=False, upper=False, strip_blanks=False,
          sort=False) -> list[str]:
    if strip_blanks:
        lines = [s.strip() for s in lines if s.strip()]
    if upper:
        lines = [s.upper() for s in lines]

    key = (lambda s: s.lower()) if case_insensitive else None
    out = unique_preserve_order(lines, key=key)
    if sort:
        out = sorted(out, key=(str.lower if case_insensitive else None))
    return out


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate lines from a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--case-insensitive", action="store_true", help="treat 'TEARS' and 'tears' as the same")
    ap.add_argument("--upper", action="store_true", help="uppercase every line")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean(lines, case_insensitive=args.case_insensitive, upper=args.upper,
                strip_blanks=args.strip_blanks, sort=args.sort)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
