"""
Dataset validator for the word lists.

What this module does:
- Validate a pair of word lists: solutions.txt (answer pool) and complete.txt
  (every accepted guess).
- Enforce formatting rules (A-Z only in either case, exactly five letters,
  one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that solutions ⊆ complete.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordle_puzzler.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordle_puzzler/datasets/data/solutions.txt",
                             "wordle_puzzler/datasets/data/complete.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple

from wordle_puzzler.engine.letter import ALPHABET
from wordle_puzzler.engine.word import WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (solutions, complete) pair."""
    solutions: FileReport
    complete: FileReport
    solutions_subset_complete: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - letters A-Z only (case is normalized to upper)
      - exactly WORD_LENGTH letters
      - blank lines are skipped, as the library loader does

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().upper()
            if not w:
                continue
            if len(w) == WORD_LENGTH and all(ch in ALPHABET for ch in w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(solutions_path: str, complete_path: str) -> Dict:
    """
    Validate the solutions/complete word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - solutions ⊆ complete check
          - `passed` boolean (strict: requires non-empty, no invalids, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    sol_p = Path(solutions_path)
    com_p = Path(complete_path)

    # Early return if either file is missing
    if not sol_p.exists() or not com_p.exists():
        if not sol_p.exists():
            issues.append(f"solutions file not found: {solutions_path}")
        if not com_p.exists():
            issues.append(f"complete file not found: {complete_path}")
        rep = ValidationReport(
            solutions=FileReport(str(solutions_path), sol_p.exists(), 0, "", 0, 0),
            complete=FileReport(str(complete_path), com_p.exists(), 0, "", 0, 0),
            solutions_subset_complete=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    solutions, sol_invalid = _load_and_check(sol_p)
    complete, com_invalid = _load_and_check(com_p)

    sol_report = _file_report(sol_p, solutions, sol_invalid)
    com_report = _file_report(com_p, complete, com_invalid)

    missing = sorted(set(solutions) - set(complete))
    subset_ok = not missing
    if not subset_ok:
        # Surface a few examples to debug quickly
        issues.append(f"solutions not subset of complete (e.g., {missing[:5]})")

    if sol_report.count == 0:
        issues.append("solutions file contains 0 valid words")
    if com_report.count == 0:
        issues.append("complete file contains 0 valid words")

    if sol_invalid:
        issues.append(f"solutions has {sol_invalid} invalid line(s)")
    if com_invalid:
        issues.append(f"complete has {com_invalid} invalid line(s)")

    # Duplicates are reported but do not fail validation
    if sol_report.count != sol_report.unique_count:
        issues.append("solutions contains duplicate lines")
    if com_report.count != com_report.unique_count:
        issues.append("complete contains duplicate lines")

    passed = (
            subset_ok
            and sol_invalid == 0
            and com_invalid == 0
            and sol_report.count > 0
            and com_report.count > 0
    )

    rep = ValidationReport(
        solutions=sol_report,
        complete=com_report,
        solutions_subset_complete=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        solutions=2315 (uniq=2315, sha=abc123...) | complete=12972 (uniq=12972, sha=def456...) | solutions⊆complete=True | OK
    """
    a = report["solutions"]
    b = report["complete"]
    subset = report["solutions_subset_complete"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"solutions={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| complete={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| solutions⊆complete={subset} | {status}"
    )
