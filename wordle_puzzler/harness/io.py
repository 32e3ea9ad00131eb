"""
Report files for a solver run.

A run writes two files into the output directory:

  run_<id>.csv            one row per finished game, a guess/pattern column
                          pair per turn
  run_<id>_manifest.json  config, word list report, git commit and the
                          GamePlayResults statistics

Rows are built from the Game kept in each harness record, so guesses and
patterns come straight from the recorded Words. Patterns carry a leading
apostrophe so spreadsheet apps keep "-GYY-" as text.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from wordle_puzzler.engine.game import WORD_LIMIT, Game
from .results import GamePlayResults

BASE_FIELDS = ["solver", "answer", "success", "guesses", "time_ms"]


def csv_fields(max_turns: int = WORD_LIMIT) -> List[str]:
    fields = list(BASE_FIELDS)
    for turn in range(1, max_turns + 1):
        fields += [f"guess_{turn}", f"patt_{turn}"]
    return fields


def game_row(record: Dict, max_turns: int = WORD_LIMIT) -> Dict[str, object]:
    """
    One CSV row for a harness record (see harness.core.game_record).

    Turns past the game's length are left blank; words beyond `max_turns`
    are not written.
    """
    game: Game = record["game"]
    row: Dict[str, object] = {
        "solver": record.get("solver_id", "?"),
        "answer": str(game.solution),
        "success": game.is_solved(),
        "guesses": len(game),
        "time_ms": round(float(record.get("time_ms", 0.0)), 3),
    }
    words = game.words
    for turn in range(1, max_turns + 1):
        if turn <= len(words):
            word = words[turn - 1]
            row[f"guess_{turn}"] = str(word)
            row[f"patt_{turn}"] = "'" + word.pattern
        else:
            row[f"guess_{turn}"] = ""
            row[f"patt_{turn}"] = ""
    return row


def write_csv(records: Iterable[Dict], path, max_turns: int = WORD_LIMIT) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=csv_fields(max_turns))
        writer.writeheader()
        writer.writerows(game_row(r, max_turns) for r in records)
    return p


def run_stats(results: GamePlayResults) -> Dict[str, object]:
    """The console summary figures, in a JSON-friendly shape."""
    return {
        "games": len(results),
        "win_loss": round(results.win_loss, 2),
        "words_per_solved_game_average": round(results.words_per_solved_game_average, 3),
        "not_solved": results.not_solved,
        # JSON object keys must be strings
        "solved_histogram": {str(k): v for k, v in results.solved_histogram().items()},
    }


def build_manifest(
        run_id: str,
        results: GamePlayResults,
        *,
        solver_id: str,
        config: Dict,
        wordlists: Dict,
) -> Dict:
    return {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "solver_id": solver_id,
        "config": config,
        "wordlists": wordlists,
        "num_cases": len(results),
        "stats": run_stats(results),
    }


def write_manifest(manifest: Dict, path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return p


def write_run(
        outdir,
        records: List[Dict],
        results: GamePlayResults,
        *,
        solver_id: str,
        config: Dict,
        wordlists: Dict,
        run_id: Optional[str] = None,
) -> Tuple[Path, Path]:
    """Write the CSV and the manifest for one run; returns both paths."""
    run_id = run_id or timestamp_id()
    out = Path(outdir)
    csv_path = write_csv(records, out / f"run_{run_id}.csv")
    manifest = build_manifest(run_id, results, solver_id=solver_id,
                              config=config, wordlists=wordlists)
    manifest_path = write_manifest(manifest, out / f"run_{run_id}_manifest.json")
    return csv_path, manifest_path


def timestamp_id() -> str:
    """Compact UTC timestamp for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"
