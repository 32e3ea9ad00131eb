from .core import DEFAULT_START_WORD, game_record, play_game, run_case, run_batch
from .results import GamePlayResults
from .io import build_manifest, run_stats, write_csv, write_manifest, write_run

__all__ = [
    "DEFAULT_START_WORD", "game_record", "play_game", "run_case", "run_batch",
    "GamePlayResults", "build_manifest", "run_stats", "write_csv", "write_manifest",
    "write_run",
]
