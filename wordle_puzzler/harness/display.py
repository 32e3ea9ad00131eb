"""
Console rendering of scored words and batch summaries.

Letters print as " X " blocks: green for correct position, yellow for
in-word-elsewhere, uncolored otherwise.
"""

from __future__ import annotations

from typing import Optional

from colors import color  # pip install ansicolors

from wordle_puzzler.engine.letter import CorrectnessLevel, Letter
from wordle_puzzler.engine.word import Word
from .results import GamePlayResults

LETTER_COLOURS = {
    CorrectnessLevel.IN_WORD_CORRECT_POSITION: "green",
    CorrectnessLevel.IN_WORD_DIFFERENT_POSITION: "yellow",
}


def format_letter(letter: Letter) -> str:
    block = f" {letter.value} "
    fg = LETTER_COLOURS.get(letter.correctness)
    return color(block, fg=fg) if fg else block


def format_word(word: Optional[Word]) -> str:
    if word is None:
        return ""
    return "".join(format_letter(l) for l in word)


def format_summary(results: GamePlayResults, dictionary: str) -> str:
    return "\n".join([
        f"Dictionary: {dictionary}",
        f"Average words per solved game: {round(results.words_per_solved_game_average, 4)}",
        f"Solved games percentile: {round(results.win_loss, 2)}%",
    ])
