from __future__ import annotations

from typing import Dict, Optional, Type

from wordle_puzzler.datasets.library import WordleDictionary, WordsLibrary
from wordle_puzzler.engine.game import Game
from wordle_puzzler.engine.word import Word

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.library: Optional[WordsLibrary] = None
        self.source = WordleDictionary.COMPLETE

    def reset(self, library: WordsLibrary, *,
              source: WordleDictionary = WordleDictionary.COMPLETE) -> None:
        """Bind the word library and the dictionary used for candidates."""
        self.library = library
        self.source = source

    def solve_one(self, game: Game) -> Optional[Word]:
        raise NotImplementedError("Override in subclass")
