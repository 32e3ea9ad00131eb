from .letter import ALPHABET, CorrectnessLevel, Letter, is_valid_letter
from .word import WORD_LENGTH, Word
from .scoring import score
from .constraints import Constraints
from .validation import validate_guess
from .game import WORD_LIMIT, Game, GuessResult

__all__ = [
    "ALPHABET", "CorrectnessLevel", "Letter", "is_valid_letter",
    "WORD_LENGTH", "Word", "score", "Constraints", "validate_guess",
    "WORD_LIMIT", "Game", "GuessResult",
]
