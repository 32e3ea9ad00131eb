import pytest
from wordle_puzzler.engine import (
    CorrectnessLevel, Constraints, Letter, Word, score, validate_guess,
)


def W(text):
    return Word.create(text, validate=False)


# --- golden tests (membership scoring, not the duplicate-aware rule) ---
@pytest.mark.parametrize("guess,solution,expected", [
    ("CRANE", "TRACE", "YGG-G"),
    ("TRACE", "TRACE", "GGGGG"),
    ("BELLE", "LEVEL", "-GYYY"),
    ("LEMON", "LEVEL", "GG---"),
    ("COOLS", "SCOOP", "YYG-Y"),
    ("RAISE", "CRANE", "YY--G"),
    ("STARE", "CRANE", "--GYG"),
    # letter once in the solution, twice in the guess: both marked
    ("SPEED", "ABIDE", "--YYY"),
    ("GEESE", "THESE", "-YGGG"),
])
def test_score_golden(guess, solution, expected):
    assert score(W(guess), W(solution)).pattern == expected


def test_score_crane_trace_tags():
    scored = score(W("CRANE"), W("TRACE"))
    assert [l.correctness for l in scored] == [
        CorrectnessLevel.IN_WORD_DIFFERENT_POSITION,
        CorrectnessLevel.IN_WORD_CORRECT_POSITION,
        CorrectnessLevel.IN_WORD_CORRECT_POSITION,
        CorrectnessLevel.NOT_IN_WORD,
        CorrectnessLevel.IN_WORD_CORRECT_POSITION,
    ]


@pytest.mark.parametrize("guess,solution", [
    ("CRANE", "TRACE"), ("SPEED", "ABIDE"), ("ALLOY", "LOYAL"), ("QUIZZ", "FUZZY"),
])
def test_score_properties(guess, solution):
    scored = score(W(guess), W(solution))
    for i, l in enumerate(scored):
        green = l.correctness is CorrectnessLevel.IN_WORD_CORRECT_POSITION
        assert green == (guess[i] == solution[i])
        if l.value in solution:
            assert l.correctness is not CorrectnessLevel.NOT_IN_WORD


def test_score_returns_new_word():
    guess = W("CRANE")
    scored = score(guess, W("TRACE"))
    assert not guess.is_scored and guess.pattern == "....."
    assert scored.is_scored and str(scored) == "CRANE"
    assert score(W("TRACE"), W("TRACE")).is_solved()


def test_score_rejects_malformed():
    with pytest.raises(ValueError):
        score("CRANE", W("TRACE"))
    with pytest.raises(ValueError):
        score(W("CRANE"), Word((Letter("A", 1),)))


def test_letter_is_scored_once():
    l = Letter("A", 1).scored(CorrectnessLevel.NOT_IN_WORD)
    with pytest.raises(ValueError):
        l.scored(CorrectnessLevel.IN_WORD_CORRECT_POSITION)


# --- Word ---

def test_word_create_normalizes_and_validates():
    assert str(Word.create("crane")) == "CRANE"
    assert Word.create("AB") is None
    assert Word.create(None) is None
    assert Word.create("12345") is None
    assert Word.create("cranes") is None
    assert Word.create("crane", allowed={"CRANE"}) is not None
    assert Word.create("crane", allowed={"TRACE"}) is None
    # bulk loading skips the alphabet and dictionary checks, not the length
    assert Word.create("12345", validate=False) is not None
    assert Word.create("1234", validate=False) is None


def test_word_lookups():
    w = W("CRANE")
    assert len(w) == 5 and w[0].value == "C" and w[0].position == 1
    assert w.letter_position("A") == 3
    assert w.letter_position("Z") is None
    assert w.matches_on("N", 4) and not w.matches_on("N", 3)
    assert w.has_all_letters({"C", "E"})
    assert not w.has_all_letters({"C", "Z"})
    assert w.has_any_letter("ZR")
    assert not w.has_any_letter("XYZ")
    assert w.has_at_least_one_letter_in_same_position([Letter("A", 3)])
    assert not w.has_at_least_one_letter_in_same_position([Letter("A", 2)])


def test_validate_guess():
    allowed = {"CRANE", "RAISE", "STARE"}
    assert validate_guess("crane", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("TRACE", allowed) is False
    assert validate_guess(None, allowed) is False


def test_constraints_from_history():
    history = [score(W("CRANE"), W("TRACE")), score(W("SLOTH"), W("TRACE"))]
    c = Constraints.from_history(history)
    assert {(l.value, l.position) for l in c.correct} == {("R", 2), ("A", 3), ("E", 5)}
    assert {(l.value, l.position) for l in c.misplaced} == {("C", 1), ("T", 4)}
    assert c.required == {"C", "R", "A", "E", "T"}
    assert c.excluded == {"N", "S", "L", "O", "H"}
    assert c.played == {"CRANE", "SLOTH"}
    assert str(c.last) == "SLOTH"
