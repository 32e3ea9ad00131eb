import pytest

from wordle_puzzler.datasets import OccurrenceTable
from wordle_puzzler.engine import Word, score
from wordle_puzzler.solvers import filters as F


def W(text):
    return Word.create(text, validate=False)


def words(*texts):
    return [W(t) for t in texts]


def names(candidates):
    return [str(w) for w in candidates]


@pytest.fixture
def history():
    # CRANE vs TRACE -> YGG-G
    return [score(W("CRANE"), W("TRACE"))]


def test_reset_ignores_input():
    ranked = words("CRANE", "TRACE")
    reset = F.make_reset(ranked)
    assert names(reset([], words("SLATE"))) == ["CRANE", "TRACE"]
    # returns a fresh list each time
    out = reset([], [])
    out.clear()
    assert len(reset([], [])) == 2


def test_correct_position(history):
    out = F.correct_position(history, words("TRACE", "CRANE", "BRAVE", "GRADE", "STARE"))
    assert names(out) == ["TRACE", "CRANE", "BRAVE", "GRADE"]


def test_correct_position_accumulates_over_guesses():
    history = [score(W("SLATE"), W("TRACE")), score(W("CRONY"), W("TRACE"))]
    # SLATE gives A3, E5; CRONY gives R2
    out = F.correct_position(history, words("TRACE", "GRADE", "SLATE", "BRAVE"))
    assert names(out) == ["TRACE", "GRADE", "BRAVE"]


def test_misplaced_position(history):
    out = F.misplaced_position(history, words("TRACE", "CRANE", "BRAVE"))
    assert names(out) == ["TRACE", "BRAVE"]


def test_required_letters(history):
    out = F.required_letters(history, words("TRACE", "BRAVE", "GRADE", "ACRES"))
    assert names(out) == ["TRACE", "ACRES"]


def test_excluded_letters(history):
    out = F.excluded_letters(history, words("TRACE", "CRANE", "PLANT", "GRACE"))
    assert names(out) == ["TRACE", "GRACE"]


def test_no_repeat(history):
    out = F.no_repeat(history, words("CRANE", "TRACE"))
    assert names(out) == ["TRACE"]


def _table(*texts):
    return OccurrenceTable.build(words(*texts))


def test_last_letter_ranks_open_slot():
    table = _table("GRAVE", "CRAVE", "BRAVE", "CRANE", "CRATE", "CLEAN")
    history = [score(W("BRAVE"), W("GRAVE"))]  # -GGGG, open slot 1
    last_letter = F.make_last_letter(table)
    out = last_letter(history, words("GRAVE", "BRAVE", "CRAVE"))
    assert names(out) == ["CRAVE", "GRAVE"]


def test_last_letter_reads_latest_guess():
    table = _table("GRAVE", "CRAVE", "BRAVE", "CRANE", "CRATE", "CLEAN")
    crane = score(W("CRANE"), W("GRAVE"))  # -GG-G, two open slots
    brave = score(W("BRAVE"), W("GRAVE"))  # -GGGG
    last_letter = F.make_last_letter(table)
    candidates = words("GRAVE", "BRAVE", "CRAVE")
    assert names(last_letter([crane, brave], candidates)) == ["CRAVE", "GRAVE"]
    assert names(last_letter([brave, crane], candidates)) == ["GRAVE", "BRAVE", "CRAVE"]


def test_last_letter_ties_keep_order():
    table = _table("GRAVE", "CRAVE", "BRAVE")
    history = [score(W("BRAVE"), W("GRAVE"))]
    out = F.make_last_letter(table)(history, words("GRAVE", "CRAVE"))
    assert names(out) == ["GRAVE", "CRAVE"]


def test_last_letter_only_with_four_greens(history):
    table = _table("TRACE", "GRACE")
    out = F.make_last_letter(table)(history, words("GRACE", "TRACE"))
    assert names(out) == ["GRACE", "TRACE"]
    assert names(F.make_last_letter(table)([], words("GRACE"))) == ["GRACE"]


def test_run_pipeline_short_circuits_on_single_candidate():
    calls = []

    def one(history, candidates):
        calls.append("one")
        return words("TRACE")

    def never(history, candidates):
        calls.append("never")
        return []

    out = F.run_pipeline([one, never], [], [])
    assert names(out) == ["TRACE"]
    assert calls == ["one"]


def test_run_pipeline_runs_every_stage_otherwise():
    calls = []

    def two(history, candidates):
        calls.append("two")
        return words("TRACE", "GRACE")

    def empty(history, candidates):
        calls.append("empty")
        return []

    def after(history, candidates):
        calls.append("after")
        return candidates

    assert F.run_pipeline([two, empty, after], [], []) == []
    assert calls == ["two", "empty", "after"]
