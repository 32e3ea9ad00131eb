from pathlib import Path

from apps.cli import occurrences, play, run
from wordle_puzzler.datasets import WordsLibrary
from wordle_puzzler.engine import Game


def _reader(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read


def test_run_random_games(tmp_path: Path, capsys):
    rc = run.main(["--iterations", "3", "--outdir", str(tmp_path), "--progress", "off",
                   "--seed", "5"])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.count("Success? ") == 3
    assert "Dictionary: complete" in out
    assert "Solved games percentile:" in out
    assert len(list(tmp_path.glob("run_*.csv"))) == 1
    assert len(list(tmp_path.glob("run_*_manifest.json"))) == 1


def test_run_all_solutions_sample(tmp_path: Path, capsys):
    rc = run.main(["--all", "--sample", "4", "--dictionary", "solutions",
                   "--outdir", str(tmp_path), "--progress", "off"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Not solved:" in out
    assert "solutions⊆complete=True" in out


def test_run_unknown_start_word(tmp_path: Path, capsys):
    run.main(["--iterations", "1", "--start-word", "qqqqq", "--outdir", str(tmp_path),
              "--progress", "off"])
    assert "Start word not recognized; using CRANE" in capsys.readouterr().out


def _library():
    return WordsLibrary.from_words(["CRANE", "TRACE", "SLATE"], ["TRACE"], seed=1)


def test_play_session_solves_and_quits():
    lines = []
    solved = play.session(_library(), read=_reader(["ab", "crane", "trace", "no"]),
                          write=lines.append)
    assert solved == 1
    assert "Not recognized" in lines
    assert "Solved!" in lines
    assert lines[-1] == "Play again? (yes | no)"


def test_play_session_loses_and_hints():
    lines = []
    solved = play.session(_library(), read=_reader(["crane"] * 6 + ["n"]),
                          write=lines.append, hint=True)
    assert solved == 0
    assert "You lose; the answer was TRACE" in lines
    assert "Suggested: TRACE" in lines


def test_play_one_stops_on_eof():
    game = Game.create(_library())
    assert play.play_one(game, read=_reader(["slate"]), write=lambda s: None) is False
    assert len(game) == 1


def test_occurrences_report(capsys):
    assert occurrences.main(["--dictionary", "solutions"]) == 0
    out = capsys.readouterr().out
    assert "solutions dictionary" in out
    assert "Letter,1,2,3,4,5,Total" in out
