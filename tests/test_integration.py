"""Integration tests: CLI runs from word pool to printed grid, PDF and SVG."""

import io
import os

import openpyxl
import pytest

from crossword_generator import main, play
from models import CrosswordGrid, Direction, PlacedWord, Position
from grid_builder import write_word


def _grid_with(placed, height, width=None):
    grid = CrosswordGrid.create(height, width)
    for p in placed:
        write_word(grid.cells, p.word, p.position, p.direction, p.number)
        grid.words.append(p)
    return grid


def _write_pool(path, words):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(("palavra", "dica"))
    for word in words:
        ws.append((word, f"Dica para {word}"))
    wb.save(path)
    return str(path)


class TestCli:
    def test_default_pool(self, capsys):
        main(["--seed", "42"])
        out, err = capsys.readouterr()
        assert "Horizontal" in out
        assert "Vertical" in out
        assert "Placed 5 words" in err
        assert "seed=42" in err

    def test_same_seed_same_output(self, capsys):
        main(["--seed", "9", "--count", "6"])
        first = capsys.readouterr().out
        main(["--seed", "9", "--count", "6"])
        assert capsys.readouterr().out == first

    def test_pool_from_xlsx(self, tmp_path, capsys):
        path = _write_pool(tmp_path / "pool.xlsx", ["CASA", "GATO", "SAPO", "TATU", "RATO"])
        main(["--pool", path, "--seed", "3"])
        out, err = capsys.readouterr()
        assert "Read 5 valid pool entries" in err
        for word in ("CASA", "GATO", "SAPO", "TATU", "RATO"):
            assert f"Dica para {word} ({len(word)})" in out

    def test_unusable_pool_exits(self, tmp_path, capsys):
        path = _write_pool(tmp_path / "pool.xlsx", ["SOL", "MAR", "PÉ", "TU", "BIZ"])
        with pytest.raises(SystemExit) as exc:
            main(["--pool", path, "--seed", "1"])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_pool_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--pool", str(tmp_path / "missing.xlsx")])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_count(self):
        with pytest.raises(SystemExit) as exc:
            main(["--count", "0"])
        assert exc.value.code == 2


@pytest.mark.slow
class TestOutputFiles:
    def test_pdf_and_svgs(self, tmp_path, capsys):
        target = tmp_path / "out" / "cruzadinha.pdf"
        main(["--seed", "42", "--count", "7", "--output", str(target)])

        assert target.exists()
        assert os.path.getsize(target) > 1000  # non-trivial PDF
        with open(target, "rb") as f:
            assert f.read(5) == b"%PDF-"
        assert (tmp_path / "out" / "cruzadinha_puzzle.svg").exists()
        assert (tmp_path / "out" / "cruzadinha_answer.svg").exists()
        assert capsys.readouterr().err.count("Output:") == 3


class TestPlay:
    def _grid(self):
        placed = [
            PlacedWord("CASA", "Lar", Position(0, 0), Direction.HORIZONTAL, 1),
            PlacedWord("CAFÉ", "Bebida quente", Position(0, 0), Direction.VERTICAL, 2),
        ]
        return _grid_with(placed, 4, 4)

    def test_solves(self):
        out = io.StringIO()
        solved = play(self._grid(), io.StringIO("1 casa\n2 café\n"), out)
        assert solved
        assert "Parabéns! Puzzle solved." in out.getvalue()
        assert "  1. Lar (4) ✓" in out.getvalue()

    def test_bad_input_reported(self):
        out = io.StringIO()
        stream = io.StringIO("hello\n9 casa\n\n1 cas\n")
        assert not play(self._grid(), stream, out)
        text = out.getvalue()
        assert text.count("Use: <number> <answer>") == 2
        assert "Wrong length" in text

    def test_superscript_number_reported(self):
        out = io.StringIO()
        assert not play(self._grid(), io.StringIO("² CASA\n"), out)
        assert "Use: <number> <answer>" in out.getvalue()

    def test_non_ascii_decimal_number_accepted(self):
        out = io.StringIO()
        play(self._grid(), io.StringIO("١ casa\n"), out)
        assert "  1. Lar (4) ✓" in out.getvalue()

    def test_play_flag_reads_stdin(self, capsys):
        main(["--seed", "5", "--play"], stdin=io.StringIO(""))
        out = capsys.readouterr().out
        # The answer grid is not printed when playing
        assert "#" in out
        assert "_" in out
