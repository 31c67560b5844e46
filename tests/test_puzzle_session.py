"""Tests for puzzle_session.py."""

import pytest

from models import CrosswordGrid, Direction, PlacedWord, Position
from grid_builder import write_word
from puzzle_session import PuzzleSession


def _grid_with(placed, height, width=None):
    grid = CrosswordGrid.create(height, width)
    for p in placed:
        write_word(grid.cells, p.word, p.position, p.direction, p.number)
        grid.words.append(p)
    return grid


def _make_session():
    """4x4 grid: CASA across the top, CAFÉ down the left, ASA down the right."""
    placed = [
        PlacedWord("CASA", "Lar", Position(0, 0), Direction.HORIZONTAL, 1),
        PlacedWord("CAFÉ", "Bebida quente", Position(0, 0), Direction.VERTICAL, 2),
        PlacedWord("ASA", "Parte do pássaro", Position(0, 3), Direction.VERTICAL, 3),
    ]
    return PuzzleSession(_grid_with(placed, 4, 4))


class TestEnterLetter:
    def test_active_cell(self):
        session = _make_session()
        assert session.enter_letter(1, 0, "a")
        assert session.entries[1][0] == "a"

    def test_keeps_last_character(self):
        session = _make_session()
        session.enter_letter(0, 1, "xa")
        assert session.entries[0][1] == "a"

    def test_inactive_and_out_of_range_ignored(self):
        session = _make_session()
        assert not session.enter_letter(1, 1, "Z")
        assert not session.enter_letter(9, 0, "Z")
        assert session.entries[1][1] == ""

    def test_empty_value_clears(self):
        session = _make_session()
        session.enter_letter(0, 0, "C")
        session.enter_letter(0, 0, "")
        assert session.entries[0][0] == ""

    def test_clear(self):
        session = _make_session()
        session.fill_word(1, "CASA")
        session.clear()
        assert all(v == "" for row in session.entries for v in row)


class TestFillWord:
    def test_length_mismatch(self):
        session = _make_session()
        assert not session.fill_word(1, "CAS")
        assert session.entries[0] == ["", "", "", ""]

    def test_whitespace_ignored(self):
        session = _make_session()
        assert session.fill_word(1, "c a s a")
        assert session.is_word_complete(1)

    def test_unknown_number(self):
        with pytest.raises(KeyError):
            _make_session().fill_word(7, "CASA")

    def test_grid_untouched(self):
        session = _make_session()
        session.fill_word(1, "XXXX")
        assert session.grid.cells[0][1].letter == "A"


class TestCompletion:
    def test_case_insensitive(self):
        session = _make_session()
        session.fill_word(1, "casa")
        assert session.is_word_complete(1)
        assert not session.is_word_complete(2)

    def test_shared_cell_counts_for_both(self):
        session = _make_session()
        session.fill_word(1, "CASA")
        session.enter_letter(1, 3, "s")
        session.enter_letter(2, 3, "a")
        assert session.is_word_complete(3)

    def test_accent_must_match(self):
        session = _make_session()
        session.fill_word(2, "CAFE")
        assert not session.is_word_complete(2)

    def test_completed_numbers_and_solved(self):
        session = _make_session()
        session.fill_word(1, "CASA")
        session.fill_word(3, "ASA")
        assert session.completed_numbers() == [1, 3]
        assert not session.is_solved()
        session.fill_word(2, "café")
        assert session.is_solved()


class TestNavigation:
    def test_initial_cursor(self):
        assert _make_session().cursor == (0, 0)

    def test_move_right_and_down(self):
        session = _make_session()
        assert session.move("right") == (0, 1)
        session.focus(0, 0)
        assert session.move("down") == (1, 0)

    def test_skips_inactive_cells(self):
        session = _make_session()
        session.focus(2, 0)
        assert session.move("right") == (2, 3)
        assert session.move("left") == (2, 0)

    def test_stays_at_edge(self):
        session = _make_session()
        assert session.move("left") == (0, 0)
        assert session.move("up") == (0, 0)
        session.focus(0, 1)
        assert session.move("down") == (0, 1)

    def test_unknown_key_rejected(self):
        session = _make_session()
        with pytest.raises(ValueError, match="expected one of"):
            session.move("pgup")
        assert session.cursor == (0, 0)

    def test_keys_case_insensitive(self):
        assert _make_session().move("RIGHT") == (0, 1)

    def test_focus_inactive_rejected(self):
        session = _make_session()
        assert not session.focus(1, 1)
        assert session.cursor == (0, 0)


class TestDisplay:
    def test_clue_lines(self):
        session = _make_session()
        assert session.clue_lines() == [
            "Horizontal",
            "  1. Lar (4)",
            "Vertical",
            "  2. Bebida quente (4)",
            "  3. Parte do pássaro (3)",
        ]

    def test_completed_clue_marked(self):
        session = _make_session()
        session.fill_word(1, "CASA")
        assert "  1. Lar (4) ✓" in session.clue_lines()

    def test_render(self):
        session = _make_session()
        session.fill_word(3, "asa")
        assert session.render() == "_ _ _ A\n_ # # S\n_ # # A\n_ # # #"
