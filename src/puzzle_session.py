"""Player-side state for a generated crossword.

The session owns the letters a player has typed, keyed by (row, col), and
answers completion questions by comparing them with the grid's words. It
never modifies the grid it was created from.
"""

from __future__ import annotations

from typing import Optional

from models import CrosswordGrid, NumberedClue
from grid_builder import build_clue_lists, format_grid

ARROW_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


class PuzzleSession:
    def __init__(self, grid: CrosswordGrid) -> None:
        self.grid = grid
        self.entries: list[list[str]] = [["" for _ in range(grid.width)] for _ in range(grid.height)]
        self.cursor: Optional[tuple[int, int]] = self._first_active()

    # ── Input ────────────────────────────────────────────────────────

    def enter_letter(self, row: int, col: int, value: str) -> bool:
        """Store the last character of *value* at (row, col).

        Inactive or out-of-range cells are ignored and return False. An empty
        value clears the cell.
        """
        if not self.grid.in_bounds(row, col) or not self.grid.cell(row, col).is_active:
            return False
        self.entries[row][col] = value[-1:] if value else ""
        return True

    def clear(self) -> None:
        for row in self.entries:
            for c in range(len(row)):
                row[c] = ""

    def fill_word(self, number: int, text: str) -> bool:
        """Type *text* into word *number*; False if the length does not match."""
        placed = self.grid.word(number)
        text = "".join(text.split())
        if len(text) != len(placed.word):
            return False
        for letter, (r, c) in zip(text, placed.coordinates()):
            self.entries[r][c] = letter
        return True

    # ── Focus navigation ─────────────────────────────────────────────

    def focus(self, row: int, col: int) -> bool:
        if not self.grid.in_bounds(row, col) or not self.grid.cell(row, col).is_active:
            return False
        self.cursor = (row, col)
        return True

    def move(self, key: str) -> Optional[tuple[int, int]]:
        """Move the cursor to the nearest active cell in the arrow's direction.

        Inactive cells are skipped; at the edge the cursor stays put. Keys
        other than those in ARROW_STEPS raise ValueError.
        """
        step = ARROW_STEPS.get(key.lower())
        if step is None:
            raise ValueError(f"Unknown arrow key {key!r}, expected one of {sorted(ARROW_STEPS)}")
        if self.cursor is None:
            return None
        dr, dc = step
        r, c = self.cursor
        r, c = r + dr, c + dc
        while self.grid.in_bounds(r, c):
            if self.grid.cell(r, c).is_active:
                self.cursor = (r, c)
                break
            r, c = r + dr, c + dc
        return self.cursor

    def _first_active(self) -> Optional[tuple[int, int]]:
        for r, row in enumerate(self.grid.cells):
            for c, cell in enumerate(row):
                if cell.is_active:
                    return r, c
        return None

    # ── Completion ───────────────────────────────────────────────────

    def is_word_complete(self, number: int) -> bool:
        """Every letter typed and equal to the answer, ignoring case."""
        placed = self.grid.word(number)
        for letter, (r, c) in zip(placed.word, placed.coordinates()):
            typed = self.entries[r][c]
            if not typed or typed.lower() != letter.lower():
                return False
        return True

    def completed_numbers(self) -> list[int]:
        return [w.number for w in self.grid.words if self.is_word_complete(w.number)]

    def is_solved(self) -> bool:
        return all(self.is_word_complete(w.number) for w in self.grid.words)

    # ── Display ──────────────────────────────────────────────────────

    def clue_lines(self) -> list[str]:
        """Clue list with a check mark next to completed words."""
        horizontal, vertical = build_clue_lists(self.grid)
        lines: list[str] = []
        for title, clues in (("Horizontal", horizontal), ("Vertical", vertical)):
            lines.append(title)
            lines.extend(self._clue_line(clue) for clue in clues)
        return lines

    def _clue_line(self, clue: NumberedClue) -> str:
        mark = " ✓" if self.is_word_complete(clue.number) else ""
        return f"  {clue.number}. {clue.clue_text} ({len(clue.answer)}){mark}"

    def render(self) -> str:
        return format_grid(self.grid, self.entries)
