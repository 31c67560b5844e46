"""Write words into cells, trim the working grid, verify it, build clue lists."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from models import (
    Cell,
    CrosswordError,
    CrosswordGrid,
    Direction,
    NumberedClue,
    PlacedWord,
    Position,
    WorkingGrid,
)


def write_word(
    cells: WorkingGrid, word: str, position: Position, direction: Direction, number: int,
) -> None:
    """Write *word* as active cells and label its first cell with *number*.

    A first cell that already starts another word keeps both labels, in the
    order they were assigned. Later letters never gain a label.
    """
    dr, dc = direction.step
    for i, letter in enumerate(word):
        cell = cells[position.row + dr * i][position.col + dc * i]
        cell.letter = letter
        cell.is_active = True
        if i == 0 and number not in cell.word_numbers:
            cell.word_numbers.append(number)


# ── Trimming ─────────────────────────────────────────────────────────

def active_bounds(cells: WorkingGrid) -> Optional[tuple[int, int, int, int]]:
    """Return (first_row, first_col, last_row, last_col) of active cells."""
    rows = [r for r, row in enumerate(cells) if any(cell.is_active for cell in row)]
    if not rows:
        return None
    cols = [
        c for c in range(len(cells[0]))
        if any(row[c].is_active for row in cells)
    ]
    return rows[0], cols[0], rows[-1], cols[-1]


def trim_grid(cells: WorkingGrid, words: Iterable[PlacedWord]) -> CrosswordGrid:
    """Crop *cells* to the bounding box of active cells.

    Word positions are translated by the crop offset; numbers are unchanged.
    An empty working grid is copied whole.
    """
    bounds = active_bounds(cells)
    if bounds is None:
        top, left, bottom, right = 0, 0, len(cells) - 1, len(cells[0]) - 1
    else:
        top, left, bottom, right = bounds

    trimmed = [
        [_copy_cell(cells[r][c]) for c in range(left, right + 1)]
        for r in range(top, bottom + 1)
    ]
    return CrosswordGrid(
        cells=trimmed,
        words=[placed.shifted(top, left) for placed in words],
    )


def _copy_cell(cell: Cell) -> Cell:
    return Cell(letter=cell.letter, is_active=cell.is_active, word_numbers=list(cell.word_numbers))


# ── Verification ─────────────────────────────────────────────────────

def verify_grid(grid: CrosswordGrid) -> None:
    """Raise CrosswordError unless every word matches the cells it covers."""
    for placed in grid.words:
        for i, (r, c) in enumerate(placed.coordinates()):
            if not grid.in_bounds(r, c):
                raise CrosswordError(f"Word {placed.number} ({placed.word}) leaves the grid")
            cell = grid.cells[r][c]
            if not cell.is_active or cell.letter != placed.word[i]:
                raise CrosswordError(
                    f"Word {placed.number} ({placed.word}) disagrees with cell ({r},{c})"
                )
        start = grid.cells[placed.position.row][placed.position.col]
        if placed.number not in start.word_numbers:
            raise CrosswordError(f"Word {placed.number} is not labelled at its first cell")


# ── Clue lists ───────────────────────────────────────────────────────

def build_clue_lists(
    grid: CrosswordGrid,
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Return (horizontal, vertical) clue lists sorted by word number."""
    horizontal: list[NumberedClue] = []
    vertical: list[NumberedClue] = []

    for placed in grid.words:
        clue = NumberedClue(
            number=placed.number,
            clue_text=placed.clue,
            answer=placed.word,
            direction=placed.direction,
        )
        if placed.direction == Direction.HORIZONTAL:
            horizontal.append(clue)
        else:
            vertical.append(clue)

    horizontal.sort(key=lambda c: c.number)
    vertical.sort(key=lambda c: c.number)
    return horizontal, vertical


def format_grid(
    grid: CrosswordGrid, entries: Sequence[Sequence[str]] | None = None,
) -> str:
    """Plain-text view: answers, or *entries* ('_' where empty), '#' inactive."""
    lines = []
    for r, row in enumerate(grid.cells):
        symbols = []
        for c, cell in enumerate(row):
            if not cell.is_active:
                symbols.append("#")
            elif entries is None:
                symbols.append(cell.letter or "?")
            else:
                symbols.append(entries[r][c].upper() or "_")
        lines.append(" ".join(symbols))
    return "\n".join(lines)
