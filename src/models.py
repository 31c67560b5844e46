"""Data models for the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Direction(Enum):
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @property
    def step(self) -> tuple[int, int]:
        """(row, col) delta between consecutive letters."""
        return (0, 1) if self is Direction.HORIZONTAL else (1, 0)

    @property
    def perpendicular(self) -> Direction:
        if self is Direction.HORIZONTAL:
            return Direction.VERTICAL
        return Direction.HORIZONTAL


@dataclass(frozen=True)
class Candidate:
    """A word/clue pair from the pool. ``word`` keeps its canonical spelling."""

    word: str
    clue: str


@dataclass(frozen=True)
class Position:
    row: int
    col: int


@dataclass(frozen=True)
class PlacedWord:
    """A candidate that has been written to the grid.

    ``number`` is assigned in placement order and never changes afterwards.
    """

    word: str
    clue: str
    position: Position
    direction: Direction
    number: int

    def coordinates(self) -> Iterator[tuple[int, int]]:
        dr, dc = self.direction.step
        for i in range(len(self.word)):
            yield self.position.row + dr * i, self.position.col + dc * i

    def shifted(self, rows: int, cols: int) -> PlacedWord:
        """Return a copy moved by (-rows, -cols)."""
        return PlacedWord(
            word=self.word,
            clue=self.clue,
            position=Position(self.position.row - rows, self.position.col - cols),
            direction=self.direction,
            number=self.number,
        )


@dataclass
class Cell:
    """A single cell in the crossword grid."""

    letter: str | None = None
    is_active: bool = False
    word_numbers: list[int] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Word numbers starting here, e.g. ``"2/4"``; empty if none."""
        return "/".join(str(n) for n in self.word_numbers)


WorkingGrid = list[list[Cell]]


@dataclass
class CrosswordGrid:
    """A rectangular matrix of cells plus the words written into it."""

    cells: WorkingGrid
    words: list[PlacedWord] = field(default_factory=list)

    @classmethod
    def create(cls, height: int, width: int | None = None) -> CrosswordGrid:
        """Create a grid of inactive cells."""
        width = height if width is None else width
        cells = [[Cell() for _ in range(width)] for _ in range(height)]
        return cls(cells=cells)

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def word(self, number: int) -> PlacedWord:
        for placed in self.words:
            if placed.number == number:
                return placed
        raise KeyError(f"No word numbered {number}")


@dataclass(frozen=True)
class NumberedClue:
    """A clue as shown in the clue list."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


class CrosswordError(Exception):
    """Fatal error during crossword generation."""


class PoolExhaustedError(CrosswordError):
    """The pool cannot supply enough usable, connectable words."""


class GenerationError(CrosswordError):
    """Every restart ended with at least one word left unplaced."""
