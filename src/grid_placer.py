"""Crossword word placement: connectable selection, greedy intersection fit,
alternate-word substitution, forced isolated placement, full restarts."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from grid_builder import trim_grid, verify_grid, write_word
from models import (
    Candidate,
    CrosswordGrid,
    Direction,
    GenerationError,
    PlacedWord,
    PoolExhaustedError,
    Position,
    WorkingGrid,
)

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 15
DEFAULT_WORD_COUNT = 5
SELECTION_ATTEMPTS = 20
MAX_ALTERNATES = 3
MAX_RESTARTS = 100
FORCE_RADIUS = 2

Fit = tuple[Position, Direction]


def generate_crossword(
    pool: Sequence[Candidate],
    count: int = DEFAULT_WORD_COUNT,
    *,
    grid_size: int = DEFAULT_GRID_SIZE,
    rng: random.Random | None = None,
    seed: int | None = None,
    max_restarts: int = MAX_RESTARTS,
    selection_attempts: int = SELECTION_ATTEMPTS,
    max_alternates: int = MAX_ALTERNATES,
) -> CrosswordGrid:
    """Build a connected crossword of *count* words drawn from *pool*.

    Randomness comes from *rng*, or from ``random.Random(seed)`` when no rng
    is given, so a fixed seed reproduces the same grid.

    Raises PoolExhaustedError when the pool cannot supply *count* usable,
    connectable words, and GenerationError when every one of *max_restarts*
    attempts leaves a word unplaced.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if rng is None:
        rng = random.Random(seed)

    candidates = prepare_pool(pool, grid_size)
    _check_pool(candidates, count)

    for attempt in range(1, max_restarts + 1):
        selected = select_words(candidates, count, rng, attempts=selection_attempts)
        cells, placed = _single_attempt(selected, candidates, grid_size, max_alternates)

        if len(placed) == len(selected):
            grid = trim_grid(cells, placed)
            verify_grid(grid)
            logger.debug(
                "Placed %d words on attempt %d (%dx%d after trimming)",
                len(placed), attempt, grid.height, grid.width,
            )
            return grid

        logger.info(
            "Attempt %d/%d placed %d of %d words, restarting",
            attempt, max_restarts, len(placed), len(selected),
        )

    raise GenerationError(
        f"Could not place {count} words after {max_restarts} attempts"
    )


# ── Pool screening ───────────────────────────────────────────────────

def prepare_pool(pool: Sequence[Candidate], grid_size: int) -> list[Candidate]:
    """Strip entries, drop words that cannot fit, deduplicate by word."""
    seen: set[str] = set()
    result: list[Candidate] = []

    for entry in pool:
        word = entry.word.strip()
        if len(word) < 2:
            logger.warning("Skipping '%s' (too short, <2 letters)", word)
            continue
        if len(word) > grid_size:
            logger.warning("Skipping '%s' (too long for %dx%d grid)", word, grid_size, grid_size)
            continue
        if word in seen:
            logger.warning("Duplicate word '%s', skipping", word)
            continue
        seen.add(word)
        result.append(Candidate(word=word, clue=entry.clue.strip()))

    return result


def _check_pool(candidates: list[Candidate], count: int) -> None:
    if len(candidates) < count:
        raise PoolExhaustedError(
            f"Pool has {len(candidates)} usable words, {count} requested"
        )
    if count == 1:
        return
    linked = sum(
        1 for c in candidates
        if any(_shares_letter(c.word, o.word) for o in candidates if o is not c)
    )
    if linked < count:
        raise PoolExhaustedError(
            f"Only {linked} pool words share a letter with another word, {count} requested"
        )


def _shares_letter(a: str, b: str) -> bool:
    return not set(a).isdisjoint(b)


def is_connectable(words: Sequence[str]) -> bool:
    """True if every word shares a character with at least one other word.

    Necessary, not sufficient, for a connected layout. A single word is
    trivially connectable.
    """
    if len(words) < 2:
        return True
    for i, word in enumerate(words):
        if not any(_shares_letter(word, other) for j, other in enumerate(words) if j != i):
            return False
    return True


def select_words(
    candidates: Sequence[Candidate],
    count: int,
    rng: random.Random,
    attempts: int = SELECTION_ATTEMPTS,
) -> list[Candidate]:
    """Draw *count* words, preferring the first connectable draw."""
    for _ in range(attempts):
        draw = rng.sample(list(candidates), count)
        if is_connectable([c.word for c in draw]):
            return draw
    logger.debug("No connectable draw in %d tries, using an unscreened one", attempts)
    return rng.sample(list(candidates), count)


# ── Core placement algorithm ─────────────────────────────────────────

def _single_attempt(
    selected: Sequence[Candidate],
    pool: Sequence[Candidate],
    grid_size: int,
    max_alternates: int,
) -> tuple[WorkingGrid, list[PlacedWord]]:
    """Place *selected* longest first on a fresh working grid."""
    cells = CrosswordGrid.create(grid_size).cells
    placed: list[PlacedWord] = []
    used = {c.word for c in selected}

    ordered = sorted(selected, key=lambda c: len(c.word), reverse=True)
    first = ordered[0]
    start = Position(grid_size // 2, (grid_size - len(first.word)) // 2)
    _commit(cells, placed, first, (start, Direction.HORIZONTAL))

    for candidate in ordered[1:]:
        fit = find_intersection(cells, candidate.word, placed)

        if fit is None:
            alternate = _find_alternate(cells, pool, used, placed, max_alternates)
            if alternate is not None:
                logger.debug("Substituting %s for %s", alternate[0].word, candidate.word)
                candidate, fit = alternate
                used.add(candidate.word)

        if fit is None:
            fit = find_forced_position(cells, candidate.word, placed[-1])
            if fit is not None:
                logger.debug("Forced %s into an isolated slot", candidate.word)

        if fit is None:
            logger.debug("Could not place %s", candidate.word)
            continue

        _commit(cells, placed, candidate, fit)

    return cells, placed


def _commit(
    cells: WorkingGrid, placed: list[PlacedWord], candidate: Candidate, fit: Fit,
) -> None:
    position, direction = fit
    number = len(placed) + 1
    write_word(cells, candidate.word, position, direction, number)
    placed.append(PlacedWord(
        word=candidate.word, clue=candidate.clue,
        position=position, direction=direction, number=number,
    ))


def find_intersection(
    cells: WorkingGrid, word: str, placed: Sequence[PlacedWord],
) -> Optional[Fit]:
    """First valid crossing of *word* through an already placed word.

    Scan order: placed words, then letters of *word*, then letters of the
    placed word. The new word runs perpendicular to the one it crosses.
    """
    for existing in placed:
        dr, dc = existing.direction.step
        direction = existing.direction.perpendicular
        pr, pc = direction.step
        for i, letter in enumerate(word):
            for j, other in enumerate(existing.word):
                if letter != other:
                    continue
                cross = Position(existing.position.row + dr * j, existing.position.col + dc * j)
                start = Position(cross.row - pr * i, cross.col - pc * i)
                if can_place(cells, word, start, direction, cross):
                    return start, direction
    return None


def _find_alternate(
    cells: WorkingGrid,
    pool: Sequence[Candidate],
    used: set[str],
    placed: Sequence[PlacedWord],
    limit: int,
) -> Optional[tuple[Candidate, Fit]]:
    """Try up to *limit* unused pool words that share a letter with the grid."""
    tried = 0
    for candidate in pool:
        if tried >= limit:
            break
        if candidate.word in used:
            continue
        if not any(_shares_letter(candidate.word, p.word) for p in placed):
            continue
        tried += 1
        fit = find_intersection(cells, candidate.word, placed)
        if fit is not None:
            return candidate, fit
    return None


def find_forced_position(
    cells: WorkingGrid, word: str, last: PlacedWord,
) -> Optional[Fit]:
    """Isolated slot near the start of *last*, perpendicular to it."""
    direction = last.direction.perpendicular
    if last.direction == Direction.HORIZONTAL:
        anchor_row, anchor_col = last.position.row - 1, last.position.col
    else:
        anchor_row, anchor_col = last.position.row, last.position.col - 1
    anchor_row = max(anchor_row, 0)
    anchor_col = max(anchor_col, 0)

    height, width = len(cells), len(cells[0])
    for dr in range(-FORCE_RADIUS, FORCE_RADIUS + 1):
        for dc in range(-FORCE_RADIUS, FORCE_RADIUS + 1):
            row, col = anchor_row + dr, anchor_col + dc
            if not (0 <= row < height and 0 <= col < width):
                continue
            start = Position(row, col)
            if can_place(cells, word, start, direction):
                return start, direction
    return None


# ── Validation ────────────────────────────────────────────────────────

def can_place(
    cells: WorkingGrid,
    word: str,
    position: Position,
    direction: Direction,
    intersection: Position | None = None,
) -> bool:
    """Check bounds, letter collisions and adjacency to unrelated letters.

    Only *intersection* (when given) may already be occupied without
    further checks. Empty cells must not touch any active cell outside the
    word's own span. The cells just before and after the word must be empty,
    and the word may not run along two consecutive occupied cells.
    """
    height, width = len(cells), len(cells[0])
    dr, dc = direction.step
    row, col = position.row, position.col
    end_row = row + dr * (len(word) - 1)
    end_col = col + dc * (len(word) - 1)

    if row < 0 or col < 0 or end_row >= height or end_col >= width:
        return False

    if _is_active(cells, row - dr, col - dc) or _is_active(cells, end_row + dr, end_col + dc):
        return False

    span = {(row + dr * i, col + dc * i) for i in range(len(word))}
    cross = (intersection.row, intersection.col) if intersection is not None else None
    previous_active = False

    for i, letter in enumerate(word):
        r, c = row + dr * i, col + dc * i
        cell = cells[r][c]

        if cell.is_active and previous_active:
            return False
        previous_active = cell.is_active

        if (r, c) == cross:
            continue

        if cell.is_active:
            if cell.letter != letter:
                return False
            continue

        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if not _is_active(cells, nr, nc):
                continue
            if (nr, nc) in span or (nr, nc) == cross:
                continue
            return False

    return True


def _is_active(cells: WorkingGrid, row: int, col: int) -> bool:
    return 0 <= row < len(cells) and 0 <= col < len(cells[0]) and cells[row][col].is_active
