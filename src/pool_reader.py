"""Read a word pool (word, clue) from an XLSX workbook."""

from __future__ import annotations

import logging
from pathlib import Path

import openpyxl

from models import Candidate, CrosswordError

logger = logging.getLogger(__name__)

_WORD_HEADERS = {"word", "palavra", "answer", "resposta"}
_CLUE_HEADERS = {"clue", "dica", "pista"}


def read_pool(path: str | Path) -> list[Candidate]:
    """Open *path*, locate the word/clue columns, return validated candidates.

    A header row naming the columns (``word``/``palavra`` and
    ``clue``/``dica``) is optional; without one, column A holds the word and
    column B the clue.
    """
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        rows = list(ws.iter_rows(values_only=True))
    finally:
        wb.close()

    word_col, clue_col, first_data = _detect_columns(rows)
    entries: list[Candidate] = []

    for row in rows[first_data:]:
        word = _cell_text(row, word_col)
        clue = _cell_text(row, clue_col)
        if not word and not clue:
            continue
        entries.append(Candidate(word=normalize_word(word), clue=clue))

    return _validate_and_filter(entries)


def _detect_columns(rows: list[tuple]) -> tuple[int, int, int]:
    """Return (word_col, clue_col, first_data_row) as 0-based indices."""
    if rows:
        header = [_cell_text(rows[0], i).lower() for i in range(len(rows[0]))]
        word_col = next((i for i, h in enumerate(header) if h in _WORD_HEADERS), None)
        clue_col = next((i for i, h in enumerate(header) if h in _CLUE_HEADERS), None)
        if word_col is not None and clue_col is not None:
            return word_col, clue_col, 1
    return 0, 1, 0


def _cell_text(row: tuple, index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def normalize_word(raw: str) -> str:
    """Uppercase and drop whitespace, keeping accented letters."""
    return "".join(raw.upper().split())


def _validate_and_filter(entries: list[Candidate]) -> list[Candidate]:
    """Keep words of 2+ letters that have a clue, deduplicate, error if none remain."""
    seen_words: set[str] = set()
    result: list[Candidate] = []

    for entry in entries:
        if len(entry.word) < 2:
            logger.warning("Skipping '%s' (too short, <2 letters)", entry.word)
            continue
        if not entry.clue:
            logger.warning("Skipping '%s' (no clue)", entry.word)
            continue
        if entry.word in seen_words:
            logger.warning("Duplicate word '%s', skipping", entry.word)
            continue
        seen_words.add(entry.word)
        result.append(entry)

    if not result:
        raise CrosswordError("No valid pool entries after filtering")

    return result
