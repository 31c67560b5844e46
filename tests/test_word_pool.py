"""Tests for word_pool.py."""

from grid_placer import DEFAULT_GRID_SIZE, DEFAULT_WORD_COUNT, _check_pool, prepare_pool
from word_pool import PORTUGUESE_WORDS, default_pool


class TestDefaultPool:
    def test_words_are_uppercase(self):
        for entry in PORTUGUESE_WORDS:
            assert entry.word == entry.word.upper()
            assert " " not in entry.word

    def test_words_unique(self):
        words = [entry.word for entry in PORTUGUESE_WORDS]
        assert len(words) == len(set(words))

    def test_every_word_has_a_clue(self):
        assert all(entry.clue.strip() for entry in PORTUGUESE_WORDS)

    def test_fits_default_grid(self):
        pool = prepare_pool(PORTUGUESE_WORDS, DEFAULT_GRID_SIZE)
        assert len(pool) == len(PORTUGUESE_WORDS)
        _check_pool(pool, DEFAULT_WORD_COUNT)

    def test_returns_copy(self):
        pool = default_pool()
        pool.clear()
        assert len(default_pool()) == len(PORTUGUESE_WORDS)
