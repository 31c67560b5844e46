#!/usr/bin/env python3
"""CLI entry point for crossword generation.

Draws words from the built-in Portuguese pool (or an XLSX pool given with
--pool), prints the grid and clues, optionally writes PDF + SVG files and
optionally runs a line-based play session.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import TextIO

from models import CrosswordError, CrosswordGrid

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a small connected crossword puzzle."
    )
    p.add_argument("--pool", default=None,
                   help="XLSX file with word/clue columns (default: built-in Portuguese pool)")
    p.add_argument("--count", type=int, default=5,
                   help="Number of words to place (default: 5)")
    p.add_argument("--grid-size", type=int, default=15,
                   help="Working grid size NxN before trimming (default: 15)")
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--max-restarts", type=int, default=100,
                   help="Full regeneration attempts before giving up (default: 100)")
    p.add_argument("--title", default="PALAVRAS CRUZADAS",
                   help='Title text for the PDF (default: "PALAVRAS CRUZADAS")')
    p.add_argument("--output", default=None,
                   help="Write PDF and SVG files next to this PDF path")
    p.add_argument("--play", action="store_true",
                   help="Solve the puzzle interactively: type '<number> <answer>' per line")
    p.add_argument("--log-level", default="WARNING",
                   help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return p


def configure_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr with a compact formatter."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level.upper(), logging.WARNING))

    if args.count < 1:
        parser.error("--count must be at least 1")

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        grid = _run(args, seed)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    elapsed = time.time() - t0
    print(
        f"Placed {len(grid.words)} words on a {grid.height}x{grid.width} grid "
        f"(seed={seed}), time {elapsed:.2f}s",
        file=sys.stderr,
    )

    if args.play:
        play(grid, stdin or sys.stdin)


def _run(args, seed: int) -> CrosswordGrid:
    from grid_builder import format_grid
    from grid_placer import generate_crossword
    from puzzle_session import PuzzleSession

    if args.pool:
        from pool_reader import read_pool
        pool = read_pool(args.pool)
        print(f"Read {len(pool)} valid pool entries", file=sys.stderr)
    else:
        from word_pool import default_pool
        pool = default_pool()

    grid = generate_crossword(
        pool,
        args.count,
        grid_size=args.grid_size,
        seed=seed,
        max_restarts=args.max_restarts,
    )

    if not args.play:
        print(format_grid(grid))
        print()
        print("\n".join(PuzzleSession(grid).clue_lines()))

    if args.output:
        _output_all(grid, args.title, args.output)

    return grid


def _output_all(grid: CrosswordGrid, title: str, output_path: str) -> None:
    """Write PDF, puzzle SVG and answer SVG beside *output_path*."""
    from grid_builder import build_clue_lists
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg

    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    stem = out.with_suffix("")

    pdf_path = str(out.with_suffix(".pdf"))
    puzzle_svg_path = f"{stem}_puzzle.svg"
    answer_svg_path = f"{stem}_answer.svg"

    horizontal, vertical = build_clue_lists(grid)
    render_pdf(grid, horizontal, vertical, title, pdf_path)
    render_puzzle_svg(grid, puzzle_svg_path)
    render_answer_svg(grid, answer_svg_path)

    print(f"Output: {pdf_path}", file=sys.stderr)
    print(f"Output: {puzzle_svg_path}", file=sys.stderr)
    print(f"Output: {answer_svg_path}", file=sys.stderr)


def play(grid: CrosswordGrid, stream: TextIO, out: TextIO | None = None) -> bool:
    """Read '<number> <answer>' lines until solved or EOF. Returns solved state."""
    from puzzle_session import PuzzleSession

    out = out or sys.stdout
    session = PuzzleSession(grid)
    numbers = {w.number for w in grid.words}
    _show(session, out)

    for line in stream:
        parts = line.split(maxsplit=1)
        if not parts:
            continue
        if len(parts) != 2 or not parts[0].isdecimal() or int(parts[0]) not in numbers:
            print("Use: <number> <answer>", file=out)
            continue
        if not session.fill_word(int(parts[0]), parts[1]):
            print("Wrong length", file=out)
            continue
        _show(session, out)
        if session.is_solved():
            print("Parabéns! Puzzle solved.", file=out)
            return True

    return session.is_solved()


def _show(session, out: TextIO) -> None:
    print(session.render(), file=out)
    print(file=out)
    print("\n".join(session.clue_lines()), file=out)


if __name__ == "__main__":
    main()
