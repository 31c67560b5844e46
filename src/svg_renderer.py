"""Render crossword grid as standalone SVG."""

from __future__ import annotations

from models import CrosswordGrid


def render_svg(
    grid: CrosswordGrid,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the crossword grid to an SVG file."""
    longest_side = max(grid.height, grid.width)
    if cell_size is None:
        cell_size = _default_cell_size(longest_side)

    number_font = _number_font_size(longest_side)
    letter_font = cell_size * 0.45
    width = cell_size * grid.width
    height = cell_size * grid.height

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )

    for r in range(grid.height):
        for c in range(grid.width):
            cell = grid.cells[r][c]
            x = c * cell_size
            y = r * cell_size

            if not cell.is_active:
                parts.append(
                    f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                    f'height="{cell_size}" fill="black"/>\n'
                )
                continue

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="white" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )

            if cell.word_numbers:
                # Shared starts ("2/5") get a smaller font to stay inside the cell
                font = number_font if len(cell.word_numbers) == 1 else number_font * 0.8
                tx = x + 1.5
                ty = y + font + 1
                parts.append(
                    f'  <text x="{tx}" y="{ty}" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-weight="bold" font-size="{font}" '
                    f'fill="black">{cell.label}</text>\n'
                )

            if show_answers and cell.letter:
                cx = x + cell_size * 0.55
                cy = y + cell_size * 0.58
                parts.append(
                    f'  <text x="{cx}" y="{cy}" '
                    f'text-anchor="middle" dominant-baseline="central" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-size="{letter_font}" '
                    f'fill="black">{cell.letter}</text>\n'
                )

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(grid: CrosswordGrid, output_path: str) -> None:
    """Render puzzle grid (no answers) to SVG."""
    render_svg(grid, output_path, show_answers=False)


def render_answer_svg(grid: CrosswordGrid, output_path: str) -> None:
    """Render answer grid (with letters) to SVG."""
    render_svg(grid, output_path, show_answers=True)


def _default_cell_size(side: int) -> float:
    if side <= 10:
        return 32.0
    elif side <= 15:
        return 24.0
    else:
        return 17.0


def _number_font_size(side: int) -> float:
    if side <= 10:
        return 9.0
    elif side <= 15:
        return 8.0
    else:
        return 6.0
