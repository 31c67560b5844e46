"""Render a crossword to a printable PDF using ReportLab.

Page 1: title banner, the trimmed grid centred below it, and the horizontal
and vertical clues flowing in columns under the grid. Page 2: answer key.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import CrosswordGrid, NumberedClue

PAGE_W, PAGE_H = A4  # 595.3 x 841.9
MARGIN = 36
SECTION_HEADER_H = 14.0

HORIZONTAL_TITLE = "HORIZONTAL"
VERTICAL_TITLE = "VERTICAL"
ANSWER_KEY_TITLE = "RESPOSTAS"

RenderItem = tuple[str, str, float]  # ('header' | 'clue', text or markup, height)


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN

    # Grid
    rows: int = 15
    cols: int = 15
    cell_size: float = 24.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Fonts
    clue_font_size: float = 10.0
    clue_leading: float = 12.0
    space_after: float = 2.0
    number_font_size: float = 8.0

    # Clue zone
    clue_zone_y: float = 0.0  # top of clue area
    clue_cols: int = 2
    clue_gutter: float = 12.0
    clue_col_w: float = 0.0

    title: str = "PALAVRAS CRUZADAS"

    @property
    def grid_w(self) -> float:
        return self.cell_size * self.cols

    @property
    def grid_h(self) -> float:
        return self.cell_size * self.rows


def render_pdf(
    grid: CrosswordGrid,
    horizontal: list[NumberedClue],
    vertical: list[NumberedClue],
    title: str,
    output_path: str,
) -> None:
    """Compute layout, shrink until the clues fit, draw puzzle + answer key."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(grid.height, grid.width, horizontal, vertical, title)
    layout = _adaptive_fit(horizontal, vertical, layout)

    c = Canvas(output_path, pagesize=A4)

    _draw_title_banner(c, layout)
    _draw_grid(c, grid, layout, show_answers=False)
    _draw_clue_zone(c, horizontal, vertical, layout)
    c.showPage()

    _draw_answer_key_page(c, grid, layout)
    c.showPage()

    c.save()


def _compute_layout(
    rows: int,
    cols: int,
    horizontal: list[NumberedClue],
    vertical: list[NumberedClue],
    title: str,
) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(rows=rows, cols=cols, title=title)

    side = max(rows, cols)
    if side <= 10:
        lp.cell_size = 32.0
        lp.number_font_size = 9.0
    elif side <= 15:
        lp.cell_size = 24.0
        lp.number_font_size = 8.0
    else:
        lp.cell_size = 17.0
        lp.number_font_size = 6.0

    if len(horizontal) + len(vertical) > 20:
        lp.clue_cols = 3

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    lp.grid_x = (lp.page_w - lp.grid_w) / 2
    lp.grid_y = lp.banner_y - 12

    lp.clue_zone_y = lp.grid_y - lp.grid_h - 18

    total_gutter = lp.clue_gutter * (lp.clue_cols - 1)
    lp.clue_col_w = (lp.usable_w - total_gutter) / lp.clue_cols


def _adaptive_fit(
    horizontal: list[NumberedClue],
    vertical: list[NumberedClue],
    layout: LayoutParams,
) -> LayoutParams:
    """Step through adjustments until all content fits on page 1."""
    for _ in range(12):
        if _content_fits(horizontal, vertical, layout):
            return layout

        if layout.clue_font_size > 7.0:
            layout.clue_font_size -= 0.5
            layout.clue_leading = layout.clue_font_size + 2.0
            continue

        if layout.space_after > 0.5:
            layout.space_after = 0.5
            continue

        if layout.clue_cols < 4:
            layout.clue_cols += 1
            _recompute_positions(layout)
            continue

        if layout.cell_size > 16:
            layout.cell_size -= 2
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(
    horizontal: list[NumberedClue],
    vertical: list[NumberedClue],
    layout: LayoutParams,
) -> bool:
    """Check if all clues fit below the grid on page 1."""
    columns = _distribute(_render_items(horizontal, vertical, layout), layout.clue_cols)
    tallest = max((_column_height(col) for col in columns), default=0.0)
    return tallest <= layout.clue_zone_y - layout.margin


def _render_items(
    horizontal: list[NumberedClue],
    vertical: list[NumberedClue],
    layout: LayoutParams,
) -> list[RenderItem]:
    """Headers and measured clue paragraphs in reading order."""
    style = _clue_style(layout)
    items: list[RenderItem] = []
    for header, clues in ((HORIZONTAL_TITLE, horizontal), (VERTICAL_TITLE, vertical)):
        if not clues:
            continue
        items.append(("header", header, SECTION_HEADER_H))
        for clue in clues:
            markup = _clue_markup(clue)
            _, h = Paragraph(markup, style).wrap(layout.clue_col_w, 10000)
            items.append(("clue", markup, h + style.spaceAfter))
    return items


def _item_height(item: RenderItem) -> float:
    item_type, _, h = item
    return h + (4 if item_type == "header" else 0)


def _column_height(column: list[RenderItem]) -> float:
    return sum(_item_height(item) for item in column)


def _distribute(items: list[RenderItem], n_cols: int) -> list[list[RenderItem]]:
    """Greedily fill columns up to the average height, never stranding a header."""
    columns: list[list[RenderItem]] = [[] for _ in range(n_cols)]
    target = sum(_item_height(item) for item in items) / n_cols
    col_idx = 0

    for item in items:
        current = _column_height(columns[col_idx])
        if (col_idx < n_cols - 1
                and current > 0
                and current + _item_height(item) > target * 1.05):
            stray = None
            if columns[col_idx][-1][0] == "header":
                stray = columns[col_idx].pop()
            col_idx += 1
            if stray is not None:
                columns[col_idx].append(stray)
        columns[col_idx].append(item)

    return columns


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_leading,
        spaceAfter=layout.space_after,
    )


def _clue_markup(clue: NumberedClue) -> str:
    """Format clue as ``<b>N.</b> text (length)`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.clue_text)} ({len(clue.answer)})"


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_grid(c, grid: CrosswordGrid, layout: LayoutParams, show_answers: bool) -> None:
    """Draw the grid: inactive cells black, active cells white with labels."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size

    for r in range(grid.height):
        for col in range(grid.width):
            cell = grid.cells[r][col]
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            if not cell.is_active:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            if cell.word_numbers:
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(
                    cx + 1.5,
                    cy + cs - layout.number_font_size - 1,
                    cell.label,
                )

            if show_answers and cell.letter:
                c.setFillColorRGB(0, 0, 0)
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                lw = stringWidth(cell.letter, "Helvetica", font_size)
                lx = cx + cs * 0.55 - lw / 2
                ly = cy + cs * 0.42 - font_size / 2
                c.drawString(lx, ly, cell.letter)

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - layout.grid_h, layout.grid_w, layout.grid_h, fill=0, stroke=1)


def _draw_clue_zone(
    c,
    horizontal: list[NumberedClue],
    vertical: list[NumberedClue],
    layout: LayoutParams,
) -> None:
    """Draw both clue sections in balanced columns below the grid."""
    style = _clue_style(layout)
    columns = _distribute(_render_items(horizontal, vertical, layout), layout.clue_cols)

    for i, col_items in enumerate(columns):
        col_x = layout.margin + i * (layout.clue_col_w + layout.clue_gutter)
        current_y = layout.clue_zone_y

        for item_type, content, h in col_items:
            if item_type == "header":
                _draw_section_header(c, content, col_x, current_y, layout.clue_col_w)
                current_y -= SECTION_HEADER_H + 4
            else:
                p = Paragraph(content, style)
                p.wrap(layout.clue_col_w, 10000)
                p.drawOn(c, col_x, current_y - h)
                current_y -= h


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> float:
    """Black rect + white bold text. Returns y at bottom of header."""
    h = SECTION_HEADER_H
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - h, width, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - h + 3.5, text)

    return y - h


def _draw_answer_key_page(c, grid: CrosswordGrid, layout: LayoutParams) -> None:
    """Banner + filled grid centered on page."""
    ak_layout = LayoutParams(
        rows=layout.rows,
        cols=layout.cols,
        cell_size=layout.cell_size,
        number_font_size=layout.number_font_size,
        title=ANSWER_KEY_TITLE,
    )
    _recompute_positions(ak_layout)

    _draw_title_banner(c, ak_layout)
    _draw_grid(c, grid, ak_layout, show_answers=True)
