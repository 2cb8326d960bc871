"""
Row renderers: diverging bar chart rows and inline swatch rows.
"""

from typing import TYPE_CHECKING

from .constants import (
    BAR_OPACITY,
    COLUMN_TITLES,
    INLINE_VALUE_GAP,
    NEW_VALUE_OFFSET,
    OLD_VALUE_OFFSET,
)
from .parser import ParsedRow, Section, highlight_percentage

if TYPE_CHECKING:
    from .visualize import Session


def side_color(session: "Session", section: Section, magnitude: float) -> str:
    """Regression or improvement color for a row."""
    if section.is_regression(magnitude):
        return session.geometry.rcolor
    return session.geometry.scolor


def highlight_style(session: "Session", text: str) -> str:
    """Extra fill for old/new values carrying a large embedded percentage."""
    pct = highlight_percentage(text)
    if pct is not None and abs(pct) > session.geometry.highlight_threshold:
        return f";fill:{session.geometry.hcolor}"
    return ""


def _bar_style(color: str) -> str:
    return f"fill-opacity:{BAR_OPACITY};fill:{color}"


def draw_column_titles(session: "Session", y: int, h: int) -> None:
    g = session.geometry
    style = "text-anchor:start;font-size:70%;font-weight:bold"
    testcase, baseline, test_data = COLUMN_TITLES
    session.canvas.text(g.left, y - h // 2, testcase, style)
    session.canvas.text(g.left + OLD_VALUE_OFFSET, y - h // 2, baseline, style)
    session.canvas.text(g.left + NEW_VALUE_OFFSET, y - h // 2, test_data, style)


def draw_bar_row(
    session: "Session",
    x: int,
    y: int,
    w: int,
    h: int,
    vs: int,
    section: Section,
    row: ParsedRow,
) -> None:
    """Draw one bar-chart row with its bar growing left or right of x.

    Regressions grow left in the regression color, improvements grow right.
    The value label sits past the bar's outer edge, or in a single column
    just left of the zero-point when ``coldata`` is set.
    """
    canvas = session.canvas
    g = session.geometry
    toffset = h // 4

    canvas.gstyle("font-style:italic;font-size:65%")
    if section.is_regression(row.magnitude):
        canvas.rect(x - w, y - h // 2, w, h, _bar_style(g.rcolor))
        tx = x - w - toffset
        tstyle = "text-anchor:end"
    else:
        canvas.rect(x, y - h // 2, w, h, _bar_style(g.scolor))
        tx = x + w + toffset
        tstyle = "text-anchor:start"

    if g.coldata:
        canvas.text(x - toffset, y + toffset, row.value, "text-anchor:end")
    else:
        canvas.text(tx, y + toffset, row.value, tstyle)
    canvas.gend()

    canvas.text(g.left, y + h // 2, row.name, "text-anchor:start;font-size:70%")

    value_style = "text-anchor:start;font-size:55%"
    canvas.text(
        g.left + OLD_VALUE_OFFSET,
        y + h // 2,
        row.old_value.replace("[", " [", 1),
        value_style + highlight_style(session, row.old_value),
    )
    canvas.text(
        g.left + NEW_VALUE_OFFSET,
        y + h // 2,
        row.new_value.replace("[", " [", 1),
        value_style + highlight_style(session, row.new_value),
    )

    if g.dolines:
        canvas.line(g.left, y + vs, g.width, y + vs, "stroke:lightgray;stroke-width:1")

    if g.coltitle and session.column_titles_pending:
        draw_column_titles(session, y, h)
        session.column_titles_pending = False


def draw_inline_row(
    session: "Session",
    x: int,
    y: int,
    w: int,
    h: int,
    section: Section,
    row: ParsedRow,
) -> None:
    """Draw value, name and a colored swatch on a single line."""
    canvas = session.canvas
    canvas.text(x - INLINE_VALUE_GAP, y, row.value, "text-anchor:end")
    canvas.text(x, y, row.name)
    canvas.rect(x, y - h, w, h, _bar_style(side_color(session, section, row.magnitude)))
