"""
Visualization driver: scans a report line by line and draws it on a canvas.
"""

import io
import math
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, TextIO

from .canvas import Canvas
from .constants import ANNOTATION_SPACING, SECTION_GAP_ROWS, STYLE_INLINE
from .geometry import Geometry
from .parser import Annotation, ParsedRow, Section, SectionHeader, classify_line
from .render import draw_bar_row, draw_inline_row
from .scale import vmap


@dataclass
class Session:
    """Shared state for every report drawn onto one canvas."""

    canvas: Canvas
    geometry: Geometry
    column_titles_pending: bool = True
    rows: List["RenderedRow"] = field(default_factory=list)


@dataclass(frozen=True)
class RenderedRow:
    row: ParsedRow
    section: Section
    y: int
    bar_width: int
    source: str = ""

    @property
    def regression(self) -> bool:
        return self.section.is_regression(self.row.magnitude)


def read_lines(source: Iterable[str]) -> Iterator[str]:
    """Yield lines until end of input; a read error also ends the input."""
    it = iter(source)
    while True:
        try:
            line = next(it)
        except (StopIteration, OSError, UnicodeDecodeError):
            return
        yield line


def visualize(session: Session, source: Iterable[str], filename: str = "") -> List[RenderedRow]:
    """Draw one report onto the session's canvas.

    The cursor starts at the same top offset for every report, so several
    reports drawn onto one canvas overlay each other.
    """
    canvas = session.canvas
    g = session.geometry
    bh = g.bar_height
    vspacing = g.vspacing

    section = Section.DELTA
    dmin, dmax = section.domain(g)

    canvas.gstyle(f"font-size:{bh}px;font-family:sans-serif")
    canvas.rect(0, 0, g.width, g.height, "stroke:lightgray;stroke-width:1;fill:white")
    canvas.text(g.left, g.top, g.title or filename, "font-size:150%")

    rendered: List[RenderedRow] = []
    x, y = g.zero_point, g.top + vspacing
    for line in read_lines(source):
        parsed = classify_line(line)
        if parsed is None:
            continue

        if isinstance(parsed, SectionHeader):
            section = parsed.section
            dmin, dmax = section.domain(g)
            y += vspacing * SECTION_GAP_ROWS
            continue

        if isinstance(parsed, Annotation):
            y += int(vspacing * ANNOTATION_SPACING)
            canvas.text(g.left, y, parsed.text, "font-style:italic;fill:gray;font-size:70%")
            continue

        width = vmap(parsed.abs_magnitude, dmin, dmax, 0, g.vwidth)
        # Magnitudes too large to map (e.g. 1e308%) draw an empty bar
        bw = int(width) if math.isfinite(width) else 0
        if g.style == STYLE_INLINE:
            draw_inline_row(session, g.left, y, bw, bh, section, parsed)
        else:
            draw_bar_row(session, x, y, bw, bh, vspacing // 2, section, parsed)

        rendered.append(RenderedRow(parsed, section, y, bw, filename))
        y += vspacing

    canvas.gend()
    session.rows.extend(rendered)
    return rendered


def process(session: Session, filename: Optional[str] = None, stdin: Optional[TextIO] = None) -> bool:
    """Visualize a named file, or stdin when no filename is given.

    Returns False when the file could not be opened; the error is reported on
    stderr and the canvas is left untouched.
    """
    if not filename:
        stream = stdin if stdin is not None else sys.stdin
        if isinstance(stream, io.TextIOWrapper):
            # Same leniency as named files: undecodable bytes become U+FFFD
            stream.reconfigure(errors="replace")
        visualize(session, stream, "")
        return True

    try:
        f = open(filename, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"❌ {e}", file=sys.stderr)
        return False

    with f:
        visualize(session, f, filename)
    return True
