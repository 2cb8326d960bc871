"""
Minimal SVG canvas that streams markup to a text file object.

Only the primitives the renderers need are provided: rectangles, lines,
text and style groups, all with inline ``style`` attributes.
"""

import html
from typing import Optional, TextIO

SVG_HEADER = """<?xml version="1.0"?>
<svg width="{width}" height="{height}"
     xmlns="http://www.w3.org/2000/svg"
     xmlns:xlink="http://www.w3.org/1999/xlink">
"""
SVG_FOOTER = "</svg>\n"


def _style_attr(style: Optional[str]) -> str:
    if not style:
        return ""
    return f' style="{html.escape(style, quote=True)}"'


def _num(value) -> str:
    # Whole floats print as ints so coordinates read "12" rather than "12.0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Canvas:
    """SVG document written element by element to ``out``."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self.depth = 0
        self.started = False

    def _emit(self, markup: str) -> None:
        self.out.write(markup)
        self.out.write("\n")

    def start(self, width: int, height: int) -> None:
        if self.started:
            raise RuntimeError("canvas already started")
        self.out.write(SVG_HEADER.format(width=_num(width), height=_num(height)))
        self.started = True

    def end(self) -> None:
        if not self.started:
            raise RuntimeError("canvas was never started")
        if self.depth:
            raise RuntimeError(f"{self.depth} unclosed group(s) at end of document")
        self.out.write(SVG_FOOTER)
        self.out.flush()

    def rect(self, x, y, width, height, style: Optional[str] = None) -> None:
        self._emit(
            f'<rect x="{_num(x)}" y="{_num(y)}" width="{_num(width)}" '
            f'height="{_num(height)}"{_style_attr(style)} />'
        )

    def line(self, x1, y1, x2, y2, style: Optional[str] = None) -> None:
        self._emit(
            f'<line x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" '
            f'y2="{_num(y2)}"{_style_attr(style)} />'
        )

    def text(self, x, y, content: str, style: Optional[str] = None) -> None:
        self._emit(
            f'<text x="{_num(x)}" y="{_num(y)}"{_style_attr(style)}>'
            f"{html.escape(content, quote=False)}</text>"
        )

    def gstyle(self, style: str) -> None:
        """Open a group whose style applies to everything until gend()."""
        self._emit(f"<g{_style_attr(style)}>")
        self.depth += 1

    def gend(self) -> None:
        if not self.depth:
            raise RuntimeError("gend() without a matching gstyle()")
        self._emit("</g>")
        self.depth -= 1
