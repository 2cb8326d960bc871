"""
Line classification and parsing for benchmark comparison reports.

Each input line is one of:
- an annotation (first field starts with ``#``),
- a section header (last field starts with ``delt`` or ``speed``),
- a data row ``<name> <old> <new> ... <value><unit>``,
- or noise (blank/short lines), which is skipped.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

# Section header prefixes, matched against the last field of a line
DELTA_PREFIX = "delt"
SPEEDUP_PREFIX = "speed"
ANNOTATION_PREFIX = "#"

MIN_LINE_LENGTH = 2
MIN_ROW_FIELDS = 2

# First percentage embedded in an old/new value, e.g. "812ns/op[±3.10%]"
EMBEDDED_PERCENT_RE = re.compile(r"([+-]?[0-9.]+)%")


class Section(Enum):
    """Metric kind of the table currently being scanned."""

    DELTA = "delta"
    SPEEDUP = "speedup"

    def domain(self, geometry) -> Tuple[float, float]:
        """Coordinate mapping domain for this section."""
        if self is Section.SPEEDUP:
            return 0.0, geometry.speedup_max
        return 0.0, geometry.delta_max

    def is_regression(self, magnitude: float) -> bool:
        """Whether a row with this magnitude goes on the regression side."""
        if self is Section.SPEEDUP:
            return magnitude < 1.0
        return magnitude > 0


@dataclass(frozen=True)
class Annotation:
    text: str


@dataclass(frozen=True)
class SectionHeader:
    section: Section


@dataclass(frozen=True)
class ParsedRow:
    """One benchmark case from a data line."""

    name: str
    old_value: str
    new_value: str
    value: str
    magnitude: float

    @property
    def abs_magnitude(self) -> float:
        return abs(self.magnitude)


ParsedLine = Union[Annotation, SectionHeader, ParsedRow]


def parse_magnitude(token: str) -> float:
    """Parse the trailing value token into a signed magnitude.

    The final character (the unit, ``%`` or ``x``) is stripped and the number
    is negated, so that "negative is better" percentages end up positive on
    the regression side. Anything unparseable counts as zero.
    """
    try:
        number = float(token[:-1])
    except ValueError:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return -number


def section_for_header(token: str) -> Optional[Section]:
    """Section named by a header token, by prefix only."""
    if token.startswith(DELTA_PREFIX):
        return Section.DELTA
    if token.startswith(SPEEDUP_PREFIX):
        return Section.SPEEDUP
    return None


def classify_line(line: str) -> Optional[ParsedLine]:
    """Classify one raw input line; returns None for lines to skip."""
    stripped = line.strip()
    fields = stripped.split()
    if not fields or len(line) < MIN_LINE_LENGTH:
        return None

    if len(fields) >= MIN_ROW_FIELDS and fields[0].startswith(ANNOTATION_PREFIX):
        return Annotation(stripped[len(ANNOTATION_PREFIX) :].strip())

    # A lone header token ("speedup" on its own line) still switches sections
    section = section_for_header(fields[-1])
    if section is not None:
        return SectionHeader(section)

    if len(fields) < MIN_ROW_FIELDS:
        return None

    value = fields[-1]
    return ParsedRow(
        name=fields[0],
        old_value=fields[1],
        new_value=fields[2] if len(fields) > 2 else "",
        value=value,
        magnitude=parse_magnitude(value),
    )


def highlight_percentage(text: str) -> Optional[float]:
    """First percentage embedded in a value string, if any."""
    match = EMBEDDED_PERCENT_RE.search(text)
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None
