"""
Layout constants and defaults for benchviz.
"""

# Canvas defaults
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_TOP = 50
DEFAULT_LEFT = 100
DEFAULT_ZERO_POINT = 512
DEFAULT_BAR_AREA_WIDTH = 300
DEFAULT_BAR_HEIGHT = 20

# Scale maxima (upper bound of the coordinate mapping domain)
DEFAULT_SPEEDUP_MAX = 10.0
DEFAULT_DELTA_MAX = 100.0

# Colors
DEFAULT_IMPROVEMENT_COLOR = "green"
DEFAULT_REGRESSION_COLOR = "red"
DEFAULT_HIGHLIGHT_COLOR = "orange"

# Old/new values whose embedded percentage exceeds this get highlighted
DEFAULT_HIGHLIGHT_THRESHOLD = 2.0

# Render styles
STYLE_BAR = "bar"
STYLE_INLINE = "inline"
STYLES = (STYLE_BAR, STYLE_INLINE)

# Column x-offsets from the left margin for the old/new value strings
OLD_VALUE_OFFSET = 325
NEW_VALUE_OFFSET = 430

# Column header labels (bar style)
COLUMN_TITLES = ("TestCase", "Baseline", "Test Data")

# Inline style: gap between the value text and the row name
INLINE_VALUE_GAP = 10

# Cursor advance for an annotation line, as a fraction of the row spacing
ANNOTATION_SPACING = 0.7

# Row spacings skipped when a section header is crossed
SECTION_GAP_ROWS = 2

BAR_OPACITY = 0.3
