"""
Console summary of the rows drawn onto a canvas.
"""

import sys
from typing import List, Optional, TextIO

import pandas as pd

from .visualize import RenderedRow

# Output formatting constants
TABLE_WIDTH = 72
SECTION_COLUMN_WIDTH = 8
NAME_COLUMN_WIDTH = 36
VALUE_COLUMN_WIDTH = 10
SIDE_COLUMN_WIDTH = 11

COLUMNS = [
    "source",
    "section",
    "name",
    "old_value",
    "new_value",
    "value",
    "magnitude",
    "bar_width",
    "y",
    "regression",
]


def rows_to_dataframe(rows: List[RenderedRow]) -> pd.DataFrame:
    """Convert rendered rows to a DataFrame, one row per benchmark case."""
    records = [
        {
            "source": r.source,
            "section": r.section.value,
            "name": r.row.name,
            "old_value": r.row.old_value,
            "new_value": r.row.new_value,
            "value": r.row.value,
            "magnitude": r.row.magnitude,
            "bar_width": r.bar_width,
            "y": r.y,
            "regression": r.regression,
        }
        for r in rows
    ]
    return pd.DataFrame(records, columns=COLUMNS)


def section_counts(df: pd.DataFrame) -> pd.DataFrame:
    """Rows, regressions and improvements per section, in order of appearance."""
    if df.empty:
        return pd.DataFrame(columns=["section", "rows", "regressions", "improvements"])

    grouped = df.groupby("section", sort=False)["regression"]
    counts = pd.DataFrame(
        {
            "rows": grouped.size(),
            "regressions": grouped.sum().astype(int),
        }
    )
    counts["improvements"] = counts["rows"] - counts["regressions"]
    return counts.reset_index()


def print_summary(df: pd.DataFrame, out: Optional[TextIO] = None) -> None:
    """Print per-section counts and the drawn rows."""
    out = out if out is not None else sys.stderr

    if df.empty:
        print("⚠️  No benchmark rows drawn", file=out)
        return

    print("📊 Section Summary:", file=out)
    print("─" * TABLE_WIDTH, file=out)
    for _, counts in section_counts(df).iterrows():
        print(
            f"  {counts['section']:<{SECTION_COLUMN_WIDTH}} "
            f"{counts['rows']:>4d} rows  "
            f"{counts['regressions']:>4d} regressed  "
            f"{counts['improvements']:>4d} improved",
            file=out,
        )

    print(
        f"\n{'Section':<{SECTION_COLUMN_WIDTH}} {'Benchmark':<{NAME_COLUMN_WIDTH}} "
        f"{'Value':>{VALUE_COLUMN_WIDTH}} {'Side':>{SIDE_COLUMN_WIDTH}}",
        file=out,
    )
    print("─" * TABLE_WIDTH, file=out)
    for _, row in df.iterrows():
        side = "regression" if row["regression"] else "improvement"
        print(
            f"{row['section']:<{SECTION_COLUMN_WIDTH}} {row['name']:<{NAME_COLUMN_WIDTH}} "
            f"{row['value']:>{VALUE_COLUMN_WIDTH}} {side:>{SIDE_COLUMN_WIDTH}}",
            file=out,
        )
    print("─" * TABLE_WIDTH, file=out)
