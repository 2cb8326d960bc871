"""
Tests for the drawn-row summary.
"""

import io

import pytest

from benchviz.summary import print_summary, rows_to_dataframe, section_counts
from benchviz.visualize import visualize


@pytest.fixture
def report():
    return (
        "benchmark old new delta\n"
        "BenchmarkA 100 120 20.00%\n"
        "BenchmarkB 100 90 -10.00%\n"
        "BenchmarkC 100 80 -20.00%\n"
        "benchmark old new speedup\n"
        "BenchmarkA 10 20 2.00x\n"
    )


@pytest.fixture
def rows(session, report):
    return visualize(session, io.StringIO(report), "report.txt")


def test_rows_to_dataframe(rows):
    df = rows_to_dataframe(rows)
    assert list(df["name"]) == ["BenchmarkA", "BenchmarkB", "BenchmarkC", "BenchmarkA"]
    assert list(df["section"]) == ["delta", "delta", "delta", "speedup"]
    assert list(df["regression"]) == [False, True, True, True]
    assert list(df["magnitude"]) == pytest.approx([-20.0, 10.0, 20.0, -2.0])
    assert set(df["source"]) == {"report.txt"}


def test_section_counts(rows):
    counts = section_counts(rows_to_dataframe(rows)).set_index("section")
    assert counts.loc["delta", "rows"] == 3
    assert counts.loc["delta", "regressions"] == 2
    assert counts.loc["delta", "improvements"] == 1
    assert counts.loc["speedup", "rows"] == 1
    assert counts.loc["speedup", "regressions"] == 1
    assert list(counts.index) == ["delta", "speedup"]


def test_print_summary(rows):
    out = io.StringIO()
    print_summary(rows_to_dataframe(rows), out)
    text = out.getvalue()
    assert "📊 Section Summary:" in text
    assert "3 rows" in text
    assert "2 regressed" in text
    assert "BenchmarkC" in text
    assert "improvement" in text


def test_print_summary_empty():
    out = io.StringIO()
    print_summary(rows_to_dataframe([]), out)
    assert "No benchmark rows drawn" in out.getvalue()
    assert section_counts(rows_to_dataframe([])).empty
