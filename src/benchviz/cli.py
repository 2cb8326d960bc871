#!/usr/bin/env python3
"""CLI for benchviz: visualize benchmark comparison reports as SVG."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .canvas import Canvas
from .constants import STYLES
from .geometry import load_geometry
from .summary import print_summary, rows_to_dataframe
from .visualize import Session, process


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Geometry flags default to None so that only flags given on the command
    line override the config file.
    """
    parser = argparse.ArgumentParser(
        prog="benchviz",
        description="Visualize benchmark comparison data (benchcmp style) as SVG",
    )
    parser.add_argument("files", nargs="*", help="Input reports (default: stdin)")
    parser.add_argument("--config", help="Path to YAML config file (optional)")
    parser.add_argument("-o", "--output", help="Write SVG here instead of stdout")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a per-section summary of drawn rows to stderr",
    )

    geometry = parser.add_argument_group("geometry")
    geometry.add_argument("-w", "--width", type=int, help="Canvas width")
    geometry.add_argument("--height", type=int, help="Canvas height")
    geometry.add_argument("--top", type=int, help="Top margin")
    geometry.add_argument("--left", type=int, help="Left margin")
    geometry.add_argument("--vp", type=int, help="Visualization (zero) point")
    geometry.add_argument("--vw", dest="vwidth", type=int, help="Visual area width")
    geometry.add_argument("--bh", dest="bar_height", type=int, help="Bar height")
    geometry.add_argument("--sm", dest="speedup_max", type=float, help="Maximum speedup")
    geometry.add_argument("--dm", dest="delta_max", type=float, help="Maximum delta")

    look = parser.add_argument_group("appearance")
    look.add_argument("--title", help="Title (default: input filename)")
    look.add_argument("--scolor", help="Speedup (improvement) color")
    look.add_argument("--rcolor", help="Regression color")
    look.add_argument("--hcolor", help="Highlight color for large old/new percentages")
    look.add_argument(
        "--highlight-threshold",
        dest="highlight_threshold",
        type=float,
        help="Highlight old/new values whose percentage exceeds this",
    )
    look.add_argument("--style", choices=STYLES, help="Set the style (bar or inline)")
    look.add_argument(
        "--line",
        dest="dolines",
        action="store_true",
        default=None,
        help="Show lines between entries",
    )
    look.add_argument(
        "--col",
        dest="coldata",
        action="store_true",
        default=None,
        help="Show data in a single column",
    )
    look.add_argument(
        "--coltitle",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show titles for columns",
    )
    return parser


GEOMETRY_KEYS = (
    "width",
    "height",
    "top",
    "left",
    "vp",
    "vwidth",
    "bar_height",
    "speedup_max",
    "delta_max",
    "title",
    "scolor",
    "rcolor",
    "hcolor",
    "highlight_threshold",
    "style",
    "dolines",
    "coldata",
    "coltitle",
)


def run(files: List[str], session: Session) -> int:
    """Draw every input onto the session canvas; returns files skipped."""
    session.canvas.start(session.geometry.width, session.geometry.height)
    skipped = 0
    if files:
        for filename in files:
            if not process(session, filename):
                skipped += 1
    else:
        process(session)
    session.canvas.end()
    return skipped


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI function."""
    args = create_parser().parse_args(argv)

    try:
        overrides = {key: getattr(args, key) for key in GEOMETRY_KEYS}
        geometry = load_geometry(args.config, overrides)

        if args.output:
            try:
                out = open(args.output, "w", encoding="utf-8")
            except OSError as e:
                raise RuntimeError(f"Cannot open output: {e}") from e
        else:
            out = sys.stdout

        session = Session(Canvas(out), geometry)
        try:
            skipped = run(args.files, session)
        except BaseException:
            # Never leave a truncated document behind
            if out is not sys.stdout:
                out.close()
                Path(args.output).unlink(missing_ok=True)
            raise
        if out is not sys.stdout:
            out.close()

        if skipped:
            print(f"⚠️  Skipped {skipped} unreadable file(s)", file=sys.stderr)
        if args.summary:
            print_summary(rows_to_dataframe(session.rows))
        if args.output:
            print(f"✅ Wrote {args.output}", file=sys.stderr)

    except KeyboardInterrupt:
        print("\n❌ Interrupted by user", file=sys.stderr)
        sys.exit(1)
    except (ValueError, RuntimeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        print("Please report this issue with the full error message.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
