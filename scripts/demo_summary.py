#!/usr/bin/env python3
"""
Print biomarker statistics for a freshly generated demo store.

Handy for checking the generator and the statistics without starting
the dashboard.

Usage:
    python scripts/demo_summary.py
    python scripts/demo_summary.py --seed 42 --days 14
    python scripts/demo_summary.py --start 2024-01-03 --end 2024-01-05 --biomarkers Sleep Mood
"""
from __future__ import annotations

import argparse
import logging
import sys

from biotracker.analysis import compute_stats
from biotracker.common import ALL_BIOMARKERS, DateRange, TrackerError, format_display_date
from biotracker.ingest import build_demo_store

log = logging.getLogger(__name__)


def format_report(stats, date_range: DateRange, entry_count: int) -> list[str]:
    """Render stats as aligned text lines."""
    start = format_display_date(date_range.start) if date_range.start else "start"
    end = format_display_date(date_range.end) if date_range.end else "end"
    lines = [
        f"Entries: {entry_count} ({start} to {end})",
        f"{'Biomarker':<12}{'Average':>9}{'Highest':>9}{'Lowest':>9}",
    ]
    for biomarker, summary in stats.items():
        lines.append(
            f"{biomarker.value:<12}{summary.display_average:>9}"
            f"{summary.display_maximum:>9}{summary.display_minimum:>9}"
        )
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate demo entries and print per-biomarker statistics"
    )
    parser.add_argument("--days", type=int, help="Number of demo days (default: demo.days)")
    parser.add_argument("--seed", type=int, help="Random seed (default: demo.seed)")
    parser.add_argument("--start", help="Range start, YYYY-MM-DD")
    parser.add_argument("--end", help="Range end, YYYY-MM-DD")
    parser.add_argument(
        "--biomarkers",
        nargs="+",
        default=[b.value for b in ALL_BIOMARKERS],
        help="Biomarkers to summarize (default: all)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        date_range = DateRange.of(args.start, args.end)
        store = build_demo_store(days=args.days, seed=args.seed)
        entries = store.query(date_range)
        stats = compute_stats(entries, args.biomarkers)
    except (TrackerError, ValueError) as e:
        log.error(f"Summary failed: {e}")
        print(f"❌ {e}")
        return 1

    for line in format_report(stats, date_range, len(entries)):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
