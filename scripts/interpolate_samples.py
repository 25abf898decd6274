#!/usr/bin/env python3
"""CLI script to interpolate a CSV of point samples onto H3 cells.

Usage:
    python scripts/interpolate_samples.py samples.csv --output cells.json

The CSV needs ``longitude``, ``latitude`` and ``value`` columns (names are
configurable). This script:
1. Loads the samples.
2. Runs the hex interpolator with settings from the environment / .env.
3. Prints summary statistics and optionally writes the per-cell records as JSON.
"""

import argparse
import csv
import json
import logging
from pathlib import Path

from hexinterp import HexInterpolator, samples_from_records
from hexinterp.core.config import settings


def main():
    parser = argparse.ArgumentParser(description="Interpolate point samples onto H3 cells")
    parser.add_argument("csv_path", help="Input CSV with one sample per row")
    parser.add_argument("--lon-column", default="longitude", help="Longitude column name")
    parser.add_argument("--lat-column", default="latitude", help="Latitude column name")
    parser.add_argument("--value-column", default="value", help="Value column name")
    parser.add_argument("--output", default=None, help="Write cell records to this JSON file")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    with open(args.csv_path, newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))

    samples = samples_from_records(
        rows,
        get_position=lambda r: (r[args.lon_column], r[args.lat_column]),
        get_value=lambda r: r[args.value_column],
    )
    print(f"Loaded {len(samples)} samples from {args.csv_path}")

    interpolator = HexInterpolator.from_settings(settings)
    results = interpolator.compute(samples)
    print(f"  {len(samples)} samples → {len(results)} H3 cells (res {settings.hex_resolution})")

    print("\nTop 10 cells by value:")
    for cell in sorted(results.values(), key=lambda c: c.value, reverse=True)[:10]:
        print(f"  {cell.cell_id}: value={cell.value:.2f} confidence={cell.confidence:.2f}")

    if args.output:
        records = [cell.as_dict() for cell in results.values()]
        Path(args.output).write_text(json.dumps(records, indent=2), encoding="utf-8")
        print(f"\nWrote {len(records)} cell records to {args.output}")


if __name__ == "__main__":
    main()
