#!/usr/bin/env python3
"""Dump province and canton boundaries as GeoJSON.

Loads the configured boundary dataset and prints the merged province,
its cantons, a single canton, or the known canton names.

Usage
-----
Optionally point the library at another dataset::

    export BOUNDARIES_SOURCE="data/gadm41_ECU_2.json"
    python scripts/dump_province.py --province Guayas

Options::

    --province NAME      Province to aggregate (default: BOUNDARIES_PROVINCE or Guayas)
    --cantons            Print the province's cantons instead of the merged shape
    --canton NAME        Print a single canton matched by name
    --names              Print the known canton names and exit (no I/O)
    --summary            Print one line per feature instead of GeoJSON
    --verbose, -v        Enable debug logging
    --output FILE        Write output to FILE instead of stdout
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pyboundaries import (
    BoundaryAggregator,
    BoundaryConfig,
    BoundaryError,
    FeatureCollection,
    MultiPolygon,
    list_known_canton_names,
)


def _summary(collection: FeatureCollection) -> str:
    lines: list[str] = []
    for feature in collection.features:
        geometry = feature.geometry
        if isinstance(geometry, MultiPolygon):
            parts = geometry.polygon_count
        else:
            parts = 0 if geometry is None else 1
        name = feature.properties.get("name", "?")
        lines.append(f"  {name:<28} {feature.geometry_type or '-':<14} {parts} parts")
    return "\n".join(lines)


async def main() -> int:
    parser = argparse.ArgumentParser(
        description="Dump province/canton boundaries from the configured dataset.",
    )
    parser.add_argument("--province", help="Province to aggregate (default from config)")
    parser.add_argument("--cantons", action="store_true", help="Print the province's cantons")
    parser.add_argument("--canton", help="Print a single canton matched by name")
    parser.add_argument("--names", action="store_true", help="Print the known canton names and exit")
    parser.add_argument("--summary", action="store_true", help="Print a one-line summary per feature")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    if args.names:
        print("\n".join(list_known_canton_names()))
        return 0

    config = BoundaryConfig.from_env()

    try:
        async with BoundaryAggregator(config) as aggregator:
            if args.canton:
                collection = await aggregator.get_canton(args.canton, args.province)
            elif args.cantons:
                collection = await aggregator.get_province_cantons(args.province)
            else:
                collection = await aggregator.get_province(args.province)
    except BoundaryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        payload = _summary(collection)
    else:
        payload = json.dumps(collection.to_geojson(), ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Written to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
