#!/usr/bin/env python
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse, json
from datetime import datetime, timezone

from co2dash.cleaning import extract_global
from co2dash.config import WORLD_CSV, WORLD_ENTITIES
from co2dash.loaders import DatasetLoadError, load_world_data, save_any
from co2dash.logging_config import setup_logging

def main():
    ap = argparse.ArgumentParser(description="Extract the world-aggregate emissions series (World / OWID_WRL rows).")
    ap.add_argument("--input", default=str(WORLD_CSV), help="Raw world file, e.g. data/co2-data.csv")
    ap.add_argument("--output", required=True, help="Output file (.csv or .parquet)")
    ap.add_argument("--entity", action="append", default=None,
                    help="World entity name to accept (repeatable). Default: World, OWID_WRL")
    ap.add_argument("--log_config", default=None)
    ap.add_argument("--log_dir", default=None)
    args = ap.parse_args()

    setup_logging(args.log_config, log_dir=args.log_dir)
    try:
        raw = load_world_data(args.input)
    except DatasetLoadError as e:
        raise SystemExit(f"[ERROR] {e}")

    entities = frozenset(args.entity) if args.entity else WORLD_ENTITIES
    dropped = []
    world = extract_global(raw, entities=entities, on_dropped=dropped.append)
    out = save_any(world, args.output)

    meta = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "input": args.input,
        "entities": sorted(entities),
        "rows_input": int(len(raw)),
        "rows_output": int(len(world)),
        "rows_dropped": int(dropped[0]),
        "years": [int(world["year"].min()), int(world["year"].max())] if len(world) else None,
    }
    print("[OK] world series written:", str(out))
    print(json.dumps(meta, indent=2))

if __name__ == "__main__":
    main()
