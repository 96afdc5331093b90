#!/usr/bin/env python
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse, json
from datetime import datetime, timezone
from pathlib import Path

from co2dash.cleaning import drop_aggregates, normalize, normalize_country_names
from co2dash.config import COUNTRY_CSV
from co2dash.loaders import DatasetLoadError, load_country_data, save_any
from co2dash.logging_config import setup_logging

def main():
    ap = argparse.ArgumentParser(description="Normalize raw per-country CO2 rows into entity/code/year/emissions records.")
    ap.add_argument("--input", default=str(COUNTRY_CSV), help="Raw country file (.csv|.parquet), e.g. data/co2-dataclean.csv")
    ap.add_argument("--output", required=True, help="Output file (.csv or .parquet)")
    ap.add_argument("--report_json", default=None, help="Optional JSON with run metadata")
    ap.add_argument("--exclude_aggregates", action="store_true", help="Drop continents, World, OECD and similar groups")
    ap.add_argument("--map_names", action="store_true", help="Rename countries to the names used by the world map")
    ap.add_argument("--log_config", default=None)
    ap.add_argument("--log_dir", default=None)
    args = ap.parse_args()

    setup_logging(args.log_config, log_dir=args.log_dir)
    try:
        raw = load_country_data(args.input)
    except DatasetLoadError as e:
        raise SystemExit(f"[ERROR] {e}")

    dropped = []
    records = normalize(raw, on_dropped=dropped.append)
    n_clean = len(records)
    if args.exclude_aggregates:
        records = drop_aggregates(records)
    if args.map_names:
        records = normalize_country_names(records)

    out = save_any(records, args.output)

    meta = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "input": args.input,
        "output": str(out),
        "rows_input": int(len(raw)),
        "rows_dropped_invalid": int(dropped[0]),
        "rows_dropped_aggregates": int(n_clean - len(records)),
        "rows_output": int(len(records)),
        "entities": int(records["entity"].nunique()),
        "years": [int(records["year"].min()), int(records["year"].max())] if len(records) else None,
    }
    if args.report_json:
        Path(args.report_json).parent.mkdir(parents=True, exist_ok=True)
        with open(args.report_json, "w", encoding="utf-8") as f:
            json.dump(meta, f, indent=2)

    print("[OK] clean records written:", str(out))
    print(json.dumps(meta, indent=2))

if __name__ == "__main__":
    main()
