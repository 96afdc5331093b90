#!/usr/bin/env python
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse, json
from pathlib import Path

from co2dash.cleaning import drop_aggregates, normalize, normalize_country_names
from co2dash.loaders import DatasetLoadError, load_any
from co2dash.logging_config import setup_logging
from co2dash.payload import build_map_payload

def main():
    ap = argparse.ArgumentParser(description="Export per-year country emissions as a JSON payload for the world map.")
    ap.add_argument("--input", required=True, help="Per-country file (raw or cleaned)")
    ap.add_argument("--output", required=True, help="Output .json")
    ap.add_argument("--keep_aggregates", action="store_true", help="Keep World/continent rows in the payload")
    ap.add_argument("--q_low", type=float, default=0.01)
    ap.add_argument("--q_high", type=float, default=0.99)
    ap.add_argument("--log_config", default=None)
    ap.add_argument("--log_dir", default=None)
    args = ap.parse_args()

    setup_logging(args.log_config, log_dir=args.log_dir)
    try:
        records = normalize(load_any(Path(args.input)))
    except DatasetLoadError as e:
        raise SystemExit(f"[ERROR] {e}")
    if not args.keep_aggregates:
        records = drop_aggregates(records)
    records = normalize_country_names(records)

    payload = build_map_payload(records, clip_quantiles=(args.q_low, args.q_high))
    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False)

    print(f"[OK] map payload written: {out} | years: {len(payload['years'])} | default: {payload['default_year']}")

if __name__ == "__main__":
    main()
