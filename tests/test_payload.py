import json

import pandas as pd

from co2dash.payload import build_map_payload


def test_payload_structure(records):
    payload = build_map_payload(records)
    assert payload["years"] == ["2019", "2020"]
    assert payload["default_year"] == "2020"
    assert payload["values"]["2020"] == {"A": 100.0, "B": 300.0, "C": 50.0}
    lo, hi = payload["clip"]
    assert 50.0 <= lo <= hi <= 300.0
    json.dumps(payload)


def test_payload_skips_zero_emissions():
    recs = pd.DataFrame({"entity": ["A", "B"], "code": "", "year": 2000, "emissions": [0.0, 2.5]})
    payload = build_map_payload(recs)
    assert payload["values"]["2000"] == {"B": 2.5}


def test_payload_empty():
    recs = pd.DataFrame({"entity": [], "code": [], "year": [], "emissions": []})
    payload = build_map_payload(recs)
    assert payload["years"] == []
    assert payload["default_year"] is None
    assert payload["clip"] == (0.0, 0.0)
