import logging

import pandas as pd
import pytest


@pytest.fixture
def raw_country_rows():
    """Rows as they come out of co2-dataclean.csv, including a few bad ones."""
    return pd.DataFrame([
        {"Entity": "China", "Code": "CHN", "Year": 2020, "Annual CO₂ emissions": 10668.23},
        {"Entity": "United States", "Code": "USA", "Year": 2019, "Annual CO₂ emissions": 5255.8},
        {"Entity": "United States", "Code": "USA", "Year": 2020, "Annual CO₂ emissions": 4832.45},
        {"Entity": "India", "Code": "IND", "Year": 2020, "Annual CO₂ emissions": 2456.78},
        {"Entity": "Germany", "Code": "DEU", "Year": 1740, "Annual CO₂ emissions": 1.0},
        {"Entity": "Germany", "Code": "DEU", "Year": 2020, "Annual CO₂ emissions": -5.0},
        {"Entity": None, "Code": "XXX", "Year": 2020, "Annual CO₂ emissions": 3.0},
        {"Entity": "Japan", "Code": "JPN", "Year": 2020, "Annual CO₂ emissions": None},
    ])


@pytest.fixture
def records():
    return pd.DataFrame({
        "entity": ["A", "B", "C", "A", "B", "C"],
        "code": ["AAA", "BBB", "CCC", "AAA", "BBB", "CCC"],
        "year": [2019, 2019, 2019, 2020, 2020, 2020],
        "emissions": [80.0, 300.0, 50.0, 100.0, 300.0, 50.0],
    })


@pytest.fixture
def world_rows():
    """co2-data.csv style: lower-case headers, World plus regions."""
    return pd.DataFrame([
        {"country": "World", "iso_code": "OWID_WRL", "year": 1950, "co2": 5.0},
        {"country": "Asia", "iso_code": None, "year": 2019, "co2": 70.0},
        {"country": "World", "iso_code": "OWID_WRL", "year": 2020, "co2": 100.0},
        {"country": "World", "iso_code": "OWID_WRL", "year": 2019, "co2": 100.0},
        {"country": "World", "iso_code": "OWID_WRL", "year": 1700, "co2": 0.01},
    ])


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo whatever setup_logging configured on the package logger."""
    yield
    pkg = logging.getLogger("co2dash")
    for h in pkg.handlers[:]:
        pkg.removeHandler(h)
        h.close()
    pkg.setLevel(logging.NOTSET)
    pkg.propagate = True
