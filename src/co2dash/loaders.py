from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .config import COUNTRY_CSV, SUPPORTED, WORLD_CSV

log = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """A whole dataset could not be read; nothing partial is returned."""


def load_any(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    sfx = path.suffix.lower()
    if sfx not in SUPPORTED:
        raise DatasetLoadError(f"Unsupported file: {path}")
    try:
        if sfx == ".csv":
            df = pd.read_csv(path)
        elif sfx == ".parquet":
            df = pd.read_parquet(path)
        else:
            df = pd.read_feather(path)
    except (OSError, ValueError, pd.errors.ParserError) as exc:
        # EmptyDataError is a ValueError
        raise DatasetLoadError(f"Cannot load {path}: {exc}") from exc
    log.info("loaded %s (%d rows, %d columns)", path.name, len(df), len(df.columns))
    return df


def load_country_data(path: str | Path = COUNTRY_CSV) -> pd.DataFrame:
    return load_any(path)


def load_world_data(path: str | Path = WORLD_CSV) -> pd.DataFrame:
    return load_any(path)


def save_any(df: pd.DataFrame, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)
    return path
