"""Logging from the package's YAML dictConfig (console INFO, file DEBUG)."""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG = Path(__file__).with_name("logging.yml")


def _place_log_file(config: dict, log_dir: Optional[str]) -> None:
    handler = config.get("handlers", {}).get("file")
    if handler is None:
        return
    target = Path(handler.get("filename", "co2dash.log"))
    if log_dir:
        target = Path(log_dir) / target.name
    target.parent.mkdir(parents=True, exist_ok=True)
    handler["filename"] = str(target)


def setup_logging(config_path: Optional[str | Path] = None, log_dir: Optional[str] = None,
                  default_level: int = logging.INFO) -> logging.Logger:
    """
    Apply the YAML logging config and return the ``co2dash`` logger.

    ``log_dir`` moves the DEBUG log file; without a config file the root logger
    gets ``basicConfig(default_level)``.
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG
    if not config_path.exists():
        logging.basicConfig(level=default_level)
        logging.getLogger(__name__).warning(
            "Logging config %s not found, falling back to basicConfig", config_path
        )
        return logging.getLogger("co2dash")

    config = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    _place_log_file(config, log_dir)
    logging.config.dictConfig(config)
    return logging.getLogger("co2dash")
