# Author: Bradley R. Kinnard
# utility helpers for the law verifier

import logging
from pathlib import Path
from typing import Any

import yaml
import jsonschema

from config.schemas import verifier_config_schema


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "verifier_config.yaml"


def load_verifier_config(path: Path | str = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """load and validate verifier config against schema."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"config not found: {path}")

    with open(path, "r") as f:
        config = yaml.safe_load(f)

    jsonschema.validate(instance=config, schema=verifier_config_schema)
    logger.info(f"loaded verifier config from {path}")
    return config


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """get a configured logger. avoids duplicate handlers."""
    log = logging.getLogger(name)
    log.setLevel(level)

    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        log.addHandler(handler)

    return log
