# Author: Bradley R. Kinnard
# utils module exports

from utils.helpers import (
    load_verifier_config,
    get_logger
)

__all__ = [
    "load_verifier_config",
    "get_logger"
]
