# Author: Bradley R. Kinnard
# config module exports

from config.schemas import verifier_config_schema

__all__ = ["verifier_config_schema"]
