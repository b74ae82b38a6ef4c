# Author: Bradley R. Kinnard
# schema definitions for verifier config validation

verifier_config_schema = {
    "type": "object",
    "required": ["verifier"],
    "properties": {
        "verifier": {
            "type": "object",
            "required": ["enabled"],
            "additionalProperties": False,
            "properties": {
                "enabled": {
                    "type": "boolean",
                    "description": "disabled verification passes the program through untouched"
                },
                "verbose": {"type": "boolean", "default": False},
                "query_timeout_ms": {
                    "type": ["integer", "null"],
                    "minimum": 1,
                    "description": "per-query solver timeout, null = no limit"
                },
                "property_timeout_s": {
                    "type": ["number", "null"],
                    "exclusiveMinimum": 0,
                    "description": "wall-clock budget per property, null = no limit"
                }
            }
        }
    }
}
