"""
Tolerant field lookup for the `data` mapping of object payloads

The service echoes keys with varying spelling ("CPU model" vs "CPU_model"),
so lookups fall back to comparing normalized keys.
"""

import json
from typing import Any, Mapping, Optional


def normalize_key(key: str) -> str:
    """Lowercase and drop spaces and underscores: "CPU_model" -> "cpumodel" """
    return key.replace(" ", "").replace("_", "").lower()


def stringify_value(value: Any) -> Optional[str]:
    """
    Render a JSON value as text for comparison

    Numbers and strings compare as their JSON text, so 1849.99 and "1849.99"
    are equal; nested values are rendered as compact JSON.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def get_data_value(data: Optional[Mapping[str, Any]], *possible_keys: str) -> Optional[str]:
    """
    Look up the first matching key in `data` and return its value as text

    Exact keys are tried in order first; failing that, the first entry of
    `data` whose normalized key equals any normalized candidate wins.
    """
    if not data:
        return None

    for key in possible_keys:
        if key in data and data[key] is not None:
            return stringify_value(data[key])

    wanted = {normalize_key(key) for key in possible_keys}
    for key, value in data.items():
        if normalize_key(key) in wanted:
            return stringify_value(value)

    return None
