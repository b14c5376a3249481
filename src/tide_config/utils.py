"""Utility functions for tide-config."""

from typing import Any


def env_var_name(key: str) -> str:
    """Environment variable that overrides a dotted key.

    Examples:
        >>> env_var_name("database.port")
        'DATABASE_PORT'
    """
    return key.replace(".", "_").upper()


def strip_quotes(value: str) -> str:
    """Remove one layer of surrounding double quotes, if present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def nest_dotted(key: str, value: Any) -> dict[str, Any]:
    """Turn a dotted key into nested single-entry dictionaries.

    Examples:
        >>> nest_dotted("a.b.c", 1)
        {'a': {'b': {'c': 1}}}
    """
    result: Any = value
    for part in reversed(key.split(".")):
        result = {part: result}
    return result


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Recursively merges nested dictionaries. Non-dict values in overlay
    completely replace corresponding values in base.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
        >>> overlay = {"b": {"c": 20}, "e": 5}
        >>> deep_merge(base, overlay)
        {'a': 1, 'b': {'c': 20, 'd': 3}, 'e': 5}
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
