"""Logic for merging user configuration over the defaults."""

from typing import Any

ADDITIVE_KEYS = frozenset({"exclude_modules"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Nested mappings merge recursively and scalars/lists in ``update`` win,
    except for ``ADDITIVE_KEYS`` whose lists are unioned.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            result[key] = sorted(set(current) | set(value))
        else:
            result[key] = value
    return result
