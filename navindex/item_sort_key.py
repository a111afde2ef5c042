"""Ordering rule for items inside a kind bucket."""


def item_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive lexical order, ties broken case-sensitively."""
    return name.lower(), name
