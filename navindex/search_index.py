"""Prefix-searchable view over the global index."""

import logging
from bisect import bisect_left
from collections.abc import Sequence

from navindex.global_index import GlobalIndex
from navindex.item_path import ItemPath

logger = logging.getLogger(__name__)


class SearchIndex:
    """Sorted name table over ``GlobalIndex.entries``.

    Holds item paths only; summaries are always read back from the global
    index. There is no incremental update: a new generation builds a new
    instance.
    """

    def __init__(
        self, rows: Sequence[tuple[str, ItemPath]], separator: str = "::"
    ) -> None:
        """Wrap rows of (lowercased name, path) already sorted by name."""
        self._rows = tuple(rows)
        self._keys = [key for key, _ in self._rows]
        self.separator = separator

    @classmethod
    def build(cls, index: GlobalIndex, separator: str = "::") -> "SearchIndex":
        """Single pass over the global index entries."""
        rows = sorted(
            ((path.name.lower(), path) for path in index.entries),
            key=lambda row: (row[0], row[1].sort_key()),
        )
        logger.debug("Built search index with %d names", len(rows))
        return cls(rows, separator)

    def __len__(self) -> int:
        """Number of searchable names."""
        return len(self._rows)

    def lookup_prefix(self, query: str) -> list[ItemPath]:
        """Return ranked paths whose name starts with ``query``, ignoring case.

        The query is matched literally; an empty query matches nothing.
        """
        if not query:
            return []
        return self._rank(self._prefix_range(query.lower()), query.lower())

    def lookup_substring(self, query: str) -> list[ItemPath]:
        """Return ranked paths whose name contains ``query``, ignoring case."""
        if not query:
            return []
        needle = query.lower()
        hits = [path for key, path in self._rows if needle in key]
        return self._rank(hits, needle)

    def lookup_qualified(self, query: str) -> list[ItemPath]:
        """Prefix search scoped by module, e.g. ``automod::Trig``.

        Everything after the last separator is the name prefix; the segments
        before it must match the tail of the item's module path, ignoring case.
        """
        parts = query.strip().lower().split(self.separator)
        qualifier = tuple(p.strip() for p in parts[:-1] if p.strip())
        needle = parts[-1].strip()
        if not needle:
            return []
        hits = [p for p in self._prefix_range(needle) if self._qualified(p, qualifier)]
        return self._rank(hits, needle)

    def _prefix_range(self, needle: str) -> list[ItemPath]:
        hits = []
        i = bisect_left(self._keys, needle)
        while i < len(self._keys) and self._keys[i].startswith(needle):
            hits.append(self._rows[i][1])
            i += 1
        return hits

    @staticmethod
    def _qualified(path: ItemPath, qualifier: tuple[str, ...]) -> bool:
        if not qualifier:
            return True
        if len(qualifier) > len(path.module_path):
            return False
        tail = path.module_path[len(path.module_path) - len(qualifier) :]
        return tuple(seg.lower() for seg in tail) == qualifier

    @staticmethod
    def _rank(hits: list[ItemPath], needle: str) -> list[ItemPath]:
        # Exact match, then shorter names, then kind tier, then lexical.
        return sorted(
            hits,
            key=lambda p: (
                p.name.lower() != needle,
                len(p.name),
                p.kind.search_rank,
                p.name.lower(),
                p.name,
                p.module_path,
                p.kind.value,
            ),
        )
