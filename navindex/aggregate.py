"""Logic for merging module payloads into the global index."""

import logging
from collections.abc import Iterable
from types import MappingProxyType

from navindex.errors import PathCollisionError
from navindex.global_index import GlobalIndex
from navindex.item_path import ItemPath
from navindex.item_record import ItemRecord
from navindex.item_sort_key import item_sort_key
from navindex.kind import Kind
from navindex.module_payload import ModulePayload
from navindex.module_tree import ModuleTree

logger = logging.getLogger(__name__)


def aggregate(payloads: Iterable[ModulePayload]) -> GlobalIndex:
    """Merge every module payload of a generation run, failing on path collisions."""
    entries: dict[ItemPath, ItemRecord] = {}
    owner: dict[ItemPath, str] = {}
    module_items: dict[tuple[str, ...], dict[Kind, list[ItemPath]]] = {}
    origins: dict[tuple[str, ...], str] = {}

    for payload in payloads:
        module = payload.module_path
        buckets = module_items.setdefault(module, {k: [] for k in Kind.declared()})
        origins.setdefault(module, payload.origin)
        for rec in payload.records():
            path = rec.path
            if path in entries:
                raise PathCollisionError(path, owner[path], payload.origin)
            entries[path] = rec
            owner[path] = payload.origin
            buckets[rec.kind].append(path)

    # A module split across payloads must still end up in bucket order.
    frozen_items = {
        module: MappingProxyType(
            {
                kind: tuple(sorted(paths, key=lambda p: item_sort_key(p.name)))
                for kind, paths in buckets.items()
            }
        )
        for module, buckets in sorted(module_items.items())
    }
    sorted_entries = {
        path: entries[path] for path in sorted(entries, key=ItemPath.sort_key)
    }
    tree = ModuleTree.from_paths(module_items, populated=module_items)

    logger.debug(
        "Aggregated %d items across %d modules", len(sorted_entries), len(module_items)
    )
    return GlobalIndex(
        entries=MappingProxyType(sorted_entries),
        module_tree=tree,
        module_items=MappingProxyType(frozen_items),
        origins=MappingProxyType(dict(sorted(origins.items()))),
    )
