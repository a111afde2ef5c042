"""Cross-module index of every documented item."""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

from navindex.errors import UnknownModuleError
from navindex.item_path import ItemPath
from navindex.item_record import ItemRecord
from navindex.kind import Kind
from navindex.module_payload import ModulePayload
from navindex.module_tree import ModuleTree


@dataclass(frozen=True)
class GlobalIndex:
    """Owns all item records once aggregation completes.

    ``module_items`` keeps the per-module bucket order established by the
    module builder, as paths into ``entries`` rather than record copies.
    """

    entries: Mapping[ItemPath, ItemRecord]
    module_tree: ModuleTree
    module_items: Mapping[tuple[str, ...], Mapping[Kind, tuple[ItemPath, ...]]]
    origins: Mapping[tuple[str, ...], str]

    def __len__(self) -> int:
        """Number of indexed items."""
        return len(self.entries)

    def __iter__(self) -> Iterator[ItemPath]:
        """Iterate over fully-qualified paths in sorted order."""
        return iter(self.entries)

    def record(self, path: ItemPath) -> ItemRecord:
        """Resolve a path to its record."""
        return self.entries[path]

    def has_module(self, module_path: Sequence[str]) -> bool:
        """Check whether the module (documented or namespace-only) exists."""
        return self.module_tree.contains(module_path)

    def bucket(self, module_path: Sequence[str], kind: Kind) -> tuple[ItemPath, ...]:
        """Ordered item paths of one kind bucket; empty for namespace-only modules."""
        module = tuple(module_path)
        if not self.has_module(module):
            raise UnknownModuleError(module)
        return self.module_items.get(module, {}).get(kind, ())

    def payload_for(self, module_path: Sequence[str]) -> ModulePayload:
        """Rebuild a read-only payload view of one module for serialization."""
        module = tuple(module_path)
        buckets = {
            kind: tuple(self.entries[p] for p in self.bucket(module, kind))
            for kind in Kind.declared()
        }
        return ModulePayload(
            module_path=module,
            buckets=buckets,
            origin=self.origins.get(module, ""),
        )

    def payloads(self) -> list[ModulePayload]:
        """Payload views for every module in tree order."""
        return [self.payload_for(path) for path in self.module_tree.paths()]

    def kind_counts(self) -> dict[str, int]:
        """Number of items per kind token, for reporting."""
        counts: dict[str, int] = {}
        for path in self.entries:
            counts[path.kind.value] = counts.get(path.kind.value, 0) + 1
        return counts
