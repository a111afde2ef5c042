"""Per-module sidebar payload produced by the module index builder."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from navindex.item_record import ItemRecord
from navindex.kind import Kind


@dataclass(frozen=True)
class ModulePayload:
    """Items of one module grouped into ordered kind buckets.

    Every declared kind has a bucket, possibly empty. Instances are immutable;
    regeneration replaces them wholesale.
    """

    module_path: tuple[str, ...]
    buckets: Mapping[Kind, tuple[ItemRecord, ...]]
    origin: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        """Freeze the bucket mapping and default the origin."""
        frozen = MappingProxyType(
            {kind: tuple(self.buckets.get(kind, ())) for kind in Kind.declared()}
        )
        object.__setattr__(self, "buckets", frozen)
        if not self.origin:
            object.__setattr__(self, "origin", "::".join(self.module_path))

    def records(self) -> list[ItemRecord]:
        """Return all records in bucket order."""
        return [rec for kind in Kind.declared() for rec in self.buckets[kind]]

    def to_sidebar_dict(self) -> dict[str, list[list[str]]]:
        """Wire shape {kind: [[name, summary], ...]} for non-empty buckets."""
        return {
            kind.value: [[rec.name, rec.summary] for rec in items]
            for kind, items in self.buckets.items()
            if items
        }
