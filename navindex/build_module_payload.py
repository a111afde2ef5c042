"""Logic for turning one module's analyzer records into a sidebar payload."""

from collections.abc import Iterable, Sequence

from navindex.errors import DuplicateItemError, InvalidRecordError
from navindex.item_record import ItemRecord
from navindex.item_sort_key import item_sort_key
from navindex.kind import Kind
from navindex.module_payload import ModulePayload


def build_module_payload(
    module_path: Sequence[str],
    records: Iterable[ItemRecord],
    origin: str | None = None,
) -> ModulePayload:
    """Group, validate and sort the records belonging to one module."""
    module = tuple(module_path)
    groups: dict[Kind, dict[str, list[ItemRecord]]] = {k: {} for k in Kind.declared()}

    for rec in records:
        if rec.module_path != module:
            msg = (
                f"Record {rec.name!r} belongs to {'::'.join(rec.module_path)}, "
                f"not {'::'.join(module)}"
            )
            raise InvalidRecordError(msg)
        groups[rec.kind].setdefault(rec.name, []).append(rec)

    buckets: dict[Kind, tuple[ItemRecord, ...]] = {}
    for kind, by_name in groups.items():
        for same_name in by_name.values():
            if len(same_name) > 1:
                raise DuplicateItemError(same_name)
        buckets[kind] = tuple(
            sorted(
                (recs[0] for recs in by_name.values()),
                key=lambda r: item_sort_key(r.name),
            )
        )

    return ModulePayload(module_path=module, buckets=buckets, origin=origin or "")
