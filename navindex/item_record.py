"""Data model for one documented item as emitted by the source analyzer."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from navindex.errors import InvalidRecordError
from navindex.first_line_summary import first_line_summary
from navindex.item_path import ItemPath
from navindex.kind import Kind


@dataclass(frozen=True)
class ItemRecord:
    """Represents a documented item (struct, function, macro, etc.)."""

    name: str
    kind: Kind
    summary: str
    module_path: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate the record invariants."""
        if not isinstance(self.kind, Kind):
            msg = f"kind must be a Kind, got {self.kind!r}"
            raise InvalidRecordError(msg)
        if not self.name:
            msg = f"Item in {'::'.join(self.module_path)} has an empty name"
            raise InvalidRecordError(msg)
        if not self.module_path or any(not seg for seg in self.module_path):
            msg = f"Item {self.name!r} has an invalid module path {self.module_path!r}"
            raise InvalidRecordError(msg)
        if "\n" in self.summary or "\r" in self.summary:
            msg = f"Summary of {self.name!r} spans multiple lines"
            raise InvalidRecordError(msg)

    @property
    def path(self) -> ItemPath:
        """Fully-qualified path of this record."""
        return ItemPath(self.module_path, self.name, self.kind)

    @classmethod
    def from_raw(
        cls,
        raw: Mapping[str, Any],
        separator: str = "::",
        max_summary_length: int = 0,
    ) -> "ItemRecord":
        """Build a record from an analyzer mapping, normalizing the summary."""
        try:
            name = raw["name"]
            kind_token = raw["kind"]
            module = raw["module_path"]
        except KeyError as e:
            msg = f"Record {dict(raw)!r} is missing field {e.args[0]!r}"
            raise InvalidRecordError(msg) from None

        summary = raw.get("summary")
        for field, value, ok in (
            ("name", name, isinstance(name, str)),
            ("kind", kind_token, isinstance(kind_token, str)),
            ("summary", summary, summary is None or isinstance(summary, (str, list))),
        ):
            if not ok:
                msg = f"Record field {field!r} has unexpected value {value!r}"
                raise InvalidRecordError(msg)

        if isinstance(module, str):
            module_path = tuple(module.split(separator)) if module else ()
        elif isinstance(module, (list, tuple)) and all(
            isinstance(seg, str) for seg in module
        ):
            module_path = tuple(module)
        else:
            msg = f"Record {name!r} has an invalid module path {module!r}"
            raise InvalidRecordError(msg)

        return cls(
            name=name.strip(),
            kind=Kind.from_token(kind_token),
            summary=first_line_summary(summary, max_summary_length),
            module_path=module_path,
        )
