"""Exception types raised while building and serving the navigation index."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from navindex.item_path import ItemPath
    from navindex.item_record import ItemRecord


class NavIndexError(Exception):
    """Base class for all navindex failures."""

    http_status = 500


class InvalidRecordError(NavIndexError):
    """An analyzer record is malformed (empty name, empty module path, ...)."""

    http_status = 422


class UnknownKindError(NavIndexError):
    """A kind token is not one of the declared kinds."""

    http_status = 422

    def __init__(self, token: str) -> None:
        """Record the offending token."""
        super().__init__(f"Unknown item kind: {token!r}")
        self.token = token


class DuplicateItemError(NavIndexError):
    """Two records in one module share the same kind and name."""

    http_status = 422

    def __init__(self, records: "Sequence[ItemRecord]") -> None:
        """Keep the conflicting records so the analyzer bug can be traced."""
        first = records[0]
        module = "::".join(first.module_path)
        super().__init__(
            f"Duplicate {first.kind.value} {first.name!r} in module {module} "
            f"({len(records)} records)"
        )
        self.records = tuple(records)


class PathCollisionError(NavIndexError):
    """Two module payloads produced the same fully-qualified path."""

    http_status = 409

    def __init__(self, path: "ItemPath", first_origin: str, second_origin: str) -> None:
        """Name the colliding path and both payloads that produced it."""
        super().__init__(
            f"Path collision on {path.display()} ({path.kind.value}): "
            f"emitted by both {first_origin} and {second_origin}"
        )
        self.path = path
        self.first_origin = first_origin
        self.second_origin = second_origin


class GenerationFailedError(NavIndexError):
    """One or more module builds failed; nothing was published."""

    def __init__(self, errors: "Sequence[NavIndexError]") -> None:
        """Collect every module-level failure of the run."""
        super().__init__(
            f"{len(errors)} module build(s) failed: "
            + "; ".join(str(e) for e in errors)
        )
        self.errors = tuple(errors)


class InvalidPageError(NavIndexError):
    """A query asked for a negative offset or a non-positive limit."""

    http_status = 400

    def __init__(self, offset: int, limit: int) -> None:
        """Record the rejected pagination values."""
        super().__init__(
            f"Invalid page: offset={offset} must be >= 0 and limit={limit} must be > 0"
        )
        self.offset = offset
        self.limit = limit


class UnknownModuleError(NavIndexError):
    """The requested module path is not part of the index."""

    http_status = 404

    def __init__(self, module_path: "Sequence[str]") -> None:
        """Record the missing module path."""
        super().__init__(f"Unknown module: {'::'.join(module_path) or '<root>'}")
        self.module_path = tuple(module_path)


class SidebarFormatError(NavIndexError):
    """A sidebar-items fragment could not be parsed."""

    http_status = 422


class IndexSchemaError(NavIndexError):
    """A persisted index was written with an incompatible schema version."""


class InvalidQueryError(NavIndexError):
    """A query request is malformed in a way other than pagination."""

    http_status = 400


class StaleSnapshotError(NavIndexError):
    """A snapshot was published with a version not newer than the live one."""

    http_status = 409

    def __init__(self, version: int, last_version: int) -> None:
        """Record the rejected and the live versions."""
        super().__init__(
            f"Snapshot version {version} is not newer than {last_version}"
        )
        self.version = version
        self.last_version = last_version
