"""Paginated search facade over the live snapshot."""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from navindex.errors import InvalidPageError, InvalidQueryError
from navindex.snapshot import Snapshot, SnapshotStore

logger = logging.getLogger(__name__)

PREFIX = "prefix"
SUBSTRING = "substring"
QUALIFIED = "qualified"
MODES = (PREFIX, SUBSTRING, QUALIFIED)


@dataclass(frozen=True)
class QueryRequest:
    """An interactive search request."""

    query: str
    offset: int = 0
    limit: int = 20
    mode: str = PREFIX


@dataclass(frozen=True)
class QueryResult:
    """One hit: everything a caller needs to render a result row."""

    path: str
    kind: str
    summary: str


@dataclass(frozen=True)
class QueryResponse:
    """A page of results plus the total number of matches."""

    total: int
    results: list[QueryResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Wire form: {total, results: [{path, kind, summary}]}."""
        return asdict(self)


class QueryService:
    """Answers search queries; safe to call concurrently from many threads."""

    def __init__(self, store: SnapshotStore, max_limit: int = 200) -> None:
        """Serve queries from whatever snapshot ``store`` has published."""
        self.store = store
        self.max_limit = max_limit

    def query(self, request: QueryRequest) -> QueryResponse:
        """Run a search and return the requested page."""
        if request.offset < 0 or request.limit <= 0:
            raise InvalidPageError(request.offset, request.limit)
        if request.mode not in MODES:
            msg = f"Unknown query mode: {request.mode!r}"
            raise InvalidQueryError(msg)

        # One read of the store per request; a concurrent publish cannot
        # mix two generations into a single response.
        snapshot = self.store.current()
        if snapshot is None:
            return QueryResponse(total=0)

        return self._page(snapshot, request)

    def _page(self, snapshot: Snapshot, request: QueryRequest) -> QueryResponse:
        search = snapshot.search_index
        if request.mode == SUBSTRING:
            hits = search.lookup_substring(request.query)
        elif request.mode == QUALIFIED:
            hits = search.lookup_qualified(request.query)
        else:
            hits = search.lookup_prefix(request.query)

        limit = min(request.limit, self.max_limit)
        page = hits[request.offset : request.offset + limit]
        index = snapshot.global_index
        results = [
            QueryResult(
                path=path.display(search.separator),
                kind=path.kind.value,
                summary=index.record(path).summary,
            )
            for path in page
        ]
        logger.debug(
            "Query %r matched %d items (v%d)",
            request.query,
            len(hits),
            snapshot.version,
        )
        return QueryResponse(total=len(hits), results=results)
