"""Orchestration of one generation run: build, aggregate, index, publish."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from navindex.aggregate import aggregate
from navindex.build_module_payload import build_module_payload
from navindex.compute_config_hash import compute_config_hash
from navindex.errors import GenerationFailedError, NavIndexError
from navindex.item_record import ItemRecord
from navindex.module_payload import ModulePayload
from navindex.snapshot import Snapshot, SnapshotStore

logger = logging.getLogger(__name__)


def group_by_module(
    records: Iterable[ItemRecord],
) -> dict[tuple[str, ...], list[ItemRecord]]:
    """Split a flat analyzer stream into per-module record lists."""
    by_module: dict[tuple[str, ...], list[ItemRecord]] = {}
    for rec in records:
        by_module.setdefault(rec.module_path, []).append(rec)
    return by_module


def build_payloads(
    records_by_module: Mapping[tuple[str, ...], Sequence[ItemRecord]],
    workers: int = 4,
) -> list[ModulePayload]:
    """Build every module payload in parallel and wait for all of them.

    Each module build runs to completion even when another fails; failures
    are raised together afterwards.
    """
    modules = sorted(records_by_module)
    payloads: list[ModulePayload] = []
    errors: list[NavIndexError] = []

    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        futures = [
            pool.submit(build_module_payload, module, records_by_module[module])
            for module in modules
        ]
        for module, future in zip(modules, futures):
            try:
                payloads.append(future.result())
            except NavIndexError as e:
                logger.error("Module %s failed: %s", "::".join(module), e)
                errors.append(e)

    if errors:
        raise GenerationFailedError(errors)
    return payloads


def run_generation(
    records: Iterable[ItemRecord],
    config: dict[str, Any],
    store: SnapshotStore | None = None,
) -> Snapshot:
    """Build a complete snapshot and, when a store is given, publish it.

    Any failure leaves the store untouched.
    """
    separator = config.get("path_separator", "::")
    excluded = [tuple(m.split(separator)) for m in config.get("exclude_modules", [])]
    by_module = {
        module: recs
        for module, recs in group_by_module(records).items()
        if not any(module[: len(prefix)] == prefix for prefix in excluded)
    }
    logger.info("Building %d module payloads", len(by_module))
    payloads = build_payloads(by_module, workers=int(config.get("workers", 1)))

    index = aggregate(payloads)
    version = store.next_version() if store is not None else 1
    snapshot = Snapshot.create(
        index,
        version=version,
        config_hash=compute_config_hash(config),
        separator=separator,
    )

    if store is not None:
        store.publish(snapshot)
    return snapshot
