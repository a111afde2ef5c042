"""Command-line entry points for building and querying the navigation index.

``navindex build`` turns an analyzer dump into per-module ``sidebar-items.js``
fragments plus a persisted index; ``navindex query`` searches a persisted
index and ``navindex sidebar`` prints one module's navigation tree.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from navindex.build_report import BuildReport
from navindex.compute_config_hash import compute_config_hash
from navindex.errors import GenerationFailedError, NavIndexError
from navindex.index_store import load_index, save_index
from navindex.load_config import load_config
from navindex.load_records import load_records
from navindex.query_service import (
    PREFIX,
    QUALIFIED,
    SUBSTRING,
    QueryRequest,
    QueryService,
)
from navindex.render_sidebar import render_sidebar
from navindex.run_generation import run_generation
from navindex.snapshot import Snapshot, SnapshotStore
from navindex.write_sidebar_files import write_sidebar_files

logger = logging.getLogger(__name__)


def run_build(args: argparse.Namespace) -> int:
    """Execute a full generation run and write its outputs."""
    config = load_config(args.config)
    if args.workers:
        config["workers"] = args.workers
    report = BuildReport(compute_config_hash(config))

    try:
        records = load_records(
            args.records,
            separator=config["path_separator"],
            max_summary_length=config["summary"]["max_length"],
        )
        snapshot = run_generation(records, config)
    except GenerationFailedError as e:
        for err in e.errors:
            report.add_failure(str(err))
        return _fail(args, report, e)
    except NavIndexError as e:
        report.add_failure(str(e))
        return _fail(args, report, e)

    if args.report:
        report.generate_report(args.report, snapshot)
    if args.dry_run:
        print(f"Dry run complete: {len(snapshot.global_index)} items indexed")
        return 0

    out_root = args.out_dir.resolve()
    output = config["output"]
    written = write_sidebar_files(
        snapshot.global_index, out_root, output["sidebar_filename"]
    )
    save_index(
        snapshot.global_index, out_root / output["index_filename"], snapshot.config_hash
    )
    print(f"Generated {written} sidebar fragments into: {out_root}")
    return 0


def _fail(args: argparse.Namespace, report: BuildReport, error: NavIndexError) -> int:
    if args.report:
        report.generate_report(args.report, None)
    print(f"Generation failed, nothing written: {error}")
    return 1


def _open_store(index_path: Path, config: dict) -> SnapshotStore:
    index, config_hash = load_index(index_path)
    snapshot = Snapshot.create(
        index, version=1, config_hash=config_hash, separator=config["path_separator"]
    )
    return SnapshotStore(snapshot)


def run_query(args: argparse.Namespace) -> int:
    """Search a persisted index and print the JSON response."""
    config = load_config(args.config)
    store = _open_store(args.index, config)
    service = QueryService(store, max_limit=config["search"]["max_limit"])
    request = QueryRequest(
        query=args.query,
        offset=args.offset,
        limit=(
            args.limit if args.limit is not None else config["search"]["default_limit"]
        ),
        mode=args.mode,
    )
    try:
        response = service.query(request)
    except NavIndexError as e:
        print(json.dumps({"status": e.http_status, "detail": str(e)}))
        return 2
    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    return 0


def run_sidebar(args: argparse.Namespace) -> int:
    """Print the navigation tree of one module."""
    config = load_config(args.config)
    separator = config["path_separator"]
    store = _open_store(args.index, config)
    index = store.current().global_index
    try:
        node = render_sidebar(index, args.module.split(separator))
    except NavIndexError as e:
        print(json.dumps({"status": e.http_status, "detail": str(e)}))
        return 2
    print(json.dumps(node.as_dict(index, separator), indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its subcommands."""
    ap = argparse.ArgumentParser(
        description="Build and query documentation sidebar/search indexes."
    )
    ap.add_argument("--config", help="Path to YAML configuration file")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Generate sidebar fragments and an index")
    build.add_argument("records", type=Path, help="Analyzer output (JSON or YAML)")
    build.add_argument("out_dir", type=Path, help="Output directory")
    build.add_argument("--report", help="Write a JSON build report to this path")
    build.add_argument("--workers", type=int, help="Parallel module builds")
    build.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and validate the index without writing files",
    )
    build.set_defaults(func=run_build)

    query = sub.add_parser("query", help="Search a persisted index")
    query.add_argument("index", type=Path, help="Index written by 'build'")
    query.add_argument("query", help="Name prefix")
    query.add_argument("--offset", type=int, default=0)
    query.add_argument("--limit", type=int)
    modes = query.add_mutually_exclusive_group()
    modes.add_argument(
        "--substring",
        dest="mode",
        action="store_const",
        const=SUBSTRING,
        help="Match anywhere in the name",
    )
    modes.add_argument(
        "--qualified",
        dest="mode",
        action="store_const",
        const=QUALIFIED,
        help="Treat leading segments as a module path suffix, e.g. automod::Trig",
    )
    query.set_defaults(mode=PREFIX)
    query.set_defaults(func=run_query)

    sidebar = sub.add_parser("sidebar", help="Show one module's navigation tree")
    sidebar.add_argument("index", type=Path, help="Index written by 'build'")
    sidebar.add_argument("module", help="Module path, e.g. guild::automod")
    sidebar.set_defaults(func=run_sidebar)
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
