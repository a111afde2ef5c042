"""Logic for writing one sidebar fragment per module to disk."""

import logging
from pathlib import Path

from navindex.global_index import GlobalIndex
from navindex.sidebar_items_js import to_sidebar_js

logger = logging.getLogger(__name__)


def sidebar_file_for_module(
    out_root: Path, module_path: tuple[str, ...], filename: str
) -> Path:
    """guild::automod -> out_root/guild/automod/sidebar-items.js."""
    p = out_root.joinpath(*module_path) / filename
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_sidebar_files(
    index: GlobalIndex, out_root: Path, filename: str = "sidebar-items.js"
) -> int:
    """Write a fragment for every module, namespace-only ones included."""
    written = 0
    for payload in index.payloads():
        out_file = sidebar_file_for_module(out_root, payload.module_path, filename)
        out_file.write_text(to_sidebar_js(payload), encoding="utf-8")
        written += 1
    logger.debug("Wrote %d sidebar fragments under %s", written, out_root)
    return written
