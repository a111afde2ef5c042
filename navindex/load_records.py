"""Loading analyzer output (JSON or YAML) into item records."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from navindex.errors import InvalidRecordError
from navindex.item_record import ItemRecord

logger = logging.getLogger(__name__)


def load_records(
    path: Path,
    separator: str = "::",
    max_summary_length: int = 0,
) -> list[ItemRecord]:
    """Read an analyzer dump: a list of records or ``{"items": [...]}``."""
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            doc: Any = json.loads(text)
        else:
            doc = yaml.safe_load(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"{path}: cannot read analyzer output: {e}"
        raise InvalidRecordError(msg) from e

    if isinstance(doc, dict):
        doc = doc.get("items")
    if not isinstance(doc, list):
        msg = f"{path}: expected a list of item records"
        raise InvalidRecordError(msg)

    records = []
    for raw in doc:
        if not isinstance(raw, dict):
            msg = f"{path}: record {raw!r} is not a mapping"
            raise InvalidRecordError(msg)
        records.append(ItemRecord.from_raw(raw, separator, max_summary_length))

    logger.info("Loaded %d records from %s", len(records), path)
    return records
