"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from common.serialization import serialize_dataclass

logger = logging.getLogger(__name__)


def save_json_record_local(record: Any, path: str | Path) -> Path:
    """
    Save a single dataclass record to a pretty-printed JSON file.

    The file is fully replaced on every call. Output is UTF-8 with a
    two-space indent and a trailing newline.

    Args:
        record: Dataclass object to save
        path: Destination file path

    Returns:
        Path to the written file.
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    serialized = serialize_dataclass(record)
    with filepath.open("w", encoding="utf-8") as f:
        f.write(json.dumps(serialized, indent=2, default=str, ensure_ascii=False) + "\n")

    logger.info("Saved record to %s", filepath)
    return filepath
