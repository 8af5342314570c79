"""Small JSONL logging utilities for streaming spectrum runs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np


def _to_builtin(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value


class JsonlLogger:
    """Append JSON-serializable records to a JSON Lines file.

    NumPy scalars and arrays in a record are converted to plain Python values.
    Non-finite floats are written as ``null``.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, record: Mapping[str, Any]) -> None:
        row = {
            str(key): _finite_or_none(_to_builtin(item))
            for key, item in record.items()
        }
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(row, ensure_ascii=False) + "\n")


def _finite_or_none(value: Any) -> Any:
    if isinstance(value, float) and not np.isfinite(value):
        return None
    return value


def log_steps_jsonl(path: str | Path, steps: Iterable[Mapping[str, Any]]) -> None:
    """Write many step dictionaries to JSONL."""
    logger = JsonlLogger(path)
    for step in steps:
        logger.write(step)
