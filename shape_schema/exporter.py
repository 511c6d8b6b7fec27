"""
exporter.py - schema trees to JSON-Schema-shaped documents.

Public API
----------
to_json_schema(schema) -> dict
    Fresh structural document for *schema*; reads metadata only.

dump_json_schema(schema, path, *, indent=2) -> None
    Write that document to disk as UTF-8 JSON.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from .schema import Schema

__all__ = [
    "to_json_schema",
    "dump_json_schema",
]


def to_json_schema(schema: Schema) -> dict[str, Any]:
    """Return the structural document of *schema*.

    The result is a deep copy, so callers may mutate it freely.  Constraint
    logic is never executed and the call never raises for a valid schema.
    """
    if not isinstance(schema, Schema):
        raise TypeError(f"expected a Schema, got {type(schema).__name__}")
    return copy.deepcopy(schema.describe())


def dump_json_schema(schema: Schema, path: Path | str, *, indent: int = 2) -> None:
    """Saves the document of *schema* to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(to_json_schema(schema), indent=indent, ensure_ascii=False),
        encoding="utf-8",
    )
