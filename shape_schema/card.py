# shape_schema/card.py
from __future__ import annotations
from typing import Any, Mapping, Sequence

from .schema import Schema

__all__ = ["to_markdown_card"]

def _format_scalar(v: Any) -> str:
    """Return a Markdown-safe scalar string."""
    if v is True:   return "true"
    if v is False:  return "false"
    if v is None:   return "null"
    if isinstance(v, str):
        return f"`{v}`"
    return str(v)

def _format_keyword(v: Any) -> str:
    if isinstance(v, Sequence) and not isinstance(v, (str, bytes)):
        return ", ".join(_format_scalar(x) for x in v)
    if isinstance(v, Mapping):
        # nested documents collapse to their type keyword
        return str(v.get("type", "any"))
    return _format_scalar(v)

def _bullets(doc: Mapping[str, Any], *, required: bool | None = None) -> str:
    """Return a bulleted Markdown list (no surrounding blank lines)."""
    lines: list[str] = []
    if "oneOf" in doc:
        kinds = [m.get("type", "const") for m in doc["oneOf"]]
        lines.append(f"- **type**: {' | '.join(map(str, kinds))}")
    elif "const" in doc:
        lines.append(f"- **const**: {_format_scalar(doc['const'])}")
    else:
        lines.append(f"- **type**: {doc.get('type', 'any')}")
    if required is not None:
        lines.append(f"- **required**: {_format_scalar(required)}")
    for key, value in doc.items():
        if key in ("type", "oneOf", "const", "properties", "required"):
            continue
        lines.append(f"- **{key}**: {_format_keyword(value)}")
    return "\n".join(lines)

def to_markdown_card(source: Schema | Mapping[str, Any], *, heading_level: int = 2) -> str:
    """
    Convert a schema (or its described document) into a Markdown card.

    Parameters
    ----------
    source : Schema | Mapping[str, Any]
        A schema, or the document returned by ``describe()``.  Object
        documents get one section per property; anything else renders as a
        single bullet list.
    heading_level : int, default 2
        Markdown heading level for property names (##, ###, …).

    Returns
    -------
    str
        Markdown document.
    """
    doc = source.describe() if isinstance(source, Schema) else source
    if doc.get("type") != "object" or "properties" not in doc:
        return _bullets(doc)

    h = "#" * heading_level
    required = set(doc.get("required", ()))
    parts: list[str] = []
    for name, field in doc["properties"].items():
        parts.append(f"{h} {name}")
        parts.append(_bullets(field, required=name in required))
        parts.append("")             # blank line after each section
    return "\n".join(parts).rstrip()
