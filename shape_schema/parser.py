"""
parser.py - transport input adapters
====================================

Turns raw transport data into the plain values schemas expect.  Nothing here
validates; callers hand the result to ``schema.parse``.

Public API
----------
`parse_query(source) -> dict[str, str]`
    Query string or multi-value mapping to a flat string map (first value
    wins on duplicate keys).

`parse_body(source) -> Any`
    JSON request body (bytes / str / Path / already-decoded value) to a
    generic value.  Undecodable input raises a ``ValidationError``.

`build_arg_parser(schema) -> argparse.ArgumentParser`
    ``--flag`` per field of an object schema; values stay strings so
    coercion schemas apply.

`parse_cli(source=None, *, schema) -> dict`
    Run the generated parser over CLI tokens and return the raw mapping.
"""

from __future__ import annotations

import argparse
import json
import logging
import shlex
import sys
from pathlib import Path
from typing import Any, Mapping, Sequence
from urllib.parse import parse_qsl

from .containers import ObjectSchema
from .errors import ValidationError

log = logging.getLogger(__name__)

__all__ = [
    "parse_query",
    "parse_body",
    "build_arg_parser",
    "parse_cli",
]

# --------------------------------------------------------------------------- #
# Query strings & route params                                                #
# --------------------------------------------------------------------------- #

def parse_query(source: str | bytes | Mapping[str, Any]) -> dict[str, str]:
    """Flatten *source* into ``{key: first value}``.

    Parameters
    ----------
    source
        * ``str`` / ``bytes`` - raw query string, with or without leading ``?``.
        * ``Mapping`` - values may be strings or sequences of strings.
    """
    if isinstance(source, bytes):
        source = source.decode("utf-8")

    out: dict[str, str] = {}
    if isinstance(source, str):
        for key, value in parse_qsl(source.lstrip("?"), keep_blank_values=True):
            out.setdefault(key, value)
        return out

    if isinstance(source, Mapping):
        for key, value in source.items():
            if isinstance(value, (list, tuple)):
                if not value:
                    continue
                value = value[0]
            out[str(key)] = value
        return out

    raise TypeError(f"Unsupported type for parse_query: {type(source)}")


# --------------------------------------------------------------------------- #
# Request bodies                                                              #
# --------------------------------------------------------------------------- #

def parse_body(source: Any) -> Any:
    """Decode a JSON body.

    ``bytes`` and ``str`` are decoded as JSON text, a ``Path`` is read as a
    JSON file, and any other value is assumed to be decoded already.
    """
    if isinstance(source, Path):
        if not source.is_file():
            raise FileNotFoundError(f"Body file not found: {source}")
        source = source.read_bytes()

    if isinstance(source, (bytes, bytearray, str)):
        try:
            return json.loads(source)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            log.debug("rejecting body that is not JSON: %s", exc)
            raise ValidationError.single("", "Expected JSON body") from exc

    return source


# --------------------------------------------------------------------------- #
# Command line                                                                #
# --------------------------------------------------------------------------- #

def build_arg_parser(
    schema: ObjectSchema,
    *,
    description: str = "",
    prog: str | None = None,
) -> argparse.ArgumentParser:
    """Return an :pyclass:`argparse.ArgumentParser` for *schema*.

    Every field becomes a ``--<field-name>`` flag.  Boolean fields become
    ``store_true`` switches and enum fields restrict ``choices``; all other
    values are kept as text for the field schema to coerce.
    """
    if not isinstance(schema, ObjectSchema):
        raise TypeError(f"build_arg_parser expects an ObjectSchema, got {type(schema).__name__}")

    p = argparse.ArgumentParser(
        prog=prog,
        description=description,
        fromfile_prefix_chars="@",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="JSON file containing full input object; overrides all other flags.",
    )

    for name, field in schema.shape.items():
        if name.replace("_", "-") == "config":
            raise ValueError("field name 'config' clashes with the --config flag")
        doc = field.describe()
        kind = doc.get("type", "value")
        kwargs: dict[str, Any] = {
            "dest": name,
            "default": argparse.SUPPRESS,
            "help": f"{kind}{'' if field.is_optional else ' (required)'}",
        }
        if kind == "boolean":
            kwargs["action"] = "store_true"
        else:
            kwargs["type"] = str
            if "enum" in doc:
                kwargs["choices"] = doc["enum"]
        p.add_argument(f"--{name.replace('_', '-')}", **kwargs)

    return p


def parse_cli(
    source: None | str | Sequence[str] = None,
    *,
    schema: ObjectSchema,
) -> dict[str, Any]:
    """Convert CLI tokens to a raw ``dict`` (no validation).

    ``None`` reads ``sys.argv[1:]`` and a ``str`` is split shell-style.  With
    ``--config`` the returned dict is exactly that file's content.
    """
    argv: list[str]
    if source is None:
        argv = sys.argv[1:]
    elif isinstance(source, str):
        argv = shlex.split(source)
    elif isinstance(source, Sequence):
        argv = list(source)
    else:
        raise TypeError(f"Unsupported type for parse_cli: {type(source)}")

    parser = build_arg_parser(schema)
    namespace, unknown = parser.parse_known_args(argv)
    if unknown:
        raise ValueError(f"Unknown argument(s): {unknown}. Use --help.")
    ns_dict = vars(namespace)

    if config_file := ns_dict.pop("config", None):
        cfg_path = Path(config_file)
        if not cfg_path.is_file():
            raise FileNotFoundError(cfg_path)
        log.debug("loading CLI input from %s", cfg_path)
        return json.loads(cfg_path.read_text(encoding="utf-8"))

    return ns_dict
