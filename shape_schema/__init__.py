"""
shape_schema – declarative runtime validation for decoded JSON, query strings
and route parameters.
"""
from . import coerce
from .builders import (
    array,
    boolean,
    date,
    enum,
    literal,
    number,
    object,
    record,
    string,
    union,
)
from .card import to_markdown_card
from .contract import Contract
from .errors import Issue, ValidationError
from .exporter import dump_json_schema, to_json_schema
from .openapi import build_openapi_spec
from .parser import parse_body, parse_cli, parse_query
from .schema import MISSING, Schema

__all__ = [
    "MISSING",
    "Schema",
    "Issue",
    "ValidationError",
    "string", "number", "boolean",
    "array", "object", "record",
    "enum", "literal", "union",
    "date",
    "coerce",
    "to_json_schema",
    "dump_json_schema",
    "build_openapi_spec",
    "Contract",
    "parse_body",
    "parse_query",
    "parse_cli",
    "to_markdown_card",
]
