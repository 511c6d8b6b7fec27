"""
contract.py - High-level API binding schemas to a single route.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping, Sequence

from . import parser
from .errors import ValidationError
from .schema import Schema

log = logging.getLogger(__name__)

__all__ = ["Contract"]


class Contract:
    """The body, query, params and response schemas of one HTTP route.

    Only ``validate_*`` ever parses input; the OpenAPI builder reads the same
    contract through ``describe()`` alone.
    """

    def __init__(
        self,
        method: str,
        path: str,
        *,
        body: Schema | None = None,
        query: Schema | None = None,
        params: Schema | None = None,
        response: Schema | Mapping[int, Schema] | None = None,
        summary: str | None = None,
        description: str | None = None,
        tags: Sequence[str] | None = None,
        deprecated: bool = False,
        operation_id: str | None = None,
    ):
        """Initializes the Contract with its route and schema definitions."""
        for label, schema in (("body", body), ("query", query), ("params", params)):
            if schema is not None and not isinstance(schema, Schema):
                raise TypeError(f"{label} must be a Schema, got {type(schema).__name__}")
        self.method = method.upper()
        self.path = path
        self.body = body
        self.query = query
        self.params = params
        self.response = response
        self.summary = summary
        self.description = description
        self.tags = list(tags or [])
        self.deprecated = deprecated
        self.operation_id = operation_id

    def __repr__(self) -> str:
        return f"Contract({self.method} {self.path})"

    def prefixed(self, prefix: str) -> "Contract":
        """Return a copy of this contract mounted under *prefix*."""
        clone = copy.copy(self)
        clone.path = prefix.rstrip("/") + self.path if prefix else self.path
        clone.tags = list(self.tags)
        return clone

    # ------------------------------------------------------------------ #
    # Validation                                                         #
    # ------------------------------------------------------------------ #
    def validate_body(self, source: Any) -> Any:
        """Decode a JSON body and parse it against ``self.body``."""
        raw = parser.parse_body(source)
        if self.body is None:
            return raw
        return self._run("body", self.body, raw)

    def validate_query(self, source: str | bytes | Mapping[str, Any]) -> Any:
        """Flatten a query string (first value wins) and parse it."""
        raw = parser.parse_query(source)
        if self.query is None:
            return raw
        return self._run("query", self.query, raw)

    def validate_params(self, params: Mapping[str, str]) -> Any:
        raw = dict(params)
        if self.params is None:
            return raw
        return self._run("params", self.params, raw)

    def _run(self, part: str, schema: Schema, raw: Any) -> Any:
        try:
            return schema.parse(raw)
        except ValidationError as exc:
            log.debug(
                "%s %s: %s rejected with %d issue(s)",
                self.method, self.path, part, len(exc.issues),
            )
            raise

    # ------------------------------------------------------------------ #
    # Error translation                                                  #
    # ------------------------------------------------------------------ #
    @staticmethod
    def error_payload(err: ValidationError) -> tuple[int, dict[str, Any]]:
        """Translate *err* into ``(400, {"error": ..., "issues": [...]})``."""
        return 400, err.to_dict()
