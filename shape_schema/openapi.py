"""
openapi.py - assemble an OpenAPI 3.1 document from route contracts.

Only ``describe()`` is called on the schemas involved; nothing is parsed.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping

from .contract import Contract
from .schema import Schema

log = logging.getLogger(__name__)

__all__ = [
    "STATUS_DESCRIPTIONS",
    "build_openapi_spec",
]

STATUS_DESCRIPTIONS: dict[int, str] = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}

_PARAM_RE = re.compile(r":([^/]+)")


def _openapi_path(path: str) -> str:
    """``/users/:id`` -> ``/users/{id}``."""
    return _PARAM_RE.sub(r"{\1}", path)


def _is_wildcard(path: str) -> bool:
    return path == "*" or path.endswith("/*")


def _json_content(schema: Schema) -> dict[str, Any]:
    return {"application/json": {"schema": schema.describe()}}


def _parameters(contract: Contract) -> list[dict[str, Any]]:
    params: list[dict[str, Any]] = [
        {"name": name, "in": "path", "required": True, "schema": {"type": "string"}}
        for name in _PARAM_RE.findall(contract.path)
    ]
    if contract.query is not None:
        doc = contract.query.describe()
        if doc.get("type") == "object" and doc.get("properties"):
            required = set(doc.get("required", ()))
            for name, schema in doc["properties"].items():
                params.append(
                    {"name": name, "in": "query", "required": name in required, "schema": schema}
                )
    return params


def _responses(response: Schema | Mapping[int, Schema] | None) -> dict[str, Any]:
    if response is None:
        return {"200": {"description": "OK"}}
    if isinstance(response, Schema):
        return {"200": {"description": "OK", "content": _json_content(response)}}
    return {
        str(status): {
            "description": STATUS_DESCRIPTIONS.get(int(status), "Response"),
            "content": _json_content(schema),
        }
        for status, schema in response.items()
    }


def build_openapi_spec(
    contracts: Iterable[Contract],
    info: Mapping[str, Any],
) -> dict[str, Any]:
    """Return ``{"openapi": "3.1.0", "info": ..., "paths": ...}``.

    Parameters
    ----------
    contracts : Iterable[Contract]
        Registered routes.  Wildcard routes are skipped.
    info : Mapping[str, Any]
        OpenAPI ``info`` object; must carry ``title`` and ``version``.
    """
    missing = [k for k in ("title", "version") if k not in info]
    if missing:
        raise ValueError(f"OpenAPI info is missing required keys: {missing}")

    paths: dict[str, dict[str, Any]] = {}
    for contract in contracts:
        if _is_wildcard(contract.path):
            log.debug("skipping wildcard route %s", contract.path)
            continue

        operation: dict[str, Any] = {}
        if contract.summary:      operation["summary"] = contract.summary
        if contract.description:  operation["description"] = contract.description
        if contract.tags:         operation["tags"] = list(contract.tags)
        if contract.deprecated:   operation["deprecated"] = True
        if contract.operation_id: operation["operationId"] = contract.operation_id

        parameters = _parameters(contract)
        if parameters:
            operation["parameters"] = parameters

        if contract.body is not None:
            operation["requestBody"] = {"required": True, "content": _json_content(contract.body)}

        operation["responses"] = _responses(contract.response)

        item = paths.setdefault(_openapi_path(contract.path), {})
        item[contract.method.lower()] = operation

    return {"openapi": "3.1.0", "info": dict(info), "paths": paths}
