"""
coerce.py - factories for schemas that convert their input first.

Used for transports that only carry text, such as query strings and route
parameters::

    query = ss.object({"page": ss.coerce.number().integer().min(1)})
    query.parse({"page": "3"})   # -> {"page": 3}
"""

from __future__ import annotations

from .primitives import CoercedBooleanSchema, CoercedNumberSchema, CoercedStringSchema

__all__ = ["string", "number", "boolean"]


def string() -> CoercedStringSchema:
    return CoercedStringSchema()


def number() -> CoercedNumberSchema:
    return CoercedNumberSchema()


def boolean() -> CoercedBooleanSchema:
    return CoercedBooleanSchema()
