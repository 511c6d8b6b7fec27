"""
example.py - end-to-end walkthrough of shape-schema.

1. **Schema Building**: composing primitives, containers and modifiers
2. **Route Contracts**: validating a JSON body, a query string and params
3. **Error Payloads**: turning a ValidationError into a 400 response body
4. **Documentation**: OpenAPI document and a Markdown reference card
"""
from __future__ import annotations

import json
import logging

import shape_schema as ss
from shape_schema import Contract, ValidationError

# --------------------------------------------------------------------------- #
# Logging Configuration                                                       #
# --------------------------------------------------------------------------- #
logging.basicConfig(
    level="DEBUG",
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
log = logging.getLogger("shape_schema.examples")

# --------------------------------------------------------------------------- #
# Step 1: Build schemas once, at setup time                                   #
# --------------------------------------------------------------------------- #
user = ss.object({
    "name":    ss.string().min(1).max(64),
    "email":   ss.string().pattern(r"[^@\s]+@[^@\s]+"),
    "age":     ss.number().integer().min(0).optional(),
    "role":    ss.enum(["admin", "member"]),
    "born":    ss.date().max("2024-12-31").optional(),
    "tags":    ss.array(ss.string().transform(str.lower)).max(5),
})

create_user = Contract(
    "POST", "/users",
    body=user,
    response={201: user, 400: ss.object({"error": ss.string()})},
    summary="Create a user",
    tags=["users"],
)
list_users = Contract(
    "GET", "/users",
    query=ss.object({
        "page":   ss.coerce.number().integer().min(1),
        "active": ss.coerce.boolean().optional(),
    }),
    response=ss.array(user),
)
get_user = Contract(
    "GET", "/users/:id",
    params=ss.object({"id": ss.coerce.number().integer()}),
    response=user,
)

# --------------------------------------------------------------------------- #
# Step 2: Validate requests                                                   #
# --------------------------------------------------------------------------- #
body = create_user.validate_body(
    b'{"name": "Ada", "email": "ada@example.com", "role": "admin", "tags": ["Math"]}'
)
log.info("body: %s", body)
log.info("query: %s", list_users.validate_query("page=2&active=true&page=9"))
log.info("params: %s", get_user.validate_params({"id": "42"}))

# --------------------------------------------------------------------------- #
# Step 3: Report every problem at once                                        #
# --------------------------------------------------------------------------- #
try:
    create_user.validate_body({"name": "", "email": "nope", "role": "root", "tags": [1]})
except ValidationError as err:
    status, payload = Contract.error_payload(err)
    log.info("%d %s", status, json.dumps(payload, indent=2))

# --------------------------------------------------------------------------- #
# Step 4: Documentation                                                       #
# --------------------------------------------------------------------------- #
spec = ss.build_openapi_spec(
    [create_user, list_users, get_user],
    {"title": "Users API", "version": "1.0.0"},
)
print(json.dumps(spec, indent=2))
print(ss.to_markdown_card(user))
