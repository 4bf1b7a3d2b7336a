"""Swagger 2.0 description of the to-do HTTP API."""

from __future__ import annotations

from typing import Any

_TITLE = "My App API"
_VERSION = "1.0"
_DESCRIPTION = "This is a sample to-do application with Swagger"


def _string() -> dict[str, str]:
    return {"type": "string"}


def _integer() -> dict[str, str]:
    return {"type": "integer"}


def swagger_spec(host: str = "localhost:8080", base_path: str = "/") -> dict[str, Any]:
    """Return a fresh Swagger 2.0 document for the API served at ``host``."""
    user_ref = {"$ref": "#/definitions/model.User"}
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": _DESCRIPTION,
            "title": _TITLE,
            "contact": {},
            "version": _VERSION,
        },
        "host": host,
        "basePath": base_path,
        "paths": {
            "/users": {
                "post": {
                    "description": "Create a new user",
                    "consumes": ["application/json"],
                    "produces": ["application/json"],
                    "tags": ["users"],
                    "summary": "Create a user",
                    "parameters": [
                        {
                            "description": "User to create",
                            "name": "user",
                            "in": "body",
                            "required": True,
                            "schema": dict(user_ref),
                        }
                    ],
                    "responses": {
                        "200": {"description": "OK", "schema": dict(user_ref)},
                        "400": {
                            "description": "Bad Request",
                            "schema": {
                                "type": "object",
                                "additionalProperties": _string(),
                            },
                        },
                    },
                }
            }
        },
        "definitions": {
            "model.Task": {
                "type": "object",
                "properties": {
                    "createdAt": _string(),
                    "des": _string(),
                    "finishedAt": _string(),
                    "id": _integer(),
                    "status": _string(),
                    "title": _string(),
                    "userID": _integer(),
                },
            },
            "model.User": {
                "type": "object",
                "properties": {
                    "email": _string(),
                    "id": _integer(),
                    "name": _string(),
                    "tasks": {
                        "type": "array",
                        "items": {"$ref": "#/definitions/model.Task"},
                    },
                },
            },
        },
    }