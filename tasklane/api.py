"""HTTP API for users and tasks."""

from __future__ import annotations

import random
import re
from typing import Any

from flask import Blueprint, Flask, Response, jsonify, request

from tasklane.docs import swagger_spec
from tasklane.models import Task
from tasklane.tasks import TaskService
from tasklane.users import UserService

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "300",
}


def _error(status: int, message: str) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _parse_id(raw: str) -> int | None:
    return int(raw) if _ID_PATTERN.fullmatch(raw) else None


def _json_body() -> dict[str, Any] | None:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


def _required_str(body: dict[str, Any], key: str) -> str | None:
    value = body.get(key)
    return value if isinstance(value, str) and value else None


def _required_uint(body: dict[str, Any], key: str) -> int | None:
    value = body.get(key)
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return None


def _user_routes(user_service: UserService) -> Blueprint:
    routes = Blueprint("users", __name__, url_prefix="/api/v1/users")

    @routes.post("")
    def create_user():
        body = _json_body()
        name = _required_str(body, "name") if body else None
        email = _required_str(body, "email") if body else None
        if name is None or email is None or not _EMAIL_PATTERN.fullmatch(email):
            return _error(400, "Invalid input")
        try:
            user = user_service.create_user(name, email)
        except Exception:
            return _error(500, "Could not create user")
        return jsonify(user.to_dict()), 201

    @routes.get("/<raw_id>")
    def get_user_by_id(raw_id: str):
        user_id = _parse_id(raw_id)
        if user_id is None:
            return _error(400, "Invalid ID")
        try:
            user = user_service.get_user_by_id(user_id)
        except Exception as exc:
            return _error(404, f"User not found : {exc}")
        return jsonify(user.to_dict()), 200

    @routes.get("")
    def get_all_users():
        try:
            users = user_service.get_all_users()
        except Exception:
            return _error(500, "Could not get all users")
        return jsonify([user.to_dict() for user in users]), 200

    return routes


def _task_routes(task_service: TaskService) -> Blueprint:
    routes = Blueprint("tasks", __name__, url_prefix="/api/v1/tasks")

    @routes.post("")
    def create_task():
        body = _json_body()
        if body is None:
            return _error(400, "Invalid input")
        user_id = _required_uint(body, "user_id")
        title = _required_str(body, "title")
        description = _required_str(body, "description")
        if user_id is None or title is None or description is None:
            return _error(400, "Invalid input")
        try:
            task = task_service.create(user_id, title, description)
        except Exception:
            return _error(500, "Could not create task")
        return jsonify(task.to_dict()), 201

    @routes.get("")
    def get_all_tasks():
        try:
            tasks = task_service.get_all_tasks()
        except Exception:
            return _error(500, "Could not get all tasks")
        return jsonify([task.to_dict() for task in tasks]), 200

    @routes.get("/<raw_id>")
    def get_task_by_id(raw_id: str):
        task_id = _parse_id(raw_id)
        if task_id is None:
            return _error(400, "Invalid ID")
        try:
            task = task_service.get_by_id(task_id)
        except Exception as exc:
            return _error(404, f"task not found : {exc}")
        return jsonify(task.to_dict() if task is not None else None), 200

    return routes


def create_app(user_service: UserService, task_service: TaskService) -> Flask:
    """Build the web application serving users, tasks and the API description."""
    app = Flask(__name__)

    @app.before_request
    def _log_and_answer_preflight():
        if request.method == "OPTIONS":
            return Response("", status=200)
        print(f"Request: {request.method} {request.full_path.rstrip('?')}")
        return None

    @app.after_request
    def _add_cors_headers(response: Response) -> Response:
        response.headers.update(_CORS_HEADERS)
        return response

    @app.get("/swagger/doc.json")
    def swagger_document():
        return jsonify(swagger_spec())

    app.register_blueprint(_user_routes(user_service))
    app.register_blueprint(_task_routes(task_service))
    return app


def seed_tasks(
    user_service: UserService, task_service: TaskService, per_user: int = 10
) -> list[Task]:
    """Give every existing user ``per_user`` tasks with random numbers in them."""
    created = []
    for user in user_service.get_all_users():
        for _ in range(per_user):
            number = random.getrandbits(32)
            created.append(
                task_service.create(user.id, f"Task {number}", f"Description {number}")
            )
    return created