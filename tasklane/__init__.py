"""A small to-do service with users and tasks, a JSON API, a text menu, and string and number helpers."""

__version__ = "0.1.0"

__all__ = [
    "api",
    "cli",
    "docs",
    "maths",
    "models",
    "people",
    "stringutils",
    "tasks",
    "tutorial",
    "users",
]