"""Database models for users and their tasks."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base for the to-do tables."""


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class Task(Base):
    """A task that belongs to one user."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    des: Mapped[Optional[str]] = mapped_column(String(100), default="")
    status: Mapped[str] = mapped_column(
        String(20), default="pending", server_default="pending"
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    finished_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, default=None
    )

    def print_out(self) -> None:
        """Write a one-line summary of the task to standard output."""
        print(
            f"Task ID: {self.id}, User ID: {self.user_id},   Title: {self.title},  "
            f"Des: {self.des}, Status: {self.status}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the task as a JSON-ready mapping."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.des,
            "status": self.status,
            "createdAt": _iso(self.created_at),
            "finishedAt": _iso(self.finished_at),
        }


class User(Base):
    """A user who owns tasks."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    tasks: Mapped[list[Task]] = relationship(order_by=Task.id)
    role: Mapped[str] = mapped_column(
        String(20), default="user", server_default="user"
    )

    def print_out(self) -> None:
        """Write the user and all of their tasks to standard output."""
        print("===================\n")
        print(f"User Id: {self.id},  name: {self.name}, email: {self.email}")
        print("Tasks:\n")
        for task in self.tasks:
            task.print_out()
        print("===================\n")

    def to_dict(self) -> dict[str, Any]:
        """Return the user and their tasks as a JSON-ready mapping."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "tasks": [task.to_dict() for task in self.tasks],
            "role": self.role,
        }