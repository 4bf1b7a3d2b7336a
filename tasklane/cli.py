"""Interactive text menu for managing users and tasks."""

from __future__ import annotations

import subprocess
import sys
from contextlib import redirect_stdout, suppress
from typing import TextIO

from sqlalchemy.exc import SQLAlchemyError

from tasklane.tasks import TaskService
from tasklane.users import UserService

_HELP = (
    "Usage: todo-cli ",
    "Type your choice:",
    "   1: \t\tAdd a new task",
    "   2: \t\tList all tasks",
    "   3: \t\tMark a task as complete",
    "   4: \t\tDelete a task",
    "----------------------------------",
    "   5: \t\tAdd a new user",
    "   6: \t\tList all user",
    "   7: \t\tDelete an user",
    " C/c: \t\tClean screen",
    " q/Q: \t\tExit",
)


class TodoCli:
    """A menu loop reading choices from ``stdin`` and writing to ``stdout``."""

    def __init__(
        self,
        user_service: UserService,
        task_service: TaskService,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._users = user_service
        self._tasks = task_service
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _say(self, *parts: object) -> None:
        print(*parts, file=self._out)

    def _prompt(self, text: str) -> str:
        self._out.write(text)
        self._out.flush()
        return self._in.readline()

    def _ask_token(self, text: str) -> str:
        tokens = self._prompt(text).split()
        return tokens[0] if tokens else ""

    def _ask_uint(self, text: str) -> int:
        token = self._ask_token(text)
        return int(token) if token.isascii() and token.isdigit() else 0

    def run(self) -> None:
        """Show the menu and carry out choices until quit or end of input."""
        self._say("Hello CLI")
        actions = {
            "1": self.create_new_task,
            "2": self.list_all_tasks,
            "5": self.add_new_user,
            "6": self.list_all_users,
            "7": self.delete_user,
            "C": self._clear_quietly,
            "c": self._clear_quietly,
        }
        while True:
            self.show_help()
            line = self._prompt("\nEnter your choice: ")
            if not line:
                return
            tokens = line.split()
            if len(tokens) != 1:
                self._say("Error: Please enter a valid number!")
                continue
            choice = tokens[0]
            if choice in ("q", "Q"):
                return
            action = actions.get(choice)
            if action is None:
                self._say("Invalid choice. Please try again.")
            else:
                action()
            if not self._prompt("\nPress Enter to continue..."):
                return

    def show_help(self) -> None:
        """Write the menu."""
        for line in _HELP:
            self._say(line)

    def create_new_task(self) -> None:
        """Ask for a user id, title and description and store the task."""
        user_id = self._ask_uint("\nEnter User ID: ")
        title = self._prompt("Enter Task title: ").strip()
        description = self._prompt("Enter Task description: ").strip()
        try:
            task = self._tasks.create(user_id, title, description)
        except SQLAlchemyError as exc:
            self._say("Error: ", exc)
        else:
            self._say("Task created successfully!", task.to_dict())

    def list_all_tasks(self) -> None:
        """Write every task."""
        try:
            tasks = self._tasks.get_all_tasks()
        except SQLAlchemyError as exc:
            self._say("Error: ", exc)
            return
        with redirect_stdout(self._out):
            for task in tasks:
                task.print_out()

    def add_new_user(self) -> None:
        """Ask for a name and an e-mail address and store the user."""
        name = self._ask_token("\nEnter your name: ")
        email = self._ask_token("\nEnter your email: ")
        try:
            self._users.create_user(name, email)
        except SQLAlchemyError as exc:
            self._say("Error: ", exc)
        else:
            self._say("User created successfully!")

    def list_all_users(self) -> None:
        """Write every user with their tasks."""
        users = self._users.get_all_users()
        with redirect_stdout(self._out):
            for user in users:
                user.print_out()

    def delete_user(self) -> None:
        """Ask for a user id and delete that user."""
        user_id = self._ask_uint("\nEnter userId to delete ")
        try:
            self._users.delete_user(user_id)
        except SQLAlchemyError as exc:
            self._say("Error: ", exc)
        else:
            self._say("User deleted successfully!")

    def clear_screen(self) -> None:
        """Clear the terminal with the system's clear command.

        Raises OSError or CalledProcessError when the command fails.
        """
        if sys.platform.startswith("win"):
            self._say("Windows is supported.")
            command = ["cmd", "/c", "cls"]
        else:
            command = ["clear"]
        result = subprocess.run(command, stdout=subprocess.PIPE, check=True)
        self._out.write(result.stdout.decode(errors="replace"))
        self._out.flush()

    def _clear_quietly(self) -> None:
        with suppress(OSError, subprocess.CalledProcessError):
            self.clear_screen()