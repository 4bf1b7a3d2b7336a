from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasklane.models import Base, Task, User


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as db:
        yield db
    engine.dispose()


@pytest.fixture
def user(session):
    person = User(name="Ann", email="ann@example.com")
    session.add(person)
    session.flush()
    return person


def test_defaults_are_filled_on_insert(session, user):
    task = Task(user_id=user.id, title="Write", des="draft")
    session.add(task)
    session.flush()
    assert task.status == "pending"
    assert user.role == "user"
    assert isinstance(task.created_at, datetime)
    assert task.finished_at is None


def test_task_to_dict(session, user):
    task = Task(user_id=user.id, title="Write", des="draft")
    session.add(task)
    session.flush()
    data = task.to_dict()
    assert set(data) == {
        "id",
        "user_id",
        "title",
        "description",
        "status",
        "createdAt",
        "finishedAt",
    }
    assert data["id"] == task.id
    assert data["user_id"] == user.id
    assert data["title"] == "Write"
    assert data["description"] == "draft"
    assert data["status"] == "pending"
    assert data["createdAt"] == task.created_at.isoformat()
    assert data["finishedAt"] is None


def test_user_to_dict_nests_tasks(session, user):
    first = Task(user_id=user.id, title="One", des="a")
    second = Task(user_id=user.id, title="Two", des="b")
    session.add_all([first, second])
    session.commit()
    data = user.to_dict()
    assert data["name"] == "Ann"
    assert data["email"] == "ann@example.com"
    assert data["role"] == "user"
    assert [t["id"] for t in data["tasks"]] == [first.id, second.id]
    assert [t["title"] for t in data["tasks"]] == ["One", "Two"]


def test_email_is_unique(session, user):
    session.add(User(name="Other", email="ann@example.com"))
    with pytest.raises(IntegrityError):
        session.flush()


def test_title_is_required(session, user):
    session.add(Task(user_id=user.id, title=None, des="x"))
    with pytest.raises(IntegrityError):
        session.flush()


def test_task_print_out(session, user, capsys):
    task = Task(user_id=user.id, title="Write", des="draft")
    session.add(task)
    session.flush()
    task.print_out()
    out = capsys.readouterr().out
    assert out == (
        f"Task ID: {task.id}, User ID: {user.id},   Title: Write,  "
        "Des: draft, Status: pending\n"
    )


def test_user_print_out(session, user, capsys):
    task = Task(user_id=user.id, title="Write", des="draft")
    session.add(task)
    session.commit()
    user.print_out()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "===================",
        "",
        f"User Id: {user.id},  name: Ann, email: ann@example.com",
        "Tasks:",
        "",
        f"Task ID: {task.id}, User ID: {user.id},   Title: Write,  "
        "Des: draft, Status: pending",
        "===================",
        "",
    ]