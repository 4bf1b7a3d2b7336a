"""Storage and service layer for users."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from tasklane.models import User


def _commit(session: Session) -> None:
    try:
        session.commit()
    except Exception:
        session.rollback()
        raise


class UserRepository:
    """Reads and writes users through a database session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_all(self) -> list[User]:
        """Return every user with their tasks, ordered by id."""
        query = select(User).options(selectinload(User.tasks)).order_by(User.id)
        return list(self._session.scalars(query))

    def create(self, user: User) -> None:
        """Store a new user, filling in the id and defaults."""
        self._session.add(user)
        _commit(self._session)
        self._session.refresh(user)

    def delete_by_id(self, user_id: int) -> None:
        """Delete the user with this id; a missing id is not an error."""
        self._session.execute(delete(User).where(User.id == user_id))
        _commit(self._session)

    def get_by_id(self, user_id: int) -> User:
        """Return the user with this id and their tasks.

        Raises LookupError when no user has this id.
        """
        user = self._session.get(User, user_id, options=[selectinload(User.tasks)])
        if user is None:
            raise LookupError("record not found")
        return user


class UserService:
    """User operations on top of a repository."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def create_user(self, name: str, email: str) -> User:
        """Create and store a user."""
        user = User(name=name, email=email)
        self._repository.create(user)
        return user

    def get_user_by_id(self, user_id: int) -> User:
        """Return one user; raises LookupError when there is none."""
        return self._repository.get_by_id(user_id)

    def get_all_users(self) -> list[User]:
        """Return every user."""
        return self._repository.get_all()

    def delete_user(self, user_id: int) -> None:
        """Delete one user."""
        self._repository.delete_by_id(user_id)