"""In-memory collection of player score records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

DEFAULT_GAME = "Temple Run"


class RecordError(Exception):
    """Base class for record book errors."""


class RecordNotFoundError(RecordError, LookupError):
    """No record carries the requested ID."""


class InvalidIdError(RecordError, ValueError):
    """The ID is negative."""


class DuplicateIdError(RecordError, ValueError):
    """A record with the same ID already exists."""


@dataclass
class User:
    """One player record."""

    id: int
    name: str
    username: str
    age: int
    score: int
    game: str

    def format(self) -> str:
        """Return the record as a single tab-separated display line."""
        return (
            f"ID: {self.id}\tName: {self.name}\tUsername: {self.username}"
            f"\tAge: {self.age}\tScore: {self.score}\tGame: {self.game}"
        )


class SortField(IntEnum):
    """Field a record book can be sorted by; values match the menu numbers."""

    ID = 1
    SCORE = 2
    AGE = 3

    def key(self, user: User) -> int:
        """Return the value of this field for the given user."""
        if self is SortField.ID:
            return user.id
        if self is SortField.SCORE:
            return user.score
        return user.age


def make_user(user_id: int, name: str, username: str, age: int, score: int, game: str) -> User:
    """Build a validated user, filling blank text fields with their defaults."""
    if user_id < 0:
        raise InvalidIdError(f"ID must be non-negative, got {user_id}")
    if age <= 0:
        raise ValueError(f"age must be positive, got {age}")
    if score <= 0:
        raise ValueError(f"score must be positive, got {score}")
    return User(
        id=user_id,
        name=name or f"NoName_{user_id}",
        username=username or f"Guest_{user_id}",
        age=age,
        score=score,
        game=game or DEFAULT_GAME,
    )


class RecordBook:
    """Ordered collection of users keyed by unique ID."""

    def __init__(self, users: Iterable[User] | None = None) -> None:
        self._users: list[User] = list(users) if users is not None else []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def index_of(self, user_id: int) -> int:
        """Return the position of the record with this ID."""
        for position, user in enumerate(self._users):
            if user.id == user_id:
                return position
        raise RecordNotFoundError(f"no record with ID {user_id}")

    def _checked_index(self, user_id: int) -> int:
        if user_id < 0:
            raise InvalidIdError(f"ID must be non-negative, got {user_id}")
        return self.index_of(user_id)

    def find(self, user_id: int) -> User:
        """Return the record with this ID."""
        return self._users[self._checked_index(user_id)]

    def add(self, user: User) -> None:
        """Append a record whose ID is non-negative and not yet used."""
        if user.id < 0:
            raise InvalidIdError(f"ID must be non-negative, got {user.id}")
        if any(existing.id == user.id for existing in self._users):
            raise DuplicateIdError(f"ID {user.id} is already in use")
        self._users.append(user)

    def replace(self, user_id: int, name: str, username: str, age: int, score: int, game: str) -> User:
        """Overwrite every field except the ID of an existing record."""
        position = self._checked_index(user_id)
        updated = make_user(user_id, name, username, age, score, game)
        self._users[position] = updated
        return updated

    def delete(self, user_id: int) -> User:
        """Remove and return the record with this ID."""
        return self._users.pop(self._checked_index(user_id))

    def sort(self, field: SortField | int, descending: bool = False) -> None:
        """Sort the records in place by ID, score or age."""
        try:
            field = SortField(field)
        except ValueError:
            raise ValueError(f"Invalid mode: {field}") from None
        self._users.sort(key=field.key, reverse=descending)

    def display_lines(self) -> list[str]:
        """Return one display line per record."""
        return [user.format() for user in self._users]