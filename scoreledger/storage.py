"""Reading and writing the records CSV file and the statistics report."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable

from scoreledger.records import User

RECORDS_FILE = "records.csv"
STATS_FILE = "stats.txt"
TIME_FORMAT = "%Y-%m-%d %I:%M:%S %p"


def parse_line(line: str) -> User:
    """Parse one comma-separated record line; fields past the sixth are ignored."""
    text = line.rstrip("\r\n")
    parts = text.split(",")
    if len(parts) < 6:
        raise ValueError(f"malformed record line: {text!r}")
    user_id, name, username, age, score, game = parts[:6]
    return User(
        id=int(user_id),
        name=name,
        username=username,
        age=int(age),
        score=int(score),
        game=game,
    )


def read_records(lines: Iterable[str]) -> list[User]:
    """Parse every non-blank line into a user."""
    return [parse_line(line) for line in lines if line.strip()]


def load_file(path: str | Path = RECORDS_FILE) -> list[User]:
    """Load records from a file; a missing file holds no records."""
    try:
        with open(path, encoding="utf-8") as handle:
            return read_records(handle)
    except FileNotFoundError:
        return []


def format_record(user: User) -> str:
    """Return the CSV line for a user, without a line ending."""
    return f"{user.id},{user.name},{user.username},{user.age},{user.score},{user.game}"


def save_file(users: Iterable[User], path: str | Path = RECORDS_FILE) -> None:
    """Overwrite the records file with the given users."""
    with open(path, "w", encoding="utf-8") as handle:
        for user in users:
            handle.write(format_record(user) + "\n")


@dataclass(frozen=True)
class Stats:
    """Summary figures over a set of records."""

    count: int
    average_age: int
    average_score: int
    oldest: int
    highest_score: int


def compute_stats(users: Iterable[User]) -> Stats | None:
    """Return summary figures, or None when there are no records."""
    users = list(users)
    if not users:
        return None
    count = len(users)
    return Stats(
        count=count,
        average_age=sum(u.age for u in users) // count,
        average_score=sum(u.score for u in users) // count,
        oldest=max(0, *(u.age for u in users)),
        highest_score=max(0, *(u.score for u in users)),
    )


def render_stats(users: Iterable[User], now: datetime | None = None) -> str:
    """Return the text of the statistics report."""
    stats = compute_stats(users)
    if stats is None:
        return "No records found."
    moment = now if now is not None else datetime.now()
    return (
        f"Number of records: {stats.count}\n"
        f"Average age: {stats.average_age}\n"
        f"Average score: {stats.average_score}\n"
        f"Oldest person: {stats.oldest}\n"
        f"Highest score: {stats.highest_score}\n"
        f"Last update: {moment.strftime(TIME_FORMAT)}\n"
    )


def write_stat_file(
    users: Iterable[User], path: str | Path = STATS_FILE, now: datetime | None = None
) -> None:
    """Overwrite the statistics file with a fresh report."""
    text = render_stats(users, now)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)