"""Interactive menu for managing the score records."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, TextIO

from scoreledger.records import (
    InvalidIdError,
    RecordBook,
    RecordNotFoundError,
    User,
    make_user,
)
from scoreledger.storage import RECORDS_FILE, STATS_FILE, load_file, save_file, write_stat_file

SEPARATOR = "-" * 99 + "\n"
MENU = (
    "1. Add record\n2. Edit record\n3. Delete record\n4. Sort records\n"
    "5. Find record\n6. Display records\n7. Output stat file\n\n0. Save & Quit\n"
)


class Console:
    """Line-oriented prompt and output streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def prompt(self, text: str) -> str:
        """Show text and return the next input line; raises EOFError at end of input."""
        self.write(text)
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_int(self, text: str, accept: Callable[[int], bool] | None = None) -> int:
        """Prompt until an integer that accept approves is entered."""
        while True:
            raw = self.prompt(text)
            try:
                value = int(raw)
            except ValueError:
                pass
            else:
                if accept is None or accept(value):
                    return value
            self.write("Invalid input.\n")

    def pause(self) -> None:
        """Wait for the user to press Enter."""
        self.write("\nPress Enter to continue...\n")
        try:
            self.prompt("")
        except EOFError:
            pass


def _positive(value: int) -> bool:
    return value > 0


def _ask_new_id(console: Console, book: RecordBook) -> int:
    while True:
        raw = console.prompt("Enter ID: ")
        try:
            user_id = int(raw)
        except ValueError:
            pass
        else:
            if user_id >= 0 and all(user.id != user_id for user in book):
                return user_id
        console.write("ID must be positive and unique.\n")


def _read_int(console: Console, text: str) -> int | None:
    try:
        return int(console.prompt(text))
    except ValueError:
        return None


def prompt_new_user(console: Console, book: RecordBook) -> User:
    """Ask for every field of a new record and add it to the book."""
    user_id = _ask_new_id(console, book)
    name = console.prompt("Enter name: ")
    username = console.prompt("Enter username: ")
    age = console.ask_int("Enter age: ", _positive)
    score = console.ask_int("Enter score: ", _positive)
    game = console.prompt("Enter game: ")
    user = make_user(user_id, name, username, age, score, game)
    book.add(user)
    return user


def prompt_edit_user(console: Console, book: RecordBook, user_id: int) -> User | None:
    """Ask for new field values of an existing record; None if it cannot be edited."""
    try:
        book.find(user_id)
    except InvalidIdError:
        console.write("Invalid ID\n")
        return None
    except RecordNotFoundError:
        console.write("\nRecord not found\n")
        return None
    name = console.prompt("Enter new name: ")
    username = console.prompt("Enter new username: ")
    age = console.ask_int("Enter new age: ", _positive)
    score = console.ask_int("Enter new score: ", _positive)
    game = console.prompt("Enter game: ")
    return book.replace(user_id, name, username, age, score, game)


def _delete(console: Console, book: RecordBook, user_id: int | None) -> None:
    try:
        if user_id is None:
            raise InvalidIdError("not a number")
        book.delete(user_id)
    except InvalidIdError:
        console.write("Invalid ID\n")
    except RecordNotFoundError:
        console.write("\nRecord not found\n")
    else:
        console.write("\nRecord deleted\n")


def _find(console: Console, book: RecordBook, user_id: int | None) -> None:
    try:
        if user_id is None:
            raise InvalidIdError("not a number")
        user = book.find(user_id)
    except InvalidIdError:
        console.write("Invalid ID\n")
    except RecordNotFoundError:
        console.write("\nRecord not found\n")
    else:
        console.write("\n" + user.format() + "\n")


def _sort(console: Console, book: RecordBook) -> None:
    mode = _read_int(console, "1. Sort by ID\n2. Sort by score\n3. Sort by age\n" + SEPARATOR)
    order = _read_int(console, "0. Ascending\n1. Descending\n" + SEPARATOR)
    try:
        if mode is None:
            raise ValueError("Invalid mode")
        book.sort(mode, order == 1)
    except ValueError:
        console.write("Invalid mode\n")


def _display(console: Console, book: RecordBook) -> None:
    lines = book.display_lines()
    if lines:
        console.write("".join(line + "\n" for line in lines))
    else:
        console.write("\nNo records to display\n")


def run(
    book: RecordBook,
    console: Console,
    records_path: str | Path = RECORDS_FILE,
    stats_path: str | Path = STATS_FILE,
) -> None:
    """Run the menu loop until the user saves and quits or input ends; then save."""
    try:
        while True:
            choice = _read_int(console, SEPARATOR + MENU + SEPARATOR)
            match choice:
                case 1:
                    prompt_new_user(console, book)
                case 2:
                    user_id = _read_int(console, "Enter ID to edit: ")
                    if user_id is None:
                        console.write("Invalid ID\n")
                    else:
                        prompt_edit_user(console, book, user_id)
                    console.pause()
                case 3:
                    _delete(console, book, _read_int(console, "Enter ID to delete: "))
                    console.pause()
                case 4:
                    _sort(console, book)
                case 5:
                    _find(console, book, _read_int(console, "Enter ID to find: "))
                    console.pause()
                case 6:
                    _display(console, book)
                    console.pause()
                case 7:
                    write_stat_file(book, stats_path)
                case 0:
                    break
                case _:
                    console.write("Invalid choice\n")
    except EOFError:
        pass
    save_file(book, records_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage player score records.")
    parser.add_argument("--records", default=RECORDS_FILE, help="records CSV file")
    parser.add_argument("--stats", default=STATS_FILE, help="statistics report file")
    args = parser.parse_args(argv)
    book = RecordBook(load_file(args.records))
    run(book, Console(), args.records, args.stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())