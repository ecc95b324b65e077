"""Interactive menu for the library with member registration."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .library import BOOK_FILE, MEMBER_FILE, Library
from .models import Book, LibraryError, Member, book_header


class _ConsoleInput:
    """Reads numbers and lines from a text stream the way a console does."""

    _INT = re.compile(r"[+-]?\d+")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        self._pending += line
        return bool(line)

    def read_int(self) -> int:
        """Skip whitespace, then read an integer; the rest of the line stays."""
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            self._pending = ""
            if not self._fill():
                raise EOFError("end of input")
        self._pending = stripped
        match = self._INT.match(stripped)
        if match is None:
            raise ValueError(f"expected a number, got {stripped.split()[0]!r}")
        self._pending = stripped[match.end():]
        return int(match.group())

    def ignore(self) -> None:
        """Drop a single character."""
        if self._pending or self._fill():
            self._pending = self._pending[1:]

    def read_line(self) -> str:
        """Read up to the end of the line, without the newline."""
        while "\n" not in self._pending:
            if not self._fill():
                if not self._pending:
                    raise EOFError("end of input")
                line, self._pending = self._pending, ""
                return line
        line, _, self._pending = self._pending.partition("\n")
        return line

    def discard_line(self) -> None:
        """Drop everything up to and including the next newline."""
        if "\n" in self._pending:
            self._pending = self._pending.partition("\n")[2]
        else:
            self._pending = ""


_MENU = (
    "\n--- Library Management Menu ---\n"
    "1. Add Book\n"
    "2. View All Books\n"
    "3. Issue Book\n"
    "4. Return Book\n"
    "5. Search Book\n"
    "6. Register Member\n"
    "0. Exit\n"
    "Enter your choice: "
)


def run(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    """Serve the menu until the user exits or input runs out."""
    console = _ConsoleInput(stdin)

    def say(text: str = "") -> None:
        stdout.write(text + "\n")

    def ask_int(prompt: str) -> int:
        stdout.write(prompt)
        return console.read_int()

    def add_book() -> None:
        book_id = ask_int("Enter Book ID: ")
        console.ignore()
        stdout.write("Enter Title: ")
        title = console.read_line()
        stdout.write("Enter Author: ")
        author = console.read_line()
        library.add_book(Book(book_id, title, author))
        say("Book added successfully!")

    def view_books() -> None:
        say(book_header())
        for book in library.books:
            say(book.row())

    def issue_book() -> None:
        library.issue(ask_int("Enter Book ID to issue: "))
        say("Book issued successfully.")

    def return_book() -> None:
        library.return_book(ask_int("Enter Book ID to return: "))
        say("Book returned successfully.")

    def search_book() -> None:
        console.ignore()
        stdout.write("Enter title or author keyword to search: ")
        keyword = console.read_line()
        say(book_header())
        found = library.search(keyword)
        for book in found:
            say(book.row())
        if not found:
            say("No matching books found.")

    def register_member() -> None:
        member_id = ask_int("Enter Member ID: ")
        console.ignore()
        stdout.write("Enter Member Name: ")
        library.register_member(Member(member_id, console.read_line()))
        say("Member registered successfully!")

    actions = {
        1: add_book,
        2: view_books,
        3: issue_book,
        4: return_book,
        5: search_book,
        6: register_member,
    }

    while True:
        stdout.write(_MENU)
        try:
            choice = console.read_int()
        except (EOFError, ValueError):
            choice = 0
        if choice == 0:
            say("Exiting...")
            return
        action = actions.get(choice)
        if action is None:
            say("Invalid choice.")
            continue
        try:
            action()
        except LibraryError as error:
            say(str(error))
        except (EOFError, ValueError):
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage library books and members.")
    parser.add_argument("--books", default=BOOK_FILE, help="file holding the books")
    parser.add_argument("--members", default=MEMBER_FILE, help="file holding the members")
    args = parser.parse_args(argv)
    with Library(args.books, args.members) as library:
        run(library, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())