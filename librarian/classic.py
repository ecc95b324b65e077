"""A catalogue of books with publication years, kept in memory."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .models import BookAlreadyIssuedError, BookNotFoundError, BookNotIssuedError, LibraryError
from .shell import _ConsoleInput


@dataclass
class DatedBook:
    """A book with its publication year."""

    id: int
    title: str
    author: str
    year: int
    issued: bool = False

    def describe(self) -> str:
        return (
            f"ID: {self.id}, Title: {self.title}, Author: {self.author}, "
            f"Year: {self.year}, Issued: {'Yes' if self.issued else 'No'}"
        )


@dataclass
class Catalog:
    """Books in the order they were added."""

    books: list[DatedBook] = field(default_factory=list)

    def add(self, book: DatedBook) -> None:
        self.books.append(book)

    def find(self, book_id: int) -> DatedBook:
        for book in self.books:
            if book.id == book_id:
                return book
        raise BookNotFoundError()

    def by_author(self, author: str) -> list[DatedBook]:
        """Books whose author is exactly author."""
        return [book for book in self.books if book.author == author]

    def issue(self, book_id: int) -> DatedBook:
        book = self.find(book_id)
        if book.issued:
            raise BookAlreadyIssuedError()
        book.issued = True
        return book

    def return_book(self, book_id: int) -> DatedBook:
        book = self.find(book_id)
        if not book.issued:
            raise BookNotIssuedError()
        book.issued = False
        return book

    def sorted_by_year_desc(self) -> list[DatedBook]:
        """A copy of the books, newest first."""
        return sorted(self.books, key=lambda book: book.year, reverse=True)

    def counts(self) -> tuple[int, int]:
        """The numbers of issued and of available books."""
        issued = sum(1 for book in self.books if book.issued)
        return issued, len(self.books) - issued

    def delete(self, book_id: int) -> None:
        """Remove every book with book_id."""
        kept = [book for book in self.books if book.id != book_id]
        if len(kept) == len(self.books):
            raise BookNotFoundError()
        self.books[:] = kept


_MENU = (
    "\nLibrary Management System Menu:\n"
    "1. Add Book\n"
    "2. Display All Books\n"
    "3. Search Book by ID\n"
    "4. Search Books by Author\n"
    "5. Issue Book\n"
    "6. Return Book\n"
    "7. Display Books Sorted by Year (Descending)\n"
    "8. Display Issued and Available Book Count\n"
    "9. Delete a Book\n"
    "10. Exit\n"
    "Enter your choice: "
)


def run_menu(catalog: Catalog, stdin: TextIO, stdout: TextIO) -> None:
    """Serve the menu until the user exits or input runs out."""
    console = _ConsoleInput(stdin)

    def say(text: str = "") -> None:
        stdout.write(text + "\n")

    def ask_id(prompt: str) -> int:
        stdout.write(prompt)
        book_id = console.read_int()
        console.ignore()
        return book_id

    def add() -> None:
        book_id = ask_id("Enter book ID: ")
        stdout.write("Enter title: ")
        title = console.read_line()
        stdout.write("Enter author: ")
        author = console.read_line()
        year = ask_id("Enter publication year: ")
        catalog.add(DatedBook(book_id, title, author, year))
        say("Book added successfully.")

    def display() -> None:
        say("\nLibrary Books:")
        for book in catalog.books:
            say(book.describe())

    def search() -> None:
        say(catalog.find(ask_id("Enter book ID to search: ")).describe())

    def search_author() -> None:
        stdout.write("Enter author name to search: ")
        # The menu has already consumed its newline; this drops one more character.
        console.ignore()
        author = console.read_line()
        found = catalog.by_author(author)
        for book in found:
            say(book.describe())
        if not found:
            say(f"No books found by author: {author}")

    def issue() -> None:
        catalog.issue(ask_id("Enter book ID to issue: "))
        say("Book issued successfully.")

    def give_back() -> None:
        catalog.return_book(ask_id("Enter book ID to return: "))
        say("Book returned successfully.")

    def sorted_view() -> None:
        if not catalog.books:
            say("No books in the library.")
            return
        say("\nBooks sorted by publication year (newest first):")
        for book in catalog.sorted_by_year_desc():
            say(book.describe())

    def counts() -> None:
        issued, available = catalog.counts()
        say(f"\nTotal books issued: {issued}")
        say(f"Total books available: {available}")

    def delete() -> None:
        catalog.delete(ask_id("Enter book ID to delete: "))
        say("Book deleted successfully.")

    actions = {
        1: add,
        2: display,
        3: search,
        4: search_author,
        5: issue,
        6: give_back,
        7: sorted_view,
        8: counts,
        9: delete,
    }

    while True:
        stdout.write(_MENU)
        try:
            choice = console.read_int()
        except EOFError:
            return
        except ValueError:
            console.discard_line()
            say("Invalid choice! Try again.")
            continue
        console.ignore()
        if choice == 10:
            say("Exiting...")
            return
        action = actions.get(choice)
        if action is None:
            say("Invalid choice! Try again.")
            continue
        try:
            action()
        except LibraryError as error:
            say(str(error))
        except (EOFError, ValueError):
            return


def main(argv: list[str] | None = None) -> int:
    sys.stdout.write("Welcome to Library Management System\n")
    run_menu(Catalog(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())