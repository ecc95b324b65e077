"""Books, members and the errors raised while lending books."""

from __future__ import annotations

from dataclasses import dataclass

_ID_WIDTH = 10
_TITLE_WIDTH = 30
_AUTHOR_WIDTH = 20
_ISSUED_WIDTH = 10
_NAME_WIDTH = 30


class LibraryError(Exception):
    """Base class for failures of library operations."""

    default_message = "Library error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class BookNotFoundError(LibraryError, LookupError):
    """No book carries the requested ID."""

    default_message = "Book not found."


class BookAlreadyIssuedError(LibraryError):
    """The book is already out on loan."""

    default_message = "Book is already issued."


class BookNotIssuedError(LibraryError):
    """The book was not out on loan."""

    default_message = "Book was not issued."


def book_header() -> str:
    """Column headings for a table of books."""
    return (
        f"{'ID':<{_ID_WIDTH}}{'Title':<{_TITLE_WIDTH}}"
        f"{'Author':<{_AUTHOR_WIDTH}}{'Issued':<{_ISSUED_WIDTH}}"
    )


def member_header() -> str:
    """Column headings for a table of members."""
    return f"{'Member ID':<{_ID_WIDTH}}{'Name':<{_NAME_WIDTH}}"


@dataclass
class Book:
    """A book held by the library."""

    id: int
    title: str
    author: str
    issued: bool = False

    def row(self) -> str:
        """The book as one line of a table under book_header()."""
        issued = "Yes" if self.issued else "No"
        return (
            f"{self.id:<{_ID_WIDTH}}{self.title:<{_TITLE_WIDTH}}"
            f"{self.author:<{_AUTHOR_WIDTH}}{issued:<{_ISSUED_WIDTH}}"
        )

    def matches(self, keyword: str) -> bool:
        """True if keyword occurs in the title or author, ignoring case."""
        needle = keyword.lower()
        return needle in self.title.lower() or needle in self.author.lower()


@dataclass
class Member:
    """A registered library member."""

    member_id: int
    name: str

    def row(self) -> str:
        """The member as one line of a table under member_header()."""
        return f"{self.member_id:<{_ID_WIDTH}}{self.name:<{_NAME_WIDTH}}"