"""A library of books and members kept in files between sessions."""

from __future__ import annotations

from pathlib import Path

from .models import (
    Book,
    BookAlreadyIssuedError,
    BookNotFoundError,
    BookNotIssuedError,
    Member,
)
from .storage import PathLike, load_books, load_members, save_books, save_members

BOOK_FILE = "books.dat"
MEMBER_FILE = "members.dat"


class Library:
    """Books and members loaded from files on creation.

    Used as a context manager, the library writes itself back on exit.
    """

    def __init__(self, book_path: PathLike = BOOK_FILE, member_path: PathLike = MEMBER_FILE) -> None:
        self.book_path = Path(book_path)
        self.member_path = Path(member_path)
        self.books: list[Book] = load_books(self.book_path)
        self.members: list[Member] = load_members(self.member_path)

    def add_book(self, book: Book) -> None:
        self.books.append(book)

    def find(self, book_id: int) -> Book:
        """The first book with book_id, or BookNotFoundError."""
        for book in self.books:
            if book.id == book_id:
                return book
        raise BookNotFoundError()

    def issue(self, book_id: int) -> Book:
        book = self.find(book_id)
        if book.issued:
            raise BookAlreadyIssuedError()
        book.issued = True
        return book

    def return_book(self, book_id: int) -> Book:
        book = self.find(book_id)
        if not book.issued:
            raise BookNotIssuedError()
        book.issued = False
        return book

    def search(self, keyword: str) -> list[Book]:
        """Books whose title or author contains keyword, ignoring case."""
        return [book for book in self.books if book.matches(keyword)]

    def register_member(self, member: Member) -> None:
        self.members.append(member)

    def save(self) -> None:
        save_books(self.books, self.book_path)
        save_members(self.members, self.member_path)

    def __enter__(self) -> Library:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.save()
        return False