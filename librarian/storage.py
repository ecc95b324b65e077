"""Plain-text files holding books and members, one field per line."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .models import Book, Member

PathLike = str | os.PathLike


def _read_lines(path: PathLike) -> Iterator[str] | None:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    return iter(text.splitlines())


def load_books(path: PathLike) -> list[Book]:
    """Read books from path; a missing file holds no books.

    Reading stops at the first record that is incomplete or malformed.
    """
    lines = _read_lines(path)
    if lines is None:
        return []
    books = []
    for line in lines:
        if not line.strip():
            continue
        try:
            book_id = int(line.strip())
            title = next(lines)
            author = next(lines)
            issued = int(next(lines).strip())
        except (ValueError, StopIteration):
            break
        if issued not in (0, 1):
            break
        books.append(Book(book_id, title, author, bool(issued)))
    return books


def save_books(books: Iterable[Book], path: PathLike) -> None:
    """Write books to path, replacing its contents."""
    with open(path, "w", encoding="utf-8") as out:
        for book in books:
            out.write(f"{book.id}\n{book.title}\n{book.author}\n{int(book.issued)}\n")


def load_members(path: PathLike) -> list[Member]:
    """Read members from path; a missing file holds no members."""
    lines = _read_lines(path)
    if lines is None:
        return []
    members = []
    for line in lines:
        if not line.strip():
            continue
        try:
            member_id = int(line.strip())
            name = next(lines)
        except (ValueError, StopIteration):
            break
        members.append(Member(member_id, name))
    return members


def save_members(members: Iterable[Member], path: PathLike) -> None:
    """Write members to path, replacing its contents."""
    with open(path, "w", encoding="utf-8") as out:
        for member in members:
            out.write(f"{member.member_id}\n{member.name}\n")