import pytest

from librarian.models import (
    Book,
    BookAlreadyIssuedError,
    BookNotFoundError,
    BookNotIssuedError,
    LibraryError,
    Member,
    book_header,
    member_header,
)


def test_book_row_lines_up_with_header():
    book = Book(7, "Dune", "Frank Herbert")
    assert len(book.row()) == len(book_header())
    assert book.row().startswith("7")
    assert book.row().index("Dune") == book_header().index("Title")
    assert book.row().index("Frank Herbert") == book_header().index("Author")


def test_book_row_shows_issued_state():
    book = Book(7, "Dune", "Frank Herbert")
    assert book.row().rstrip().endswith("No")
    book.issued = True
    assert book.row().rstrip().endswith("Yes")


def test_long_fields_are_not_truncated():
    title = "T" * 50
    book = Book(1, title, "A")
    assert title in book.row()


@pytest.mark.parametrize(
    "keyword, expected",
    [("dune", True), ("HERB", True), ("frank h", True), ("", True), ("asimov", False)],
)
def test_book_matches_is_case_insensitive(keyword, expected):
    assert Book(7, "Dune", "Frank Herbert").matches(keyword) is expected


def test_member_row_lines_up_with_header():
    member = Member(3, "Ada")
    assert len(member.row()) == len(member_header())
    assert member.row().index("Ada") == member_header().index("Name")
    assert member_header().startswith("Member ID")


@pytest.mark.parametrize(
    "error, message",
    [
        (BookNotFoundError, "Book not found."),
        (BookAlreadyIssuedError, "Book is already issued."),
        (BookNotIssuedError, "Book was not issued."),
    ],
)
def test_errors_carry_default_messages(error, message):
    err = error()
    assert str(err) == message
    assert isinstance(err, LibraryError)


def test_custom_message_overrides_default():
    assert str(BookNotFoundError("missing")) == "missing"