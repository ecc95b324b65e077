import io

import pytest

from librarian.library import Library
from librarian.models import Book, Member, book_header
from librarian.shell import main, run
from librarian.storage import load_books, load_members, save_books


@pytest.fixture
def library(tmp_path):
    return Library(tmp_path / "books.dat", tmp_path / "members.dat")


def session(library, text):
    out = io.StringIO()
    run(library, io.StringIO(text), out)
    return out.getvalue()


def test_add_issue_and_return(library):
    output = session(library, "1\n5\nDune\nFrank Herbert\n3\n5\n3\n5\n4\n5\n4\n5\n0\n")
    assert library.books == [Book(5, "Dune", "Frank Herbert")]
    assert "Book added successfully!" in output
    assert output.count("Book issued successfully.") == 1
    assert "Book is already issued." in output
    assert "Book returned successfully." in output
    assert "Book was not issued." in output
    assert output.endswith("Exiting...\n")


def test_issue_unknown_book(library):
    output = session(library, "3\n42\n0\n")
    assert "Book not found." in output


def test_search_lists_matches(library):
    library.add_book(Book(5, "Dune", "Frank Herbert"))
    library.add_book(Book(6, "Emma", "Jane Austen"))
    output = session(library, "5\nHERBERT\n0\n")
    assert book_header() in output
    assert Book(5, "Dune", "Frank Herbert").row() in output
    assert "Emma" not in output


def test_search_without_matches(library):
    output = session(library, "5\nnothing\n0\n")
    assert "No matching books found." in output


def test_view_books(library):
    library.add_book(Book(5, "Dune", "Frank Herbert", True))
    output = session(library, "2\n0\n")
    assert book_header() + "\n" + Book(5, "Dune", "Frank Herbert", True).row() in output


def test_register_member(library):
    output = session(library, "6\n9\nAda Lovelace\n0\n")
    assert library.members == [Member(9, "Ada Lovelace")]
    assert "Member registered successfully!" in output


def test_invalid_choice_then_end_of_input(library):
    output = session(library, "7\n")
    assert "Invalid choice." in output
    assert output.endswith("Exiting...\n")


def test_main_saves_on_exit(tmp_path, monkeypatch, capsys):
    books, members = tmp_path / "books.dat", tmp_path / "members.dat"
    save_books([Book(5, "Dune", "Frank Herbert")], books)
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n5\n6\n1\nAda\n0\n"))
    assert main(["--books", str(books), "--members", str(members)]) == 0
    assert load_books(books) == [Book(5, "Dune", "Frank Herbert", True)]
    assert load_members(members) == [Member(1, "Ada")]
    assert "Book issued successfully." in capsys.readouterr().out