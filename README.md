# librarian

A small console tool for running a library: it keeps a catalogue of books,
records which ones are on loan, searches them and registers members.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## The `librarian` command

    librarian [--books FILE] [--members FILE]

This opens a menu:

    --- Library Management Menu ---
    1. Add Book
    2. View All Books
    3. Issue Book
    4. Return Book
    5. Search Book
    6. Register Member
    0. Exit

Books are kept in `books.dat` and members in `members.dat` in the current
directory, unless `--books` or `--members` names another file. Both files are
read at start-up (a missing file simply means an empty list) and written back
when the menu ends. The menu also ends when input runs out or when the choice
entered is not a number.

Search ignores case and finds the keyword anywhere in a book's title or
author. Issuing a book that is already out, returning one that is not on
loan, or naming an unknown ID prints a message and returns to the menu.

### File format

Each file holds one field per line. A book takes four lines: its ID, title,
author and `1` or `0` for whether it is issued. A member takes two lines: ID
and name. Blank lines between records are skipped; reading stops at the first
incomplete or malformed record.

## The `librarian-classic` command

    librarian-classic

This is an in-memory catalogue in which every book also has a publication
year. Its menu adds and lists books, searches by ID or by exact author name,
issues and returns books, lists books newest first, counts books issued and
available, and deletes a book by ID. Option `10` exits. Nothing is saved
between runs.

## Using it from Python

    from librarian.library import Library
    from librarian.models import Book, Member

    with Library() as library:
        library.add_book(Book(1, "Dune", "Frank Herbert"))
        library.register_member(Member(7, "Ada"))
        library.issue(1)
        for book in library.search("herbert"):
            print(book.row())

`Library(book_path, member_path)` loads both files on creation; `save()`
writes them, and leaving a `with` block calls it. `find` and `issue` raise
`BookNotFoundError` for an unknown ID, `issue` raises
`BookAlreadyIssuedError` for a book that is already out, and `return_book`
raises `BookNotIssuedError` for a book that is not on loan. All of these
derive from `LibraryError`.

`librarian.models` also offers `book_header()` and `member_header()`, the
column headings that go with `Book.row()` and `Member.row()`.
`librarian.storage` has `load_books`, `save_books`, `load_members` and
`save_members` for the files themselves.

The catalogue behind `librarian-classic` is `librarian.classic.Catalog`,
holding `DatedBook` entries, with `add`, `find`, `by_author`, `issue`,
`return_book`, `sorted_by_year_desc`, `counts` and `delete`.

## What it does not do

Members can be registered but not listed, edited or removed from the menu,
and loans are not tied to a member: a book is simply issued or not. Books
cannot be edited or deleted in `librarian`; deleting is only offered by the
in-memory `librarian-classic` catalogue.