import pytest

from book import Book, BookStatus
from conftest import assert_consistent
from exceptions import BookUnavailableError, LibraryError
from member import Member


def test_seed_data(lib):
    assert [b.title for b in lib.books] == ["The Great Gatsby", "To Kill a Mockingbird", "1984"]
    assert [m.name for m in lib.members] == ["Alice Johnson", "Bob Smith", "Charlie Brown"]
    assert lib.find_book("1984").isbn == "978-0-452-28423-4"
    assert all(b.status is BookStatus.AVAILABLE for b in lib.books)
    assert_consistent(lib)


def test_book_defaults():
    book = Book("Dune", "Frank Herbert")
    assert book.isbn == "Unknown"
    assert book.status is BookStatus.AVAILABLE
    assert book.borrower is None
    assert str(book) == "Dune by Frank Herbert (ISBN: Unknown) - Available"
    assert Book("Dune", "Frank Herbert", "   ").isbn == "Unknown"


def test_add_book_allows_duplicates(empty_lib):
    empty_lib.add_book(Book("Dune", "Frank Herbert", "1"))
    empty_lib.add_book(Book("Dune", "Frank Herbert", "1"))
    assert len(empty_lib.books) == 2
    assert empty_lib.books[0] is not empty_lib.books[1]


def test_add_new_book_strips_fields(empty_lib):
    book = empty_lib.add_new_book("  Emma ", " Jane Austen ", "")
    assert (book.title, book.author, book.isbn) == ("Emma", "Jane Austen", "Unknown")
    assert empty_lib.books == [book]


@pytest.mark.parametrize("title,author", [("", "Someone"), ("Title", "   "), (None, "Someone")])
def test_add_new_book_validation(empty_lib, title, author):
    with pytest.raises(ValueError, match="No new book entered."):
        empty_lib.add_new_book(title, author)
    assert empty_lib.books == []


def test_add_new_member_validation(empty_lib):
    with pytest.raises(ValueError, match="No new name entered."):
        empty_lib.add_new_member("  ")
    assert empty_lib.members == []
    member = empty_lib.add_new_member(" Dana Scully ")
    assert member.name == "Dana Scully"


def test_borrow_available_book(lib):
    alice = lib.find_member("Alice Johnson")
    book = lib.find_book("1984")

    alice.borrow_book(book)

    assert book.status is BookStatus.BORROWED
    assert book.borrower is alice
    assert alice.borrowed_books == [book]
    assert_consistent(lib)


def test_borrow_borrowed_book_is_rejected(lib):
    alice = lib.find_member("Alice Johnson")
    bob = lib.find_member("Bob Smith")
    book = lib.find_book("1984")
    alice.borrow_book(book)

    with pytest.raises(BookUnavailableError, match="1984 is not available for borrowing"):
        bob.borrow_book(book)

    assert book.borrower is alice
    assert bob.borrowed_books == []
    assert alice.borrowed_books == [book]
    assert_consistent(lib)

    # borrowing twice by the same member is also refused
    with pytest.raises(LibraryError):
        alice.borrow_book(book)
    assert alice.borrowed_books == [book]


def test_return_by_borrower(lib):
    alice = lib.find_member("Alice Johnson")
    book = lib.find_book("1984")
    alice.borrow_book(book)

    assert alice.return_book(book) is True

    assert book.status is BookStatus.AVAILABLE
    assert book.borrower is None
    assert alice.borrowed_books == []
    assert_consistent(lib)


def test_return_by_non_borrower_is_noop(lib):
    alice = lib.find_member("Alice Johnson")
    bob = lib.find_member("Bob Smith")
    book = lib.find_book("1984")
    alice.borrow_book(book)

    assert bob.return_book(book) is False
    assert book.borrower is alice
    assert alice.borrowed_books == [book]
    assert_consistent(lib)


def test_return_available_book_is_noop(lib):
    bob = lib.find_member("Bob Smith")
    book = lib.find_book("1984")
    assert bob.return_book(book) is False
    assert book.status is BookStatus.AVAILABLE
    assert_consistent(lib)


def test_remove_book(lib):
    gatsby = lib.find_book("The Great Gatsby")
    assert lib.remove_book(gatsby) is True
    assert len(lib.books) == 2
    assert lib.find_book("The Great Gatsby") is None
    # already gone
    assert lib.remove_book(gatsby) is False
    assert len(lib.books) == 2


def test_remove_borrowed_book_fails(lib):
    book = lib.find_book("1984")
    lib.find_member("Charlie Brown").borrow_book(book)

    assert lib.remove_book(book) is False
    assert len(lib.books) == 3
    assert any(b is book for b in lib.books)
    assert_consistent(lib)


def test_remove_book_uses_identity(empty_lib):
    first = Book("Dune", "Frank Herbert", "1")
    second = Book("Dune", "Frank Herbert", "1")
    empty_lib.add_book(first)
    empty_lib.add_book(second)
    assert empty_lib.remove_book(second) is True
    assert empty_lib.books == [first]


def test_remove_member(lib):
    bob = lib.find_member("Bob Smith")
    assert lib.remove_member(bob) is True
    assert [m.name for m in lib.members] == ["Alice Johnson", "Charlie Brown"]
    assert lib.remove_member(bob) is False


def test_remove_member_holding_books_is_refused(lib):
    bob = lib.find_member("Bob Smith")
    book = lib.find_book("To Kill a Mockingbird")
    bob.borrow_book(book)

    assert lib.remove_member(bob) is False
    assert any(m is bob for m in lib.members)
    assert book.borrower is bob
    assert_consistent(lib)

    bob.return_book(book)
    assert lib.remove_member(bob) is True
    assert_consistent(lib)


def test_find_first_match_wins(empty_lib):
    first = Member("Sam")
    empty_lib.add_member(first)
    empty_lib.add_member(Member("Sam"))
    assert empty_lib.find_member("Sam") is first
    assert empty_lib.find_member("sam") is None


def test_available_books(lib):
    book = lib.find_book("1984")
    lib.find_member("Alice Johnson").borrow_book(book)
    assert [b.title for b in lib.available_books()] == ["The Great Gatsby", "To Kill a Mockingbird"]


def test_borrowing_summary(lib):
    alice = lib.find_member("Alice Johnson")
    alice.borrow_book(lib.find_book("1984"))
    alice.borrow_book(lib.find_book("The Great Gatsby"))

    assert lib.borrowing_summary() == (
        "Alice Johnson:\n"
        "\t1984\n"
        "\tThe Great Gatsby\n"
        "Bob Smith:\n"
        "\tN/A\n"
        "Charlie Brown:\n"
        "\tN/A\n"
    )


def test_borrowing_summary_empty(empty_lib):
    assert empty_lib.borrowing_summary() == ""


def test_statistics(lib):
    lib.find_member("Bob Smith").borrow_book(lib.find_book("1984"))
    assert lib.get_statistics() == {
        "total_books": 3,
        "available_books": 2,
        "borrowed_books": 1,
        "total_members": 3,
    }


def test_invariants_hold_through_a_sequence(lib):
    alice = lib.find_member("Alice Johnson")
    bob = lib.find_member("Bob Smith")
    gatsby = lib.find_book("The Great Gatsby")
    mockingbird = lib.find_book("To Kill a Mockingbird")

    steps = [
        lambda: alice.borrow_book(gatsby),
        lambda: bob.borrow_book(mockingbird),
        lambda: bob.return_book(gatsby),
        lambda: lib.remove_book(gatsby),
        lambda: alice.return_book(gatsby),
        lambda: bob.borrow_book(gatsby),
        lambda: lib.remove_member(alice),
        lambda: lib.add_new_book("Beloved", "Toni Morrison"),
        lambda: bob.return_book(mockingbird),
    ]
    for step in steps:
        step()
        assert_consistent(lib)

    assert [b.title for b in bob.borrowed_books] == ["The Great Gatsby"]
    assert [m.name for m in lib.members] == ["Bob Smith", "Charlie Brown"]


def test_to_dict(lib):
    alice = lib.find_member("Alice Johnson")
    book = lib.find_book("1984")
    alice.borrow_book(book)
    assert book.to_dict() == {
        "title": "1984",
        "author": "George Orwell",
        "isbn": "978-0-452-28423-4",
        "status": "Borrowed",
        "borrower": "Alice Johnson",
    }
    assert alice.to_dict() == {"name": "Alice Johnson", "borrowed_books": ["1984"]}


def test_find_books_returns_every_copy(lib):
    second = lib.add_new_book("1984", "George Orwell", "second-copy")
    copies = lib.find_books("1984")
    assert copies == [lib.find_book("1984"), second]
    assert lib.find_books("Missing") == []
