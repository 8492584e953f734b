import pytest

from library import Library
from seed import seed_default_data


@pytest.fixture
def empty_lib():
    return Library()


@pytest.fixture
def lib():
    # Fresh seeded library per test: three books, three members
    library = Library()
    seed_default_data(library)
    return library


def assert_consistent(library):
    """Book status/borrower and member borrowed lists must agree everywhere."""
    for book in library.books:
        assert (book.status.value == "Borrowed") == (book.borrower is not None)
    for member in library.members:
        assert len(member.borrowed_books) == len({id(b) for b in member.borrowed_books})
        for book in member.borrowed_books:
            assert book.borrower is member
    for book in library.books:
        if book.borrower is not None:
            assert any(b is book for b in book.borrower.borrowed_books)
