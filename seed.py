from book import Book
from library import Library
from member import Member

DEFAULT_BOOKS = [
    ("The Great Gatsby", "F. Scott Fitzgerald", "978-3-16-148410-0"),
    ("To Kill a Mockingbird", "Harper Lee", "978-0-06-112008-4"),
    ("1984", "George Orwell", "978-0-452-28423-4"),
]

DEFAULT_MEMBERS = ["Alice Johnson", "Bob Smith", "Charlie Brown"]


def seed_default_data(library: Library) -> None:
    """Load the starter catalog and member roll."""
    for title, author, isbn in DEFAULT_BOOKS:
        library.add_book(Book(title, author, isbn))
    for name in DEFAULT_MEMBERS:
        library.add_member(Member(name))
