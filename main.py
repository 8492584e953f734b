import logging
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.markup import escape
from rich import box

import typer

from config import settings
from book import BookStatus
from exceptions import BookUnavailableError
from facade import LibraryFacade
from library import Library
from seed import seed_default_data
from utils.ui_helpers import (
    set_output_mode,
    print_book_list,
    print_member_list,
    print_summary,
    print_stats_result,
)
from utils.validators import TextValidator

APP_NAME = f"Library Management System - {settings.app_name}"

console = Console()


class LibraryManager:
    """Lazily created, process-wide Library shared by every command."""

    _instance: Optional[Library] = None

    @classmethod
    def get_instance(cls) -> Library:
        if cls._instance is None:
            cls._instance = Library()
            if settings.seed_on_start:
                seed_default_data(cls._instance)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the current instance; the next access builds a fresh one."""
        cls._instance = None


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)

def _version_callback(value: bool):
    if value:
        print(f"{APP_NAME} {settings.app_version}")
        raise typer.Exit()

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Global CLI options. With no command the interactive menu starts."""
    _configure_logging()
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu()

@app.command("books")
def cli_books(available: bool = typer.Option(False, "--available", "-a", help="Only show books on the shelf")):
    """List the catalog."""
    lib = LibraryManager.get_instance()
    books = lib.available_books() if available else lib.books
    print_book_list(books, title="Available Books" if available else "Books")

@app.command("members")
def cli_members():
    """List library members."""
    print_member_list(LibraryManager.get_instance().members)

@app.command("summary")
def cli_summary():
    """Print the member borrowing summary."""
    print_summary(LibraryManager.get_instance())

@app.command("borrow")
def cli_borrow(
    member: str = typer.Argument(..., help="Member full name"),
    title: str = typer.Argument(..., help="Book title"),
):
    """Borrow a book for a member, then print the summary."""
    lib = LibraryManager.get_instance()
    try:
        book = LibraryFacade(lib).borrow_book(member, title)
    except BookUnavailableError as e:
        print(str(e))
    else:
        if book is None:
            print("Member or book not found.")
        else:
            print(f"Book borrowed successfully: {book.title} -> {member}")
    print_summary(lib)

@app.command("return")
def cli_return(
    member: str = typer.Argument(..., help="Member full name"),
    title: str = typer.Argument(..., help="Book title"),
):
    """Return a book on behalf of a member, then print the summary."""
    lib = LibraryManager.get_instance()
    # lookup misses are reported as in `borrow`; returning a book the member doesn't hold stays quiet
    if lib.find_member(member) is None or lib.find_book(title) is None:
        print("Member or book not found.")
    elif LibraryFacade(lib).return_book(member, title):
        print(f"Book returned: {title}")
    print_summary(lib)

@app.command("stats")
def cli_stats():
    """Show catalog and member counts."""
    print_stats_result(LibraryManager.get_instance().get_statistics())

@app.command("menu")
def cli_menu():
    """Start the interactive menu."""
    run_menu()


# --- Interactive menu actions ---
def add_book():
    lib = LibraryManager.get_instance()
    title = Prompt.ask("Book Title", default="")
    author = Prompt.ask("Book Author", default="")
    isbn = Prompt.ask("Book ISBN", default="")

    if not TextValidator.validate_title(title) or not TextValidator.validate_author(author):
        console.print("[bold red]Error:[/] No New BOOK Entered.")
        return

    book = lib.add_new_book(title, author, TextValidator.normalize_isbn(isbn))
    console.print(f"[green]✅ Added:[/] {escape(str(book))}")

def remove_book():
    lib = LibraryManager.get_instance()
    title = Prompt.ask("🔍 Title of the book to remove")
    copies = lib.find_books(title)
    # prefer a copy on the shelf so borrowed duplicates don't block removal
    book = next((b for b in copies if b.is_available), copies[0] if copies else None)
    if not book:
        console.print(f"[yellow]⚠️ No book titled [bold]{escape(title)}[/].[/]")
        return

    console.print(Panel(
        f"[bold]Title:[/] {escape(book.title)}\n"
        f"[bold]Author:[/] {escape(book.author)}\n"
        f"[bold]ISBN:[/] {escape(book.isbn)}\n"
        f"[bold]Status:[/] {book.status.value}",
        title="📚 Book to remove",
        border_style="yellow",
    ))
    if book.status is BookStatus.BORROWED:
        console.print("[red]Book is currently borrowed. You cannot remove it![/]")
        return

    if Confirm.ask("🗑️ Remove this book?", default=False):
        if lib.remove_book(book):
            console.print(f"[green]✅ [bold]{escape(book.title)}[/] removed.[/]")
        else:
            console.print("[red]❌ Removal failed.[/]")
    else:
        console.print("[blue]🚫 Removal cancelled.[/]")

def add_member():
    lib = LibraryManager.get_instance()
    name = Prompt.ask("Member Full Name", default="")
    if not TextValidator.validate_name(name):
        console.print("[bold red]Error:[/] No New NAME Entered.")
        return

    member = lib.add_new_member(name)
    console.print(f"[green]✅ Added member:[/] {escape(member.name)}")

def remove_member():
    lib = LibraryManager.get_instance()
    name = Prompt.ask("🔍 Name of the member to remove")
    member = lib.find_member(name)
    if not member:
        console.print(f"[yellow]⚠️ No member named [bold]{escape(name)}[/].[/]")
        return

    if lib.remove_member(member):
        console.print(f"[green]✅ [bold]{escape(member.name)}[/] removed.[/]")
    else:
        console.print("[red]Member still has borrowed books. You cannot remove them![/]")

def _select_member_and_book():
    lib = LibraryManager.get_instance()
    name = Prompt.ask("Member Full Name")
    title = Prompt.ask("Book Title")
    member = lib.find_member(name)
    book = lib.find_book(title)
    if member is None or book is None:
        console.print("[yellow]Selected book or member is null.[/]")
        return None, None
    return member, book

def borrow_book():
    member, book = _select_member_and_book()
    if member is None:
        return

    facade = LibraryFacade(LibraryManager.get_instance())
    try:
        facade.borrow_book(member.name, book.title)
    except BookUnavailableError as e:
        console.print(f"[yellow]{escape(str(e))}[/]")
        return
    console.print(f"[green]Book borrowed successfully. New status: {book.status.value}[/]")

def return_book():
    member, book = _select_member_and_book()
    if member is None:
        return

    if member.return_book(book):
        console.print(f"[green]✅ {escape(book.title)} returned.[/]")

def run_menu():
    """Interactive menu mirroring the library desk form."""
    menu_items = [
        ("1", "List books", "📚"),
        ("2", "List members", "👥"),
        ("3", "Add book", "➕"),
        ("4", "Remove book", "🗑️"),
        ("5", "Add member", "🙋"),
        ("6", "Remove member", "🚪"),
        ("7", "Borrow book", "📤"),
        ("8", "Return book", "📥"),
        ("9", "Borrow summary", "📋"),
        ("0", "Exit", "👋"),
    ]
    actions = {
        "1": lambda: print_book_list(LibraryManager.get_instance().books),
        "2": lambda: print_member_list(LibraryManager.get_instance().members),
        "3": add_book,
        "4": remove_book,
        "5": add_member,
        "6": remove_member,
        "7": borrow_book,
        "8": return_book,
        "9": lambda: print_summary(LibraryManager.get_instance()),
    }

    def render_menu() -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in menu_items:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        console.print(Panel(
            table,
            title=APP_NAME,
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        ))

    while True:
        render_menu()
        choice = Prompt.ask("Choose an option", choices=[key for key, _, _ in menu_items], default="1")
        if choice == "0":
            console.print("[green]Goodbye![/]")
            break
        actions[choice]()
        print()  # blank line between operations

if __name__ == "__main__":
    app()
