import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain', 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.default_output).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_list(books: List[Any], title: str = "Books") -> None:
    """Print books in the current output mode.
    - plain: one 'Title by Author (ISBN: ...) - Status' line per book, or 'No books in library.'
    - json: array of book dicts
    - rich: table with a borrower column
    """
    mode = get_output_mode()

    if not books:
        print("No books in library.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Status")
        table.add_column("Borrower", style="dim")
        for b in books:
            status_style = "green" if b.is_available else "yellow"
            table.add_row(
                escape(b.title),
                escape(b.author),
                escape(b.isbn),
                f"[{status_style}]{b.status.value}[/]",
                escape(b.borrower.name) if b.borrower else "",
            )
        _console.print(table)
    else:
        for b in books:
            print(str(b))

def print_member_list(members: List[Any]) -> None:
    mode = get_output_mode()

    if not members:
        print("No members in library.")
        return

    if mode == "json":
        print(json.dumps([m.to_dict() for m in members], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Members", show_lines=True, header_style="bold cyan")
        table.add_column("Name", style="white")
        table.add_column("Borrowed", justify="right")
        for m in members:
            table.add_row(escape(m.name), str(len(m.borrowed_books)))
        _console.print(table)
    else:
        for m in members:
            print(m.name)

def print_summary(library: Any) -> None:
    """Print the member borrowing summary.
    - plain: heading followed by the raw report text
    - json: {name: [titles]} mapping
    - rich: report inside a Panel
    """
    mode = get_output_mode()

    if mode == "json":
        payload = {m.name: [b.title for b in m.borrowed_books] for m in library.members}
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        report = escape(library.borrowing_summary().expandtabs(4).rstrip("\n")) or "No members in library."
        _console.print(Panel.fit(report, title="📋 Member Borrowing Summary", border_style="blue"))
    else:
        print("Member Borrowing Summary")
        print(library.borrowing_summary(), end="")

def print_stats_result(stats: Dict[str, Any]) -> None:
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats.get('total_books', 0)}\n"
            f"[bold]Available:[/] {stats.get('available_books', 0)}\n"
            f"[bold]Borrowed:[/] {stats.get('borrowed_books', 0)}\n"
            f"[bold]Members:[/] {stats.get('total_members', 0)}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats.get('total_books', 0)}")
        print(f"Available Books: {stats.get('available_books', 0)}")
        print(f"Borrowed Books: {stats.get('borrowed_books', 0)}")
        print(f"Total Members: {stats.get('total_members', 0)}")
