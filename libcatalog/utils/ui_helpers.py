import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from libcatalog.results import OperationResult
from libcatalog.user import Role

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = ("plain", "json", "rich")

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    else:
        raise ValueError(f"Unknown output mode: {mode!r}. Use one of: {', '.join(OUTPUT_MODES)}.")


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_book_line(book: Dict[str, Any]) -> str:
    return (
        f"Title: {book['title']}, Author: {book['author']}, "
        f"ISBN: {book['identifier']}, Available: {_yes_no(book['available'])}"
    )


def format_user_line(user: Dict[str, Any]) -> str:
    borrowed = " ".join(user["borrowed_identifiers"])
    return f"{user['role']} - Name: {user['name']}, ID: {user['user_id']}, Borrowed Books: {borrowed}"


def _books_table(books: List[Dict[str, Any]], title: str) -> Table:
    table = Table(title=title, show_lines=True, header_style="bold cyan")
    table.add_column("ISBN", style="magenta", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Author", style="white")
    table.add_column("Available", justify="center")
    for b in books:
        available = "[green]Yes[/]" if b["available"] else "[red]No[/]"
        table.add_row(escape(b["identifier"]), escape(b["title"]), escape(b["author"]), available)
    return table


def print_book_list(books: List[Dict[str, Any]]) -> None:
    """Print the catalog in the current output mode.
    - plain: one 'Title: ..., Available: Yes/No' line per book
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(books, ensure_ascii=False))
        return

    if not books:
        print("No books in library.")
        return

    if mode == "rich":
        _console.print(_books_table(books, "📚 Library Books"))
    else:
        print("Library Books:")
        for b in books:
            print(format_book_line(b))


def print_search_result(query: str, books: List[Dict[str, Any]]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({"query": query, "results": books}, ensure_ascii=False))
        return

    if not books:
        print(f"Search Results for '{query}':")
        print("No books found matching the query.")
        return

    if mode == "rich":
        _console.print(_books_table(books, f"🔎 Search Results for '{escape(query)}'"))
        _console.print(f"[dim]📊 {len(books)} result(s) found[/]")
    else:
        print(f"Search Results for '{query}':")
        for b in books:
            print(format_book_line(b))


def print_user_list(users: List[Dict[str, Any]]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(users, ensure_ascii=False))
        return

    if not users:
        print("No users registered.")
        return

    if mode == "rich":
        table = Table(title="👥 Library Users", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", justify="right")
        table.add_column("Name", style="white")
        table.add_column("Role", style="white")
        table.add_column("Borrowed Books", style="white")
        for u in users:
            table.add_row(str(u["user_id"]), escape(u["name"]), u["role"], escape(" ".join(u["borrowed_identifiers"])))
        _console.print(table)
    else:
        print("Library Users:")
        for u in users:
            print(format_user_line(u))


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
        return

    lines = [
        ("Total Books", stats.get("total_books", 0)),
        ("Available Books", stats.get("available_books", 0)),
        ("Borrowed Books", stats.get("borrowed_books", 0)),
        ("Unique Authors", stats.get("unique_authors", 0)),
        ("Total Users", stats.get("total_users", 0)),
    ]
    if mode == "rich":
        content = "\n".join(f"[bold]{label}:[/] {value}" for label, value in lines)
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        for label, value in lines:
            print(f"{label}: {value}")


def print_registration(user_id: int, name: str, role: Role) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({"user_id": user_id, "name": name, "role": role.value}, ensure_ascii=False))
    elif mode == "rich":
        _console.print(f"[green]User registered successfully![/] {escape(name)} ({role.value}) [bold]ID: {user_id}[/]")
    else:
        print(f"User registered successfully! (ID: {user_id})")


def print_result(result: OperationResult) -> None:
    """Print a command outcome; the message is shown verbatim."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        style = "green" if result.success else "bold red"
        _console.print(f"[{style}]{escape(result.message)}[/]")
    else:
        print(result.message)
