import logging
from typing import Callable, Dict, Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config import settings
from libcatalog import Library, Role
from libcatalog.utils.ui_helpers import (
    OUTPUT_MODES,
    print_book_list,
    print_registration,
    print_result,
    print_search_result,
    print_stats_result,
    print_user_list,
    set_output_mode,
)
from libcatalog.utils.validators import InputParser, TextValidator

APP_NAME = settings.app_name
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

console = Console()
logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    ("Dune", "Frank Herbert", "ISBN1"),
    ("Neuromancer", "William Gibson", "ISBN2"),
    ("The Left Hand of Darkness", "Ursula K. Le Guin", "ISBN3"),
]


def configure_logging(level: str) -> None:
    # force: each CLI invocation rebinds the handler to the current stderr
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT, force=True)


# --- Typer CLI Application ---
app = typer.Typer(help=f"{APP_NAME} CLI")


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Output format: {' | '.join(OUTPUT_MODES)} (default: plain)",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level, e.g. INFO or DEBUG"),
):
    """Global options for the CLI. Without a command the interactive menu starts."""
    configure_logging(log_level or settings.effective_log_level)
    try:
        set_output_mode(output or settings.output_mode)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--output") from e
    if ctx.invoked_subcommand is None:
        run_menu(Library.from_settings(settings))


@app.command("menu")
def cli_menu():
    """Start the interactive menu."""
    run_menu(Library.from_settings(settings))


@app.command("demo")
def cli_demo():
    """Seed a sample catalog, run a borrow/return round trip and print the state."""
    library = Library.from_settings(settings)
    for title, author, identifier in SAMPLE_BOOKS:
        print_result(library.add_book(title, author, identifier))
    alice = library.register_user("Alice", Role.STUDENT)
    print_registration(alice, "Alice", Role.STUDENT)

    print_result(library.borrow(alice, "ISBN1"))
    print_result(library.borrow(alice + 1, "ISBN1"))
    print_book_list(library.list_books())
    print_result(library.return_book(alice, "ISBN1"))
    print_user_list(library.list_users())
    print_stats_result(library.get_statistics())

    problems = library.check_invariant()
    if problems:
        for problem in problems:
            console.print(f"[bold red]Invariant violated:[/] {problem}")
        raise typer.Exit(code=1)
    print("Invariant check: OK")


# --- Interactive menu ---
def _ask(label: str) -> str:
    return Prompt.ask(label, console=console)


def add_book(library: Library) -> None:
    title = _ask("Enter book title")
    if not TextValidator.validate_required(title):
        console.print("[yellow]Title cannot be empty.[/]")
        return
    author = _ask("Enter author")
    if not TextValidator.validate_author(author):
        console.print("[yellow]Author cannot be empty or only digits.[/]")
        return
    identifier = _ask("Enter ISBN")
    if not TextValidator.validate_required(identifier):
        console.print("[yellow]ISBN cannot be empty.[/]")
        return
    print_result(library.add_book(title, author, identifier))


def register_user(library: Library) -> None:
    name = _ask("Enter user name")
    if not TextValidator.validate_required(name):
        console.print("[yellow]Name cannot be empty.[/]")
        return
    role = InputParser.parse_role_choice(_ask("Register as: (1) Student (2) Faculty"))
    if role is None:
        console.print("[yellow]Invalid selection. Please enter 1 for Student or 2 for Faculty.[/]")
        return
    user_id = library.register_user(name, role)
    print_registration(user_id, name.strip(), role)


def search_books(library: Library) -> None:
    query = _ask("Enter book title or author to search")
    print_search_result(query, library.search(query))


def _ask_user_id() -> Optional[int]:
    user_id = InputParser.parse_user_id(_ask("Enter user ID"))
    if user_id is None:
        console.print("[yellow]Invalid input! Please enter a valid user ID.[/]")
    return user_id


def borrow_book(library: Library) -> None:
    user_id = _ask_user_id()
    if user_id is None:
        return
    identifier = _ask("Enter book ISBN to borrow").strip()
    print_result(library.borrow(user_id, identifier))


def return_book(library: Library) -> None:
    user_id = _ask_user_id()
    if user_id is None:
        return
    identifier = _ask("Enter book ISBN to return").strip()
    print_result(library.return_book(user_id, identifier))


def display_books(library: Library) -> None:
    print_book_list(library.list_books())


def display_users(library: Library) -> None:
    print_user_list(library.list_users())


MENU_ITEMS = [
    (1, "Add a new book", "➕", add_book),
    (2, "Register a new user", "👤", register_user),
    (3, "Search for books", "🔎", search_books),
    (4, "Borrow a book", "📖", borrow_book),
    (5, "Return a book", "↩️", return_book),
    (6, "Display books", "📚", display_books),
    (7, "Display users", "👥", display_users),
]
EXIT_CHOICE = 8
MENU_ACTIONS: Dict[int, Callable[[Library], None]] = {key: action for key, _, _, action in MENU_ITEMS}


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon, _ in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")
    table.add_row(f"[reverse]{EXIT_CHOICE}[/]", "🚪 Exit")

    console.print(Panel(table, title=APP_NAME, border_style="cyan", box=box.HEAVY, padding=(1, 2)))


def run_menu(library: Library) -> None:
    """Interactive menu loop; runs until Exit is chosen or input ends."""
    while True:
        render_menu()
        try:
            choice = InputParser.parse_menu_choice(_ask("Choose an option"))
            if choice is None:
                console.print(f"[yellow]Invalid input! Enter a number between 1-{EXIT_CHOICE}.[/]")
                continue
            if choice == EXIT_CHOICE:
                break
            action = MENU_ACTIONS.get(choice)
            if action is None:
                console.print("[yellow]Invalid option! Please try again.[/]")
                continue
            logger.debug("Menu choice %d", choice)
            action(library)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        console.print()  # leaves a gap between operations
    console.print("[green]Goodbye![/]")


if __name__ == "__main__":
    app()
