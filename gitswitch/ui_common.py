"""Console output shared across modules."""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from .config import DEFAULT_KEY_LENGTH

theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "title": "bold cyan",
        "highlight": "bold yellow",
        "path": "blue",
        "command": "green",
    }
)

console = Console(theme=theme)

USAGE = """\
    usage: gitswitch initials
        Switches the global git configuration to a registered user with matching initials.
        {length_rule}
    options:
        -n initials "first-name last-name" email
            Registers a new user with the provided initials.
            {length_rule}
        -d initials
            Removes a registered user.
        -l
            Lists registered users.
        -c
            Shows the current global git user.
"""


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Error:[/error] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Warning:[/warning] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[info]Info:[/info] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]Success:[/success] {escape(message)}")


def print_usage(key_length: int = DEFAULT_KEY_LENGTH) -> None:
    """Print usage text."""
    if key_length:
        length_rule = f"Initials must be exactly {key_length} characters."
    else:
        length_rule = "Initials may be any length without spaces."
    console.print(
        USAGE.format(length_rule=length_rule),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def print_identity_table(rows: list[tuple[str, str, str]], active: Optional[str] = None) -> None:
    """Print registered identities in a table.

    Args:
        rows: (initials, name, email) tuples
        active: Initials of the identity currently in the global config
    """
    table = Table(
        title="Git Identities",
        box=box.ROUNDED,
        header_style="bold cyan",
        border_style="blue",
    )

    table.add_column("Initials", style="cyan")
    table.add_column("Name", style="blue")
    table.add_column("Email", style="green")
    table.add_column("Active", justify="center", style="bold green")

    for initials, name, email in rows:
        table.add_row(
            escape(initials),
            escape(name),
            escape(email),
            "✓" if initials == active else "",
        )

    console.print(table)
