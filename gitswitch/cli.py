"""Command-line interface."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

import click
from rich.markup import escape

from .config import Settings, get_settings
from .exceptions import GitConfigError, GitswitchError, IdentityError
from .gitconfig import apply_identity, read_global_identity
from .identity import IdentityStore
from .ui_common import (
    console,
    print_error,
    print_identity_table,
    print_info,
    print_success,
    print_usage,
)
from .version import __version__

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

CONTEXT_SETTINGS = {"ignore_unknown_options": True, "help_option_names": []}


def handle_errors(f: F) -> F:
    """Decorator to report errors without failing the process."""
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except IdentityError as e:
            console.print(escape(str(e)))
            print_usage(get_settings().key_length)
        except GitswitchError as e:
            print_error(str(e))
            if e.details:
                console.print(f"[dim]{escape(e.details)}[/dim]")
        except Exception as e:
            logger.error(f"Unexpected error: {e}", exc_info=True)
            console.print(f"\n[bold red]Unexpected error:[/bold red] {escape(str(e))}")
        return None
    return cast(F, wrapper)


def show_usage(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Print usage for -h/--help and stop."""
    if not value or ctx.resilient_parsing:
        return
    print_usage(get_settings().key_length)
    ctx.exit()


def enable_debug() -> None:
    """Send DEBUG records to the log file."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG)
    logger.debug("Debug mode enabled")


def get_store(settings: Settings) -> IdentityStore:
    return IdentityStore(settings.data_file, key_length=settings.key_length)


def register_identity(settings: Settings, initials: str, name: str, email: str) -> None:
    """Register a new identity."""
    identity = get_store(settings).register(initials, name, email)
    print_success(f"Registered {identity.initials}: {identity.name} <{identity.email}>")


def switch_identity(settings: Settings, initials: str) -> None:
    """Switch the global Git identity to a registered one."""
    identity = get_store(settings).get(initials)
    apply_identity(identity, git_executable=settings.git_executable)
    print_success(f"Switched to {identity.name} <{identity.email}>")


def delete_identity(settings: Settings, initials: str) -> None:
    """Remove a registered identity."""
    identity = get_store(settings).remove(initials)
    print_success(f"Removed {identity.initials}: {identity.name} <{identity.email}>")


def list_identities(settings: Settings) -> None:
    """List registered identities, marking the active one."""
    store = get_store(settings)
    identities = store.list_identities()
    if not identities:
        print_info('No identities registered. Register one with: gitswitch -n initials "name" email')
        return

    active = None
    try:
        name, email = read_global_identity(git_executable=settings.git_executable)
    except GitConfigError as e:
        logger.debug(f"Cannot read global identity: {e}")
    else:
        match = store.find_by_config(name, email)
        if match:
            active = match.initials

    print_identity_table(
        [(i.initials, i.name, i.email) for i in identities],
        active=active,
    )


def show_current(settings: Settings) -> None:
    """Show the current global Git identity."""
    name, email = read_global_identity(git_executable=settings.git_executable)
    if not name and not email:
        print_info("No global Git identity configured")
        return

    console.print(f"[title]user.name:[/title]  {escape(name or '')}")
    console.print(f"[title]user.email:[/title] {escape(email or '')}")
    identity = get_store(settings).find_by_config(name, email)
    if identity:
        console.print(f"[title]initials:[/title]   [highlight]{escape(identity.initials)}[/highlight]")
    else:
        print_info("The current identity is not registered")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("-n", "--new", "new", is_flag=True, help="Register a new identity")
@click.option("-d", "--delete", "delete", is_flag=True, help="Remove a registered identity")
@click.option("-l", "--list", "list_", is_flag=True, help="List registered identities")
@click.option("-c", "--current", "current", is_flag=True, help="Show the current global identity")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=show_usage,
    help="Show usage and exit",
)
@click.version_option(__version__, prog_name="gitswitch")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@handle_errors
def cli(
    args: tuple[str, ...],
    new: bool = False,
    delete: bool = False,
    list_: bool = False,
    current: bool = False,
    debug: bool = False,
) -> None:
    """Switch the global Git identity between registered users."""
    if debug:
        enable_debug()

    settings = get_settings()
    logger.debug(f"Arguments: {args} new={new} delete={delete} list={list_} current={current}")

    if sum((new, delete, list_, current)) > 1:
        print_usage(settings.key_length)
    elif new and len(args) == 3:
        register_identity(settings, *args)
    elif delete and len(args) == 1:
        delete_identity(settings, args[0])
    elif list_ and not args:
        list_identities(settings)
    elif current and not args:
        show_current(settings)
    elif not (new or delete or list_ or current) and len(args) == 1:
        switch_identity(settings, args[0])
    else:
        print_usage(settings.key_length)
