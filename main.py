import logging
import os
from pathlib import Path
from typing import Optional, List, Tuple, Any, Union

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.markup import escape
from rich import box

from library_catalog.commands import CommandType, InvalidCommandError, create_command
from library_catalog.config import settings
from library_catalog.library import LibraryData
from library_catalog.utils.cli_config import get_cli_config
from library_catalog.utils.ui_helpers import get_output_mode, set_output_mode, OUTPUT_MODE_ENV

APP_NAME = settings.app_name
EXIT_COMMAND = "EXIT"

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if (verbose or settings.debug) else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def split_command_line(line: str) -> Tuple[str, str]:
    """Split a raw input line into the command name and its argument text."""
    name, _, argument_input = line.strip().partition(" ")
    return name, argument_input


def load_catalog(data: LibraryData, path: Union[str, Path]) -> bool:
    """Load ``path`` into ``data``, reporting unreadable or malformed files."""
    try:
        loaded = data.load_data(path)
    except (ValueError, IndexError) as e:
        console.print(f"[bold red]Malformed book data in {escape(str(path))}:[/] {escape(str(e))}")
        return False
    if not loaded:
        console.print(f"[bold red]Could not read book data from {escape(str(path))}[/]")
    return loaded


def run_command(data: LibraryData, name: str, argument_input: str) -> bool:
    """Build one catalog command and execute it. Returns False if it did not run."""
    logger.debug("Dispatching %r with arguments %r", name, argument_input)
    try:
        command = create_command(name, argument_input)
    except InvalidCommandError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        console.print(f"[dim]Available commands: {', '.join(t.name for t in CommandType)}, {EXIT_COMMAND}[/]")
        return False

    if not command.is_valid:
        print(f"Invalid argument for the {command.command_type.name} command: {argument_input}")
        return False

    try:
        command.execute(data)
    except (ValueError, IndexError) as e:
        # ADD with a malformed data file; the catalog keeps its previous books
        console.print(f"[bold red]Malformed book data:[/] {escape(str(e))}")
        return False
    return True


# --- Typer CLI Application ---
app = typer.Typer(help="Library Catalog CLI")


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Global options for the CLI (output mode, logging)."""
    configure_logging(verbose)
    if output and not set_output_mode(output):
        raise typer.BadParameter(f"Unknown output mode: {output}", param_hint="--output")


@app.command("run")
def cli_run(
    data_file: Path = typer.Argument(..., help="CSV file with book data"),
    command: str = typer.Argument(..., help="Command: ADD | LIST | REMOVE | SEARCH | GROUP"),
    arguments: Optional[List[str]] = typer.Argument(None, help="Command arguments"),
):
    """Load DATA_FILE and execute a single catalog command against it."""
    data = LibraryData()
    if not load_catalog(data, data_file):
        raise typer.Exit(code=1)

    name = get_cli_config().get_alias(command)
    if not run_command(data, name, " ".join(arguments or [])):
        raise typer.Exit(code=1)


@app.command("shell")
def cli_shell(data_file: Optional[Path] = typer.Argument(None, help="CSV file with book data to load first")):
    """Interactive catalog session. Type EXIT to leave."""
    config_manager = get_cli_config()
    data = LibraryData()

    if OUTPUT_MODE_ENV not in os.environ:
        set_output_mode(config_manager.get("preferences.output_mode", "plain"))

    if config_manager.get("preferences.show_banner", True):
        console.print(Panel(
            f"Commands: {', '.join(t.name for t in CommandType)}, {EXIT_COMMAND}\n"
            f"[dim]Output mode: {get_output_mode()}[/]",
            title=f"{APP_NAME} {settings.app_version}",
            border_style="cyan",
            box=box.HEAVY,
        ))

    path = data_file or settings.data_file
    if path:
        load_catalog(data, path)

    prompt = config_manager.get("preferences.prompt", "> ")
    while True:
        try:
            line = console.input(escape(prompt))
        except EOFError:
            break

        name, argument_input = split_command_line(line)
        if not name:
            continue
        if name.upper() == EXIT_COMMAND:
            break

        name = config_manager.get_alias(name)
        if CommandType.from_name(name) is CommandType.REMOVE and config_manager.get("preferences.confirm_remove", False):
            try:
                confirmed = Confirm.ask(f"Remove {escape(argument_input)}?", console=console, default=False)
            except EOFError:
                break
            if not confirmed:
                console.print("Removal cancelled.")
                continue
        run_command(data, name, argument_input)

    console.print("[green]Goodbye![/]")


@app.command("config")
def cli_config(
    action: str = typer.Argument(..., help="Action: show, get, set, reset, alias, unalias"),
    key: Optional[str] = typer.Argument(None, help="Configuration key (dot notation) or alias"),
    value: Optional[str] = typer.Argument(None, help="Configuration value or aliased command")
):
    """Manage CLI configuration and preferences."""
    config_manager = get_cli_config()

    if action == "show":
        config_manager.show_config()

    elif action == "get":
        if not key:
            print("Error: the 'get' action needs a key")
            raise typer.Exit(code=1)
        found = config_manager.get(key)
        if found is not None:
            print(f"{key}: {found}")
        else:
            print(f"Key '{key}' not found")

    elif action == "set":
        if not key or value is None:
            print("Error: the 'set' action needs both a key and a value")
            raise typer.Exit(code=1)
        # Convert string values to the matching types
        parsed_value: Any = value
        if value.lower() in ('true', 'false'):
            parsed_value = value.lower() == 'true'
        elif value.isdigit():
            parsed_value = int(value)

        try:
            config_manager.set(key, parsed_value)
        except ValueError as e:
            print(f"Error: {e}")
            raise typer.Exit(code=1)
        print(f"{key} set to {parsed_value}")

    elif action == "reset":
        config_manager.reset_to_default()
        print("Configuration reset to default values")

    elif action == "alias":
        aliases = config_manager.list_aliases()
        if key and value:
            if CommandType.from_name(value) is None:
                print(f"Unknown command: {value}")
                raise typer.Exit(code=1)
            config_manager.add_alias(key, value)
            print(f"Added alias '{key}' -> '{value.lower()}'")
        elif key:
            if key.lower() in aliases:
                print(f"Alias '{key}' -> '{aliases[key.lower()]}'")
            else:
                print(f"Alias '{key}' not found")
        elif aliases:
            print("Configured aliases:")
            for alias, command in aliases.items():
                print(f"  {alias} -> {command}")
        else:
            print("No aliases configured")

    elif action == "unalias":
        if not key:
            print("Error: the 'unalias' action needs an alias")
            raise typer.Exit(code=1)
        if config_manager.remove_alias(key):
            print(f"Removed alias '{key}'")
        else:
            print(f"Alias '{key}' not found")

    else:
        print(f"Unknown action: {action}")
        print("Available actions: show, get, set, reset, alias, unalias")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
