import os
import json
from typing import List, Dict
from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from rich.markup import escape

from library_catalog.book import BookEntry

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

NO_ENTRIES_MESSAGE = "The library has no book entries."
GROUP_ITEM_PADDING = "   "

_console = Console()


def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    # Ignore invalid values, keep the current mode
    return False


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"


def print_list_result(books: List[BookEntry], detailed: bool = False) -> None:
    """Print the book list according to the current output mode.
    - plain: count line, then a title per book (or the full entry when detailed)
    - json: JSON array of the entries
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        if detailed:
            payload = [b.to_dict() for b in books]
        else:
            payload = [{"title": b.title} for b in books]
        print(json.dumps(payload, ensure_ascii=False))
        return

    if not books:
        print(NO_ENTRIES_MESSAGE)
        return

    if mode == "rich":
        table = Table(title=f"{len(books)} books in library", show_lines=detailed, header_style="bold cyan")
        table.add_column("Title", style="white")
        if detailed:
            table.add_column("Authors", style="white")
            table.add_column("Rating", justify="right")
            table.add_column("ISBN", style="magenta", no_wrap=True)
            table.add_column("Pages", justify="right")
        for b in books:
            if detailed:
                table.add_row(escape(b.title), escape(b.authors_to_string()), f"{b.rating:.2f}", b.isbn, str(b.pages))
            else:
                table.add_row(escape(b.title))
        _console.print(table)
    else:
        print(f"{len(books)} books in library:")
        for b in books:
            # str(entry) already ends with a newline, print adds the separator line
            print(str(b) if detailed else b.title)


def print_group_result(argument: str, groups: Dict[str, List[str]]) -> None:
    """Print grouped titles according to the current output mode.
    - plain: 'Grouped data by ARG', then '## key' headers with indented titles
    - json: JSON object of key -> titles
    - rich: Rich tree
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({"grouped_by": argument, "groups": groups}, ensure_ascii=False))
    elif mode == "rich":
        tree = Tree(f"Grouped data by {argument}", style="bold blue")
        for key, titles in groups.items():
            branch = tree.add(f"[bold cyan]{escape(key)}[/]")
            for title in titles:
                branch.add(escape(title))
        _console.print(tree)
    else:
        print(f"Grouped data by {argument}")
        for key, titles in groups.items():
            print(f"## {key}")
            for title in titles:
                print(GROUP_ITEM_PADDING + title)
