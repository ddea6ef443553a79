"""Catalog commands.

Every command is built from its raw argument text, validates it right away
and remembers only the parsed state. Callers check ``is_valid`` before
calling ``execute``; executing an invalid command raises InvalidCommandError.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Type

from library_catalog.book import BookEntry
from library_catalog.grouping import GroupedTitles, group_by_author, group_by_title
from library_catalog.library import LibraryData
from library_catalog.utils.ui_helpers import NO_ENTRIES_MESSAGE, print_group_result, print_list_result
from library_catalog.utils.validators import ArgumentValidator, require_not_none

logger = logging.getLogger(__name__)

DATA_FILE_SUFFIX = ".csv"
ARGUMENT_INPUT_DELIMITER = " "


class InvalidCommandError(Exception):
    """Raised for unknown command names and for executing a command whose arguments did not parse."""


class CommandType(Enum):
    ADD = "add"
    LIST = "list"
    REMOVE = "remove"
    SEARCH = "search"
    GROUP = "group"

    @classmethod
    def from_name(cls, name: str) -> Optional["CommandType"]:
        require_not_none(name, "Command name must not be None.")
        return ArgumentValidator.match_keyword(name.strip(), cls, case_sensitive=False)


COMMANDS: Dict[CommandType, Type["LibraryCommand"]] = {}


def register(command_type: CommandType) -> Callable[[Type["LibraryCommand"]], Type["LibraryCommand"]]:
    def decorator(cls: Type["LibraryCommand"]) -> Type["LibraryCommand"]:
        COMMANDS[command_type] = cls
        return cls
    return decorator


class LibraryCommand(ABC):
    """Base class of all catalog commands."""

    def __init__(self, command_type: CommandType, argument_input: str) -> None:
        require_not_none(argument_input, "Given input argument must not be None.")
        self.command_type = command_type
        self.argument_input = argument_input
        self.is_valid = self.parse_arguments(argument_input)

    @abstractmethod
    def parse_arguments(self, argument_input: str) -> bool:
        """Check ``argument_input`` and keep the parsed state. Returns False when it is invalid."""

    @abstractmethod
    def _execute(self, data: LibraryData) -> None:
        ...

    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Given data must not be None.")
        if not self.is_valid:
            raise InvalidCommandError(
                f"Cannot execute {self.command_type.name} with invalid argument: {self.argument_input!r}"
            )
        logger.debug("Executing %s %r", self.command_type.name, self.argument_input)
        self._execute(data)


@register(CommandType.ADD)
class AddCmd(LibraryCommand):
    """Loads book data from a ``.csv`` file into the catalog.

    Whether the path exists or is readable is left to the catalog's loader.
    """

    def __init__(self, argument_input: str) -> None:
        self.book_data_path: Optional[Path] = None
        super().__init__(CommandType.ADD, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        clean = ArgumentValidator.normalize(argument_input)
        if not ArgumentValidator.has_suffix(clean, DATA_FILE_SUFFIX):
            return False
        self.book_data_path = Path(clean)
        return True

    def _execute(self, data: LibraryData) -> None:
        data.load_data(self.book_data_path)


class ListArgumentType(Enum):
    LONG = "long"
    SHORT = "short"


@register(CommandType.LIST)
class ListCmd(LibraryCommand):
    """Lists all books, titles only (``short``, the default) or full entries (``long``)."""

    def __init__(self, argument_input: str) -> None:
        self.command_argument: Optional[ListArgumentType] = None
        super().__init__(CommandType.LIST, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        clean = ArgumentValidator.normalize(argument_input)
        if not clean:
            argument = ListArgumentType.SHORT
        else:
            argument = ArgumentValidator.match_keyword(clean, ListArgumentType, case_sensitive=False)
        if argument is None:
            return False
        self.command_argument = argument
        return True

    def _execute(self, data: LibraryData) -> None:
        detailed = {
            ListArgumentType.SHORT: False,
            ListArgumentType.LONG: True,
        }[self.command_argument]
        print_list_result(data.get_book_data(), detailed=detailed)


@register(CommandType.SEARCH)
class SearchCmd(LibraryCommand):
    """Prints every title containing a single search word, ignoring case."""

    def __init__(self, argument_input: str) -> None:
        self.word_to_search_for: Optional[str] = None
        super().__init__(CommandType.SEARCH, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        clean = ArgumentValidator.normalize(argument_input)
        if not ArgumentValidator.is_single_token(clean):
            return False
        self.word_to_search_for = clean
        return True

    def _execute(self, data: LibraryData) -> None:
        needle = self.word_to_search_for.lower()
        hits = [book.title for book in data.get_book_data() if needle in book.title.lower()]

        for title in hits:
            print(title)
        if not hits:
            print(f"No hits found for search term: {self.word_to_search_for}")


class RemoveArgumentType(Enum):
    TITLE = "title"
    AUTHOR = "author"


@register(CommandType.REMOVE)
class RemoveCmd(LibraryCommand):
    """Removes books by exact title (first match only) or by author (all matches).

    The argument is ``TITLE <title>`` or ``AUTHOR <name>``; everything after
    the first space is taken verbatim.
    """

    def __init__(self, argument_input: str) -> None:
        self.removal_argument: Optional[RemoveArgumentType] = None
        self.book_to_remove: Optional[str] = None
        super().__init__(CommandType.REMOVE, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        clean = ArgumentValidator.normalize(argument_input)
        first_space = clean.find(ARGUMENT_INPUT_DELIMITER)
        if first_space <= 0:
            return False

        argument = ArgumentValidator.match_keyword(clean[:first_space], RemoveArgumentType)
        if argument is None:
            return False

        self.removal_argument = argument
        self.book_to_remove = clean[first_space + 1:]
        return True

    def _execute(self, data: LibraryData) -> None:
        handler = {
            RemoveArgumentType.TITLE: self._remove_by_title,
            RemoveArgumentType.AUTHOR: self._remove_by_author,
        }[self.removal_argument]
        handler(data.get_book_data())

    def _remove_by_title(self, books: List[BookEntry]) -> None:
        index = next((i for i, book in enumerate(books) if book.title == self.book_to_remove), None)
        if index is None:
            print(f"{self.book_to_remove}: not found.")
            return
        del books[index]
        print(f"{self.book_to_remove}: removed successfully.")

    def _remove_by_author(self, books: List[BookEntry]) -> None:
        kept = [book for book in books if self.book_to_remove not in book.authors]
        removed = len(books) - len(kept)
        books[:] = kept
        print(f"{removed} books removed for author: {self.book_to_remove}")


class GroupArgumentType(Enum):
    TITLE = "title"
    AUTHOR = "author"


GROUPERS: Dict[GroupArgumentType, Callable[[List[BookEntry]], GroupedTitles]] = {
    GroupArgumentType.TITLE: group_by_title,
    GroupArgumentType.AUTHOR: group_by_author,
}


@register(CommandType.GROUP)
class GroupCmd(LibraryCommand):
    """Groups titles by title initial or by author and prints the groups in order."""

    def __init__(self, argument_input: str) -> None:
        self.command_argument: Optional[GroupArgumentType] = None
        super().__init__(CommandType.GROUP, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        clean = ArgumentValidator.normalize(argument_input)
        argument = ArgumentValidator.match_keyword(clean, GroupArgumentType)
        if argument is None:
            return False
        self.command_argument = argument
        return True

    def _execute(self, data: LibraryData) -> None:
        books = data.get_book_data()
        if not books:
            print(NO_ENTRIES_MESSAGE)
            return
        groups = GROUPERS[self.command_argument](books)
        print_group_result(self.command_argument.name, groups)


def create_command(name: str, argument_input: str = "") -> LibraryCommand:
    """Build the command registered for ``name`` (case-insensitive)."""
    command_type = CommandType.from_name(name)
    if command_type is None:
        raise InvalidCommandError(f"Unknown command: {name}")
    return COMMANDS[command_type](argument_input)
