"""Grouping engine for the GROUP command.

Books are bucketed either by the first character of their title or by each of
their authors. The result is an ordered mapping from bucket key to the titles
in that bucket, titles kept in catalog order.
"""

from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from library_catalog.book import BookEntry

NUMBER_GROUP_HEADER = "[0-9]"
OTHER_GROUP_HEADER = "[other]"

GroupedTitles = Dict[str, List[str]]


def title_initial_key(book: BookEntry) -> Iterable[str]:
    first = book.title[0]
    if first.isdigit():
        return (NUMBER_GROUP_HEADER,)
    if first.isalpha():
        upper = first.upper()
        # some letters upper-case to several characters (e.g. "ß" -> "SS")
        return (upper if len(upper) == 1 else first,)
    return (OTHER_GROUP_HEADER,)


def author_keys(book: BookEntry) -> Iterable[str]:
    return book.authors


def title_sort_key(key: str) -> Tuple[int, str]:
    # digits first, then letters, then everything else
    if key == NUMBER_GROUP_HEADER:
        return (0, key)
    if key == OTHER_GROUP_HEADER:
        return (2, key)
    return (1, key)


def group_books(
    books: Iterable[BookEntry],
    key_func: Callable[[BookEntry], Iterable[str]],
    sort_key: Optional[Callable[[str], object]] = None,
) -> GroupedTitles:
    """Bucket book titles under every key ``key_func`` yields for a book."""
    groups: Dict[str, List[str]] = defaultdict(list)
    for book in books:
        for key in key_func(book):
            groups[key].append(book.title)

    return {key: groups[key] for key in sorted(groups, key=sort_key)}


def group_by_title(books: Iterable[BookEntry]) -> GroupedTitles:
    return group_books(books, title_initial_key, title_sort_key)


def group_by_author(books: Iterable[BookEntry]) -> GroupedTitles:
    return group_books(books, author_keys)
