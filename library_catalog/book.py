from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from library_catalog.utils.validators import TextValidator, require_not_none

MIN_RATING = 0.0
MAX_RATING = 5.0


@dataclass(frozen=True)
class BookEntry:
    """A single immutable book entry of the catalog.

    Equality and hashing cover all five fields; author order matters.
    """

    title: str
    authors: Tuple[str, ...]
    rating: float
    isbn: str
    pages: int

    def __init__(self, title: str, authors: Iterable[str], rating: float, isbn: str, pages: int) -> None:
        require_not_none(title, "Title must not be None.")
        require_not_none(authors, "Authors must not be None.")
        require_not_none(rating, "Rating must not be None.")
        require_not_none(isbn, "ISBN must not be None.")
        require_not_none(pages, "Pages must not be None.")

        authors = tuple(authors)
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError("Rating value should be a number between 0 and 5")
        if not float(pages).is_integer():
            raise ValueError("Pages must be a whole number")
        if pages < 0:
            raise ValueError("Pages parameter must not be negative")
        if not TextValidator.is_non_empty(title):
            raise ValueError("Title must not be empty")
        if not TextValidator.all_non_empty(authors):
            raise ValueError("A book needs at least one author and no author name may be empty")
        if not TextValidator.is_non_empty(isbn):
            raise ValueError("ISBN must not be empty")

        # frozen dataclass: bypass the generated __setattr__ guard
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "authors", authors)
        object.__setattr__(self, "rating", float(rating))
        object.__setattr__(self, "isbn", isbn)
        object.__setattr__(self, "pages", int(pages))

    def authors_to_string(self) -> str:
        return ",".join(self.authors)

    def __str__(self) -> str:
        return (
            f"{self.title}\n"
            f"by {self.authors_to_string()}\n"
            f"Rating: {self.rating:.2f}\n"
            f"ISBN: {self.isbn}\n"
            f"{self.pages} pages\n"
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "authors": list(self.authors),
            "rating": self.rating,
            "isbn": self.isbn,
            "pages": self.pages,
        }
