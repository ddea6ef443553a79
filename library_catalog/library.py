import logging
from pathlib import Path
from typing import List, Optional, Union

from library_catalog.book import BookEntry
from library_catalog.loader import LibraryFileLoader
from library_catalog.utils.validators import require_not_none

logger = logging.getLogger(__name__)


class LibraryData:
    """Holds the in-memory book collection of a session."""

    def __init__(self, loader: Optional[LibraryFileLoader] = None) -> None:
        self._loader = loader
        self._books: List[BookEntry] = []

    # ------------------------- Core operations ------------------------- #
    def get_book_data(self) -> List[BookEntry]:
        """Return the live book list. Changes made to it are changes to the catalog."""
        return self._books

    def load_data(self, path: Union[str, Path]) -> bool:
        """Replace the current books with the ones parsed from ``path``.

        Returns False when the file cannot be read. Malformed records raise
        from the parser. In both cases the current books stay as they are.
        """
        require_not_none(path, "Given path must not be None.")

        loader = self._loader or LibraryFileLoader()
        if not loader.load_file_content(path):
            return False

        books = loader.parse_file_content()
        # in place, so lists handed out by get_book_data stay live
        self._books[:] = books
        logger.info("Loaded %d books from %s", len(books), path)
        return True

    def __len__(self) -> int:
        return len(self._books)
