import logging
from pathlib import Path
from typing import List, Optional, Union

from library_catalog.book import BookEntry
from library_catalog.config import settings
from library_catalog.utils.validators import require_not_none

logger = logging.getLogger(__name__)

ENTRY_DELIMITER = ","
AUTHORS_DELIMITER = "-"


class LibraryFileLoader:
    """Loads book data from a delimited text file.

    ``load_file_content`` has to succeed before ``parse_file_content`` can
    return any books. Stored lines do not include line breaks.
    """

    def __init__(self, encoding: Optional[str] = None) -> None:
        self.encoding = encoding or settings.file_encoding
        self.file_content: Optional[List[str]] = None

    def load_file_content(self, file_name: Union[str, Path]) -> bool:
        """Read all lines of ``file_name``. Returns False if the file could not be read."""
        require_not_none(file_name, "Given filename must not be None.")

        try:
            content = Path(file_name).read_text(encoding=self.encoding).splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Reading file content failed: %s", e)
            return False

        self.file_content = content
        logger.debug("Loaded %d lines from %s", len(content), file_name)
        return True

    def content_loaded(self) -> bool:
        return self.file_content is not None

    def parse_file_content(self) -> List[BookEntry]:
        """Turn the loaded lines into book entries, skipping the header line.

        Raises ValueError for malformed numbers or invalid records and
        IndexError for lines with too few fields; nothing is returned then.
        """
        if not self.content_loaded():
            logger.error("No content loaded before parsing.")
            return []

        entries: List[BookEntry] = []
        for line in self.file_content[1:]:
            fields = line.split(ENTRY_DELIMITER)

            title = fields[0]
            authors = fields[1].split(AUTHORS_DELIMITER)
            rating = float(fields[2])
            isbn = fields[3]
            pages = int(fields[4])

            entries.append(BookEntry(title, authors, rating, isbn, pages))

        return entries
