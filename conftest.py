import pytest

from library_catalog.book import BookEntry
from library_catalog.library import LibraryData
from library_catalog.utils import cli_config
from library_catalog.utils.ui_helpers import OUTPUT_MODE_ENV

HEADER = "title,authors,rating,isbn,pages"

SAMPLE_LINES = [
    HEADER,
    "Dune,Frank Herbert,4.25,0441172717,604",
    "The Hobbit,J.R.R. Tolkien,4.27,0618260307,366",
    "Good Omens,Terry Pratchett-Neil Gaiman,4.25,0060853980,432",
    "7 Habits,Stephen Covey,4.08,0743269519,381",
    "Mort,Terry Pratchett,4.23,0061020680,272",
]


@pytest.fixture(autouse=True)
def isolated_cli_state(tmp_path, monkeypatch):
    # Keep config files and output mode per test
    monkeypatch.setattr(cli_config.settings, "cli_config_dir", str(tmp_path / "cli-config"))
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    cli_config.get_cli_config.cache_clear()
    yield
    cli_config.get_cli_config.cache_clear()


@pytest.fixture
def write_csv(tmp_path):
    def _write(lines, name="books.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def books_csv(write_csv):
    return write_csv(SAMPLE_LINES)


@pytest.fixture
def library(books_csv):
    data = LibraryData()
    assert data.load_data(books_csv) is True
    return data


@pytest.fixture
def make_library():
    def _make(*books):
        data = LibraryData()
        data.get_book_data().extend(books)
        return data
    return _make


@pytest.fixture
def book_factory():
    def _book(title="Dune", authors=("Frank Herbert",), rating=4.25, isbn="0441172717", pages=604):
        return BookEntry(title, list(authors), rating, isbn, pages)
    return _book
