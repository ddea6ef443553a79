import logging

import pytest

from library_catalog.book import BookEntry
from library_catalog.loader import LibraryFileLoader
from conftest import HEADER, SAMPLE_LINES


def test_new_loader_has_no_content():
    loader = LibraryFileLoader()
    assert loader.content_loaded() is False


def test_parse_without_load_logs_error_and_returns_empty(caplog):
    loader = LibraryFileLoader()
    with caplog.at_level(logging.ERROR):
        assert loader.parse_file_content() == []
    assert "No content loaded before parsing." in caplog.text


def test_load_and_parse_round_trip(books_csv):
    loader = LibraryFileLoader()
    assert loader.load_file_content(books_csv) is True
    assert loader.content_loaded() is True

    books = loader.parse_file_content()
    assert len(books) == len(SAMPLE_LINES) - 1
    assert books[0] == BookEntry("Dune", ["Frank Herbert"], 4.25, "0441172717", 604)
    assert books[2].authors == ("Terry Pratchett", "Neil Gaiman")
    assert [b.title for b in books] == ["Dune", "The Hobbit", "Good Omens", "7 Habits", "Mort"]


def test_header_only_file_yields_no_books(write_csv):
    loader = LibraryFileLoader()
    assert loader.load_file_content(write_csv([HEADER])) is True
    assert loader.parse_file_content() == []


def test_load_missing_file_fails_and_logs(tmp_path, caplog):
    loader = LibraryFileLoader()
    with caplog.at_level(logging.ERROR):
        assert loader.load_file_content(tmp_path / "missing.csv") is False
    assert loader.content_loaded() is False
    assert "Reading file content failed" in caplog.text


def test_failed_load_keeps_previous_content(books_csv, tmp_path):
    loader = LibraryFileLoader()
    loader.load_file_content(books_csv)

    assert loader.load_file_content(tmp_path / "missing.csv") is False
    assert loader.content_loaded() is True
    assert len(loader.parse_file_content()) == 5


def test_load_none_path_raises():
    with pytest.raises(TypeError):
        LibraryFileLoader().load_file_content(None)


def test_invalid_rating_aborts_whole_parse(write_csv):
    loader = LibraryFileLoader()
    loader.load_file_content(write_csv([HEADER, "Dune,Frank Herbert,4.2,1,604", "Bad,Someone,7.5,2,10"]))
    with pytest.raises(ValueError):
        loader.parse_file_content()


def test_negative_pages_aborts_parse(write_csv):
    loader = LibraryFileLoader()
    loader.load_file_content(write_csv([HEADER, "Bad,Someone,3.5,2,-10"]))
    with pytest.raises(ValueError):
        loader.parse_file_content()


def test_non_numeric_pages_aborts_parse(write_csv):
    loader = LibraryFileLoader()
    loader.load_file_content(write_csv([HEADER, "Bad,Someone,3.5,2,many"]))
    with pytest.raises(ValueError):
        loader.parse_file_content()


def test_missing_fields_fail_with_index_error(write_csv):
    loader = LibraryFileLoader()
    loader.load_file_content(write_csv([HEADER, "Dune,Frank Herbert,4.2"]))
    with pytest.raises(IndexError):
        loader.parse_file_content()


def test_custom_encoding(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes(f"{HEADER}\nÉmile,Jean-Jacques Rousseau,3.9,1,500\n".encode("latin-1"))

    loader = LibraryFileLoader(encoding="latin-1")
    assert loader.load_file_content(path) is True
    book = loader.parse_file_content()[0]
    assert book.title == "Émile"
    assert book.authors == ("Jean", "Jacques Rousseau")


def test_undecodable_file_fails(tmp_path):
    path = tmp_path / "binary.csv"
    path.write_bytes(b"\xff\xfe\xfa\x00")
    assert LibraryFileLoader(encoding="utf-8").load_file_content(path) is False
