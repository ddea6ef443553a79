from library_catalog.grouping import (
    NUMBER_GROUP_HEADER,
    OTHER_GROUP_HEADER,
    group_by_author,
    group_by_title,
)


def test_group_by_title_buckets_and_order(book_factory):
    books = [book_factory(title=t) for t in ["Apple", "banana", "7 Habits"]]

    groups = group_by_title(books)

    assert groups == {"[0-9]": ["7 Habits"], "A": ["Apple"], "B": ["banana"]}
    assert list(groups) == [NUMBER_GROUP_HEADER, "A", "B"]


def test_group_by_title_keeps_encounter_order_and_duplicates(book_factory):
    books = [book_factory(title=t) for t in ["Mort", "Moby Dick", "mort", "Mort"]]

    assert group_by_title(books) == {"M": ["Mort", "Moby Dick", "mort", "Mort"]}


def test_group_by_title_letters_sorted(book_factory):
    books = [book_factory(title=t) for t in ["Zorba", "emma", "Anna", "1984", "2001"]]

    groups = group_by_title(books)
    assert list(groups) == ["[0-9]", "A", "E", "Z"]
    assert groups["[0-9]"] == ["1984", "2001"]


def test_group_by_title_other_characters_go_last(book_factory):
    books = [book_factory(title=t) for t in ["'Salem's Lot", "Carrie", "#Girlboss", "11/22/63"]]

    groups = group_by_title(books)
    assert list(groups) == [NUMBER_GROUP_HEADER, "C", OTHER_GROUP_HEADER]
    assert groups[OTHER_GROUP_HEADER] == ["'Salem's Lot", "#Girlboss"]


def test_group_by_author_lists_book_under_each_author(book_factory):
    books = [
        book_factory(title="Good Omens", authors=("Terry Pratchett", "Neil Gaiman")),
        book_factory(title="Mort", authors=("Terry Pratchett",)),
        book_factory(title="Coraline", authors=("Neil Gaiman",)),
    ]

    groups = group_by_author(books)

    assert list(groups) == ["Neil Gaiman", "Terry Pratchett"]
    assert groups["Neil Gaiman"] == ["Good Omens", "Coraline"]
    assert groups["Terry Pratchett"] == ["Good Omens", "Mort"]


def test_grouping_empty_input():
    assert group_by_title([]) == {}
    assert group_by_author([]) == {}


def test_group_by_title_keys_are_single_characters(book_factory):
    books = [book_factory(title=t) for t in ["ßeta", "Straße"]]

    groups = group_by_title(books)

    assert groups["ß"] == ["ßeta"]
    assert groups["S"] == ["Straße"]
    assert all(len(key) == 1 for key in groups if key not in (NUMBER_GROUP_HEADER, OTHER_GROUP_HEADER))
