import pytest

from triedict import levenshtein


@pytest.mark.parametrize("s, t, expected", [
    ("", "", 0),
    ("", "abc", 3),
    ("abc", "", 3),
    ("helo", "hello", 1),
    ("helo", "hell", 1),
    ("helo", "help", 1),
    ("helo", "hero", 1),
    ("helo", "halt", 2),
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
])
def test_levenshtein(s, t, expected):
    assert levenshtein(s, t) == expected


def test_levenshtein_symmetric():
    assert levenshtein("sunday", "saturday") == levenshtein("saturday", "sunday") == 3


def test_levenshtein_returns_int():
    assert type(levenshtein("a", "b")) is int
