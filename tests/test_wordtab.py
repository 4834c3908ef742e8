import pytest

from cubscene.wordtab import find, find_unquoted, split_words


def test_find_locates_pattern():
    text = "static char *xpm[] = {"
    pos = find(text, "xpm", len(text))
    assert text[pos:pos + 3] == "xpm"
    assert "xpm" not in text[:pos]


def test_find_first_occurrence():
    text = "abab"
    assert find(text, "ab", len(text)) == 0


def test_find_missing_pattern():
    text = "no quotes here"
    assert find(text, '"', len(text)) == -1


def test_find_pattern_longer_than_length():
    text = "abcdef"
    assert find(text, "abc", 2) == -1


def test_find_rejects_empty_pattern():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_match():
    text = '"a /* b" /* c */'
    pos = find_unquoted(text, "/*", len(text))
    assert text[pos:pos + 2] == "/*"
    assert pos > text.index('"', 1)
    assert find(text, "/*", len(text)) < pos


def test_find_unquoted_only_inside_quotes():
    text = '"// inside"'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_without_quotes_matches_find():
    text = "int x; // comment"
    assert find_unquoted(text, "//", len(text)) == find(text, "//", len(text))


def test_find_unquoted_pattern_longer_than_length():
    text = "a // b"
    assert find_unquoted(text, "//", 1) == -1


def test_find_unquoted_rejects_empty_pattern():
    with pytest.raises(ValueError):
        find_unquoted("abc", "", 3)


def test_split_words_header_line():
    assert split_words("42 42 3 1") == ["42", "42", "3", "1"]


def test_split_words_strips_tabs_and_spaces():
    assert split_words("\t a \t\tb  ") == ["a", "b"]


def test_split_words_keeps_newlines_in_words():
    assert split_words("c red\nx") == ["c", "red\nx"]


def test_split_words_empty():
    assert split_words("  \t ") == []


def test_split_words_join_round_trip():
    words = ["c", "#FF0000", "s", "none"]
    assert split_words(" \t".join(words)) == words