import pytest
from minigrep.core.search.engine import iter_lines, search, search_case_intensive

CONTENTS = """\
Rust:
safe, fast, productive.
Pick three.
Trust me."""

def test_search_single_match():
    assert search("rodu", CONTENTS) == ["safe, fast, productive."]

def test_search_multiple_matches_in_order():
    contents = CONTENTS + "\nQuick, sick tricks."
    assert search("ick", contents) == ["Pick three.", "Quick, sick tricks."]

def test_search_no_match():
    assert search("not_in_the_content", CONTENTS) == []

def test_search_is_case_sensitive():
    assert search("rust", CONTENTS) == ["Trust me."]

def test_search_case_intensive():
    assert search_case_intensive("rUSt", CONTENTS) == ["Rust:", "Trust me."]

def test_case_intensive_keeps_original_text():
    result = search_case_intensive("PICK", CONTENTS)
    assert result == ["Pick three."]

def test_empty_query_matches_every_line():
    assert search("", CONTENTS) == CONTENTS.split("\n")
    assert search_case_intensive("", CONTENTS) == CONTENTS.split("\n")

@pytest.mark.parametrize("query", ["", "Rust", "anything"])
def test_empty_corpus_has_no_matches(query):
    assert search(query, "") == []
    assert search_case_intensive(query, "") == []

def test_query_longer_than_line():
    assert search("Pick three. And more", CONTENTS) == []

def test_duplicate_lines_are_kept():
    contents = "echo\nother\necho\n"
    assert search("echo", contents) == ["echo", "echo"]

def test_line_counted_once_for_repeated_query():
    assert search("a", "banana\nkiwi") == ["banana"]

def test_no_letter_query_same_in_both_modes():
    contents = "a 1.2\nb 12\nC 1.2.3"
    assert search("1.2", contents) == search_case_intensive("1.2", contents)

def test_case_intensive_superset():
    contents = "Rust\nrust\nRUST\nruby"
    sensitive = search("Rust", contents)
    insensitive = search_case_intensive("Rust", contents)
    assert set(sensitive) <= set(insensitive)
    assert len(insensitive) == 3

def test_iter_lines_trailing_newline():
    assert list(iter_lines("a\nb\n")) == ["a", "b"]
    assert list(iter_lines("a\nb")) == ["a", "b"]

def test_iter_lines_keeps_empty_lines():
    assert list(iter_lines("a\n\nb")) == ["a", "", "b"]
    assert list(iter_lines("\n")) == [""]

def test_iter_lines_strips_crlf():
    assert list(iter_lines("one\r\ntwo\r\n")) == ["one", "two"]
    assert search("one", "one\r\ntwo") == ["one"]

def test_result_is_subsequence_of_lines():
    contents = "alpha\nbeta\ngamma\nalphabet\n"
    lines = list(iter_lines(contents))
    result = search("alpha", contents)
    positions = [lines.index(line) for line in result]
    assert positions == sorted(positions)
    assert all("alpha" in line for line in result)
