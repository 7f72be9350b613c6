from typing import Iterator, List


def iter_lines(contents: str) -> Iterator[str]:
    """
    Splits a corpus on "\\n", dropping a trailing "\\r" from each line.
    A final newline does not produce an empty last line; an empty corpus
    has no lines at all.
    """
    if not contents:
        return
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def search(query: str, contents: str) -> List[str]:
    return [line for line in iter_lines(contents) if query in line]


def search_case_intensive(query: str, contents: str) -> List[str]:
    """
    Case-insensitive variant of `search`. Matching is done on lowercased
    copies; the returned lines keep their original case.
    """
    query = query.lower()
    return [line for line in iter_lines(contents) if query in line.lower()]
