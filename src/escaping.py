"""Escape-aware helpers for finding and splitting on grammar delimiters."""

ESCAPE = "\\"


def is_live(text: str, index: int) -> bool:
    """
    Check whether the character at ``index`` is live (not escaped).

    A character is escaped when it is preceded by an odd number of
    consecutive backslashes. ``\\#`` is literal, ``\\\\#`` is a live ``#``.

    Args:
        text: The string being scanned
        index: Position of the character to check

    Returns:
        True if the character counts as syntax
    """
    count = 0
    i = index - 1
    while i >= 0 and text[i] == ESCAPE:
        count += 1
        i -= 1
    return count % 2 == 0


def find_live(text: str, chars: str, start: int = 0) -> int | None:
    """
    Find the next live occurrence of any character in ``chars``.

    Args:
        text: The string to scan
        chars: Delimiter characters to look for
        start: Index to start scanning from

    Returns:
        Index of the match, or None if there is none
    """
    for i in range(start, len(text)):
        if text[i] in chars and is_live(text, i):
            return i
    return None


def split_live(text: str, separator: str, maxsplit: int = -1) -> list[str]:
    """
    Split ``text`` on live occurrences of a single-character separator.

    Escaped separators stay in their segment verbatim, backslash included.

    Args:
        text: The string to split
        separator: One character, e.g. ``.``, ``:`` or ``,``
        maxsplit: Maximum number of splits (-1 for no limit)

    Returns:
        List of segments (always at least one)
    """
    parts = []
    start = 0
    pos = find_live(text, separator)
    while pos is not None and (maxsplit < 0 or len(parts) < maxsplit):
        parts.append(text[start:pos])
        start = pos + 1
        pos = find_live(text, separator, start)
    parts.append(text[start:])
    return parts


def collapse_escapes(text: str) -> str:
    """Turn each ``\\\\`` pair into one backslash, keeping any other escape as written."""
    out = []
    i = 0
    while i < len(text):
        if text[i] == ESCAPE and i + 1 < len(text) and text[i + 1] == ESCAPE:
            out.append(ESCAPE)
            i += 2
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


def unescape(text: str) -> str:
    """Drop the backslash from every escape: ``\\.`` -> ``.``, ``\\\\`` -> ``\\``."""
    out = []
    i = 0
    while i < len(text):
        if text[i] == ESCAPE and i + 1 < len(text):
            out.append(text[i + 1])
            i += 2
            continue
        out.append(text[i])
        i += 1
    return "".join(out)
