"""Balanced span extraction for ``[action]`` and ``#tag#`` constructs."""

from dataclasses import dataclass
from enum import Enum

from escaping import find_live, is_live


ACTION_OPEN = "["
ACTION_CLOSE = "]"
TAG = "#"


class SpanKind(str, Enum):
    """Kinds of construct the resolver knows how to expand."""
    ACTION = "action"
    TAG = "tag"


@dataclass(frozen=True)
class Span:
    """One matched construct within the string being scanned."""
    kind: SpanKind
    start: int
    end: int  # index just past the closing delimiter
    content: str

    @property
    def length(self) -> int:
        return self.end - self.start


def find_opening(text: str, start: int = 0) -> int | None:
    """Find the next live ``[`` or ``#`` at or after ``start``."""
    return find_live(text, ACTION_OPEN + TAG, start)


def extract_span(text: str, start: int) -> Span | None:
    """
    Extract the balanced span opened by the delimiter at ``start``.

    Live ``[``/``]`` pairs nest inside both kinds of span, so a tag may carry
    actions (``#[pet:#animal#]pet#``) and an action may carry tags
    (``[pet:#animal#]``).

    Args:
        text: The string being scanned
        start: Index of a live ``[`` or ``#``

    Returns:
        The matched Span, or None if the opening delimiter is unbalanced
    """
    opener = text[start]
    if opener == ACTION_OPEN:
        kind = SpanKind.ACTION
        closer = ACTION_CLOSE
    elif opener == TAG:
        kind = SpanKind.TAG
        closer = TAG
    else:
        raise ValueError(f"Not an opening delimiter: {opener!r}")

    depth = 0
    for i in range(start + 1, len(text)):
        char = text[i]
        if char not in "[]#" or not is_live(text, i):
            continue
        if char == closer and depth == 0:
            return Span(kind=kind, start=start, end=i + 1, content=text[start + 1:i])
        if char == ACTION_OPEN:
            depth += 1
        elif char == ACTION_CLOSE and depth > 0:
            # An unmatched ] inside a tag is plain text
            depth -= 1
    return None
