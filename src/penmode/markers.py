"""Marker pairs and already-marked detection.

A MarkerPair is the open/close delimiter wrapped around struck-through text
(``~~`` / ``~~`` in Markdown). Two detection strategies are provided:

1. Proximity heuristics (default):
   - ``has_nearby_close``: a closing delimiter within a short lookback window
   - ``touches_marker``: delimiter inside a word or directly flanking it
   Cheap and local. An unrelated ``~~`` just before a short word is a
   false positive.

2. Span scanning (strict):
   - ``marked_spans``: pairs openers with closers left to right
   - ``is_marked``: a word overlapping or touching any closed span

Usage:
    >>> from penmode.markers import STRIKETHROUGH, marked_spans
    >>> STRIKETHROUGH.wrap("fox")
    '~~fox~~'
    >>> list(marked_spans("the ~~quick~~ fox", STRIKETHROUGH))
    [(4, 13)]

Thread Safety:
MarkerPair is frozen and all functions are pure.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from penmode.edits import WordSpan


@dataclass(frozen=True, slots=True)
class MarkerPair:
    """Open/close delimiters denoting struck-through text.

    Attributes:
        open: Delimiter inserted before the word
        close: Delimiter inserted after the word

    """

    open: str = "~~"
    close: str = "~~"

    def __post_init__(self) -> None:
        for label, delimiter in (("open", self.open), ("close", self.close)):
            if not delimiter:
                raise ValueError(f"Marker {label} delimiter must not be empty")
            if any(ch.isspace() for ch in delimiter):
                raise ValueError(
                    f"Marker {label} delimiter must not contain whitespace: {delimiter!r}"
                )

    def wrap(self, text: str) -> str:
        """Return text surrounded by the delimiters."""
        return f"{self.open}{text}{self.close}"

    @property
    def lookback(self) -> int:
        """Width of the closing-delimiter proximity window."""
        return 2 * len(self.close)


STRIKETHROUGH = MarkerPair("~~", "~~")


# =============================================================================
# Proximity heuristics
# =============================================================================


def has_nearby_close(text: str, marker: MarkerPair = STRIKETHROUGH) -> bool:
    """Check for a closing delimiter at the tail of text.

    True when text ends with the closing delimiter, or the delimiter occurs
    anywhere in the last ``marker.lookback`` characters (the whole text when
    it is shorter than that).

    Examples:
        >>> has_nearby_close("the ~~quick~~")
        True
        >>> has_nearby_close("the ~~quick~~ ")
        True
        >>> has_nearby_close("the quick")
        False
    """
    if text.endswith(marker.close):
        return True
    return marker.close in text[-marker.lookback :]


def touches_marker(
    line: str,
    start: int,
    end: int,
    marker: MarkerPair = STRIKETHROUGH,
) -> bool:
    """Check whether ``line[start:end]`` carries or is flanked by a marker.

    A word containing either delimiter counts as marked, so a manually typed
    ``~~`` inside a word disqualifies it.

    Args:
        line: Full line text
        start: Word start offset
        end: Word end offset (exclusive)
        marker: Marker pair to look for

    Returns:
        True if the delimiters occur in the word, end just before it, or
        start just after it
    """
    word = line[start:end]
    if marker.close in word or marker.open in word:
        return True

    width = len(marker.open)
    if start >= width and line[start - width : start] == marker.open:
        return True

    width = len(marker.close)
    if end + width <= len(line) and line[end : end + width] == marker.close:
        return True

    return False


# =============================================================================
# Span scanning
# =============================================================================


def marked_spans(line: str, marker: MarkerPair = STRIKETHROUGH) -> Iterator[tuple[int, int]]:
    """Yield the closed intervals of marked text in line.

    Each opener is paired with the next closer after it. An interval covers
    the delimiters as well as the body. An opener without a closer yields
    nothing.

    Args:
        line: Line text to scan
        marker: Marker pair

    Yields:
        ``(start, end)`` with ``line[start:end] == open + body + close``
    """
    pos = 0
    while True:
        start = line.find(marker.open, pos)
        if start == -1:
            return
        close_at = line.find(marker.close, start + len(marker.open))
        if close_at == -1:
            return
        end = close_at + len(marker.close)
        yield (start, end)
        pos = end


def is_marked(line: str, span: WordSpan, marker: MarkerPair = STRIKETHROUGH) -> bool:
    """Check a word against the marked spans of its line.

    True if the word contains a delimiter, or overlaps or touches a marked
    interval. Markers elsewhere on the line do not count.

    Examples:
        >>> from penmode.edits import WordSpan
        >>> is_marked("~~a~~ b", WordSpan(6, 7))
        False
        >>> is_marked("~~a~~b", WordSpan(5, 6))
        True
    """
    word = span.text(line)
    if marker.open in word or marker.close in word:
        return True
    return any(
        start <= span.end and span.start <= end for start, end in marked_spans(line, marker)
    )


__all__ = [
    "MarkerPair",
    "STRIKETHROUGH",
    "has_nearby_close",
    "touches_marker",
    "marked_spans",
    "is_marked",
]
