"""Strikethrough resolver: cross out the word before the cursor.

Given one line and a cursor offset, decides which word the user means,
whether it is already marked, and what single replacement marks it.

Two cursor contexts:

1. After whitespace (``"the quick fox |"``):
   The word before the trailing whitespace is wrapped in place. The
   existing space keeps separating it from what follows, so none is added.

2. At the cursor (``"the quick fox|"``):
   The run of non-whitespace ending at the cursor is wrapped and a single
   space is appended so the next typed word is separated.

Either way exactly one space ends up after the closing marker, and
triggering again at the new cursor is a no-op.

Thread Safety:
``resolve`` is a pure function with no state between calls.

"""

from __future__ import annotations

from penmode.edits import (
    ALREADY_MARKED,
    EMPTY_WORD,
    EditResult,
    NoOp,
    ResolveCase,
    WordSpan,
)
from penmode.errors import ContractViolation, CursorError
from penmode.markers import (
    STRIKETHROUGH,
    MarkerPair,
    has_nearby_close,
    is_marked,
    touches_marker,
)


def resolve(
    line: str,
    cursor: int,
    *,
    marker: MarkerPair = STRIKETHROUGH,
    strict_markers: bool = False,
) -> EditResult | NoOp:
    """Compute the edit that strikes through the last word before cursor.

    Args:
        line: Text of the cursor's line
        cursor: Insertion offset, ``0 <= cursor <= len(line)``
        marker: Delimiters to wrap the word in
        strict_markers: Detect existing marks by pairing delimiters across
            the whole line instead of the local proximity heuristic

    Returns:
        EditResult describing the replacement, or a falsy NoOp when the word
        is empty or already marked

    Raises:
        ContractViolation: If line is not a string
        CursorError: If cursor is not an int in range

    Examples:
        >>> resolve("the quick fox", 13).new_text
        '~~fox~~ '
        >>> resolve("the quick fox ", 14).new_cursor
        17
        >>> resolve("the ~~quick~~ fox", 13)
        NoOp(reason=<NoOpReason.ALREADY_MARKED: 1>)

    """
    _check_preconditions(line, cursor)

    before = line[:cursor]

    if not strict_markers and has_nearby_close(before, marker):
        return ALREADY_MARKED

    if before and before[-1].isspace():
        return _resolve_after_whitespace(line, before, marker, strict_markers)
    return _resolve_at_cursor(line, cursor, marker, strict_markers)


def _check_preconditions(line: object, cursor: object) -> None:
    if not isinstance(line, str):
        raise ContractViolation(f"line must be str, not {type(line).__name__}")
    # bool is an int subclass but never a valid offset
    if not isinstance(cursor, int) or isinstance(cursor, bool):
        raise CursorError(cursor)
    if not 0 <= cursor <= len(line):
        raise CursorError(cursor, len(line))


def word_start(text: str, end: int) -> int:
    """Offset where the run of non-whitespace ending at ``end`` begins.

    Returns ``end`` itself when ``text[end - 1]`` is whitespace or ``end``
    is zero.

    Examples:
        >>> word_start("the quick fox", 13)
        10
        >>> word_start("fox", 3)
        0
    """
    start = end
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    return start


def word_end(text: str, start: int) -> int:
    """Offset where the run of non-whitespace starting at ``start`` ends."""
    end = start
    while end < len(text) and not text[end].isspace():
        end += 1
    return end


def _resolve_after_whitespace(
    line: str,
    before: str,
    marker: MarkerPair,
    strict_markers: bool,
) -> EditResult | NoOp:
    trimmed = before.rstrip()

    if not strict_markers and has_nearby_close(trimmed, marker):
        return ALREADY_MARKED

    end = len(trimmed)
    span = WordSpan(word_start(trimmed, end), end)
    if span.is_empty:
        return EMPTY_WORD

    if strict_markers and is_marked(line, span, marker):
        return ALREADY_MARKED

    new_text = marker.wrap(span.text(line))
    return EditResult(
        replace_from=span.start,
        replace_to=span.end,
        new_text=new_text,
        new_cursor=span.start + len(new_text),
        span=span,
        case=ResolveCase.AFTER_WHITESPACE,
    )


def _resolve_at_cursor(
    line: str,
    cursor: int,
    marker: MarkerPair,
    strict_markers: bool,
) -> EditResult | NoOp:
    span = WordSpan(word_start(line, cursor), cursor)
    if span.is_empty:
        return EMPTY_WORD

    if strict_markers:
        # Judge the whole token so a closer right of the cursor still counts
        marked = is_marked(line, WordSpan(span.start, word_end(line, cursor)), marker)
    else:
        marked = touches_marker(line, span.start, span.end, marker)
    if marked:
        return ALREADY_MARKED

    new_text = marker.wrap(span.text(line)) + " "
    return EditResult(
        replace_from=span.start,
        replace_to=cursor,
        new_text=new_text,
        new_cursor=span.start + len(new_text),
        span=span,
        case=ResolveCase.AT_CURSOR,
    )


__all__ = ["resolve", "word_start", "word_end"]
