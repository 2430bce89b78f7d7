"""Text buffer integration for the strikethrough resolver.

The resolver only sees one line and an offset. This module connects it to a
live document:

- TextBuffer: the protocol a host editor implements
- LineBuffer: an in-memory TextBuffer for tests and headless use
- apply_edit: apply an EditResult, restoring the document if the host fails
- strike_last_word: read cursor, resolve, apply

Thread Safety:
LineBuffer is not thread-safe. Making a buffer mutation atomic for other
readers is the host's responsibility.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from penmode.config import DEFAULT_CONFIG, PenModeConfig
from penmode.edits import EditResult, NoOp, NoOpReason
from penmode.errors import EditRejectedError
from penmode.resolver import resolve
from penmode.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Position:
    """Cursor or range endpoint in a buffer.

    Attributes:
        line: Line index (0-indexed)
        ch: Character offset within the line

    """

    line: int
    ch: int


@runtime_checkable
class TextBuffer(Protocol):
    """Protocol for editable documents.

    Implementations may raise any exception from ``replace_range`` or
    ``set_cursor`` to reject an edit.
    """

    def get_cursor(self) -> Position:
        """Return the current cursor position."""
        ...

    def get_line(self, line: int) -> str:
        """Return the text of a line without its newline."""
        ...

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the text between start and end with text."""
        ...

    def set_cursor(self, pos: Position) -> None:
        """Move the cursor."""
        ...


class LineBuffer:
    """In-memory TextBuffer holding a list of lines.

    Only single-line ranges are supported.

    Example:
        >>> buf = LineBuffer(["the quick fox"], cursor=Position(0, 13))
        >>> strike_last_word(buf)
        EditResult(...)
        >>> buf.text
        'the quick ~~fox~~ '

    """

    __slots__ = ("_lines", "_cursor")

    def __init__(self, lines: Iterable[str] = ("",), cursor: Position | None = None) -> None:
        self._lines: list[str] = list(lines) or [""]
        self._cursor = Position(0, 0)
        self.set_cursor(cursor or Position(0, 0))

    @classmethod
    def from_text(cls, text: str, cursor: Position | None = None) -> LineBuffer:
        return cls(text.split("\n"), cursor)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def get_cursor(self) -> Position:
        return self._cursor

    def get_line(self, line: int) -> str:
        self._check_line(line)
        return self._lines[line]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        if start.line != end.line:
            raise EditRejectedError("multi-line ranges are not supported", start.line)
        self._check_line(start.line)
        current = self._lines[start.line]
        if not 0 <= start.ch <= end.ch <= len(current):
            raise EditRejectedError(
                f"range [{start.ch}, {end.ch}) out of bounds for length {len(current)}",
                start.line,
            )
        if "\n" in text:
            raise EditRejectedError("replacement text must not contain newlines", start.line)
        self._lines[start.line] = current[: start.ch] + text + current[end.ch :]

    def set_cursor(self, pos: Position) -> None:
        self._check_line(pos.line)
        if not 0 <= pos.ch <= len(self._lines[pos.line]):
            raise EditRejectedError(f"cursor offset {pos.ch} out of bounds", pos.line)
        self._cursor = pos

    def _check_line(self, line: int) -> None:
        if not 0 <= line < len(self._lines):
            raise EditRejectedError(f"no such line (buffer has {len(self._lines)})", line)


def apply_edit(buffer: TextBuffer, lineno: int, result: EditResult | NoOp) -> bool:
    """Apply a resolver result to one line of a buffer.

    Replaces the range, then moves the cursor. If either step fails the
    original line text and cursor are put back before raising.

    Args:
        buffer: Document to modify
        lineno: Line the result was computed for
        result: Output of ``resolve``

    Returns:
        True if the buffer was modified, False for a NoOp

    Raises:
        EditRejectedError: If the buffer refused the edit. The document is
            unchanged.

    """
    if not result:
        return False

    original_line = buffer.get_line(lineno)
    original_cursor = buffer.get_cursor()

    try:
        buffer.replace_range(
            result.new_text,
            Position(lineno, result.replace_from),
            Position(lineno, result.replace_to),
        )
        buffer.set_cursor(Position(lineno, result.new_cursor))
    except Exception as e:
        logger.debug("Edit on line %d failed, restoring", lineno, exc_info=True)
        _restore(buffer, lineno, original_line, original_cursor)
        if isinstance(e, EditRejectedError):
            raise
        raise EditRejectedError(str(e) or type(e).__name__, lineno) from e

    return True


def _restore(buffer: TextBuffer, lineno: int, text: str, cursor: Position) -> None:
    try:
        current = buffer.get_line(lineno)
        if current != text:
            buffer.replace_range(text, Position(lineno, 0), Position(lineno, len(current)))
        buffer.set_cursor(cursor)
    except Exception:
        logger.error("Could not restore line %d after failed edit", lineno, exc_info=True)


def strike_last_word(
    buffer: TextBuffer,
    *,
    config: PenModeConfig = DEFAULT_CONFIG,
) -> EditResult | NoOp:
    """Strike through the word before the buffer's cursor.

    Args:
        buffer: Document to modify
        config: Marker pair and detection mode

    Returns:
        The applied EditResult, or the NoOp that left the buffer untouched

    Raises:
        EditRejectedError: If the buffer refused the edit

    """
    cursor = buffer.get_cursor()
    line = buffer.get_line(cursor.line)
    result = resolve(
        line,
        cursor.ch,
        marker=config.marker,
        strict_markers=config.strict_markers,
    )

    if isinstance(result, NoOp):
        if result.reason is NoOpReason.ALREADY_MARKED:
            logger.debug("Word already has strikethrough, ignoring")
        else:
            logger.debug("Nothing to strike through at %d:%d", cursor.line, cursor.ch)
        return result

    apply_edit(buffer, cursor.line, result)
    logger.debug("Strikethrough applied to %r", result.span.text(line))
    return result


__all__ = [
    "Position",
    "TextBuffer",
    "LineBuffer",
    "apply_edit",
    "strike_last_word",
]
