"""Value types produced by the strikethrough resolver.

WordSpan locates the target word, EditResult describes the single
replacement to perform, and NoOp says that nothing should change.

Thread Safety:
All types are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class WordSpan:
    """Half-open character range ``[start, end)`` of a word within a line.

    An empty span (``start == end``) means no word was found.

    Examples:
        >>> span = WordSpan(10, 13)
        >>> span.text("the quick fox")
        'fox'
        >>> len(span)
        3

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid word span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def text(self, line: str) -> str:
        """Return the substring of line covered by this span."""
        return line[self.start : self.end]


class ResolveCase(Enum):
    """Which cursor context produced an edit."""

    AFTER_WHITESPACE = auto()  # "fox |"
    AT_CURSOR = auto()  # "fox|" or "fo|x"


class NoOpReason(Enum):
    """Why the resolver declined to edit."""

    ALREADY_MARKED = auto()
    EMPTY_WORD = auto()


@dataclass(frozen=True, slots=True)
class EditResult:
    """A single contiguous replacement in a line plus the new cursor.

    Attributes:
        replace_from: Start offset of the replaced range
        replace_to: End offset of the replaced range (exclusive)
        new_text: Text inserted in place of the range
        new_cursor: Cursor offset after the edit is applied
        span: The word that was marked
        case: Cursor context that produced the edit

    """

    replace_from: int
    replace_to: int
    new_text: str
    new_cursor: int
    span: WordSpan
    case: ResolveCase

    def __bool__(self) -> bool:
        return True

    def apply(self, line: str) -> str:
        """Return line with the replacement performed.

        Example:
            >>> from penmode import resolve
            >>> result = resolve("the quick fox", 13)
            >>> result.apply("the quick fox")
            'the quick ~~fox~~ '
        """
        return line[: self.replace_from] + self.new_text + line[self.replace_to :]


@dataclass(frozen=True, slots=True)
class NoOp:
    """Resolver outcome meaning the buffer must not be touched.

    Falsy, so ``if result := resolve(line, cursor):`` only enters on edits.
    """

    reason: NoOpReason

    def __bool__(self) -> bool:
        return False


ALREADY_MARKED = NoOp(NoOpReason.ALREADY_MARKED)
EMPTY_WORD = NoOp(NoOpReason.EMPTY_WORD)


__all__ = [
    "WordSpan",
    "ResolveCase",
    "NoOpReason",
    "EditResult",
    "NoOp",
    "ALREADY_MARKED",
    "EMPTY_WORD",
]
