"""
penmode — Forward-only writing with strikethrough corrections

Pen mode turns a text editor into something closer to writing with a pen:
navigation and deletion keys are disabled, and the trigger key crosses out
the previous word with ``~~strikethrough~~`` instead.

The core is a pure resolver that works on one line and a cursor offset and
returns the edit to make. Zero runtime dependencies.

Quick Start:
    >>> from penmode import resolve
    >>> result = resolve("the quick fox", 13)
    >>> result.apply("the quick fox")
    'the quick ~~fox~~ '
    >>> resolve("the quick ~~fox~~ ", result.new_cursor)
    NoOp(reason=<NoOpReason.ALREADY_MARKED: 1>)

Editor Integration:
    >>> from penmode import LineBuffer, ModeState, Position, handle_keydown
    >>> state = ModeState(engaged=True)
    >>> buf = LineBuffer(["the quick fox "], cursor=Position(0, 14))
    >>> handle_keydown("Backspace", state, buf).suppress
    True
    >>> handle_keydown("ArrowLeft", state, buf).result.new_text
    '~~fox~~'
"""

from penmode.buffer import LineBuffer, Position, TextBuffer, apply_edit, strike_last_word
from penmode.config import DEFAULT_CONFIG, PenModeConfig
from penmode.edits import EditResult, NoOp, NoOpReason, ResolveCase, WordSpan
from penmode.errors import (
    ConfigError,
    ContractViolation,
    CursorError,
    EditRejectedError,
    PenModeError,
)
from penmode.keys import KeyAction, KeyOutcome, ModeState, classify_key, handle_keydown
from penmode.markers import STRIKETHROUGH, MarkerPair, is_marked, marked_spans
from penmode.resolver import resolve

__version__ = "0.1.0"

__all__ = [
    # Core
    "resolve",
    "EditResult",
    "NoOp",
    "NoOpReason",
    "ResolveCase",
    "WordSpan",
    # Markers
    "MarkerPair",
    "STRIKETHROUGH",
    "marked_spans",
    "is_marked",
    # Buffers
    "Position",
    "TextBuffer",
    "LineBuffer",
    "apply_edit",
    "strike_last_word",
    # Input layer
    "ModeState",
    "KeyAction",
    "KeyOutcome",
    "classify_key",
    "handle_keydown",
    # Configuration
    "PenModeConfig",
    "DEFAULT_CONFIG",
    # Errors
    "PenModeError",
    "ContractViolation",
    "CursorError",
    "EditRejectedError",
    "ConfigError",
    # Version
    "__version__",
]
