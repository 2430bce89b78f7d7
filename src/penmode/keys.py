"""Restricted-editing input layer.

While pen mode is engaged, writing only moves forward: navigation and
deletion keys are swallowed and the trigger key crosses out the previous
word instead of moving the cursor.

The engaged flag lives in a ModeState that the host owns and passes in with
every key event. Nothing here is global.

Usage:
    >>> from penmode.buffer import LineBuffer, Position
    >>> state = ModeState(engaged=True)
    >>> buf = LineBuffer(["the quick fox"], cursor=Position(0, 13))
    >>> outcome = handle_keydown("ArrowLeft", state, buf)
    >>> outcome.suppress, buf.text
    (True, 'the quick ~~fox~~ ')

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from penmode.buffer import strike_last_word
from penmode.config import DEFAULT_CONFIG, PenModeConfig
from penmode.errors import EditRejectedError
from penmode.utils.logger import get_logger

if TYPE_CHECKING:
    from penmode.buffer import TextBuffer
    from penmode.edits import EditResult, NoOp

logger = get_logger(__name__)


@dataclass(slots=True)
class ModeState:
    """Mutable engaged/disengaged flag for pen mode."""

    engaged: bool = False

    def toggle(self) -> bool:
        """Flip the flag and return the new value."""
        self.engaged = not self.engaged
        logger.info("Pen Mode %s", "enabled" if self.engaged else "disabled")
        return self.engaged


class KeyAction(Enum):
    """What the input layer does with a key."""

    PASS = auto()  # host handles the key normally
    BLOCK = auto()  # swallowed
    STRIKE = auto()  # swallowed, previous word struck through


@dataclass(frozen=True, slots=True)
class KeyOutcome:
    """Result of handling one key event.

    Attributes:
        action: How the key was classified
        result: Resolver output for STRIKE, else None
        failed: True if the buffer rejected the strike edit

    """

    action: KeyAction
    result: EditResult | NoOp | None = None
    failed: bool = False

    @property
    def suppress(self) -> bool:
        """Whether the host must cancel the key's default effect."""
        return self.action is not KeyAction.PASS


def classify_key(
    key: str,
    state: ModeState,
    *,
    config: PenModeConfig = DEFAULT_CONFIG,
) -> KeyAction:
    """Classify a key name (DOM ``KeyboardEvent.key`` style).

    Examples:
        >>> classify_key("ArrowLeft", ModeState(engaged=True))
        <KeyAction.STRIKE: 3>
        >>> classify_key("Backspace", ModeState(engaged=False))
        <KeyAction.PASS: 1>
    """
    if not state.engaged:
        return KeyAction.PASS
    if key == config.trigger_key:
        return KeyAction.STRIKE
    if key in config.blocked_keys:
        return KeyAction.BLOCK
    return KeyAction.PASS


def handle_keydown(
    key: str,
    state: ModeState,
    buffer: TextBuffer,
    *,
    config: PenModeConfig = DEFAULT_CONFIG,
) -> KeyOutcome:
    """Handle a key event against a buffer.

    A rejected strike edit is logged and reported through
    ``KeyOutcome.failed``; the buffer is left as it was.

    Args:
        key: Key name
        state: Current mode gate
        buffer: Active document
        config: Key bindings and marker settings

    Returns:
        KeyOutcome telling the host whether to suppress the key

    """
    action = classify_key(key, state, config=config)

    if action is KeyAction.BLOCK:
        logger.debug("Prevented key: %s", key)
        return KeyOutcome(action)

    if action is KeyAction.STRIKE:
        try:
            result = strike_last_word(buffer, config=config)
        except EditRejectedError:
            logger.error("Error applying strikethrough", exc_info=True)
            return KeyOutcome(action, failed=True)
        return KeyOutcome(action, result=result)

    return KeyOutcome(action)


__all__ = [
    "ModeState",
    "KeyAction",
    "KeyOutcome",
    "classify_key",
    "handle_keydown",
]
