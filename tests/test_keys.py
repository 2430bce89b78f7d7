"""Tests for the restricted-editing input layer."""

import logging

import pytest

from penmode import (
    KeyAction,
    KeyOutcome,
    LineBuffer,
    ModeState,
    PenModeConfig,
    Position,
    classify_key,
    handle_keydown,
)
from penmode.config import DEFAULT_BLOCKED_KEYS


class ReadOnlyBuffer(LineBuffer):
    """Buffer that refuses every edit."""

    __slots__ = ()

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        raise PermissionError("buffer is read-only")


class TestModeState:
    """Explicit mode gate."""

    def test_default_disengaged(self) -> None:
        assert ModeState().engaged is False

    def test_toggle(self) -> None:
        state = ModeState()
        assert state.toggle() is True
        assert state.engaged is True
        assert state.toggle() is False

    def test_toggle_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="penmode"):
            ModeState().toggle()
        assert "Pen Mode enabled" in caplog.text

    def test_states_are_independent(self) -> None:
        a, b = ModeState(), ModeState()
        a.toggle()
        assert b.engaged is False


class TestClassifyKey:
    """Key classification while engaged and disengaged."""

    @pytest.mark.parametrize("key", sorted(DEFAULT_BLOCKED_KEYS))
    def test_blocked_keys_when_engaged(self, key: str) -> None:
        assert classify_key(key, ModeState(engaged=True)) is KeyAction.BLOCK

    def test_trigger_key_when_engaged(self) -> None:
        assert classify_key("ArrowLeft", ModeState(engaged=True)) is KeyAction.STRIKE

    @pytest.mark.parametrize("key", ["a", "Enter", " ", "Home", "Tab"])
    def test_other_keys_pass(self, key: str) -> None:
        assert classify_key(key, ModeState(engaged=True)) is KeyAction.PASS

    @pytest.mark.parametrize("key", ["ArrowLeft", "Backspace", "a"])
    def test_everything_passes_when_disengaged(self, key: str) -> None:
        assert classify_key(key, ModeState()) is KeyAction.PASS

    def test_custom_bindings(self) -> None:
        config = PenModeConfig(trigger_key="F2", blocked_keys=frozenset({"Backspace"}))
        state = ModeState(engaged=True)
        assert classify_key("F2", state, config=config) is KeyAction.STRIKE
        assert classify_key("ArrowLeft", state, config=config) is KeyAction.PASS
        assert classify_key("Delete", state, config=config) is KeyAction.PASS


class TestHandleKeydown:
    """Key events applied to a buffer."""

    def test_strike_modifies_buffer(self) -> None:
        buf = LineBuffer(["the quick fox"], cursor=Position(0, 13))
        outcome = handle_keydown("ArrowLeft", ModeState(engaged=True), buf)
        assert outcome.action is KeyAction.STRIKE
        assert outcome.suppress is True
        assert outcome.failed is False
        assert outcome.result
        assert buf.text == "the quick ~~fox~~ "

    def test_blocked_key_leaves_buffer(self) -> None:
        buf = LineBuffer(["the quick fox"], cursor=Position(0, 13))
        outcome = handle_keydown("Backspace", ModeState(engaged=True), buf)
        assert outcome == KeyOutcome(KeyAction.BLOCK)
        assert outcome.suppress is True
        assert buf.text == "the quick fox"

    def test_disengaged_passes_through(self) -> None:
        buf = LineBuffer(["the quick fox"], cursor=Position(0, 13))
        outcome = handle_keydown("ArrowLeft", ModeState(), buf)
        assert outcome.suppress is False
        assert outcome.result is None
        assert buf.text == "the quick fox"

    def test_noop_strike_still_suppresses(self) -> None:
        buf = LineBuffer(["~~done~~ "], cursor=Position(0, 9))
        outcome = handle_keydown("ArrowLeft", ModeState(engaged=True), buf)
        assert outcome.suppress is True
        assert not outcome.result
        assert outcome.failed is False

    def test_rejected_edit_reported(self, caplog: pytest.LogCaptureFixture) -> None:
        buf = ReadOnlyBuffer(["the quick fox"], cursor=Position(0, 13))
        with caplog.at_level(logging.ERROR, logger="penmode"):
            outcome = handle_keydown("ArrowLeft", ModeState(engaged=True), buf)
        assert outcome.failed is True
        assert outcome.suppress is True
        assert outcome.result is None
        assert buf.text == "the quick fox"
        assert buf.get_cursor() == Position(0, 13)
        assert "Error applying strikethrough" in caplog.text

    def test_session_of_keys(self) -> None:
        """Typing, crossing out and continuing on one line."""
        state = ModeState(engaged=True)
        buf = LineBuffer(["I think tha"], cursor=Position(0, 11))

        handle_keydown("ArrowLeft", state, buf)
        assert buf.text == "I think ~~tha~~ "
        cursor = buf.get_cursor()
        buf.replace_range("that", cursor, cursor)
        buf.set_cursor(Position(0, cursor.ch + 4))
        assert buf.text == "I think ~~tha~~ that"

        handle_keydown("ArrowLeft", state, buf)
        handle_keydown("ArrowLeft", state, buf)
        assert buf.text == "I think ~~tha~~ ~~that~~ "
