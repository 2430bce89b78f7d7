"""Configuration for penmode.

PenModeConfig is an immutable settings object. The host loads its persisted
settings, builds a config with ``from_dict`` and passes it explicitly to the
input layer; ``to_dict`` gives back plain data for the host to store.

The engaged/disengaged mode flag is not read from here at key time. The
config only supplies its initial value (``initial_state()``); the live flag
is a ModeState passed alongside each key event.

Usage:
    from penmode.config import PenModeConfig

    config = PenModeConfig.from_dict({"log_level": "debug", "isActive": True})
    config.apply_logging()
    state = config.initial_state()
    outcome = handle_keydown("ArrowLeft", state, buffer, config=config)

"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import TYPE_CHECKING, Any

from penmode.errors import ConfigError
from penmode.markers import MarkerPair
from penmode.utils.logger import LOG_LEVELS, configure_logging

if TYPE_CHECKING:
    import logging

    from penmode.keys import ModeState

DEFAULT_BLOCKED_KEYS: frozenset[str] = frozenset(
    {
        "ArrowUp",
        "ArrowDown",
        "ArrowRight",
        "Delete",
        "Backspace",
        "PageUp",
        "PageDown",
    }
)

# Persisted settings written by earlier releases used camelCase keys
_LEGACY_KEYS: dict[str, str] = {
    "logLevel": "log_level",
    "isActive": "is_active",
}


@dataclass(frozen=True, slots=True)
class PenModeConfig:
    """Immutable pen mode configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        log_level: Logging level name ("debug", "info", "warn", "error")
        is_active: Whether pen mode starts engaged
        marker_open: Delimiter inserted before a struck word
        marker_close: Delimiter inserted after a struck word
        strict_markers: Detect existing marks by span scanning
        trigger_key: Key that strikes through the last word
        blocked_keys: Keys suppressed while pen mode is engaged

    """

    log_level: str = "info"
    is_active: bool = False
    marker_open: str = "~~"
    marker_close: str = "~~"
    strict_markers: bool = False
    trigger_key: str = "ArrowLeft"
    blocked_keys: frozenset[str] = DEFAULT_BLOCKED_KEYS

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            available = ", ".join(LOG_LEVELS)
            raise ConfigError(
                "log_level", f"unknown level {self.log_level!r}. Available: {available}"
            )
        if self.trigger_key in self.blocked_keys:
            raise ConfigError("trigger_key", f"{self.trigger_key!r} is also a blocked key")
        try:
            MarkerPair(self.marker_open, self.marker_close)
        except ValueError as e:
            raise ConfigError("marker", str(e)) from e

    @property
    def marker(self) -> MarkerPair:
        return MarkerPair(self.marker_open, self.marker_close)

    def initial_state(self) -> ModeState:
        """Build the mode gate this config starts in."""
        from penmode.keys import ModeState

        return ModeState(engaged=self.is_active)

    def apply_logging(self) -> logging.Logger:
        """Set the ``penmode`` logger to this config's ``log_level``.

        Call once after loading settings, and again after changing the level.

        Returns:
            The root penmode logger
        """
        return configure_logging(self.log_level)

    def with_active(self, is_active: bool) -> PenModeConfig:
        """Return a copy with ``is_active`` changed, for persisting a toggle."""
        return replace(self, is_active=is_active)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> PenModeConfig:
        """Create PenModeConfig from dictionary.

        Values overlay the defaults. Unknown keys are silently ignored so
        settings saved by other versions still load. camelCase keys from
        older settings files are accepted.

        Args:
            config_dict: Dictionary with config values. Keys should match
                PenModeConfig attribute names.

        Returns:
            New PenModeConfig instance with values from dict.

        Raises:
            ConfigError: If a recognized value is invalid

        Example:
            >>> config = PenModeConfig.from_dict({
            ...     "logLevel": "debug",
            ...     "strict_markers": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.log_level
            'debug'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            key = _LEGACY_KEYS.get(key, key)
            if key in valid_fields:
                filtered[key] = value
        if "blocked_keys" in filtered:
            blocked = filtered["blocked_keys"]
            # A bare string would split into single characters
            if isinstance(blocked, str):
                raise ConfigError("blocked_keys", f"expected a list of key names, got {blocked!r}")
            filtered["blocked_keys"] = frozenset(blocked)
        return cls(**filtered)

    def to_dict(self) -> dict[str, Any]:
        """Return settings as plain JSON-compatible data."""
        data = asdict(self)
        data["blocked_keys"] = sorted(self.blocked_keys)
        return data


DEFAULT_CONFIG: PenModeConfig = PenModeConfig()


__all__ = [
    "DEFAULT_BLOCKED_KEYS",
    "DEFAULT_CONFIG",
    "PenModeConfig",
]
