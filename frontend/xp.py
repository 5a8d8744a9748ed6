"""
XP state and its transitions.

The pure functions (`on_text_changed`, `reset`) take the prior state and return
the next one. `XPEngine` wraps them with persistence and notifications.
"""

import math
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from frontend.levels import Level, format_xp, level_for, next_level, progress
from frontend.notifications import NotificationSlot
from frontend.storage import KeyValueStore

XP_PER_CHAR = 0.2
XP_STORAGE_KEY = "codesensei_xp"
GAIN_NOTIFICATION_SECONDS = 1.0
RESET_NOTIFICATION_SECONDS = 1.5


def round_xp(value: float) -> float:
    # half-up, matching how the value is displayed
    return math.floor(value * 100 + 0.5) / 100


@dataclass(frozen=True)
class XPState:
    xp: float = 0.0

    @property
    def level(self) -> Level:
        return level_for(self.xp)

    @property
    def next_level(self) -> Optional[Level]:
        return next_level(self.level)

    @property
    def progress(self) -> float:
        return progress(self.xp)


def on_text_changed(state: XPState, old_text: str, new_text: str) -> Tuple[XPState, float]:
    """Grant XP for net growth in character count. Returns (next state, gain)."""
    delta = max(0, len(new_text) - len(old_text))
    if delta == 0:
        return state, 0.0

    gain = delta * XP_PER_CHAR
    return XPState(xp=round_xp(state.xp + gain)), gain


def reset(state: XPState) -> XPState:
    return XPState(xp=0.0)


def parse_stored_xp(raw: Optional[str]) -> float:
    if raw is None or raw == "":
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        logging.warning(f"Ignoring unreadable stored XP value: {raw!r}")
        return 0.0
    if not math.isfinite(value) or value < 0:
        logging.warning(f"Ignoring out-of-range stored XP value: {raw!r}")
        return 0.0
    return value


class XPEngine:
    """Owns the XP state for one editor session."""

    def __init__(
        self,
        store: KeyValueStore,
        notifications: Optional[NotificationSlot] = None,
        key: str = XP_STORAGE_KEY,
    ):
        self.store = store
        self.notifications = notifications or NotificationSlot()
        self.key = key
        self.state = XPState()

    def load(self) -> XPState:
        self.state = XPState(xp=parse_stored_xp(self.store.load(self.key)))
        return self.state

    def _persist(self) -> None:
        self.store.save(self.key, format_xp(self.state.xp))

    def on_text_changed(self, old_text: str, new_text: str) -> float:
        self.state, gain = on_text_changed(self.state, old_text, new_text)
        if gain > 0:
            self._persist()
            self.notifications.show(f"+{format_xp(gain)} XP", GAIN_NOTIFICATION_SECONDS)
        return gain

    def reset(self, confirmed: bool) -> bool:
        """Zero the XP. Nothing happens unless the user confirmed."""
        if not confirmed:
            return False

        self.state = reset(self.state)
        self._persist()
        self.notifications.show("XP reset", RESET_NOTIFICATION_SECONDS)
        logging.info("XP reset by user")
        return True
