"""Height-based score with synchronous change notification."""

from __future__ import annotations

import logging
from typing import Callable

from .config import PLAYER_START, SCORE_SCALE

logger = logging.getLogger(__name__)

ScoreListener = Callable[[int, int], None]


class ScoreTracker:
    """Tracks the session score and the process-lifetime high score.

    The score is the height climbed above ``baseline_y`` (the player's spawn
    height) times ``SCORE_SCALE``. ``current`` only grows within a session and
    ``high`` is never reset.
    """

    def __init__(self, baseline_y: float = PLAYER_START[1], scale: int = SCORE_SCALE) -> None:
        self.baseline_y = baseline_y
        self.scale = scale
        self.current = 0
        self.high = 0
        self._listeners: list[ScoreListener] = []

    def subscribe(self, listener: ScoreListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ScoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def candidate(self, height: float) -> int:
        return int(max(0.0, self.baseline_y - height) * self.scale)

    def update(self, height: float) -> bool:
        """Raise the score if the player climbed higher. Returns True if it changed."""
        score = self.candidate(height)
        if score <= self.current:
            return False
        self.current = score
        if score > self.high:
            self.high = score
        self._notify()
        return True

    def reset(self) -> None:
        if self.current == 0:
            return
        self.current = 0
        self._notify()

    def _notify(self) -> None:
        # Snapshot so listeners may (un)subscribe without affecting this round.
        for listener in list(self._listeners):
            listener(self.current, self.high)
