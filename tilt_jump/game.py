"""Game orchestrator: state machine, fixed-tick update and the background tick loop."""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable

from .config import (
    CAMERA_FOLLOW_THRESHOLD,
    GAME_OVER_MARGIN,
    MAX_TILT,
    PLAYER_INTENSITY,
    PLAYER_START,
    SCREEN_HEIGHT,
    TICK_RATE,
    TILT_GAIN,
)
from .entities import Platform, Player
from .render import Frame, GameState, Sprite
from .score import ScoreTracker
from .utils import Vector2D, clamp
from .world import World

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Frame], None]


class TickLoop:
    """Calls ``step(loop)`` every ``interval`` seconds on a daemon thread.

    The loop ends when ``step`` returns False or ``stop()`` is called.
    ``stop()`` joins the thread unless it is called from that thread.
    """

    def __init__(self, step: Callable[[TickLoop], bool], interval: float, name: str = "tick-loop") -> None:
        self._step = step
        self._interval = interval
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def start(self) -> None:
        self._thread.start()

    def signal(self) -> None:
        self._stop.set()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not threading.current_thread() and self._thread.is_alive():
            self._thread.join()

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            if not self._step(self):
                break


class Game:
    """Top-level game controller: owns the entities, score, camera and tick loop.

    Every public operation is serialized behind one re-entrant lock. The render
    callback is always invoked with the lock released.
    """

    def __init__(
        self,
        seed: int | None = None,
        tick_rate: float = TICK_RATE,
        on_render: RenderCallback | None = None,
        run_loop: bool = True,
    ) -> None:
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.tick_interval = 1.0 / tick_rate
        self.on_render = on_render
        self.run_loop = run_loop

        self._lock = threading.RLock()
        self._loop: TickLoop | None = None
        self._state = GameState.HOME
        self._intent = 0.0
        self.ticks = 0
        self.camera_offset = 0.0

        self.player = Player(Vector2D(*PLAYER_START))
        self.world = World(self.rng)
        self.score = ScoreTracker()
        self.score.subscribe(self._log_score)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def platforms(self) -> tuple[Platform, ...]:
        return tuple(self.world.platforms)

    @property
    def horizontal_intent(self) -> float:
        return self._intent

    # --- commands -----------------------------------------------------------

    def start(self) -> bool:
        # A loop that ended the game may still be delivering its last frame.
        with self._lock:
            stale = self._detach_loop() if self._state is GameState.GAME_OVER else None
        self._join(stale)
        with self._lock:
            if self._state not in (GameState.HOME, GameState.GAME_OVER):
                logger.debug("start ignored in %s", self._state.value)
                return False
            if self._state is GameState.GAME_OVER:
                self._reset_world()
            self.score.reset()
            self.ticks = 0
            self._set_state(GameState.PLAYING)
            self._launch_loop()
            frame = self.frame()
        self._emit(frame)
        return True

    def pause(self) -> bool:
        with self._lock:
            if self._state is not GameState.PLAYING:
                logger.debug("pause ignored in %s", self._state.value)
                return False
            self._set_state(GameState.PAUSED)
            loop = self._detach_loop()
            frame = self.frame()
        self._join(loop)
        self._emit(frame)
        return True

    def resume(self) -> bool:
        with self._lock:
            if self._state is not GameState.PAUSED:
                logger.debug("resume ignored in %s", self._state.value)
                return False
            self._set_state(GameState.PLAYING)
            self._launch_loop()
            frame = self.frame()
        self._emit(frame)
        return True

    def restart(self) -> bool:
        with self._lock:
            loop = self._detach_loop()
            self._reset_world()
            self.score.reset()
            self._set_state(GameState.HOME)
            frame = self.frame()
        self._join(loop)
        self._emit(frame)
        return True

    def toggle(self) -> None:
        """Long-press handler: advance to whichever state follows the current one."""
        # Dispatched without holding the lock: pause and restart join the tick loop.
        # If the tick loop changes the state in between, the command refuses and
        # the press is re-dispatched for the new state.
        while True:
            state = self._state
            logger.debug("toggle in %s", state.value)
            if state is GameState.HOME:
                done = self.start()
            elif state is GameState.PLAYING:
                done = self.pause()
            elif state is GameState.PAUSED:
                done = self.resume()
            else:
                done = self.restart()
            if done:
                return

    def set_horizontal_intent(self, value: float) -> None:
        with self._lock:
            self._intent = clamp(value, -MAX_TILT, MAX_TILT)

    def close(self) -> None:
        with self._lock:
            loop = self._detach_loop()
            self.score.unsubscribe(self._log_score)
        self._join(loop)

    # --- simulation ---------------------------------------------------------

    def tick(self) -> None:
        """Run one update if PLAYING, then hand the new frame to the render callback."""
        with self._lock:
            if self._state is not GameState.PLAYING:
                return
            self._update()
            loop = self._detach_loop() if self._state is GameState.GAME_OVER else None
            frame = self.frame()
        self._join(loop)
        self._emit(frame)

    def _loop_step(self, loop: TickLoop) -> bool:
        with self._lock:
            if loop.stopped or self._state is not GameState.PLAYING:
                return False
            self._update()
            playing = self._state is GameState.PLAYING
            frame = self.frame()
        self._emit(frame)
        return playing

    def _update(self) -> None:
        self.player.set_horizontal_velocity(self._intent * TILT_GAIN)
        self.player.update()
        for platform in self.world.platforms:
            platform.update()
        self._check_collisions()
        self.score.update(min(self.player.max_height_reached, self.player.position.y))
        self._update_camera()
        self.world.recycle(self.camera_offset)
        self.world.spawn(self.camera_offset)
        self.ticks += 1
        if self._fell_out_of_view():
            self._set_state(GameState.GAME_OVER)

    def _check_collisions(self) -> None:
        # Each hit re-checks the current velocity; impulses overwrite, never accumulate.
        for platform in self.world.platforms:
            if self.player.box.intersects(platform.box) and self.player.velocity.y > 0:
                platform.on_landing(self.player)

    def _update_camera(self) -> None:
        # Only ever moves up (toward smaller y).
        if self.player.position.y < self.camera_offset + CAMERA_FOLLOW_THRESHOLD:
            self.camera_offset = self.player.position.y - CAMERA_FOLLOW_THRESHOLD

    def _fell_out_of_view(self) -> bool:
        return self.player.position.y > self.camera_offset + SCREEN_HEIGHT + GAME_OVER_MARGIN

    def _reset_world(self) -> None:
        self.player.reset(Vector2D(*PLAYER_START))
        self.camera_offset = 0.0
        self.world.reset()
        self._intent = 0.0
        self.ticks = 0

    # --- rendering ----------------------------------------------------------

    def frame(self) -> Frame:
        """Camera-relative snapshot of what the host should show."""
        with self._lock:
            if self._state is GameState.PLAYING:
                return Frame(
                    self._state,
                    player=self._sprite(self.player, PLAYER_INTENSITY),
                    platforms=tuple(self._sprite(p, p.intensity) for p in self.world.visible(self.camera_offset)),
                )
            if self._state is GameState.GAME_OVER:
                return Frame(self._state, score=self.score.current, high_score=self.score.high)
            return Frame(self._state)

    def _sprite(self, entity: Player | Platform, intensity: int) -> Sprite:
        return Sprite(
            entity.position.x,
            entity.position.y - self.camera_offset,
            entity.size.x,
            entity.size.y,
            intensity,
        )

    def _emit(self, frame: Frame) -> None:
        if self.on_render is None:
            return
        try:
            self.on_render(frame)
        except Exception:
            logger.exception("render callback failed for %s frame", frame.state.value)

    # --- helpers ------------------------------------------------------------

    def _set_state(self, state: GameState) -> None:
        if state is not self._state:
            logger.info("state %s -> %s", self._state.value, state.value)
        self._state = state

    def _launch_loop(self) -> None:
        if not self.run_loop:
            return
        self._loop = TickLoop(self._loop_step, self.tick_interval)
        self._loop.start()

    def _detach_loop(self) -> TickLoop | None:
        # Signal under the lock; the caller joins after releasing it.
        loop, self._loop = self._loop, None
        if loop is not None:
            loop.signal()
        return loop

    @staticmethod
    def _join(loop: TickLoop | None) -> None:
        if loop is not None:
            loop.stop()

    def _log_score(self, current: int, high: int) -> None:
        logger.debug("score %d (high %d)", current, high)
