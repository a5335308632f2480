"""
game_engine.py: Session lifecycle, pipe spawning and the per-frame step.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    PIPE_BOTTOM_MARGIN_RATIO, PIPE_MIN_TOP_RATIO, PIPE_SPAWN_INTERVAL_MS, PIPE_WIDTH
)
from .data_models import GameState, Pipe, StepResult, Viewport
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


def maybe_spawn(now_ms: float, last_spawn_ms: float, gap_size: float,
                viewport: Viewport, rng=random) -> Optional[Pipe]:
    """
    Returns a new pipe at the right edge once more than
    PIPE_SPAWN_INTERVAL_MS has elapsed since the last spawn, else None.
    The caller records now_ms as the new spawn time whenever a pipe comes back.
    """
    if now_ms - last_spawn_ms <= PIPE_SPAWN_INTERVAL_MS:
        return None

    min_top = viewport.height * PIPE_MIN_TOP_RATIO
    max_top = viewport.height - gap_size - viewport.height * PIPE_BOTTOM_MARGIN_RATIO
    top_height = rng.uniform(min_top, max_top)
    return Pipe(
        x=float(viewport.width),
        top_height=top_height,
        bottom_y=top_height + gap_size,
        width=PIPE_WIDTH * viewport.scale,
    )


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the GameState and drives it through NotStarted -> Running -> Reset.
    Inherits kinematics and collision from PhysicsCore.
    """
    state: Optional[GameState] = None
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def for_viewport(cls, width: float, height: float, rng=None) -> "GameEngine":
        engine = cls(rng=rng or random.Random())
        engine.resize(width, height)
        return engine

    @property
    def running(self) -> bool:
        return self.state.session.started

    def reset(self, reason: str = "reset"):
        """Rebuilds the bird, clears pipes and score, and waits for input again."""
        state = self.state
        if state.session.started or state.session.score:
            logger.info("Run ended (%s) with score %d", reason, state.session.score)
        fresh = GameState.fresh(state.viewport)
        state.bird = fresh.bird
        state.pipes = []
        state.session = fresh.session
        state.pipe_speed = fresh.pipe_speed
        state.gap_size = fresh.gap_size

    def resize(self, width: float, height: float):
        """New viewport, new scale, and always a full reset."""
        viewport = Viewport(width, height)
        logger.info("Viewport %dx%d, scale %.3f", width, height, viewport.scale)
        if self.state is None:
            self.state = GameState.fresh(viewport)
            return
        self.state.viewport = viewport
        self.reset("resize")

    def activate(self):
        """A key or pointer press. Starts the run, or flaps when already running."""
        session = self.state.session
        if not session.started:
            session.started = True
            logger.info("Run started")
            return
        self.flap(self.state.bird)

    def _spawn_pipe(self, now_ms: float):
        state = self.state
        pipe = maybe_spawn(now_ms, state.last_spawn_ms, state.gap_size,
                           state.viewport, self.rng)
        if pipe is None:
            return
        state.pipes.append(pipe)
        state.last_spawn_ms = now_ms
        logger.debug("Spawned pipe with gap top at %.1f", pipe.top_height)

    def step(self, timestamp_ms: float) -> StepResult:
        """
        Runs one frame at the host's timestamp (milliseconds).
        A crash resets the session before this frame is rendered.
        """
        state = self.state
        session = state.session
        if not session.started:
            return StepResult()

        if session.last_frame_ms is None:
            session.last_frame_ms = timestamp_ms
        delta = (timestamp_ms - session.last_frame_ms) / 1000.0
        session.last_frame_ms = timestamp_ms

        self._spawn_pipe(timestamp_ms)
        result = self.advance(state.bird, state.pipes, delta,
                              state.viewport, state.pipe_speed)

        session.score += result.score_delta
        state.best_score = max(state.best_score, session.score)

        if result.collided:
            self.reset("collision")
        elif result.out_of_bounds:
            self.reset("out_of_bounds")
        return result
