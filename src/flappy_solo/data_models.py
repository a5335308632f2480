"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import (
    BIRD_SIZE, BIRD_X_RATIO, GRAVITY_ACCEL, LIFT_IMPULSE, REFERENCE_HEIGHT,
    PIPE_GAP_RATIO, PIPE_SPEED_PPS
)


def compute_scale(viewport_height: float) -> float:
    """Unitless multiplier applied to every base size, speed and acceleration."""
    if viewport_height <= 0:
        raise ValueError(f"viewport height must be positive, got {viewport_height}")
    return viewport_height / REFERENCE_HEIGHT


@dataclass(frozen=True)
class Viewport:
    """Current window size and the scale factor derived from its height."""
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"viewport must be positive, got {self.width}x{self.height}")

    @property
    def scale(self) -> float:
        return compute_scale(self.height)


@dataclass
class Bird:
    """The falling actor. Replaced wholesale on every reset."""
    x: float
    y: float
    width: float
    height: float
    gravity: float
    lift: float
    velocity: float = 0.0

    @classmethod
    def spawn(cls, viewport: Viewport) -> "Bird":
        """Builds a fresh bird in the middle of the viewport."""
        scale = viewport.scale
        return cls(
            x=viewport.width * BIRD_X_RATIO,
            y=viewport.height / 2,
            width=BIRD_SIZE * scale,
            height=BIRD_SIZE * scale,
            gravity=GRAVITY_ACCEL * scale,
            lift=LIFT_IMPULSE * scale,
        )


@dataclass
class Pipe:
    """An obstacle pair. The passable gap spans [top_height, bottom_y]."""
    x: float
    top_height: float
    bottom_y: float
    width: float
    passed: bool = False


@dataclass
class SessionState:
    started: bool = False
    score: int = 0
    last_frame_ms: Optional[float] = None


@dataclass
class StepResult:
    """Outcome of one physics step."""
    collided: bool = False
    out_of_bounds: bool = False
    score_delta: int = 0

    @property
    def crashed(self) -> bool:
        return self.collided or self.out_of_bounds


@dataclass
class GameState:
    """Everything one frame reads and writes."""
    viewport: Viewport
    bird: Bird
    pipes: List[Pipe] = field(default_factory=list)
    session: SessionState = field(default_factory=SessionState)
    pipe_speed: float = 0.0
    gap_size: float = 0.0
    last_spawn_ms: float = 0.0
    best_score: int = 0

    @classmethod
    def fresh(cls, viewport: Viewport) -> "GameState":
        return cls(
            viewport=viewport,
            bird=Bird.spawn(viewport),
            pipe_speed=PIPE_SPEED_PPS * viewport.scale,
            gap_size=viewport.height * PIPE_GAP_RATIO,
        )
