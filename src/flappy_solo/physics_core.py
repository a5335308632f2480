"""
physics_core.py: Scale model, kinematics and collision logic for a single run.
"""

from typing import List

from .constants import MAX_TILT_DEG, TILT_REFERENCE_VELOCITY
from .data_models import Bird, Pipe, StepResult, Viewport, compute_scale  # noqa: F401


def tilt_angle(velocity: float) -> float:
    """Bird tilt in degrees, clockwise positive, clamped to +/- MAX_TILT_DEG."""
    tilt = velocity / TILT_REFERENCE_VELOCITY * MAX_TILT_DEG
    return max(min(tilt, MAX_TILT_DEG), -MAX_TILT_DEG)


class PhysicsCore:
    """
    Variable-timestep physics. Every method takes the elapsed time in seconds.
    """

    def apply_gravity_and_movement(self, bird: Bird, delta: float):
        bird.velocity += bird.gravity * delta
        bird.y += bird.velocity * delta

    def flap(self, bird: Bird):
        """Overwrites the current velocity with the lift impulse."""
        bird.velocity = bird.lift

    def step_pipes(self, pipes: List[Pipe], speed: float, delta: float):
        pipe_delta_x = speed * delta
        for pipe in pipes:
            pipe.x -= pipe_delta_x

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        overlaps_x = bird.x < pipe.x + pipe.width and bird.x + bird.width > pipe.x
        outside_gap = bird.y < pipe.top_height or bird.y + bird.height > pipe.bottom_y
        return overlaps_x and outside_gap

    def check_collision(self, bird: Bird, pipes: List[Pipe]) -> bool:
        return any(self.hits_pipe(bird, pipe) for pipe in pipes)

    def is_out_of_bounds(self, bird: Bird, viewport: Viewport) -> bool:
        return bird.y > viewport.height or bird.y < 0

    def update_score(self, bird: Bird, pipes: List[Pipe]) -> int:
        """Marks every pipe the bird has cleared and returns how many were new."""
        gained = 0
        for pipe in pipes:
            if not pipe.passed and pipe.x + pipe.width < bird.x:
                pipe.passed = True
                gained += 1
        return gained

    def prune_pipes(self, pipes: List[Pipe]):
        """Drops pipes whose trailing edge left the screen. Mutates in place."""
        pipes[:] = [p for p in pipes if p.x + p.width > 0]

    def advance(self, bird: Bird, pipes: List[Pipe], delta: float,
                viewport: Viewport, pipe_speed: float) -> StepResult:
        """
        One frame of simulation, in order: integrate the bird, scroll pipes,
        test collisions, score passed pipes, test bounds, prune.
        Mutates the bird and the pipe list.
        """
        self.apply_gravity_and_movement(bird, delta)
        self.step_pipes(pipes, pipe_speed, delta)

        result = StepResult()
        result.collided = self.check_collision(bird, pipes)
        result.score_delta = self.update_score(bird, pipes)
        result.out_of_bounds = self.is_out_of_bounds(bird, viewport)

        self.prune_pipes(pipes)
        return result
