# particle.py

import numpy as np
import constants
from collision import resolve_collision
from vector_math import distance

class Particle:
    """
    A single disc in the simulation.

    Position and velocity are float64 NumPy arrays of shape (2,) and are
    mutated in place. Radius and mass are fixed for the particle's lifetime.
    Opacity starts at 0 and is kept in [0, OPACITY_MAX].
    """
    def __init__(self, position, velocity, radius: float, color, mass: float = 1.0):
        self.position = np.array(position, dtype=np.float64)
        self.velocity = np.array(velocity, dtype=np.float64)
        self.radius = float(radius)
        self.mass = float(mass)
        self.color = color
        self.opacity = 0.0

    def __repr__(self):
        return (f"Particle(pos=({self.x:.1f}, {self.y:.1f}), "
                f"vel=({self.velocity[0]:.3f}, {self.velocity[1]:.3f}), "
                f"r={self.radius}, color={self.color!r})")

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def overlaps(self, other: "Particle") -> bool:
        """True if the two discs intersect (touching does not count)."""
        gap = distance(self.position[0], self.position[1], other.position[0], other.position[1])
        return gap - (self.radius + other.radius) < 0

    def draw(self, sink):
        """
        Hands this particle to a drawing sink.

        The sink is called as sink(center, radius, fill_color, stroke_color, opacity).
        The fill is drawn at the current opacity, the outline fully opaque.
        """
        sink((self.x, self.y), self.radius, self.color, self.color, self.opacity)

    def update(self, particles, context):
        """
        Advances this particle by one tick.

        - Inputs:
            - particles (list): The full, shared particle collection, self included.
            - context (SimulationContext): Bounds, pointer position and drawing sink.
        - Side Effects: May change the velocity of this particle and of any
          particle it collides with. Changes opacity and position.
        """
        if context.draw is not None:
            self.draw(context.draw)

        for other in particles:
            if other is self:
                continue
            if self.overlaps(other):
                resolve_collision(self, other)

        self.check_boundary_collision(context.width, context.height)
        self.update_opacity(context.pointer_x, context.pointer_y)

        self.position += self.velocity

    def check_boundary_collision(self, width: float, height: float):
        """
        Reverses a velocity component whenever the disc touches or crosses the
        matching pair of walls. The position is left untouched.
        """
        if self.position[0] - self.radius <= 0 or self.position[0] + self.radius >= width:
            self.velocity[0] = -self.velocity[0]

        if self.position[1] - self.radius <= 0 or self.position[1] + self.radius >= height:
            self.velocity[1] = -self.velocity[1]

    def update_opacity(self, pointer_x: float, pointer_y: float):
        """
        Fades the fill in while the pointer is within POINTER_RADIUS and out
        otherwise. The result is clamped to [0, OPACITY_MAX].

        A particle already at OPACITY_MAX under the pointer takes the decay
        branch, so it settles into a small flicker just below the cap.
        """
        near = distance(pointer_x, pointer_y, self.position[0], self.position[1]) < constants.POINTER_RADIUS
        if near and self.opacity < constants.OPACITY_MAX:
            self.opacity = min(constants.OPACITY_MAX, self.opacity + constants.OPACITY_STEP_UP)
        elif self.opacity > 0:
            self.opacity = max(0.0, self.opacity - constants.OPACITY_STEP_DOWN)
