# particle.py
"""
Defines a single particle and the ghost segments that form its trail.

A Particle accumulates forces into its acceleration, integrates once per
frame, wraps around the viewport edges and recolours itself by speed.
Its trail is a fixed-length chain of TrailSegments, each lagging the one
in front of it by one frame.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Protocol, Tuple

from constants import (
    PARTICLE_RED, REST_COLOUR, SPEED_COLOUR_DOMAIN, SPEED_COLOUR_RANGE,
    TRAIL_LENGTH
)
from utils import map_range
from vector import Vector2

# --- Data Contracts ---
#
# class ForceSource (Protocol):
#   - position: Vector2, mass: float. Anything that can take part in the
#     pairwise force law: particles and the pointer alike.
#
# class TrailSegment:
#   - position: Vector2, diameter: float (never reassigned), colour: RGB tuple.
#
# class Particle:
#   - __init__(self, position, mass: float, diameter: float, trail_length: int):
#     - Invariants: mass > 0 and diameter > 0 (caller responsibility).
#       len(self.trail) == trail_length for the particle's whole lifetime.
#       trail[0] is the most recent ghost.
#
#   - apply_force(self, force: Vector2) -> None:
#     - Side Effects: acceleration += force / mass.
#
#   - integrate(self, width: float, height: float) -> None:
#     - Side Effects: shifts the trail, advances velocity and position,
#       resets acceleration, wraps position and recolours.

Colour = Tuple[float, float, float]


class ForceSource(Protocol):
    position: Vector2
    mass: float


@dataclass
class TrailSegment:
    """A lagging ghost copy of a particle, used only for rendering."""
    position: Vector2
    diameter: float
    colour: Colour


class Particle:
    """
    A massive body with velocity, acceleration and a motion trail.
    """
    def __init__(self, position, mass: float, diameter: float, trail_length: int = TRAIL_LENGTH):
        """
        Initializes a particle at rest.

        Args:
            position (Vector2 | tuple): Initial position in pixels.
            mass (float): Mass, must be > 0.
            diameter (float): Drawing diameter in pixels, must be > 0.
            trail_length (int): Number of ghost segments trailing the particle.
        """
        if not isinstance(position, Vector2):
            position = Vector2(float(position[0]), float(position[1]))
        self.position = position
        self.velocity = Vector2(0.0, 0.0)
        self.acceleration = Vector2(0.0, 0.0)
        self.mass = mass
        self.diameter = diameter
        self.colour: Colour = REST_COLOUR

        # Segment i is (i + 1) / (trail_length + 1) of the particle's size.
        self.trail: List[TrailSegment] = [
            TrailSegment(
                position=self.position,
                diameter=diameter * (i + 1) / (trail_length + 1),
                colour=self.colour,
            )
            for i in range(trail_length)
        ]

    def apply_force(self, force: Vector2) -> None:
        """Adds force / mass to the acceleration. Assumes mass > 0."""
        self.acceleration = self.acceleration + force / self.mass

    def integrate(self, width: float, height: float) -> None:
        """
        Advances the particle by one frame.

        The trail is captured before the position moves, so trail[0] always
        holds the position and colour from the start of this frame.
        """
        for i in range(len(self.trail) - 1, 0, -1):
            self.trail[i].position = self.trail[i - 1].position
            self.trail[i].colour = self.trail[i - 1].colour

        self.trail[0].position = self.position
        self.trail[0].colour = self.colour

        self.velocity = self.velocity + self.acceleration
        self.position = self.position + self.velocity
        self.acceleration = Vector2(0.0, 0.0)

        self.normalize_position(width, height)
        self.update_colour()

    def normalize_position(self, width: float, height: float) -> None:
        """
        Wraps the position to the opposite edge once the particle has fully
        left the viewport. Velocity is left untouched.
        """
        x, y = self.position.x, self.position.y
        half = self.diameter / 2

        if y > height + half:
            y = 0.0
        if y < -half:
            y = float(height)
        if x > width + half:
            x = 0.0
        if x < -half:
            x = float(width)

        if (x, y) != (self.position.x, self.position.y):
            logging.debug(f"Particle wrapped from {self.position.as_tuple()} to {(x, y)}.")
            self.position = Vector2(x, y)

    def update_colour(self) -> None:
        """Shades green and blue down with speed, so fast particles read red."""
        speed = self.velocity.magnitude()
        if speed > 1:
            m = map_range(speed, *SPEED_COLOUR_DOMAIN, *SPEED_COLOUR_RANGE)
            self.colour = (PARTICLE_RED, 255 - m, 255 - m)
        else:
            self.colour = REST_COLOUR

    def render_items(self) -> Iterator[Tuple[Vector2, float, Colour]]:
        """
        Yields (position, diameter, colour) in draw order: trail from the
        oldest segment to the freshest, then the particle itself on top.
        """
        for segment in reversed(self.trail):
            yield segment.position, segment.diameter, segment.colour
        yield self.position, self.diameter, self.colour

    def __repr__(self):
        return (
            f"Particle(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
            f"vel=({self.velocity.x:.2f}, {self.velocity.y:.2f}), "
            f"mass={self.mass}, diameter={self.diameter})"
        )
