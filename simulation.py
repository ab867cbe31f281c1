# simulation.py
"""
Handles the core simulation logic and physics calculations.

This module defines the pairwise force law and the Simulation class, which
owns every particle, the global polarity and the pointer force, and
advances them by one frame at a time.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import numpy as np

from constants import (
    ATTRACT, FORCE_DISTANCE_MAX, FORCE_DISTANCE_MIN, G, INITIAL_PARTICLE_COUNT,
    PARTICLE_DIAMETER, PARTICLE_MASS, POINTER_MASS, REPEL, TRAIL_LENGTH
)
from particle import Colour, ForceSource, Particle
from utils import clamp
from vector import Vector2

# --- Data Contracts ---
#
# force_vector(a: ForceSource, b: ForceSource) -> Vector2:
#   - Outputs: force pointing from a toward b with magnitude
#     G * a.mass * b.mass / d^2, d = |b - a| clamped to [40, 2000].
#
# class Simulation:
#   - __init__(self, params: Dict[str, Any], width: float, height: float,
#              rng: Optional[np.random.Generator] = None):
#     - Inputs:
#       - params: Dictionary of simulation parameters from config.json.
#         - "seed": int | None
#         - "initial_particle_count": int
#         - "particle_mass": float
#         - "particle_diameter": float
#         - "trail_length": int
#         - "pointer_mass": float
#       - width, height: viewport size used for spawning and wrapping.
#     - Side Effects: Validates parameters and spawns the initial particles.
#     - Invariants: self.particles is in creation order; polarity is +1 or -1.
#
#   - step(self) -> None:
#     - Side Effects: pointer force, pairwise forces, integration (which
#       wraps and recolours). Never called while a command is in progress.
#
#   - Commands: add_particle, remove_oldest_particle, toggle_polarity,
#     set_pointer_active, set_pointer_position. None of them raise.


def force_vector(a: ForceSource, b: ForceSource) -> Vector2:
    """
    Gravitational-style force exerted between a and b, directed from a to b.

    The separation is clamped before use, so coincident bodies produce a
    finite force and distant bodies still feel a small pull.
    """
    delta = b.position - a.position
    distance = clamp(delta.magnitude(), FORCE_DISTANCE_MIN, FORCE_DISTANCE_MAX)
    return delta.set_magnitude((G * a.mass * b.mass) / (distance ** 2))


@dataclass(frozen=True)
class PointerSource:
    """The pointer seen as a force source: a position with a virtual mass."""
    position: Vector2
    mass: float = POINTER_MASS


@dataclass
class PointerForce:
    """Mutable pointer state, fed by the input controller between frames."""
    active: bool = False
    position: Vector2 = field(default_factory=Vector2)
    virtual_mass: float = POINTER_MASS

    def as_source(self) -> PointerSource:
        return PointerSource(self.position, self.virtual_mass)


class Simulation:
    """
    The N-body engine: owns the particles and runs the per-frame pipeline.
    """
    def __init__(self, params: Dict[str, Any], width: float, height: float,
                 rng: Optional[np.random.Generator] = None):
        """
        Initializes the simulation and spawns the initial particles.

        Args:
            params (Dict[str, Any]): Simulation parameters from config.
            width (float): Width of the viewport.
            height (float): Height of the viewport.
            rng (np.random.Generator, optional): Source of spawn positions.
                Built from params["seed"] when omitted.
        """
        self.width = width
        self.height = height
        self.particle_mass = params.get('particle_mass', PARTICLE_MASS)
        self.particle_diameter = params.get('particle_diameter', PARTICLE_DIAMETER)
        self.trail_length = params.get('trail_length', TRAIL_LENGTH)
        initial_count = params.get('initial_particle_count', INITIAL_PARTICLE_COUNT)

        self._validate(initial_count)

        # All randomness comes from one generator so a seeded run is repeatable.
        self.rng = rng if rng is not None else np.random.default_rng(params.get('seed'))

        self.polarity = REPEL
        self.pointer = PointerForce(virtual_mass=params.get('pointer_mass', POINTER_MASS))
        self.particles: List[Particle] = []

        for _ in range(initial_count):
            self.add_particle()

        logging.info(
            f"Simulation initialized with {len(self.particles)} particles "
            f"in a {width}x{height} viewport."
        )

    def _validate(self, initial_count: int) -> None:
        problems = []
        if self.particle_mass <= 0:
            problems.append(f"particle_mass must be > 0 (got {self.particle_mass})")
        if self.particle_diameter <= 0:
            problems.append(f"particle_diameter must be > 0 (got {self.particle_diameter})")
        if self.trail_length < 1:
            problems.append(f"trail_length must be >= 1 (got {self.trail_length})")
        if initial_count < 0:
            problems.append(f"initial_particle_count must be >= 0 (got {initial_count})")
        if self.width <= 0 or self.height <= 0:
            problems.append(f"viewport must be positive (got {self.width}x{self.height})")

        if problems:
            msg = "Configuration error: " + "; ".join(problems) + "."
            logging.critical(msg)
            raise ValueError(msg)

    # --- Commands ---

    def add_particle(self) -> Particle:
        """Spawns a particle at a random point in the viewport, appended as the newest."""
        x, y = self.rng.uniform(low=[0, 0], high=[self.width, self.height])
        particle = Particle(
            Vector2(float(x), float(y)),
            self.particle_mass,
            self.particle_diameter,
            self.trail_length,
        )
        self.particles.append(particle)
        logging.debug(f"Added {particle}. Count: {len(self.particles)}.")
        return particle

    def remove_oldest_particle(self) -> Optional[Particle]:
        """Removes the oldest particle. Safe to call on an empty simulation."""
        if not self.particles:
            logging.debug("Remove requested with no particles left; ignoring.")
            return None
        particle = self.particles.pop(0)
        logging.debug(f"Removed {particle}. Count: {len(self.particles)}.")
        return particle

    def toggle_polarity(self) -> None:
        self.polarity = -self.polarity
        mode = "repel" if self.polarity == REPEL else "attract"
        logging.info(f"Polarity switched: particles now {mode}.")

    def set_pointer_active(self, active: bool) -> None:
        self.pointer.active = bool(active)

    def set_pointer_position(self, x: float, y: float) -> None:
        self.pointer.position = Vector2(float(x), float(y))

    @property
    def is_attracting(self) -> bool:
        return self.polarity == ATTRACT

    # --- Frame pipeline ---

    def step(self) -> None:
        """
        Executes one frame of the simulation.
        """
        particles = self.particles

        # 1. Pointer force. Applied with the polarity sign only: the pointer
        #    has no partner to receive the opposite half.
        if self.pointer.active:
            source = self.pointer.as_source()
            for particle in particles:
                force = force_vector(particle, source)
                particle.apply_force(force * self.polarity)

        # 2. Pairwise forces, each unordered pair visited once.
        for i in range(len(particles)):
            for j in range(i + 1, len(particles)):
                force = force_vector(particles[i], particles[j])
                particles[i].apply_force(force * -self.polarity)
                particles[j].apply_force(force * self.polarity)

        # 3. Integrate, wrap and recolour.
        for particle in particles:
            particle.integrate(self.width, self.height)

    # --- Render pass ---

    def render_items(self) -> Iterator[Tuple[Vector2, float, Colour]]:
        """Yields (position, diameter, colour) for every circle in draw order."""
        for particle in self.particles:
            yield from particle.render_items()

    def draw(self, draw_circle: Callable[[Vector2, float, Colour], None]) -> None:
        for position, diameter, colour in self.render_items():
            draw_circle(position, diameter, colour)

    def mean_speed(self) -> float:
        if not self.particles:
            return 0.0
        speeds = np.array([p.velocity.magnitude() for p in self.particles])
        return float(np.mean(speeds))
