# visualization.py
"""
Handles the visualization of the particle simulation using Pygame.
"""
import logging
from typing import Any, Dict, Optional, Tuple

import pygame

from constants import BACKGROUND_COLOR, FPS, FULLSCREEN, WINDOW_CAPTION, WINDOW_HEIGHT, WINDOW_WIDTH
from particle import Colour
from utils import clamp
from vector import Vector2

# Forward reference for type hinting to avoid circular import
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from controls import InputController
    from simulation import Simulation


# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, vis_params: Optional[Dict[str, Any]] = None):
#     - Inputs:
#       - vis_params: "fullscreen", "window_width", "window_height", "fps".
#     - Side Effects: Initializes Pygame and creates a display surface.
#       Exposes sim_width / sim_height for the simulation to wrap against.
#
#   - process_input(self, controller: InputController) -> bool:
#     - Outputs: False if the user has quit, True otherwise.
#     - Side Effects: drains the Pygame event queue into the controller and
#       syncs the pointer state. Runs between frames, never during a step.
#
#   - draw(self, simulation: Simulation) -> None:
#     - Side Effects: renders every trail segment and particle, flips the
#       display and waits out the rest of the frame.


def to_display_colour(colour: Colour) -> Tuple[int, int, int]:
    """Clamps each channel into [0, 255]; the speed map may run past either end."""
    return tuple(int(clamp(round(c), 0, 255)) for c in colour)


class Visualizer:
    """
    Renders particles and their trails, and owns the Pygame window.
    """
    def __init__(self, vis_params: Optional[Dict[str, Any]] = None):
        """
        Initializes Pygame and the display window.
        """
        vis_params = vis_params if vis_params is not None else {}
        pygame.init()

        if vis_params.get('fullscreen', FULLSCREEN):
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            width = vis_params.get('window_width', WINDOW_WIDTH)
            height = vis_params.get('window_height', WINDOW_HEIGHT)
            self.screen = pygame.display.set_mode((width, height))

        self.sim_width = width
        self.sim_height = height
        self.fps = vis_params.get('fps', FPS)

        pygame.display.set_caption(WINDOW_CAPTION)
        self.clock = pygame.time.Clock()

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def process_input(self, controller: "InputController") -> bool:
        for event in pygame.event.get():
            if not controller.handle_event(event):
                return False

        pressed = pygame.mouse.get_pressed()[0]
        controller.update_pointer(pressed, pygame.mouse.get_pos())
        return True

    def _draw_circle(self, position: Vector2, diameter: float, colour: Colour) -> None:
        pygame.draw.circle(
            self.screen,
            to_display_colour(colour),
            (position.x, position.y),
            diameter / 2
        )

    def draw(self, simulation: "Simulation") -> None:
        """
        Draws all trails and particles, then presents the frame.
        """
        self.screen.fill(BACKGROUND_COLOR)
        simulation.draw(self._draw_circle)
        pygame.display.flip()
        self.clock.tick(self.fps)

    def close(self):
        """Shuts down Pygame."""
        pygame.quit()
