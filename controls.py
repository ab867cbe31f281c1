# controls.py
"""
Translates raw Pygame input into simulation commands.

Keyboard:
    UP      add a particle
    DOWN    remove the oldest particle
    SPACE   switch between repulsion and attraction
    ESC     quit
Mouse:
    Holding the left button turns the pointer into a force source.
"""
import logging
from typing import Tuple

import pygame

# Forward reference for type hinting to avoid circular import
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from simulation import Simulation

# --- Data Contracts ---
#
# class InputController:
#   - handle_event(self, event: pygame.event.Event) -> bool:
#     - Outputs: False once the user asked to quit, True otherwise.
#     - Side Effects: issues at most one command to the simulation.
#
#   - update_pointer(self, pressed: bool, pos: Tuple[int, int]) -> None:
#     - Side Effects: copies the pointer state into the simulation.


class InputController:
    """
    Feeds keyboard and mouse input to a Simulation between frames.
    """
    def __init__(self, simulation: "Simulation"):
        self.simulation = simulation
        self.key_commands = {
            pygame.K_UP: simulation.add_particle,
            pygame.K_DOWN: simulation.remove_oldest_particle,
            pygame.K_SPACE: simulation.toggle_polarity,
        }

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            logging.info("Quit event received.")
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed.")
                return False
            command = self.key_commands.get(event.key)
            if command is not None:
                command()
        return True

    def update_pointer(self, pressed: bool, pos: Tuple[int, int]) -> None:
        self.simulation.set_pointer_active(pressed)
        self.simulation.set_pointer_position(pos[0], pos[1])
