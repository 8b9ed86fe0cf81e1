import logging

import pygame

from game_logic.engine import SnakeEngine
from schemas.game import PlayerCommand
from schemas.settings import GameSettings
from systems.player_input import InputSystem
from systems.render import RenderSystem
from utils.timer import Timer

logger = logging.getLogger(__name__)

# Pause between input polls inside one tick window
POLL_INTERVAL_MS = 10


class LocalLoop:
    def __init__(self, settings: GameSettings, engine: SnakeEngine):
        self.settings = settings
        self.engine = engine

        self.rendering_system = RenderSystem(
            settings.pit_height, settings.pit_width, settings.cell_size
        )
        self.input_system = InputSystem()
        self._perimeter = self.engine.pit.get_perimeter()
        self._timer = Timer()
        self._running = False

    def setup(self):
        pygame.init()

        self.input_system.setup()
        self.rendering_system.setup()

        self._running = True

    def close(self):
        pygame.quit()

    def collect_input(self) -> PlayerCommand:
        """Poll input until the tick window closes, keeping the latest direction."""
        command = PlayerCommand()
        self._timer.reset()
        while self._timer.remaining_ms(self.settings.tick_seconds) > 0:
            command = self.input_system.merge(command, self.input_system.run())
            if command.quit_game:
                break
            pygame.time.wait(min(POLL_INTERVAL_MS, int(self._timer.remaining_ms(self.settings.tick_seconds))))
        return command

    def run(self):
        self.setup()
        self.rendering_system.run(self.engine.snapshot(), self._perimeter)

        try:
            while self._running:
                command = self.collect_input()
                if command.quit_game:
                    logger.info("Player quit")
                    self._running = False
                    break

                if command.direction is not None:
                    self.engine.change_direction(command.direction)

                self.engine.tick()
                self.rendering_system.run(self.engine.snapshot(), self._perimeter)

                if self.engine.is_finished:
                    print(f"Game over! Final snake length: {len(self.engine.snake_body)}")
                    self._running = False
                    # Keep the last frame on screen for one more window
                    self.collect_input()
        finally:
            self.close()
