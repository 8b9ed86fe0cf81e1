from typing import Iterable

import pygame

from constants.direction import Direction
from schemas.game import PlayerCommand
from systems.system import System

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class InputSystem(System):
    def run(self) -> PlayerCommand:
        return self.translate_events(pygame.event.get())

    @staticmethod
    def translate_events(events: Iterable[pygame.event.Event]) -> PlayerCommand:
        """Collapse a batch of events into one command.

        The latest arrow key wins, earlier ones are dropped.
        """
        command = PlayerCommand()
        for event in events:
            if event.type == pygame.QUIT:
                command.quit_game = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    command.quit_game = True
                elif event.key in KEY_DIRECTIONS:
                    command.direction = KEY_DIRECTIONS[event.key]
        return command

    @staticmethod
    def merge(previous: PlayerCommand, latest: PlayerCommand) -> PlayerCommand:
        return PlayerCommand(
            direction=latest.direction or previous.direction,
            quit_game=previous.quit_game or latest.quit_game,
        )
