from enum import Enum


class GameState(Enum):
    RUNNING = "running"
    FINISHED = "finished"
