from .game import EngineSnapshot, PlayerCommand
from .geometry import Point
from .settings import GameSettings
