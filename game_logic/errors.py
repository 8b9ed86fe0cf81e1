class SnakeEngineError(Exception):
    pass


class FoodPlacementError(SnakeEngineError):
    """No free pit cell is left to put food on."""
