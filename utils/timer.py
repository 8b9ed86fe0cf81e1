import time


class Timer:
    """Wall clock stopwatch for the per tick input window."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._time = time.monotonic_ns()

    def elapsed_ms(self) -> float:
        return (time.monotonic_ns() - self._time) / 1e6

    def remaining_ms(self, budget_sec: float) -> float:
        return max(budget_sec * 1e3 - self.elapsed_ms(), 0.0)
