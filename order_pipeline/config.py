from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

# Returns the number of seconds to wait before a stage runs.
DelayProvider = Callable[[], float]

DEFAULT_MAX_DELAY = 2.0
DEFAULT_TRACKING_RANGE: Tuple[int, int] = (0, 999_999)


@dataclass(slots=True)
class PipelineConfig:
    max_delay: float = DEFAULT_MAX_DELAY
    tracking_number_range: Tuple[int, int] = DEFAULT_TRACKING_RANGE
    rng: random.Random = field(default_factory=random.Random)
    delay: Optional[DelayProvider] = None

    def __post_init__(self) -> None:
        if self.max_delay < 0:
            raise ValueError("max_delay must be >= 0")
        low, high = self.tracking_number_range
        if low > high:
            raise ValueError("tracking_number_range must be (low, high) with low <= high")

    @classmethod
    def immediate(cls, seed: Optional[int] = None) -> "PipelineConfig":
        """No artificial latency; handy for tests and scripted runs."""
        return cls(max_delay=0.0, rng=random.Random(seed))

    def next_delay(self) -> float:
        if self.delay is not None:
            return self.delay()
        if self.max_delay == 0:
            return 0.0
        return self.rng.uniform(0, self.max_delay)

    def next_tracking_number(self) -> int:
        low, high = self.tracking_number_range
        return self.rng.randint(low, high)
