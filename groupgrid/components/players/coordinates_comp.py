"""Random placement of new players on the surface."""

from __future__ import annotations

import math
import random
import threading
from dataclasses import dataclass


@dataclass
class SurfaceConfig:
    """Surface dimensions and optional seed for reproducible placement."""

    width: float = 10.0
    height: float = 10.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) and v > 0 for v in (self.width, self.height)):
            raise ValueError(f"surface dimensions must be positive and finite, got {self.width}x{self.height}")

    def contains(self, x: float, y: float) -> bool:
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height


class CoordinateGenerator:
    """Draws uniformly distributed coordinates inside the surface."""

    def __init__(self, cfg: SurfaceConfig | None = None):
        self.cfg = cfg or SurfaceConfig()
        self._rng = random.Random(self.cfg.seed)
        self._lock = threading.Lock()

    def next_coordinates(self) -> tuple[float, float]:
        with self._lock:
            return self._rng.random() * self.cfg.width, self._rng.random() * self.cfg.height
