from __future__ import annotations
import threading
from typing import Protocol
import numpy as np

class RandomSource(Protocol):
    def next_uniform(self) -> float: ...

class NumpyRandomSource:
    """Uniform draws in [0, 1) from a numpy Generator; pass a seed for reproducible output."""
    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def next_uniform(self) -> float:
        with self._lock:
            return float(self._rng.random())
