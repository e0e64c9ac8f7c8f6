"""
rng.py
------

Thread-safe, seedable random generator for caller-chosen random shape
parameters (e.g. a random trapezoid inset).

- One instance may be shared across threads; a lock guards every draw.
- `get_rng()` hands out a lazily created instance per thread, seeded from
  process / time entropy.
"""

from __future__ import annotations

__all__ = ["RNG", "get_rng"]

import os
import time
import random
import threading
from typing import Optional


def _entropy_seed() -> int:
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.getrandbits(32)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Seedable random generator with locked draws.

    Attributes:
        _rng:  Backend ``random.Random``.
        _lock: threading.Lock for safe concurrent access.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._lock = threading.Lock()
        self._rng = random.Random(_entropy_seed() if seed is None else seed)

    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            self._rng.seed(_entropy_seed() if seed is None else seed)

    def random(self) -> float:
        with self._lock:
            return self._rng.random()

    def uniform(self, low: float, high: float) -> float:
        with self._lock:
            return self._rng.uniform(low, high)

    def __repr__(self) -> str:
        return f"<RNG pid={os.getpid()} id={id(self)}>"


# =============================================================================
# THREAD-LOCAL ACCESSOR
# =============================================================================
_thread_local = threading.local()


def get_rng() -> RNG:
    """Return the calling thread's RNG, creating it on first use."""
    rng = getattr(_thread_local, "rng", None)
    if rng is None:
        rng = _thread_local.rng = RNG()
    return rng
