"""
Deterministic pseudo-random generator for the mock engine.

SplitMix64 is small, fast and fully specified, so a given seed produces the
same stream on every platform and interpreter version. Sessions own their
generator instance; nothing here is process-global.
"""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


class SplitMix64:
    """SplitMix64 generator over 64-bit unsigned state.

    Usage:
        rng = SplitMix64(seed=42)
        value = rng.next()  # 0 <= value < 2**64
    """

    def __init__(self, seed: int = 0) -> None:
        self._state = seed & _MASK64

    @property
    def state(self) -> int:
        """Current internal state (useful to snapshot a stream position)."""
        return self._state

    def next(self) -> int:
        """Advance the state and return the next 64-bit value."""
        self._state = (self._state + 0x9E3779B97F4A7C15) & _MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        return z ^ (z >> 31)

    def below(self, n: int) -> int:
        """Return a value in [0, n) by reducing the next draw modulo n."""
        return self.next() % n
