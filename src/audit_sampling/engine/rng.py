"""Seed-reproducible pseudo-random generator for sample selection.

Fast and deterministic, not cryptographically secure. The constants are
fixed so that stored seeds keep reproducing the same sample dates.
"""

import time
from uuid import uuid4


class SeededRandom:
    """Linear congruential generator seeded from a string.

    The seed's UTF-16 code units are folded into a signed 32-bit hash
    (``h = h * 31 + unit``), which becomes the generator's initial state.
    """

    MULTIPLIER = 9301
    INCREMENT = 49297
    MODULUS = 233280

    def __init__(self, seed: str):
        self.seed = seed
        self._state = self.hash_seed(seed)

    @staticmethod
    def hash_seed(seed: str) -> int:
        """Fold a seed string into a signed 32-bit integer."""
        data = seed.encode("utf-16-le", "surrogatepass")
        value = 0
        for offset in range(0, len(data), 2):
            unit = int.from_bytes(data[offset:offset + 2], "little")
            value = ((value << 5) - value + unit) & 0xFFFFFFFF
        if value >= 0x80000000:
            value -= 0x100000000
        return value

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        # Floored modulo keeps the state non-negative even for negative hashes
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) % self.MODULUS
        return self._state / self.MODULUS

    def next_index(self, length: int) -> int:
        """Return a pseudo-random index into a sequence of ``length`` items."""
        return int(self.next() * length)


def generate_seed() -> str:
    """Create a fresh seed from random and wall-clock entropy.

    Runs using a generated seed are not reproducible unless the seed is
    read back from the result metadata.
    """
    return f"{uuid4().hex[:11]}{int(time.time() * 1000):x}"
