import random
from dataclasses import dataclass
from typing import Optional, Protocol


class RandomSource(Protocol):
    def roll_int(self, lo: int, hi: int) -> int:
        """Return an integer drawn uniformly from ``[lo, hi]``."""
        ...


@dataclass
class RNG:
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._r = random.Random(self.seed)

    def roll_int(self, lo: int, hi: int) -> int:
        return self._r.randint(lo, hi)
