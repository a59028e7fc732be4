"""Roll executor: sample, window, explode, sort."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .expression import Expression, parse
from .logging import get_logger
from .output import RollResult
from .rng import RNG, RandomSource

log = get_logger(__name__)


@dataclass(frozen=True)
class Options:
    """Execution-time switches that apply to every die in a roll.

    ``destructive_trance`` caps the explosion threshold at ``max - 1`` so dice
    also explode one face below the highest.
    """

    destructive_trance: bool = False


class Roller:
    """Draws dice of a single face count from ``rng``."""

    def __init__(self, rng: RandomSource, faces: int, options: Options | None = None) -> None:
        self.rng = rng
        self.faces = faces
        self.options = options or Options()

    def sample(self, count: int) -> List[int]:
        return [self.rng.roll_int(1, self.faces) for _ in range(count)]

    def effective_threshold(self, threshold: Optional[int]) -> Optional[int]:
        if threshold is None:
            return None
        if self.options.destructive_trance:
            return min(threshold, self.faces - 1)
        return threshold

    def qualifies(self, value: int, threshold: Optional[int]) -> bool:
        threshold = self.effective_threshold(threshold)
        return threshold is not None and value >= threshold

    def explode(self, threshold: Optional[int]) -> List[int]:
        """Roll one extra die, and another for as long as the last one qualifies."""
        chain = [self.rng.roll_int(1, self.faces)]
        while self.qualifies(chain[-1], threshold):
            chain.append(self.rng.roll_int(1, self.faces))
        return chain


def apply_modifier(expression: Expression, values: List[int]) -> List[int]:
    """Keep the ``num`` dice selected by advantage or disadvantage."""
    values = sorted(values)
    if expression.modifier > 0:
        return values[expression.modifier:]
    if expression.modifier < 0:
        return values[:expression.num]
    return values


def execute(expression: Expression, rng: RandomSource, options: Options | None = None) -> RollResult:
    """Roll ``expression`` against ``rng``.

    Advantage and disadvantage roll ``num + |modifier|`` dice and keep the
    highest or lowest ``num``. Every kept die at or above the threshold adds
    an explosion chain. Values come back sorted highest first.
    """
    roller = Roller(rng, expression.max, options)

    pool = roller.sample(expression.total_dice())
    values = apply_modifier(expression, pool)
    log.debug("%s: rolled %s, kept %s", expression, pool, values)

    explosions = sum(1 for v in values if roller.qualifies(v, expression.threshold))
    for _ in range(explosions):
        chain = roller.explode(expression.threshold)
        log.debug("%s: explosion chain %s", expression, chain)
        values.extend(chain)

    values.sort(reverse=True)
    return RollResult(tuple(values))


def roll(expr: str, seed: int | None = None, trance: bool = False) -> RollResult:
    """Parse ``expr`` and roll it with a fresh :class:`~legend.rng.RNG`.

    Parameters
    ----------
    expr: str
        Dice expression such as ``2d6+2!5``.
    seed: int | None
        Optional seed for deterministic results.
    trance: bool
        Roll in destructive trance mode.
    """
    return execute(parse(expr), RNG(seed), Options(destructive_trance=trance))


__all__ = ["Options", "Roller", "apply_modifier", "execute", "roll"]
