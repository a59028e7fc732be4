from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple


@dataclass(frozen=True)
class RollResult:
    """Final die values of one roll, exploded dice included."""

    values: Tuple[int, ...]

    def total(self) -> int:
        return sum(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __str__(self) -> str:
        if len(self.values) == 1:
            return f"{self.total():3}"
        breakdown = " + ".join(str(v) for v in self.values)
        return f"{self.total():3} = ({breakdown})"

    def to_dict(self) -> Dict[str, object]:
        return {"values": list(self.values), "total": self.total()}
