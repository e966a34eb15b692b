"""Result container shared by the root finders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core import IterationRecord


@dataclass
class RootResult:
    """Outcome of a root-finding call.

    ``converged`` is False when the iteration budget ran out; ``root`` then
    holds the last iterate as a best-effort estimate.
    """

    root: float
    converged: bool
    nit: int
    error: float
    message: str
    history: List[IterationRecord] = field(default_factory=list)

    def __float__(self) -> float:
        return self.root


__all__ = ["RootResult"]
