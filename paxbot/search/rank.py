# Ranking helpers for scored results.
# Stateless; sorts in place and returns the same list for chaining.

from __future__ import annotations
from typing import List, TypeVar, Protocol


class _Scored(Protocol):
    name: str
    score: float


S = TypeVar("S", bound=_Scored)


def rank_by_score(results: List[S]) -> List[S]:
    """Descending score; equal scores fall back to descending name."""
    results.sort(key=lambda r: (r.score, r.name), reverse=True)
    return results
