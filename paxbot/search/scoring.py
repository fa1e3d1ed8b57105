"""
Fuzzy scoring of a query against the whole dataset.

Categories are compared on their name, items on the best of their primary
and short names. Anything above the match threshold is a strong match and is
kept. A single running best score is folded over categories first, then
items; whichever candidate holds it at the end decides the classification.
A best score held by a weak candidate turns the result into a guess.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from rapidfuzz import fuzz

from ..consts import SEARCH_SCORE_THRESHOLD
from .rank import rank_by_score
from .types import (
    CategoryBest,
    Classification,
    Dataset,
    Guess,
    ItemBest,
    RankedMatches,
    ScoredCategory,
    ScoredItem,
)


def normalize(text: str) -> str:
    return text.casefold()


def similarity(query: str, name: str) -> float:
    """Approximate similarity in [0, 1]. Empty operands never match."""
    q, n = normalize(query), normalize(name)
    if not q or not n:
        return 0.0
    return fuzz.ratio(q, n) / 100.0


def best_similarity(query: str, names: Iterable[str]) -> float:
    return max((similarity(query, n) for n in names), default=0.0)


@dataclass(frozen=True)
class Best:
    """Running best score and the classification it implies."""
    score: float = 0.0
    classification: Classification = Guess()


def fold_best(best: Best, score: float, strong: Classification, name: str, threshold: float) -> Best:
    """
    Fold one candidate into the running best.

    Only a strict improvement replaces the current best, so on ties the
    earlier candidate (categories are scanned first) keeps it.
    """
    if score <= best.score:
        return best
    if score > threshold:
        return Best(score, strong)
    return Best(score, Guess(name))


def score(query: str, dataset: Dataset, threshold: float = SEARCH_SCORE_THRESHOLD) -> RankedMatches:
    matches = RankedMatches(query=query)
    best = Best()

    for category in dataset.categories:
        s = similarity(query, category.name)
        if s > threshold:
            matches.categories.append(
                ScoredCategory(
                    name=category.name,
                    description=category.description,
                    score=s,
                    members=dataset.members_of(category.name),
                )
            )
        best = fold_best(best, s, CategoryBest(), category.name, threshold)

    for item in dataset.items:
        s = best_similarity(query, item.names)
        if s > threshold:
            matches.items.append(
                ScoredItem(
                    name=item.name,
                    short_names=list(item.short_names),
                    category_names=sorted(item.category_names),
                    description=item.description,
                    external_links=list(item.external_links),
                    score=s,
                )
            )
        best = fold_best(best, s, ItemBest(), item.name, threshold)

    rank_by_score(matches.categories)
    rank_by_score(matches.items)
    matches.classification = best.classification
    return matches
