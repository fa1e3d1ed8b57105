# Data models for the search layer.
# The dataset is loaded once and never mutated; scored results are rebuilt per query.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, FrozenSet, Union


@dataclass(frozen=True)
class Category:
    """A named group of items."""
    name: str
    description: str


@dataclass(frozen=True)
class Item:
    """A searchable entry. Any of its names may match a query."""
    name: str
    short_names: Tuple[str, ...] = ()
    category_names: FrozenSet[str] = frozenset()
    description: str = ""
    external_links: Tuple[str, ...] = ()

    @property
    def names(self) -> Tuple[str, ...]:
        return (*self.short_names, self.name)


@dataclass(frozen=True)
class Dataset:
    """Every category and item known to the bot."""
    categories: Tuple[Category, ...] = ()
    items: Tuple[Item, ...] = ()

    def members_of(self, category_name: str) -> List[str]:
        return [i.name for i in self.items if category_name in i.category_names]


@dataclass
class ScoredCategory:
    name: str
    description: str
    score: float
    members: List[str] = field(default_factory=list)


@dataclass
class ScoredItem:
    name: str
    short_names: List[str]
    category_names: List[str]
    description: str
    external_links: List[str]
    score: float


# --- Classification: which result type renders first ---

@dataclass(frozen=True)
class CategoryBest:
    pass


@dataclass(frozen=True)
class ItemBest:
    pass


@dataclass(frozen=True)
class Guess:
    """No strong match won; candidate is the best-scoring name seen, if any."""
    candidate: Optional[str] = None


Classification = Union[CategoryBest, ItemBest, Guess]


@dataclass
class RankedMatches:
    """Strong matches for a query, each list sorted by descending score."""
    query: str
    categories: List[ScoredCategory] = field(default_factory=list)
    items: List[ScoredItem] = field(default_factory=list)
    classification: Classification = field(default_factory=Guess)

    @property
    def is_guess(self) -> bool:
        return isinstance(self.classification, Guess)
