# Search layer: dataset types, content loader and fuzzy scoring.

from .backend import load_dataset
from .scoring import score
from .types import (
    Category,
    CategoryBest,
    Classification,
    Dataset,
    Guess,
    Item,
    ItemBest,
    RankedMatches,
    ScoredCategory,
    ScoredItem,
)

__all__ = [
    "load_dataset",
    "score",
    "Category",
    "CategoryBest",
    "Classification",
    "Dataset",
    "Guess",
    "Item",
    "ItemBest",
    "RankedMatches",
    "ScoredCategory",
    "ScoredItem",
]
