# Turns ranked matches into ordered, footed pages.

from __future__ import annotations
from dataclasses import replace
from typing import List

from ..consts import (
    CATEGORY_MEMBER_LIMIT,
    REACT_FEEDBACK_BAD,
    REACT_FEEDBACK_GOOD,
    REACT_RESULTS_BACKWARD,
    REACT_RESULTS_FORWARD,
)
from ..search.types import CategoryBest, Classification, Guess, RankedMatches, ScoredCategory, ScoredItem
from .types import PaginatedResponse, RenderablePage

NO_RESULTS = "No results found."


def results_header(query: str) -> str:
    return f"Results for: `{query}`"


def footer_text(index: int, total: int) -> str:
    """Footer for the page at `index` out of `total` pages."""
    feedback = f"Use {REACT_FEEDBACK_GOOD} if paxbot found what you needed or {REACT_FEEDBACK_BAD} if not."
    if total > 1:
        return (
            f"Displaying result {index + 1} of {total}. "
            f"Use {REACT_RESULTS_BACKWARD} and {REACT_RESULTS_FORWARD} to navigate.\n{feedback}"
        )
    return feedback


def member_list(members: List[str], limit: int = CATEGORY_MEMBER_LIMIT) -> str:
    text = "\n".join(members[:limit])
    if len(members) > limit:
        text += f"\n...and {len(members) - limit} more."
    return text


def category_page(query: str, category: ScoredCategory) -> RenderablePage:
    return RenderablePage(
        content=results_header(query),
        title=f"{category.name} (Category)",
        body=category.description,
        fields=[("Category Members", member_list(category.members), True)],
    )


def item_title(item: ScoredItem) -> str:
    if item.short_names:
        return f"{item.name} ({', '.join(item.short_names)})"
    return item.name


def item_page(query: str, item: ScoredItem) -> RenderablePage:
    return RenderablePage(
        content=results_header(query),
        title=item_title(item),
        body=", ".join(item.category_names),
        fields=[
            ("Information", item.description, False),
            ("External Links", "\n".join(item.external_links), False),
        ],
    )


def guess_page(guess: Guess) -> RenderablePage:
    if guess.candidate is not None:
        return RenderablePage(content=f"{NO_RESULTS} Did you mean `{guess.candidate}`?")
    return RenderablePage(content=NO_RESULTS)


def order_pages(
    classification: Classification,
    category_pages: List[RenderablePage],
    item_pages: List[RenderablePage],
) -> List[RenderablePage]:
    """The winning result type comes first; the other follows for browsing."""
    if isinstance(classification, CategoryBest):
        return category_pages + item_pages
    return item_pages + category_pages


def with_footers(pages: List[RenderablePage]) -> List[RenderablePage]:
    total = len(pages)
    return [replace(p, footer=footer_text(i, total)) for i, p in enumerate(pages)]


def build(matches: RankedMatches) -> PaginatedResponse:
    if isinstance(matches.classification, Guess):
        return PaginatedResponse(pages=[guess_page(matches.classification)], query=matches.query)

    pages = order_pages(
        matches.classification,
        [category_page(matches.query, c) for c in matches.categories],
        [item_page(matches.query, i) for i in matches.items],
    )
    return PaginatedResponse(pages=with_footers(pages), query=matches.query)
