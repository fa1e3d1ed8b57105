# Data models for rendered responses.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# (label, content, inline)
PageField = Tuple[str, str, bool]


@dataclass
class RenderablePage:
    """One screen of a response: plain content plus an optional embed."""
    content: str
    title: Optional[str] = None
    body: Optional[str] = None
    fields: List[PageField] = field(default_factory=list)
    footer: Optional[str] = None

    @property
    def has_embed(self) -> bool:
        return self.title is not None


@dataclass
class PaginatedResponse:
    """Pages for one query and the page currently shown."""
    pages: List[RenderablePage]
    current_index: int = 0
    query: str = ""

    def __post_init__(self):
        if not self.pages:
            raise ValueError("a response needs at least one page")
        if not 0 <= self.current_index < len(self.pages):
            raise ValueError(f"index {self.current_index} out of range for {len(self.pages)} pages")

    def __len__(self) -> int:
        return len(self.pages)

    @property
    def current_page(self) -> RenderablePage:
        return self.pages[self.current_index]

    @property
    def is_navigable(self) -> bool:
        return len(self.pages) > 1
