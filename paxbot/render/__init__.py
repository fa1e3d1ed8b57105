# Render layer: page types, the response builder and the response cache.

from .builder import build, order_pages, footer_text
from .cache import CacheKey, ResponseCache
from .types import PageField, PaginatedResponse, RenderablePage

__all__ = [
    "build",
    "order_pages",
    "footer_text",
    "CacheKey",
    "ResponseCache",
    "PageField",
    "PaginatedResponse",
    "RenderablePage",
]
