"""
Forward/backward browsing of cached responses.

The index cycles through `0 .. len(pages) - 1` with wraparound in both
directions. The new index is written under the cache lock; the page is
rendered after the lock is released. A failed render is logged and the
index stays where it moved to, so the next navigation shows the right page.
"""

from __future__ import annotations

import logging
from typing import Optional

from .chat.base import MessageClient
from .consts import REACT_RESULTS_BACKWARD, REACT_RESULTS_FORWARD
from .errors import MessageIOError
from .render.cache import CacheKey, ResponseCache
from .render.types import PaginatedResponse, RenderablePage

logger = logging.getLogger(__name__)


def forward(index: int, count: int) -> int:
    return (index + 1) % count


def backward(index: int, count: int) -> int:
    return (index - 1 + count) % count


def next_index(index: int, count: int, signal: str) -> Optional[int]:
    """Index after `signal`, or None when the signal is not a navigation symbol."""
    if signal == REACT_RESULTS_FORWARD:
        return forward(index, count)
    if signal == REACT_RESULTS_BACKWARD:
        return backward(index, count)
    return None


def is_navigation(signal: str) -> bool:
    return signal in (REACT_RESULTS_FORWARD, REACT_RESULTS_BACKWARD)


class NavigationController:
    def __init__(self, cache: ResponseCache, client: MessageClient):
        self.cache = cache
        self.client = client

    async def handle_signal(self, key: CacheKey, signal: str, is_own: bool = False) -> bool:
        """Apply a navigation signal. Returns True when a tracked response moved."""
        if is_own or not is_navigation(signal):
            logger.debug("Ignoring signal %r on %s (own=%s)", signal, key, is_own)
            return False

        def step(response: PaginatedResponse) -> RenderablePage:
            response.current_index = next_index(response.current_index, len(response), signal)
            return response.current_page

        page = await self.cache.with_entry(key, step)
        if page is None:
            logger.debug("Signal %r on untracked message %s", signal, key)
            return False

        conversation_id, message_id = key
        try:
            await self.client.render_page(conversation_id, message_id, page)
        except MessageIOError as e:
            logger.error("Failed to edit message %s: %s", key, e)
        try:
            await self.client.remove_signal(conversation_id, message_id, signal)
        except MessageIOError as e:
            logger.error("Failed to clear signal %r on %s: %s", signal, key, e)
        return True
