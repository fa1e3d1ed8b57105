# Paxbot service.
# Wires scoring, page building, the response cache and navigation onto a chat client.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, Optional, Tuple

from .chat.base import MessageClient
from .consts import (
    FEEDBACK_SIGNALS,
    REACT_FEEDBACK_BAD,
    REACT_FEEDBACK_GOOD,
    REACT_RESULTS_BACKWARD,
    REACT_RESULTS_FORWARD,
    SEARCH_SCORE_THRESHOLD,
)
from .errors import MessageIOError
from .navigation import NavigationController, is_navigation
from .render.builder import build
from .render.cache import ResponseCache
from .render.types import PaginatedResponse
from .search.scoring import score
from .search.types import Dataset, RankedMatches

logger = logging.getLogger(__name__)

PLACEHOLDER = "Searching..."


@dataclass
class Reply:
    """A message the bot posted, and the response it shows if any."""
    message_id: Hashable
    response: Optional[PaginatedResponse] = None


def usage_text(trigger: str = "?pax") -> str:
    return f"Usage: `{trigger} your search here`"


class Paxbot:
    def __init__(
        self,
        dataset: Dataset,
        client: MessageClient,
        cache: Optional[ResponseCache] = None,
        threshold: float = SEARCH_SCORE_THRESHOLD,
        trigger: str = "?pax",
    ):
        self.dataset = dataset
        self.client = client
        self.cache = cache if cache is not None else ResponseCache()
        self.threshold = threshold
        self.trigger = trigger
        self.navigation = NavigationController(self.cache, client)

    def _search(self, query: str) -> Tuple[RankedMatches, PaginatedResponse]:
        matches = score(query, self.dataset, threshold=self.threshold)
        return matches, build(matches)

    def handle_query(self, query: str) -> PaginatedResponse:
        """Score and build a response. No side effects."""
        matches, response = self._search(query)
        logger.info(
            "Query %r -> %s, %d page(s)",
            query, type(matches.classification).__name__, len(response),
        )
        return response

    async def ask(self, conversation_id: Hashable, query: str) -> Optional[Reply]:
        """
        Answer `query` in a conversation and start tracking the reply.

        The response is cached as soon as its first page is shown, before any
        signals are attached. Returns the posted reply, or None when posting
        or rendering it failed.
        """
        query = query.strip()
        try:
            if not query:
                mid = await self.client.send_message(conversation_id, usage_text(self.trigger))
                return Reply(mid)

            # Post a placeholder; it gets edited once the response is built.
            message_id = await self.client.send_message(conversation_id, PLACEHOLDER)
            matches, response = self._search(query)
            logger.info(
                "Query %r in %s -> %s, %d page(s)",
                query, conversation_id, type(matches.classification).__name__, len(response),
            )
            await self.client.render_page(conversation_id, message_id, response.current_page)
        except MessageIOError as e:
            logger.error("Abandoned query %r in %s: %s", query, conversation_id, e)
            return None

        await self.cache.insert((conversation_id, message_id), response)

        try:
            if response.is_navigable:
                await self.client.attach_signal(conversation_id, message_id, REACT_RESULTS_BACKWARD)
                await self.client.attach_signal(conversation_id, message_id, REACT_RESULTS_FORWARD)
            if not matches.is_guess:
                await self.client.attach_signal(conversation_id, message_id, REACT_FEEDBACK_GOOD)
                await self.client.attach_signal(conversation_id, message_id, REACT_FEEDBACK_BAD)
        except MessageIOError as e:
            logger.error("Failed to attach signals to %s/%s: %s", conversation_id, message_id, e)
        return Reply(message_id, response)

    async def handle_signal(
        self,
        conversation_id: Hashable,
        message_id: Hashable,
        signal: str,
        is_own: bool = False,
    ) -> bool:
        """React to a signal on a message. Returns True if a tracked response moved."""
        key = (conversation_id, message_id)
        if is_navigation(signal):
            return await self.navigation.handle_signal(key, signal, is_own=is_own)
        if signal in FEEDBACK_SIGNALS and not is_own:
            response = await self.cache.get(key)
            if response is not None:
                verdict = "good" if signal == REACT_FEEDBACK_GOOD else "bad"
                logger.info("Feedback %s for query %r on %s", verdict, response.query, key)
        return False
