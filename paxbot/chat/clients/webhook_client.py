# Chat client that posts and edits messages through a chat-platform webhook.
# requests is blocking, so every call runs in a worker thread.

from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict, Hashable

import requests

from ...errors import MessageIOError
from ...render.types import RenderablePage

logger = logging.getLogger(__name__)


def page_to_payload(page: RenderablePage) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"content": page.content, "embeds": []}
    if page.has_embed:
        embed: Dict[str, Any] = {
            "title": page.title,
            "fields": [{"name": n, "value": v or "-", "inline": inline} for (n, v, inline) in page.fields],
        }
        if page.body:
            embed["description"] = page.body
        if page.footer:
            embed["footer"] = {"text": page.footer}
        payload["embeds"] = [embed]
    return payload


class WebhookClient:
    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url.rstrip("/")
        self.timeout = timeout

    def _post(self, content: str) -> str:
        resp = requests.post(f"{self.url}?wait=true", json={"content": content}, timeout=self.timeout)
        resp.raise_for_status()
        return str(resp.json()["id"])

    def _patch(self, message_id: Hashable, payload: Dict[str, Any]) -> None:
        resp = requests.patch(f"{self.url}/messages/{message_id}", json=payload, timeout=self.timeout)
        resp.raise_for_status()

    async def send_message(self, conversation_id: Hashable, content: str) -> str:
        try:
            return await asyncio.to_thread(self._post, content)
        except (requests.RequestException, KeyError, ValueError) as e:
            raise MessageIOError(f"webhook send failed: {e}") from e

    async def render_page(self, conversation_id: Hashable, message_id: Hashable, page: RenderablePage) -> None:
        try:
            await asyncio.to_thread(self._patch, message_id, page_to_payload(page))
        except requests.RequestException as e:
            raise MessageIOError(f"webhook edit of {message_id} failed: {e}") from e

    # Webhooks cannot react to messages.
    async def attach_signal(self, conversation_id: Hashable, message_id: Hashable, signal: str) -> None:
        logger.debug("Webhook cannot attach %s to %s", signal, message_id)

    async def remove_signal(self, conversation_id: Hashable, message_id: Hashable, signal: str) -> None:
        logger.debug("Webhook cannot remove %s from %s", signal, message_id)
