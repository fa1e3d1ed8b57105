# In-memory chat client for local dev and tests.
# Keeps every message it was asked to post so callers can inspect what a user would see.

from __future__ import annotations
import itertools
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Set, Tuple

from ...errors import MessageIOError
from ...render.types import RenderablePage


@dataclass
class ChatMessage:
    conversation_id: Hashable
    message_id: int
    content: str
    page: Optional[RenderablePage] = None
    signals: List[str] = field(default_factory=list)
    edits: int = 0


class MemoryChatClient:
    def __init__(self):
        self.messages: Dict[Tuple[Hashable, int], ChatMessage] = {}
        self._ids = itertools.count(1)
        # operations to fail on purpose: "send", "render", "attach", "remove"
        self.failing: Set[str] = set()

    def _check(self, op: str) -> None:
        if op in self.failing:
            raise MessageIOError(f"{op} failed (injected)")

    def _get(self, conversation_id: Hashable, message_id: Hashable) -> ChatMessage:
        msg = self.messages.get((conversation_id, message_id))
        if msg is None:
            raise MessageIOError(f"unknown message {conversation_id}/{message_id}")
        return msg

    def message(self, conversation_id: Hashable, message_id: Hashable) -> Optional[ChatMessage]:
        return self.messages.get((conversation_id, message_id))

    async def send_message(self, conversation_id: Hashable, content: str) -> int:
        self._check("send")
        mid = next(self._ids)
        self.messages[(conversation_id, mid)] = ChatMessage(conversation_id, mid, content)
        return mid

    async def render_page(self, conversation_id: Hashable, message_id: Hashable, page: RenderablePage) -> None:
        self._check("render")
        msg = self._get(conversation_id, message_id)
        msg.content = page.content
        msg.page = page
        msg.edits += 1

    async def attach_signal(self, conversation_id: Hashable, message_id: Hashable, signal: str) -> None:
        self._check("attach")
        msg = self._get(conversation_id, message_id)
        if signal not in msg.signals:
            msg.signals.append(signal)

    async def remove_signal(self, conversation_id: Hashable, message_id: Hashable, signal: str) -> None:
        # Clears a user's reaction; the bot's own stays attached.
        self._check("remove")
        self._get(conversation_id, message_id)
