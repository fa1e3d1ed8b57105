# Interface every chat client implements.
# The bot never touches the network itself; it only calls these.

from __future__ import annotations
from typing import Hashable, Protocol

from ..render.types import RenderablePage


class MessageClient(Protocol):
    async def send_message(self, conversation_id: Hashable, content: str) -> Hashable:
        """Post a plain message and return its id."""
        ...

    async def render_page(self, conversation_id: Hashable, message_id: Hashable, page: RenderablePage) -> None:
        """Replace the content of an existing message with `page`."""
        ...

    async def attach_signal(self, conversation_id: Hashable, message_id: Hashable, signal: str) -> None:
        ...

    async def remove_signal(self, conversation_id: Hashable, message_id: Hashable, signal: str) -> None:
        ...
