# Chat layer: the message client interface and its implementations.

from .base import MessageClient
from .clients import ChatMessage, MemoryChatClient, WebhookClient

__all__ = ["MessageClient", "ChatMessage", "MemoryChatClient", "WebhookClient"]
