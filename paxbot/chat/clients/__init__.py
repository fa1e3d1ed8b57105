from .memory_client import ChatMessage, MemoryChatClient
from .webhook_client import WebhookClient

__all__ = ["ChatMessage", "MemoryChatClient", "WebhookClient"]
