# ============================================================
# Paxbot FastAPI App
# ------------------------------------------------------------
# Development surface for the bot:
#   - Chat lines go through the same command dispatcher a chat
#     platform would use
#   - Messages live in an in-memory chat client and can be
#     inspected and reacted to
# ============================================================

from dataclasses import asdict
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from paxbot.bot import Paxbot
from paxbot.chat import MemoryChatClient
from paxbot.commands import dispatch
from paxbot.log import configure_logging
from paxbot.render import ResponseCache
from paxbot.search import load_dataset
from paxbot.settings import settings

configure_logging(settings.LOG_LEVEL)

# ------------------------------------------------------------
# 🧠 Helpers: build the bot once per process
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_bot() -> Paxbot:
    dataset = load_dataset(settings.CONTENT_PATH)
    cache = ResponseCache(
        max_entries=settings.CACHE_MAX_ENTRIES,
        ttl_seconds=settings.CACHE_TTL_SECONDS,
    )
    return Paxbot(
        dataset,
        MemoryChatClient(),
        cache=cache,
        threshold=settings.SEARCH_SCORE_THRESHOLD,
        trigger=settings.ask_trigger,
    )

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Paxbot API", version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatLine(BaseModel):
    text: str

class SignalRequest(BaseModel):
    signal: str
    own: bool = False

class MessageState(BaseModel):
    conversation_id: str
    message_id: int
    content: str
    page: Optional[Dict[str, Any]] = None
    signals: List[str]
    current_index: Optional[int] = None
    total_pages: Optional[int] = None

class SearchPayload(BaseModel):
    query: str
    current_index: int
    pages: List[Dict[str, Any]]

async def message_state(conversation_id: str, message_id: int) -> MessageState:
    bot = get_bot()
    msg = bot.client.message(conversation_id, message_id)
    if msg is None:
        raise HTTPException(status_code=404, detail="Message not found")
    response = await bot.cache.get((conversation_id, message_id))
    return MessageState(
        conversation_id=conversation_id,
        message_id=message_id,
        content=msg.content,
        page=asdict(msg.page) if msg.page else None,
        signals=msg.signals,
        current_index=response.current_index if response else None,
        total_pages=len(response) if response else None,
    )

# ------------------------------------------------------------
# 💬 Chat routes
# ------------------------------------------------------------
@app.post("/conversations/{conversation_id}/messages")
async def post_message(conversation_id: str, line: ChatLine):
    reply = await dispatch(get_bot(), conversation_id, line.text, settings)
    if reply is None:
        return {"handled": False}
    return {"handled": True, "message": await message_state(conversation_id, reply.message_id)}

@app.get("/conversations/{conversation_id}/messages/{message_id}", response_model=MessageState)
async def get_message(conversation_id: str, message_id: int):
    return await message_state(conversation_id, message_id)

@app.post("/conversations/{conversation_id}/messages/{message_id}/signals", response_model=MessageState)
async def post_signal(conversation_id: str, message_id: int, req: SignalRequest):
    state = await message_state(conversation_id, message_id)
    await get_bot().handle_signal(conversation_id, message_id, req.signal, is_own=req.own)
    return await message_state(state.conversation_id, state.message_id)

# ------------------------------------------------------------
# 🔎 Search-only route
# ------------------------------------------------------------
@app.get("/search", response_model=SearchPayload)
def search_endpoint(q: str = Query(..., description="Search query")):
    response = get_bot().handle_query(q)
    return {
        "query": response.query,
        "current_index": response.current_index,
        "pages": [asdict(p) for p in response.pages],
    }

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": "Paxbot service running."}
