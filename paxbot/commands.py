# Command parsing and dispatch for chat lines.
#   ?pax <query>   search
#   !pax about     version blurb

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Hashable, Optional

from .bot import Paxbot, Reply
from .consts import PAXBOT_VERSION
from .errors import MessageIOError
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

ABOUT_TEXT = f"Yup, I'm paxbot v{PAXBOT_VERSION}."


@dataclass(frozen=True)
class Command:
    name: str
    args: str = ""


def _strip_prefix(text: str, prefix: str) -> Optional[str]:
    """Remainder after `prefix` when it is a whole word at the start of `text`."""
    if not text.startswith(prefix):
        return None
    rest = text[len(prefix):]
    if rest and not rest[0].isspace():
        return None
    return rest.strip()


def parse_command(text: str, cfg: Optional[Settings] = None) -> Optional[Command]:
    cfg = cfg or default_settings
    text = text.lstrip()

    rest = _strip_prefix(text, cfg.ask_trigger)
    if rest is not None:
        return Command("ask", rest)

    rest = _strip_prefix(text, cfg.UTIL_PREFIX)
    if rest is not None and rest.split(maxsplit=1)[:1] == ["about"]:
        return Command("about")
    return None


async def dispatch(
    bot: Paxbot,
    conversation_id: Hashable,
    text: str,
    cfg: Optional[Settings] = None,
) -> Optional[Reply]:
    """Run the command in `text`, if any. Returns the reply the bot posted."""
    cmd = parse_command(text, cfg)
    if cmd is None:
        return None
    if cmd.name == "about":
        try:
            return Reply(await bot.client.send_message(conversation_id, ABOUT_TEXT))
        except MessageIOError as e:
            logger.error("Failed to answer about in %s: %s", conversation_id, e)
            return None
    return await bot.ask(conversation_id, cmd.args)
