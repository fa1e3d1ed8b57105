# tests/test_commands.py

import asyncio

from paxbot.commands import ABOUT_TEXT, Command, dispatch, parse_command
from paxbot.settings import Settings


def test_parse_ask():
    assert parse_command("?pax kali") == Command("ask", "kali")
    assert parse_command("   ?pax   red dragon ") == Command("ask", "red dragon")
    assert parse_command("?pax") == Command("ask", "")


def test_parse_about():
    assert parse_command("!pax about") == Command("about")


def test_parse_rejects_other_text():
    assert parse_command("hello") is None
    assert parse_command("?paxkali") is None
    assert parse_command("!pax unknown") is None
    assert parse_command("!pax") is None


def test_parse_with_custom_prefix():
    cfg = Settings(COMMAND_PREFIX="!", ASK_COMMAND="ask")
    assert parse_command("!ask kali", cfg) == Command("ask", "kali")
    assert parse_command("?pax kali", cfg) is None


def test_dispatch(bot, client):
    async def run():
        assert await dispatch(bot, "c1", "just chatting") is None
        assert client.messages == {}

        about = await dispatch(bot, "c1", "!pax about")
        assert about.message_id == 1 and about.response is None
        assert client.message("c1", 1).content == ABOUT_TEXT

        reply = await dispatch(bot, "c1", "?pax kali")
        assert reply.message_id == 2
        assert await bot.cache.get(("c1", 2)) is reply.response
    asyncio.run(run())
