# Shared fixtures: a tiny dataset mirroring content/content.yaml and a bot wired to an in-memory chat.

import pytest

from paxbot.bot import Paxbot
from paxbot.chat import MemoryChatClient
from paxbot.render import ResponseCache
from paxbot.search.types import Category, Dataset, Item


def make_dataset() -> Dataset:
    return Dataset(
        categories=(
            Category("Awesome People", "Folks who make the place better."),
            Category("Dragons", "Large, winged and usually in a bad mood."),
        ),
        items=(
            Item(
                name="Kali Liada",
                short_names=("Kali", "Marz"),
                category_names=frozenset({"Awesome People"}),
                description="Yep, I'm me.",
                external_links=("[A website!](http://example.com)",),
            ),
            Item(
                name="Nori Durnin",
                short_names=("Nori",),
                category_names=frozenset({"Awesome People"}),
                description="Yep, I'm cute.",
                external_links=("[Another website!](https://google.com)",),
            ),
            Item(
                name="Red Dragon",
                short_names=("Dragon",),
                category_names=frozenset({"Dragons"}),
                description="Breathes fire.",
            ),
            Item(
                name="Drakons",
                category_names=frozenset({"Dragons"}),
                description="Smaller cousins of dragons.",
            ),
        ),
    )


@pytest.fixture
def dataset() -> Dataset:
    return make_dataset()


@pytest.fixture
def client() -> MemoryChatClient:
    return MemoryChatClient()


@pytest.fixture
def bot(dataset, client) -> Paxbot:
    return Paxbot(dataset, client, cache=ResponseCache())
