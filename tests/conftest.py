"""Pytest configuration and shared fixtures.

Discord objects come in two flavours here: real framework objects that need no
gateway connection (commands, cogs, embeds, views) and small fakes for the
pieces that would talk to Discord (channels, contexts, interactions).
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest
import pytest_asyncio
from discord.ext import bridge, commands

from core import i18n


class FakeChannel:
    def __init__(self):
        self.sent = []
        self.send = AsyncMock(side_effect=self._send)

    async def _send(self, content=None, **kwargs):
        message = MagicMock(spec=discord.Message)
        message.edit = AsyncMock()
        self.sent.append(SimpleNamespace(content=content, **kwargs))
        return message


class FakeContext:
    """Just enough of commands.Context for the help command hooks."""

    def __init__(self, bot, *, prefix="!", guild=None, author_id=42):
        self.bot = bot
        self.prefix = prefix
        self.clean_prefix = prefix
        self.guild = guild
        self.interaction = None
        self.command = None
        self.invoked_with = "help"
        self.channel = FakeChannel()
        self.author = FakeChannel()
        self.author.id = author_id
        self.message = SimpleNamespace(content=f"{prefix}help")
        self.send = self.channel.send


class SampleCog(commands.Cog, name="Sample"):
    """Commands used to exercise the help output."""

    @commands.command(name="ping", aliases=["p"])
    async def ping(self, ctx):
        """Replies with pong.

        Longer explanation of the ping command.
        """

    @commands.command(name="echo", brief="Repeats your text")
    async def echo(self, ctx, *, text: str):
        pass

    @commands.command(name="secret", hidden=True)
    async def secret(self, ctx):
        """Hidden maintenance command."""

    @commands.group(name="tag", invoke_without_command=True)
    async def tag(self, ctx):
        """Manage tags."""

    @tag.command(name="create")
    async def tag_create(self, ctx, name: str, *, content: str):
        """Create a new tag."""

    @tag.command(name="delete")
    async def tag_delete(self, ctx, name: str):
        """Delete a tag."""


class EmptyCog(commands.Cog, name="Empty"):
    """A cog with nothing in it."""


async def _standalone(ctx):
    """A command outside any cog."""


class BulkCog(commands.Cog, name="Bulk"):
    """Lots of commands."""


async def _bulk(cog_self, ctx):
    """Generated command."""


@pytest.fixture(autouse=True)
def fresh_i18n_cache():
    i18n.clear_cache()
    yield
    i18n.clear_cache()


@pytest_asyncio.fixture
async def bot():
    # Built inside the running loop; the framework binds to it on construction
    instance = commands.Bot(
        command_prefix="!", intents=discord.Intents.none(), help_command=None
    )
    instance.add_cog(SampleCog())
    instance.add_cog(EmptyCog())
    instance.add_command(commands.Command(_standalone, name="standalone"))
    yield instance


@pytest_asyncio.fixture
async def bridge_bot():
    # Cogs with bridge commands need a bridge.Bot to register against
    instance = bridge.Bot(
        command_prefix="!", intents=discord.Intents.none(), help_command=None
    )
    instance.add_cog(SampleCog())
    yield instance


@pytest.fixture
def add_bulk_commands():
    def factory(bot, count, brief="b" * 60):
        cog = BulkCog()
        bot.add_cog(cog)
        for i in range(count):
            command = commands.Command(_bulk, name=f"bulk{i:02d}", brief=brief)
            command.cog = cog
            bot.add_command(command)
        return cog

    return factory


@pytest.fixture
def make_ctx():
    def factory(bot, **kwargs):
        return FakeContext(bot, **kwargs)

    return factory


def make_interaction(user_id=42):
    return SimpleNamespace(
        user=SimpleNamespace(id=user_id),
        response=SimpleNamespace(
            edit_message=AsyncMock(),
            send_message=AsyncMock(),
        ),
    )


@pytest.fixture
def interaction_factory():
    return make_interaction
