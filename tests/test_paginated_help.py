"""Tests for the paginated help command."""

import pytest

from system.help.commands.paginated import PaginatedHelpCommand
from system.help.settings import HelpSettings
from system.help.ui.views import HelpPaginatorView


def _help(ctx, **settings):
    settings.setdefault("verify_checks", False)
    help_command = PaginatedHelpCommand(settings=HelpSettings(**settings))
    help_command.context = ctx
    return help_command


@pytest.mark.asyncio
async def test_single_page_has_no_view(bot, make_ctx):
    ctx = make_ctx(bot)
    await _help(ctx, per_page=5).command_callback(ctx)

    sent = ctx.channel.sent
    assert len(sent) == 1
    assert "view" not in vars(sent[0])
    assert sent[0].embed.footer.text.startswith("Page 1/1")


@pytest.mark.asyncio
async def test_sections_are_split_across_pages(bot, make_ctx):
    ctx = make_ctx(bot, author_id=7)
    await _help(ctx, per_page=1, timeout=30).command_callback(ctx)

    sent = ctx.channel.sent[0]
    view = sent.view
    assert isinstance(view, HelpPaginatorView)
    assert len(view.pages) == 2
    assert view.author_id == 7
    assert view.timeout == 30
    assert view.message is not None
    assert [p.fields[0].name for p in view.pages] == ["No Category", "Sample"]
    assert sent.embed is view.pages[0]


@pytest.mark.asyncio
async def test_long_cog_help_is_paginated(bot, make_ctx, add_bulk_commands):
    add_bulk_commands(bot, 40)

    ctx = make_ctx(bot)
    await _help(ctx).command_callback(ctx, command="Bulk")

    view = ctx.channel.sent[0].view
    assert len(view.pages) >= 2
    assert all(page.title == "Bulk Commands" for page in view.pages)
    assert view.pages[0].footer.text == f"Page 1/{len(view.pages)}"


@pytest.mark.asyncio
async def test_errors_still_use_error_embed(bot, make_ctx):
    ctx = make_ctx(bot)
    await _help(ctx).command_callback(ctx, command="missing")
    assert ctx.channel.sent[0].embed.title == "Help Error"


@pytest.mark.asyncio
async def test_large_index_pages_stay_inside_embed_limit(bot, make_ctx, add_bulk_commands):
    add_bulk_commands(bot, 80)
    ctx = make_ctx(bot)
    await _help(ctx, per_page=25).command_callback(ctx)

    view = ctx.channel.sent[0].view
    assert len(view.pages) >= 2
    assert all(len(page) <= 6000 for page in view.pages)
    listed = "\n".join(f.value for page in view.pages for f in page.fields)
    assert all(f"`!bulk{i:02d}`" in listed for i in range(80))
    assert "left out" not in listed
