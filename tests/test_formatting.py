"""Tests for the pure help formatting helpers."""

import pytest

from system.help.services.formatting import (
    HelpSection,
    cog_commands,
    command_line,
    command_signature,
    command_summary,
    group_mapping_by_cog,
    pack_lines,
    paginate_sections,
    prefix_commands,
    section_size,
    truncate,
)


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate("abcdefghij", 5) == "abcd…"


def test_pack_lines_respects_limit():
    lines = ["x" * 10] * 10
    blocks = pack_lines(lines, limit=32)
    assert all(len(block) <= 32 for block in blocks)
    assert "\n".join(blocks).count("x" * 10) == 10
    assert blocks[0] == "\n".join(["x" * 10] * 3)


def test_pack_lines_truncates_oversized_line():
    blocks = pack_lines(["y" * 50, "z"], limit=20)
    assert blocks[0] == "y" * 19 + "…"
    assert blocks[1] == "z"


def test_pack_lines_empty():
    assert pack_lines([]) == []


def test_help_section_defaults():
    section = HelpSection("Sample")
    assert section.lines == []
    assert section.description is None


@pytest.mark.asyncio
async def test_prefix_commands_drops_other_objects(bot):
    ping = bot.get_command("ping")
    assert prefix_commands([ping, object(), "text"]) == [ping]


@pytest.mark.asyncio
async def test_signatures(bot):
    assert command_signature("!", bot.get_command("ping")) == "!ping"
    assert command_signature("!", bot.get_command("echo")) == "!echo <text>"
    assert command_signature("?", bot.get_command("tag create")) == (
        "?tag create <name> <content>"
    )


@pytest.mark.asyncio
async def test_summaries(bot):
    assert command_summary(bot.get_command("ping"), "-") == "Replies with pong."
    assert command_summary(bot.get_command("echo"), "-") == "Repeats your text"
    line = command_line("!", bot.get_command("ping"), "-")
    assert line == "`!ping` - Replies with pong."


@pytest.mark.asyncio
async def test_group_mapping_by_cog(bot):
    mapping = group_mapping_by_cog(bot)
    sample = bot.get_cog("Sample")
    empty = bot.get_cog("Empty")

    assert {c.name for c in mapping[sample]} == {"ping", "echo", "secret", "tag"}
    assert mapping[empty] == []
    assert [c.name for c in mapping[None]] == ["standalone"]


@pytest.mark.asyncio
async def test_cog_commands_only_top_level(bot):
    names = {c.name for c in cog_commands(bot, bot.get_cog("Sample"))}
    assert names == {"ping", "echo", "secret", "tag"}


def test_section_size_counts_description_and_continuations():
    section = HelpSection("Tools", ["a" * 10, "b" * 10], description="Handy")
    chars, fields = section_size(section)
    assert fields == 1
    assert chars == len("Tools") + len("*Handy*\n" + "a" * 10 + "\n" + "b" * 10)

    big = HelpSection("Big", ["x" * 100] * 30)
    assert section_size(big)[1] == 3


def test_paginate_sections_honours_per_page():
    sections = [HelpSection(name, ["`!x` - y"]) for name in "ABCDE"]
    pages = paginate_sections(sections, per_page=2)
    assert [[s.name for s in page] for page in pages] == [["A", "B"], ["C", "D"], ["E"]]
    assert paginate_sections([], per_page=3) == []


def test_paginate_sections_splits_on_size():
    sections = [HelpSection(f"S{i}", ["z" * 100] * 20) for i in range(5)]
    pages = paginate_sections(sections, per_page=25, budget=4500)
    assert len(pages) > 1
    for page in pages:
        assert sum(section_size(s)[0] for s in page) <= 4500


def test_paginate_sections_splits_oversized_section():
    lines = [f"`!cmd{i:02d}` - " + "d" * 60 for i in range(200)]
    pages = paginate_sections([HelpSection("Huge", lines)], per_page=25)
    assert len(pages) > 1
    assert all(s.name == "Huge" for page in pages for s in page)
    kept = [line for page in pages for s in page for line in s.lines]
    assert kept == lines
