"""Pure helpers shared by every help command style.

Nothing here talks to Discord; the functions only read attributes off the
framework's command and cog objects so they can be exercised without a
gateway connection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from discord.ext import commands

FIELD_LIMIT = 1024
MAX_FIELDS = 25
EMBED_LIMIT = 6000
# Room left on a page for the title, description and footer
PAGE_BUDGET = EMBED_LIMIT - 1000
ELLIPSIS = "…"


@dataclass
class HelpSection:
    """A titled block of command lines, rendered as one embed field."""

    name: str
    lines: list[str] = field(default_factory=list)
    description: Optional[str] = None


def prefix_commands(items: Iterable[Any]) -> list[commands.Command]:
    # Cog command lists can also carry slash/bridge variants; help only documents prefix ones
    return [c for c in items if isinstance(c, commands.Command)]


def command_signature(prefix: str, command: commands.Command) -> str:
    return f"{prefix}{command.qualified_name} {command.signature}".strip()


def command_summary(command: commands.Command, fallback: str) -> str:
    return command.short_doc or command.description or fallback


def command_line(prefix: str, command: commands.Command, fallback: str) -> str:
    return f"`{command_signature(prefix, command)}` - {command_summary(command, fallback)}"


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(0, limit - len(ELLIPSIS))] + ELLIPSIS


def pack_lines(lines: Iterable[str], limit: int = FIELD_LIMIT) -> list[str]:
    """Join lines into newline-separated blocks that each fit in ``limit`` characters."""
    blocks: list[str] = []
    current: list[str] = []
    size = 0
    for line in lines:
        line = truncate(line, limit)
        extra = len(line) + (1 if current else 0)
        if current and size + extra > limit:
            blocks.append("\n".join(current))
            current, size = [], 0
            extra = len(line)
        current.append(line)
        size += extra
    if current:
        blocks.append("\n".join(current))
    return blocks


def section_lines(section: HelpSection) -> list[str]:
    lines = list(section.lines)
    if section.description:
        lines.insert(0, f"*{section.description}*")
    return lines


def section_size(section: HelpSection) -> tuple[int, int]:
    """Characters and fields a section takes up once rendered into an embed."""
    blocks = pack_lines(section_lines(section)) or [""]
    # Continuation fields are named with a single zero-width space
    chars = len(section.name) + len(blocks) - 1 + sum(len(b) for b in blocks)
    return chars, len(blocks)


def split_section(section: HelpSection, budget: int = PAGE_BUDGET) -> list[HelpSection]:
    chars, fields_ = section_size(section)
    if chars <= budget and fields_ < MAX_FIELDS:
        return [section]
    # Half a page per piece leaves headroom for the name and description line
    limit = max(FIELD_LIMIT, budget // 2)
    return [
        HelpSection(section.name, block.splitlines(), section.description)
        for block in pack_lines(section.lines, limit)
    ]


def paginate_sections(
    sections: Sequence[HelpSection], per_page: int, budget: int = PAGE_BUDGET
) -> list[list[HelpSection]]:
    """Group sections into pages of at most ``per_page`` that stay inside embed limits."""
    pages: list[list[HelpSection]] = []
    current: list[HelpSection] = []
    chars = count = 0
    for piece in (p for s in sections for p in split_section(s, budget)):
        size, fields_ = section_size(piece)
        full = (
            len(current) >= per_page
            or chars + size > budget
            or count + fields_ > MAX_FIELDS - 1
        )
        if current and full:
            pages.append(current)
            current, chars, count = [], 0, 0
        current.append(piece)
        chars += size
        count += fields_
    if current:
        pages.append(current)
    return pages


def group_mapping_by_cog(
    bot: commands.Bot,
) -> dict[Optional[commands.Cog], list[commands.Command]]:
    mapping: dict[Optional[commands.Cog], list[commands.Command]] = {
        cog: [] for cog in bot.cogs.values()
    }
    mapping[None] = []
    for command in prefix_commands(bot.commands):
        mapping.setdefault(command.cog, []).append(command)
    return mapping


def cog_commands(bot: commands.Bot, cog: commands.Cog) -> list[commands.Command]:
    return [c for c in prefix_commands(bot.commands) if c.cog is cog]
