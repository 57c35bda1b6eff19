from __future__ import annotations

from typing import Any, Optional, Sequence

import discord
from discord.ext import commands

from core.i18n import t
from system.help.services.formatting import (
    EMBED_LIMIT,
    FIELD_LIMIT,
    MAX_FIELDS,
    HelpSection,
    pack_lines,
    section_lines,
    truncate,
)

DESCRIPTION_LIMIT = 4096
CONTINUATION = "\u200b"


def _has_room(embed: discord.Embed, size: int) -> bool:
    # One field slot is always kept free for the truncation marker
    return len(embed.fields) < MAX_FIELDS - 1 and len(embed) + size <= EMBED_LIMIT


def _add_lines_field(
    embed: discord.Embed, ctx: Any, name: str, lines: Sequence[str]
) -> bool:
    """Add ``lines`` as one or more fields. Returns False once the embed is full."""
    marker = t(ctx, "help.truncated")
    reserve = len(CONTINUATION) + len(marker)
    # A field value tops out at 1024 chars; spill into continuation fields
    blocks = pack_lines(lines, FIELD_LIMIT) or [t(ctx, "help.none")]
    for i, block in enumerate(blocks):
        field_name = name if i == 0 else CONTINUATION
        if not _has_room(embed, len(field_name) + len(block) + reserve):
            embed.add_field(name=CONTINUATION, value=marker, inline=False)
            return False
        embed.add_field(name=field_name, value=block, inline=False)
    return True


#############################
###### UI - HELP INDEX ######
#############################

def build_bot_help_embed(
    ctx: Any,
    sections: Sequence[HelpSection],
    *,
    color: int,
    prefix: str,
    page: Optional[int] = None,
    total: Optional[int] = None,
) -> discord.Embed:
    embed = discord.Embed(
        title=f"🤖 {t(ctx, 'help.title')}",
        description=t(ctx, "help.description", prefix=prefix),
        color=discord.Color(color),
    )
    # Footer goes on first so the size checks below account for it
    if page is not None and total is not None:
        embed.set_footer(
            text=t(ctx, "help.footer_page", page=page, total=total, prefix=prefix)
        )
    else:
        embed.set_footer(text=t(ctx, "help.footer_specific", prefix=prefix))

    for section in sections:
        if not _add_lines_field(embed, ctx, section.name, section_lines(section)):
            break

    if not sections:
        embed.add_field(
            name=t(ctx, "help.commands"), value=t(ctx, "help.none"), inline=False
        )
    return embed


#############################
###### UI - COG HELP ########
#############################

def build_cog_help_embed(
    ctx: Any,
    cog: commands.Cog,
    lines: Sequence[str],
    *,
    color: int,
    page: Optional[int] = None,
    total: Optional[int] = None,
) -> discord.Embed:
    embed = discord.Embed(
        title=t(ctx, "help.title_cog", name=cog.qualified_name),
        description=truncate(
            cog.description or t(ctx, "help.no_description"), DESCRIPTION_LIMIT
        ),
        color=discord.Color(color),
    )
    if page is not None and total is not None and total > 1:
        embed.set_footer(text=t(ctx, "help.footer_cog_page", page=page, total=total))
    _add_lines_field(embed, ctx, t(ctx, "help.commands"), lines)
    return embed


#############################
###### UI - COMMAND HELP ####
#############################

def build_command_help_embed(
    ctx: Any, command: commands.Command, signature: str, *, color: int
) -> discord.Embed:
    description = command.help or command.description or t(ctx, "help.no_description")
    embed = discord.Embed(
        title=t(ctx, "help.title_cmd", name=command.qualified_name),
        description=truncate(description, DESCRIPTION_LIMIT),
        color=discord.Color(color),
    )
    embed.add_field(name=t(ctx, "help.usage"), value=f"`{signature}`", inline=False)
    if command.aliases:
        embed.add_field(
            name=t(ctx, "help.aliases"),
            value=", ".join(f"`{alias}`" for alias in command.aliases),
            inline=False,
        )
    return embed


def build_group_help_embed(
    ctx: Any,
    group: commands.Group,
    signature: str,
    lines: Sequence[str],
    *,
    color: int,
) -> discord.Embed:
    embed = build_command_help_embed(ctx, group, signature, color=color)
    _add_lines_field(embed, ctx, t(ctx, "help.subcommands"), lines)
    return embed


#############################
###### UI - ERRORS & PAGES ##
#############################

def build_error_embed(ctx: Any, message: str) -> discord.Embed:
    return discord.Embed(
        title=t(ctx, "help.error_title"),
        description=truncate(message, DESCRIPTION_LIMIT),
        color=discord.Color.red(),
    )


def build_page_embed(ctx: Any, page: str, *, color: int) -> discord.Embed:
    """Wrap a text page produced by the framework's Paginator."""
    return discord.Embed(
        description=truncate(page, DESCRIPTION_LIMIT), color=discord.Color(color)
    )
