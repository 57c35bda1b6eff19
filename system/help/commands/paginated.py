from __future__ import annotations

from typing import Sequence

import discord
from discord.ext import commands

from system.help.commands.embed_help import EmbedHelpCommand
from system.help.services.formatting import cog_commands, pack_lines, paginate_sections
from system.help.ui.embed import build_bot_help_embed, build_cog_help_embed
from system.help.ui.views import HelpPaginatorView


class PaginatedHelpCommand(EmbedHelpCommand):
    """Embed help that spreads long listings over pages with button navigation."""

    async def send_paginated(self, pages: Sequence[discord.Embed]) -> discord.Message:
        if len(pages) == 1:
            return await self.send_embed(pages[0])
        view = HelpPaginatorView(
            pages,
            author_id=self.context.author.id,
            ctx=self.context,
            timeout=self.settings.timeout,
        )
        message = await self.send_embed(pages[0], view=view)
        view.message = message
        return message

    async def send_bot_help(self, mapping):
        sections = await self.build_sections(mapping)
        groups = paginate_sections(sections, self.settings.per_page) or [[]]
        total = len(groups)
        pages = [
            build_bot_help_embed(
                self.context,
                group,
                color=self.settings.color,
                prefix=self.prefix,
                page=number,
                total=total,
            )
            for number, group in enumerate(groups, start=1)
        ]
        await self.send_paginated(pages)

    async def send_cog_help(self, cog: commands.Cog):
        lines = await self.command_lines(cog_commands(self.context.bot, cog))
        # One packed field block per page keeps every page well inside embed limits
        blocks = pack_lines(lines) or [""]
        total = len(blocks)
        pages = [
            build_cog_help_embed(
                self.context,
                cog,
                block.splitlines(),
                color=self.settings.color,
                page=number,
                total=total,
            )
            for number, block in enumerate(blocks, start=1)
        ]
        await self.send_paginated(pages)
