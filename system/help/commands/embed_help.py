from __future__ import annotations

from typing import Any, Mapping, Optional

import discord
from discord.ext import commands

from core.i18n import t
from system.help.commands.base import HelpCommandMixin
from system.help.services.formatting import (
    HelpSection,
    cog_commands,
    command_line,
)
from system.help.ui.embed import (
    build_bot_help_embed,
    build_cog_help_embed,
    build_command_help_embed,
    build_group_help_embed,
)


class EmbedHelpCommand(HelpCommandMixin, commands.HelpCommand):
    """Help command that answers every lookup with a single embed."""

    def get_destination(self) -> discord.abc.Messageable:
        if self.settings.dm_help:
            return self.context.author
        return self.context.channel

    async def send_embed(self, embed: discord.Embed, **kwargs: Any) -> discord.Message:
        return await self.get_destination().send(embed=embed, **kwargs)

    async def command_lines(self, items) -> list[str]:
        filtered = await self.filter_commands(
            items, sort=self.settings.sort_commands
        )
        fallback = t(self.context, "help.no_description")
        return [command_line(self.prefix, c, fallback) for c in filtered]

    async def build_sections(
        self, mapping: Mapping[Optional[commands.Cog], list[commands.Command]]
    ) -> list[HelpSection]:
        sections: list[HelpSection] = []
        for cog, items in mapping.items():
            lines = await self.command_lines(items)
            if not lines:
                continue
            if cog is None:
                name = t(self.context, "help.uncategorized")
                description = None
            else:
                name = cog.qualified_name
                description = cog.description or None
            sections.append(HelpSection(name, lines, description))
        sections.sort(key=lambda s: s.name.lower())
        return sections

    ######################
    ###### HOOKS #########
    ######################

    async def send_bot_help(self, mapping):
        sections = await self.build_sections(mapping)
        embed = build_bot_help_embed(
            self.context, sections, color=self.settings.color, prefix=self.prefix
        )
        await self.send_embed(embed)

    async def send_cog_help(self, cog: commands.Cog):
        lines = await self.command_lines(cog_commands(self.context.bot, cog))
        embed = build_cog_help_embed(
            self.context, cog, lines, color=self.settings.color
        )
        await self.send_embed(embed)

    async def send_group_help(self, group: commands.Group):
        lines = await self.command_lines(group.commands)
        embed = build_group_help_embed(
            self.context,
            group,
            self.get_command_signature(group),
            lines,
            color=self.settings.color,
        )
        await self.send_embed(embed)

    async def send_command_help(self, command: commands.Command):
        embed = build_command_help_embed(
            self.context,
            command,
            self.get_command_signature(command),
            color=self.settings.color,
        )
        await self.send_embed(embed)
