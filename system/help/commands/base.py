from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from discord.ext import commands

from core.i18n import t
from system.help.services.formatting import (
    command_signature,
    group_mapping_by_cog,
    prefix_commands,
)
from system.help.settings import HelpSettings
from system.help.ui.embed import build_error_embed, build_page_embed

logger = logging.getLogger(__name__)


class HelpCommandMixin:
    """Behaviour shared by every help style, layered over a framework HelpCommand.

    Must come before the framework class in the MRO so these overrides win.
    """

    settings: HelpSettings
    context: Any

    def __init__(self, settings: Optional[HelpSettings] = None, **options: Any):
        self.settings = settings or HelpSettings()
        options.setdefault("show_hidden", self.settings.show_hidden)
        options.setdefault("verify_checks", self.settings.verify_checks)
        options.setdefault("command_attrs", self.settings.command_attrs())
        super().__init__(**options)

    @property
    def prefix(self) -> str:
        ctx = self.context
        return getattr(ctx, "clean_prefix", None) or getattr(ctx, "prefix", None) or ""

    ############################
    ###### COMMAND LOOKUP ######
    ############################

    def get_command_signature(self, command: commands.Command) -> str:
        return command_signature(self.prefix, command)

    def get_bot_mapping(self):
        return group_mapping_by_cog(self.context.bot)

    async def filter_commands(
        self, commands_: Iterable[Any], **kwargs: Any
    ) -> list[commands.Command]:
        return await super().filter_commands(prefix_commands(commands_), **kwargs)

    def command_not_found(self, string: str) -> str:
        return t(self.context, "help.command_not_found", name=string)

    def subcommand_not_found(self, command: commands.Command, string: str) -> str:
        if isinstance(command, commands.Group) and len(command.all_commands) > 0:
            return t(
                self.context,
                "help.subcommand_not_found",
                parent=command.qualified_name,
                name=string,
            )
        return t(self.context, "help.no_subcommands", parent=command.qualified_name)

    #####################
    ###### SENDING ######
    #####################

    async def send_error_message(self, error: str) -> None:
        destination = self.get_destination()
        delete_after = self.settings.delete_after or None
        await destination.send(
            embed=build_error_embed(self.context, error), delete_after=delete_after
        )

    async def send_pages(self) -> None:
        destination = self.get_destination()
        for page in self.paginator.pages:
            await destination.send(
                embed=build_page_embed(self.context, page, color=self.settings.color)
            )

    async def on_help_command_error(
        self, ctx: commands.Context, error: commands.CommandError
    ) -> None:
        if isinstance(error, commands.BadArgument):
            message = t(ctx, "help.bad_argument", error=str(error))
            await ctx.send(embed=build_error_embed(ctx, message))
            return
        if isinstance(error, commands.CommandInvokeError):
            content = getattr(getattr(ctx, "message", None), "content", None)
            logger.error(
                "Help command failed for %r: %s",
                content,
                error.original,
                exc_info=error.original,
            )
            return
        logger.warning("Unhandled help command error: %s", error)
