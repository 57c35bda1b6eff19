"""Custom help command module (system-level)."""

from __future__ import annotations

import logging
from typing import Optional

from discord.ext import bridge, commands

from core.config import load_config
from core.i18n import t
from system.help.factory import HELP_STYLES, build_help_command
from system.help.settings import HelpSettings

logger = logging.getLogger(__name__)


class HelpCog(commands.Cog, name="Help"):
    """Help and documentation commands."""

    ############################
    ###### INIT & CONFIG #######
    ############################
    def __init__(self, bot: bridge.Bot, settings: Optional[HelpSettings] = None):
        self.bot = bot
        self._original_help_command = bot.help_command
        self.settings = settings or HelpSettings.from_mapping(
            load_config().module("help")
        )
        self.install(self.settings)

    def install(self, settings: HelpSettings) -> commands.HelpCommand:
        help_command = build_help_command(settings)
        self.bot.help_command = help_command
        # Attach to this cog so `help` is listed under the Help category
        self.bot.help_command.cog = self
        logger.info("Installed '%s' help command", settings.style)
        return help_command

    def switch_style(self, style: str) -> HelpSettings:
        """Swap the live help command for another style; raises ValueError if unknown."""
        style = (style or "").strip().lower()
        if style not in HELP_STYLES:
            raise ValueError(style)
        self.settings = self.settings.with_style(style)
        self.install(self.settings)
        return self.settings

    def cog_unload(self):
        self.bot.help_command = self._original_help_command

    ######################
    ###### COMMANDS ######
    ######################

    @bridge.has_permissions(administrator=True)
    @bridge.bridge_command(name="helpstyle", description="Show or change the help style")
    async def helpstyle(self, ctx: bridge.BridgeContext, style: str = None):
        styles = ", ".join(f"`{name}`" for name in HELP_STYLES)
        if not style:
            await ctx.respond(
                t(ctx, "help.style.current", style=self.settings.style, styles=styles),
                ephemeral=True,
            )
            return

        try:
            settings = self.switch_style(style)
        except ValueError:
            await ctx.respond(
                t(ctx, "help.style.invalid", style=style, styles=styles),
                ephemeral=True,
                delete_after=self.settings.delete_after or None,
            )
            return

        logger.info("Help style changed to '%s' by %s", settings.style, ctx.author)
        await ctx.respond(t(ctx, "help.style.changed", style=settings.style), ephemeral=True)


#####################
###### SETUP ########
#####################

def setup(bot: bridge.Bot):
    bot.add_cog(HelpCog(bot))
