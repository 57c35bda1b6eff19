from __future__ import annotations

import math
import time

import discord
from discord.ext import bridge, commands

from core.config import load_config
from core.i18n import t
from features.utility.services.uptime import format_uptime


class Utility(commands.Cog):
    """Everyday commands: latency, status and bot/server info."""

    ############################
    ###### INIT & CONFIG #######
    ############################

    def __init__(self, bot: bridge.Bot):
        self.bot = bot
        self._start_monotonic = time.monotonic()
        self.settings = load_config().module("utility")

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self._start_monotonic

    def latency_ms(self) -> float:
        latency = self.bot.latency
        if latency is None or math.isnan(latency) or math.isinf(latency):
            return 0.0
        return round(latency * 1000, 2)

    ######################
    ###### COMMANDS ######
    ######################

    @bridge.bridge_command(name="status", description="Bot status")
    async def status(self, ctx: bridge.BridgeContext):
        await ctx.respond(t(ctx, "utility.ok"))

    @bridge.bridge_command(name="ping", description="Show bot latency")
    async def ping(self, ctx: bridge.BridgeContext):
        await ctx.respond(t(ctx, "utility.ping", ms=self.latency_ms()))

    @commands.command(name="uptime", hidden=True)
    async def uptime(self, ctx: commands.Context):
        """Show how long the bot has been running."""
        await ctx.send(t(ctx, "utility.uptime", uptime=format_uptime(self.uptime_seconds)))

    @commands.group(name="info", aliases=["about"], invoke_without_command=True)
    async def info(self, ctx: commands.Context):
        """Information about the bot or this server.

        Run a subcommand, e.g. `info bot` or `info server`.
        """
        await ctx.send(t(ctx, "utility.info.usage", prefix=ctx.clean_prefix))

    @info.command(name="bot")
    async def info_bot(self, ctx: commands.Context):
        """Show servers, latency and uptime."""
        embed = discord.Embed(
            title=t(ctx, "utility.info.bot.title", name=self.bot.user.name),
            color=discord.Color.blurple(),
        )
        embed.add_field(
            name=t(ctx, "utility.info.bot.guilds"), value=str(len(self.bot.guilds))
        )
        embed.add_field(
            name=t(ctx, "utility.info.bot.latency"), value=f"{self.latency_ms()} ms"
        )
        embed.add_field(
            name=t(ctx, "utility.info.bot.uptime"),
            value=format_uptime(self.uptime_seconds),
        )
        website = str(self.settings.get("website", "") or "")
        if website:
            embed.add_field(
                name=t(ctx, "utility.info.bot.website"), value=website, inline=False
            )
        await ctx.send(embed=embed)

    @info.command(name="server", aliases=["guild"])
    async def info_server(self, ctx: commands.Context):
        """Show the server's name, owner and member count."""
        guild = ctx.guild
        if guild is None:
            await ctx.send(t(ctx, "utility.info.server.dm_only"))
            return
        embed = discord.Embed(
            title=t(ctx, "utility.info.server.title", name=guild.name),
            color=discord.Color.blurple(),
        )
        embed.add_field(
            name=t(ctx, "utility.info.server.members"), value=str(guild.member_count)
        )
        if guild.owner_id:
            embed.add_field(
                name=t(ctx, "utility.info.server.owner"), value=f"<@{guild.owner_id}>"
            )
        if guild.icon:
            embed.set_thumbnail(url=guild.icon.url)
        await ctx.send(embed=embed)


def setup(bot: bridge.Bot):
    bot.add_cog(Utility(bot))
