#!/usr/bin/env python3
"""Main bot runner with auto-loading of cogs."""

import asyncio
import contextlib
import logging
import signal
from pathlib import Path

import discord
from discord.ext import bridge, commands
from dotenv import load_dotenv

from core.config import load_config
from core.i18n import t
from core.logging_setup import setup_logging

# Load environment variables
load_dotenv()

# Load configuration
config = load_config()

# Setup logging
setup_logging(config.log_level)
logger = logging.getLogger(__name__)


class GuideBot(bridge.Bot):
    """Main bot class with auto-loading capabilities."""

    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=commands.when_mentioned_or(config.command_prefix),
            # Fallback; system/help replaces it with the configured style
            help_command=commands.MinimalHelpCommand(),
            intents=intents,
            debug_guilds=config.guild_ids or None,
        )
        # Guard to ensure extensions load once
        self._extensions_loaded = False

    def discover_extensions(self) -> list[str]:
        """Collect cog modules from features/ and system/.

        Supports:
        - features/<feature>/cogs/*.py (toggled by 'features' in config.yml)
        - system/<package>/cogs/*.py
        """
        base_dir = Path(__file__).parent
        targets = [
            (base_dir / "features", True),
            (base_dir / "system", False),
        ]

        modules: set[str] = set()
        for root, is_feature_pkg in targets:
            if not root.exists():
                continue
            for file in root.glob("*/cogs/*.py"):
                if file.name.startswith("_"):
                    continue
                parts = file.relative_to(base_dir).with_suffix("").parts
                # ('features', 'utility', 'cogs', 'main')
                if is_feature_pkg and not config.is_feature_enabled(parts[1]):
                    logger.info("Feature '%s' disabled, skipping %s", parts[1], file.name)
                    continue
                modules.add(".".join(parts))
        return sorted(modules)

    async def load_cogs(self):
        for module in self.discover_extensions():
            try:
                self.load_extension(module)
                logger.info(f"Loaded extension: {module}")
            except Exception as e:
                logger.error(f"Failed to load extension {module}: {e}")

    async def on_ready(self):
        """Called when the bot is ready."""
        logger.info(f"Bot is ready! Logged in as {self.user} (ID: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guilds")

        activity = config.activity or f"{config.command_prefix}help"
        await self.change_presence(
            activity=discord.Activity(type=discord.ActivityType.listening, name=activity)
        )

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        if isinstance(error, commands.CommandNotFound):
            return
        if isinstance(error, commands.MissingPermissions):
            await ctx.send(t(ctx, "errors.missing_permissions"), delete_after=10)
            return
        # The help command reports its own failures via on_help_command_error
        if ctx.command is not None and ctx.command.qualified_name == self.help_command_name():
            return
        logger.error("Error in command %s: %s", ctx.command, error, exc_info=error)
        await ctx.send(t(ctx, "errors.generic"), delete_after=10)

    def help_command_name(self) -> str:
        help_command = self.help_command
        if help_command is None:
            return ""
        return help_command.command_attrs.get("name", "help")


async def main():
    """Main entry point."""
    bot = GuideBot()

    # Register clean shutdown on SIGINT/SIGTERM so Discord disconnects immediately
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, lambda: asyncio.create_task(bot.close()))
        except NotImplementedError:
            # Windows event loops don't support signal handlers
            pass

    token = config.token
    if not token:
        logger.error("No token configured (config.yml 'token' or DISCORD_TOKEN).")
        return

    try:
        if not bot._extensions_loaded:
            await bot.load_cogs()
            bot._extensions_loaded = True
        await bot.start(token)
    except discord.LoginFailure:
        logger.error("Invalid bot token!")
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("Shutdown requested by user")
    except Exception as e:
        logger.error(f"An error occurred: {e}")
    finally:
        if not bot.is_closed():
            with contextlib.suppress(Exception):
                await bot.close()


if __name__ == "__main__":
    asyncio.run(main())
