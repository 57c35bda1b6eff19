from __future__ import annotations

from typing import Any

from discord.ext import commands

from system.help.commands.embed_help import EmbedHelpCommand
from system.help.commands.minimal import EmbedDefaultHelpCommand, EmbedMinimalHelpCommand
from system.help.commands.paginated import PaginatedHelpCommand
from system.help.settings import HelpSettings

HELP_STYLES: dict[str, type[commands.HelpCommand]] = {
    "embed": EmbedHelpCommand,
    "paginated": PaginatedHelpCommand,
    "minimal": EmbedMinimalHelpCommand,
    "default": EmbedDefaultHelpCommand,
}


def build_help_command(settings: HelpSettings) -> commands.HelpCommand:
    """Instantiate the help command for ``settings.style``."""
    cls = HELP_STYLES.get(settings.style)
    if cls is None:
        raise ValueError(f"unknown help style: {settings.style}")
    options: dict[str, Any] = {}
    # Only the paginator-based framework styles understand these options
    if settings.style in ("minimal", "default"):
        options.update(
            dm_help=settings.dm_help,
            sort_commands=settings.sort_commands,
            no_category=settings.no_category,
        )
    return cls(settings=settings, **options)
