from __future__ import annotations

from discord.ext import commands

from core.i18n import t
from system.help.commands.base import HelpCommandMixin


class EmbedMinimalHelpCommand(HelpCommandMixin, commands.MinimalHelpCommand):
    """The framework's minimal layout, sent as embeds."""

    def get_opening_note(self) -> str:
        return t(
            self.context,
            "help.opening_note",
            prefix=self.prefix,
            invoked=self.invoked_with,
        )

    def add_subcommand_formatting(self, command: commands.Command) -> None:
        fmt = "{0} \N{EN DASH} {1}" if command.short_doc else "{0}"
        self.paginator.add_line(
            fmt.format(self.get_command_signature(command), command.short_doc)
        )


class EmbedDefaultHelpCommand(HelpCommandMixin, commands.DefaultHelpCommand):
    """The framework's default code-block layout, sent as embeds."""

    def get_ending_note(self) -> str:
        return t(
            self.context,
            "help.ending_note",
            prefix=self.prefix,
            invoked=self.invoked_with,
        )
