from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import discord

from core.i18n import t

logger = logging.getLogger(__name__)


class HelpPaginatorView(discord.ui.View):
    """Button navigation over a list of pre-built help embeds."""

    def __init__(
        self,
        pages: Sequence[discord.Embed],
        *,
        author_id: int,
        ctx: Any = None,
        timeout: float = 120,
    ):
        super().__init__(timeout=timeout)
        if not pages:
            raise ValueError("HelpPaginatorView needs at least one page")
        self.pages: list[discord.Embed] = list(pages)
        self.author_id = author_id
        self.ctx = ctx
        self.index = 0
        self.message: Optional[discord.Message] = None
        self._rebuild_children()

    @property
    def current_page(self) -> discord.Embed:
        return self.pages[self.index]

    def _rebuild_children(self) -> None:
        self.clear_items()
        if len(self.pages) <= 1:
            return

        last = len(self.pages) - 1
        first_btn = discord.ui.Button(
            style=discord.ButtonStyle.secondary,
            label=t(self.ctx, "help.paginator.first"),
            emoji="⏮️",
            disabled=self.index <= 0,
        )
        prev_btn = discord.ui.Button(
            style=discord.ButtonStyle.secondary,
            label=t(self.ctx, "help.paginator.prev"),
            emoji="◀️",
            disabled=self.index <= 0,
        )
        counter = discord.ui.Button(
            style=discord.ButtonStyle.primary,
            label=f"{self.index + 1}/{len(self.pages)}",
            disabled=True,
        )
        next_btn = discord.ui.Button(
            style=discord.ButtonStyle.secondary,
            label=t(self.ctx, "help.paginator.next"),
            emoji="▶️",
            disabled=self.index >= last,
        )
        stop_btn = discord.ui.Button(
            style=discord.ButtonStyle.danger,
            label=t(self.ctx, "help.paginator.stop"),
            emoji="✖️",
        )

        async def on_first(inter: discord.Interaction):
            await self.show_page(inter, 0)

        async def on_prev(inter: discord.Interaction):
            await self.show_page(inter, self.index - 1)

        async def on_next(inter: discord.Interaction):
            await self.show_page(inter, self.index + 1)

        async def on_stop(inter: discord.Interaction):
            await self.stop_paging(inter)

        first_btn.callback = on_first
        prev_btn.callback = on_prev
        next_btn.callback = on_next
        stop_btn.callback = on_stop

        for item in (first_btn, prev_btn, counter, next_btn, stop_btn):
            self.add_item(item)

    ######################
    ###### NAVIGATION ####
    ######################

    async def show_page(self, interaction: discord.Interaction, index: int) -> None:
        self.index = max(0, min(len(self.pages) - 1, index))
        self._rebuild_children()
        await interaction.response.edit_message(embed=self.current_page, view=self)

    async def stop_paging(self, interaction: discord.Interaction) -> None:
        self.clear_items()
        await interaction.response.edit_message(embed=self.current_page, view=None)
        self.stop()

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        user = getattr(interaction, "user", None)
        if user is not None and user.id == self.author_id:
            return True
        await interaction.response.send_message(
            t(interaction, "help.paginator.not_author"), ephemeral=True
        )
        return False

    async def on_timeout(self) -> None:
        for child in self.children:
            if isinstance(child, discord.ui.Button):
                child.disabled = True
        if self.message is None:
            return
        try:
            await self.message.edit(view=self)
        except discord.HTTPException as e:
            logger.debug("Could not disable help paginator on timeout: %s", e)
