from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from core.i18n import translate

logger = logging.getLogger(__name__)

STYLES = ("embed", "paginated", "minimal", "default")
DEFAULT_COLOR = 0x5865F2


def _optional_bool(value: Any, default: Optional[bool]) -> Optional[bool]:
    # verify_checks and dm_help are tri-state in the framework: True, False or None
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("none", "null", "auto"):
            return None
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
    return default


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value, 0) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        return default


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass
class HelpSettings:
    """Options for the help command, read from the ``help:`` block of config/help.yml."""

    style: str = "embed"
    color: int = DEFAULT_COLOR
    per_page: int = 5
    show_hidden: bool = False
    verify_checks: Optional[bool] = True
    dm_help: Optional[bool] = False
    sort_commands: bool = True
    no_category: str = "No Category"
    delete_after: float = 10.0
    timeout: float = 120.0
    command_name: str = "help"
    aliases: list[str] = field(default_factory=lambda: ["h", "commands"])
    locale: Optional[str] = None

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "HelpSettings":
        data = dict(mapping or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown help settings: %s", ", ".join(unknown))

        defaults = cls()
        style = str(data.get("style", defaults.style) or defaults.style).lower()
        if style not in STYLES:
            logger.warning("Unknown help style '%s', falling back to 'embed'", style)
            style = "embed"

        aliases = data.get("aliases", defaults.aliases)
        if isinstance(aliases, str):
            aliases = [aliases]
        aliases = [str(a) for a in (aliases or []) if str(a).strip()]

        return cls(
            style=style,
            color=_as_int(data.get("color"), defaults.color),
            per_page=max(1, min(25, _as_int(data.get("per_page"), defaults.per_page))),
            show_hidden=bool(data.get("show_hidden", defaults.show_hidden)),
            verify_checks=_optional_bool(
                data.get("verify_checks", defaults.verify_checks),
                defaults.verify_checks,
            ),
            dm_help=_optional_bool(data.get("dm_help", defaults.dm_help), defaults.dm_help),
            sort_commands=bool(data.get("sort_commands", defaults.sort_commands)),
            no_category=str(data.get("no_category") or defaults.no_category),
            delete_after=max(0.0, _as_float(data.get("delete_after"), defaults.delete_after)),
            timeout=max(1.0, _as_float(data.get("timeout"), defaults.timeout)),
            command_name=str(data.get("command_name") or defaults.command_name),
            aliases=aliases,
            locale=str(data.get("locale") or "").strip() or None,
        )

    def with_style(self, style: str) -> "HelpSettings":
        style = style.lower()
        if style not in STYLES:
            raise ValueError(f"unknown help style: {style}")
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["style"] = style
        data["aliases"] = list(self.aliases)
        return HelpSettings(**data)

    def command_attrs(self) -> dict[str, Any]:
        """Attributes handed to the framework's help command implementation.

        The command is registered once per bot, so its help text comes from
        the configured ``locale`` rather than the caller's.
        """
        return {
            "name": self.command_name,
            "aliases": list(self.aliases),
            "help": translate(self.locale, "help.command.help"),
            "brief": translate(self.locale, "help.command.brief"),
        }
