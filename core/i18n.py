from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

import discord

logger = logging.getLogger(__name__)

# Language files directory: lang/<locale>/(messages.json|<domain>.json)
_LANG_DIR = Path(__file__).resolve().parent.parent / "lang"
# Cache structure: { (locale, domain): { key: value } }
_CACHE: Dict[Tuple[str, Optional[str]], Dict[str, str]] = {}

DEFAULT_LOCALE = "en"


def _read_json(path: Path) -> Dict[str, str]:
    if not path.exists():
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


def _load_bundle(locale: str, domain: Optional[str]) -> Dict[str, str]:
    key = (locale, domain)
    if key in _CACHE:
        return _CACHE[key]

    # Domain file first, then global messages.json as fallback
    data: Dict[str, str] = {}
    try:
        if domain:
            data.update(_read_json(_LANG_DIR / locale / f"{domain}.json"))
        for k, v in _read_json(_LANG_DIR / locale / "messages.json").items():
            data.setdefault(k, v)
    except (OSError, ValueError) as e:
        logger.error(
            "Failed to load locale bundle '%s' (domain=%s): %s", locale, domain, e
        )

    _CACHE[key] = data
    return data


def clear_cache() -> None:
    _CACHE.clear()


def available_locales() -> list[str]:
    if not _LANG_DIR.exists():
        return [DEFAULT_LOCALE]
    return sorted(p.name for p in _LANG_DIR.iterdir() if p.is_dir())


def _locale_chain(locale: Optional[str]) -> Iterable[str]:
    # 'es-ES' -> ('es-ES', 'es', 'en')
    if locale:
        loc = str(locale).replace("_", "-")
        yield loc
        if "-" in loc:
            yield loc.split("-", 1)[0]
    yield DEFAULT_LOCALE


def _resolve(locale: Optional[str], key: str) -> Optional[str]:
    domain: Optional[str] = None
    if "." in key:
        domain = key.split(".", 1)[0]

    for loc in _locale_chain(locale):
        bundle = _load_bundle(loc, domain)
        if key in bundle:
            return bundle[key]
        if domain:
            undomain_key = key.split(".", 1)[1]
            if undomain_key in bundle:
                return bundle[undomain_key]
    return None


def get_locale_from_ctx(ctx: Any) -> Optional[str]:
    # Prefer interaction locale for slash commands
    if isinstance(ctx, discord.Interaction):
        interaction = ctx
    else:
        interaction = getattr(ctx, "interaction", None)
    if interaction is not None and isinstance(interaction, discord.Interaction):
        locale = getattr(interaction, "user_locale", None) or getattr(
            interaction, "locale", None
        )
        if locale:
            return str(locale)
    guild = getattr(ctx, "guild", None)
    if guild is not None:
        preferred = getattr(guild, "preferred_locale", None)
        return str(preferred) if preferred else None
    return None


def translate(locale: Optional[str], key: str, **kwargs: Any) -> str:
    """Translate a key for an explicit locale, falling back to English."""
    template = _resolve(locale, key) or key
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError) as e:
        logger.debug("Could not format '%s' with %s: %s", key, kwargs, e)
        return template


def t(ctx: Any, key: str, **kwargs: Any) -> str:
    """Translate a key using the locale from the context.

    Usage: t(ctx, "help.command_not_found", name="foo")
    Domain bundles: lang/<locale>/<domain>.json
    """
    return translate(get_locale_from_ctx(ctx), key, **kwargs)
