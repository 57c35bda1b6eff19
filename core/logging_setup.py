from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_NOISY_LOGGERS = ("discord.gateway", "discord.http", "discord.client")


def resolve_level(level_name: str | None) -> int:
    level = getattr(logging, str(level_name or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: str = "INFO") -> None:
    level = resolve_level(level_name)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # The gateway chatter is only useful when debugging the connection itself
    if level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(level, logging.WARNING))
