from __future__ import annotations


def format_uptime(seconds: float) -> str:
    """Render a duration as ``1d 2h 3m 4s``, dropping leading zero units."""
    total = int(max(0, seconds))
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)
    parts = []
    for value, unit in ((days, "d"), (hours, "h"), (minutes, "m")):
        if value or parts:
            parts.append(f"{value}{unit}")
    parts.append(f"{secs}s")
    return " ".join(parts)
