from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml


logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parents[1]
_DEFAULT_CONFIG_PATH = _ROOT / "config.yml"

CONFIG_PATH_ENV = "BOT_CONFIG_PATH"
TOKEN_ENV = "DISCORD_TOKEN"


def _deep_merge_dicts(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dict b into dict a and return a new dict.

    - If both values are dicts, merge them recursively.
    - Otherwise, value from b overrides a.
    """
    result: Dict[str, Any] = dict(a) if isinstance(a, dict) else {}
    for k, v in (b or {}).items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return raw if isinstance(raw, dict) else {}


class Config(dict):
    """Dict-like config accessor with defaults for the bot-wide keys."""

    @property
    def token(self) -> str:
        value = str(self.get("token", "") or "").strip()
        return value or os.getenv(TOKEN_ENV, "").strip()

    @property
    def command_prefix(self) -> str:
        return self.get("command_prefix", "!")

    @property
    def log_level(self) -> str:
        return self.get("log_level", "INFO")

    @property
    def guild_ids(self) -> list[int]:
        return [int(guild_id) for guild_id in self.get("guild_ids", []) or []]

    @property
    def activity(self) -> str:
        return str(self.get("activity", "") or "")

    def module(self, name: str) -> Dict[str, Any]:
        """Return a module namespace dict, e.g. the ``help:`` block of config/help.yml."""
        value = self.get(name, {}) or {}
        return value if isinstance(value, dict) else {}

    def is_feature_enabled(self, name: str) -> bool:
        """Whether features/<name>/ should be loaded. Defaults to True."""
        fmap = self.get("features", {}) or {}
        if not isinstance(fmap, dict):
            return True
        val = fmap.get(name)
        if isinstance(val, bool):
            return val
        return True


_CONFIG_SINGLETON: Config | None = None


def _merge_module_dir(data: Dict[str, Any], module_dir: Path) -> Dict[str, Any]:
    # 1) config/<module>.yml, each naming its namespace at the top level
    for yml in sorted(module_dir.glob("*.yml")):
        try:
            mod_data = _read_yaml(yml)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Skipping malformed module config %s: %s", yml, e)
            continue
        for top_key, top_val in mod_data.items():
            if not isinstance(top_val, dict):
                continue
            data[top_key] = _deep_merge_dicts(data.get(top_key, {}) or {}, top_val)

    # 2) config/<module>/**/*.yml fragments
    for sub in sorted(p for p in module_dir.iterdir() if p.is_dir()):
        module_name = sub.name
        for yml in sorted(sub.rglob("*.yml")):
            try:
                raw = _read_yaml(yml)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Skipping malformed module config %s: %s", yml, e)
                continue
            if module_name in raw and isinstance(raw[module_name], dict):
                fragment = raw[module_name]
            else:
                fragment = raw
            data[module_name] = _deep_merge_dicts(
                data.get(module_name, {}) or {}, fragment
            )
    return data


def _load_config_from_disk(
    path: os.PathLike[str] | str | None = None,
    module_dir: os.PathLike[str] | str | None = None,
) -> Config:
    """Read configuration files from disk and compose a Config instance."""
    env_path = os.getenv(CONFIG_PATH_ENV)
    cfg_path = Path(path or env_path or _DEFAULT_CONFIG_PATH)
    mod_path = Path(module_dir) if module_dir else cfg_path.parent / "config"
    data: Dict[str, Any] = {}

    if cfg_path.exists():
        try:
            data = _read_yaml(cfg_path)
        except yaml.YAMLError as e:
            logger.error("Failed to parse %s: %s", cfg_path, e)
            data = {}
    else:
        logger.warning("Config file %s not found, using defaults", cfg_path)

    if mod_path.exists():
        data = _merge_module_dir(data, mod_path)

    return Config(data)


def load_config(
    path: os.PathLike[str] | str | None = None, *, force_reload: bool = False
) -> Config:
    """Return a cached Config instance.

    - On first call (or if force_reload=True), read from disk and cache.
    - A custom path always reloads from that path and updates the cache.
    """
    global _CONFIG_SINGLETON
    if not force_reload and path is None and _CONFIG_SINGLETON is not None:
        return _CONFIG_SINGLETON
    cfg = _load_config_from_disk(path)
    _CONFIG_SINGLETON = cfg
    return cfg


def reload_config(path: os.PathLike[str] | str | None = None) -> Config:
    """Force a re-read of configuration files and refresh the cached instance."""
    return load_config(path, force_reload=True)
