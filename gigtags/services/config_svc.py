#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML and env vars
#  - Caches composed config
#  - Builds validated GrammarConfig instances
# ======================================================================

from __future__ import annotations

import functools
import logging
import os
from typing import Any

import yaml

from gigtags.helpers.dto.config_dto import GrammarConfig
from gigtags.helpers.exceptions import ConfigError

ENV_PREFIX = "GIGTAGS_"
CONFIG_PATH_ENV = "GIGTAGS_CONFIG_PATH"
DUPLICATE_POLICIES = ("pair", "facet")


class ConfigService:
    """
    Service for loading and caching gigtags configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._overrides = dict(overrides) if overrides else {}
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by key.

        Example:
            >>> service.get("max_facet_length")
            128
        """
        return self.get_config().get(key, default)

    def reload(self) -> dict[str, Any]:
        """
        Force reload configuration from all sources.

        Returns:
            Newly composed config
        """
        self._logger.info("[config] Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_grammar_config(self) -> GrammarConfig:
        """
        Build a GrammarConfig from the current configuration.

        This is the boundary where raw config values are type-checked and
        range-checked.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        cfg = self.get_config()

        max_facet_length = _require_positive_int(cfg, "max_facet_length")
        max_term_length = _require_positive_int(cfg, "max_term_length")
        duplicate_policy = cfg.get("duplicate_policy")
        if duplicate_policy not in DUPLICATE_POLICIES:
            msg = f"duplicate_policy must be one of {DUPLICATE_POLICIES}, got {duplicate_policy!r}"
            raise ConfigError(msg)

        return GrammarConfig(
            max_facet_length=max_facet_length,
            max_term_length=max_term_length,
            duplicate_policy=duplicate_policy,
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config/gigtags.yaml (if present)
          3) $GIGTAGS_CONFIG_PATH (if set)
          4) overrides passed to the constructor
          5) Environment variables (GIGTAGS_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        cfg.update(self._load_yaml(os.path.join(os.getcwd(), "config", "gigtags.yaml")))

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            cfg.update(self._load_yaml(env_path))

        cfg.update(self._overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("[config] compose() loaded config; keys: %s", sorted(cfg))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        defaults = GrammarConfig()
        return {
            "max_facet_length": defaults.max_facet_length,
            "max_term_length": defaults.max_term_length,
            "duplicate_policy": defaults.duplicate_policy,
        }

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[config] Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[config] Ignoring {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          GIGTAGS_MAX_FACET_LENGTH=64
          GIGTAGS_DUPLICATE_POLICY=facet
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == CONFIG_PATH_ENV:
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in cfg:
                self._logger.warning(f"[config] Ignoring unknown setting {k}")
                continue

            if v.lower() in ("true", "false"):
                cfg[key] = v.lower() == "true"
            elif v.isdecimal():
                cfg[key] = int(v)
            else:
                cfg[key] = v


def _require_positive_int(cfg: dict[str, Any], key: str) -> int:
    value = cfg.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{key} must be a positive integer, got {value!r}"
        raise ConfigError(msg)
    return value


@functools.lru_cache(maxsize=1)
def get_default_grammar_config() -> GrammarConfig:
    """
    Process-wide default GrammarConfig, composed once on first use.

    Call get_default_grammar_config.cache_clear() to pick up changed
    config files or environment variables.
    """
    return ConfigService().make_grammar_config()
