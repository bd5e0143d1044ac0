"""
Lookup of named configurations with host-specific overrides.

A name such as "network" resolves to the first existing file of:

    <config_root>/<hostname>/network.conf
    <config_root>/network.conf
    ./network.conf

so a fleet can share defaults while single machines override them.
"""

from __future__ import annotations

import os
import socket
from collections.abc import Mapping
from pathlib import Path

from ..const import CONFIG_ROOT_ENV, CONFIG_SUFFIX, DEFAULT_CONFIG_ROOT
from ..logging import get_logger
from .configuration import Configuration
from .errors import ConfigError

logger = get_logger("config.registry")


class ConfigRegistry:
    """
    Loads named configurations once and caches them.

    Usage:
        registry = ConfigRegistry()
        network = registry["network"]
        port = network.get("server.port", as_type=int)
    """

    def __init__(
        self,
        config_root: str | Path | None = None,
        hostname: str | None = None,
        env: Mapping[str, str] | None = None,
    ):
        env_map: Mapping[str, str] = os.environ if env is None else env

        if config_root is None:
            config_root = env_map.get(CONFIG_ROOT_ENV) or DEFAULT_CONFIG_ROOT

        self.config_root = Path(config_root)
        self.hostname = hostname or socket.gethostname()
        self._configs: dict[str, Configuration] = {}

    def __repr__(self) -> str:
        return f"ConfigRegistry({str(self.config_root)!r}, loaded={sorted(self._configs)})"

    def __contains__(self, name: str) -> bool:
        return name in self._configs or self.resolve(name) is not None

    def __getitem__(self, name: str) -> Configuration:
        config = self.get(name)
        if config is None:
            raise ConfigError(
                f"Configuration '{name}' not found in {self.config_root} (host {self.hostname})"
            )
        return config

    def candidates(self, name: str) -> list[Path]:
        """Files checked for ``name``, most specific first."""
        filename = f"{name}{CONFIG_SUFFIX}"
        return [
            self.config_root / self.hostname / filename,
            self.config_root / filename,
            Path(filename),
        ]

    def resolve(self, name: str) -> Path | None:
        """Return the first existing candidate file for ``name``."""
        if not name:
            return None

        for path in self.candidates(name):
            if path.is_file():
                return path
        return None

    def get(self, name: str) -> Configuration | None:
        """
        Get a configuration by name, loading it on first use.

        Returns:
            The configuration, or None if no file exists for ``name``

        Raises:
            ConfigError: If the file exists but cannot be read or parsed
        """
        if name in self._configs:
            return self._configs[name]

        path = self.resolve(name)
        if path is None:
            logger.warning(f"No configuration file for '{name}' under {self.config_root}")
            return None

        logger.debug(f"Loading configuration '{name}' from {path}")
        config = Configuration(path)
        self._configs[name] = config
        return config

    def reload(self, name: str) -> Configuration | None:
        """Drop a cached configuration and load it again."""
        self._configs.pop(name, None)
        return self.get(name)
