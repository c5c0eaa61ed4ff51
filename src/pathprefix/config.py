"""Configuration management for pathprefix.

Supports TOML configuration format with auto-discovery.
"""

import logging
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from pathprefix.core.prefix import DEFAULT_SEPARATOR, PathPrefix

CONFIG_FILENAME = "pathprefix.toml"

logger = logging.getLogger(__name__)


@dataclass
class PrefixConfig:
    """Prefix configuration."""

    base: str = ""
    separator: str = DEFAULT_SEPARATOR


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class Config:
    """Application configuration."""

    prefix: PrefixConfig = field(default_factory=PrefixConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for pathprefix.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            logger.debug("No configuration file found, using defaults")
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        logger.debug(f"Loaded configuration from {path}")

        return cls(
            prefix=cls._parse_prefix(data.get("prefix")),
            server=cls._parse_server(data.get("server")),
            config_path=path,
        )

    @classmethod
    def _parse_prefix(cls, data: object) -> PrefixConfig:
        """Parse prefix configuration section.

        Args:
            data: Raw prefix section data

        Returns:
            PrefixConfig instance
        """
        if data is None:
            return PrefixConfig()

        if not isinstance(data, dict):
            raise ValueError("prefix section must be a dictionary")

        base = data.get("base", "")
        if not isinstance(base, str):
            raise ValueError("prefix.base must be a string")

        separator = data.get("separator", DEFAULT_SEPARATOR)
        if not isinstance(separator, str):
            raise ValueError("prefix.separator must be a string")
        if not separator:
            raise ValueError("prefix.separator must not be empty")

        return PrefixConfig(base=base, separator=separator)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    def with_overrides(
        self,
        *,
        base: str | None = None,
        separator: str | None = None,
        host: str | None = None,
        port: int | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            base: Override prefix.base
            separator: Override prefix.separator
            host: Override server.host
            port: Override server.port

        Returns:
            New Config instance with overrides applied
        """
        prefix = self.prefix
        if base is not None or separator is not None:
            prefix = replace(
                self.prefix,
                base=base if base is not None else self.prefix.base,
                separator=separator if separator is not None else self.prefix.separator,
            )

        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        return replace(self, prefix=prefix, server=server)

    def path_prefix(self) -> PathPrefix:
        """Build the configured PathPrefix."""
        return PathPrefix(self.prefix.base, self.prefix.separator)
