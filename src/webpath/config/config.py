"""Configuration management for webpath."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from webpath.config.file_ops import write_text_file
from webpath.config.paths import default_config_path
from webpath.platform.logging import logger
from webpath.shared.host_location import HostLocation


class ConfigError(ValueError):
    """Raised when the configuration file holds unusable values."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"Invalid configuration value for '{key}': {message}")
        self.key: str = key


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Current location pathname used when resolve() anchors relative input
    location_pathname: str = "/"

    # Host origin; paths starting with it are absolute
    origin: str = ""

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Validate string fields and convert path fields to ``Path``."""

        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("path", False):
                if isinstance(value, str):
                    setattr(self, f.name, Path(value) if value.strip() else None)
                elif value is not None and not isinstance(value, Path):
                    raise ConfigError(f.name, "expected a path string")
            elif not isinstance(value, str):
                raise ConfigError(f.name, f"expected a string, got {type(value).__name__}")

    def to_location(self) -> HostLocation:
        """Build the host location described by this configuration."""

        return HostLocation(pathname=self.location_pathname, origin=self.origin)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# webpath configuration file")
        lines.append("")

        lines.append("# Pathname of the current location (acts as the working directory)")
        lines.append('# Example: location_pathname = "/app/docs/"')
        lines.append(f"location_pathname = {self._format_toml_value(config['location_pathname'])}")
        lines.append("")

        lines.append("# Origin of the host; paths starting with it are treated as absolute")
        lines.append('# Example: origin = "https://example.com"')
        lines.append(f"origin = {self._format_toml_value(config['origin'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/webpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: File to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when the file is missing.

        Raises:
            ConfigError: If the file holds unknown keys or mistyped values.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()

        try:
            if source.exists():
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                for key in config_dict:
                    if key not in known:
                        raise ConfigError(key, "unknown setting")

                instance = cls(**config_dict)
                logger.debug(
                    "Configuration loaded from %s",
                    source,
                    extra={"path_event": "config.loaded", "arguments": [str(source)]},
                )
            else:
                instance = cls()
                logger.debug(
                    "No configuration at %s; using defaults",
                    source,
                    extra={"path_event": "config.defaults", "arguments": [str(source)]},
                )
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = source
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
