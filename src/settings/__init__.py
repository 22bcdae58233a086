"""Configuration for vibe-assist."""

from settings.config import (
    CONFIG_FILENAME,
    ConfigError,
    DiagnosticsConfig,
    VibeConfig,
    load_config,
    resolve_output_dir,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DiagnosticsConfig",
    "VibeConfig",
    "load_config",
    "resolve_output_dir",
]
