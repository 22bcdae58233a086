from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

CONFIG_FILENAME = "vibe.toml"


class DiagnosticsConfig(BaseModel):
    """Configuration for on-save interpreter diagnostics."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True, description="Run the interpreter on save")
    timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Wall-clock limit for one interpreter run",
    )
    max_output_bytes: int = Field(
        default=1024 * 1024,
        gt=0,
        description="Largest stderr payload accepted from one run",
    )
    run_subcommand: bool = Field(
        default=True,
        description=(
            "Invoke '<interpreter> run <path>' instead of '<interpreter> <path>'"
        ),
    )


class VibeConfig(BaseModel):
    """Configuration for the Vibe editor assistant."""

    model_config = ConfigDict(extra="forbid")

    executable_path: str = Field(
        default="vibe",
        description="Interpreter binary name or path",
    )
    lsp_path: str = Field(
        default="vibe-lsp",
        description="Language server binary name or path",
    )
    output_dir: str = Field(
        default=".vibe-outline",
        description="Output directory for the workspace outline index",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all .vb files)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    diagnostics: DiagnosticsConfig = Field(
        default_factory=DiagnosticsConfig,
        description="On-save diagnostics settings",
    )


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_output_dir(root: Path, output_dir: str) -> Path:
    """Resolve a config-provided output_dir safely within the workspace root.

    The config output_dir must be a non-empty relative path that remains
    within the workspace root after resolution. Absolute paths and paths
    that escape the root are rejected.
    """
    if not output_dir:
        msg = "output_dir must be a non-empty relative path"
        raise ConfigError(msg)

    if output_dir.startswith("~"):
        msg = "output_dir must be a relative path within the workspace root"
        raise ConfigError(msg)

    output_path = Path(output_dir)
    if output_path.is_absolute():
        msg = "output_dir must be a relative path within the workspace root"
        raise ConfigError(msg)

    try:
        resolved_root = root.resolve()
        resolved_output = (resolved_root / output_path).resolve()
    except OSError as exc:
        msg = f"Failed to resolve output_dir '{output_dir}': {exc}"
        raise ConfigError(msg) from exc

    try:
        resolved_output.relative_to(resolved_root)
    except ValueError as exc:
        msg = f"output_dir '{output_dir}' escapes the workspace root"
        raise ConfigError(msg) from exc

    return resolved_output


def load_config(root: Path) -> VibeConfig:
    """Load configuration from vibe.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return VibeConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return VibeConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
