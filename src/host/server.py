"""Language server discovery."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

SERVER_BINARY_NAME = "vibe-lsp"


def _home_install_path(home: Path | None) -> Path:
    base = home if home is not None else Path.home()
    return base / ".vibe" / "bin" / SERVER_BINARY_NAME


def find_language_server(lsp_path: str, *, home: Path | None = None) -> Path | None:
    """Locate the language server binary.

    Looks up ``lsp_path`` on PATH first, then falls back to the default
    per-user install location ``~/.vibe/bin/vibe-lsp``.

    Returns:
        Path to the binary, or None when neither location has one; the
        caller then serves outline, diagnostics, completion and hover itself.
    """
    found = shutil.which(lsp_path)
    if found is not None:
        logger.debug("Language server found on PATH: %s", found)
        return Path(found)

    candidate = _home_install_path(home)
    if candidate.is_file():
        logger.debug("Language server found in home install: %s", candidate)
        return candidate

    logger.info("Language server %r not found, using basic mode", lsp_path)
    return None


def server_command(binary: Path) -> list[str]:
    """Launch argv for the language server; it speaks LSP over stdio."""
    return [str(binary)]


__all__ = ["SERVER_BINARY_NAME", "find_language_server", "server_command"]
