from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from artifacts.utils import _write_jsonl
from models.symbols import SymbolNode
from parse.outline import build_outline, iter_symbols
from scan.files import find_source_files
from settings.config import load_config, resolve_output_dir

if TYPE_CHECKING:
    from pathlib import Path

    from settings.config import VibeConfig

logger = logging.getLogger(__name__)

OUTLINE_JSONL = "outline.jsonl"


class OutlineRecord(BaseModel):
    """One line of outline.jsonl: the symbol forest of a single file."""

    path: str
    symbols: list[SymbolNode] = Field(default_factory=list)


def generate_outline_index(
    *,
    root: Path,
    out_dir: Path | None = None,
    config: VibeConfig | None = None,
) -> dict[str, object]:
    """Build the outline of every Vibe file in a workspace.

    Args:
        root: Root directory of the workspace to scan
        out_dir: Optional output directory for the index
        config: Optional configuration; loaded from ``root`` when omitted

    Returns:
        Dictionary with file and symbol counts and the artifact path.
    """
    root = root.resolve()
    if config is None:
        config = load_config(root)

    if out_dir is None:
        out_dir = resolve_output_dir(root, config.output_dir)

    out_dir.mkdir(parents=True, exist_ok=True)

    records: list[OutlineRecord] = []
    for file_path in find_source_files(
        root,
        skip_dirs=[out_dir],
        include_patterns=config.include,
        exclude_patterns=config.exclude,
    ):
        relative_path = file_path.relative_to(root).as_posix()
        try:
            data = file_path.read_bytes()
        except OSError as exc:
            logger.warning("Skipping unreadable file %s: %s", relative_path, exc)
            continue
        records.append(OutlineRecord(path=relative_path, symbols=build_outline(data)))

    artifact_path = out_dir / OUTLINE_JSONL
    _write_jsonl(artifact_path, records)

    symbol_count = sum(
        1 for record in records for _ in iter_symbols(record.symbols)
    )
    return {
        "file_count": len(records),
        "symbol_count": symbol_count,
        "artifacts": [str(artifact_path)],
    }


__all__ = ["OUTLINE_JSONL", "OutlineRecord", "generate_outline_index"]
