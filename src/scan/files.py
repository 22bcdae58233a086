"""Workspace scanning for Vibe source files.

The walk never follows symlinks and prunes a directory as soon as it is ruled
out. A ``.gitignore`` applies to everything below the directory holding it,
so ignore files in subprojects compose with the one at the workspace root.
"""

from __future__ import annotations

import os
from fnmatch import fnmatch
from pathlib import Path
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    Matcher = Callable[[str], bool]

SOURCE_SUFFIX = ".vb"

# Version-control metadata and the per-user interpreter install tree.
SKIPPED_DIRECTORIES = frozenset({".git", ".hg", ".svn", ".vibe"})


def is_source_file(path: Path) -> bool:
    """True for a regular, non-symlinked file ending in exactly ``.vb``."""
    return path.suffix == SOURCE_SUFFIX and path.is_file() and not path.is_symlink()


def _load_gitignore(directory: Path) -> Matcher | None:
    gitignore = directory / ".gitignore"
    if gitignore.is_symlink() or not gitignore.is_file():
        return None
    return cast("Matcher", parse_gitignore(gitignore))


def _is_ignored(matchers: Iterable[Matcher], path: Path) -> bool:
    target = str(path)
    return any(matcher(target) for matcher in matchers)


def _is_selected(
    rel_path: str,
    include_patterns: list[str] | None,
    exclude_patterns: list[str] | None,
) -> bool:
    if include_patterns and not any(fnmatch(rel_path, p) for p in include_patterns):
        return False
    return not (
        exclude_patterns and any(fnmatch(rel_path, p) for p in exclude_patterns)
    )


def find_source_files(
    directory: Path,
    *,
    skip_dirs: Iterable[Path] = (),
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
) -> list[Path]:
    """Find the Vibe sources under ``directory``.

    Args:
        directory: Workspace root.
        skip_dirs: Directories never descended into, such as the index
            output directory.
        include_patterns: fnmatch patterns on the root-relative POSIX path;
            when given, a file must match one of them.
        exclude_patterns: fnmatch patterns removing files after inclusion.

    Returns:
        Resolved paths sorted by their path relative to the root.
    """
    root = directory.resolve()
    pruned = {path.resolve() for path in skip_dirs}
    gitignores: dict[Path, Matcher] = {}
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        base = Path(dirpath)
        local = _load_gitignore(base)
        if local is not None:
            gitignores[base] = local
        active = [
            matcher
            for owner, matcher in gitignores.items()
            if owner == base or owner in base.parents
        ]

        dirnames[:] = sorted(
            name
            for name in dirnames
            if name not in SKIPPED_DIRECTORIES
            and (base / name) not in pruned
            and not (base / name).is_symlink()
            and not _is_ignored(active, base / name)
        )

        for name in filenames:
            path = base / name
            if not is_source_file(path) or _is_ignored(active, path):
                continue
            rel_path = path.relative_to(root).as_posix()
            if _is_selected(rel_path, include_patterns, exclude_patterns):
                found.append(path)

    found.sort(key=lambda p: p.relative_to(root).as_posix())
    return found


__all__ = [
    "SKIPPED_DIRECTORIES",
    "SOURCE_SUFFIX",
    "find_source_files",
    "is_source_file",
]
