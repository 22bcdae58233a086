"""Shared text and path utilities."""

from __future__ import annotations

import re
from pathlib import Path

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def coerce_text(text: str | bytes) -> str:
    """Return ``text`` as ``str``, decoding bytes as UTF-8 with replacement.

    Interpreter output and on-disk documents are not guaranteed to be valid
    UTF-8; undecodable bytes become U+FFFD instead of failing.
    """
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return text


def split_lines(text: str) -> list[str]:
    """Split text into lines on ``\\r\\n``, ``\\r`` and ``\\n``.

    Unlike ``str.splitlines`` this only breaks where an editor does, so line
    numbers agree with the host. A trailing newline yields a final empty line.

    Examples:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b', '']
        >>> split_lines("")
        ['']
    """
    return _LINE_BREAK_RE.split(text)


def document_key(path: str | Path) -> str:
    """Canonical key for a document: its resolved POSIX path."""
    return Path(path).expanduser().resolve().as_posix()
