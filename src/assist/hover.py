"""Hover documentation for builtins."""

from __future__ import annotations

import re

from assist.catalog import BUILTINS
from models.assist import Hover
from utils import coerce_text, split_lines

_WORD_RE = re.compile(r"\w+")


def word_at(line_text: str, column: int) -> tuple[str, int, int] | None:
    """Return ``(word, start, end)`` for the word touching ``column``.

    A cursor placed just after the last character of a word still selects it.
    """
    for match in _WORD_RE.finditer(line_text):
        if match.start() <= column <= match.end():
            return match.group(), match.start(), match.end()
        if match.start() > column:
            break
    return None


def render_markdown(name: str) -> str | None:
    doc = BUILTINS.get(name)
    if doc is None:
        return None
    parts = [f"```vibe\n{doc.signature}\n```\n"]
    if doc.method_style:
        parts.append(f"*Also:* `{doc.method_style}`\n\n")
    parts.append(doc.description)
    return "".join(parts)


def hover(text: str | bytes, line: int, column: int) -> Hover | None:
    """Hover contents for the builtin under ``(line, column)``, if any."""
    lines = split_lines(coerce_text(text))
    if line < 0 or line >= len(lines) or column < 0:
        return None

    found = word_at(lines[line], column)
    if found is None:
        return None

    word, start, end = found
    contents = render_markdown(word)
    if contents is None:
        return None
    return Hover(contents=contents, line=line, start_column=start, end_column=end)
