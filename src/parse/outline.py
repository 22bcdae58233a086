"""Outline extraction for Vibe source text.

There is no grammar here: definitions are recognised line by line with an
ordered list of patterns, and block structure is inferred by counting
block-opening keywords against ``end`` tokens. The result is a best-effort
approximation that never fails, whatever the input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from models.symbols import Position, SymbolKind, SymbolNode
from utils import coerce_text, split_lines

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

# Evaluated in order; the first match on a line wins.
DEFINING_PATTERNS: tuple[tuple[SymbolKind, re.Pattern[str]], ...] = (
    ("function", re.compile(r"^\s*def\s+(?P<name>[a-z_]\w*)")),
    ("class", re.compile(r"^\s*class\s+(?P<name>[A-Z]\w*)")),
    ("struct", re.compile(r"^\s*struct\s+(?P<name>[A-Z]\w*)")),
    ("enum", re.compile(r"^\s*enum\s+(?P<name>[A-Z]\w*)")),
    ("constant", re.compile(r"^\s*const\s+(?P<name>[A-Z_][A-Z0-9_]*)\s*=")),
)

BLOCK_OPENING_KEYWORDS = (
    "def",
    "class",
    "struct",
    "enum",
    "if",
    "unless",
    "while",
    "until",
    "for",
    "case",
    "try",
)

_OPENERS = "|".join(BLOCK_OPENING_KEYWORDS)
# A block keyword opens only as the first token, optionally after an
# assignment such as ``x = if cond`` or ``let kind = case value``.
_BLOCK_OPEN_RE = re.compile(
    rf"^\s*(?:(?:let\s+|const\s+)?[A-Za-z_][\w.]*\s*=\s*)?(?:{_OPENERS})\b"
)
# Function literals open a block wherever they appear on the line.
_LAMBDA_OPEN_RE = re.compile(r"(?<![\w.:])fn\b")
_BLOCK_CLOSE_RE = re.compile(r"(?<![\w.:])end\b")
_STRING_LITERAL_RE = re.compile(r'"(?:\\.|[^"\\])*"|\'(?:\\.|[^\'\\])*\'')

# Kinds whose definition line opens a block that can own children.
_SCOPED_KINDS: frozenset[SymbolKind] = frozenset(
    {"function", "class", "struct", "enum"}
)
# Kinds attached to the innermost open block instead of the top level.
_NESTABLE_KINDS: frozenset[SymbolKind] = frozenset({"function", "enum"})


@dataclass
class _NestingFrame:
    node: SymbolNode
    depth: int


def _match_definition(line_no: int, line: str) -> SymbolNode | None:
    for kind, pattern in DEFINING_PATTERNS:
        match = pattern.match(line)
        if match is None:
            continue
        line_end = Position(line=line_no, column=len(line))
        return SymbolNode(
            name=match.group("name"),
            kind=kind,
            start=Position(line=line_no, column=match.start("name")),
            end=line_end,
        )
    return None


def _code_portion(line: str) -> str:
    """Blank out string literals and drop a trailing ``#`` comment."""
    code = _STRING_LITERAL_RE.sub('""', line)
    comment_at = code.find("#")
    if comment_at != -1:
        code = code[:comment_at]
    return code


def build_outline(text: str | bytes) -> list[SymbolNode]:
    """Build the symbol forest for a document.

    Functions and enums defined while a block is open become children of the
    innermost open definition; classes, structs and constants always stay at
    the top level. Each scoped node's ``end`` is moved to the line that closes
    its block. Nodes whose block is never closed keep the end of their own
    definition line.

    Args:
        text: Full document text. Bytes are decoded as UTF-8 with replacement.

    Returns:
        Top-level nodes in source order, children embedded.
    """
    forest: list[SymbolNode] = []
    stack: list[_NestingFrame] = []
    depth = 0

    for line_no, line in enumerate(split_lines(coerce_text(text))):
        node = _match_definition(line_no, line)
        if node is not None:
            if stack and node.kind in _NESTABLE_KINDS:
                stack[-1].node.children.append(node)
            else:
                forest.append(node)

        code = _code_portion(line)

        if _BLOCK_OPEN_RE.match(code) or _LAMBDA_OPEN_RE.search(code):
            if node is not None and node.kind in _SCOPED_KINDS:
                stack.append(_NestingFrame(node=node, depth=depth))
            depth += 1

        if _BLOCK_CLOSE_RE.search(code):
            # An unmatched ``end`` must not push depth below the outermost scope.
            depth = max(0, depth - 1)
            if stack and depth <= stack[-1].depth:
                frame = stack.pop()
                frame.node.end = Position(line=line_no, column=len(line))

    return forest


def iter_symbols(
    forest: Sequence[SymbolNode], depth: int = 0
) -> Iterator[tuple[int, SymbolNode]]:
    """Yield ``(depth, node)`` pairs in pre-order."""
    for node in forest:
        yield depth, node
        yield from iter_symbols(node.children, depth + 1)


__all__ = [
    "BLOCK_OPENING_KEYWORDS",
    "DEFINING_PATTERNS",
    "build_outline",
    "iter_symbols",
]
