"""Symbol models for document outlines.

A document outline is a forest of ``SymbolNode`` values. Coordinates are
zero-based; ``column`` counts characters, not bytes.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SymbolKind = Literal["function", "class", "struct", "enum", "constant"]

# Numeric values of the LSP ``SymbolKind`` enumeration.
LSP_SYMBOL_KINDS: dict[SymbolKind, int] = {
    "class": 5,
    "enum": 10,
    "function": 12,
    "constant": 14,
    "struct": 23,
}


class Position(BaseModel):
    """A zero-based line/column location in a document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    column: int = Field(ge=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.column)

    def to_lsp(self) -> dict[str, int]:
        return {"line": self.line, "character": self.column}


class SymbolNode(BaseModel):
    """A named construct found in source text."""

    name: str
    kind: SymbolKind
    start: Position
    end: Position
    children: list[SymbolNode] = Field(default_factory=list)

    def to_document_symbol(self) -> dict[str, object]:
        """Render the node (and its children) in LSP ``DocumentSymbol`` shape."""
        name_end = Position(
            line=self.start.line, column=self.start.column + len(self.name)
        )
        return {
            "name": self.name,
            "kind": LSP_SYMBOL_KINDS[self.kind],
            "range": {"start": self.start.to_lsp(), "end": self.end.to_lsp()},
            "selectionRange": {
                "start": self.start.to_lsp(),
                "end": name_end.to_lsp(),
            },
            "children": [child.to_document_symbol() for child in self.children],
        }


__all__ = ["LSP_SYMBOL_KINDS", "Position", "SymbolKind", "SymbolNode"]
