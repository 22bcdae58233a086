"""Model namespace for vibe-assist records."""

from models.assist import BuiltinDoc, CompletionItem, Hover
from models.diagnostics import END_OF_LINE, Diagnostic
from models.symbols import Position, SymbolKind, SymbolNode

__all__ = [
    "END_OF_LINE",
    "BuiltinDoc",
    "CompletionItem",
    "Diagnostic",
    "Hover",
    "Position",
    "SymbolKind",
    "SymbolNode",
]
