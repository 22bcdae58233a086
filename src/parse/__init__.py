"""Structural text analysis for Vibe documents and interpreter output."""

from parse.diagnostics import locate_diagnostics
from parse.outline import build_outline, iter_symbols

__all__ = [
    "build_outline",
    "iter_symbols",
    "locate_diagnostics",
]
