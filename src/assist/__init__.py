"""Completion and hover providers used when no language server is running."""

from assist.catalog import BUILTINS, KEYWORDS, TYPES
from assist.completion import complete
from assist.hover import hover, word_at

__all__ = ["BUILTINS", "KEYWORDS", "TYPES", "complete", "hover", "word_at"]
