"""Static completion items for basic mode."""

from __future__ import annotations

from assist.catalog import BUILTINS, KEYWORDS, TYPES
from models.assist import CompletionItem


def complete(prefix: str = "") -> list[CompletionItem]:
    """Return builtins, then keywords, then types whose label starts with ``prefix``.

    Matching is case-sensitive. An empty prefix returns the whole catalog.
    """
    items: list[CompletionItem] = [
        CompletionItem(
            label=name,
            kind="function",
            detail=doc.signature,
            documentation=doc.description,
        )
        for name, doc in BUILTINS.items()
    ]
    items.extend(
        CompletionItem(label=keyword, kind="keyword", detail="keyword")
        for keyword in KEYWORDS
    )
    items.extend(
        CompletionItem(label=type_name, kind="type_parameter", detail="type")
        for type_name in TYPES
    )
    return [item for item in items if item.label.startswith(prefix)]
