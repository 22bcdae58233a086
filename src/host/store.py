"""Per-document diagnostics store owned by the host session."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from models.diagnostics import Diagnostic


class DiagnosticStore:
    """Map of document key to its current diagnostics.

    Each document's entry is replaced wholesale, never merged. Runs are
    numbered per document with ``begin``; a result tagged with an older
    generation than the latest one is discarded so a slow run cannot
    overwrite the result of a newer one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[Diagnostic, ...]] = {}
        self._generations: dict[str, int] = {}

    def begin(self, document: str) -> int:
        """Start a new run for ``document`` and return its generation."""
        with self._lock:
            generation = self._generations.get(document, 0) + 1
            self._generations[document] = generation
            return generation

    def replace(
        self,
        document: str,
        diagnostics: Iterable[Diagnostic],
        *,
        generation: int | None = None,
    ) -> bool:
        """Replace the diagnostics for ``document``.

        Returns False, leaving the entry untouched, when ``generation`` has been
        superseded. An empty ``diagnostics`` clears the entry.
        """
        entry = tuple(diagnostics)
        with self._lock:
            if generation is not None and generation != self._generations.get(document):
                return False
            if entry:
                self._entries[document] = entry
            else:
                self._entries.pop(document, None)
            return True

    def clear(self, document: str) -> None:
        with self._lock:
            self._entries.pop(document, None)

    def forget(self, document: str) -> None:
        """Clear ``document`` and invalidate any run still in flight for it."""
        with self._lock:
            self._entries.pop(document, None)
            if document in self._generations:
                self._generations[document] += 1

    def get(self, document: str) -> tuple[Diagnostic, ...]:
        with self._lock:
            return self._entries.get(document, ())

    def documents(self) -> list[str]:
        with self._lock:
            return sorted(self._entries)

    def __contains__(self, document: object) -> bool:
        with self._lock:
            return document in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["DiagnosticStore"]
