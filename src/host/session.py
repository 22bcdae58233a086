"""Editor session: wires the analysis functions to a workspace."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from assist.completion import complete
from assist.hover import hover
from host.interpreter import run_interpreter
from host.server import find_language_server
from host.store import DiagnosticStore
from parse.diagnostics import locate_diagnostics
from parse.outline import build_outline
from settings.config import VibeConfig, load_config
from utils import document_key

if TYPE_CHECKING:
    from models.assist import CompletionItem, Hover
    from models.diagnostics import Diagnostic
    from models.symbols import SymbolNode

logger = logging.getLogger(__name__)

Mode = Literal["lsp", "basic"]


class EditorSession:
    """Host-side state for one workspace.

    Owns the configuration and the diagnostics store. The outline and
    diagnostic parsers stay stateless; this class decides when they run and
    where their results go.
    """

    def __init__(
        self,
        config: VibeConfig | None = None,
        *,
        store: DiagnosticStore | None = None,
        language_server: Path | None = None,
    ) -> None:
        self.config = config if config is not None else VibeConfig()
        self.store = store if store is not None else DiagnosticStore()
        self.language_server = language_server

    @classmethod
    def open(cls, root: Path, *, home: Path | None = None) -> EditorSession:
        """Load ``vibe.toml`` from ``root`` and look for a language server."""
        config = load_config(root)
        server = find_language_server(config.lsp_path, home=home)
        return cls(config, language_server=server)

    @property
    def mode(self) -> Mode:
        return "lsp" if self.language_server is not None else "basic"

    @property
    def provides_fallbacks(self) -> bool:
        """True when this session answers requests itself.

        A running language server owns outline, completion, hover and
        diagnostics; the session then stays out of its way.
        """
        return self.mode == "basic"

    def document_symbols(self, text: str | bytes) -> list[SymbolNode]:
        if not self.provides_fallbacks:
            return []
        return build_outline(text)

    def on_save(self, path: Path) -> tuple[Diagnostic, ...]:
        """Refresh diagnostics for ``path`` after it was saved.

        Returns the diagnostics now stored for the document. An empty tuple
        means the entry was cleared: diagnostics are disabled or owned by a
        language server, or the run left nothing to report.
        """
        document = document_key(path)
        if not (self.provides_fallbacks and self.config.diagnostics.enabled):
            self.store.clear(document)
            return ()

        generation = self.store.begin(document)
        result = run_interpreter(Path(path), self.config)

        diagnostics: list[Diagnostic] = []
        if result is not None and result.has_errors:
            diagnostics = locate_diagnostics(result.stderr)

        if not self.store.replace(document, diagnostics, generation=generation):
            logger.debug("Discarding superseded diagnostics for %s", document)
        return self.store.get(document)

    def on_close(self, path: Path) -> None:
        self.store.forget(document_key(path))

    def diagnostics(self, path: Path) -> tuple[Diagnostic, ...]:
        return self.store.get(document_key(path))

    def completions(self, prefix: str = "") -> list[CompletionItem]:
        if not self.provides_fallbacks:
            return []
        return complete(prefix)

    def hover(self, text: str | bytes, line: int, column: int) -> Hover | None:
        if not self.provides_fallbacks:
            return None
        return hover(text, line, column)


__all__ = ["EditorSession", "Mode"]
