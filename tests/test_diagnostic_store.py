from __future__ import annotations

from host.store import DiagnosticStore
from models.diagnostics import Diagnostic


def _diag(message: str, line: int = 0) -> Diagnostic:
    return Diagnostic(line=line, column=0, message=message)


def test_replace_overwrites_instead_of_merging() -> None:
    store = DiagnosticStore()
    store.replace("a.vb", [_diag("one"), _diag("two")])
    store.replace("a.vb", [_diag("three")])

    assert [d.message for d in store.get("a.vb")] == ["three"]


def test_documents_are_kept_apart() -> None:
    store = DiagnosticStore()
    store.replace("a.vb", [_diag("a")])
    store.replace("b.vb", [_diag("b")])

    assert store.documents() == ["a.vb", "b.vb"]
    assert [d.message for d in store.get("b.vb")] == ["b"]


def test_empty_replace_and_clear_remove_entry() -> None:
    store = DiagnosticStore()
    store.replace("a.vb", [_diag("a")])
    store.replace("a.vb", [])

    assert "a.vb" not in store
    assert store.get("a.vb") == ()

    store.replace("b.vb", [_diag("b")])
    store.clear("b.vb")
    assert len(store) == 0


def test_superseded_generation_is_discarded() -> None:
    store = DiagnosticStore()
    older = store.begin("a.vb")
    newer = store.begin("a.vb")

    assert store.replace("a.vb", [_diag("new")], generation=newer) is True
    assert store.replace("a.vb", [_diag("old")], generation=older) is False
    assert [d.message for d in store.get("a.vb")] == ["new"]


def test_forget_invalidates_runs_in_flight() -> None:
    store = DiagnosticStore()
    generation = store.begin("a.vb")
    store.forget("a.vb")

    assert store.replace("a.vb", [_diag("late")], generation=generation) is False
    assert store.get("a.vb") == ()
