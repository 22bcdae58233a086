from __future__ import annotations

import pytest

from models.diagnostics import END_OF_LINE
from parse.diagnostics import locate_diagnostics


def _triples(text: str | bytes) -> list[tuple[int, int, str]]:
    return [(d.line, d.column, d.message) for d in locate_diagnostics(text)]


def test_bracketed_form_is_converted_to_zero_based() -> None:
    diagnostics = locate_diagnostics("[3:5] unexpected token")

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert (diagnostic.line, diagnostic.column) == (2, 4)
    assert diagnostic.message == "unexpected token"
    assert diagnostic.severity == "error"
    assert diagnostic.end_column == END_OF_LINE


def test_prose_form_keeps_whole_line_as_message() -> None:
    assert _triples("Error: boom at line 10") == [(9, 0, "Error: boom at line 10")]


def test_prose_form_is_case_insensitive() -> None:
    assert _triples("  LINE 4: bad indent  ") == [(3, 0, "LINE 4: bad indent")]


@pytest.mark.parametrize("text", ["", "   \n  ", "\r\n\t\n"])
def test_blank_input_yields_nothing(text: str) -> None:
    assert locate_diagnostics(text) == []


def test_one_diagnostic_per_non_blank_line_in_order() -> None:
    text = "[1:1] first\n\nsomething broke\nline 4: bad\n"

    assert _triples(text) == [
        (0, 0, "first"),
        (0, 0, "something broke"),
        (3, 0, "line 4: bad"),
    ]


def test_bracketed_form_wins_over_prose_form() -> None:
    assert _triples("[2:3] problem on line 9") == [(1, 2, "problem on line 9")]


def test_zero_positions_are_clamped() -> None:
    assert _triples("[0:0] zero") == [(0, 0, "zero")]
    assert _triples("line 0 is special") == [(0, 0, "line 0 is special")]


def test_garbled_brackets_fall_back_to_document_start() -> None:
    assert _triples("[3: boom") == [(0, 0, "[3: boom")]
    assert _triples("[a:b] boom") == [(0, 0, "[a:b] boom")]


def test_oversized_numbers_become_zero() -> None:
    huge = "9" * 5000

    assert _triples(f"[{huge}:{huge}] overflow") == [(0, 0, "overflow")]


def test_bracket_without_message_keeps_line() -> None:
    assert _triples("[4:2]") == [(3, 1, "[4:2]")]


def test_line_reference_may_sit_inside_a_word() -> None:
    assert _triples("inline 5 failed") == [(4, 0, "inline 5 failed")]
    assert _triples("Baseline 3 drifted") == [(2, 0, "Baseline 3 drifted")]


def test_bracket_may_follow_a_prefix() -> None:
    assert _triples("main.vb [7:12] undefined variable x") == [
        (6, 11, "undefined variable x")
    ]


def test_bytes_input_with_invalid_utf8() -> None:
    assert _triples(b"[2:1] bad \xff byte\r\n") == [(1, 0, "bad \ufffd byte")]


def test_locate_is_idempotent() -> None:
    text = "[3:5] unexpected token\nError at line 2\nboom\n"

    assert locate_diagnostics(text) == locate_diagnostics(text)


def test_to_lsp_spans_to_end_of_line() -> None:
    payload = locate_diagnostics("[3:5] unexpected token")[0].to_lsp()

    assert payload == {
        "range": {
            "start": {"line": 2, "character": 4},
            "end": {"line": 2, "character": END_OF_LINE},
        },
        "message": "unexpected token",
        "severity": 1,
        "source": "vibe",
    }
