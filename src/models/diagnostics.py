"""Diagnostic models for interpreter error reports."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Largest LSP uinteger; editors clamp it to the end of the line.
END_OF_LINE = 2**31 - 1

DIAGNOSTIC_SOURCE = "vibe"

Severity = Literal["error"]


class Diagnostic(BaseModel):
    """One problem reported by the interpreter.

    The range always runs from ``(line, column)`` to the end of ``line``: the
    interpreter never reports where a problem stops.
    """

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    column: int = Field(ge=0)
    message: str
    severity: Severity = "error"

    @property
    def end_column(self) -> int:
        return END_OF_LINE

    def to_lsp(self) -> dict[str, object]:
        return {
            "range": {
                "start": {"line": self.line, "character": self.column},
                "end": {"line": self.line, "character": self.end_column},
            },
            "message": self.message,
            "severity": 1,
            "source": DIAGNOSTIC_SOURCE,
        }


__all__ = ["DIAGNOSTIC_SOURCE", "END_OF_LINE", "Diagnostic", "Severity"]
