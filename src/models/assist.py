"""Completion and hover models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CompletionKind = Literal["function", "keyword", "type_parameter"]


class BuiltinDoc(BaseModel):
    """Reference documentation for a builtin function."""

    model_config = ConfigDict(frozen=True)

    signature: str
    description: str
    method_style: str | None = Field(
        default=None, description="Equivalent method-call form (e.g. 'array.pop')"
    )


class CompletionItem(BaseModel):
    label: str
    kind: CompletionKind
    detail: str
    documentation: str | None = None


class Hover(BaseModel):
    """Markdown hover contents anchored to the word under the cursor."""

    contents: str
    line: int = Field(ge=0)
    start_column: int = Field(ge=0)
    end_column: int = Field(ge=0)


__all__ = ["BuiltinDoc", "CompletionItem", "CompletionKind", "Hover"]
