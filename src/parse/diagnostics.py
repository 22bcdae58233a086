"""Map free-form interpreter error text to positioned diagnostics."""

from __future__ import annotations

import re

from models.diagnostics import Diagnostic
from utils import coerce_text, split_lines

# ``[12:5] message``: one-based line and column.
_BRACKETED_RE = re.compile(
    r"\[(?P<line>[0-9]+):(?P<column>[0-9]+)\]\s*(?P<message>.*)"
)
# ``... line 12 ...``: one-based line only.
_PROSE_RE = re.compile(r"line\s+(?P<line>[0-9]+)", re.IGNORECASE)


def _to_zero_based(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        # Digit strings past the int conversion limit.
        return 0
    return max(0, value - 1)


def _locate_line(line: str) -> Diagnostic:
    match = _BRACKETED_RE.search(line)
    if match is not None:
        return Diagnostic(
            line=_to_zero_based(match.group("line")),
            column=_to_zero_based(match.group("column")),
            message=match.group("message").strip() or line,
        )

    match = _PROSE_RE.search(line)
    if match is not None:
        return Diagnostic(
            line=_to_zero_based(match.group("line")), column=0, message=line
        )

    return Diagnostic(line=0, column=0, message=line)


def locate_diagnostics(error_text: str | bytes) -> list[Diagnostic]:
    """Parse interpreter stderr into one diagnostic per non-blank line.

    Each trimmed line is tried against the bracketed ``[line:column]`` form,
    then the prose ``line N`` form. Lines matching neither are anchored at the
    start of the document. Output order follows input order.
    """
    diagnostics: list[Diagnostic] = []
    for raw_line in split_lines(coerce_text(error_text)):
        line = raw_line.strip()
        if not line:
            continue
        diagnostics.append(_locate_line(line))
    return diagnostics


__all__ = ["locate_diagnostics"]
