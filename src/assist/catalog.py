"""Builtin, keyword and type catalog used for completion and hover."""

from __future__ import annotations

from models.assist import BuiltinDoc


def _doc(
    signature: str, description: str, method_style: str | None = None
) -> BuiltinDoc:
    return BuiltinDoc(
        signature=signature, description=description, method_style=method_style
    )


BUILTINS: dict[str, BuiltinDoc] = {
    "puts": _doc("puts(value)", "Prints value to stdout with a newline."),
    "print": _doc("print(value)", "Prints value to stdout without a newline."),
    "input": _doc("input(prompt?)", "Reads a line of input from stdin."),
    "len": _doc("len(array_or_string)", "Returns the length.", "value.len"),
    "push": _doc("push(array, value)", "Appends to array.", "array.push(value)"),
    "pop": _doc("pop(array)", "Removes and returns last element.", "array.pop"),
    "map": _doc("map(array, fn)", "Applies fn to each element.", "array.map(fn)"),
    "filter": _doc("filter(array, fn)", "Filters elements.", "array.filter(fn)"),
    "each": _doc("each(array, fn)", "Iterates for side effects.", "array.each(fn)"),
    "reduce": _doc(
        "reduce(array, initial, fn)",
        "Reduces to single value.",
        "array.reduce(init, fn)",
    ),
    "sort": _doc("sort(array)", "Returns sorted copy.", "array.sort"),
    "reverse": _doc("reverse(array)", "Returns reversed copy.", "array.reverse"),
    "trim": _doc("trim(string)", "Removes whitespace.", "string.trim"),
    "split": _doc("split(string, delim)", "Splits string.", "string.split(delim)"),
    "join": _doc("join(array, sep)", "Joins array.", "array.join(sep)"),
    "replace": _doc(
        "replace(string, old, new)",
        "Replaces occurrences.",
        "string.replace(old, new)",
    ),
    "upcase": _doc("upcase(string)", "Converts to uppercase.", "string.upcase"),
    "downcase": _doc("downcase(string)", "Converts to lowercase.", "string.downcase"),
    "keys": _doc("keys(hash)", "Returns array of keys.", "hash.keys"),
    "values": _doc("values(hash)", "Returns array of values.", "hash.values"),
    "type": _doc("type(value)", "Returns type name.", "value.type"),
    "format": _doc("format(template, args...)", "Sprintf-style formatting."),
    "Error": _doc("Error(message, data?)", "Creates structured error."),
}

KEYWORDS: tuple[str, ...] = (
    "def",
    "end",
    "fn",
    "let",
    "const",
    "if",
    "elsif",
    "else",
    "unless",
    "until",
    "while",
    "for",
    "in",
    "case",
    "when",
    "break",
    "continue",
    "return",
    "class",
    "struct",
    "enum",
    "prop",
    "try",
    "catch",
    "throw",
    "finally",
    "import",
    "self",
    "super",
    "true",
    "false",
    "nil",
)

TYPES: tuple[str, ...] = ("int", "float", "string", "boolean", "nil", "any")

__all__ = ["BUILTINS", "KEYWORDS", "TYPES"]
