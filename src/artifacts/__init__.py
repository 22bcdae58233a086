"""Workspace outline index generation."""

from artifacts.write import OUTLINE_JSONL, OutlineRecord, generate_outline_index

__all__ = ["OUTLINE_JSONL", "OutlineRecord", "generate_outline_index"]
