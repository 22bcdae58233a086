from __future__ import annotations

import json
import shutil
from pathlib import Path

from artifacts.write import OUTLINE_JSONL, generate_outline_index
from settings.config import VibeConfig


def read_jsonl(path: Path) -> list[dict[str, object]]:
    records: list[dict[str, object]] = []
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        records.append(json.loads(line))
    return records


def _copy_fixture(tmp_path: Path) -> Path:
    fixture_root = Path(__file__).parent / "fixtures" / "mini_workspace"
    workspace_root = tmp_path / "workspace"
    shutil.copytree(fixture_root, workspace_root)
    return workspace_root


def _outline(symbols: list[dict[str, object]]) -> list[object]:
    return [
        (s["kind"], s["name"], _outline(s["children"]))  # type: ignore[arg-type]
        for s in symbols
    ]


def test_outline_index_generated_from_committed_fixture(tmp_path: Path) -> None:
    workspace_root = _copy_fixture(tmp_path)
    out_dir = tmp_path / "index"

    summary = generate_outline_index(root=workspace_root, out_dir=out_dir)

    assert summary == {
        "file_count": 2,
        "symbol_count": 7,
        "artifacts": [str(out_dir / OUTLINE_JSONL)],
    }

    records = read_jsonl(out_dir / OUTLINE_JSONL)
    assert [r["path"] for r in records] == ["lib/shapes.vb", "main.vb"]

    shapes, main = records
    assert _outline(shapes["symbols"]) == [  # type: ignore[arg-type]
        ("class", "Circle", [("function", "area", [])]),
        (
            "struct",
            "Square",
            [("enum", "Corner", []), ("function", "area", [])],
        ),
    ]
    assert _outline(main["symbols"]) == [  # type: ignore[arg-type]
        ("constant", "MAX_ITEMS", []),
        ("function", "main", []),
    ]

    main_fn = main["symbols"][1]  # type: ignore[index]
    assert main_fn["start"] == {"line": 4, "column": 4}
    assert main_fn["end"] == {"line": 7, "column": 3}


def test_outline_index_default_output_dir(tmp_path: Path) -> None:
    workspace_root = _copy_fixture(tmp_path)

    generate_outline_index(root=workspace_root)

    default_out_dir = workspace_root / ".vibe-outline"
    assert (default_out_dir / OUTLINE_JSONL).is_file()


def test_outline_index_is_deterministic(tmp_path: Path) -> None:
    workspace_root = _copy_fixture(tmp_path)
    first = tmp_path / "first"
    second = tmp_path / "second"

    generate_outline_index(root=workspace_root, out_dir=first)
    generate_outline_index(root=workspace_root, out_dir=second)

    assert (first / OUTLINE_JSONL).read_bytes() == (second / OUTLINE_JSONL).read_bytes()


def test_outline_index_honours_exclude(tmp_path: Path) -> None:
    workspace_root = _copy_fixture(tmp_path)
    out_dir = tmp_path / "index"

    summary = generate_outline_index(
        root=workspace_root,
        out_dir=out_dir,
        config=VibeConfig(exclude=["lib/*"]),
    )

    assert summary["file_count"] == 1
    assert [r["path"] for r in read_jsonl(out_dir / OUTLINE_JSONL)] == ["main.vb"]
