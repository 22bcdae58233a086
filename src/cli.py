"""Command-line interface for vibe-assist."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from artifacts.utils import dumps
from artifacts.write import generate_outline_index
from host.interpreter import run_program
from host.session import EditorSession
from parse.diagnostics import locate_diagnostics
from parse.outline import iter_symbols
from settings.config import ConfigError, load_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _add_root(parser: argparse.ArgumentParser, *, flag: bool = False) -> None:
    if flag:
        parser.add_argument(
            "--root",
            default=".",
            help="Workspace root holding vibe.toml (default: .)",
        )
        return
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Workspace root (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vibe-assist")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    outline_parser = subparsers.add_parser("outline", help="Print a document outline")
    outline_parser.add_argument("file", help="Vibe source file")
    outline_parser.add_argument(
        "--json", action="store_true", help="Emit LSP DocumentSymbol JSON"
    )

    locate_parser = subparsers.add_parser(
        "locate", help="Turn interpreter error text into diagnostics"
    )
    locate_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File holding captured stderr (default: read stdin)",
    )

    run_parser = subparsers.add_parser("run", help="Run a Vibe program")
    run_parser.add_argument("file", help="Vibe source file")
    _add_root(run_parser, flag=True)

    check_parser = subparsers.add_parser(
        "check", help="Run the interpreter on a file and report diagnostics"
    )
    check_parser.add_argument("file", help="Vibe source file")
    _add_root(check_parser, flag=True)

    index_parser = subparsers.add_parser("index", help="Write the workspace outline")
    _add_root(index_parser)
    index_parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory for outline.jsonl (default: config output dir)",
    )

    complete_parser = subparsers.add_parser("complete", help="List completions")
    complete_parser.add_argument("prefix", nargs="?", default="")

    hover_parser = subparsers.add_parser(
        "hover", help="Show builtin docs at a position"
    )
    hover_parser.add_argument("file", help="Vibe source file")
    hover_parser.add_argument("line", type=int, help="Zero-based line")
    hover_parser.add_argument("column", type=int, help="Zero-based column")

    status_parser = subparsers.add_parser(
        "status", help="Report whether a language server is available"
    )
    _add_root(status_parser)

    return parser


def _write_out(payload: bytes) -> None:
    sys.stdout.write(payload.decode("utf-8"))
    sys.stdout.write("\n")


def _handle_outline(file: Path, as_json: bool) -> int:
    forest = EditorSession().document_symbols(file.read_bytes())
    if as_json:
        _write_out(dumps([node.to_document_symbol() for node in forest], indent=True))
        return 0
    for depth, node in iter_symbols(forest):
        sys.stdout.write(
            f"{'  ' * depth}{node.kind} {node.name} "
            f"[{node.start.line + 1}:{node.start.column + 1}"
            f"-{node.end.line + 1}:{node.end.column + 1}]\n"
        )
    return 0


def _handle_locate(file: Path | None) -> int:
    data = sys.stdin.buffer.read() if file is None else file.read_bytes()
    diagnostics = locate_diagnostics(data)
    _write_out(dumps([d.to_lsp() for d in diagnostics], indent=True))
    return 0


def _handle_run(root: Path, file: Path) -> int:
    return run_program(file, load_config(root))


def _handle_check(root: Path, file: Path) -> int:
    session = EditorSession(load_config(root))
    diagnostics = session.on_save(file)
    for diagnostic in diagnostics:
        sys.stderr.write(
            f"{file}:{diagnostic.line + 1}:{diagnostic.column + 1}: "
            f"{diagnostic.severity}: {diagnostic.message}\n"
        )
    return 1 if diagnostics else 0


def _handle_index(root: Path, out_dir: str | None) -> int:
    resolved_out_dir = (
        None if out_dir is None else Path(out_dir).expanduser().resolve()
    )
    summary = generate_outline_index(root=root, out_dir=resolved_out_dir)
    _write_out(dumps(summary, indent=True))
    return 0


def _handle_complete(prefix: str) -> int:
    for item in EditorSession().completions(prefix):
        sys.stdout.write(f"{item.label}\t{item.kind}\t{item.detail}\n")
    return 0


def _handle_hover(file: Path, line: int, column: int) -> int:
    result = EditorSession().hover(file.read_bytes(), line, column)
    if result is None:
        return 1
    sys.stdout.write(result.contents)
    sys.stdout.write("\n")
    return 0


def _handle_status(root: Path) -> int:
    session = EditorSession.open(root)
    if session.language_server is not None:
        sys.stdout.write(f"lsp: {session.language_server}\n")
    else:
        sys.stdout.write("basic: language server not found\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        if args.command == "outline":
            return _handle_outline(Path(args.file), args.json)

        if args.command == "locate":
            file = None if args.file is None else Path(args.file)
            return _handle_locate(file)

        if args.command == "run":
            root = Path(args.root).expanduser().resolve()
            return _handle_run(root, Path(args.file))

        if args.command == "check":
            root = Path(args.root).expanduser().resolve()
            return _handle_check(root, Path(args.file))

        if args.command == "index":
            root = Path(args.root).expanduser().resolve()
            return _handle_index(root, args.out_dir)

        if args.command == "complete":
            return _handle_complete(args.prefix)

        if args.command == "hover":
            return _handle_hover(Path(args.file), args.line, args.column)

        if args.command == "status":
            return _handle_status(Path(args.root).expanduser().resolve())
    except (ConfigError, OSError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
