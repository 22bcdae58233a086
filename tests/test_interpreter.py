from __future__ import annotations

import sys
import time
from pathlib import Path

from host.interpreter import build_command, run_interpreter
from settings.config import DiagnosticsConfig, VibeConfig


def _python_config(**diagnostics: object) -> VibeConfig:
    # The document is handed to the Python interpreter, which stands in for
    # the Vibe binary and writes whatever the test script prints to stderr.
    return VibeConfig(
        executable_path=sys.executable,
        diagnostics=DiagnosticsConfig(run_subcommand=False, **diagnostics),
    )


def _script(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "program.vb"
    path.write_text(body, encoding="utf-8")
    return path


def test_build_command_variants() -> None:
    path = Path("/work/app.vb")

    assert build_command("vibe", path, run_subcommand=True) == [
        "vibe",
        "run",
        "/work/app.vb",
    ]
    assert build_command("vibe", path, run_subcommand=False) == ["vibe", "/work/app.vb"]


def test_failed_run_captures_stderr(tmp_path: Path) -> None:
    path = _script(
        tmp_path,
        "import sys\nsys.stderr.write('[3:5] unexpected token\\n')\nsys.exit(1)\n",
    )

    result = run_interpreter(path, _python_config())

    assert result is not None
    assert result.returncode == 1
    assert result.has_errors
    assert result.stderr.strip() == "[3:5] unexpected token"


def test_successful_run_has_no_errors(tmp_path: Path) -> None:
    path = _script(tmp_path, "print('fine')\n")

    result = run_interpreter(path, _python_config())

    assert result is not None
    assert result.returncode == 0
    assert not result.has_errors


def test_timeout_yields_none(tmp_path: Path) -> None:
    path = _script(tmp_path, "import time\ntime.sleep(10)\n")

    assert run_interpreter(path, _python_config(timeout_seconds=0.5)) is None


def test_output_cap_yields_none(tmp_path: Path) -> None:
    path = _script(
        tmp_path, "import sys\nsys.stderr.write('x' * 5000)\nsys.exit(1)\n"
    )

    assert run_interpreter(path, _python_config(max_output_bytes=100)) is None


def test_missing_binary_yields_none(tmp_path: Path) -> None:
    config = VibeConfig(executable_path=str(tmp_path / "no-such-vibe"))

    assert run_interpreter(tmp_path / "app.vb", config) is None


def test_output_cap_stops_a_still_running_child(tmp_path: Path) -> None:
    path = _script(
        tmp_path,
        "import sys, time\n"
        "sys.stderr.write('x' * 5000)\n"
        "sys.stderr.flush()\n"
        "time.sleep(30)\n",
    )
    config = _python_config(max_output_bytes=100, timeout_seconds=20)

    started = time.monotonic()
    result = run_interpreter(path, config)
    elapsed = time.monotonic() - started

    assert result is None
    assert elapsed < 10


def test_stderr_closed_early_still_honours_timeout(tmp_path: Path) -> None:
    path = _script(
        tmp_path,
        "import os, time\nos.close(2)\ntime.sleep(30)\n",
    )

    started = time.monotonic()
    result = run_interpreter(path, _python_config(timeout_seconds=0.5))

    assert result is None
    assert time.monotonic() - started < 10
