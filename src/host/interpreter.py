"""Interpreter invocation for on-save diagnostics."""

from __future__ import annotations

import logging
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING

from utils import coerce_text

if TYPE_CHECKING:
    from pathlib import Path

    from settings.config import VibeConfig

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class InterpreterResult:
    returncode: int
    stderr: str

    @property
    def failed(self) -> bool:
        return self.returncode != 0

    @property
    def has_errors(self) -> bool:
        """True when the run failed and left something on stderr."""
        return self.failed and bool(self.stderr.strip())


def build_command(executable: str, path: Path, *, run_subcommand: bool) -> list[str]:
    if run_subcommand:
        return [executable, "run", str(path)]
    return [executable, str(path)]


def _drain(stream: IO[bytes], limit: int, buffer: bytearray) -> None:
    """Read ``stream`` into ``buffer`` until EOF or until ``limit`` is passed."""
    while len(buffer) <= limit:
        chunk = stream.read1(READ_CHUNK_SIZE)  # type: ignore[attr-defined]
        if not chunk:
            return
        buffer.extend(chunk)


def _stop(proc: subprocess.Popen[bytes]) -> None:
    proc.kill()
    proc.wait()


def run_interpreter(path: Path, config: VibeConfig) -> InterpreterResult | None:
    """Run the interpreter on ``path`` and capture its stderr.

    Returns None when no usable output exists: the binary cannot be started,
    the run exceeds ``timeout_seconds``, or stderr exceeds
    ``max_output_bytes``. In the last two cases the child is killed at once.
    Callers treat None as "no diagnostics available".
    """
    settings = config.diagnostics
    command = build_command(
        config.executable_path, path, run_subcommand=settings.run_subcommand
    )
    logger.debug("Running interpreter: %s", command)

    try:
        proc = subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        logger.warning(
            "Failed to start interpreter %r: %s", config.executable_path, exc
        )
        return None

    deadline = time.monotonic() + settings.timeout_seconds
    stderr = bytearray()
    with proc:
        assert proc.stderr is not None
        reader = threading.Thread(
            target=_drain,
            args=(proc.stderr, settings.max_output_bytes, stderr),
            name="vibe-stderr-reader",
            daemon=True,
        )
        reader.start()
        reader.join(settings.timeout_seconds)

        if reader.is_alive():
            _stop(proc)
            reader.join(timeout=1)
            logger.warning(
                "Interpreter timed out after %ss: %s", settings.timeout_seconds, path
            )
            return None

        if len(stderr) > settings.max_output_bytes:
            _stop(proc)
            logger.warning(
                "Interpreter output exceeded %d bytes: %s",
                settings.max_output_bytes,
                path,
            )
            return None

        try:
            returncode = proc.wait(timeout=max(0.0, deadline - time.monotonic()))
        except subprocess.TimeoutExpired:
            _stop(proc)
            logger.warning(
                "Interpreter timed out after %ss: %s", settings.timeout_seconds, path
            )
            return None

    logger.debug("Interpreter exited with %d: %s", returncode, path)
    return InterpreterResult(returncode=returncode, stderr=coerce_text(bytes(stderr)))


def run_program(path: Path, config: VibeConfig) -> int:
    """Run ``path`` in the foreground and return the interpreter's exit code.

    The program shares this process's standard streams. No timeout or
    output cap applies. Raises OSError when the interpreter cannot start.
    """
    command = build_command(
        config.executable_path,
        path,
        run_subcommand=config.diagnostics.run_subcommand,
    )
    logger.debug("Running program: %s", command)
    return subprocess.run(command, check=False).returncode


__all__ = [
    "InterpreterResult",
    "build_command",
    "run_interpreter",
    "run_program",
]
