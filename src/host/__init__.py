"""Host integration: diagnostics store, interpreter runs and server discovery."""

from host.interpreter import InterpreterResult, build_command, run_interpreter
from host.server import find_language_server, server_command
from host.session import EditorSession
from host.store import DiagnosticStore

__all__ = [
    "DiagnosticStore",
    "EditorSession",
    "InterpreterResult",
    "build_command",
    "find_language_server",
    "run_interpreter",
    "server_command",
]
