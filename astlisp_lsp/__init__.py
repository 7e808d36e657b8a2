"""astlisp Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for astlisp JSON programs.
- A lightweight indexer that finds symbol references in document text.
- A simple TCP REPL server to evaluate programs via the Interpreter.
"""

__all__ = [
    "server",
    "diagnostics",
    "indexer",
    "repl_server",
]
