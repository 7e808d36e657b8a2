from __future__ import annotations

from typing import Any


class AstLispError(Exception):
    """ Base class for all astlisp errors"""

    kind = "AstLispError"

    def describe(self) -> str:
        return f"{self.kind}: {self}"


class BadInput(AstLispError):
    """ Raised when the input is not valid JSON or not an array of valid nodes"""

    kind = "BadInput"

    def __init__(self, message: str, path: str = "$", lineno: int | None = None, colno: int | None = None):
        super().__init__(message)
        self.path = path
        # 1-based position of a JSON syntax error, when known
        self.lineno = lineno
        self.colno = colno


class EvalError(AstLispError):
    """ Base class for errors raised while evaluating a node"""

    kind = "EvalError"


class UnableToEvaluateASTNode(EvalError):
    """ Raised when a node matches none of the recognised node shapes"""

    kind = "UnableToEvaluateASTNode"

    def __init__(self, node: Any):
        super().__init__(f"Unable to evaluate AST node {node!r}")
        self.node = node


class SymbolNotFound(EvalError):
    """ Raised when a symbol has no binding in the environment"""

    kind = "SymbolNotFound"

    def __init__(self, name: str):
        super().__init__(f"Symbol not found: {name}")
        self.name = name


class UnexpectedArgumentType(EvalError):
    """ Raised when a builtin receives an argument of the wrong kind"""

    kind = "UnexpectedArgumentType"

    def __init__(self, value: Any):
        super().__init__(f"Unexpected argument type: {value!r}")
        self.value = value


class IncorrectNumberOfArguments(EvalError):
    """ Raised when a builtin or special form gets too few arguments"""

    kind = "IncorrectNumberOfArguments"

    def __init__(self, args: list | tuple = ()):
        super().__init__(f"Incorrect number of arguments: {list(args)!r}")
        self.args_given = list(args)


class NotAFunction(EvalError):
    """ Raised when the operator of an application is not callable"""

    kind = "NotAFunction"

    def __init__(self, value: Any):
        super().__init__(f"Cannot apply non-function {value!r}")
        self.value = value
