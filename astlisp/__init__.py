# Core type aliases for astlisp.
# AST nodes (astlisp.types.ast_node) describe the program as decoded from JSON;
# values (astlisp.types.values) are what evaluation produces. The two never mix:
# a node is never a value and evaluation never returns a node.
#
# Naming guidance:
# - AstNode:   Use in decoder/evaluator code for program trees.
# - LispValue: Use in evaluator/runtime code for evaluated results.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias; see astlisp.types.values.Value for the closed union
LispValue = Any

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
