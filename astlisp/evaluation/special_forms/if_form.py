from __future__ import annotations

from typing import Sequence

from astlisp import EvaluatorFn
from astlisp.errors import IncorrectNumberOfArguments
from astlisp.types.ast_node import AstNode
from astlisp.types.environment import Environment
from astlisp.types.values import NoValue, Value, is_truthy


def if_form(
    tail: Sequence[AstNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(if predicate consequent [alternative])

    Elements after the alternative are never evaluated or inspected.
    """
    if len(tail) < 1:
        raise IncorrectNumberOfArguments([])

    cond = evaluate_fn(tail[0], env)
    # Lisp truthiness: everything except #f is true, including 0
    if is_truthy(cond):
        if len(tail) < 2:
            raise IncorrectNumberOfArguments([])
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return NoValue
