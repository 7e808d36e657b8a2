"""Core evaluator for the astlisp interpreter.

A plain depth-first walk over the AST. Numbers evaluate to themselves, symbols
are looked up in the environment, and lists are either a special form (chosen
by a literal head symbol) or an application of the first element's value to
the values of the rest. Errors propagate out untouched; nothing here catches.
"""

from __future__ import annotations

from astlisp.errors import IncorrectNumberOfArguments, UnableToEvaluateASTNode
from astlisp.types.ast_node import AstNode, ListNode, NumberNode, SymbolNode
from astlisp.types.environment import Environment
from astlisp.types.values import Number, Value
from astlisp.evaluation.apply import apply
from astlisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(node: AstNode, env: Environment) -> Value:
    """Evaluate a single AST node against `env`."""
    match node:
        case NumberNode(value=v):
            return Number(v)

        case SymbolNode(name=name):
            return env.lookup(name)

        case ListNode(elements=()):
            # an empty list has no head to apply
            raise IncorrectNumberOfArguments([])

        case ListNode(elements=[head, *tail]):
            # --- Special forms handling ---
            if isinstance(head, SymbolNode) and head.name in SPECIAL_FORMS:
                return SPECIAL_FORMS[head.name](tail, env, evaluate)

            values = [evaluate(e, env) for e in node.elements]
            return apply(values[0], values[1:])

    raise UnableToEvaluateASTNode(node)
