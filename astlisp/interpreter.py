from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Iterator, TextIO

from astlisp.builtin.env_builtin import make_global_env
from astlisp.evaluation.evaluator import evaluate
from astlisp.reader.decoder import decode_program
from astlisp.types.ast_node import AstNode
from astlisp.types.environment import Environment
from astlisp.types.values import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Decodes astlisp programs and evaluates their top-level nodes in order.
    Holds one immutable global Environment that every evaluation shares.
    """

    def __init__(
        self,
        env: Environment | None = None,
        eval_fn: Callable[[AstNode, Environment], Value] | None = None,
    ):
        self.env: Environment = env if env is not None else make_global_env()
        self.eval_fn = eval_fn or evaluate

    def run(self, nodes: Iterable[AstNode]) -> Iterator[Value]:
        """Yield one value per node, in order.

        The first error propagates out of the generator and no later node is
        evaluated.
        """
        for i, node in enumerate(nodes):
            logger.debug("Evaluating top-level node %d", i)
            yield self.eval_fn(node, self.env)

    def eval(self, data: str | bytes) -> list[Value]:
        """Decode and evaluate a whole program, returning every result."""
        return list(self.run(decode_program(data)))


def read_input(path: str | None = None, stream: TextIO | None = None) -> str | bytes | None:
    """Read a program from `path`, or concatenate all lines of `stream` (stdin).

    Files are read as bytes so that bad UTF-8 surfaces as BadInput from the
    decoder. Returns None when there is no input at all, which callers treat
    as "no work" rather than as a decode failure.
    """
    if path is not None:
        with open(path, "rb") as fh:
            content = fh.read()
    else:
        stream = stream if stream is not None else sys.stdin
        content = "".join(line for line in stream)
    if not content:
        return None
    return content
