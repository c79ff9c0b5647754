"""Call-by-value evaluation of expressions to values."""

from __future__ import annotations

import logging

from dtcore.errors import EvalTypeMismatch, EvalUnboundVariable
from dtcore.kernel.ast import (
    Add,
    Command,
    Expr,
    F64,
    F64Lit,
    Let,
    Sole,
    Trivial,
    U,
    Var,
)
from dtcore.kernel.env import Env
from dtcore.kernel.value import (
    VCommand,
    VF64,
    VF64Lit,
    VSole,
    VTrivial,
    VU,
    Value,
)

logger = logging.getLogger(__name__)


def eval_expr(expr: Expr, env: Env | None = None) -> Value:
    """Reduce ``expr`` to a value under ``env``."""

    env = env or Env()
    match expr:
        case Add(lhs, rhs):
            left = eval_expr(lhs, env)
            right = eval_expr(rhs, env)
            match left, right:
                case VF64Lit(a), VF64Lit(b):
                    return VF64Lit(a + b)
            raise EvalTypeMismatch(f"Cannot add {left.quote()} to {right.quote()}")
        case Command(body):
            return VCommand(eval_expr(body, env))
        case F64():
            return VF64()
        case F64Lit(n):
            return VF64Lit(n)
        case Let(name, value, body):
            bound = eval_expr(value, env)
            logger.debug("let %s = %s", name, bound)
            return eval_expr(body, env.extend(name, bound))
        case Trivial():
            return VTrivial()
        case Sole():
            return VSole()
        case U(level):
            return VU(level)
        case Var(name):
            try:
                return env[name]
            except KeyError:
                raise EvalUnboundVariable(name) from None

    raise TypeError(f"Unexpected term in eval_expr: {expr!r}")


__all__ = ["eval_expr"]
