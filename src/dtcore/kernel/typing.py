"""Bidirectional type checking for the core calculus.

``check`` handles the forms whose type can be validated directly against the
expected type. Everything else falls back to ``infer`` followed by comparison
of the quoted normal forms.
"""

from __future__ import annotations

import logging

from dtcore.errors import CannotInfer, TypeMismatch, UnboundVariable
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
from dtcore.kernel.env import Ctx, Env
from dtcore.kernel.eval import eval_expr
from dtcore.kernel.levels import MAX_LEVEL, level_lt
from dtcore.kernel.value import Type, VCommand, VF64, VTrivial, VU

logger = logging.getLogger(__name__)


def type_equal(t1: Type, t2: Type) -> bool:
    """Return ``True`` when ``t1`` and ``t2`` quote to the same expression."""

    return t1.quote() == t2.quote()


def check(
    expr: Expr, ty: Type, ctx: Ctx | None = None, env: Env | None = None
) -> None:
    """Check that ``expr`` has type ``ty``, raising on mismatches."""

    ctx = ctx or Ctx()
    env = env or Env()
    logger.debug("check %s : %s", expr, ty)
    match expr, ty:
        case Command(body), VU():
            check(body, ty, ctx, env)
            return
        case F64(), VU():
            return
        case F64Lit(), VF64():
            return
        case Let(name, value, body), VCommand(result):
            if result.quote() != Trivial():
                raise TypeMismatch(result.quote(), Trivial())
            check(value, VU(MAX_LEVEL), ctx, env)
            bound = eval_expr(value, env)
            logger.debug("let %s = %s", name, bound)
            check(
                body,
                bound,
                ctx.extend(name, VU(MAX_LEVEL)),
                env.extend(name, bound),
            )
            return
        case Trivial(), VU():
            return
        case Sole(), VTrivial():
            return
        case U(i), VU(j) if level_lt(i, j):
            return

    _check_against_inferred(expr, ty, ctx, env)


def _check_against_inferred(expr: Expr, ty: Type, ctx: Ctx, env: Env) -> None:
    actual = infer(expr, ctx, env).quote()
    expected = ty.quote()
    logger.debug("compare %s against %s", actual, expected)
    if actual != expected:
        raise TypeMismatch(actual, expected)


def infer(expr: Expr, ctx: Ctx | None = None, env: Env | None = None) -> Type:
    """Infer the type of ``expr`` under ``ctx``."""

    ctx = ctx or Ctx()
    env = env or Env()
    match expr:
        case Add(lhs, rhs):
            ty = VF64()
            check(lhs, ty, ctx, env)
            check(rhs, ty, ctx, env)
            return ty
        case Var(name):
            try:
                return ctx[name]
            except KeyError:
                raise UnboundVariable(name) from None

    raise CannotInfer(expr)


__all__ = ["check", "infer", "type_equal"]
