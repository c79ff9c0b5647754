"""Pretty-printing utilities for expressions."""

from __future__ import annotations

import math
from decimal import Decimal

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

ATOM_PREC = 1
ADD_PREC = 0


def _maybe_paren(
    text: str, child_prec: int, parent_prec: int, *, allow_equal: bool
) -> str:
    if child_prec < parent_prec or (child_prec == parent_prec and not allow_equal):
        return f"({text})"
    return text


def format_f64(n: float) -> str:
    """Render ``n`` in shortest round-trip form, without exponent notation."""

    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    text = repr(n)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    # Integral values drop the fraction; "-0.0" keeps its sign as "-0".
    return text.removesuffix(".0")


def pretty(expr: Expr) -> str:
    """Return a human-friendly string for ``expr``.

    Addition is left-associative: ``(1 + 2) + 3`` prints as ``1 + 2 + 3``
    while ``1 + (2 + 3)`` keeps its parentheses.
    """

    def fmt(e: Expr) -> tuple[str, int]:
        match e:
            case Add(lhs, rhs):
                lhs_text, lhs_prec = fmt(lhs)
                rhs_text, rhs_prec = fmt(rhs)
                lhs_disp = _maybe_paren(lhs_text, lhs_prec, ADD_PREC, allow_equal=True)
                rhs_disp = _maybe_paren(
                    rhs_text, rhs_prec, ADD_PREC, allow_equal=False
                )
                return f"{lhs_disp} + {rhs_disp}", ADD_PREC
            case Command(body):
                return f"Command({pretty(body)})", ATOM_PREC
            case F64():
                return "F64", ATOM_PREC
            case F64Lit(n):
                return format_f64(n), ATOM_PREC
            case Let(name, value, body):
                return f"let({name}, {pretty(value)}, {pretty(body)})", ATOM_PREC
            case Trivial():
                return "Trivial", ATOM_PREC
            case Sole():
                return "sole", ATOM_PREC
            case U(level):
                return f"U({level})", ATOM_PREC
            case Var(name):
                return name, ATOM_PREC

        raise TypeError(f"Cannot pretty-print unknown term: {e!r}")

    return fmt(expr)[0]


__all__ = ["ADD_PREC", "ATOM_PREC", "format_f64", "pretty"]
