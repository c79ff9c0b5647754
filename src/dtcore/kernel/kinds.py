"""Which expression kinds an editor may offer at a given expected type."""

from __future__ import annotations

from dtcore.kernel.ast import (
    Add,
    Command,
    Expr,
    ExprKind,
    F64,
    F64Lit,
    Let,
    Sole,
    Trivial,
    U,
    Var,
)
from dtcore.kernel.value import Type, VCommand, VF64, VTrivial, VU


def get_kinds(ty: Type) -> list[ExprKind]:
    """Return the kinds legal at ``ty``, default choice first."""

    kinds = [ExprKind.Var]
    match ty:
        case VCommand(result) if result.quote() == Trivial():
            kinds.append(ExprKind.Let)
        case VF64():
            kinds.append(ExprKind.F64Lit)
        case VTrivial():
            kinds.append(ExprKind.Sole)
        case VU(i) if i > 0:
            kinds.append(ExprKind.U)
    return kinds


def placeholder(kind: ExprKind, ty: Type | None = None) -> Expr:
    """Return the expression an editor installs when ``kind`` is first picked."""

    match kind:
        case ExprKind.Add:
            return Add(F64Lit(0.0), F64Lit(0.0))
        case ExprKind.Command:
            return Command(Trivial())
        case ExprKind.F64:
            return F64()
        case ExprKind.F64Lit:
            return F64Lit(0.0)
        case ExprKind.Let:
            return Let("", Trivial(), Sole())
        case ExprKind.Trivial:
            return Trivial()
        case ExprKind.Sole:
            return Sole()
        case ExprKind.U:
            # Largest universe that still fits below the expected one.
            if isinstance(ty, VU) and ty.level > 0:
                return U(ty.level - 1)
            return U(0)
        case ExprKind.Var:
            return Var("")

    raise TypeError(f"Unexpected expression kind: {kind!r}")


__all__ = ["get_kinds", "placeholder"]
