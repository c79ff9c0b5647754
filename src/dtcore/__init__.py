"""Core calculus facade: syntax, values, checking, evaluation and display."""

from dtcore.errors import (
    CannotInfer,
    EvalError,
    EvalTypeMismatch,
    EvalUnboundVariable,
    ParseError,
    TypeMismatch,
    UnboundVariable,
)
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
from dtcore.kernel.env import Ctx, Env
from dtcore.kernel.eval import eval_expr
from dtcore.kernel.kinds import get_kinds, placeholder
from dtcore.kernel.levels import MAX_LEVEL
from dtcore.kernel.pretty import pretty
from dtcore.kernel.typing import check, infer, type_equal
from dtcore.kernel.value import (
    Type,
    VCommand,
    VF64,
    VF64Lit,
    VLet,
    VSole,
    VTrivial,
    VU,
    Value,
)
from dtcore.surface.parse import parse_expr

__all__ = [
    "Add",
    "CannotInfer",
    "Command",
    "Ctx",
    "Env",
    "EvalError",
    "EvalTypeMismatch",
    "EvalUnboundVariable",
    "Expr",
    "ExprKind",
    "F64",
    "F64Lit",
    "Let",
    "MAX_LEVEL",
    "ParseError",
    "Sole",
    "Trivial",
    "Type",
    "TypeMismatch",
    "U",
    "UnboundVariable",
    "VCommand",
    "VF64",
    "VF64Lit",
    "VLet",
    "VSole",
    "VTrivial",
    "VU",
    "Value",
    "Var",
    "check",
    "eval_expr",
    "get_kinds",
    "infer",
    "parse_expr",
    "placeholder",
    "pretty",
    "type_equal",
]
