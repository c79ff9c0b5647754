"""Abstract syntax tree nodes for the core calculus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from dtcore.errors import ParseError
from dtcore.kernel.levels import Level, check_level

if TYPE_CHECKING:
    from dtcore.kernel.env import Ctx, Env
    from dtcore.kernel.value import Type, Value


class ExprKind(Enum):
    """Tag of an ``Expr`` constructor, used by editors to enumerate choices."""

    Add = "Add"
    Command = "Command"
    F64 = "F64"
    F64Lit = "F64Lit"
    Let = "Let"
    Trivial = "Trivial"
    Sole = "Sole"
    U = "U"
    Var = "Var"

    @classmethod
    def parse(cls, text: str) -> ExprKind:
        if isinstance(text, str):
            try:
                return cls(text)
            except ValueError:
                pass
        raise ParseError(f"Not a valid ExprKind: {text!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Expr:
    """Base class for all expressions."""

    @property
    def kind(self) -> ExprKind:
        return ExprKind[type(self).__name__]

    # --- Typing ---------------------------------------------------------------
    def check(self, ty: Type, ctx: Ctx | None = None, env: Env | None = None) -> None:
        from dtcore.kernel.typing import check

        check(self, ty, ctx, env)

    def infer(self, ctx: Ctx | None = None, env: Env | None = None) -> Type:
        from dtcore.kernel.typing import infer

        return infer(self, ctx, env)

    # --- Evaluation -----------------------------------------------------------
    def eval(self, env: Env | None = None) -> Value:
        from dtcore.kernel.eval import eval_expr

        return eval_expr(self, env)

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        # Deferred import avoids cycles when pretty-printing dataclass reprs.
        from dtcore.kernel.pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Add(Expr):
    """Binary float addition."""

    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class Command(Expr):
    """An effectful computation whose result type is ``body``."""

    body: Expr


@dataclass(frozen=True)
class F64(Expr):
    """The type of 64-bit floats."""


@dataclass(frozen=True)
class F64Lit(Expr):
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Let(Expr):
    """Sequential binding ``let(name, value, body)``.

    ``value`` is checked as a type; ``name`` is bound to its value while
    ``body`` is checked and evaluated.
    """

    name: str
    value: Expr
    body: Expr


@dataclass(frozen=True)
class Trivial(Expr):
    """The unit type."""


@dataclass(frozen=True)
class Sole(Expr):
    """The unique inhabitant of ``Trivial``."""


@dataclass(frozen=True)
class U(Expr):
    """The universe ``U(level)``."""

    level: Level = 0

    def __post_init__(self) -> None:
        check_level(self.level)


@dataclass(frozen=True)
class Var(Expr):
    """A variable reference, resolved by name."""

    name: str


__all__ = [
    "Expr",
    "ExprKind",
    "Add",
    "Command",
    "F64",
    "F64Lit",
    "Let",
    "Trivial",
    "Sole",
    "U",
    "Var",
]
