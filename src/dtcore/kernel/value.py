"""Values: the normal forms produced by evaluation.

Types and values share this representation, so a type can be the result of
evaluating an expression.
"""

from __future__ import annotations

from dataclasses import dataclass

from dtcore.kernel.ast import (
    Command,
    Expr,
    F64,
    F64Lit,
    Let,
    Sole,
    Trivial,
    U,
)
from dtcore.kernel.levels import Level, check_level


@dataclass(frozen=True)
class Value:
    """Base class for values. Values never contain ``Add`` or ``Var``."""

    def quote(self) -> Expr:
        """Read the value back as syntax."""
        raise TypeError(f"Unexpected value in quote:\n  value = {self!r}")

    def __str__(self) -> str:
        return str(self.quote())


@dataclass(frozen=True)
class VCommand(Value):
    body: Value

    def quote(self) -> Expr:
        return Command(self.body.quote())


@dataclass(frozen=True)
class VF64(Value):
    def quote(self) -> Expr:
        return F64()


@dataclass(frozen=True)
class VF64Lit(Value):
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def quote(self) -> Expr:
        return F64Lit(self.value)


@dataclass(frozen=True)
class VLet(Value):
    name: str
    value: Value
    body: Value

    def quote(self) -> Expr:
        return Let(self.name, self.value.quote(), self.body.quote())


@dataclass(frozen=True)
class VTrivial(Value):
    def quote(self) -> Expr:
        return Trivial()


@dataclass(frozen=True)
class VSole(Value):
    def quote(self) -> Expr:
        return Sole()


@dataclass(frozen=True)
class VU(Value):
    level: Level = 0

    def __post_init__(self) -> None:
        check_level(self.level)

    def quote(self) -> Expr:
        return U(self.level)


type Type = Value


__all__ = [
    "Type",
    "Value",
    "VCommand",
    "VF64",
    "VF64Lit",
    "VLet",
    "VTrivial",
    "VSole",
    "VU",
]
