"""Exceptions raised by the checker, the evaluator and the parsers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dtcore.kernel.ast import Expr


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` into a source string."""

    start: int
    end: int

    @staticmethod
    def at(pos: int) -> Span:
        return Span(pos, pos)

    def extract(self, source: str) -> str:
        return source[self.start : self.end]


# --- Type checking -------------------------------------------------------------


@dataclass
class TypeMismatch(TypeError):
    """Inferred (or reduced) type disagrees with the expected type."""

    actual: Expr
    expected: Expr

    def __str__(self) -> str:
        return (
            "Type mismatch:\n"
            f"  actual = {self.actual}\n"
            f"  expected = {self.expected}"
        )


@dataclass
class UnboundVariable(TypeError):
    name: str

    def __str__(self) -> str:
        return f"Unbound variable {self.name!r}"


@dataclass
class CannotInfer(TypeError):
    """``infer`` was asked for a form that only has a checking rule."""

    expr: Expr

    def __str__(self) -> str:
        return f"Failed to infer a type:\n  term = {self.expr}"


# --- Evaluation ----------------------------------------------------------------


class EvalError(RuntimeError):
    """Evaluation reached a state a well-typed program never reaches."""


@dataclass
class EvalTypeMismatch(EvalError):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class EvalUnboundVariable(EvalError):
    name: str

    def __str__(self) -> str:
        return f"Unbound variable {self.name!r}"


# --- Parsing -------------------------------------------------------------------


@dataclass
class ParseError(ValueError):
    message: str
    span: Span | None = None
    source: str | None = None

    def __str__(self) -> str:
        if self.span is None:
            return self.message
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {self.span.start}:{self.span.end}: {snippet!r}"


__all__ = [
    "CannotInfer",
    "EvalError",
    "EvalTypeMismatch",
    "EvalUnboundVariable",
    "ParseError",
    "Span",
    "TypeMismatch",
    "UnboundVariable",
]
