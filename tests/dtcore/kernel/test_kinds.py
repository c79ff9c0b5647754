import pytest

from dtcore.kernel.ast import (
    Add,
    Command,
    ExprKind,
    F64,
    F64Lit,
    Let,
    Sole,
    Trivial,
    U,
    Var,
)
from dtcore.kernel.kinds import get_kinds, placeholder
from dtcore.kernel.typing import check
from dtcore.kernel.value import VCommand, VF64, VTrivial, VU


def test_get_kinds_for_float() -> None:
    assert get_kinds(VF64()) == [ExprKind.Var, ExprKind.F64Lit]


def test_get_kinds_for_lowest_universe() -> None:
    assert get_kinds(VU(0)) == [ExprKind.Var]


def test_get_kinds_for_higher_universe() -> None:
    assert get_kinds(VU(2)) == [ExprKind.Var, ExprKind.U]


def test_get_kinds_for_trivial() -> None:
    assert get_kinds(VTrivial()) == [ExprKind.Var, ExprKind.Sole]


def test_get_kinds_for_commands() -> None:
    assert get_kinds(VCommand(VTrivial())) == [ExprKind.Var, ExprKind.Let]
    assert get_kinds(VCommand(VF64())) == [ExprKind.Var]


def test_get_kinds_is_stable() -> None:
    assert get_kinds(VF64()) == get_kinds(VF64())


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (ExprKind.Add, Add(F64Lit(0.0), F64Lit(0.0))),
        (ExprKind.Command, Command(Trivial())),
        (ExprKind.F64, F64()),
        (ExprKind.F64Lit, F64Lit(0.0)),
        (ExprKind.Let, Let("", Trivial(), Sole())),
        (ExprKind.Trivial, Trivial()),
        (ExprKind.Sole, Sole()),
        (ExprKind.U, U(0)),
        (ExprKind.Var, Var("")),
    ],
)
def test_placeholder(kind: ExprKind, expected: object) -> None:
    assert placeholder(kind) == expected
    assert placeholder(kind).kind is kind


def test_universe_placeholder_fits_expected_type() -> None:
    assert placeholder(ExprKind.U, VU(3)) == U(2)
    check(placeholder(ExprKind.U, VU(3)), VU(3))


@pytest.mark.parametrize("ty", [VF64(), VTrivial(), VCommand(VTrivial()), VU(4)])
def test_non_var_placeholders_are_well_typed(ty: object) -> None:
    for kind in get_kinds(ty):
        if kind is not ExprKind.Var:
            check(placeholder(kind, ty), ty)
