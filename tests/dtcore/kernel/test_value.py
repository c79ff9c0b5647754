from dtcore.kernel.ast import Command, F64, F64Lit, Let, Sole, Trivial, U
from dtcore.kernel.value import VCommand, VF64, VF64Lit, VLet, VSole, VTrivial, VU


def test_quote_atoms() -> None:
    assert VF64().quote() == F64()
    assert VF64Lit(1.5).quote() == F64Lit(1.5)
    assert VTrivial().quote() == Trivial()
    assert VSole().quote() == Sole()
    assert VU(4).quote() == U(4)


def test_quote_nested_values() -> None:
    assert VCommand(VTrivial()).quote() == Command(Trivial())
    assert VLet("x", VF64(), VF64Lit(0.0)).quote() == Let("x", F64(), F64Lit(0.0))


def test_value_str_renders_quotation() -> None:
    assert str(VCommand(VTrivial())) == "Command(Trivial)"
    assert str(VF64Lit(3.0)) == "3"
