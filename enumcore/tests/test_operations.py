"""
Tests for arithmetic, bitwise and comparison operators on enum values.
"""
import pytest

from enumcore import TypeMismatchException, UnknownOpException
from enumcore.operations import Op, eval_binary, eval_unary
from enumcore.tests.utils import Color, IOMode, Status


def test_arithmetic_moves_between_members():
    """
    Test that adding and subtracting integers produces new instances of the same type.
    """
    assert (Color.Red + 1).equals(Color.Green)
    assert (Color.Blue - 2).equals(Color.Red)
    assert (Color.Red + 3).to_string() == "3"
    assert (Color.Blue - 3).value == -1
    assert isinstance(Color.Red + 3, Color)


def test_arithmetic_returns_new_instance():
    red = Color.Red
    same = red + 0
    assert same is not red
    assert same == red
    assert Color.Red.value == 0


def test_arithmetic_does_not_wrap():
    big = Color(2 ** 31 - 1) + 1
    assert big.value == 2 ** 31
    assert str(big) == "2147483648"


@pytest.mark.parametrize("operand", [Color.Green, True, 1.5, "1"])
def test_arithmetic_requires_plain_integer(operand):
    with pytest.raises(TypeError):
        Color.Red + operand  # pylint: disable=expression-not-assigned


def test_bitwise_operators():
    """
    Test that bitwise operators combine values and keep the enum type.
    """
    mode = IOMode.Read | IOMode.Async
    assert isinstance(mode, IOMode)
    assert mode.value == 5
    assert (mode & IOMode.Read) == IOMode.Read
    assert (mode ^ IOMode.Read) == IOMode.Async
    inverted = ~IOMode.Read
    assert isinstance(inverted, IOMode)
    assert inverted.value == -2


def test_includes():
    mode = IOMode.Read | IOMode.Async
    assert mode.includes(IOMode.Read)
    assert not mode.includes(IOMode.Write)
    assert IOMode.Async in mode
    assert IOMode.Write not in mode
    assert not IOMode(0).includes(getattr(IOMode, "None"))


def test_compare_is_total_order_by_value():
    assert Color.Red.compare(Color.Blue) < 0
    assert Color.Blue.compare(Color.Red) > 0
    assert Color.Blue.compare(Color.Blue) == 0
    assert Color.Red < Color.Green <= Color.Green < Color.Blue
    assert Color.Blue > Color.Red
    assert Color.Blue >= Color(2)
    assert sorted([Color.Blue, Color(7), Color.Red, Color.Green]) == [
        Color.Red, Color.Green, Color.Blue, Color(7)
    ]


def test_equality_follows_value():
    """
    Test that equality ignores which named member produced the value.
    """
    assert Status.Ok == Status.Success
    assert Status.Ok.equals(Status.Success)
    assert Status(0) == Status.Ok
    assert Color.Red != Color.Green
    # reflexive, symmetric, transitive
    a, b, c = Status.Ok, Status.Success, Status(0)
    assert a == a
    assert (a == b) and (b == a)
    assert (a == b) and (b == c) and (a == c)


def test_equality_with_other_types_is_false():
    assert Color.Red != IOMode(0)
    assert Color.Green != 1
    assert Color.Green != "Green"


def test_hash_matches_underlying_integer():
    assert hash(Color.Green) == hash(1)
    assert hash(Color(1)) == hash(Color.Green)
    assert len({Color(1), Color.Green, Color.Red}) == 2
    lookup = {Status.Ok: "ok"}
    assert lookup[Status.Success] == "ok"


@pytest.mark.parametrize(
    "operation",
    [
        lambda: IOMode.Read | Color.Green,
        lambda: IOMode.Read & Color.Green,
        lambda: IOMode.Read ^ Color.Green,
        lambda: IOMode.Read.includes(Color.Green),
        lambda: Color.Red < IOMode.Read,
        lambda: Color.Red >= IOMode.Read,
        lambda: Color.Red.compare(IOMode.Read),
        lambda: Color.Red.equals(IOMode.Read),
        lambda: IOMode.Read | 1,
    ],
)
def test_cross_type_operators_raise(operation):
    with pytest.raises(TypeMismatchException):
        operation()


def test_type_mismatch_details():
    with pytest.raises(TypeError) as excinfo:
        IOMode.Read | Color.Green  # pylint: disable=expression-not-assigned
    err = excinfo.value
    assert isinstance(err, TypeMismatchException)
    assert err.op == Op.OR_BITS
    assert err.left == "IOMode"
    assert err.right == "Color"
    assert "'|'" in str(err)


def test_unknown_operators_raise():
    with pytest.raises(UnknownOpException):
        eval_binary(Op.NOT_BITS, Color.Red, Color.Red)
    with pytest.raises(UnknownOpException):
        eval_unary(Op.ADD, Color.Red)
