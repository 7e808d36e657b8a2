import pytest

from astlisp.builtin.env_builtin import add, sub, lt, gt
from astlisp.errors import IncorrectNumberOfArguments, UnexpectedArgumentType
from astlisp.types.values import Boolean, NoValue, Number

T = Boolean(True)
F = Boolean(False)


def nums(*xs):
    return [Number(float(x)) for x in xs]


@pytest.mark.parametrize(
    "fn,args,expected",
    [
        (add, [], Number(0.0)),
        (add, nums(2, 3), Number(5.0)),
        (add, nums(1, 2.5, 3), Number(6.5)),
        (add, nums(-1, 5, -3), Number(1.0)),
        (sub, nums(5), Number(-5.0)),
        (sub, nums(10, 3, 2), Number(5.0)),
        (sub, nums(-10, -5), Number(-5.0)),
        (sub, nums(1, 0.5), Number(0.5)),
        (lt, nums(1, 2, 3), T),
        (lt, nums(1, 1), F),
        (lt, nums(3, 2), F),
        (lt, [], T),
        (lt, nums(7), T),
        (gt, nums(3, 2, 1), T),
        (gt, nums(1, 1), F),
        (gt, nums(1, 2), F),
        (gt, [], T),
        (gt, nums(7), T),
    ],
)
def test_builtin_results(fn, args, expected):
    assert fn(args) == expected


@pytest.mark.parametrize(
    "fn,args,bad",
    [
        (add, [Number(1.0), T], T),
        (add, [NoValue], NoValue),
        (sub, [T], T),
        (sub, [Number(10.0), F], F),
        (lt, [T], T),
        (gt, [Number(1.0), NoValue], NoValue),
        # the type check covers every argument, even past an ordering violation
        (lt, [Number(3.0), Number(1.0), T], T),
        (gt, [Number(1.0), Number(3.0), F], F),
    ],
)
def test_builtin_argument_types(fn, args, bad):
    with pytest.raises(UnexpectedArgumentType) as exc:
        fn(args)
    assert exc.value.value == bad


def test_add_reports_first_bad_argument():
    with pytest.raises(UnexpectedArgumentType) as exc:
        add([Number(1.0), T, F])
    assert exc.value.value == T


def test_sub_requires_an_argument():
    with pytest.raises(IncorrectNumberOfArguments) as exc:
        sub([])
    assert exc.value.args_given == []


def test_sub_negation_of_zero():
    assert sub(nums(0)) == Number(0.0)
    assert str(sub(nums(0))) == "0"
