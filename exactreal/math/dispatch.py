"""
Promotion dispatcher for the binary operators + - * /.

Every binary operation goes through combine(), which looks the operand
variants up in a single promotion matrix:

    lhs \\ rhs   | Rational           | Irrational       | Integer
    ------------+--------------------+------------------+--------------------
    Rational    | Fraction∘Fraction  | float∘float      | Fraction∘whole
                | -> Rational        | -> Irrational    | -> Rational
    Irrational  | float∘float        | float∘float      | float∘float
                | -> Irrational      | -> Irrational    | -> Irrational
    Integer     | whole∘Fraction     | float∘float      | int∘int
                | -> Rational        | -> Irrational    | -> Integer (or Rational for /)

The result is the widest operand type (Irrational > Rational > Integer).
Only int∘int can stay Integer, and integer division demotes to Rational
when the divisor does not divide the dividend exactly.
"""

from __future__ import annotations

import operator
from typing import Callable, NamedTuple

from exactreal.core.errors import InvalidRealError

from .fraction import Fraction
from .real import Integer, Irrational, Rational, Real
from .value import TypePrecedence


class OperatorTable(NamedTuple):
    """The specialisations of one arithmetic operator for each value domain."""

    name: str
    fraction_op: Callable[[Fraction, Fraction], Fraction]
    float_op: Callable[[float, float], float]
    integer_op: Callable[[int, int], Real]
    rejects_zero_divisor: bool = False


def _integer_add(lhs: int, rhs: int) -> Real:
    return Integer(lhs + rhs)


def _integer_subtract(lhs: int, rhs: int) -> Real:
    return Integer(lhs - rhs)


def _integer_multiply(lhs: int, rhs: int) -> Real:
    return Integer(lhs * rhs)


def _integer_divide(lhs: int, rhs: int) -> Real:
    # Keep the integer when rhs divides lhs, otherwise keep precision as a fraction
    if lhs % rhs == 0:
        return Integer(lhs // rhs)
    return Rational(
        Fraction(
            is_negative=(lhs < 0) != (rhs < 0),
            numerator=abs(lhs),
            denominator=abs(rhs),
        )
    )


ADD = OperatorTable("add", operator.add, operator.add, _integer_add)
SUBTRACT = OperatorTable("subtract", operator.sub, operator.sub, _integer_subtract)
MULTIPLY = OperatorTable("multiply", operator.mul, operator.mul, _integer_multiply)
DIVIDE = OperatorTable(
    "divide", operator.truediv, operator.truediv, _integer_divide, rejects_zero_divisor=True
)


def _whole(value: int) -> Fraction:
    return Fraction.from_whole_number(value)


INTEGER = TypePrecedence.INTEGER
RATIONAL = TypePrecedence.RATIONAL
IRRATIONAL = TypePrecedence.IRRATIONAL

# (lhs precedence, rhs precedence) -> cell computing the result from the operands
_PROMOTION_MATRIX: dict[
    tuple[TypePrecedence, TypePrecedence], Callable[[OperatorTable, Real, Real], Real]
] = {
    (RATIONAL, RATIONAL): lambda op, a, b: Rational(op.fraction_op(a.value, b.value)),
    (RATIONAL, IRRATIONAL): lambda op, a, b: Irrational.of(op.float_op(a.to_float(), b.value)),
    (RATIONAL, INTEGER): lambda op, a, b: Rational(op.fraction_op(a.value, _whole(b.value))),
    (IRRATIONAL, RATIONAL): lambda op, a, b: Irrational.of(op.float_op(a.value, b.to_float())),
    (IRRATIONAL, IRRATIONAL): lambda op, a, b: Irrational.of(op.float_op(a.value, b.value)),
    (IRRATIONAL, INTEGER): lambda op, a, b: Irrational.of(op.float_op(a.value, b.to_float())),
    (INTEGER, RATIONAL): lambda op, a, b: Rational(op.fraction_op(_whole(a.value), b.value)),
    (INTEGER, IRRATIONAL): lambda op, a, b: Irrational.of(op.float_op(a.to_float(), b.value)),
    (INTEGER, INTEGER): lambda op, a, b: op.integer_op(a.value, b.value),
}


def _check_operand(operand: Real, table: OperatorTable) -> None:
    # Unset and foreign subclasses carry no precedence
    if not isinstance(operand, Real) or operand.type_precedence is None:
        raise InvalidRealError.for_operand(operand, table.name)


def combine(lhs: Real, rhs: Real, table: OperatorTable) -> Real:
    """
    Apply one arithmetic operator to two Reals with type promotion.

    Args:
        lhs: Left operand
        rhs: Right operand
        table: Operator specialisations (ADD, SUBTRACT, MULTIPLY or DIVIDE)

    Returns:
        A new Real typed by the promotion matrix

    Raises:
        InvalidRealError: if either operand is Unset, on division by zero, or
            when an exact operand is too large to mix with an Irrational
    """
    _check_operand(lhs, table)
    _check_operand(rhs, table)
    if table.rejects_zero_divisor and rhs._is_zero():
        raise InvalidRealError(
            f"Division by zero: {lhs!r} / {rhs!r}", lhs=repr(lhs), rhs=repr(rhs)
        )
    cell = _PROMOTION_MATRIX[(lhs.type_precedence, rhs.type_precedence)]
    return cell(table, lhs, rhs)
