"""Tests for binary arithmetic and the promotion matrix."""

import operator

import pytest

from exactreal.core.errors import InvalidRealError
from exactreal.math import (
    ADD,
    DIVIDE,
    MULTIPLY,
    SUBTRACT,
    Fraction,
    Integer,
    Irrational,
    Rational,
    Unset,
    combine,
)

BINARY_OPERATORS = [operator.add, operator.sub, operator.mul, operator.truediv]


class TestIntegerArithmetic:
    """Integer op Integer stays Integer wherever the result is exact."""

    @pytest.mark.parametrize(
        "op,expected",
        [
            (operator.add, Integer(10)),
            (operator.sub, Integer(4)),
            (operator.mul, Integer(21)),
        ],
    )
    def test_closed_operations(self, op, expected):
        """Test that +, - and * keep Integers."""
        assert op(Integer(7), Integer(3)) == expected

    def test_exact_division_stays_integer(self):
        """Test that 6 / 3 is Integer(2)."""
        assert Integer(6) / Integer(3) == Integer(2)

    def test_negative_exact_division(self):
        """Test exact division with mixed signs."""
        assert Integer(-6) / Integer(3) == Integer(-2)

    def test_inexact_division_becomes_rational(self):
        """Test that 7 / 2 is the Rational 7/2."""
        result = Integer(7) / Integer(2)
        assert isinstance(result, Rational)
        assert not result.value.is_negative
        assert result.value.numerator == 7
        assert result.value.denominator == 2

    @pytest.mark.parametrize(
        "lhs,rhs,negative",
        [(-7, 2, True), (7, -2, True), (-7, -2, False)],
    )
    def test_inexact_division_sign(self, lhs, rhs, negative):
        """Test that the fraction sign is the xor of the operand signs."""
        result = Integer(lhs) / Integer(rhs)
        assert result.value.is_negative is negative
        assert (result.value.numerator, result.value.denominator) == (abs(lhs), abs(rhs))

    def test_inexact_division_is_unreduced(self):
        """Test that 6 / 4 keeps |lhs| and |rhs| but equals 3/2 in value."""
        result = Integer(6) / Integer(4)
        assert (result.value.numerator, result.value.denominator) == (6, 4)
        assert result.exactly_equals(Rational(Fraction.of(3, 2)))


class TestPromotionMatrix:
    """Each cell of the promotion matrix yields the widest operand type."""

    SAMPLES = [Integer(3), Rational(Fraction.of(1, 2)), Irrational(0.25)]

    @pytest.mark.parametrize("op", [operator.add, operator.sub, operator.mul])
    @pytest.mark.parametrize("lhs", SAMPLES)
    @pytest.mark.parametrize("rhs", SAMPLES)
    def test_result_is_widest_type(self, op, lhs, rhs):
        """Test result precedence for every pair of variants."""
        result = op(lhs, rhs)
        assert result.type_precedence == max(lhs.type_precedence, rhs.type_precedence)

    @pytest.mark.parametrize("op", BINARY_OPERATORS)
    @pytest.mark.parametrize("lhs", SAMPLES)
    def test_irrational_widens(self, op, lhs):
        """Test that any operation with an Irrational is Irrational."""
        assert isinstance(op(lhs, Irrational(0.5)), Irrational)
        assert isinstance(op(Irrational(0.5), lhs), Irrational)

    def test_rational_plus_rational(self):
        """Test Fraction + Fraction."""
        result = Rational(Fraction.of(1, 2)) + Rational(Fraction.of(1, 3))
        assert result == Rational(Fraction.of(5, 6))

    def test_rational_plus_integer(self):
        """Test Fraction + whole number."""
        assert Rational(Fraction.of(1, 2)) + Integer(1) == Rational(Fraction.of(3, 2))

    def test_integer_minus_rational(self):
        """Test whole number - Fraction."""
        assert Integer(1) - Rational(Fraction.of(1, 4)) == Rational(Fraction.of(3, 4))

    def test_rational_divided_by_integer(self):
        """Test Fraction / whole number."""
        assert Rational(Fraction.of(3, 4)) / Integer(3) == Rational(Fraction.of(1, 4))

    def test_irrational_values(self):
        """Test the float cells compute the right values."""
        assert Irrational(0.5) + Rational(Fraction.of(1, 2)) == Irrational(1.0)
        assert Integer(3) * Irrational(0.5) == Irrational(1.5)
        assert Rational(Fraction.of(1, 4)) - Irrational(0.25) == Irrational(0.0)

    def test_halves_sum_stays_rational(self, one_half):
        """Test that 1/2 + 1/2 is a whole-number Rational, not an Integer."""
        result = one_half + one_half
        assert isinstance(result, Rational)
        assert result == Rational(Fraction.from_whole_number(1))
        assert result.is_whole_number()
        assert result.as_whole_number() == 1
        assert result.normalized() == Integer(1)

    def test_operands_unchanged(self, one_half):
        """Test that arithmetic never mutates its inputs."""
        lhs = Integer(5)
        lhs + one_half
        assert lhs == Integer(5)
        assert one_half == Rational(Fraction.of(1, 2))


class TestCombine:
    """Test the combine() entry point directly."""

    def test_combine_with_table(self):
        """Test calling combine() with an operator table."""
        assert combine(Integer(2), Integer(3), ADD) == Integer(5)
        assert combine(Integer(2), Integer(3), SUBTRACT) == Integer(-1)
        assert combine(Integer(2), Integer(3), MULTIPLY) == Integer(6)
        assert combine(Integer(2), Integer(3), DIVIDE) == Rational(
            Fraction(numerator=2, denominator=3)
        )

    @pytest.mark.parametrize("op", BINARY_OPERATORS)
    def test_unset_lhs_raises(self, op, unset):
        """Test that an Unset left operand is rejected."""
        with pytest.raises(InvalidRealError):
            op(unset, Integer(1))

    @pytest.mark.parametrize("op", BINARY_OPERATORS)
    def test_unset_rhs_raises(self, op, unset):
        """Test that an Unset right operand is rejected."""
        with pytest.raises(InvalidRealError):
            op(Rational(Fraction.of(1, 2)), unset)

    def test_unset_error_details(self, unset):
        """Test that the error names the operand and operation."""
        with pytest.raises(InvalidRealError) as exc_info:
            combine(Integer(1), unset, MULTIPLY)
        assert exc_info.value.details == {"operand": "Unset()", "operation": "multiply"}

    @pytest.mark.parametrize(
        "zero",
        [Integer(0), Rational(Fraction.of(0, 3)), Irrational(0.0)],
    )
    @pytest.mark.parametrize(
        "lhs",
        [Integer(1), Rational(Fraction.of(1, 2)), Irrational(1.5)],
    )
    def test_division_by_zero_raises(self, lhs, zero):
        """Test that division by any zero is a defined error."""
        with pytest.raises(InvalidRealError, match="Division by zero"):
            lhs / zero

    def test_overflow_raises(self):
        """Test that float overflow does not produce infinity."""
        with pytest.raises(InvalidRealError):
            Irrational(1e308) * Integer(10)

    @pytest.mark.parametrize("op", BINARY_OPERATORS)
    def test_huge_integer_with_irrational_raises(self, op):
        """Test that an exact value beyond float range cannot widen to Irrational."""
        huge = Integer(10**400)
        with pytest.raises(InvalidRealError, match="too large for a float"):
            op(huge, Irrational(1.0))
        with pytest.raises(InvalidRealError, match="too large for a float"):
            op(Irrational(1.0), huge)

    def test_huge_values_stay_exact(self):
        """Test that exact arithmetic is unaffected by float range."""
        huge = Integer(10**400)
        assert huge + Integer(1) == Integer(10**400 + 1)
        assert (huge + Rational(Fraction.of(1, 2))).exactly_equals(
            Rational(Fraction.of(2 * 10**400 + 1, 2))
        )


class TestPythonOperands:
    """Test mixing Reals with Python numbers."""

    def test_int_operands(self):
        """Test that ints act as Integers."""
        assert Integer(2) + 3 == Integer(5)
        assert 10 - Integer(4) == Integer(6)
        assert 1 / Integer(2) == Rational(Fraction(numerator=1, denominator=2))

    def test_float_operands(self):
        """Test that floats act as Irrationals."""
        assert Integer(2) * 0.5 == Irrational(1.0)

    def test_unsupported_operand(self):
        """Test that other types are rejected."""
        with pytest.raises(TypeError):
            Integer(2) + "3"
