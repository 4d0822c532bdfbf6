"""
Exponentiation and root extraction for Reals.

Powers stay exact whenever they can:

- Integer and Rational bases raised to Integer exponents use exact integer
  or fraction powers.
- A Rational exponent p/q is applied as root_q(x^p): the exact power first,
  then an integer root search on numerator and denominator. Only if a root is
  not a whole number does the result fall back to an Irrational.
- Anything touching an Irrational is computed with float powers.

The integer root search is a linear scan over candidate roots, so its cost
grows with the size of the root. That is fine for answer-grading inputs but
not for very large integers.
"""

from __future__ import annotations

import math

from exactreal.core.errors import InvalidRealError
from exactreal.core.logging import get_logger

from .fraction import Fraction
from .real import Integer, Irrational, Rational, Real, Unset

logger = get_logger(__name__)


def integer_pow(base: int, exponent: int) -> Real:
    """
    Raise an integer to an integer power.

    Non-negative exponents give an Integer (x^0 is 1, including 0^0).
    Negative exponents give the Rational reciprocal power.

    Raises:
        InvalidRealError: for zero raised to a negative power
    """
    if exponent == 0:
        return Integer(1)
    if exponent == 1:
        return Integer(base)
    if exponent < 0:
        if base == 0:
            raise InvalidRealError(
                "Zero cannot be raised to a negative power", base=base, exponent=exponent
            )
        return Rational(Fraction.from_whole_number(base).pow(exponent))

    computed = base
    for _ in range(exponent - 1):
        computed *= base
    return Integer(computed)


def root(radicand: int, base: int) -> Real:
    """
    Compute the base-th root of an integer, exactly when possible.

    Args:
        radicand: The integer to root
        base: The root degree (2 for square root, 3 for cube root...)

    Returns:
        Integer if the root is a whole number, otherwise an Irrational
        approximation. Odd roots of negative radicands are negative.

    Raises:
        InvalidRealError: if base < 1, or for an even root of a negative radicand
    """
    if base < 1:
        raise InvalidRealError(f"Expected base of 1 or higher, not: {base}", base=base)
    if base == 1:
        return Integer(radicand)
    if radicand < 0 and base % 2 == 0:
        raise InvalidRealError(
            f"Radicand results in imaginary number: {radicand}", radicand=radicand, base=base
        )
    if radicand == 1:
        return Integer(1)

    target = abs(radicand)
    candidate = 0
    candidate_power = integer_pow(candidate, base).value
    while candidate_power < target:
        candidate += 1
        candidate_power = integer_pow(candidate, base).value

    if candidate_power == target:
        return Integer(-candidate if radicand < 0 else candidate)

    logger.debug(
        "No exact integer root, approximating",
        extra={"extra_data": {"radicand": radicand, "base": base}},
    )
    if base == 2:
        approximation = math.sqrt(target)
    else:
        approximation = target ** (1.0 / base)
    return Irrational.of(-approximation if radicand < 0 else approximation)


def root_fraction(fraction: Fraction, base: int, invert: bool = False) -> Real:
    """
    Compute the base-th root of a fraction, optionally of its reciprocal.

    The numerator and denominator are rooted independently. If both roots are
    whole numbers the result is an exact Rational in proper form; otherwise
    it is the Irrational quotient of the two roots.

    Raises:
        InvalidRealError: for invalid roots (see root()) or inverting zero
    """
    improper = fraction.to_improper_form()
    numerator = -improper.numerator if improper.is_negative else improper.numerator
    denominator = improper.denominator
    if invert:
        if numerator == 0:
            raise InvalidRealError(
                "Zero cannot be raised to a negative power", fraction=str(fraction)
            )
        numerator, denominator = denominator, numerator

    rooted_numerator = root(numerator, base)
    rooted_denominator = root(denominator, base)
    if isinstance(rooted_numerator, Integer) and isinstance(rooted_denominator, Integer):
        return Rational(Fraction.of(rooted_numerator.value, rooted_denominator.value))

    # One or both components can't be rooted exactly
    return Irrational.of(rooted_numerator.to_float() / rooted_denominator.to_float())


def _float_pow(base: float, exponent: float) -> Real:
    try:
        result = base**exponent
    except ZeroDivisionError as e:
        raise InvalidRealError(
            "Zero cannot be raised to a negative power", base=base, exponent=exponent
        ) from e
    except OverflowError as e:
        raise InvalidRealError(
            f"Power overflows: {base} ** {exponent}", base=base, exponent=exponent
        ) from e
    if isinstance(result, complex):
        raise InvalidRealError(
            f"Power results in imaginary number: {base} ** {exponent}",
            base=base,
            exponent=exponent,
        )
    return Irrational.of(result)


def pow(base: Real, exponent: Real) -> Real:
    """
    Raise a Real to a Real power.

    Dispatch by (base variant, exponent variant):

    - Integer ^ Integer: integer_pow()
    - Rational ^ Integer: exact fraction power, Rational
    - Integer/Rational ^ Rational: root_q(base^p) for exponent p/q, inverted for
      negative exponents. An Integer base whose root is whole stays Integer,
      so pow(-8, 1/3) is Integer(-2).
    - anything involving Irrational: float power, Irrational

    Raises:
        InvalidRealError: if either side is Unset, or the power is undefined
            (zero to a negative power, even root of a negative)
    """
    for operand in (base, exponent):
        if isinstance(operand, Unset) or not isinstance(operand, Real):
            raise InvalidRealError.for_operand(operand, "pow")

    if isinstance(base, Irrational) or isinstance(exponent, Irrational):
        return _float_pow(base.to_float(), exponent.to_float())

    if isinstance(exponent, Rational):
        power = exponent.value.to_improper_form()
        raised = base.as_fraction().pow(power.numerator)
        result = root_fraction(raised, power.denominator, invert=power.is_negative)
        if isinstance(base, Integer):
            return result.normalized()
        return result

    if isinstance(base, Rational):
        try:
            return Rational(base.value.pow(exponent.value))
        except ZeroDivisionError as e:
            raise InvalidRealError(
                "Zero cannot be raised to a negative power", exponent=exponent.value
            ) from e

    return integer_pow(base.value, exponent.value)


def sqrt(real: Real) -> Real:
    """
    Square root of a Real, exact when possible.

    Raises:
        InvalidRealError: if the value is Unset or negative
    """
    if isinstance(real, Rational):
        return root_fraction(real.value, base=2)
    if isinstance(real, Integer):
        return root(real.value, base=2)
    if isinstance(real, Irrational):
        if real.value < 0:
            raise InvalidRealError(
                f"Radicand results in imaginary number: {real.value}", radicand=real.value, base=2
            )
        return Irrational.of(math.sqrt(real.value))
    raise InvalidRealError.for_operand(real, "sqrt")
