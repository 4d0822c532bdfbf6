"""
The Real value type: Integer, Rational, Irrational or Unset.

Real is a closed union. Each variant is a frozen pydantic model with a
``kind`` discriminator, so values are immutable, hashable, compare
structurally and serialize as tagged records:

    >>> Integer(3) + Rational(Fraction.of(1, 2))
    Rational(3 1/2)
    >>> real_to_record(Integer(3))
    {'kind': 'integer', 'value': 3}

Arithmetic never mutates its operands. Binary operators promote to the widest
operand type (see dispatch.py); powers and roots live in roots.py.
"""

from __future__ import annotations

import functools
import math
from typing import Annotated, Any, ClassVar, Literal, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, StrictInt, TypeAdapter

from exactreal.core.errors import InvalidRealError

from .fraction import Fraction
from .value import TypePrecedence, fuzzy_compare


class Real(BaseModel):
    """
    Base class shared by the four Real variants.

    Only Integer, Rational, Irrational and Unset are ever instantiated; code
    that consumes a Real checks the variant with isinstance() and treats
    Unset as an error unless documented otherwise.
    """

    model_config = ConfigDict(frozen=True)

    type_precedence: ClassVar[TypePrecedence | None] = None

    @classmethod
    def from_python(cls, value: Any) -> Real:
        """
        Convert a Python value to a Real.

        int becomes Integer, float becomes Irrational and Fraction becomes
        Rational. Reals are returned unchanged.
        """
        if isinstance(value, Real):
            return value
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to Real")
        if isinstance(value, int):
            return Integer(value)
        if isinstance(value, float):
            return Irrational.of(value)
        if isinstance(value, Fraction):
            return Rational(value)
        raise TypeError(f"Cannot convert {type(value)} to Real")

    # Variant predicates

    def is_rational(self) -> bool:
        return isinstance(self, Rational)

    def is_integer(self) -> bool:
        return isinstance(self, Integer)

    def is_irrational(self) -> bool:
        return isinstance(self, Irrational)

    def is_unset(self) -> bool:
        return isinstance(self, Unset)

    def is_whole_number(self) -> bool:
        """
        Whether the value is an exact whole number.

        Unlike the other accessors this never raises: Unset reports False so
        callers can probe optional values that were never filled in.
        """
        if isinstance(self, Integer):
            return True
        if isinstance(self, Rational):
            return self.value.is_only_whole_number()
        return False

    def is_negative(self) -> bool:
        """
        Whether the value is below zero.

        Raises:
            InvalidRealError: if the value is Unset
        """
        if isinstance(self, Rational):
            return self.value.is_negative
        if isinstance(self, (Irrational, Integer)):
            return self.value < 0
        raise InvalidRealError.for_operand(self, "is_negative")

    def _is_zero(self) -> bool:
        if isinstance(self, Integer):
            return self.value == 0
        if isinstance(self, Rational):
            return self.value.whole_number == 0 and self.value.numerator == 0
        if isinstance(self, Irrational):
            return self.value == 0.0
        raise InvalidRealError.for_operand(self)

    # Conversions

    def to_float(self) -> float:
        """
        Convert to Python float.

        Raises:
            InvalidRealError: if the value is Unset, or an exact value is too
                large to represent as a float
        """
        if isinstance(self, Irrational):
            return self.value
        try:
            if isinstance(self, Rational):
                return self.value.to_float()
            if isinstance(self, Integer):
                return float(self.value)
        except OverflowError as e:
            raise InvalidRealError(
                f"Value is too large for a float: {self!r}", operand=repr(self)
            ) from e
        raise InvalidRealError.for_operand(self, "to_float")

    def __float__(self) -> float:
        return self.to_float()

    def as_whole_number(self) -> int | None:
        """
        Return the value as an int if it is exactly whole, else None.

        Raises:
            InvalidRealError: if the value is Unset
        """
        if isinstance(self, Rational):
            return self.value.to_whole_number() if self.value.is_only_whole_number() else None
        if isinstance(self, Integer):
            return self.value
        if isinstance(self, Irrational):
            return None
        raise InvalidRealError.for_operand(self, "as_whole_number")

    def as_fraction(self) -> Fraction:
        """
        Return an exact value as a Fraction.

        Raises:
            InvalidRealError: for Irrational and Unset values
        """
        if isinstance(self, Rational):
            return self.value
        if isinstance(self, Integer):
            return Fraction.from_whole_number(self.value)
        raise InvalidRealError.for_operand(self, "as_fraction")

    def to_plain_text(self) -> str:
        """
        Render as plain numeric text.

        Rationals are rendered as improper fractions ("7/2", not "3 1/2")
        because mixed numbers are not valid standalone numeric syntax.
        Irrationals never use scientific notation. Unset renders as "".
        """
        if isinstance(self, Rational):
            return self.value.to_improper_form().to_answer_string()
        if isinstance(self, Irrational):
            return np.format_float_positional(self.value, trim="0")
        if isinstance(self, Integer):
            return str(self.value)
        return ""

    def __str__(self) -> str:
        return self.to_plain_text()

    def __repr__(self) -> str:
        if isinstance(self, Rational):
            return f"Rational({self.value.to_answer_string()})"
        return f"{self.__class__.__name__}({self.to_plain_text()})"

    def normalized(self) -> Real:
        """Demote a whole-number Rational to Integer; other values are returned as-is."""
        if isinstance(self, Rational) and self.value.is_only_whole_number():
            return Integer(self.value.to_whole_number())
        return self

    # Comparison

    def is_approximately_equal_to(self, value: float) -> bool:
        """Whether to_float() matches value within the configured tolerance."""
        return fuzzy_compare(self.to_float(), value)

    def is_approximately_zero(self) -> bool:
        return self.is_approximately_equal_to(0.0)

    def exactly_equals(self, other: Real) -> bool:
        """
        Value equality across variants.

        Integer and Rational compare exactly (Integer(2) equals Rational(4/2));
        anything involving an Irrational compares as floats. Use == for
        structural equality instead.

        Raises:
            InvalidRealError: if either side is Unset
        """
        if isinstance(self, Irrational) or isinstance(other, Irrational):
            return self.to_float() == other.to_float()
        return self.as_fraction().to_proper_form() == other.as_fraction().to_proper_form()

    # Ordering is by float value and so only approximate for exact values
    # that differ by less than float resolution.

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.to_float() < other.to_float()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.to_float() <= other.to_float()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.to_float() > other.to_float()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.to_float() >= other.to_float()

    # Arithmetic operators

    def _coerce(self, other: Any) -> Real | None:
        try:
            return Real.from_python(other)
        except TypeError:
            return None

    def __add__(self, other: Any) -> Real:
        from .dispatch import ADD, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(self, other, ADD)

    def __radd__(self, other: Any) -> Real:
        from .dispatch import ADD, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(other, self, ADD)

    def __sub__(self, other: Any) -> Real:
        from .dispatch import SUBTRACT, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(self, other, SUBTRACT)

    def __rsub__(self, other: Any) -> Real:
        from .dispatch import SUBTRACT, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(other, self, SUBTRACT)

    def __mul__(self, other: Any) -> Real:
        from .dispatch import MULTIPLY, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(self, other, MULTIPLY)

    def __rmul__(self, other: Any) -> Real:
        from .dispatch import MULTIPLY, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(other, self, MULTIPLY)

    def __truediv__(self, other: Any) -> Real:
        from .dispatch import DIVIDE, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(self, other, DIVIDE)

    def __rtruediv__(self, other: Any) -> Real:
        from .dispatch import DIVIDE, combine

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return combine(other, self, DIVIDE)

    def __pow__(self, other: Any) -> Real:
        from .roots import pow as real_pow

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return real_pow(self, other)

    def __rpow__(self, other: Any) -> Real:
        from .roots import pow as real_pow

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return real_pow(other, self)

    def __neg__(self) -> Real:
        """
        Negate within the same variant.

        Raises:
            InvalidRealError: if the value is Unset
        """
        if isinstance(self, Rational):
            return Rational(-self.value)
        if isinstance(self, Irrational):
            return Irrational(-self.value)
        if isinstance(self, Integer):
            return Integer(-self.value)
        raise InvalidRealError.for_operand(self, "negate")

    def __abs__(self) -> Real:
        return -self if self.is_negative() else self


class Integer(Real):
    """An exact integer."""

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.INTEGER

    kind: Literal["integer"] = "integer"
    value: StrictInt = Field(description="The integer value")

    def __init__(self, value: int, **kwargs):
        super().__init__(value=value, **kwargs)


class Rational(Real):
    """An exact signed fraction."""

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.RATIONAL

    kind: Literal["rational"] = "rational"
    value: Fraction = Field(description="The fraction value")

    def __init__(self, value: Fraction, **kwargs):
        super().__init__(value=value, **kwargs)


class Irrational(Real):
    """A finite floating-point approximation."""

    type_precedence: ClassVar[TypePrecedence] = TypePrecedence.IRRATIONAL

    kind: Literal["irrational"] = "irrational"
    value: FiniteFloat = Field(description="The approximate value")

    def __init__(self, value: float, **kwargs):
        super().__init__(value=value, **kwargs)

    @classmethod
    def of(cls, value: float) -> Irrational:
        """
        Wrap a computed float.

        Raises:
            InvalidRealError: if the float is NaN or infinite
        """
        if not math.isfinite(value):
            raise InvalidRealError(f"Result is not a finite real: {value}", value=value)
        return cls(value)


class Unset(Real):
    """A Real that was never given a value. Reading it is an error."""

    kind: Literal["unset"] = "unset"


AnyReal = Annotated[Union[Integer, Rational, Irrational, Unset], Field(discriminator="kind")]

_REAL_ADAPTER: TypeAdapter = TypeAdapter(AnyReal)


def real_to_record(real: Real) -> dict[str, Any]:
    """Encode a Real as a tagged record, e.g. {'kind': 'integer', 'value': 3}."""
    return _REAL_ADAPTER.dump_python(real, mode="json")


def real_from_record(data: dict[str, Any]) -> Real:
    """Decode a tagged record produced by real_to_record()."""
    return _REAL_ADAPTER.validate_python(data)


def compare_reals(lhs: Real, rhs: Real) -> int:
    """
    Three-way comparison by float value.

    Exact values closer together than float resolution compare equal.
    """
    left, right = lhs.to_float(), rhs.to_float()
    return (left > right) - (left < right)


REAL_SORT_KEY = functools.cmp_to_key(compare_reals)

ZERO = Integer(0)
ONE = Integer(1)
ONE_HALF = Rational(Fraction(numerator=1, denominator=2))
