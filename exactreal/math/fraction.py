"""
Fraction type used by Rational reals.

A Fraction stores its sign separately from unsigned whole-number, numerator
and denominator parts, so "-2 1/3" is
Fraction(is_negative=True, whole_number=2, numerator=1, denominator=3).

Arithmetic always returns fractions in proper form (reduced, with the whole
part extracted); to_improper_form() folds the whole part back into the
numerator for callers that need a single ratio.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator


def gcd(a: int, b: int) -> int:
    """Greatest Common Divisor."""
    a, b = abs(a), abs(b)
    if a < b:
        a, b = b, a
    if b == 0:
        return a
    r = a % b
    while r != 0:
        a, b = b, r
        r = a % b
    return b


def lcm(a: int, b: int) -> int:
    """Least Common Multiple."""
    return (a // gcd(a, b)) * b


def reduce_fraction(num: int, den: int) -> tuple[int, int]:
    """
    Reduce fraction to lowest terms.

    Ensures denominator is positive.
    """
    if den < 0:
        num, den = -num, -den
    g = gcd(num, den)
    if g == 0:
        return (num, den)
    return (num // g, den // g)


class Fraction(BaseModel):
    """
    Signed fraction with an optional whole-number part.

    Examples:
        >>> Fraction.of(1, 2)  # 1/2
        >>> Fraction.of(-7, 2)  # -3 1/2
        >>> Fraction.from_whole_number(5)  # 5
    """

    model_config = ConfigDict(frozen=True)

    is_negative: bool = Field(default=False, description="Whether the fraction is below zero")
    whole_number: NonNegativeInt = Field(default=0, description="The whole part of a mixed number")
    numerator: NonNegativeInt = Field(default=0, description="The numerator")
    denominator: int = Field(default=1, description="The denominator")

    @field_validator("denominator")
    @classmethod
    def validate_denominator(cls, value: int) -> int:
        if value == 0:
            raise ValueError("Fraction denominator cannot be zero")
        if value < 0:
            raise ValueError("Fraction denominator must be positive; use is_negative for the sign")
        return value

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> Fraction:
        """
        Create a Fraction in proper form from a signed numerator/denominator.

        Raises:
            ValueError: if denominator is zero
        """
        if denominator == 0:
            raise ValueError("Fraction denominator cannot be zero")
        return cls(
            is_negative=(numerator < 0) != (denominator < 0),
            numerator=abs(numerator),
            denominator=abs(denominator),
        ).to_proper_form()

    @classmethod
    def from_whole_number(cls, value: int) -> Fraction:
        """Represent an integer as a whole-number fraction."""
        return cls(is_negative=value < 0, whole_number=abs(value), numerator=0, denominator=1)

    def _signed_parts(self) -> tuple[int, int]:
        """Return (numerator, denominator) of the improper form with the sign on the numerator."""
        improper = self.to_improper_form()
        num = -improper.numerator if improper.is_negative else improper.numerator
        return num, improper.denominator

    def to_float(self) -> float:
        """Convert to Python float."""
        num, den = self._signed_parts()
        return num / den

    def to_improper_form(self) -> Fraction:
        """Fold the whole-number part into the numerator."""
        return Fraction(
            is_negative=self.is_negative,
            whole_number=0,
            numerator=self.whole_number * self.denominator + self.numerator,
            denominator=self.denominator,
        )

    def to_proper_form(self) -> Fraction:
        """Reduce to lowest terms and extract the whole-number part."""
        improper = self.to_improper_form()
        num, den = reduce_fraction(improper.numerator, improper.denominator)
        whole, remainder = divmod(num, den)
        return Fraction(
            # Zero has no sign
            is_negative=self.is_negative and num != 0,
            whole_number=whole,
            numerator=remainder,
            denominator=den if remainder else 1,
        )

    def is_only_whole_number(self) -> bool:
        """Whether the fraction has no fractional part once reduced."""
        improper = self.to_improper_form()
        return improper.numerator % improper.denominator == 0

    def to_whole_number(self) -> int:
        """
        Convert a whole-number fraction to a signed int.

        Raises:
            ValueError: if the fraction has a fractional part
        """
        if not self.is_only_whole_number():
            raise ValueError(f"Fraction {self.to_answer_string()} is not a whole number")
        num, den = self._signed_parts()
        return num // den

    def to_answer_string(self) -> str:
        """
        Render as answer text: "3/4", "-2 1/3", "5" or "0".

        Improper fractions render without a whole part ("7/2"); a denominator
        of 1 renders as a whole number ("3", never "3/1").
        """
        whole_number, numerator = self.whole_number, self.numerator
        if self.denominator == 1:
            whole_number, numerator = whole_number + numerator, 0
        fraction_string = f"{numerator}/{self.denominator}" if numerator else ""
        whole_number_string = str(whole_number) if whole_number else ""
        separator = " " if whole_number and numerator else ""
        full_string = f"{whole_number_string}{separator}{fraction_string}"
        if not full_string:
            return "0"
        return f"-{full_string}" if self.is_negative else full_string

    def pow(self, exponent: int) -> Fraction:
        """
        Raise to an integer power.

        Negative exponents invert the fraction.

        Raises:
            ZeroDivisionError: for a zero fraction raised to a negative power
        """
        num, den = self._signed_parts()
        if exponent >= 0:
            return Fraction.of(num**exponent, den**exponent)
        if num == 0:
            raise ZeroDivisionError("Zero fraction cannot be raised to a negative power")
        return Fraction.of(den ** (-exponent), num ** (-exponent))

    def __str__(self) -> str:
        return self.to_answer_string()

    # Arithmetic operators

    def _coerce(self, other: Any) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction.from_whole_number(other)
        return None

    def __add__(self, other: Any) -> Fraction:
        """Addition: self + other."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b = self._signed_parts()
        c, d = other._signed_parts()
        l = lcm(b, d)
        return Fraction.of(a * (l // b) + c * (l // d), l)

    def __radd__(self, other: Any) -> Fraction:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Fraction:
        """Subtraction: self - other."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> Fraction:
        """Multiplication: self * other."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b = self._signed_parts()
        c, d = other._signed_parts()
        return Fraction.of(a * c, b * d)

    def __rmul__(self, other: Any) -> Fraction:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Fraction:
        """
        Division: self / other.

        Raises:
            ZeroDivisionError: if other is zero
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b = self._signed_parts()
        c, d = other._signed_parts()
        if c == 0:
            raise ZeroDivisionError("Fraction division by zero")
        return Fraction.of(a * d, b * c)

    def __rtruediv__(self, other: Any) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __pow__(self, exponent: Any) -> Fraction:
        if isinstance(exponent, int) and not isinstance(exponent, bool):
            return self.pow(exponent)
        return NotImplemented

    def __neg__(self) -> Fraction:
        """Unary negation: -self."""
        if self.whole_number == 0 and self.numerator == 0:
            return self
        return self.model_copy(update={"is_negative": not self.is_negative})

    def __abs__(self) -> Fraction:
        """Absolute value: abs(self)."""
        return self.model_copy(update={"is_negative": False})
