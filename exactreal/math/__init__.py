"""
exactreal.math - exact-where-possible Real arithmetic

Value types with:
- Integer / Rational / Irrational / Unset variants
- Type promotion to the widest operand
- Exact powers and roots with float fallback
- Fuzzy comparison

Example:
    >>> from exactreal.math import Integer, Rational, Fraction, sqrt
    >>> Integer(7) / Integer(2)
    Rational(7/2)
    >>> sqrt(Integer(9))
    Integer(3)
"""

from .fraction import Fraction, gcd, lcm, reduce_fraction
from .value import ToleranceMode, TypePrecedence, fuzzy_compare
from .real import (
    ONE,
    ONE_HALF,
    REAL_SORT_KEY,
    ZERO,
    AnyReal,
    Integer,
    Irrational,
    Rational,
    Real,
    Unset,
    compare_reals,
    real_from_record,
    real_to_record,
)
from .dispatch import ADD, DIVIDE, MULTIPLY, SUBTRACT, OperatorTable, combine
from .roots import integer_pow, pow, root, root_fraction, sqrt

__all__ = [
    "Fraction",
    "gcd",
    "lcm",
    "reduce_fraction",
    "ToleranceMode",
    "TypePrecedence",
    "fuzzy_compare",
    "Real",
    "Integer",
    "Rational",
    "Irrational",
    "Unset",
    "AnyReal",
    "ZERO",
    "ONE",
    "ONE_HALF",
    "REAL_SORT_KEY",
    "compare_reals",
    "real_to_record",
    "real_from_record",
    "OperatorTable",
    "combine",
    "ADD",
    "SUBTRACT",
    "MULTIPLY",
    "DIVIDE",
    "integer_pow",
    "root",
    "root_fraction",
    "pow",
    "sqrt",
]
