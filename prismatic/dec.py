"""A fixed-precision decimal scalar."""

from __future__ import annotations

import math
import warnings
from decimal import (
    ROUND_CEILING,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    localcontext,
)
from functools import total_ordering
from typing import Any

_PRECISION = 28
_CTX = Context(prec=_PRECISION, rounding=ROUND_HALF_EVEN)
_WIDE = Context(prec=80, rounding=ROUND_HALF_EVEN)
_PI_LONG = Decimal("3.14159265358979323846264338327950288419716939937510582097494459")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Dec):
        return value._value
    if isinstance(value, Decimal):
        return _CTX.plus(value)
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return _CTX.plus(Decimal(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            warnings.warn(f"cannot convert float {value!r} to decimal, using 0", stacklevel=3)
            return Decimal(0)
        return _CTX.plus(Decimal(value))
    if isinstance(value, str):
        return _CTX.plus(Decimal(value))
    raise TypeError(f"cannot convert {type(value).__name__} to Dec")


def _coerce(value: Any) -> "Dec | None":
    if isinstance(value, (Dec, Decimal, int, float)):
        return value if isinstance(value, Dec) else Dec(value)
    return None


@total_ordering
class Dec:
    """Decimal number with 28 significant digits and banker's rounding."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = 0) -> None:
        self._value = _to_decimal(value)

    @classmethod
    def pi(cls) -> "Dec":
        return cls(Decimal("3.1415926535897932384626433833"))

    @classmethod
    def two_pi(cls) -> "Dec":
        return cls(Decimal("6.2831853071795864769252867666"))

    @property
    def value(self) -> Decimal:
        return self._value

    def sqrt(self) -> "Dec":
        if self._value < 0:
            raise ValueError(f"square root of negative number {self}")
        return Dec(self._value.sqrt(_CTX))

    def _series(self, start_with_x: bool) -> "Dec":
        with localcontext(Context(prec=_PRECISION + 12)):
            x = self._value % (2 * _PI_LONG)
            square = x * x
            term = x if start_with_x else Decimal(1)
            total = term
            n = 1 if start_with_x else 0
            while True:
                term = -term * square / ((n + 1) * (n + 2))
                n += 2
                updated = total + term
                if updated == total:
                    break
                total = updated
        return Dec(total)

    def sin(self) -> "Dec":
        return self._series(True)

    def cos(self) -> "Dec":
        return self._series(False)

    def atan2(self, other: "Dec") -> "Dec":
        return Dec(math.atan2(float(self), float(Dec(other))))

    def ceil(self) -> "Dec":
        return Dec(self._value.to_integral_value(rounding=ROUND_CEILING))

    def round(self) -> "Dec":
        return self.round_dp(0)

    def round_dp(self, dp: int) -> "Dec":
        """Round to ``dp`` decimal places, halves to even."""
        if dp < 0:
            raise ValueError("number of decimal places must be non-negative")
        if self._value.is_zero() or self._value.as_tuple().exponent >= -dp:
            return Dec(self._value)
        return Dec(self._value.quantize(Decimal(1).scaleb(-dp), context=_WIDE))

    def powi(self, n: int) -> "Dec":
        if n < 0:
            return Dec(1) / self.powi(-n)
        return Dec(_CTX.power(self._value, n))

    def signum(self) -> "Dec":
        """Return 1 or -1; zero has no sign and raises ZeroDivisionError."""
        return self / abs(self)

    def is_positive(self) -> bool:
        return not self._value.is_signed()

    def is_negative(self) -> bool:
        return self._value.is_signed()

    def is_zero(self) -> bool:
        return self._value.is_zero()

    def __add__(self, other: Any) -> "Dec":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Dec(_CTX.add(self._value, rhs._value))

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Dec":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Dec(_CTX.subtract(self._value, rhs._value))

    def __rsub__(self, other: Any) -> "Dec":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Any) -> "Dec":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        product = Dec(_CTX.multiply(self._value, rhs._value))
        return product.round_dp(8) if isinstance(other, float) else product

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Dec":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs.is_zero():
            raise ZeroDivisionError(f"div by zero {self} / {rhs}")
        return Dec(_CTX.divide(self._value, rhs._value))

    def __rtruediv__(self, other: Any) -> "Dec":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __mod__(self, other: Any) -> "Dec":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs.is_zero():
            raise ZeroDivisionError(f"remainder by zero {self} % {rhs}")
        return Dec(_CTX.remainder(self._value, rhs._value))

    def __pow__(self, exponent: int) -> "Dec":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.powi(exponent)

    def __neg__(self) -> "Dec":
        return Dec(-self._value)

    def __pos__(self) -> "Dec":
        return self

    def __abs__(self) -> "Dec":
        return Dec(abs(self._value))

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs._value

    def __lt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return not self._value.is_zero()

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __str__(self) -> str:
        return format(self._value, "f")

    def __repr__(self) -> str:
        return f"Dec({str(self)!r})"


Dec.EPSILON = Dec(Decimal("1e-28"))
Dec.MAX = Dec(Decimal("79228162514264337593543950335"))
Dec.MIN = Dec(Decimal("-79228162514264337593543950335"))