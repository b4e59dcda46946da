"""Numeric type tags."""
from decimal import Decimal, InvalidOperation
from enum import Enum
from numbers import Number
from typing import Any

from microplate.exceptions import NumericTypeError

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class NumericType(str, Enum):
    """Numeric type carried by wells, plates and stacks."""
    DOUBLE = "Double"
    INTEGER = "Integer"
    BIGDECIMAL = "BigDecimal"
    BIGINTEGER = "BigInteger"

    def coerce(self, value: Any):
        """Convert a value to this numeric type or raise NumericTypeError."""
        if isinstance(value, bool) or not isinstance(value, (Number, str)):
            raise NumericTypeError(f"Not a numeric value: {value!r}")

        if isinstance(value, str):
            value = value.strip()

        try:
            if self is NumericType.DOUBLE:
                return float(value)
            if self is NumericType.BIGDECIMAL:
                return value if isinstance(value, Decimal) else Decimal(str(value))
            return self._to_integral(value)
        except (ValueError, OverflowError, InvalidOperation) as e:
            raise NumericTypeError(f"Cannot convert {value!r} to {self.value}: {e}") from e

    def _to_integral(self, value) -> int:
        if isinstance(value, int):
            number = value
        else:
            decimal = Decimal(str(value))
            if decimal != decimal.to_integral_value():
                raise NumericTypeError(f"{value!r} is not an integral value")
            number = int(decimal)

        if self is NumericType.INTEGER and not INT32_MIN <= number <= INT32_MAX:
            raise NumericTypeError(f"{value!r} overflows a 32-bit integer")
        return number
