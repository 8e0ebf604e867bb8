"""Resource quantities (``128Mi``, ``500m``, ``1e3``) with canonical formatting."""

import re
from decimal import Decimal, InvalidOperation, ROUND_CEILING
from enum import Enum
from typing import Any, Tuple

from pydantic_core import core_schema


class QuantityFormat(str, Enum):
    """Suffix family a quantity was written in."""
    BINARY_SI = "BinarySI"
    DECIMAL_SI = "DecimalSI"
    DECIMAL_EXPONENT = "DecimalExponent"


_BINARY_SUFFIXES = {
    "Ki": 10,
    "Mi": 20,
    "Gi": 30,
    "Ti": 40,
    "Pi": 50,
    "Ei": 60,
}

_DECIMAL_SUFFIXES = {
    "n": -9,
    "u": -6,
    "m": -3,
    "": 0,
    "k": 3,
    "M": 6,
    "G": 9,
    "T": 12,
    "P": 15,
    "E": 18,
}

_QUANTITY_RE = re.compile(r"^([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))([eE][+-]?[0-9]+|[a-zA-Z]*)$")

_NANO = Decimal(10) ** -9


def _is_integral(value: Decimal) -> bool:
    return value == value.to_integral_value()


def _plain(value: Decimal) -> str:
    """Format an integral Decimal without exponent notation."""
    return str(int(value))


class Quantity:
    """
    Fixed-point quantity with a unit suffix.

    Two quantities are equal when they denote the same amount, whatever
    suffix they were written with. ``str()`` returns the canonical form:
    the suffix family of the input with the largest suffix that keeps the
    number integral.
    """

    __slots__ = ("value", "format")

    def __init__(self, value: Decimal, fmt: QuantityFormat = QuantityFormat.DECIMAL_SI):
        self.value = Decimal(value)
        self.format = QuantityFormat(fmt)

    @classmethod
    def parse(cls, text: str) -> "Quantity":
        """
        Parse a quantity string.

        Raises:
            ValueError: If the text is not a valid quantity
        """
        text = text.strip()
        match = _QUANTITY_RE.match(text)
        if not match:
            raise ValueError(f"Invalid quantity: '{text}'")
        number, suffix = match.groups()
        try:
            amount = Decimal(number)
        except InvalidOperation:
            raise ValueError(f"Invalid quantity: '{text}'")

        if suffix in _BINARY_SUFFIXES:
            return cls(amount * (2 ** _BINARY_SUFFIXES[suffix]), QuantityFormat.BINARY_SI)
        if suffix in _DECIMAL_SUFFIXES:
            return cls(amount.scaleb(_DECIMAL_SUFFIXES[suffix]), QuantityFormat.DECIMAL_SI)
        if suffix[:1] in ("e", "E"):
            return cls(amount.scaleb(int(suffix[1:])), QuantityFormat.DECIMAL_EXPONENT)
        raise ValueError(f"Invalid quantity suffix '{suffix}' in '{text}'")

    def _canonical(self) -> Tuple[Decimal, str]:
        value = self.value
        if value == 0:
            return Decimal(0), ""

        if self.format == QuantityFormat.BINARY_SI and _is_integral(value):
            for suffix, power in sorted(_BINARY_SUFFIXES.items(), key=lambda item: -item[1]):
                scaled = value / (2 ** power)
                if _is_integral(scaled):
                    return scaled, suffix
            return value, ""

        # Anything finer than a nano-unit is rounded up.
        if not _is_integral(value / _NANO):
            value = (value / _NANO).to_integral_value(rounding=ROUND_CEILING) * _NANO

        if self.format == QuantityFormat.DECIMAL_EXPONENT:
            for exponent in range(18, -12, -3):
                scaled = value.scaleb(-exponent)
                if _is_integral(scaled):
                    return scaled, f"e{exponent}" if exponent else ""

        for suffix, exponent in sorted(_DECIMAL_SUFFIXES.items(), key=lambda item: -item[1]):
            scaled = value.scaleb(-exponent)
            if _is_integral(scaled):
                return scaled, suffix
        return value, ""

    def __str__(self) -> str:
        amount, suffix = self._canonical()
        return f"{_plain(amount)}{suffix}"

    def __repr__(self) -> str:
        return f"Quantity('{self}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, str):
            try:
                other = Quantity.parse(other)
            except ValueError:
                return False
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def validate(cls, value: Any) -> "Quantity":
        """Coerce API input (string, number or Quantity) into a Quantity."""
        if isinstance(value, Quantity):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid quantity: {value!r}")
        if isinstance(value, int):
            return cls(Decimal(value))
        if isinstance(value, float):
            return cls(Decimal(repr(value)))
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"Invalid quantity: {value!r}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )
