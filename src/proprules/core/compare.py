# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Type-dispatched conversion and comparison for scalar kinds.

Each ScalarKind maps to exactly one KindSpec holding:
    convert(value) -> native value   (exact, or ConversionError)
    le(a, b) / ge(a, b)              (native ordering)

Integers are range-checked against their width: no truncation, no
wraparound. FLOAT32 values are rounded to single precision before
comparing. NaN compares false in both directions. BOOL has no ordering,
so both directions test equality. CHAR compares code points.
"""

from __future__ import annotations

import math
import numbers
import struct
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from proprules.errors import ConversionError

from .kinds import ScalarKind

__all__ = (
    "Direction",
    "KindSpec",
    "compare",
    "convert",
    "get_kind_spec",
    "is_at_least",
    "is_at_most",
)

_MAX_CODE_POINT = 0x10FFFF


class Direction(str, Enum):
    """Which side of the bound a passing value lies on."""

    MAX = "max"  # value <= bound
    MIN = "min"  # value >= bound


@dataclass(frozen=True, slots=True)
class KindSpec:
    """Native conversion and ordering for one scalar kind."""

    kind: ScalarKind
    convert: Callable[[Any], Any]
    le: Callable[[Any, Any], bool]
    ge: Callable[[Any, Any], bool]


def _conversion_error(kind: ScalarKind, value: Any, reason: str) -> ConversionError:
    return ConversionError(
        f"Cannot convert {value!r} to {kind.value}: {reason}",
        details={
            "kind": kind.value,
            "value": repr(value),
            "value_type": type(value).__name__,
        },
    )


# =============================================================================
# Converters
# =============================================================================


def _integer_converter(kind: ScalarKind) -> Callable[[Any], int]:
    low, high = kind.min_value, kind.max_value

    def convert(value: Any) -> int:
        if isinstance(value, bool):
            raise _conversion_error(kind, value, "booleans are not numbers")
        if isinstance(value, numbers.Integral):
            number = int(value)
        elif isinstance(value, float):
            if not value.is_integer():
                raise _conversion_error(kind, value, "not an integral value")
            number = int(value)
        elif isinstance(value, Decimal):
            if not value.is_finite() or value != value.to_integral_value():
                raise _conversion_error(kind, value, "not an integral value")
            number = int(value)
        elif isinstance(value, str):
            try:
                number = int(value.strip(), 10)
            except ValueError:
                raise _conversion_error(kind, value, "not an integer literal") from None
        else:
            raise _conversion_error(kind, value, "unsupported value type")

        if not low <= number <= high:
            raise _conversion_error(kind, value, f"outside range [{low}, {high}]")
        return number

    return convert


def _is_finite_literal(value: Decimal | str) -> bool:
    try:
        return Decimal(value).is_finite()
    except InvalidOperation:
        return False


def _to_double(kind: ScalarKind, value: Any) -> float:
    if isinstance(value, bool):
        raise _conversion_error(kind, value, "booleans are not numbers")
    try:
        if isinstance(value, numbers.Real):
            return float(value)
        if isinstance(value, (Decimal, str)):
            text = value.strip() if isinstance(value, str) else value
            number = float(text)
            # float() saturates Decimal and str overflow to inf instead of raising
            if math.isinf(number) and _is_finite_literal(text):
                raise OverflowError
            return number
    except OverflowError:
        raise _conversion_error(kind, value, "outside double range") from None
    except (ValueError, InvalidOperation):
        raise _conversion_error(kind, value, "not a number literal") from None
    raise _conversion_error(kind, value, "unsupported value type")


def _to_float64(value: Any) -> float:
    return _to_double(ScalarKind.FLOAT64, value)


def _to_float32(value: Any) -> float:
    number = _to_double(ScalarKind.FLOAT32, value)
    if math.isnan(number) or math.isinf(number):
        return number
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        raise _conversion_error(
            ScalarKind.FLOAT32, value, "outside single-precision range"
        ) from None


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Integral) and int(value) in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    raise _conversion_error(ScalarKind.BOOL, value, "expected a boolean")


def _to_char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    if isinstance(value, bytes) and len(value) == 1:
        return chr(value[0])
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        if 0 <= int(value) <= _MAX_CODE_POINT:
            return chr(int(value))
        raise _conversion_error(ScalarKind.CHAR, value, "not a valid code point")
    raise _conversion_error(ScalarKind.CHAR, value, "expected a single character")


# =============================================================================
# Orderings
# =============================================================================


def _le(a: Any, b: Any) -> bool:
    return a <= b


def _ge(a: Any, b: Any) -> bool:
    return a >= b


def _char_le(a: str, b: str) -> bool:
    return ord(a) <= ord(b)


def _char_ge(a: str, b: str) -> bool:
    return ord(a) >= ord(b)


def _bool_eq(a: bool, b: bool) -> bool:
    return a == b


# =============================================================================
# Dispatch table
# =============================================================================


def _build_table() -> dict[ScalarKind, KindSpec]:
    table: dict[ScalarKind, KindSpec] = {}
    for kind in ScalarKind:
        if kind.is_integer:
            table[kind] = KindSpec(kind, _integer_converter(kind), _le, _ge)
    table[ScalarKind.FLOAT32] = KindSpec(ScalarKind.FLOAT32, _to_float32, _le, _ge)
    table[ScalarKind.FLOAT64] = KindSpec(ScalarKind.FLOAT64, _to_float64, _le, _ge)
    table[ScalarKind.BOOL] = KindSpec(ScalarKind.BOOL, _to_bool, _bool_eq, _bool_eq)
    table[ScalarKind.CHAR] = KindSpec(ScalarKind.CHAR, _to_char, _char_le, _char_ge)
    return table


_KIND_SPECS: dict[ScalarKind, KindSpec] = _build_table()

_missing = set(ScalarKind) - set(_KIND_SPECS)
if _missing:
    raise RuntimeError(
        f"Scalar kinds without comparison: {sorted(k.value for k in _missing)}"
    )
del _missing


def get_kind_spec(kind: ScalarKind) -> KindSpec:
    """Get the KindSpec for a kind. Raises KeyError for non-ScalarKind keys."""
    return _KIND_SPECS[ScalarKind(kind)]


def convert(kind: ScalarKind, value: Any) -> Any:
    """Convert value to the kind's native representation.

    Raises:
        ConversionError: Value is out of range or not convertible.
    """
    return get_kind_spec(kind).convert(value)


def compare(kind: ScalarKind, value: Any, bound: Any, direction: Direction) -> bool:
    """Check value against bound under the kind's native ordering.

    Args:
        kind: Scalar kind both operands are converted to.
        value: Property value.
        bound: Rule bound.
        direction: MAX passes iff value <= bound, MIN iff value >= bound.

    Returns:
        True if the value satisfies the bound.

    Raises:
        ConversionError: Either operand cannot be represented in kind.
    """
    spec = get_kind_spec(kind)
    native_value = spec.convert(value)
    native_bound = spec.convert(bound)
    if Direction(direction) is Direction.MAX:
        return spec.le(native_value, native_bound)
    return spec.ge(native_value, native_bound)


def is_at_most(kind: ScalarKind, value: Any, bound: Any) -> bool:
    return compare(kind, value, bound, Direction.MAX)


def is_at_least(kind: ScalarKind, value: Any, bound: Any) -> bool:
    return compare(kind, value, bound, Direction.MIN)
