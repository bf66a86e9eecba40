# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Closed set of scalar kinds that min/max rules compare natively.

    ScalarKind      - signed/unsigned ints (8-64 bit), float32/64, bool, char
    resolve_kind()  - ScalarKind | name | builtin type | ctypes type -> ScalarKind
    infer_kind()    - bound value -> ScalarKind

Anything outside the set raises UnsupportedKindError.
"""

from __future__ import annotations

import ctypes
from enum import Enum
from typing import Any

from proprules.errors import UnsupportedKindError

__all__ = ("ScalarKind", "infer_kind", "resolve_kind")


class ScalarKind(str, Enum):
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    CHAR = "char"

    @property
    def bits(self) -> int:
        return _BITS[self]

    @property
    def is_integer(self) -> bool:
        return self in _SIGNED or self in _UNSIGNED

    @property
    def is_signed(self) -> bool:
        return self in _SIGNED

    @property
    def is_float(self) -> bool:
        return self in (ScalarKind.FLOAT32, ScalarKind.FLOAT64)

    @property
    def min_value(self) -> int:
        """Smallest representable integer. Integer kinds only."""
        self._require_integer()
        if self.is_signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Largest representable integer. Integer kinds only."""
        self._require_integer()
        if self.is_signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Check an int is within this integer kind's range."""
        return self.min_value <= value <= self.max_value

    def _require_integer(self) -> None:
        if not self.is_integer:
            raise AttributeError(f"{self.name} is not an integer kind")

    def __str__(self) -> str:
        return self.value


_SIGNED = frozenset(
    {ScalarKind.INT8, ScalarKind.INT16, ScalarKind.INT32, ScalarKind.INT64}
)
_UNSIGNED = frozenset(
    {ScalarKind.UINT8, ScalarKind.UINT16, ScalarKind.UINT32, ScalarKind.UINT64}
)

_BITS: dict[ScalarKind, int] = {
    ScalarKind.INT8: 8,
    ScalarKind.INT16: 16,
    ScalarKind.INT32: 32,
    ScalarKind.INT64: 64,
    ScalarKind.UINT8: 8,
    ScalarKind.UINT16: 16,
    ScalarKind.UINT32: 32,
    ScalarKind.UINT64: 64,
    ScalarKind.FLOAT32: 32,
    ScalarKind.FLOAT64: 64,
    ScalarKind.BOOL: 8,
    ScalarKind.CHAR: 32,
}

# Conventional primitive names (sbyte, ushort, double, ...)
_ALIASES: dict[str, ScalarKind] = {
    "sbyte": ScalarKind.INT8,
    "short": ScalarKind.INT16,
    "int": ScalarKind.INT32,
    "long": ScalarKind.INT64,
    "byte": ScalarKind.UINT8,
    "ushort": ScalarKind.UINT16,
    "uint": ScalarKind.UINT32,
    "ulong": ScalarKind.UINT64,
    "float": ScalarKind.FLOAT32,
    "single": ScalarKind.FLOAT32,
    "double": ScalarKind.FLOAT64,
    "boolean": ScalarKind.BOOL,
}

_BUILTIN_TYPES: dict[type, ScalarKind] = {
    bool: ScalarKind.BOOL,
    int: ScalarKind.INT32,
    float: ScalarKind.FLOAT64,
}


def _ctypes_table() -> dict[type, ScalarKind]:
    # Width of c_int/c_long varies by platform, so map by sizeof
    table: dict[type, ScalarKind] = {}
    signed = (ctypes.c_byte, ctypes.c_short, ctypes.c_int, ctypes.c_long, ctypes.c_longlong)
    unsigned = (
        ctypes.c_ubyte,
        ctypes.c_ushort,
        ctypes.c_uint,
        ctypes.c_ulong,
        ctypes.c_ulonglong,
    )
    for ctype in signed:
        table[ctype] = ScalarKind(f"int{ctypes.sizeof(ctype) * 8}")
    for ctype in unsigned:
        table[ctype] = ScalarKind(f"uint{ctypes.sizeof(ctype) * 8}")
    table[ctypes.c_float] = ScalarKind.FLOAT32
    table[ctypes.c_double] = ScalarKind.FLOAT64
    table[ctypes.c_bool] = ScalarKind.BOOL
    table[ctypes.c_char] = ScalarKind.CHAR
    table[ctypes.c_wchar] = ScalarKind.CHAR
    return table


_CTYPES: dict[type, ScalarKind] = _ctypes_table()


def resolve_kind(spec: Any) -> ScalarKind:
    """Resolve a kind designator to a ScalarKind.

    Args:
        spec: ScalarKind, kind name or alias ("uint16", "double"),
            builtin type (bool, int, float) or ctypes type (c_uint8, ...).

    Returns:
        Resolved ScalarKind.

    Raises:
        UnsupportedKindError: spec names no primitive scalar kind.
    """
    if isinstance(spec, ScalarKind):
        return spec

    if isinstance(spec, str):
        name = spec.strip().lower()
        try:
            return ScalarKind(name)
        except ValueError:
            pass
        if name in _ALIASES:
            return _ALIASES[name]
        raise UnsupportedKindError(
            f"Unknown scalar kind name: {spec!r}",
            details={"kind": spec, "available": [k.value for k in ScalarKind]},
        )

    if isinstance(spec, type):
        if spec in _BUILTIN_TYPES:
            return _BUILTIN_TYPES[spec]
        if spec in _CTYPES:
            return _CTYPES[spec]
        raise UnsupportedKindError(
            f"Primitive scalar type required, got {spec.__name__}",
            details={"kind": spec.__qualname__},
        )

    raise UnsupportedKindError(
        f"Cannot resolve scalar kind from {type(spec).__name__} instance",
        details={"kind": repr(spec)},
    )


def infer_kind(value: Any) -> ScalarKind:
    """Infer the kind of a bound from its Python value.

    int bounds get the narrowest of INT32, INT64, UINT64 that holds them.
    """
    if isinstance(value, bool):
        return ScalarKind.BOOL
    if isinstance(value, int):
        for kind in (ScalarKind.INT32, ScalarKind.INT64, ScalarKind.UINT64):
            if kind.contains(value):
                return kind
        raise UnsupportedKindError(
            f"No integer kind can hold {value}",
            details={"value": str(value)},
        )
    if isinstance(value, float):
        return ScalarKind.FLOAT64
    if isinstance(value, str) and len(value) == 1:
        return ScalarKind.CHAR
    raise UnsupportedKindError(
        f"Primitive scalar value required, got {type(value).__name__}",
        details={"value": repr(value)},
    )
