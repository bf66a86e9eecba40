# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule arguments: which property a rule checks and with what bound.

RuleArgs instances are frozen pydantic models. The only mutable slot is
``description``, written by a rule function when the rule is broken.

Canonical text (``str(args)``) is ``property_name`` for plain args and
``property_name + separator + bound`` for parameterized args. The
separator is taken from the config when the args are built, so the text
is a pure function of the args and serves as the rule-instance identity.

Positional construction mirrors the field order:
    MaxLengthRuleArgs("Name", 50)
    MaxValueRuleArgs("Age", 120, kind=int)
"""

from __future__ import annotations

import math
import re
import struct
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
    model_validator,
)

from proprules.config import get_default_config
from proprules.errors import ConfigurationError, ConversionError

from .compare import convert
from .kinds import ScalarKind, infer_kind, resolve_kind

__all__ = (
    "IntegerMaxValueRuleArgs",
    "IntegerMinValueRuleArgs",
    "MaxLengthRuleArgs",
    "MaxValueRuleArgs",
    "MinLengthRuleArgs",
    "MinValueRuleArgs",
    "ParameterizedRuleArgs",
    "RegExMatchRuleArgs",
    "RuleArgs",
    "format_bound",
)

_INT32 = ScalarKind.INT32


def _single_repr(value: float) -> str:
    """Shortest text that reads back as the same single-precision value."""
    packed = struct.pack("<f", value)
    for digits in range(1, 10):
        candidate = float(f"{value:.{digits}g}")
        try:
            if struct.pack("<f", candidate) == packed:
                return repr(candidate)
        except OverflowError:
            continue
    return repr(value)


def format_bound(value: Any, kind: ScalarKind | None = None) -> str:
    """Deterministic text for a bound value.

    FLOAT32 bounds print the shortest text that round-trips through single
    precision, so 0.1 stays "0.1" rather than its widened double form.
    """
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float):
        if kind is ScalarKind.FLOAT32 and math.isfinite(value):
            return _single_repr(value)
        return repr(value)
    return str(value)


class RuleArgs(BaseModel):
    """Names the property a rule validates.

    Attributes:
        property_name: Non-empty property name, stripped.
        description: Failure text set by the last broken evaluation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    _positional: ClassVar[tuple[str, ...]] = ("property_name",)

    property_name: str = Field(strict=True)

    _description: str = PrivateAttr(default="")

    def __init__(self, *args: Any, **data: Any):
        positional = type(self)._positional
        if len(args) > len(positional):
            raise ConfigurationError(
                f"{type(self).__name__} takes at most {len(positional)} "
                f"positional arguments, got {len(args)}",
                details={"positional": list(positional)},
            )
        for name, value in zip(positional, args):
            if name in data:
                raise ConfigurationError(
                    f"{type(self).__name__} got multiple values for '{name}'"
                )
            data[name] = value
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid {type(self).__name__}: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    @field_validator("property_name")
    @classmethod
    def _validate_property_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("property_name must be a non-empty string")
        return value

    @property
    def description(self) -> str:
        return self._description

    def record_failure(self, message: str) -> None:
        """Set the failure description. Called by rule functions only."""
        self._description = message

    def canonical(self) -> str:
        return self.property_name

    def __str__(self) -> str:
        return self.canonical()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.canonical()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleArgs):
            return NotImplemented
        return type(self) is type(other) and self.canonical() == other.canonical()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.canonical()))


class ParameterizedRuleArgs(RuleArgs):
    """RuleArgs carrying one rule-specific bound."""

    _bound_field: ClassVar[str] = ""

    _separator: str = PrivateAttr(default="!")

    def model_post_init(self, _: Any) -> None:
        self._separator = get_default_config().separator

    @property
    def bound(self) -> Any:
        return getattr(self, type(self)._bound_field)

    def bound_text(self) -> str:
        """Bound as it appears in canonical text and failure messages."""
        return format_bound(self.bound, getattr(self, "kind", None))

    def canonical(self) -> str:
        return f"{self.property_name}{self._separator}{self.bound_text()}"


# =============================================================================
# String length
# =============================================================================


class MaxLengthRuleArgs(ParameterizedRuleArgs):
    """Bound for string_max_length: maximum character count (>= 0)."""

    _positional: ClassVar[tuple[str, ...]] = ("property_name", "max_length")
    _bound_field: ClassVar[str] = "max_length"

    max_length: int = Field(ge=0, strict=True)


class MinLengthRuleArgs(ParameterizedRuleArgs):
    """Bound for string_min_length: minimum character count (>= 0)."""

    _positional: ClassVar[tuple[str, ...]] = ("property_name", "min_length")
    _bound_field: ClassVar[str] = "min_length"

    min_length: int = Field(ge=0, strict=True)


# =============================================================================
# Fixed int32 bounds
# =============================================================================


class IntegerMaxValueRuleArgs(ParameterizedRuleArgs):
    _positional: ClassVar[tuple[str, ...]] = ("property_name", "max_value")
    _bound_field: ClassVar[str] = "max_value"

    max_value: int = Field(ge=_INT32.min_value, le=_INT32.max_value, strict=True)

    @property
    def kind(self) -> ScalarKind:
        return _INT32


class IntegerMinValueRuleArgs(ParameterizedRuleArgs):
    _positional: ClassVar[tuple[str, ...]] = ("property_name", "min_value")
    _bound_field: ClassVar[str] = "min_value"

    min_value: int = Field(ge=_INT32.min_value, le=_INT32.max_value, strict=True)

    @property
    def kind(self) -> ScalarKind:
        return _INT32


# =============================================================================
# Generic scalar bounds
# =============================================================================


class _ScalarBoundRuleArgs(ParameterizedRuleArgs):
    """Bound of any scalar kind, stored in the kind's native form.

    ``kind`` accepts anything resolve_kind() does; when omitted it is
    inferred from the bound. UnsupportedKindError for non-scalar kinds,
    ConfigurationError when the bound does not fit the kind.
    """

    kind: ScalarKind

    @model_validator(mode="before")
    @classmethod
    def _resolve_kind_and_bound(cls, data: Any) -> Any:
        if not isinstance(data, dict) or cls._bound_field not in data:
            return data

        bound = data[cls._bound_field]
        spec = data.get("kind")
        kind = infer_kind(bound) if spec is None else resolve_kind(spec)
        try:
            native = convert(kind, bound)
        except ConversionError as e:
            raise ConfigurationError(
                f"Bound {bound!r} is not representable as {kind.value}",
                details={"field": cls._bound_field, **e.details},
            ) from e
        return {**data, "kind": kind, cls._bound_field: native}


class MaxValueRuleArgs(_ScalarBoundRuleArgs):
    """Bound for max_value: value must be <= max_value."""

    _positional: ClassVar[tuple[str, ...]] = ("property_name", "max_value", "kind")
    _bound_field: ClassVar[str] = "max_value"

    max_value: Any


class MinValueRuleArgs(_ScalarBoundRuleArgs):
    """Bound for min_value: value must be >= min_value."""

    _positional: ClassVar[tuple[str, ...]] = ("property_name", "min_value", "kind")
    _bound_field: ClassVar[str] = "min_value"

    min_value: Any


# =============================================================================
# Regular expression
# =============================================================================


class RegExMatchRuleArgs(ParameterizedRuleArgs):
    """Pattern for regex_match, compiled once at construction."""

    _positional: ClassVar[tuple[str, ...]] = ("property_name", "pattern")
    _bound_field: ClassVar[str] = "pattern"

    pattern: str = Field(strict=True)

    _regex: re.Pattern[str] = PrivateAttr()

    def model_post_init(self, _: Any) -> None:
        super().model_post_init(_)
        try:
            self._regex = re.compile(self.pattern)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid regular expression: {e}",
                details={"pattern": self.pattern},
            ) from e

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex
