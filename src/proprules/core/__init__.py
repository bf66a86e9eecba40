# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Core module - rule arguments, property access, scalar dispatch.

- accessor: PropertyAccessor protocol and implementations
- kinds: closed ScalarKind set and kind resolution
- compare: per-kind conversion and comparison table
- args: RuleArgs hierarchy
- result: RuleResult
"""

from .accessor import (
    AttributeAccessor,
    FieldMapAccessor,
    MappingAccessor,
    PropertyAccessor,
    default_accessor,
)
from .args import (
    IntegerMaxValueRuleArgs,
    IntegerMinValueRuleArgs,
    MaxLengthRuleArgs,
    MaxValueRuleArgs,
    MinLengthRuleArgs,
    MinValueRuleArgs,
    ParameterizedRuleArgs,
    RegExMatchRuleArgs,
    RuleArgs,
    format_bound,
)
from .compare import (
    Direction,
    KindSpec,
    compare,
    convert,
    get_kind_spec,
    is_at_least,
    is_at_most,
)
from .kinds import ScalarKind, infer_kind, resolve_kind
from .result import RuleResult

__all__ = (
    # Accessors
    "AttributeAccessor",
    "FieldMapAccessor",
    "MappingAccessor",
    "PropertyAccessor",
    "default_accessor",
    # Args
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
    # Dispatch
    "Direction",
    "KindSpec",
    "ScalarKind",
    "compare",
    "convert",
    "get_kind_spec",
    "infer_kind",
    "is_at_least",
    "is_at_most",
    "resolve_kind",
    # Result
    "RuleResult",
)
