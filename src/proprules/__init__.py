# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""proprules - property validation rules with scalar-kind dispatch.

Top-level re-exports for convenient imports:
- RuleArgs and its parameterized variants -> proprules.core.args
- ScalarKind, PropertyAccessor, RuleResult -> proprules.core
- rule functions, RuleMethod -> proprules.rules
- RuleEngineConfig -> proprules.config
- errors -> proprules.errors
"""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

# Lazy import mapping
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # Args
    "RuleArgs": ("proprules.core.args", "RuleArgs"),
    "ParameterizedRuleArgs": ("proprules.core.args", "ParameterizedRuleArgs"),
    "MaxLengthRuleArgs": ("proprules.core.args", "MaxLengthRuleArgs"),
    "MinLengthRuleArgs": ("proprules.core.args", "MinLengthRuleArgs"),
    "IntegerMaxValueRuleArgs": ("proprules.core.args", "IntegerMaxValueRuleArgs"),
    "IntegerMinValueRuleArgs": ("proprules.core.args", "IntegerMinValueRuleArgs"),
    "MaxValueRuleArgs": ("proprules.core.args", "MaxValueRuleArgs"),
    "MinValueRuleArgs": ("proprules.core.args", "MinValueRuleArgs"),
    "RegExMatchRuleArgs": ("proprules.core.args", "RegExMatchRuleArgs"),
    # Core
    "AttributeAccessor": ("proprules.core.accessor", "AttributeAccessor"),
    "FieldMapAccessor": ("proprules.core.accessor", "FieldMapAccessor"),
    "MappingAccessor": ("proprules.core.accessor", "MappingAccessor"),
    "PropertyAccessor": ("proprules.core.accessor", "PropertyAccessor"),
    "ScalarKind": ("proprules.core.kinds", "ScalarKind"),
    "RuleResult": ("proprules.core.result", "RuleResult"),
    # Rules
    "string_required": ("proprules.rules.common", "string_required"),
    "string_max_length": ("proprules.rules.common", "string_max_length"),
    "string_min_length": ("proprules.rules.common", "string_min_length"),
    "regex_match": ("proprules.rules.common", "regex_match"),
    "integer_max_value": ("proprules.rules.common", "integer_max_value"),
    "integer_min_value": ("proprules.rules.common", "integer_min_value"),
    "max_value": ("proprules.rules.common", "max_value"),
    "min_value": ("proprules.rules.common", "min_value"),
    "RuleMethod": ("proprules.rules.method", "RuleMethod"),
    # Config
    "RuleEngineConfig": ("proprules.config", "RuleEngineConfig"),
}

_LOADED: dict[str, object] = {}


def __getattr__(name: str) -> object:
    """Lazy import attributes on first access."""
    if name in _LOADED:
        return _LOADED[name]

    if name in _LAZY_IMPORTS:
        from importlib import import_module

        module_name, attr_name = _LAZY_IMPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        _LOADED[name] = value
        return value

    raise AttributeError(f"module 'proprules' has no attribute {name!r}")


def __dir__() -> list[str]:
    """Return all available attributes for autocomplete."""
    return list(__all__)


__all__ = tuple(_LAZY_IMPORTS)

if TYPE_CHECKING:
    from proprules.config import RuleEngineConfig
    from proprules.core.accessor import (
        AttributeAccessor,
        FieldMapAccessor,
        MappingAccessor,
        PropertyAccessor,
    )
    from proprules.core.args import (
        IntegerMaxValueRuleArgs,
        IntegerMinValueRuleArgs,
        MaxLengthRuleArgs,
        MaxValueRuleArgs,
        MinLengthRuleArgs,
        MinValueRuleArgs,
        ParameterizedRuleArgs,
        RegExMatchRuleArgs,
        RuleArgs,
    )
    from proprules.core.kinds import ScalarKind
    from proprules.core.result import RuleResult
    from proprules.rules.common import (
        integer_max_value,
        integer_min_value,
        max_value,
        min_value,
        regex_match,
        string_max_length,
        string_min_length,
        string_required,
    )
    from proprules.rules.method import RuleMethod
