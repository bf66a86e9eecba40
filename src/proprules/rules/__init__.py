# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rules module: common property rules and rule binding.

Core exports:
- string_required, string_max_length, string_min_length, regex_match
- integer_max_value, integer_min_value
- max_value, min_value: generic scalar-kind rules
- RuleMethod, RULES, get_rule: handler + args binding and lookup
"""

from .common import (
    integer_max_value,
    integer_min_value,
    max_value,
    min_value,
    regex_match,
    string_max_length,
    string_min_length,
    string_required,
)
from .method import RULES, RuleHandler, RuleMethod, get_rule

__all__ = (
    # Rule functions
    "integer_max_value",
    "integer_min_value",
    "max_value",
    "min_value",
    "regex_match",
    "string_max_length",
    "string_min_length",
    "string_required",
    # Binding
    "RULES",
    "RuleHandler",
    "RuleMethod",
    "get_rule",
)
