# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Bind a rule function to its arguments.

RuleMethod pairs a rule handler with the RuleArgs it runs with and
derives a stable identity key from both:

    rule://<handler name>/<canonical args>

RULES maps rule names to the common rule functions.
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from proprules.core.accessor import PropertyAccessor
from proprules.core.args import RuleArgs
from proprules.core.result import RuleResult

from . import common

__all__ = ("RULES", "RuleHandler", "RuleMethod", "get_rule")

RuleHandler = Callable[..., RuleResult]
"""Handler signature: (target, args, *, accessor=None) -> RuleResult"""

RULES: MappingProxyType[str, RuleHandler] = MappingProxyType(
    {
        "string_required": common.string_required,
        "string_max_length": common.string_max_length,
        "string_min_length": common.string_min_length,
        "regex_match": common.regex_match,
        "integer_max_value": common.integer_max_value,
        "integer_min_value": common.integer_min_value,
        "max_value": common.max_value,
        "min_value": common.min_value,
    }
)


def get_rule(name: str) -> RuleHandler:
    """Get a common rule by name. Raises KeyError listing available names."""
    if name not in RULES:
        raise KeyError(f"Rule '{name}' not found. Available: {list(RULES)}")
    return RULES[name]


class RuleMethod:
    """A rule handler plus the args it is evaluated with.

    Example:
        method = RuleMethod(max_value, MaxValueRuleArgs("Age", 120))
        method.rule_name  # 'rule://max_value/Age!120'
        method.invoke(person)
    """

    __slots__ = ("_handler", "_args", "_rule_name")

    def __init__(self, handler: RuleHandler | str, args: RuleArgs):
        if isinstance(handler, str):
            handler = get_rule(handler)
        if not callable(handler):
            raise TypeError(f"Rule handler must be callable, got {type(handler).__name__}")
        if not isinstance(args, RuleArgs):
            raise TypeError(f"Expected RuleArgs, got {type(args).__name__}")
        self._handler = handler
        self._args = args
        handler_name = getattr(handler, "__name__", type(handler).__name__)
        self._rule_name = f"rule://{handler_name}/{args}"

    @property
    def handler(self) -> RuleHandler:
        return self._handler

    @property
    def args(self) -> RuleArgs:
        return self._args

    @property
    def rule_name(self) -> str:
        return self._rule_name

    @property
    def property_name(self) -> str:
        return self._args.property_name

    def invoke(self, target: Any, accessor: PropertyAccessor | None = None) -> RuleResult:
        """Run the rule against target."""
        return self._handler(target, self._args, accessor=accessor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleMethod):
            return NotImplemented
        return self._rule_name == other._rule_name

    def __hash__(self) -> int:
        return hash(self._rule_name)

    def __str__(self) -> str:
        return self._rule_name

    def __repr__(self) -> str:
        return f"RuleMethod({self._rule_name!r})"
