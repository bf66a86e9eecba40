# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Common property rules.

Every rule has the signature

    rule(target, args, *, accessor=None) -> RuleResult

and reads ``args.property_name`` off ``target`` through the accessor
(default: attributes, or keys for mappings). A broken rule returns a
failing RuleResult and records the description on ``args``. Errors that
stop a rule from running (missing property, wrong value type, bad args)
are raised, never reported as a broken rule.
"""

from __future__ import annotations

import logging
from typing import Any

from proprules.config import get_default_config
from proprules.core.accessor import PropertyAccessor, default_accessor
from proprules.core.args import (
    IntegerMaxValueRuleArgs,
    IntegerMinValueRuleArgs,
    MaxLengthRuleArgs,
    MaxValueRuleArgs,
    MinLengthRuleArgs,
    MinValueRuleArgs,
    RegExMatchRuleArgs,
    RuleArgs,
)
from proprules.core.compare import Direction, compare
from proprules.core.kinds import ScalarKind
from proprules.core.result import RuleResult
from proprules.errors import ConfigurationError, ConversionError

__all__ = (
    "integer_max_value",
    "integer_min_value",
    "max_value",
    "min_value",
    "regex_match",
    "string_max_length",
    "string_min_length",
    "string_required",
)

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================


def _check_args(args: Any, expected: type[RuleArgs], rule_name: str) -> None:
    if not isinstance(args, expected):
        raise ConfigurationError(
            f"{rule_name} requires {expected.__name__}, got {type(args).__name__}",
            details={"rule": rule_name, "expected": expected.__name__},
        )


def _read(target: Any, args: RuleArgs, accessor: PropertyAccessor | None) -> Any:
    return (accessor or default_accessor()).get(target, args.property_name)


def _read_text(
    target: Any, args: RuleArgs, accessor: PropertyAccessor | None
) -> str | None:
    value = _read(target, args, accessor)
    if value is not None and not isinstance(value, str):
        raise ConversionError(
            f"Property '{args.property_name}' is not a string: {type(value).__name__}",
            details={"property": args.property_name, "value_type": type(value).__name__},
        )
    return value


def _passed(args: RuleArgs, rule_name: str) -> RuleResult:
    logger.debug("Rule %s passed for %s", rule_name, args)
    return RuleResult.ok(property_name=args.property_name, rule_name=rule_name)


def _broken(args: RuleArgs, rule_name: str, description: str) -> RuleResult:
    args.record_failure(description)
    if get_default_config().log_failures:
        logger.info("Rule %s broken: %s", rule_name, description)
    else:
        logger.debug("Rule %s broken: %s", rule_name, description)
    return RuleResult.broken(
        description, property_name=args.property_name, rule_name=rule_name
    )


# =============================================================================
# String rules
# =============================================================================


def string_required(
    target: Any, args: RuleArgs, *, accessor: PropertyAccessor | None = None
) -> RuleResult:
    """Rule ensuring a string property holds one or more characters.

    Broken when the value is None or "".

    Raises:
        ConversionError: The property holds a non-string value.
    """
    _check_args(args, RuleArgs, "string_required")
    value = _read_text(target, args, accessor)
    if not value:
        return _broken(args, "string_required", f"{args.property_name} required")
    return _passed(args, "string_required")


def string_max_length(
    target: Any, args: MaxLengthRuleArgs, *, accessor: PropertyAccessor | None = None
) -> RuleResult:
    """Rule ensuring a string property does not exceed ``args.max_length``.

    None and "" always pass; combine with string_required to demand a value.
    """
    _check_args(args, MaxLengthRuleArgs, "string_max_length")
    value = _read_text(target, args, accessor)
    if value and len(value) > args.max_length:
        return _broken(
            args,
            "string_max_length",
            f"{args.property_name} can not exceed {args.max_length} characters",
        )
    return _passed(args, "string_max_length")


def string_min_length(
    target: Any, args: MinLengthRuleArgs, *, accessor: PropertyAccessor | None = None
) -> RuleResult:
    """Rule ensuring a non-empty string has at least ``args.min_length`` characters."""
    _check_args(args, MinLengthRuleArgs, "string_min_length")
    value = _read_text(target, args, accessor)
    if value and len(value) < args.min_length:
        return _broken(
            args,
            "string_min_length",
            f"{args.property_name} must be at least {args.min_length} characters",
        )
    return _passed(args, "string_min_length")


def regex_match(
    target: Any, args: RegExMatchRuleArgs, *, accessor: PropertyAccessor | None = None
) -> RuleResult:
    """Rule ensuring a string property matches ``args.pattern`` (re.search).

    None is checked as "".
    """
    _check_args(args, RegExMatchRuleArgs, "regex_match")
    value = _read_text(target, args, accessor)
    if args.regex.search(value or "") is None:
        return _broken(
            args,
            "regex_match",
            f"{args.property_name} does not match regular expression",
        )
    return _passed(args, "regex_match")


# =============================================================================
# Int32 rules
# =============================================================================


def integer_max_value(
    target: Any,
    args: IntegerMaxValueRuleArgs,
    *,
    accessor: PropertyAccessor | None = None,
) -> RuleResult:
    """Rule ensuring an int32 property does not exceed ``args.max_value``."""
    _check_args(args, IntegerMaxValueRuleArgs, "integer_max_value")
    value = _read(target, args, accessor)
    if not compare(ScalarKind.INT32, value, args.max_value, Direction.MAX):
        return _broken(
            args,
            "integer_max_value",
            f"{args.property_name} can not exceed {args.max_value}",
        )
    return _passed(args, "integer_max_value")


def integer_min_value(
    target: Any,
    args: IntegerMinValueRuleArgs,
    *,
    accessor: PropertyAccessor | None = None,
) -> RuleResult:
    """Rule ensuring an int32 property is not below ``args.min_value``."""
    _check_args(args, IntegerMinValueRuleArgs, "integer_min_value")
    value = _read(target, args, accessor)
    if not compare(ScalarKind.INT32, value, args.min_value, Direction.MIN):
        return _broken(
            args,
            "integer_min_value",
            f"{args.property_name} can not be less than {args.min_value}",
        )
    return _passed(args, "integer_min_value")


# =============================================================================
# Generic scalar rules
# =============================================================================


def max_value(
    target: Any, args: MaxValueRuleArgs, *, accessor: PropertyAccessor | None = None
) -> RuleResult:
    """Rule ensuring a scalar property does not exceed ``args.max_value``.

    Value and bound are converted to ``args.kind`` and compared with that
    kind's native ordering. For BOOL the value must equal the bound.

    Raises:
        ConversionError: The value does not fit ``args.kind``.
    """
    _check_args(args, MaxValueRuleArgs, "max_value")
    value = _read(target, args, accessor)
    if not compare(args.kind, value, args.max_value, Direction.MAX):
        return _broken(
            args,
            "max_value",
            f"{args.property_name} can not exceed {args.bound_text()}",
        )
    return _passed(args, "max_value")


def min_value(
    target: Any, args: MinValueRuleArgs, *, accessor: PropertyAccessor | None = None
) -> RuleResult:
    """Rule ensuring a scalar property is not below ``args.min_value``.

    Same dispatch as max_value. The failure text uses "can not be less
    than" unless RuleEngineConfig.legacy_min_value_message is set.
    """
    _check_args(args, MinValueRuleArgs, "min_value")
    value = _read(target, args, accessor)
    if not compare(args.kind, value, args.min_value, Direction.MIN):
        verb = (
            "can not exceed"
            if get_default_config().legacy_min_value_message
            else "can not be less than"
        )
        return _broken(
            args,
            "min_value",
            f"{args.property_name} {verb} {args.bound_text()}",
        )
    return _passed(args, "min_value")
