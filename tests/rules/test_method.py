# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for proprules.rules.method - rule handler binding."""

from __future__ import annotations

import functools

import pytest

from proprules.core.args import MaxLengthRuleArgs, MaxValueRuleArgs, RuleArgs
from proprules.rules.common import max_value, string_max_length, string_required
from proprules.rules.method import RULES, RuleMethod, get_rule


class TestRuleLookup:
    """Tests for RULES and get_rule."""

    def test_all_rules_listed(self):
        assert set(RULES) == {
            "string_required",
            "string_max_length",
            "string_min_length",
            "regex_match",
            "integer_max_value",
            "integer_min_value",
            "max_value",
            "min_value",
        }

    def test_get_rule(self):
        assert get_rule("max_value") is max_value

    def test_unknown_rule(self):
        with pytest.raises(KeyError, match="Available"):
            get_rule("email")

    def test_read_only(self):
        with pytest.raises(TypeError):
            RULES["custom"] = max_value


class TestRuleMethod:
    """Tests for RuleMethod identity and invocation."""

    def test_rule_name(self):
        method = RuleMethod(max_value, MaxValueRuleArgs("Age", 120))
        assert method.rule_name == "rule://max_value/Age!120"
        assert str(method) == method.rule_name
        assert method.property_name == "Age"

    def test_partial_handler_rule_name(self):
        method = RuleMethod(functools.partial(max_value), MaxValueRuleArgs("Age", 120))
        assert method.rule_name == "rule://partial/Age!120"

    def test_callable_object_handler_rule_name(self):
        """Handlers without __name__ are named by their type."""

        class AgeCheck:
            def __call__(self, target, args, *, accessor=None):
                return max_value(target, args, accessor=accessor)

        method = RuleMethod(AgeCheck(), MaxValueRuleArgs("Age", 120))
        assert method.rule_name == "rule://AgeCheck/Age!120"
        assert method.invoke({"Age": 150}).passed is False

    def test_plain_args_rule_name(self):
        assert RuleMethod(string_required, RuleArgs("Name")).rule_name == "rule://string_required/Name"

    def test_handler_by_name(self):
        method = RuleMethod("string_max_length", MaxLengthRuleArgs("Name", 5))
        assert method.handler is string_max_length

    def test_invoke(self):
        method = RuleMethod(max_value, MaxValueRuleArgs("Age", 120))
        result = method.invoke({"Age": 150})
        assert result.description == "Age can not exceed 120"
        assert method.args.description == "Age can not exceed 120"

    def test_identity_is_deterministic(self):
        """Equal handler and args give equal, hash-equal methods."""
        first = RuleMethod(max_value, MaxValueRuleArgs("Age", 120))
        second = RuleMethod(max_value, MaxValueRuleArgs("Age", 120))
        assert first == second
        assert len({first, second}) == 1
        assert first != RuleMethod(max_value, MaxValueRuleArgs("Age", 121))

    def test_rejects_bad_inputs(self):
        with pytest.raises(TypeError):
            RuleMethod(5, RuleArgs("Name"))
        with pytest.raises(TypeError):
            RuleMethod(max_value, "Age")
