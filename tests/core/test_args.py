# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for proprules.core.args - RuleArgs hierarchy."""

from __future__ import annotations

import ctypes
import struct

import pytest

from proprules.config import RuleEngineConfig, set_default_config
from proprules.core.args import (
    IntegerMaxValueRuleArgs,
    IntegerMinValueRuleArgs,
    MaxLengthRuleArgs,
    MaxValueRuleArgs,
    MinLengthRuleArgs,
    MinValueRuleArgs,
    RegExMatchRuleArgs,
    RuleArgs,
    format_bound,
)
from proprules.core.kinds import ScalarKind
from proprules.errors import ConfigurationError, UnsupportedKindError

# =============================================================================
# Tests: RuleArgs
# =============================================================================


class TestRuleArgs:
    """Tests for the base RuleArgs."""

    def test_positional_and_keyword(self):
        """Property name can be passed either way."""
        assert RuleArgs("Name").property_name == "Name"
        assert RuleArgs(property_name="Name").property_name == "Name"

    def test_name_is_stripped(self):
        assert RuleArgs("  Name ").property_name == "Name"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        """Empty property names fail fast with ConfigurationError."""
        with pytest.raises(ConfigurationError):
            RuleArgs(name)

    def test_missing_name_rejected(self):
        with pytest.raises(ConfigurationError):
            RuleArgs()

    def test_non_string_name_rejected(self):
        with pytest.raises(ConfigurationError):
            RuleArgs(42)

    def test_too_many_positional(self):
        with pytest.raises(ConfigurationError, match="positional"):
            RuleArgs("Name", 5)

    def test_duplicate_argument(self):
        with pytest.raises(ConfigurationError, match="multiple values"):
            RuleArgs("Name", property_name="Other")

    def test_unknown_field_rejected(self):
        with pytest.raises(ConfigurationError):
            RuleArgs("Name", bogus=1)

    def test_frozen(self):
        """Property name cannot change after construction."""
        args = RuleArgs("Name")
        with pytest.raises(Exception):
            args.property_name = "Other"

    def test_description_starts_empty(self):
        assert RuleArgs("Name").description == ""

    def test_record_failure(self):
        """record_failure sets the description slot."""
        args = RuleArgs("Name")
        args.record_failure("Name required")
        assert args.description == "Name required"

    def test_canonical_is_property_name(self):
        assert str(RuleArgs("Name")) == "Name"

    def test_equality_by_canonical(self):
        """Args compare by type and canonical text, not identity."""
        assert RuleArgs("Name") == RuleArgs("Name")
        assert RuleArgs("Name") != RuleArgs("Other")
        assert len({RuleArgs("Name"), RuleArgs("Name")}) == 1

    def test_equality_ignores_description(self):
        first, second = RuleArgs("Name"), RuleArgs("Name")
        first.record_failure("Name required")
        assert first == second


# =============================================================================
# Tests: length args
# =============================================================================


class TestLengthArgs:
    """Tests for MaxLengthRuleArgs and MinLengthRuleArgs."""

    def test_max_length(self):
        args = MaxLengthRuleArgs("Name", 50)
        assert args.max_length == 50
        assert args.bound == 50
        assert str(args) == "Name!50"

    def test_zero_allowed(self):
        assert MaxLengthRuleArgs("Name", 0).max_length == 0

    def test_negative_rejected(self):
        """Negative length bounds are configuration errors."""
        with pytest.raises(ConfigurationError):
            MaxLengthRuleArgs("Name", -1)
        with pytest.raises(ConfigurationError):
            MinLengthRuleArgs("Name", -1)

    @pytest.mark.parametrize("bound", ["5", 5.0, True])
    def test_non_int_rejected(self, bound):
        with pytest.raises(ConfigurationError):
            MaxLengthRuleArgs("Name", bound)

    def test_max_and_min_not_equal(self):
        """Same canonical text in different arg types are distinct."""
        assert MaxLengthRuleArgs("Name", 5) != MinLengthRuleArgs("Name", 5)


# =============================================================================
# Tests: int32 args
# =============================================================================


class TestIntegerArgs:
    """Tests for the fixed int32 bound args."""

    def test_max_value(self):
        args = IntegerMaxValueRuleArgs("Age", 120)
        assert args.max_value == 120
        assert args.kind is ScalarKind.INT32
        assert str(args) == "Age!120"

    def test_min_value(self):
        assert str(IntegerMinValueRuleArgs("Age", -5)) == "Age!-5"

    def test_outside_int32(self):
        with pytest.raises(ConfigurationError):
            IntegerMaxValueRuleArgs("Age", 2**31)


# =============================================================================
# Tests: generic scalar args
# =============================================================================


class TestScalarArgs:
    """Tests for MaxValueRuleArgs and MinValueRuleArgs."""

    def test_inferred_kind(self):
        args = MaxValueRuleArgs("Age", 120)
        assert args.kind is ScalarKind.INT32
        assert args.max_value == 120
        assert str(args) == "Age!120"

    @pytest.mark.parametrize(
        "spec,expected",
        [
            (int, ScalarKind.INT32),
            ("uint8", ScalarKind.UINT8),
            (ctypes.c_uint16, ScalarKind.UINT16),
            (ScalarKind.FLOAT32, ScalarKind.FLOAT32),
        ],
    )
    def test_explicit_kind(self, spec, expected):
        assert MaxValueRuleArgs("Level", 10, kind=spec).kind is expected

    def test_kind_positional(self):
        assert MinValueRuleArgs("Level", 1, "int8").kind is ScalarKind.INT8

    def test_bound_converted_to_native(self):
        """Bounds are stored in the kind's native form."""
        args = MaxValueRuleArgs("Weight", 10, kind=float)
        assert isinstance(args.max_value, float)
        assert MaxValueRuleArgs("Grade", 66, kind="char").max_value == "B"

    @pytest.mark.parametrize("spec", [str, list, "decimal", object])
    def test_unsupported_kind(self, spec):
        """Non-scalar kinds raise UnsupportedKindError at construction."""
        with pytest.raises(UnsupportedKindError):
            MaxValueRuleArgs("Name", 1, kind=spec)

    def test_unsupported_inferred_kind(self):
        with pytest.raises(UnsupportedKindError):
            MinValueRuleArgs("Tags", ["a"])

    def test_bound_outside_kind(self):
        """A bound that does not fit its kind is a configuration error."""
        with pytest.raises(ConfigurationError, match="not representable"):
            MaxValueRuleArgs("Level", 300, kind="uint8")

    def test_missing_bound(self):
        with pytest.raises(ConfigurationError):
            MaxValueRuleArgs("Level")

    def test_canonical_formats(self):
        """Canonical text is deterministic for every kind."""
        assert str(MaxValueRuleArgs("Flag", True)) == "Flag!True"
        assert str(MaxValueRuleArgs("Ratio", 0.5)) == "Ratio!0.5"
        assert str(MinValueRuleArgs("Grade", "C")) == "Grade!C"

    def test_separator_taken_at_construction(self):
        set_default_config(RuleEngineConfig(separator="|"))
        assert str(MaxValueRuleArgs("Age", 120)) == "Age|120"

    def test_identity_stable_across_config_changes(self):
        """Changing the config later leaves canonical text and hash alone."""
        args = MaxValueRuleArgs("Age", 120)
        members = {args}
        before = hash(args)
        set_default_config(RuleEngineConfig(separator="|"))
        assert args.canonical() == "Age!120"
        assert hash(args) == before
        assert args in members

    @pytest.mark.parametrize(
        "bound,expected",
        [(0.1, "V!0.1"), (1.5, "V!1.5"), (16777216, "V!16777216.0")],
    )
    def test_float32_canonical_is_shortest(self, bound, expected):
        """Single-precision bounds print their shortest round-trip text."""
        assert MaxValueRuleArgs("V", bound, kind="float").canonical() == expected

    def test_float64_canonical_is_repr(self):
        assert MaxValueRuleArgs("V", 0.1, kind="double").canonical() == "V!0.1"

    def test_equal_args_hash_equal(self):
        first = MaxValueRuleArgs("Age", 120)
        second = MaxValueRuleArgs("Age", 120)
        assert first == second
        assert hash(first) == hash(second)


# =============================================================================
# Tests: regex args
# =============================================================================


class TestRegExArgs:
    def test_compiled(self):
        args = RegExMatchRuleArgs("Code", r"^[A-Z]{3}$")
        assert args.regex.search("ABC")
        assert str(args) == "Code!^[A-Z]{3}$"

    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError, match="regular expression"):
            RegExMatchRuleArgs("Code", "[unclosed")


# =============================================================================
# Tests: format_bound
# =============================================================================


class TestFormatBound:
    @pytest.mark.parametrize(
        "value,expected",
        [(True, "True"), (False, "False"), (120, "120"), (0.1, "0.1"), ("x", "x")],
    )
    def test_format(self, value, expected):
        assert format_bound(value) == expected

    def test_float32_shortest_text(self):
        widened = struct.unpack("<f", struct.pack("<f", 0.1))[0]
        assert format_bound(widened) == repr(widened)
        assert format_bound(widened, ScalarKind.FLOAT32) == "0.1"

    def test_float32_non_finite(self):
        assert format_bound(float("inf"), ScalarKind.FLOAT32) == "inf"
