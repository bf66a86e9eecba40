# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Outcome of one rule evaluation."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("RuleResult",)


class RuleResult(BaseModel):
    """Pass/fail plus failure description.

    Truthy iff the rule passed, and unpacks as ``(passed, description)``:

        passed, description = max_value(person, args)

    Attributes:
        passed: False if the rule is broken.
        description: Human-readable failure text; empty when passed.
        property_name: Property the rule checked.
        rule_name: Rule function name (e.g. "max_value").
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    description: str = Field(default="")
    property_name: str = Field(default="")
    rule_name: str = Field(default="")

    @classmethod
    def ok(cls, property_name: str = "", rule_name: str = "") -> RuleResult:
        return cls(passed=True, property_name=property_name, rule_name=rule_name)

    @classmethod
    def broken(
        cls, description: str, property_name: str = "", rule_name: str = ""
    ) -> RuleResult:
        return cls(
            passed=False,
            description=description,
            property_name=property_name,
            rule_name=rule_name,
        )

    def __bool__(self) -> bool:
        return self.passed

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        yield self.passed
        yield self.description

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
