# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Validate a customer object with bound rule methods.

Demonstrates:
1. RuleArgs variants carrying bounds of different scalar kinds
2. RuleMethod binding a rule function to its args
3. Rendering the results as a table

Usage:
    uv run python examples/customer_rules.py
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass

from proprules import (
    MaxLengthRuleArgs,
    MaxValueRuleArgs,
    MinValueRuleArgs,
    RuleArgs,
    RuleMethod,
    max_value,
    min_value,
    string_max_length,
    string_required,
)
from proprules.utils import display_results


@dataclass
class Customer:
    name: str
    age: int
    credit_score: int
    discount: float
    active: bool


RULE_METHODS = [
    RuleMethod(string_required, RuleArgs("name")),
    RuleMethod(string_max_length, MaxLengthRuleArgs("name", 20)),
    RuleMethod(max_value, MaxValueRuleArgs("age", 120, kind=int)),
    RuleMethod(min_value, MinValueRuleArgs("age", 18, kind=ctypes.c_uint8)),
    RuleMethod(max_value, MaxValueRuleArgs("credit_score", 850, kind="uint16")),
    RuleMethod(max_value, MaxValueRuleArgs("discount", 0.25, kind="float")),
    RuleMethod(min_value, MinValueRuleArgs("active", True)),
]


def main() -> None:
    customer = Customer(
        name="Grace Brewster Murray Hopper",
        age=150,
        credit_score=790,
        discount=0.3,
        active=True,
    )

    for method in RULE_METHODS:
        print(method.rule_name)

    results = [method.invoke(customer) for method in RULE_METHODS]
    display_results(results, title="Customer")


if __name__ == "__main__":
    main()
