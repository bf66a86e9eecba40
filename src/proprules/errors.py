# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Declared errors for the rule engine.

A broken rule is not an error: rule functions report it as a failing
RuleResult. The exceptions below mean the rule could not run at all.

Hierarchy:
    ProprulesError
    ├── ConfigurationError       rule setup is wrong
    │   └── UnsupportedKindError  kind outside the scalar-kind set
    └── AccessError              value could not be read or converted
        ├── PropertyNotFoundError
        ├── PropertyNotReadableError
        └── ConversionError
"""

from __future__ import annotations

from typing import Any

__all__ = (
    "AccessError",
    "ConfigurationError",
    "ConversionError",
    "PropertyNotFoundError",
    "PropertyNotReadableError",
    "ProprulesError",
    "UnsupportedKindError",
)


class ProprulesError(Exception):
    """Base error. Carries a message and structured details."""

    default_message: str = "Rule engine error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and reports."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": dict(self.details),
        }

    def __repr__(self) -> str:
        if self.details:
            return f"{type(self).__name__}({self.message!r}, details={self.details!r})"
        return f"{type(self).__name__}({self.message!r})"


class ConfigurationError(ProprulesError):
    default_message = "Invalid rule configuration"


class UnsupportedKindError(ConfigurationError):
    default_message = "Primitive scalar type required"


class AccessError(ProprulesError):
    default_message = "Property value could not be accessed"


class PropertyNotFoundError(AccessError):
    default_message = "Property not found"


class PropertyNotReadableError(AccessError):
    default_message = "Property not readable"


class ConversionError(AccessError):
    default_message = "Value could not be converted"
