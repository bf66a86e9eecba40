# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Engine-wide configuration.

Provides RuleEngineConfig and a process-wide default instance.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = (
    "RuleEngineConfig",
    "get_default_config",
    "reset_default_config",
    "set_default_config",
)


class RuleEngineConfig(BaseModel):
    """Configuration for rule argument encoding and failure reporting.

    Attributes:
        separator: Joins property name and bound in canonical args text.
        legacy_min_value_message: Report min-value failures with the
            "can not exceed" wording used by older message catalogs.
        log_failures: Log every broken rule at INFO on ``proprules.rules.common``.
    """

    model_config = ConfigDict(frozen=True)

    separator: str = Field(default="!", min_length=1)
    legacy_min_value_message: bool = Field(default=False)
    log_failures: bool = Field(default=False)


_default_config: RuleEngineConfig | None = None


def get_default_config() -> RuleEngineConfig:
    """Get the process-wide config, creating it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = RuleEngineConfig()
    return _default_config


def set_default_config(config: RuleEngineConfig) -> None:
    global _default_config
    if not isinstance(config, RuleEngineConfig):
        raise TypeError(
            f"Expected RuleEngineConfig, got {type(config).__name__}"
        )
    _default_config = config


def reset_default_config() -> None:
    """Drop the process-wide config (mainly for tests)."""
    global _default_config
    _default_config = None
