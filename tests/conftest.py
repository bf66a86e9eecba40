# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from proprules.config import reset_default_config


@pytest.fixture(autouse=True)
def _fresh_config():
    """Every test starts from the default RuleEngineConfig."""
    reset_default_config()
    yield
    reset_default_config()
