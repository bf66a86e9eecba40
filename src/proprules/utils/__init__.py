# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .display import display_results, format_results, results_table

__all__ = ("display_results", "format_results", "results_table")
