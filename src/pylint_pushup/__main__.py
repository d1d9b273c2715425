# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m pylint_pushup``."""

from __future__ import annotations

from .cli import run

run()
