# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""SSI CLI - create, sign and verify self-sovereign identities."""

from .main import app, main

__all__ = ["main", "app"]
