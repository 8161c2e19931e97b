# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Output formatting for CLI commands.

Commands build a plain dict; it is printed either as indented JSON or as
aligned ``key: value`` lines.
"""

from __future__ import annotations

import json
import sys
from typing import Any


def output_result(data: dict[str, Any], as_json: bool = False) -> None:
    """Print a command result as JSON or as one ``key: value`` line per field."""
    if as_json:
        print(json.dumps(data, indent=2, default=str))
        return

    width = max((len(key) for key in data), default=0)
    for key, value in data.items():
        if isinstance(value, list | tuple):
            if not value:
                print(f"{key:<{width}}: -")
            for i, item in enumerate(value):
                label = key if i == 0 else ""
                print(f"{label:<{width}}: {item}")
        else:
            print(f"{key:<{width}}: {'-' if value is None else value}")


def output_error(message: str, details: dict[str, Any] | None = None, as_json: bool = False) -> None:
    """Print error message to stderr."""
    if as_json:
        print(json.dumps({"error": message, "details": details or {}}, indent=2), file=sys.stderr)
    else:
        print(f"Error: {message}", file=sys.stderr)
