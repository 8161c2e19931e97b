# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Shared infrastructure for SSI: configuration, logging and base errors."""

from .config import CoreSettings, clear_config_cache, get_config
from .exceptions import ConfigException, SsiException, ValidationException
from .logging import configure_logging

__all__ = [
    "ConfigException",
    "CoreSettings",
    "SsiException",
    "ValidationException",
    "clear_config_cache",
    "configure_logging",
    "get_config",
]
