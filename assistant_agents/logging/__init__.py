# -*- coding: utf-8 -*-
"""Logging helpers shared across the package."""

from .logger import SUCCESS, Logger, configure_logging, get_logger

__all__ = ["Logger", "SUCCESS", "configure_logging", "get_logger"]
