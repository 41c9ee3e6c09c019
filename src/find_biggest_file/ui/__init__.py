"""UI components for console output."""

from __future__ import annotations

from .console import create_console, create_err_console, setup_logging

__all__ = ["create_console", "create_err_console", "setup_logging"]
