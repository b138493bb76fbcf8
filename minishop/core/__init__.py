"""
Core utilities and configuration for minishop.

This package provides core functionality including logging configuration,
monitoring, the auditing context, domain exceptions and the database layer.
"""

from minishop.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
