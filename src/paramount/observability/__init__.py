"""
Paramount - Observability Module

Logging setup for the argument validation layer.
"""

from .logging_setup import JSONFormatter, setup_logging

__all__ = ["JSONFormatter", "setup_logging"]
