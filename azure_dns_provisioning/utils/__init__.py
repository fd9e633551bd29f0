"""Utility functions for the DNS provisioning workflow."""

from .logging_config import get_logger
from .naming import create_password, create_random_name

__all__ = [
    "create_password",
    "create_random_name",
    "get_logger",
]
