"""Logging configuration using AWS Lambda Powertools."""

import os

from aws_lambda_powertools import Logger

# Read log level from environment (default to INFO)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Structured JSON logging; progress is narrated through this single logger
logger = Logger(
    service="azure-dns-provisioning",
    level=LOG_LEVEL,
)


def get_logger():
    """Get the configured logger instance."""
    return logger
