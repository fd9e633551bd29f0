"""Data models for the DNS provisioning workflow."""

from .config import Config
from .context import WorkflowContext
from .results import (
    CleanupOutcome,
    CleanupResult,
    RecordSetInfo,
    VirtualMachineInfo,
    WebAppInfo,
    WorkflowResult,
    ZoneInfo,
)

__all__ = [
    "CleanupOutcome",
    "CleanupResult",
    "Config",
    "RecordSetInfo",
    "VirtualMachineInfo",
    "WebAppInfo",
    "WorkflowContext",
    "WorkflowResult",
    "ZoneInfo",
]
