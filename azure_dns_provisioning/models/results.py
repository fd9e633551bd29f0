"""Value types returned by provisioning operations and the workflow."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class ZoneInfo:
    """A created DNS zone."""

    id: str
    name: str
    name_servers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class WebAppInfo:
    """A created web application."""

    id: str
    name: str
    default_host_name: str
    verification_token: str


@dataclass(frozen=True)
class VirtualMachineInfo:
    """A created virtual machine and the public address read back from it."""

    id: str
    name: str
    public_ip_address: str


@dataclass(frozen=True)
class RecordSetInfo:
    """A record set as listed from a zone."""

    name: str
    record_type: str
    ttl: int | None
    values: list[str] = field(default_factory=list)


class CleanupOutcome(str, Enum):
    """How the best-effort teardown ended."""

    NOTHING_TO_CLEAN = "NOTHING_TO_CLEAN"
    DELETED = "DELETED"
    FAILED = "FAILED"


@dataclass
class CleanupResult:
    """Result of the resource group teardown attempt."""

    outcome: CleanupOutcome
    resource_group_id: str | None = None
    error: Exception | None = None

    @property
    def attempted(self) -> bool:
        return self.resource_group_id is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "resource_group_id": self.resource_group_id,
            "error": str(self.error) if self.error else None,
        }


@dataclass
class WorkflowResult:
    """Outcome of one workflow run, including its teardown."""

    succeeded: bool
    cleanup: CleanupResult
    completed_steps: list[str] = field(default_factory=list)
    failed_step: str | None = None
    error: Exception | None = None
    name_servers: list[str] = field(default_factory=list)
    host_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "succeeded": self.succeeded,
            "failed_step": self.failed_step,
            "error": str(self.error) if self.error else None,
            "error_type": type(self.error).__name__ if self.error else None,
            "completed_steps": list(self.completed_steps),
            "name_servers": list(self.name_servers),
            "host_name": self.host_name,
            "cleanup": self.cleanup.to_dict(),
        }
