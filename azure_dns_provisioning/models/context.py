"""WorkflowContext data class."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class WorkflowContext:
    """State the workflow needs at teardown time.

    Written only by the workflow driver; read by the cleanup tracker once the
    run ends.
    """

    resource_group_id: str | None = None
    completed_steps: list[str] = field(default_factory=list)

    def record_resource_group(self, resource_group_id: str) -> None:
        """Store the resource group id. Set at most once per run."""
        if self.resource_group_id is not None:
            raise ValueError(
                f"Resource group already recorded: {self.resource_group_id}"
            )
        self.resource_group_id = resource_group_id

    def mark_completed(self, step: str) -> None:
        self.completed_steps.append(step)
