"""Best-effort teardown of the resource group created by a workflow run."""

from __future__ import annotations

from azure.core.exceptions import ResourceNotFoundError

from .azure import AzureClients, delete_resource_group
from .models import CleanupOutcome, CleanupResult, WorkflowContext
from .utils import get_logger

logger = get_logger()


def teardown_resource_group(
    clients: AzureClients, context: WorkflowContext, timeout: int
) -> CleanupResult:
    """
    Delete the recorded resource group, relying on cascade delete for its contents.

    Never raises: the caller learns what happened from the returned outcome.

    Returns:
        NOTHING_TO_CLEAN if no group was recorded or it no longer exists,
        DELETED once the delete operation completed,
        FAILED with the error otherwise.
    """
    resource_group_id = context.resource_group_id
    if resource_group_id is None:
        logger.info("Did not create any resources in Azure. No clean up is necessary")
        return CleanupResult(outcome=CleanupOutcome.NOTHING_TO_CLEAN)

    try:
        logger.info(f"Deleting Resource Group: {resource_group_id}")
        delete_resource_group(clients, resource_group_id, timeout)
        logger.info(f"Deleted Resource Group: {resource_group_id}")
        return CleanupResult(
            outcome=CleanupOutcome.DELETED, resource_group_id=resource_group_id
        )

    except ResourceNotFoundError as e:
        logger.info(
            "Resource group not found. No clean up is necessary",
            extra={"resource_group_id": resource_group_id},
        )
        return CleanupResult(
            outcome=CleanupOutcome.NOTHING_TO_CLEAN,
            resource_group_id=resource_group_id,
            error=e,
        )
    except Exception as e:
        logger.error(
            "Failed to delete resource group",
            extra={"resource_group_id": resource_group_id, "error": str(e)},
        )
        return CleanupResult(
            outcome=CleanupOutcome.FAILED,
            resource_group_id=resource_group_id,
            error=e,
        )
