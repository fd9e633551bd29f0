"""Authentication and resource group operations."""

from __future__ import annotations

from azure.mgmt.core.tools import parse_resource_id

from ..utils import get_logger
from .clients import AzureClients

logger = get_logger()

MANAGEMENT_SCOPE = "https://management.azure.com/.default"


def resource_group_name(resource_id: str) -> str:
    """Extract the resource group name from any ARM resource id."""
    return parse_resource_id(resource_id)["resource_group"]


def authenticate(clients: AzureClients) -> None:
    """Acquire a management token so a bad credential fails before anything is created.

    Raises ClientAuthenticationError untouched if the credential is rejected.
    """
    clients.credential.get_token(MANAGEMENT_SCOPE)
    logger.info(
        "Authenticated service principal",
        extra={"subscription_id": clients.subscription_id},
    )


def create_resource_group(clients: AzureClients, name: str, location: str) -> str:
    """Create or update a resource group and return its id."""
    resource_group = clients.resources.resource_groups.create_or_update(
        name, {"location": location}
    )
    logger.info(f"Created a resource group with name: {resource_group.name}")
    return resource_group.id


def delete_resource_group(
    clients: AzureClients, resource_group_id: str, timeout: int
) -> None:
    """Delete a resource group and everything inside it, waiting for completion."""
    name = resource_group_name(resource_group_id)
    poller = clients.resources.resource_groups.begin_delete(name)
    poller.result(timeout=timeout)
    if not poller.done():
        raise TimeoutError(
            f"Resource group {name} deletion did not finish within {timeout}s"
        )
