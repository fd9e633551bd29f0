"""Azure management clients shared by every provisioning step."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from azure.identity import ClientSecretCredential
from azure.mgmt.compute import ComputeManagementClient
from azure.mgmt.dns import DnsManagementClient
from azure.mgmt.network import NetworkManagementClient
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.web import WebSiteManagementClient

from ..models.config import Config


@dataclass
class AzureClients:
    """Credential plus one management client per service, bound to a subscription."""

    subscription_id: str
    credential: Any
    resources: Any
    dns: Any
    web: Any
    network: Any
    compute: Any


def build_clients(config: Config) -> AzureClients:
    """Create the service principal credential and management clients."""
    credential = ClientSecretCredential(
        tenant_id=config.tenant_id,
        client_id=config.client_id,
        client_secret=config.client_secret,
    )
    subscription_id = config.subscription_id

    return AzureClients(
        subscription_id=subscription_id,
        credential=credential,
        resources=ResourceManagementClient(credential, subscription_id),
        dns=DnsManagementClient(credential, subscription_id),
        web=WebSiteManagementClient(credential, subscription_id),
        network=NetworkManagementClient(credential, subscription_id),
        compute=ComputeManagementClient(credential, subscription_id),
    )
