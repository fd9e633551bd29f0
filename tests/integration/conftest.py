"""Fixtures specific to integration tests."""

from __future__ import annotations
import pytest
from unittest.mock import Mock, patch

from azure_dns_provisioning.models import VirtualMachineInfo, WebAppInfo, ZoneInfo
from builders import (
    APP_ID,
    CHILD_NAME_SERVERS,
    RG_ID,
    ROOT_NAME_SERVERS,
    VM_ADDRESSES,
    zone_id,
)

# Azure operations the workflow and teardown call, patched where they are looked up
WORKFLOW_OPERATIONS = [
    "authenticate",
    "bind_custom_hostname",
    "create_app_service_plan",
    "create_dns_zone",
    "create_resource_group",
    "create_virtual_machine",
    "create_web_app",
    "delete_dns_zone",
    "delete_record",
    "is_hostname_verified",
    "list_records",
    "upsert_a_record",
    "upsert_cname_record",
    "upsert_ns_record",
    "upsert_txt_record",
]


@pytest.fixture(autouse=True)
def _mark_as_integration(request):
    """Automatically mark all tests in integration/ as integration tests."""
    request.node.add_marker(pytest.mark.integration)


class RecordingClock:
    """time replacement: sleep is recorded on the shared manager and advances monotonic."""

    def __init__(self, manager: Mock):
        self.manager = manager
        self.now = 0.0

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.manager.sleep(seconds)
        self.now += seconds


def _create_zone(clients, rg_id, zone_name):
    servers = CHILD_NAME_SERVERS if zone_name.startswith("partners.") else ROOT_NAME_SERVERS
    return ZoneInfo(id=zone_id(zone_name), name=zone_name, name_servers=list(servers))


def _create_vm(clients, rg_id, prefix, location, size, username):
    return VirtualMachineInfo(
        id=f"{rg_id}/providers/Microsoft.Compute/virtualMachines/{prefix}abc123",
        name=f"{prefix}abc123",
        public_ip_address=VM_ADDRESSES[prefix],
    )


@pytest.fixture
def azure_ops():
    """
    Patch every Azure operation with children of one Mock.

    The shared parent records calls in order, including propagation sleeps
    and the teardown delete, so tests can assert on the exact sequence.
    """
    manager = Mock()
    manager.create_resource_group.return_value = RG_ID
    manager.create_dns_zone.side_effect = _create_zone
    manager.create_app_service_plan.return_value = "plan-id"
    manager.create_web_app.return_value = WebAppInfo(
        id=APP_ID,
        name="SampleWebAppabc123",
        default_host_name="app123.example-host.net",
        verification_token="token-123",
    )
    manager.create_virtual_machine.side_effect = _create_vm
    manager.list_records.return_value = []
    manager.is_hostname_verified.return_value = True

    patchers = [
        patch(f"azure_dns_provisioning.workflow.{name}", getattr(manager, name))
        for name in WORKFLOW_OPERATIONS
    ]
    patchers.append(
        patch(
            "azure_dns_provisioning.cleanup.delete_resource_group",
            manager.delete_resource_group,
        )
    )
    patchers.append(
        patch("azure_dns_provisioning.propagation.time", RecordingClock(manager))
    )
    patchers.append(
        patch(
            "azure_dns_provisioning.workflow.create_random_name",
            side_effect=lambda prefix: f"{prefix}abc123",
        )
    )

    for patcher in patchers:
        patcher.start()
    yield manager
    for patcher in reversed(patchers):
        patcher.stop()

