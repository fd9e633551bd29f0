"""Virtual machines with a public IPv4 address."""

from __future__ import annotations

from ..errors import StepFailedError
from ..models import VirtualMachineInfo
from ..utils import create_password, create_random_name, get_logger
from .clients import AzureClients
from .resources import resource_group_name

logger = get_logger()

ADDRESS_PREFIX = "10.0.0.0/28"

WINDOWS_SERVER_IMAGE = {
    "publisher": "MicrosoftWindowsServer",
    "offer": "WindowsServer",
    "sku": "2012-R2-Datacenter",
    "version": "latest",
}


def _create_network(clients: AzureClients, resource_group: str, vm_name: str, location: str):
    """Create the vnet, subnet, public IP and NIC a VM needs. Returns (nic, ip name)."""
    network = clients.network

    vnet = network.virtual_networks.begin_create_or_update(
        resource_group,
        f"{vm_name}-vnet",
        {
            "location": location,
            "address_space": {"address_prefixes": [ADDRESS_PREFIX]},
            "subnets": [{"name": "default", "address_prefix": ADDRESS_PREFIX}],
        },
    ).result()
    subnet_id = vnet.subnets[0].id

    ip_name = create_random_name(f"{vm_name}-ip-")
    public_ip = network.public_ip_addresses.begin_create_or_update(
        resource_group,
        ip_name,
        {
            "location": location,
            "sku": {"name": "Standard"},
            "public_ip_allocation_method": "Static",
            "public_ip_address_version": "IPv4",
        },
    ).result()

    nic = network.network_interfaces.begin_create_or_update(
        resource_group,
        f"{vm_name}-nic",
        {
            "location": location,
            "ip_configurations": [
                {
                    "name": "ipconfig1",
                    "subnet": {"id": subnet_id},
                    "private_ip_allocation_method": "Dynamic",
                    "public_ip_address": {"id": public_ip.id},
                }
            ],
        },
    ).result()

    return nic, ip_name


def create_virtual_machine(
    clients: AzureClients,
    resource_group_id: str,
    name_prefix: str,
    location: str,
    vm_size: str,
    admin_username: str,
) -> VirtualMachineInfo:
    """Create a Windows VM with a static public IPv4 and read the address back."""
    resource_group = resource_group_name(resource_group_id)
    vm_name = create_random_name(name_prefix)
    logger.info(f"Creating a virtual machine with public IP: {vm_name}")

    nic, ip_name = _create_network(clients, resource_group, vm_name, location)

    vm = clients.compute.virtual_machines.begin_create_or_update(
        resource_group,
        vm_name,
        {
            "location": location,
            "hardware_profile": {"vm_size": vm_size},
            "storage_profile": {"image_reference": WINDOWS_SERVER_IMAGE},
            "os_profile": {
                "computer_name": vm_name[:15],
                "admin_username": admin_username,
                "admin_password": create_password(),
            },
            "network_profile": {"network_interfaces": [{"id": nic.id}]},
        },
    ).result()

    # Records are written against this address, so it must exist now
    public_ip = clients.network.public_ip_addresses.get(resource_group, ip_name)
    if not public_ip.ip_address:
        raise StepFailedError(f"Virtual machine {vm_name} has no public IPv4 address")

    logger.info(
        "Virtual machine created",
        extra={"vm_name": vm.name, "public_ip": public_ip.ip_address},
    )
    return VirtualMachineInfo(id=vm.id, name=vm.name, public_ip_address=public_ip.ip_address)
