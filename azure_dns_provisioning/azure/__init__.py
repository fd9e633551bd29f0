"""Azure management API operations consumed by the workflow."""

from .clients import AzureClients, build_clients
from .compute import create_virtual_machine
from .dns import (
    create_dns_zone,
    delete_dns_zone,
    delete_record,
    list_records,
    upsert_a_record,
    upsert_cname_record,
    upsert_ns_record,
    upsert_txt_record,
)
from .resources import (
    authenticate,
    create_resource_group,
    delete_resource_group,
    resource_group_name,
)
from .web import (
    bind_custom_hostname,
    create_app_service_plan,
    create_web_app,
    is_hostname_verified,
)

__all__ = [
    "AzureClients",
    "authenticate",
    "bind_custom_hostname",
    "build_clients",
    "create_app_service_plan",
    "create_dns_zone",
    "create_resource_group",
    "create_virtual_machine",
    "create_web_app",
    "delete_dns_zone",
    "delete_record",
    "delete_resource_group",
    "is_hostname_verified",
    "list_records",
    "resource_group_name",
    "upsert_a_record",
    "upsert_cname_record",
    "upsert_ns_record",
    "upsert_txt_record",
]
