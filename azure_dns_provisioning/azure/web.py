"""App Service plan, web app and custom hostname operations."""

from __future__ import annotations

from azure.core.exceptions import AzureError
from azure.mgmt.core.tools import parse_resource_id
from azure.mgmt.web.models import (
    AppServicePlan,
    HostNameBinding,
    Site,
    SkuDescription,
)

from ..models import WebAppInfo
from ..utils import get_logger
from .clients import AzureClients
from .resources import resource_group_name

logger = get_logger()

# Premium tier is the cheapest tier that supports custom hostnames with SSL
DEFAULT_PLAN_SKU = {
    "name": "P1",
    "tier": "Premium",
    "size": "P1",
    "family": "P",
    "capacity": 1,
}


def _app_parts(app_id: str) -> tuple[str, str]:
    parts = parse_resource_id(app_id)
    return parts["resource_group"], parts["name"]


def create_app_service_plan(
    clients: AzureClients,
    resource_group_id: str,
    name: str,
    location: str,
    sku: dict | None = None,
) -> str:
    """Create a hosting plan and return its id."""
    plan_input = AppServicePlan(
        location=location,
        sku=SkuDescription(**(sku or DEFAULT_PLAN_SKU)),
        kind="app",
    )
    plan = clients.web.app_service_plans.begin_create_or_update(
        resource_group_name(resource_group_id), name, plan_input
    ).result()
    logger.info(f"Created App Service plan: {plan.name}")
    return plan.id


def create_web_app(
    clients: AzureClients,
    resource_group_id: str,
    plan_id: str,
    name: str,
    location: str,
) -> WebAppInfo:
    """Create a web app on plan_id and return its hostname and verification token."""
    site = clients.web.web_apps.begin_create_or_update(
        resource_group_name(resource_group_id),
        name,
        Site(location=location, server_farm_id=plan_id),
    ).result()
    logger.info(f"Created web app: {site.name}")
    return WebAppInfo(
        id=site.id,
        name=site.name,
        default_host_name=site.default_host_name,
        verification_token=site.custom_domain_verification_id,
    )


def is_hostname_verified(clients: AzureClients, app_id: str, host_name: str) -> bool:
    """Ask App Service whether it can see the DNS records for host_name yet."""
    resource_group, app_name = _app_parts(app_id)
    try:
        analysis = clients.web.web_apps.analyze_custom_hostname(
            resource_group, app_name, host_name=host_name
        )
    except AzureError as e:
        logger.debug(f"Hostname analysis for {host_name} failed: {e}")
        return False

    logger.debug(
        f"Hostname analysis for {host_name}: "
        f"verification={analysis.custom_domain_verification_test}, "
        f"cname={analysis.c_name_records}"
    )
    return analysis.custom_domain_verification_test == "Passed"


def bind_custom_hostname(
    clients: AzureClients, app_id: str, host_name: str, record_type: str = "CName"
) -> None:
    """Bind host_name to the web app, validated through a record of record_type."""
    resource_group, app_name = _app_parts(app_id)
    clients.web.web_apps.create_or_update_host_name_binding(
        resource_group,
        app_name,
        host_name,
        HostNameBinding(custom_host_name_dns_record_type=record_type),
    )
    logger.info(f"Bound host name {host_name} to web app {app_name}")
