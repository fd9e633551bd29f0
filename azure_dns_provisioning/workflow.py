"""DNS zone, web app and virtual machine provisioning workflow.

Steps run strictly in order, each blocking until Azure confirms completion.
The first failure stops the chain; the resource group is then deleted
whether the run succeeded or not.

Sequence:
  1. resource group
  2. root DNS zone (name servers reported for registrar delegation)
  3. App Service plan and web app
  4. CNAME www -> app default host name, TXT asuid.www -> verification id
  5. propagation wait
  6. bind www.<zone> to the web app
  7. (extended) VM + A record, child zone + NS delegation, VM + A record
  8. (extended) remove the A record, delete the child zone
"""

from __future__ import annotations
from contextlib import contextmanager
from functools import partial

from .azure import (
    AzureClients,
    authenticate,
    bind_custom_hostname,
    create_app_service_plan,
    create_dns_zone,
    create_resource_group,
    create_virtual_machine,
    create_web_app,
    delete_dns_zone,
    delete_record,
    is_hostname_verified,
    list_records,
    upsert_a_record,
    upsert_cname_record,
    upsert_ns_record,
    upsert_txt_record,
)
from .cleanup import teardown_resource_group
from .errors import ProvisioningError, classify_error
from .models import (
    Config,
    VirtualMachineInfo,
    WebAppInfo,
    WorkflowContext,
    WorkflowResult,
    ZoneInfo,
)
from .propagation import wait_fixed, wait_for_propagation
from .utils import create_random_name, get_logger

logger = get_logger()

STEP_AUTHENTICATE = "authenticate"
STEP_RESOURCE_GROUP = "create_resource_group"
STEP_ROOT_ZONE = "create_root_zone"
STEP_WEB_APP = "create_web_app"
STEP_WEB_APP_RECORDS = "add_web_app_records"
STEP_PROPAGATION = "wait_for_propagation"
STEP_BIND_HOST_NAME = "bind_host_name"
STEP_EMPLOYEES_RECORD = "add_employees_record"
STEP_PARTNERS_ZONE = "delegate_partners_zone"
STEP_PARTNERS_RECORD = "add_partners_record"
STEP_REMOVE_EMPLOYEES_RECORD = "remove_employees_record"
STEP_DELETE_PARTNERS_ZONE = "delete_partners_zone"

WWW_RECORD = "www"
VERIFICATION_RECORD = "asuid.www"
EMPLOYEES_RECORD = "employees"
PARTNERS_LABEL = "partners"


@contextmanager
def _step(context: WorkflowContext, name: str):
    """Log a step and translate its failure into a workflow error."""
    logger.info(f"Starting step: {name}", extra={"step": name})
    try:
        yield
    except Exception as e:
        classified = classify_error(name, e)
        if classified is e:
            raise
        raise classified from e
    context.mark_completed(name)
    logger.info(f"Completed step: {name}", extra={"step": name})


def provision_root_zone(clients: AzureClients, resource_group_id: str) -> ZoneInfo:
    """Create the root zone and tell the operator where to delegate it."""
    zone_name = f"{create_random_name('contoso')}.com"
    logger.info(f"Creating root DNS zone {zone_name}...")
    zone = create_dns_zone(clients, resource_group_id, zone_name)

    # Registrar delegation is out of band; the run does not wait for it
    logger.info(
        f"Go to your registrar portal and configure your domain {zone.name} "
        f"with following name server addresses"
    )
    for name_server in zone.name_servers:
        logger.info(f" {name_server}")
    return zone


def provision_web_app(
    clients: AzureClients, config: Config, resource_group_id: str
) -> WebAppInfo:
    logger.info("Creating Web App...")
    plan_id = create_app_service_plan(
        clients,
        resource_group_id,
        create_random_name("servicePlan"),
        config.location,
    )
    return create_web_app(
        clients,
        resource_group_id,
        plan_id,
        create_random_name("SampleWebApp"),
        config.location,
    )


def add_web_app_records(
    clients: AzureClients, config: Config, zone: ZoneInfo, app: WebAppInfo
) -> str:
    """
    Alias www to the web app and publish its domain verification id.

    Returns the custom host name (www.<zone>) to bind.
    """
    logger.info("Updating DNS zone by adding a CName record...")
    upsert_cname_record(
        clients, zone.id, WWW_RECORD, app.default_host_name, config.record_ttl_seconds
    )
    # App Service checks asuid.<subdomain> to prove domain ownership
    upsert_txt_record(
        clients,
        zone.id,
        VERIFICATION_RECORD,
        [app.verification_token],
        config.record_ttl_seconds,
    )
    logger.info("DNS zone updated")
    return f"{WWW_RECORD}.{zone.name}"


def wait_for_host_name(
    clients: AzureClients, config: Config, app: WebAppInfo, host_name: str
) -> None:
    if config.propagation_mode == "fixed":
        wait_fixed(config.propagation_wait_seconds)
        return

    wait_for_propagation(
        partial(is_hostname_verified, clients, app.id, host_name),
        timeout=config.propagation_timeout_seconds,
        initial_delay=config.propagation_initial_delay_seconds,
        max_delay=config.propagation_max_delay_seconds,
        description=f"DNS records for {host_name}",
    )


def add_vm_record(
    clients: AzureClients,
    config: Config,
    resource_group_id: str,
    zone: ZoneInfo,
    record_name: str,
    vm_prefix: str,
) -> VirtualMachineInfo:
    """Create a VM, then point an A record in zone at its public address."""
    vm = create_virtual_machine(
        clients,
        resource_group_id,
        vm_prefix,
        config.location,
        config.vm_size,
        config.vm_admin_username,
    )
    logger.info(f"Updating DNS zone {zone.name}...")
    upsert_a_record(
        clients, zone.id, record_name, vm.public_ip_address, config.record_ttl_seconds
    )
    logger.info(f"Updated DNS zone {zone.name}")
    return vm


def log_record_sets(clients: AzureClients, zone: ZoneInfo) -> None:
    logger.info(f"Getting CName record set in the DNS zone {zone.name}...")
    for record_set in list_records(clients, zone.id, "CNAME"):
        logger.info(f"Name: {record_set.name} Canonical Name: {record_set.values[0]}")

    logger.info(f"Getting A record set in the DNS zone {zone.name}...")
    for record_set in list_records(clients, zone.id, "A"):
        logger.info(f"Name: {record_set.name}")
        for ipv4_address in record_set.values:
            logger.info(f"  {ipv4_address}")


def delegate_child_zone(
    clients: AzureClients,
    config: Config,
    resource_group_id: str,
    parent: ZoneInfo,
    label: str,
) -> ZoneInfo:
    """Create <label>.<parent> and delegate it with an NS record in the parent."""
    child_name = f"{label}.{parent.name}"
    logger.info(f"Creating child DNS zone {child_name}...")
    child = create_dns_zone(clients, resource_group_id, child_name)
    logger.info(f"Created child DNS zone {child.name}")

    logger.info(f"Updating root DNS zone {parent.name}...")
    upsert_ns_record(
        clients, parent.id, label, child.name_servers, config.record_ttl_seconds
    )
    logger.info("Root DNS zone updated")
    return child


def run_workflow(
    clients: AzureClients, config: Config, context: WorkflowContext | None = None
) -> WorkflowResult:
    """
    Run every provisioning step in order, then tear the resource group down.

    Failures are reported in the returned result rather than raised. The
    teardown runs even if a non-Exception (e.g. KeyboardInterrupt) escapes.
    """
    context = context if context is not None else WorkflowContext()
    name_servers: list[str] = []
    host_name: str | None = None
    error: ProvisioningError | None = None

    try:
        with _step(context, STEP_AUTHENTICATE):
            authenticate(clients)

        with _step(context, STEP_RESOURCE_GROUP):
            rg_name = create_random_name("DnsTemplateRG")
            logger.info("creating resource group...")
            context.record_resource_group(
                create_resource_group(clients, rg_name, config.location)
            )
        resource_group_id = context.resource_group_id

        with _step(context, STEP_ROOT_ZONE):
            root_zone = provision_root_zone(clients, resource_group_id)
            name_servers = list(root_zone.name_servers)

        with _step(context, STEP_WEB_APP):
            app = provision_web_app(clients, config, resource_group_id)

        with _step(context, STEP_WEB_APP_RECORDS):
            host_name = add_web_app_records(clients, config, root_zone, app)

        with _step(context, STEP_PROPAGATION):
            wait_for_host_name(clients, config, app, host_name)

        with _step(context, STEP_BIND_HOST_NAME):
            # Fails if validation cannot see the CNAME yet; not retried
            logger.info("Updating Web app with host name binding...")
            bind_custom_hostname(clients, app.id, host_name, "CName")
            logger.info("Web app updated")

        if config.extended_scenario:
            with _step(context, STEP_EMPLOYEES_RECORD):
                add_vm_record(
                    clients, config, resource_group_id, root_zone,
                    EMPLOYEES_RECORD, "employeesvm",
                )
                log_record_sets(clients, root_zone)

            with _step(context, STEP_PARTNERS_ZONE):
                partners_zone = delegate_child_zone(
                    clients, config, resource_group_id, root_zone, PARTNERS_LABEL
                )

            with _step(context, STEP_PARTNERS_RECORD):
                add_vm_record(
                    clients, config, resource_group_id, partners_zone,
                    "@", "partnersvm",
                )

            with _step(context, STEP_REMOVE_EMPLOYEES_RECORD):
                logger.info(f"Removing A Record from root DNS zone {root_zone.name}...")
                delete_record(clients, root_zone.id, EMPLOYEES_RECORD, "A")
                logger.info("Removed A Record from root DNS zone")

            with _step(context, STEP_DELETE_PARTNERS_ZONE):
                logger.info(f"Deleting child DNS zone {partners_zone.name}...")
                delete_dns_zone(clients, partners_zone.id)
                logger.info(f"Deleted child DNS zone {partners_zone.name}")

    except ProvisioningError as e:
        error = e
        logger.error(
            "Workflow step failed",
            extra={
                "step": e.step,
                "error_type": type(e).__name__,
                "error": str(e),
            },
        )
    finally:
        cleanup = teardown_resource_group(clients, context, config.delete_timeout)

    return WorkflowResult(
        succeeded=error is None,
        cleanup=cleanup,
        completed_steps=list(context.completed_steps),
        failed_step=error.step if error else None,
        error=error,
        name_servers=name_servers,
        host_name=host_name,
    )
