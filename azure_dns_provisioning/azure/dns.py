"""Azure DNS zone and record set operations."""

from __future__ import annotations

from azure.mgmt.core.tools import parse_resource_id
from azure.mgmt.dns.models import (
    ARecord,
    CnameRecord,
    NsRecord,
    RecordSet,
    TxtRecord,
    Zone,
)

from ..models import RecordSetInfo, ZoneInfo
from ..utils import get_logger
from .clients import AzureClients
from .resources import resource_group_name

logger = get_logger()

# DNS zones are global resources regardless of the resource group region
ZONE_LOCATION = "global"


def _zone_parts(zone_id: str) -> tuple[str, str]:
    """Return (resource group, zone name) for a zone resource id."""
    parts = parse_resource_id(zone_id)
    return parts["resource_group"], parts["name"]


def create_dns_zone(clients: AzureClients, resource_group_id: str, zone_name: str) -> ZoneInfo:
    """Create a public DNS zone and return its delegated name servers."""
    zone = clients.dns.zones.create_or_update(
        resource_group_name(resource_group_id),
        zone_name,
        Zone(location=ZONE_LOCATION),
    )
    logger.info(f"Created DNS zone: {zone.name}")
    return ZoneInfo(
        id=zone.id,
        name=zone.name,
        name_servers=list(zone.name_servers or []),
    )


def delete_dns_zone(clients: AzureClients, zone_id: str) -> None:
    """Delete a DNS zone, waiting for the operation to finish."""
    resource_group, zone_name = _zone_parts(zone_id)
    clients.dns.zones.begin_delete(resource_group, zone_name).result()
    logger.info(f"Deleted DNS zone: {zone_name}")


def _upsert_record_set(
    clients: AzureClients,
    zone_id: str,
    record_name: str,
    record_type: str,
    record_set: RecordSet,
) -> str:
    resource_group, zone_name = _zone_parts(zone_id)
    result = clients.dns.record_sets.create_or_update(
        resource_group_name=resource_group,
        zone_name=zone_name,
        relative_record_set_name=record_name,
        record_type=record_type,
        parameters=record_set,
    )
    logger.info(
        f"Upserted {record_type} record {record_name}.{zone_name}",
        extra={"zone": zone_name, "record": record_name, "record_type": record_type},
    )
    return result.id


def upsert_cname_record(
    clients: AzureClients, zone_id: str, record_name: str, target: str, ttl: int
) -> str:
    """Create or replace a CNAME record aliasing record_name to target."""
    record_set = RecordSet(ttl=ttl, cname_record=CnameRecord(cname=target))
    return _upsert_record_set(clients, zone_id, record_name, "CNAME", record_set)


def upsert_txt_record(
    clients: AzureClients, zone_id: str, record_name: str, values: list[str], ttl: int
) -> str:
    """Create or replace a TXT record holding values as a single entry."""
    record_set = RecordSet(ttl=ttl, txt_records=[TxtRecord(value=list(values))])
    return _upsert_record_set(clients, zone_id, record_name, "TXT", record_set)


def upsert_a_record(
    clients: AzureClients, zone_id: str, record_name: str, ipv4: str, ttl: int
) -> str:
    """Create or replace an A record pointing at ipv4."""
    if not ipv4:
        raise ValueError(f"A record {record_name} needs an IPv4 address")
    record_set = RecordSet(ttl=ttl, a_records=[ARecord(ipv4_address=ipv4)])
    return _upsert_record_set(clients, zone_id, record_name, "A", record_set)


def upsert_ns_record(
    clients: AzureClients,
    zone_id: str,
    record_name: str,
    name_servers: list[str],
    ttl: int,
) -> str:
    """Create or replace an NS record delegating record_name to name_servers.

    Name servers are written in the order given.
    """
    if not name_servers:
        raise ValueError(f"NS record {record_name} needs at least one name server")
    record_set = RecordSet(
        ttl=ttl, ns_records=[NsRecord(nsdname=server) for server in name_servers]
    )
    return _upsert_record_set(clients, zone_id, record_name, "NS", record_set)


def delete_record(
    clients: AzureClients, zone_id: str, record_name: str, record_type: str
) -> None:
    """Remove a record set from a zone."""
    resource_group, zone_name = _zone_parts(zone_id)
    clients.dns.record_sets.delete(
        resource_group_name=resource_group,
        zone_name=zone_name,
        relative_record_set_name=record_name,
        record_type=record_type,
    )
    logger.info(f"Removed {record_type} record {record_name} from zone {zone_name}")


def _record_values(record_set) -> list[str]:
    if record_set.cname_record is not None:
        return [record_set.cname_record.cname]
    if record_set.a_records:
        return [record.ipv4_address for record in record_set.a_records]
    if record_set.ns_records:
        return [record.nsdname for record in record_set.ns_records]
    if record_set.txt_records:
        return [value for record in record_set.txt_records for value in record.value]
    return []


def list_records(
    clients: AzureClients, zone_id: str, record_type: str
) -> list[RecordSetInfo]:
    """List the record sets of one type in a zone."""
    resource_group, zone_name = _zone_parts(zone_id)
    record_sets = clients.dns.record_sets.list_by_type(
        resource_group, zone_name, record_type
    )
    return [
        RecordSetInfo(
            name=record_set.name,
            record_type=record_type,
            ttl=record_set.ttl,
            values=_record_values(record_set),
        )
        for record_set in record_sets
    ]
