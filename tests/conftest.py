"""Pytest configuration and shared fixtures for DNS provisioning tests."""

from __future__ import annotations
import pytest

from azure_dns_provisioning.models import Config
from builders import SUBSCRIPTION_ID, FakeRecordSets, make_clients


@pytest.fixture
def clients():
    """Fixture that returns AzureClients backed by mocks."""
    return make_clients()


@pytest.fixture
def fake_record_sets(clients):
    """Replace the DNS record_sets operations with an in-memory fake."""
    fake = FakeRecordSets()
    clients.dns.record_sets = fake
    return fake


@pytest.fixture
def config():
    """Config with test credentials and fast, deterministic settings."""
    cfg = Config(
        client_id="test-client-id",
        client_secret="test-client-secret",
        tenant_id="test-tenant-id",
        subscription_id=SUBSCRIPTION_ID,
    )
    cfg.location = "eastus"
    cfg.extended_scenario = False
    cfg.propagation_mode = "fixed"
    cfg.propagation_wait_seconds = 60
    cfg.propagation_timeout_seconds = 120
    cfg.propagation_initial_delay_seconds = 5
    cfg.propagation_max_delay_seconds = 20
    cfg.record_ttl_seconds = 3600
    cfg.delete_timeout = 30
    return cfg
