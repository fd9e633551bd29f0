"""Configuration from environment variables."""

from __future__ import annotations
import os
from typing import Mapping

from ..errors import ConfigurationError

# Service principal credential and target subscription
CREDENTIAL_VARIABLES = ("CLIENT_ID", "CLIENT_SECRET", "TENANT_ID", "SUBSCRIPTION_ID")

# Defaults for settings that may be overridden from the environment

# Placement
AZURE_LOCATION = "eastus"

# Run virtual machine, child zone and delete demonstration steps
EXTENDED_SCENARIO = True

# DNS propagation before hostname binding ("poll" or "fixed")
PROPAGATION_MODE = "poll"
PROPAGATION_WAIT_SECONDS = 60
PROPAGATION_TIMEOUT_SECONDS = 600
PROPAGATION_INITIAL_DELAY_SECONDS = 10
PROPAGATION_MAX_DELAY_SECONDS = 60

# Record sets
RECORD_TTL_SECONDS = 3600

# Virtual machines
VM_SIZE = "Standard_D2a_v4"
VM_ADMIN_USERNAME = "testuser"

# Resource group deletion wait
DELETE_TIMEOUT = 1800

PROPAGATION_MODES = {"poll", "fixed"}


def _int_setting(
    environ: Mapping[str, str], name: str, default: int, minimum: int = 0
) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value


class Config:
    """Runtime configuration for one workflow run."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        tenant_id: str,
        subscription_id: str,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.tenant_id = tenant_id
        self.subscription_id = subscription_id
        self.location = AZURE_LOCATION
        self.extended_scenario = EXTENDED_SCENARIO
        self.propagation_mode = PROPAGATION_MODE
        self.propagation_wait_seconds = PROPAGATION_WAIT_SECONDS
        self.propagation_timeout_seconds = PROPAGATION_TIMEOUT_SECONDS
        self.propagation_initial_delay_seconds = PROPAGATION_INITIAL_DELAY_SECONDS
        self.propagation_max_delay_seconds = PROPAGATION_MAX_DELAY_SECONDS
        self.record_ttl_seconds = RECORD_TTL_SECONDS
        self.vm_size = VM_SIZE
        self.vm_admin_username = VM_ADMIN_USERNAME
        self.delete_timeout = DELETE_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from the process environment (or the given mapping).

        Raises:
            ConfigurationError: if a credential variable is missing, a numeric
                setting is not a valid integer, or the propagation mode is not
                recognised.
        """
        environ = os.environ if environ is None else environ
        missing = [name for name in CREDENTIAL_VARIABLES if not environ.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        config = cls(
            client_id=environ["CLIENT_ID"],
            client_secret=environ["CLIENT_SECRET"],
            tenant_id=environ["TENANT_ID"],
            subscription_id=environ["SUBSCRIPTION_ID"],
        )
        config.location = environ.get("AZURE_LOCATION") or AZURE_LOCATION
        config.extended_scenario = (
            environ.get("EXTENDED_SCENARIO", str(EXTENDED_SCENARIO)).lower() == "true"
        )

        mode = (environ.get("PROPAGATION_MODE") or PROPAGATION_MODE).lower()
        if mode not in PROPAGATION_MODES:
            raise ConfigurationError(
                f"PROPAGATION_MODE must be one of {sorted(PROPAGATION_MODES)}, "
                f"got {mode!r}"
            )
        config.propagation_mode = mode
        config.propagation_wait_seconds = _int_setting(
            environ, "PROPAGATION_WAIT_SECONDS", PROPAGATION_WAIT_SECONDS
        )
        config.propagation_timeout_seconds = _int_setting(
            environ, "PROPAGATION_TIMEOUT_SECONDS", PROPAGATION_TIMEOUT_SECONDS
        )
        config.propagation_initial_delay_seconds = _int_setting(
            environ, "PROPAGATION_INITIAL_DELAY_SECONDS", PROPAGATION_INITIAL_DELAY_SECONDS
        )
        # A zero cap would poll App Service back to back
        config.propagation_max_delay_seconds = _int_setting(
            environ, "PROPAGATION_MAX_DELAY_SECONDS", PROPAGATION_MAX_DELAY_SECONDS,
            minimum=1,
        )
        config.record_ttl_seconds = _int_setting(
            environ, "RECORD_TTL_SECONDS", RECORD_TTL_SECONDS, minimum=1
        )
        config.vm_size = environ.get("VM_SIZE") or VM_SIZE
        config.vm_admin_username = environ.get("VM_ADMIN_USERNAME") or VM_ADMIN_USERNAME
        config.delete_timeout = _int_setting(
            environ, "DELETE_TIMEOUT", DELETE_TIMEOUT, minimum=1
        )
        return config
