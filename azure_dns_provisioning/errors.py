"""Error taxonomy for the provisioning workflow."""

from __future__ import annotations

from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
)

# Error codes returned by ARM when a subscription or region limit is hit
QUOTA_ERROR_CODES = {
    "QuotaExceeded",
    "OperationNotAllowed",
    "SkuNotAvailable",
    "Code429",
}

CONFLICT_ERROR_CODES = {
    "Conflict",
    "ResourceExists",
    "WebsiteAlreadyExists",
    "PreconditionFailed",
}


class ProvisioningError(Exception):
    """Base class for every failure the workflow reports."""

    def __init__(self, message: str, step: str | None = None):
        super().__init__(message)
        self.step = step


class ConfigurationError(ProvisioningError):
    """Required environment configuration is missing or invalid."""


class AuthenticationError(ProvisioningError):
    """Credential rejected or subscription not accessible."""


class ResourceConflictError(ProvisioningError):
    """A resource name is already taken."""


class QuotaExceededError(ProvisioningError):
    """The subscription or region cannot host the requested resource."""


class PropagationTimeoutError(ProvisioningError):
    """DNS changes were not visible to the validator before the timeout."""


class StepFailedError(ProvisioningError):
    """Any other failure of an external operation."""


def _error_code(exc: HttpResponseError) -> str:
    error = getattr(exc, "error", None)
    return getattr(error, "code", None) or ""


def classify_error(step: str, exc: Exception) -> ProvisioningError:
    """Map an exception raised during a step onto the workflow error taxonomy."""
    if isinstance(exc, ProvisioningError):
        if exc.step is None:
            exc.step = step
        return exc

    message = f"{step} failed: {exc}"

    if isinstance(exc, ClientAuthenticationError):
        return AuthenticationError(message, step)
    if isinstance(exc, ResourceExistsError):
        return ResourceConflictError(message, step)
    if isinstance(exc, HttpResponseError):
        code = _error_code(exc)
        if exc.status_code in (401, 403):
            return AuthenticationError(message, step)
        if code in QUOTA_ERROR_CODES or exc.status_code == 429:
            return QuotaExceededError(message, step)
        if code in CONFLICT_ERROR_CODES or exc.status_code == 409:
            return ResourceConflictError(message, step)

    return StepFailedError(message, step)
