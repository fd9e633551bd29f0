"""Entry point for the Azure DNS provisioning sample."""

from __future__ import annotations
import json
import time

from .azure import build_clients
from .errors import ConfigurationError
from .models import Config, WorkflowResult
from .utils import get_logger
from .workflow import run_workflow

logger = get_logger()

EXIT_SUCCESS = 0
EXIT_WORKFLOW_FAILED = 1
EXIT_CONFIGURATION_ERROR = 2


def log_summary(result: WorkflowResult, duration: float) -> None:
    """Log the final outcome of a run."""
    if result.succeeded:
        logger.info(
            f"Workflow complete in {duration:.1f}s: "
            f"{len(result.completed_steps)} steps succeeded"
        )
    else:
        logger.error(
            f"Workflow failed at step {result.failed_step} after {duration:.1f}s: "
            f"{result.error}"
        )

    logger.info(
        f"Cleanup outcome: {result.cleanup.outcome.value}",
        extra={"summary": json.dumps(result.to_dict())},
    )


def main() -> int:
    """Authenticate from the environment, run the workflow, return an exit code."""
    start_time = time.time()

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIGURATION_ERROR

    logger.info(
        "Starting Azure DNS provisioning sample",
        extra={
            "subscription_id": config.subscription_id,
            "location": config.location,
            "extended_scenario": config.extended_scenario,
            "propagation_mode": config.propagation_mode,
        },
    )

    clients = build_clients(config)
    result = run_workflow(clients, config)

    log_summary(result, time.time() - start_time)
    return EXIT_SUCCESS if result.succeeded else EXIT_WORKFLOW_FAILED
