"""Observability for the plan generation pipeline.

This module provides:
- Stage event logging (start/success/fail)
- Stage-level timing
"""

import time
from contextlib import contextmanager
from enum import StrEnum

from loguru import logger


class PlannerStage(StrEnum):
    """Canonical planner stage enum.

    Each stage represents a distinct step in weekly plan generation.
    """

    SPLIT = "split_calculate"
    DISTRIBUTE = "day_distribute"
    FILTER = "equipment_filter"
    SCHEDULE = "muscle_schedule"
    SELECT = "exercise_select"


def log_event(
    event: str,
    **kwargs: str | int | float | bool | None,
) -> None:
    """Log a structured event.

    Thin wrapper around logger.debug so every planner event carries its fields
    in ``record["extra"]``.

    Args:
        event: Event name (e.g., "planner_stage", "plan_generated")
        **kwargs: Additional structured fields to include in the log
    """
    logger.bind(**kwargs).debug(event)


def log_stage_event(
    stage: PlannerStage,
    status: str,
    meta: dict[str, str | int | float | bool | None] | None = None,
) -> None:
    """Log a stage event (start/success/fail).

    Args:
        stage: Planner stage
        status: Event status ("start", "success", or "fail")
        meta: Optional metadata dictionary to include in log

    Raises:
        ValueError: If status is not one of the allowed values
    """
    allowed_statuses = {"start", "success", "fail"}
    if status not in allowed_statuses:
        raise ValueError(f"Status must be one of {allowed_statuses}, got: {status}")

    log_data: dict[str, str | int | float | bool | None] = {
        "stage": stage.value,
        "status": status,
    }

    if meta:
        log_data.update(meta)

    log_event("planner_stage", **log_data)


@contextmanager
def timing(metric_name: str):
    """Context manager for timing operations.

    Args:
        metric_name: Metric name (e.g., "planner.generate")

    Yields:
        None (context manager)
    """
    start_time = time.monotonic()
    try:
        yield
    finally:
        elapsed = time.monotonic() - start_time
        log_event(
            "planner_timing",
            metric=metric_name,
            duration_seconds=elapsed,
        )
