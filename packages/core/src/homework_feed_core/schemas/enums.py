"""Enums for refresh bookkeeping."""

from enum import StrEnum


class RefreshStatus(StrEnum):
    """Terminal status of a single refresh invocation."""

    SUCCESS = "success"
    FAILED = "failed"


class RefreshTrigger(StrEnum):
    """What started a refresh."""

    SCHEDULED = "scheduled"
    ON_DEMAND = "on_demand"
    MANUAL = "manual"
