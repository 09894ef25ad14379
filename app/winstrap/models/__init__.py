"""Data models for winstrap.

This module exports the core data structures used throughout the application.
"""

from winstrap.models.app import (
    AppCheckResult,
    AppDescriptor,
    CheckOutcome,
    InstallResult,
    InstallStatus,
)
from winstrap.models.log import LogEntry, create_log_entry
from winstrap.models.provision import ProvisionPlan, ProvisionStep, StepKind, StepStatus

__all__ = [
    "AppCheckResult",
    "AppDescriptor",
    "CheckOutcome",
    "InstallResult",
    "InstallStatus",
    "LogEntry",
    "ProvisionPlan",
    "ProvisionStep",
    "StepKind",
    "StepStatus",
    "create_log_entry",
]
