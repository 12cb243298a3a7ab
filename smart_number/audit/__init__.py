"""Audit logging package."""

from smart_number.audit.logger import (
    NumericAuditLogger,
    configure_logging,
    create_correlation_id,
)

__all__ = ["NumericAuditLogger", "configure_logging", "create_correlation_id"]
