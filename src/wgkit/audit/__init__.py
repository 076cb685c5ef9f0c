"""JSONL audit logging for command-line runs."""

from wgkit.audit.helpers import generate_run_id
from wgkit.audit.logger import AuditLogger
from wgkit.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
