"""Audit logging subsystem for ufset.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: structured event record
"""

from ufset.audit.helpers import generate_run_id
from ufset.audit.logger import AuditLogger
from ufset.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
