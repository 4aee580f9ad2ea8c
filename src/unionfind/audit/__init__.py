"""Audit logging subsystem for unionfind.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: Structured event record
"""

from unionfind.audit.helpers import generate_run_id, to_json_safe
from unionfind.audit.logger import AuditLogger
from unionfind.audit.models import LogEvent
from unionfind.utils import get_iso_timestamp

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_iso_timestamp",
    "to_json_safe",
]
