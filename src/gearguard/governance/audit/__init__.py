"""Audit module - Immutable record of every completed assessment.

Components:
- AuditSink: Abstract base class for audit backends
- FileAuditSink: JSONL files with hash chain integrity
- InMemoryAuditSink: List-backed sink for tests
"""

from gearguard.governance.audit.store import (
    AuditLogIntegrityError,
    AuditSink,
    FileAuditSink,
    InMemoryAuditSink,
    build_entry,
)

__all__ = [
    "AuditLogIntegrityError",
    "AuditSink",
    "FileAuditSink",
    "InMemoryAuditSink",
    "build_entry",
]
