"""Governance schemas - type definitions for the assessment audit trail.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from gearguard.core.types import ActionType, RiskLevel


class AuditEventType(str, Enum):
    """Types of audit events."""
    ASSESSMENT = "assessment"
    TRANSACTION_BLOCKED = "transaction_blocked"


class AuditEntry(BaseModel):
    """A single immutable audit log entry.
    """
    entry_id: str = Field(
        default_factory=lambda: f"aud_{uuid4().hex[:12]}",
        description="Unique entry identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the entry was created"
    )
    event_type: AuditEventType = Field(
        ...,
        description="Type of event being logged"
    )
    
    # Core identifiers
    assessment_id: str = Field(..., description="Assessment being recorded")
    user_id: Optional[str] = Field(default=None, description="Assessed user")
    action_type: Optional[ActionType] = Field(default=None, description="Gated action")
    
    # Verdict summary
    risk_score: float = Field(..., ge=0.0, le=100.0)
    risk_level: RiskLevel
    signals_count: int = Field(..., ge=0)
    allow_transaction: bool
    action_required: bool
    
    # Full assessment for replay and diffing
    assessment: Dict[str, Any] = Field(default_factory=dict)
    
    # Integrity
    previous_hash: Optional[str] = Field(
        default=None,
        description="Hash of previous entry (for chain integrity)"
    )
    entry_hash: Optional[str] = Field(
        default=None,
        description="Hash of this entry's content"
    )
    
    def to_jsonl(self) -> str:
        """Serialize entry to a single JSON line."""
        return self.model_dump_json()
    
    @classmethod
    def from_jsonl(cls, line: str) -> "AuditEntry":
        """Deserialize entry from a JSON line."""
        return cls.model_validate_json(line)
