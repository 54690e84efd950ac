"""Fraud Assessment Schema.

The verdict for one evaluated action. risk_level, action_required and
allow_transaction are computed from risk_score on every access and are
never stored independently.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from gearguard.core.types import ActionType, RiskLevel, TrustLevel
from gearguard.data.schemas.signal import FraudSignal
from gearguard.scoring.classifier import (
    allows_transaction,
    classify_risk_level,
    requires_action,
)


class FraudAssessment(BaseModel):
    """Auditable verdict for one user action."""
    
    model_config = ConfigDict(frozen=True)
    
    assessment_id: str = Field(
        default_factory=lambda: f"fra_{uuid4().hex[:12]}",
        description="Unique assessment identifier"
    )
    user_id: Optional[str] = Field(default=None, description="Assessed user")
    action_type: Optional[ActionType] = Field(default=None, description="Gated action")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the assessment was produced"
    )
    risk_score: float = Field(..., ge=0.0, le=100.0, description="Bounded risk score")
    signals: List[FraudSignal] = Field(
        default_factory=list,
        description="Signals in analyzer evaluation order"
    )
    recommendations: List[str] = Field(
        default_factory=list,
        description="Advisory actions for the calling use-case"
    )
    
    @computed_field  # type: ignore[prop-decorator]
    @property
    def risk_level(self) -> RiskLevel:
        return classify_risk_level(self.risk_score)
    
    @computed_field  # type: ignore[prop-decorator]
    @property
    def action_required(self) -> bool:
        return requires_action(self.risk_score)
    
    @computed_field  # type: ignore[prop-decorator]
    @property
    def allow_transaction(self) -> bool:
        return allows_transaction(self.risk_score)


class DeviceTrustResult(BaseModel):
    """Outcome of a device/IP-only trust check."""
    
    model_config = ConfigDict(frozen=True)
    
    trust_level: TrustLevel
    signals: List[FraudSignal] = Field(default_factory=list)


class UserRiskProfile(BaseModel):
    """Summarized passive risk view of a user."""
    
    model_config = ConfigDict(frozen=True)
    
    risk_level: RiskLevel
    signals: List[FraudSignal] = Field(default_factory=list)
    trust_score: float = Field(..., ge=0.0, le=100.0)
