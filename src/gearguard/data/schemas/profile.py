"""User Behavior Profile Schema.

Cached summary of one user's history. Profiles are rebuilt on refresh and
never mutated after construction.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gearguard.core.types import ActivityType, LocationSource


class CommunicationPatterns(BaseModel):
    """Aggregate messaging behaviour."""
    
    model_config = ConfigDict(frozen=True)
    
    response_time_hours: float = Field(..., ge=0.0, description="Average response time")
    message_length: float = Field(..., ge=0.0, description="Average characters per message")
    politeness_score: float = Field(..., ge=0.0, le=1.0, description="0 (hostile) to 1 (polite)")


class DeviceFingerprint(BaseModel):
    """Device observed for a user."""
    
    model_config = ConfigDict(frozen=True)
    
    fingerprint: str
    user_agent: str
    ip_address: str
    city: str = ""
    country: str = ""
    first_seen: datetime
    last_seen: datetime
    is_vpn: bool = False
    is_tor: bool = False
    suspicious_flags: List[str] = Field(default_factory=list)


class LocationData(BaseModel):
    """One location observation."""
    
    model_config = ConfigDict(frozen=True)
    
    city: str
    state: str
    country: str
    timestamp: datetime
    source: LocationSource


class TimePattern(BaseModel):
    """One hour-of-day histogram bucket."""
    
    model_config = ConfigDict(frozen=True)
    
    hour_of_day: int = Field(..., ge=0, le=23)
    day_of_week: int = Field(default=-1, ge=-1, le=6, description="-1 means all days")
    activity_type: ActivityType
    frequency: int = Field(..., ge=0)


class UserBehaviorProfile(BaseModel):
    """Behavioral profile used as scoring context."""
    
    model_config = ConfigDict(frozen=True)
    
    user_id: str
    account_age: int = Field(..., ge=0, description="Whole days since account creation")
    total_transactions: int = Field(..., ge=0)
    successful_transactions: int = Field(..., ge=0)
    average_transaction_value: float = Field(..., ge=0.0)
    communication_patterns: CommunicationPatterns
    device_fingerprints: List[DeviceFingerprint] = Field(default_factory=list)
    location_history: List[LocationData] = Field(default_factory=list)
    time_patterns: List[TimePattern] = Field(default_factory=list)
    risk_factors: List[str] = Field(default_factory=list)
    built_at: datetime
    
    @model_validator(mode="after")
    def _successful_within_total(self) -> "UserBehaviorProfile":
        if self.successful_transactions > self.total_transactions:
            raise ValueError("successful_transactions cannot exceed total_transactions")
        return self
    
    @property
    def success_rate(self) -> float:
        if self.total_transactions == 0:
            return 0.0
        return self.successful_transactions / self.total_transactions
