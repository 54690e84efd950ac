"""Assessment Context Schema - caller-supplied details of the gated action."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AssessmentContext(BaseModel):
    """Optional details of the action being assessed.
    
    Unknown keys (e.g. receiver_id) are ignored.
    """
    
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
    
    gear_id: Optional[str] = Field(default=None, alias="gearId")
    rental_id: Optional[str] = Field(default=None, alias="rentalId")
    amount: Optional[float] = Field(default=None, ge=0.0)
    device_fingerprint: Optional[str] = Field(default=None, alias="deviceFingerprint")
    ip_address: Optional[str] = Field(default=None, alias="ipAddress")
    user_agent: Optional[str] = Field(default=None, alias="userAgent")
    message: Optional[str] = None
    
    @property
    def has_device_data(self) -> bool:
        return any(
            value is not None
            for value in (self.ip_address, self.user_agent, self.device_fingerprint)
        )
