"""Marketplace records read from the account/transaction repository."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gearguard.core.types import TransactionStatus


class User(BaseModel):
    model_config = ConfigDict(frozen=True)
    
    id: str
    email: Optional[str] = None
    created_at: datetime


class Transaction(BaseModel):
    """A rental between a renter and an owner."""
    
    model_config = ConfigDict(frozen=True)
    
    id: str
    renter_id: str
    owner_id: str
    listing_id: str
    status: TransactionStatus
    start_date: datetime
    end_date: datetime
    daily_rate: float = Field(..., ge=0.0, description="Listing daily rate at booking time")
    created_at: datetime
    
    def involves(self, user_id: str) -> bool:
        return user_id in (self.renter_id, self.owner_id)


class Listing(BaseModel):
    """A gear listing."""
    
    model_config = ConfigDict(frozen=True)
    
    id: str
    owner_id: str
    title: str
    description: str = ""
    category: Optional[str] = None
    daily_rate: float = Field(..., ge=0.0)
    images: List[str] = Field(default_factory=list)
    city: str = ""
    state: str = ""
    created_at: datetime
