"""Test fixtures for GearGuard - marketplace records and a controllable clock."""

from datetime import datetime, timedelta, timezone
from itertools import count
from typing import List, Optional

from gearguard.core.types import TransactionStatus
from gearguard.data.repository import InMemoryAccountRepository
from gearguard.data.schemas.profile import CommunicationPatterns, UserBehaviorProfile
from gearguard.data.schemas.records import Listing, Transaction, User


NOW = datetime(2026, 3, 15, 12, 0, 0, tzinfo=timezone.utc)

_ids = count(1)


class FakeClock:
    """Clock that only moves when told to."""
    
    def __init__(self, now: datetime = NOW):
        self.now = now
    
    def __call__(self) -> datetime:
        return self.now
    
    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def make_user(user_id: str = "user_1", age_days: float = 30, now: datetime = NOW) -> User:
    return User(
        id=user_id,
        email=f"{user_id}@example.com",
        created_at=now - timedelta(days=age_days),
    )


def make_transaction(
    renter_id: str = "user_1",
    owner_id: str = "owner_1",
    status: TransactionStatus = TransactionStatus.COMPLETED,
    days: float = 2,
    daily_rate: float = 50.0,
    created_at: Optional[datetime] = None,
) -> Transaction:
    created_at = created_at or NOW - timedelta(days=10)
    start = created_at + timedelta(days=1)
    return Transaction(
        id=f"rental_{next(_ids)}",
        renter_id=renter_id,
        owner_id=owner_id,
        listing_id="gear_any",
        status=status,
        start_date=start,
        end_date=start + timedelta(days=days),
        daily_rate=daily_rate,
        created_at=created_at,
    )


def make_listing(
    listing_id: str = "gear_1",
    owner_id: str = "user_1",
    title: str = "Canon EOS R5 mirrorless body",
    description: str = (
        "Full-frame mirrorless camera, lightly used, includes two batteries, "
        "charger and a 128GB card. Pickup downtown."
    ),
    category: Optional[str] = "cameras",
    daily_rate: float = 110.0,
    images: Optional[List[str]] = None,
    city: str = "Austin",
    state: str = "TX",
) -> Listing:
    return Listing(
        id=listing_id,
        owner_id=owner_id,
        title=title,
        description=description,
        category=category,
        daily_rate=daily_rate,
        images=["front.jpg", "back.jpg", "side.jpg"] if images is None else images,
        city=city,
        state=state,
        created_at=NOW - timedelta(days=5),
    )


def make_profile(
    user_id: str = "user_1",
    account_age: int = 30,
    total_transactions: int = 5,
    successful_transactions: int = 5,
    average_transaction_value: float = 100.0,
    response_time_hours: float = 12.0,
    politeness_score: float = 0.7,
    **kwargs,
) -> UserBehaviorProfile:
    return UserBehaviorProfile(
        user_id=user_id,
        account_age=account_age,
        total_transactions=total_transactions,
        successful_transactions=successful_transactions,
        average_transaction_value=average_transaction_value,
        communication_patterns=CommunicationPatterns(
            response_time_hours=response_time_hours,
            message_length=85,
            politeness_score=politeness_score,
        ),
        built_at=NOW,
        **kwargs,
    )


def make_repository(*users: User, transactions=(), listings=()) -> InMemoryAccountRepository:
    return InMemoryAccountRepository(users=users, transactions=transactions, listings=listings)
