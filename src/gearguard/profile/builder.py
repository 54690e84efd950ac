"""Profile Builder - turns marketplace history into a UserBehaviorProfile.

Profiles are cached as JSON under user_profile:{user_id}. A cached profile
is returned untouched until its TTL expires or it is invalidated, so
assessments inside one TTL window see the same history.
"""

import math
from collections import Counter
from datetime import timezone
from typing import List

from gearguard.cache.store import CacheStore, cache_key
from gearguard.common.constants import CacheConstants
from gearguard.common.exceptions import NotFoundError
from gearguard.common.logging import get_logger
from gearguard.core.clock import Clock, as_utc, utc_now
from gearguard.core.types import ActivityType, LocationSource, TransactionStatus
from gearguard.data.repository import AccountRepository
from gearguard.data.schemas.profile import LocationData, TimePattern, UserBehaviorProfile
from gearguard.data.schemas.records import Listing, Transaction
from gearguard.providers.enrichment import (
    CommunicationPatternProvider,
    DeviceFingerprintProvider,
    NullDeviceFingerprintProvider,
    StaticCommunicationPatternProvider,
)


logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
DEFAULT_COUNTRY = "US"


class ProfileBuilder:
    """Builds and caches behavioral profiles.
    
    Responsibilities:
    - Resolve the account (NotFoundError if absent)
    - Summarize rentals on both sides of the marketplace
    - Attach communication and device data from pluggable providers
    """
    
    def __init__(
        self,
        repository: AccountRepository,
        cache: CacheStore,
        clock: Clock = utc_now,
        communication_provider: CommunicationPatternProvider | None = None,
        device_provider: DeviceFingerprintProvider | None = None,
        ttl_seconds: int = CacheConstants.DEFAULT_TTL_SECONDS,
        key_prefix: str = "",
    ):
        self._repository = repository
        self._cache = cache
        self._clock = clock
        self._communication_provider = communication_provider or StaticCommunicationPatternProvider()
        self._device_provider = device_provider or NullDeviceFingerprintProvider()
        self._ttl_seconds = ttl_seconds
        self._key_prefix = key_prefix
    
    def _key(self, user_id: str) -> str:
        return cache_key(CacheConstants.PROFILE_KEY_PREFIX, user_id, self._key_prefix)
    
    async def build(self, user_id: str) -> UserBehaviorProfile:
        """Return the cached profile or build a fresh one.
        
        Raises:
            NotFoundError: If the user does not exist
            TransientError: If the repository or cache fails
        """
        key = self._key(user_id)
        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug("Profile cache hit", extra={"user_id": user_id})
            return UserBehaviorProfile.model_validate_json(cached)
        
        profile = await self._build_fresh(user_id)
        await self._cache.set(key, profile.model_dump_json(), self._ttl_seconds)
        return profile
    
    async def invalidate(self, user_id: str) -> None:
        await self._cache.delete(self._key(user_id))
    
    async def _build_fresh(self, user_id: str) -> UserBehaviorProfile:
        user = await self._repository.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError(
                f"User not found: {user_id}",
                resource="user",
                resource_id=user_id,
            )
        
        now = self._clock()
        transactions = await self._repository.find_transactions_for_user(user_id)
        listings = await self._repository.find_listings_for_user(user_id)
        
        account_age = max(0, math.floor((as_utc(now) - as_utc(user.created_at)).total_seconds() / SECONDS_PER_DAY))
        successful = [t for t in transactions if t.status == TransactionStatus.COMPLETED]
        
        return UserBehaviorProfile(
            user_id=user_id,
            account_age=account_age,
            total_transactions=len(transactions),
            successful_transactions=len(successful),
            average_transaction_value=average_transaction_value(transactions),
            communication_patterns=await self._communication_provider.patterns_for_user(user_id),
            device_fingerprints=await self._device_provider.fingerprints_for_user(user_id),
            location_history=extract_location_history(listings),
            time_patterns=hour_of_day_histogram(transactions),
            risk_factors=[],
            built_at=now,
        )


def average_transaction_value(transactions: List[Transaction]) -> float:
    """Mean of (rental days, rounded up) x daily rate; 0 with no rentals."""
    if not transactions:
        return 0.0
    
    total = math.fsum(
        rental_days(t) * t.daily_rate for t in transactions
    )
    return total / len(transactions)


def rental_days(transaction: Transaction) -> int:
    seconds = (transaction.end_date - transaction.start_date).total_seconds()
    return max(0, math.ceil(seconds / SECONDS_PER_DAY))


def extract_location_history(listings: List[Listing]) -> List[LocationData]:
    return [
        LocationData(
            city=listing.city,
            state=listing.state,
            country=DEFAULT_COUNTRY,
            timestamp=listing.created_at,
            source=LocationSource.GEAR_LOCATION,
        )
        for listing in listings
    ]


def hour_of_day_histogram(transactions: List[Transaction]) -> List[TimePattern]:
    """One bucket per UTC hour with at least one rental created in it."""
    hour_counts = Counter(as_utc(t.created_at).astimezone(timezone.utc).hour for t in transactions)
    return [
        TimePattern(
            hour_of_day=hour,
            day_of_week=-1,
            activity_type=ActivityType.BOOKING,
            frequency=count,
        )
        for hour, count in sorted(hour_counts.items())
    ]
