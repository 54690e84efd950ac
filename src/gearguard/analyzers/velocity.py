"""Velocity & Pattern Analyzer - passive sweep over a user's activity.

Runs without a specific action. Used by continuous monitoring.
"""

from datetime import timedelta
from typing import List

from gearguard.common.constants import VelocityConstants
from gearguard.core.clock import Clock, as_utc, utc_now
from gearguard.core.types import Severity, SignalType
from gearguard.data.repository import AccountRepository
from gearguard.data.schemas.profile import UserBehaviorProfile
from gearguard.data.schemas.signal import FraudSignal


class VelocityPatternAnalyzer:
    """Detects bursts, late-night activity and location hopping.
    
    The trailing window is read fresh from the repository; the other checks
    use the (possibly cached) profile.
    """
    
    def __init__(self, repository: AccountRepository, clock: Clock = utc_now):
        self._repository = repository
        self._clock = clock
    
    async def analyze(self, user_id: str, profile: UserBehaviorProfile) -> List[FraudSignal]:
        signals: List[FraudSignal] = []
        signals.extend(self.detect_suspicious_patterns(profile))
        signals.extend(await self.detect_velocity_violations(user_id))
        signals.extend(self.detect_unusual_behavior(profile))
        return signals
    
    def detect_suspicious_patterns(self, profile: UserBehaviorProfile) -> List[FraudSignal]:
        night_transactions = sum(
            p.frequency
            for p in profile.time_patterns
            if VelocityConstants.NIGHT_START_HOUR <= p.hour_of_day <= VelocityConstants.NIGHT_END_HOUR
        )
        if night_transactions <= VelocityConstants.MAX_NIGHT_TRANSACTIONS:
            return []
        
        return [FraudSignal(
            type=SignalType.USER_BEHAVIOR,
            severity=Severity.MEDIUM,
            confidence=0.6,
            description="Unusual activity patterns (frequent late-night activity)",
            metadata={"night_activities": night_transactions},
        )]
    
    async def detect_velocity_violations(self, user_id: str) -> List[FraudSignal]:
        window_start = as_utc(self._clock()) - timedelta(hours=VelocityConstants.WINDOW_HOURS)
        transactions = await self._repository.find_transactions_for_user(user_id)
        recent = [t for t in transactions if as_utc(t.created_at) >= window_start]
        
        if len(recent) <= VelocityConstants.MAX_TRANSACTIONS_IN_WINDOW:
            return []
        
        return [FraudSignal(
            type=SignalType.USER_BEHAVIOR,
            severity=Severity.HIGH,
            confidence=0.8,
            description="Excessive transaction velocity (>10 in 24 hours)",
            metadata={"recent_transactions": len(recent)},
        )]
    
    def detect_unusual_behavior(self, profile: UserBehaviorProfile) -> List[FraudSignal]:
        unique_locations = {(l.city, l.state) for l in profile.location_history}
        
        if (
            len(unique_locations) > VelocityConstants.MAX_DISTINCT_LOCATIONS
            and profile.account_age < VelocityConstants.LOCATION_CHECK_ACCOUNT_DAYS
        ):
            return [FraudSignal(
                type=SignalType.USER_BEHAVIOR,
                severity=Severity.MEDIUM,
                confidence=0.7,
                description="Multiple locations for new account",
                metadata={
                    "unique_locations": len(unique_locations),
                    "account_age": profile.account_age,
                },
            )]
        return []
