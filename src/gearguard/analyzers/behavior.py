"""Behavior Analyzer - account maturity and track record.

This analyzer points at evidence. It does not score or decide.
"""

from typing import List

from gearguard.common.constants import BehaviorConstants
from gearguard.core.types import ActionType, Severity, SignalType
from gearguard.data.schemas.profile import UserBehaviorProfile
from gearguard.data.schemas.signal import FraudSignal


class BehaviorAnalyzer:
    """Flags young accounts, poor track records and rough communication.
    
    Constraints:
    - Profile data only
    - No side effects
    """
    
    async def analyze(
        self,
        profile: UserBehaviorProfile,
        action_type: ActionType,
    ) -> List[FraudSignal]:
        """Analyze the profile in the context of the attempted action.
        
        Args:
            profile: Behavioral profile of the acting user
            action_type: Action being gated
            
        Returns:
            Signals in rule order
        """
        signals: List[FraudSignal] = []
        
        # New account risk
        if profile.account_age < BehaviorConstants.NEW_ACCOUNT_DAYS:
            signals.append(FraudSignal(
                type=SignalType.USER_BEHAVIOR,
                severity=Severity.HIGH,
                confidence=0.9,
                description="Account created less than 24 hours ago",
                metadata={"account_age": profile.account_age},
            ))
        elif profile.account_age < BehaviorConstants.YOUNG_ACCOUNT_DAYS:
            signals.append(FraudSignal(
                type=SignalType.USER_BEHAVIOR,
                severity=Severity.MEDIUM,
                confidence=0.7,
                description="Very new account (less than 7 days)",
                metadata={"account_age": profile.account_age},
            ))
        
        if profile.total_transactions == 0 and action_type == ActionType.CREATE_BOOKING:
            signals.append(FraudSignal(
                type=SignalType.USER_BEHAVIOR,
                severity=Severity.MEDIUM,
                confidence=0.6,
                description="First-time renter with no transaction history",
                metadata={"total_transactions": 0},
            ))
        
        if profile.total_transactions > 0:
            success_rate = profile.success_rate
            if success_rate < BehaviorConstants.MIN_SUCCESS_RATE:
                signals.append(FraudSignal(
                    type=SignalType.USER_BEHAVIOR,
                    severity=Severity.HIGH,
                    confidence=0.8,
                    description="Low transaction success rate",
                    metadata={
                        "success_rate": success_rate,
                        "total_transactions": profile.total_transactions,
                    },
                ))
        
        patterns = profile.communication_patterns
        if patterns.response_time_hours > BehaviorConstants.SLOW_RESPONSE_HOURS:
            signals.append(FraudSignal(
                type=SignalType.COMMUNICATION,
                severity=Severity.LOW,
                confidence=0.5,
                description="Slow response time to messages",
                metadata={"response_time_hours": patterns.response_time_hours},
            ))
        
        if patterns.politeness_score < BehaviorConstants.LOW_POLITENESS:
            signals.append(FraudSignal(
                type=SignalType.COMMUNICATION,
                severity=Severity.MEDIUM,
                confidence=0.7,
                description="Low politeness score in communications",
                metadata={"politeness_score": patterns.politeness_score},
            ))
        
        return signals
