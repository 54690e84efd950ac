"""Payment Analyzer - amount anomalies relative to the user's history."""

from typing import List

from gearguard.common.constants import PaymentConstants
from gearguard.core.types import Severity, SignalType
from gearguard.data.schemas.profile import UserBehaviorProfile
from gearguard.data.schemas.signal import FraudSignal


class PaymentAnalyzer:
    
    async def analyze(self, amount: float, profile: UserBehaviorProfile) -> List[FraudSignal]:
        signals: List[FraudSignal] = []
        average = profile.average_transaction_value
        
        # Only meaningful with a history to compare against
        if profile.total_transactions > 0 and amount > average * PaymentConstants.AVERAGE_MULTIPLIER:
            signals.append(FraudSignal(
                type=SignalType.PAYMENT,
                severity=Severity.HIGH,
                confidence=0.8,
                description="Transaction amount significantly above user average",
                metadata={
                    "amount": amount,
                    "user_average": average,
                    "ratio": amount / average if average else None,
                },
            ))
        
        if amount > PaymentConstants.HIGH_VALUE_AMOUNT and profile.account_age < PaymentConstants.YOUNG_ACCOUNT_DAYS:
            signals.append(FraudSignal(
                type=SignalType.PAYMENT,
                severity=Severity.HIGH,
                confidence=0.9,
                description="High-value transaction from very new account",
                metadata={"amount": amount, "account_age": profile.account_age},
            ))
        
        return signals
