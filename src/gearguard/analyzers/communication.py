"""Communication Analyzer - message content checks."""

import re
from typing import List, Optional

from gearguard.common.config.rules import CommunicationRules
from gearguard.core.types import Severity, SignalType
from gearguard.data.schemas.profile import UserBehaviorProfile
from gearguard.data.schemas.signal import FraudSignal


UPPERCASE = re.compile(r"[A-Z]")


class CommunicationAnalyzer:
    """Flags spam, shouting and attempts to move the conversation off-platform."""
    
    def __init__(self, rules: Optional[CommunicationRules] = None):
        self._rules = rules or CommunicationRules()
        self._spam_patterns = self._rules.compiled_spam_patterns()
        self._contact_patterns = self._rules.compiled_contact_patterns()
    
    async def analyze(
        self,
        message: str,
        profile: Optional[UserBehaviorProfile] = None,
    ) -> List[FraudSignal]:
        """Analyze one outgoing message.
        
        The profile is accepted for parity with the other analyzers; the
        current checks look at message content only.
        """
        signals: List[FraudSignal] = []
        length = len(message)
        
        if length < self._rules.min_message_length:
            signals.append(FraudSignal(
                type=SignalType.COMMUNICATION,
                severity=Severity.LOW,
                confidence=0.4,
                description="Very short message",
                metadata={"message_length": length},
            ))
        
        spam_hits = sum(1 for p in self._spam_patterns if p.search(message))
        if spam_hits:
            signals.append(FraudSignal(
                type=SignalType.COMMUNICATION,
                severity=Severity.HIGH,
                confidence=0.8,
                description="Contains spam-like patterns",
                metadata={"patterns": spam_hits},
            ))
        
        if length:
            uppercase_ratio = len(UPPERCASE.findall(message)) / length
            if uppercase_ratio > self._rules.max_uppercase_ratio:
                signals.append(FraudSignal(
                    type=SignalType.COMMUNICATION,
                    severity=Severity.MEDIUM,
                    confidence=0.6,
                    description="Excessive use of capital letters",
                    metadata={"uppercase_ratio": uppercase_ratio},
                ))
        
        contact_hits = sum(1 for p in self._contact_patterns if p.search(message))
        if contact_hits:
            signals.append(FraudSignal(
                type=SignalType.COMMUNICATION,
                severity=Severity.MEDIUM,
                confidence=0.7,
                description="Attempting to move communication off-platform",
                metadata={"patterns": contact_hits},
            ))
        
        return signals
