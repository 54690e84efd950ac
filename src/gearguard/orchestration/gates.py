"""Convenience gates over the engine for use-case call sites."""

from typing import Union

from gearguard.common.constants import ProfileRiskThresholds
from gearguard.common.logging import get_logger
from gearguard.core.types import ActionType, RiskLevel
from gearguard.data.schemas.assessment import UserRiskProfile
from gearguard.orchestration.engine import ContextInput, FraudDetectionEngine
from gearguard.scoring.scorer import weighted_signal_sum


logger = get_logger(__name__)


async def check_fraud_risk(
    engine: FraudDetectionEngine,
    user_id: str,
    action_type: Union[ActionType, str],
    context: ContextInput = None,
) -> bool:
    """Return True when the action may proceed.
    
    Errors from the engine propagate; callers apply their own fallback.
    """
    assessment = await engine.assess_risk(user_id, action_type, context)
    
    if not assessment.allow_transaction:
        logger.warning(
            "Transaction blocked due to fraud risk",
            extra={
                "user_id": user_id,
                "action_type": assessment.action_type.value if assessment.action_type else None,
                "risk_score": assessment.risk_score,
                "risk_level": assessment.risk_level.value,
            },
        )
    
    return assessment.allow_transaction


async def get_user_risk_profile(engine: FraudDetectionEngine, user_id: str) -> UserRiskProfile:
    """Summarize monitoring signals into a trust score."""
    signals = await engine.monitor_user_activity(user_id)
    weighted = weighted_signal_sum(signals)
    
    if weighted >= ProfileRiskThresholds.HIGH:
        risk_level = RiskLevel.HIGH
    elif weighted >= ProfileRiskThresholds.MEDIUM:
        risk_level = RiskLevel.MEDIUM
    else:
        risk_level = RiskLevel.LOW
    
    return UserRiskProfile(
        risk_level=risk_level,
        signals=signals,
        trust_score=max(0.0, ProfileRiskThresholds.MAX_TRUST_SCORE - weighted),
    )
