"""Fraud Detection Engine - the only place assessments are produced.

Lifecycle of assess_risk:
1. Validate action and context
2. Build (or load) the behavioral profile
3. Fan out to the analyzers that apply to the action
4. Score, classify, recommend
5. Persist to the audit sink and return the verdict

Blocking is a normal return value (allow_transaction=False). Exceptions
mean the assessment could not be completed and are always propagated.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from gearguard.analyzers.behavior import BehaviorAnalyzer
from gearguard.analyzers.communication import CommunicationAnalyzer
from gearguard.analyzers.device import DeviceLocationAnalyzer
from gearguard.analyzers.listing import ListingQualityAnalyzer
from gearguard.analyzers.payment import PaymentAnalyzer
from gearguard.analyzers.velocity import VelocityPatternAnalyzer
from gearguard.cache.store import CacheStore, cache_key
from gearguard.common.config.rules import DetectionRules
from gearguard.common.constants import CacheConstants, DeviceTrustConstants
from gearguard.common.exceptions import TransientError, ValidationError
from gearguard.common.logging import get_logger
from gearguard.core.clock import Clock, utc_now
from gearguard.core.types import ActionType, Severity, TrustLevel
from gearguard.data.repository import AccountRepository
from gearguard.data.schemas.assessment import DeviceTrustResult, FraudAssessment
from gearguard.data.schemas.context import AssessmentContext
from gearguard.data.schemas.profile import UserBehaviorProfile
from gearguard.data.schemas.signal import FraudSignal
from gearguard.governance.audit.store import AuditSink
from gearguard.orchestration.fanout import AnalyzerTask, gather_signals
from gearguard.profile.builder import ProfileBuilder
from gearguard.providers.enrichment import (
    CommunicationPatternProvider,
    DeviceFingerprintProvider,
    IPReputationProvider,
)
from gearguard.scoring.classifier import classify_risk_level
from gearguard.scoring.recommendations import generate_recommendations
from gearguard.scoring.scorer import RiskScorer


logger = get_logger(__name__)

_SIGNAL_LIST = TypeAdapter(List[FraudSignal])

ContextInput = Union[AssessmentContext, Mapping[str, Any], None]


@dataclass(frozen=True)
class EngineSettings:
    """Tunables for one engine instance."""
    cache_ttl_seconds: int = CacheConstants.DEFAULT_TTL_SECONDS
    cache_key_prefix: str = ""
    assessment_timeout_seconds: Optional[float] = None


class FraudDetectionEngine:
    """Stateless assessment service wired with explicit collaborators.
    
    The only shared state is the injected TTL cache.
    """
    
    def __init__(
        self,
        repository: AccountRepository,
        cache: CacheStore,
        audit_sink: AuditSink,
        clock: Clock = utc_now,
        settings: Optional[EngineSettings] = None,
        rules: Optional[DetectionRules] = None,
        ip_provider: Optional[IPReputationProvider] = None,
        device_provider: Optional[DeviceFingerprintProvider] = None,
        communication_provider: Optional[CommunicationPatternProvider] = None,
    ):
        self._cache = cache
        self._audit_sink = audit_sink
        self._clock = clock
        self._settings = settings or EngineSettings()
        rules = rules or DetectionRules()
        
        self.profile_builder = ProfileBuilder(
            repository=repository,
            cache=cache,
            clock=clock,
            communication_provider=communication_provider,
            device_provider=device_provider,
            ttl_seconds=self._settings.cache_ttl_seconds,
            key_prefix=self._settings.cache_key_prefix,
        )
        self.behavior_analyzer = BehaviorAnalyzer()
        self.device_analyzer = DeviceLocationAnalyzer(ip_provider, device_provider)
        self.listing_analyzer = ListingQualityAnalyzer(repository, rules.listing)
        self.communication_analyzer = CommunicationAnalyzer(rules.communication)
        self.payment_analyzer = PaymentAnalyzer()
        self.velocity_analyzer = VelocityPatternAnalyzer(repository, clock)
        self.scorer = RiskScorer()
    
    async def assess_risk(
        self,
        user_id: str,
        action_type: Union[ActionType, str],
        context: ContextInput = None,
        timeout: Optional[float] = None,
    ) -> FraudAssessment:
        """Assess fraud risk for a user action.
        
        Args:
            user_id: Acting user
            action_type: create_listing, create_booking, process_payment or send_message
            context: AssessmentContext or mapping with gear_id, amount, ip_address, ...
            timeout: Overall deadline in seconds; defaults to the engine setting
            
        Returns:
            FraudAssessment, already persisted to the audit sink
            
        Raises:
            ValidationError: Unknown action type or malformed context
            NotFoundError: User (or referenced listing) does not exist
            TransientError: Store, cache, audit or timeout failure
        """
        action = _parse_action(action_type)
        ctx = _parse_context(context)
        deadline = timeout if timeout is not None else self._settings.assessment_timeout_seconds
        
        if deadline is None:
            return await self._assess(user_id, action, ctx)
        
        try:
            return await asyncio.wait_for(self._assess(user_id, action, ctx), timeout=deadline)
        except asyncio.TimeoutError:
            logger.error(
                "Fraud risk assessment timed out",
                extra={"user_id": user_id, "action_type": action.value, "timeout": deadline},
            )
            raise TransientError(
                f"Fraud risk assessment exceeded {deadline}s",
                details={"user_id": user_id, "action_type": action.value},
            )
    
    async def _assess(
        self,
        user_id: str,
        action: ActionType,
        ctx: AssessmentContext,
    ) -> FraudAssessment:
        logger.debug(
            "Starting fraud risk assessment",
            extra={
                "user_id": user_id,
                "action_type": action.value,
                "context_keys": sorted(ctx.model_dump(exclude_none=True)),
            },
        )
        
        profile = await self.profile_builder.build(user_id)
        signals = await gather_signals(self._plan(user_id, action, ctx, profile))
        
        risk_score = self.scorer.score(signals, profile)
        risk_level = classify_risk_level(risk_score)
        
        assessment = FraudAssessment(
            user_id=user_id,
            action_type=action,
            created_at=self._clock(),
            risk_score=risk_score,
            signals=signals,
            recommendations=generate_recommendations(signals, risk_level),
        )
        
        log_fields = {
            "user_id": user_id,
            "action_type": action.value,
            "risk_score": assessment.risk_score,
            "risk_level": assessment.risk_level.value,
            "signals_count": len(signals),
            "allow_transaction": assessment.allow_transaction,
        }
        logger.info("Fraud risk assessment completed", extra=log_fields)
        if not assessment.allow_transaction:
            logger.warning("Fraud assessment blocked transaction", extra=log_fields)
        
        await self._audit_sink.record_assessment(assessment)
        return assessment
    
    def _plan(
        self,
        user_id: str,
        action: ActionType,
        ctx: AssessmentContext,
        profile: UserBehaviorProfile,
    ) -> List[AnalyzerTask]:
        """Analyzers applicable to the action, in a fixed order per action type."""
        plan = [AnalyzerTask("behavior", self.behavior_analyzer.analyze(profile, action))]
        
        if ctx.has_device_data:
            plan.append(AnalyzerTask(
                "device_location",
                self.device_analyzer.analyze(
                    ip_address=ctx.ip_address,
                    user_agent=ctx.user_agent,
                    device_fingerprint=ctx.device_fingerprint,
                    user_id=user_id,
                ),
            ))
        
        if action == ActionType.CREATE_LISTING and ctx.gear_id:
            plan.append(AnalyzerTask("listing_quality", self.listing_analyzer.analyze(ctx.gear_id)))
        
        if action == ActionType.SEND_MESSAGE and ctx.message:
            plan.append(AnalyzerTask(
                "communication",
                self.communication_analyzer.analyze(ctx.message, profile),
            ))
        
        if action == ActionType.PROCESS_PAYMENT and ctx.amount is not None:
            plan.append(AnalyzerTask("payment", self.payment_analyzer.analyze(ctx.amount, profile)))
        
        return plan
    
    async def check_device_trust_level(
        self,
        ip_address: str,
        user_agent: str,
        device_fingerprint: Optional[str] = None,
    ) -> DeviceTrustResult:
        """Classify a device/IP pair without a user or action.
        
        A single high-severity signal (for example one bot-like user agent)
        classifies as neutral: only critical signals, more than two high
        signals or more than three signals in total escalate.
        """
        signals = await gather_signals([
            AnalyzerTask("ip", self.device_analyzer.analyze_ip(ip_address)),
            AnalyzerTask("fingerprint", self._fingerprint_signals(device_fingerprint)),
            AnalyzerTask("user_agent", _completed(self.device_analyzer.analyze_user_agent(user_agent))),
        ])
        return DeviceTrustResult(trust_level=classify_trust_level(signals), signals=signals)
    
    async def _fingerprint_signals(self, device_fingerprint: Optional[str]) -> List[FraudSignal]:
        if not device_fingerprint:
            return []
        return await self.device_analyzer.analyze_fingerprint(device_fingerprint)
    
    async def monitor_user_activity(self, user_id: str) -> List[FraudSignal]:
        """Passive velocity/pattern sweep, cached for the configured TTL."""
        key = self._monitor_key(user_id)
        cached = await self._cache.get(key)
        if cached is not None:
            return _SIGNAL_LIST.validate_json(cached)
        
        profile = await self.profile_builder.build(user_id)
        signals = await self.velocity_analyzer.analyze(user_id, profile)
        
        await self._cache.set(
            key,
            _SIGNAL_LIST.dump_json(signals).decode("utf-8"),
            self._settings.cache_ttl_seconds,
        )
        return signals
    
    async def invalidate_user(self, user_id: str) -> None:
        """Drop cached profile and monitoring results for a user."""
        await self.profile_builder.invalidate(user_id)
        await self._cache.delete(self._monitor_key(user_id))
    
    def _monitor_key(self, user_id: str) -> str:
        return cache_key(CacheConstants.MONITOR_KEY_PREFIX, user_id, self._settings.cache_key_prefix)


def classify_trust_level(signals: List[FraudSignal]) -> TrustLevel:
    critical = sum(1 for s in signals if s.severity == Severity.CRITICAL)
    high = sum(1 for s in signals if s.severity == Severity.HIGH)
    
    if critical > 0:
        return TrustLevel.BLOCKED
    if high > DeviceTrustConstants.MAX_HIGH_SIGNALS:
        return TrustLevel.SUSPICIOUS
    if len(signals) > DeviceTrustConstants.MAX_TOTAL_SIGNALS:
        return TrustLevel.SUSPICIOUS
    if not signals:
        return TrustLevel.TRUSTED
    return TrustLevel.NEUTRAL


async def _completed(signals: List[FraudSignal]) -> List[FraudSignal]:
    return signals


def _parse_action(action_type: Union[ActionType, str]) -> ActionType:
    try:
        return ActionType(action_type)
    except ValueError:
        raise ValidationError(
            f"Unknown action type: {action_type!r}",
            details={"allowed": [a.value for a in ActionType]},
        )


def _parse_context(context: ContextInput) -> AssessmentContext:
    if context is None:
        return AssessmentContext()
    if isinstance(context, AssessmentContext):
        return context
    try:
        return AssessmentContext.model_validate(dict(context))
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid assessment context",
            details={"errors": e.errors(include_url=False)},
        )
