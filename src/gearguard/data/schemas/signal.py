"""Fraud Signal Schema.

One detected risk indicator emitted by an analyzer.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from gearguard.core.types import Severity, SignalType


class FraudSignal(BaseModel):
    """A single risk indicator with severity and confidence.
    
    Signals carry evidence, not verdicts. Scoring happens elsewhere.
    """
    
    model_config = ConfigDict(frozen=True, use_enum_values=False)
    
    type: SignalType = Field(..., description="Signal category")
    severity: Severity = Field(..., description="Ordinal severity")
    confidence: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Analyzer confidence from 0 to 1"
    )
    description: str = Field(..., min_length=1, description="Human-readable explanation")
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Supporting evidence (ratios, counts, masked identifiers)"
    )
