"""Unit tests for concurrent analyzer fan-out."""

import asyncio

import pytest

from gearguard.core.types import Severity, SignalType
from gearguard.data.schemas.signal import FraudSignal
from gearguard.orchestration.fanout import AnalyzerTask, gather_signals


def _signal(description):
    return FraudSignal(
        type=SignalType.USER_BEHAVIOR,
        severity=Severity.LOW,
        confidence=0.5,
        description=description,
    )


async def _after(delay, description):
    await asyncio.sleep(delay)
    return [_signal(description)]


class TestGatherSignals:
    """Tests for fan-out ordering and failure handling."""
    
    def test_empty_plan(self):
        assert asyncio.run(gather_signals([])) == []
    
    def test_plan_order_not_completion_order(self):
        plan = [
            AnalyzerTask("slow", _after(0.05, "slow")),
            AnalyzerTask("fast", _after(0, "fast")),
        ]
        
        signals = asyncio.run(gather_signals(plan))
        
        assert [s.description for s in signals] == ["slow", "fast"]
    
    def test_failure_cancels_siblings(self):
        state = {"sibling_cancelled": False}
        
        async def failing():
            raise RuntimeError("analyzer exploded")
        
        async def sibling():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                state["sibling_cancelled"] = True
                raise
            return []
        
        async def run():
            with pytest.raises(RuntimeError, match="analyzer exploded"):
                await gather_signals([
                    AnalyzerTask("sibling", sibling()),
                    AnalyzerTask("failing", failing()),
                ])
            # Nothing is left running once the failure has propagated
            pending = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
            return pending
        
        assert asyncio.run(run()) == []
        assert state["sibling_cancelled"] is True
