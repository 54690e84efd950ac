"""Concurrent fan-out/fan-in over independent analyzers.

Results are concatenated in plan order, not completion order, so the signal
list of an assessment is reproducible for audit diffing.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, List, Sequence

from gearguard.data.schemas.signal import FraudSignal


@dataclass(frozen=True)
class AnalyzerTask:
    """One scheduled analyzer invocation."""
    name: str
    call: Awaitable[List[FraudSignal]]


async def gather_signals(plan: Sequence[AnalyzerTask]) -> List[FraudSignal]:
    """Run every task concurrently and merge their signals.
    
    The first failure propagates; an assessment never continues on a
    partial analyzer set.
    """
    if not plan:
        return []
    
    tasks = [asyncio.ensure_future(task.call) for task in plan]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        # Cancel siblings and collect their outcomes before propagating
        for pending in tasks:
            pending.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    
    signals: List[FraudSignal] = []
    for task_signals in results:
        signals.extend(task_signals)
    return signals
