"""
Stage-level timing for the parsing pipeline.

A context manager measures each stage and warns when a soft budget is
exceeded. Budgets never raise.
"""

import time
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

# Soft performance budgets (ms) - warn-only
STAGE_BUDGETS_MS: Dict[str, int] = {
    "notes": 5,
    "recurrence": 5,
    "temporal": 20,
    "attributes": 20,
    "location": 5,
    "item_type": 5,
    "title": 5,
    "classify": 50,
}


class StageTimer:
    """
    Context manager for timing pipeline stage execution.

    Usage:
        with StageTimer(trace, "temporal"):
            resolved = resolve_datetime(text, reference)

    Stores duration (ms) into trace["timings"][stage_name] and logs a warning
    if the stage exceeds its budget. Exceptions from the block propagate.

    Args:
        trace: Dictionary to store timings (trace["timings"] is created if needed)
        stage_name: Name of the stage being timed
        request_id: Optional request ID for logging
        budget_ms: Optional budget override (defaults to STAGE_BUDGETS_MS[stage_name])
    """

    def __init__(
        self,
        trace: Optional[Dict[str, Any]],
        stage_name: str,
        request_id: Optional[str] = None,
        budget_ms: Optional[int] = None
    ):
        self.trace = trace
        self.stage_name = stage_name
        self.request_id = request_id
        self.budget_ms = budget_ms if budget_ms is not None else STAGE_BUDGETS_MS.get(stage_name)
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self):
        """Start timing."""
        # No trace, no side effects
        if not isinstance(self.trace, dict):
            return self
        self.trace.setdefault("timings", {})
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timing and record duration."""
        if not isinstance(self.trace, dict) or self.start_time is None:
            return False

        self.duration_ms = (time.perf_counter() - self.start_time) * 1000.0
        self.trace.setdefault("timings", {})[self.stage_name] = round(self.duration_ms, 2)

        if self.budget_ms is not None and self.duration_ms > self.budget_ms:
            logger.warning(
                f"Stage '{self.stage_name}' exceeded performance budget",
                extra={
                    'request_id': self.request_id,
                    'stage': self.stage_name,
                    'duration_ms': round(self.duration_ms, 2),
                    'budget_ms': self.budget_ms
                }
            )

        return False
