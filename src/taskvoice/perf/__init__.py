"""Performance monitoring utilities for the taskvoice pipeline."""

from taskvoice.perf.stage_timer import StageTimer, STAGE_BUDGETS_MS

__all__ = ["StageTimer", "STAGE_BUDGETS_MS"]
