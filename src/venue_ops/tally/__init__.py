"""Head-count tally engine."""

from venue_ops.tally.engine import TallyEngine, TallySnapshot

__all__ = ["TallyEngine", "TallySnapshot"]
