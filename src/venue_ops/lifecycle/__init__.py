"""Entity lifecycle state machines (lost items, incidents)."""

from venue_ops.lifecycle import incidents, lost_items

__all__ = ["incidents", "lost_items"]
