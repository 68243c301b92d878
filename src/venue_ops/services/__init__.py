"""Orchestration services over the store collaborator."""

from venue_ops.services.counting_service import AttendanceSummary, CountingService
from venue_ops.services.incident_service import IncidentService
from venue_ops.services.lost_found_service import LostAndFoundService
from venue_ops.services.setup_service import SetupService

__all__ = [
    "AttendanceSummary",
    "CountingService",
    "IncidentService",
    "LostAndFoundService",
    "SetupService",
]
