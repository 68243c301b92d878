"""Shared fixtures for the venue-ops test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from venue_ops.core.clock import FixedClock
from venue_ops.core.config import Settings
from venue_ops.core.models import AreaTemplate, Venue
from venue_ops.services import (
    CountingService,
    IncidentService,
    LostAndFoundService,
    SetupService,
)
from venue_ops.storage.memory_store import InMemoryStore
from venue_ops.tally.engine import TallyEngine

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Infrastructure
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned at 2024-06-01 00:00 UTC."""
    return FixedClock(NOW)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def settings() -> Settings:
    return Settings()


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

@pytest.fixture
def setup_service(store, fixed_clock) -> SetupService:
    return SetupService(store, fixed_clock)


@pytest.fixture
def counting_service(store, fixed_clock, settings) -> CountingService:
    return CountingService(store, fixed_clock, settings)


@pytest.fixture
def lost_found_service(store, fixed_clock, settings) -> LostAndFoundService:
    return LostAndFoundService(store, fixed_clock, settings)


@pytest.fixture
def incident_service(store, fixed_clock) -> IncidentService:
    return IncidentService(store, fixed_clock)


# ---------------------------------------------------------------------------
# Seeded data
# ---------------------------------------------------------------------------

@pytest.fixture
def venue(setup_service) -> Venue:
    """Venue MC, no areas."""
    return setup_service.create_venue("Main Campus", "123 Church St", "MC").unwrap()


@pytest.fixture
def areas(setup_service, venue) -> list[AreaTemplate]:
    """Three areas with capacities 500 / 100 / 150."""
    return [
        setup_service.add_area(venue.id, name, capacity).unwrap()
        for name, capacity in (("Sanctuary", 500), ("Balcony", 100), ("Lobby", 150))
    ]


@pytest.fixture
def engine(counting_service, venue, areas) -> TallyEngine:
    """Engine on a fresh event over the three seeded areas."""
    return counting_service.start_event(venue.id, "Alex").unwrap()
