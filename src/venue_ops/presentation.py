"""Display names, colors and icons for the core enums.

Kept out of ``core.enums`` so the domain stays free of UI concerns. Colors
are hex strings; icons are symbol names understood by the client apps
(item categories use emoji).
"""

from __future__ import annotations

from enum import Enum

from venue_ops.core.enums import (
    IncidentSeverity,
    IncidentStatus,
    ItemCategory,
    ItemStatus,
    ZoneType,
)

NEUTRAL_COLOR = "#9E9E9E"


ZONE_TYPE_ICONS: dict[ZoneType, str] = {
    ZoneType.SEATING: "chair.fill",
    ZoneType.STANDING: "figure.stand",
    ZoneType.VIP: "star.fill",
    ZoneType.GENERAL_ADMISSION: "person.2.fill",
    ZoneType.OVERFLOW: "arrow.up.right.square.fill",
    ZoneType.PARKING: "car.fill",
    ZoneType.REGISTRATION: "checkmark.circle.fill",
    ZoneType.LOBBY: "door.left.hand.open",
    ZoneType.OUTDOOR: "sun.max.fill",
    ZoneType.STAGE: "rectangle.center.inset.filled",
    ZoneType.BACKSTAGE: "curtains.closed",
    ZoneType.CARE_ROOM: "cross.case.fill",
    ZoneType.FOOD_AREA: "fork.knife",
    ZoneType.RESTROOMS: "figure.walk",
    ZoneType.EMERGENCY_EXIT: "arrow.uturn.left.square.fill",
    ZoneType.OTHER: "square.grid.2x2.fill",
}

ITEM_CATEGORY_ICONS: dict[ItemCategory, str] = {
    ItemCategory.ELECTRONICS: "📱",
    ItemCategory.CLOTHING: "👔",
    ItemCategory.DOCUMENTS: "📄",
    ItemCategory.ACCESSORIES: "👓",
    ItemCategory.BAGS: "🎒",
    ItemCategory.PERSONAL_ITEMS: "🎯",
    ItemCategory.KEYS: "🔑",
    ItemCategory.WALLETS: "💳",
    ItemCategory.JEWELRY: "💍",
    ItemCategory.TOYS: "🧸",
    ItemCategory.BOOKS: "📚",
    ItemCategory.SPORTS_EQUIPMENT: "⚽",
    ItemCategory.OTHER: "📦",
}

ITEM_STATUS_COLORS: dict[ItemStatus, str] = {
    ItemStatus.PENDING: "#FFA726",
    ItemStatus.CLAIMED: "#66BB6A",
    ItemStatus.DONATED: "#42A5F5",
    ItemStatus.DISPOSED: "#EF5350",
}

SEVERITY_COLORS: dict[IncidentSeverity, str] = {
    IncidentSeverity.LOW: "#66BB6A",
    IncidentSeverity.MEDIUM: "#FFA726",
    IncidentSeverity.HIGH: "#FF7043",
    IncidentSeverity.CRITICAL: "#EF5350",
}

SEVERITY_ICONS: dict[IncidentSeverity, str] = {
    IncidentSeverity.LOW: "info.circle",
    IncidentSeverity.MEDIUM: "exclamationmark.triangle",
    IncidentSeverity.HIGH: "exclamationmark.triangle.fill",
    IncidentSeverity.CRITICAL: "exclamationmark.octagon.fill",
}

INCIDENT_STATUS_COLORS: dict[IncidentStatus, str] = {
    IncidentStatus.REPORTED: "#FF7043",
    IncidentStatus.INVESTIGATING: "#FFA726",
    IncidentStatus.IN_PROGRESS: "#42A5F5",
    IncidentStatus.RESOLVED: "#66BB6A",
    IncidentStatus.CLOSED: NEUTRAL_COLOR,
}

# Acronyms that title-casing would mangle.
_DISPLAY_OVERRIDES = {ZoneType.VIP: "VIP"}

_COLORS: dict[type[Enum], dict] = {
    ItemStatus: ITEM_STATUS_COLORS,
    IncidentSeverity: SEVERITY_COLORS,
    IncidentStatus: INCIDENT_STATUS_COLORS,
}

_ICONS: dict[type[Enum], dict] = {
    ZoneType: ZONE_TYPE_ICONS,
    ItemCategory: ITEM_CATEGORY_ICONS,
    IncidentSeverity: SEVERITY_ICONS,
}


def display_name(value: Enum) -> str:
    """Human label: ``IN_PROGRESS`` -> ``In Progress``."""
    if value in _DISPLAY_OVERRIDES:
        return _DISPLAY_OVERRIDES[value]
    return value.value.replace("_", " ").title()


def color(value: Enum) -> str:
    """Hex color for statuses and severities; neutral gray otherwise."""
    return _COLORS.get(type(value), {}).get(value, NEUTRAL_COLOR)


def icon(value: Enum) -> str | None:
    return _ICONS.get(type(value), {}).get(value)
