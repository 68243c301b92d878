"""Enumerations used across the venue-operations core.

Pure data tags. Display names, colors and icons live in
``venue_ops.presentation``.
"""

from enum import Enum


class ZoneType(str, Enum):
    SEATING = "SEATING"
    STANDING = "STANDING"
    VIP = "VIP"
    GENERAL_ADMISSION = "GENERAL_ADMISSION"
    OVERFLOW = "OVERFLOW"
    PARKING = "PARKING"
    REGISTRATION = "REGISTRATION"
    LOBBY = "LOBBY"
    OUTDOOR = "OUTDOOR"
    STAGE = "STAGE"
    BACKSTAGE = "BACKSTAGE"
    CARE_ROOM = "CARE_ROOM"
    FOOD_AREA = "FOOD_AREA"
    RESTROOMS = "RESTROOMS"
    EMERGENCY_EXIT = "EMERGENCY_EXIT"
    OTHER = "OTHER"


class ItemCategory(str, Enum):
    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    DOCUMENTS = "DOCUMENTS"
    ACCESSORIES = "ACCESSORIES"
    BAGS = "BAGS"
    PERSONAL_ITEMS = "PERSONAL_ITEMS"
    KEYS = "KEYS"
    WALLETS = "WALLETS"
    JEWELRY = "JEWELRY"
    TOYS = "TOYS"
    BOOKS = "BOOKS"
    SPORTS_EQUIPMENT = "SPORTS_EQUIPMENT"
    OTHER = "OTHER"


class ItemStatus(str, Enum):
    PENDING = "PENDING"
    CLAIMED = "CLAIMED"
    DONATED = "DONATED"
    DISPOSED = "DISPOSED"


class IncidentSeverity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class IncidentStatus(str, Enum):
    """Resolution progress, declared in lifecycle order."""

    REPORTED = "REPORTED"
    INVESTIGATING = "INVESTIGATING"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"
