"""Validation: field rules, failure aggregation and per-entity validators.

Public API
----------
Failures:
    ValidationFailure, FailureKind

Rules:
    not_empty, length_between, matches_format, email, phone,
    positive, non_negative, in_range,
    not_future, not_past, date_range_ordered,
    custom, custom_if

Aggregation:
    collect_errors, to_result, validate

Domain validators:
    validate_venue_input, validate_venue_code,
    validate_event_type_input, validate_time_format,
    validate_area_template_input, validate_event_input,
    validate_attendance_count, is_capacity_warning,
    validate_manual_count_edit, validate_report_date_range,
    validate_lost_item_input, validate_claim_input,
    validate_incident_input
"""

from venue_ops.validation.domain import (
    is_capacity_warning,
    validate_area_template_input,
    validate_attendance_count,
    validate_claim_input,
    validate_event_input,
    validate_event_type_input,
    validate_incident_input,
    validate_lost_item_input,
    validate_manual_count_edit,
    validate_report_date_range,
    validate_time_format,
    validate_venue_code,
    validate_venue_input,
)
from venue_ops.validation.failures import FailureKind, ValidationFailure
from venue_ops.validation.rules import (
    collect_errors,
    custom,
    custom_if,
    date_range_ordered,
    email,
    in_range,
    length_between,
    matches_format,
    non_negative,
    not_empty,
    not_future,
    not_past,
    phone,
    positive,
    to_result,
    validate,
)

__all__ = [
    # Failures
    "FailureKind",
    "ValidationFailure",
    # Rules
    "custom",
    "custom_if",
    "date_range_ordered",
    "email",
    "in_range",
    "length_between",
    "matches_format",
    "non_negative",
    "not_empty",
    "not_future",
    "not_past",
    "phone",
    "positive",
    # Aggregation
    "collect_errors",
    "to_result",
    "validate",
    # Domain validators
    "is_capacity_warning",
    "validate_area_template_input",
    "validate_attendance_count",
    "validate_claim_input",
    "validate_event_input",
    "validate_event_type_input",
    "validate_incident_input",
    "validate_lost_item_input",
    "validate_manual_count_edit",
    "validate_report_date_range",
    "validate_time_format",
    "validate_venue_code",
    "validate_venue_input",
]
