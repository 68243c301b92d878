"""Test the per-entity validators."""

from datetime import datetime, timedelta

import pytest

from venue_ops.core.errors import LockedError, ValidationError
from venue_ops.core.result import OK
from venue_ops.validation import (
    FailureKind,
    ValidationFailure,
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


def _kinds(result):
    return [(f.field, f.kind) for f in result.error.failures]


class TestVenue:
    def test_valid(self):
        assert validate_venue_input("Main Campus", "123 Church St", "MC") == OK

    def test_valid_with_contacts(self):
        result = validate_venue_input(
            "Main Campus", "123 Church St", "MC", "office@church.org", "(555) 123-4567"
        )
        assert result == OK

    def test_collects_every_failure_in_order(self):
        result = validate_venue_input("", "", "")
        assert _kinds(result) == [
            ("Venue name", FailureKind.EMPTY_STRING),
            ("Location", FailureKind.EMPTY_STRING),
            ("Venue code", FailureKind.EMPTY_STRING),
            ("Venue code", FailureKind.INVALID_LENGTH),
            ("Venue code", FailureKind.INVALID_FORMAT),
        ]

    def test_long_name(self):
        result = validate_venue_input("x" * 101, "Here", "MC")
        assert _kinds(result) == [("Venue name", FailureKind.INVALID_LENGTH)]

    def test_bad_email_and_phone(self):
        result = validate_venue_input("A", "B", "MC", "not-an-email", "phone?")
        assert _kinds(result) == [
            ("Contact email", FailureKind.INVALID_FORMAT),
            ("Contact phone", FailureKind.INVALID_FORMAT),
        ]


class TestVenueCode:
    @pytest.mark.parametrize("code", ["MC", "NV", "DT", "AB12", "ABCDEFGHIJ", " MC "])
    def test_accepts(self, code):
        assert validate_venue_code(code) is None

    @pytest.mark.parametrize("code", ["", "M", "mc", "M-C", "ABCDEFGHIJK", "M C"])
    def test_rejects_with_format_failure(self, code):
        failure = validate_venue_code(code)
        assert failure.kind == FailureKind.INVALID_FORMAT
        assert failure.message == (
            "Venue code must be in format: "
            "2-10 uppercase letters or numbers (e.g., MC, NV, DT)"
        )


class TestEventTypeAndTime:
    def test_valid(self):
        assert validate_event_type_input("Sunday AM", "Sunday", "9:00 AM") == OK

    @pytest.mark.parametrize("time", ["9:00 AM", "09:00", "19:00", "9:00pm", "23:59", "0:00"])
    def test_time_accepts(self, time):
        assert validate_time_format(time) is None

    @pytest.mark.parametrize("time", ["25:00", "9:60", "nine", "9:00 XM", "9"])
    def test_time_rejects(self, time):
        assert validate_time_format(time).kind == FailureKind.INVALID_FORMAT

    def test_blank_time_is_empty_not_format(self):
        assert validate_time_format("  ") == ValidationFailure.empty_string("Time")

    def test_description_length(self):
        result = validate_event_type_input("A", "Sunday", "9:00", "d" * 501)
        assert _kinds(result) == [("Description", FailureKind.INVALID_LENGTH)]


class TestAreaTemplate:
    def test_valid(self):
        assert validate_area_template_input("Balcony", 100) == OK

    def test_zero_capacity(self):
        result = validate_area_template_input("Balcony", 0)
        assert _kinds(result) == [
            ("Capacity", FailureKind.NOT_POSITIVE),
            ("Capacity", FailureKind.INVALID_RANGE),
        ]

    def test_capacity_upper_bound(self):
        assert validate_area_template_input("Field", 10_000) == OK
        result = validate_area_template_input("Field", 10_001)
        assert _kinds(result) == [("Capacity", FailureKind.INVALID_RANGE)]


class TestEvent:
    def test_valid(self, fixed_clock):
        result = validate_event_input("V1", None, fixed_clock.now(), "Alex", clock=fixed_clock)
        assert result == OK

    def test_future_date(self, fixed_clock):
        tomorrow = fixed_clock.now() + timedelta(days=1)
        result = validate_event_input("V1", None, tomorrow, "Alex", clock=fixed_clock)
        assert _kinds(result) == [("Event date", FailureKind.FUTURE_DATE)]

    def test_naive_date(self, fixed_clock):
        result = validate_event_input("V1", None, datetime(2024, 1, 1), "Bob", clock=fixed_clock)
        assert result == OK
        result = validate_event_input("V1", None, datetime(2024, 7, 1), "Bob", clock=fixed_clock)
        assert _kinds(result) == [("Event date", FailureKind.FUTURE_DATE)]

    def test_blank_fields(self, fixed_clock):
        result = validate_event_input(
            "", "", fixed_clock.now(), "", event_name="n" * 101, clock=fixed_clock
        )
        assert _kinds(result) == [
            ("Venue", FailureKind.EMPTY_STRING),
            ("Counter name", FailureKind.EMPTY_STRING),
            ("Event type", FailureKind.EMPTY_STRING),
            ("Event name", FailureKind.INVALID_LENGTH),
        ]


class TestAttendance:
    def test_within_capacity(self):
        assert validate_attendance_count(50, 100) == OK

    def test_at_capacity(self):
        assert validate_attendance_count(100, 100) == OK

    def test_over_capacity_is_a_warning_failure(self):
        result = validate_attendance_count(120, 100)
        (failure,) = result.error.failures
        assert failure.message == "Count: Count (120) exceeds capacity (100)"
        assert is_capacity_warning(failure)

    def test_negative(self):
        result = validate_attendance_count(-1, 100)
        assert _kinds(result) == [("Count", FailureKind.NOT_NON_NEGATIVE)]

    def test_over_max(self):
        result = validate_attendance_count(100_000, 200_000)
        assert _kinds(result) == [("Count", FailureKind.INVALID_RANGE)]

    def test_other_failures_are_not_warnings(self):
        assert not is_capacity_warning(ValidationFailure.not_non_negative("Count"))
        assert not is_capacity_warning(ValidationFailure.custom("Venue", "exceeds capacity"))
        assert not is_capacity_warning(
            ValidationFailure.custom("Count", "Reported total exceeds capacity of the hall")
        )
        assert not is_capacity_warning(
            ValidationFailure.custom("Count", "Count (5) exceeds capacity (3) twice")
        )


class TestManualCountEdit:
    def test_locked(self):
        result = validate_manual_count_edit(5, 100, is_locked=True)
        assert result.error == LockedError("Cannot edit count for locked event")

    def test_unlocked_delegates(self):
        assert validate_manual_count_edit(5, 100, is_locked=False) == OK
        assert isinstance(validate_manual_count_edit(-1, 100, False).error, ValidationError)


class TestReportDateRange:
    def test_valid(self, fixed_clock):
        end = fixed_clock.now()
        assert validate_report_date_range(end - timedelta(days=30), end, fixed_clock) == OK

    def test_exactly_one_year(self, fixed_clock):
        end = fixed_clock.now()
        assert validate_report_date_range(end - timedelta(days=365), end, fixed_clock) == OK

    def test_over_one_year(self, fixed_clock):
        end = fixed_clock.now()
        result = validate_report_date_range(end - timedelta(days=366), end, fixed_clock)
        assert [f.message for f in result.error.failures] == [
            "Date range: Date range cannot exceed 1 year"
        ]

    def test_reversed_and_future(self, fixed_clock):
        now = fixed_clock.now()
        result = validate_report_date_range(now + timedelta(days=2), now, fixed_clock)
        assert _kinds(result) == [
            ("Start date", FailureKind.FUTURE_DATE),
            ("Date range", FailureKind.INVALID_DATE_RANGE),
        ]

    def test_custom_max(self, fixed_clock):
        end = fixed_clock.now()
        result = validate_report_date_range(
            end - timedelta(days=31), end, fixed_clock, max_range_days=30
        )
        assert result.is_failure

    def test_naive_and_aware_mixed(self, fixed_clock):
        assert validate_report_date_range(datetime(2024, 5, 1), fixed_clock.now(), fixed_clock) == OK
        result = validate_report_date_range(datetime(2023, 1, 1), fixed_clock.now(), fixed_clock)
        assert [f.message for f in result.error.failures] == [
            "Date range: Date range cannot exceed 1 year"
        ]


class TestLostAndFoundAndIncidents:
    def test_lost_item(self):
        assert validate_lost_item_input("Blue umbrella", "Lobby") == OK
        result = validate_lost_item_input("", "")
        assert _kinds(result) == [
            ("Item description", FailureKind.EMPTY_STRING),
            ("Found zone", FailureKind.EMPTY_STRING),
        ]

    def test_claim(self):
        assert validate_claim_input("Jordan", "555-1234") == OK
        assert _kinds(validate_claim_input(" ")) == [("Claimed by", FailureKind.EMPTY_STRING)]
        assert _kinds(validate_claim_input("J", "c" * 201)) == [
            ("Claimer contact", FailureKind.INVALID_LENGTH)
        ]

    def test_incident(self):
        assert validate_incident_input("Spill", "Coffee on floor", "Lobby") == OK
        result = validate_incident_input("t" * 201, "", "Lobby", "n" * 1001)
        assert _kinds(result) == [
            ("Incident title", FailureKind.INVALID_LENGTH),
            ("Incident description", FailureKind.EMPTY_STRING),
            ("Notes", FailureKind.INVALID_LENGTH),
        ]
