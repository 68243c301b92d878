"""Test the field rules and failure aggregation."""

from datetime import datetime, timedelta, timezone

import pytest

from venue_ops.core.errors import ValidationError
from venue_ops.core.result import OK
from venue_ops.validation import rules
from venue_ops.validation.failures import FailureKind, ValidationFailure


class TestStringRules:
    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_not_empty_rejects_blank(self, value):
        assert rules.not_empty(value, "Name") == ValidationFailure.empty_string("Name")

    def test_not_empty_accepts_text(self):
        assert rules.not_empty(" x ", "Name") is None

    def test_length_between(self):
        assert rules.length_between("ab", "Code", 2, 10) is None
        assert rules.length_between("a", "Code", 2, 10).kind == FailureKind.INVALID_LENGTH
        assert rules.length_between("a" * 11, "Code", 2, 10).kind == FailureKind.INVALID_LENGTH

    def test_length_between_open_bounds(self):
        assert rules.length_between("a" * 1000, "Notes") is None
        assert rules.length_between("", "Notes", max_length=5) is None

    def test_matches_format_uses_whole_trimmed_value(self):
        assert rules.matches_format(" AB ", "Code", r"[A-Z]+", "letters") is None
        failure = rules.matches_format("AB1", "Code", r"[A-Z]+", "letters")
        assert failure == ValidationFailure.invalid_format("Code", "letters")


class TestEmailAndPhone:
    @pytest.mark.parametrize("value", ["a@b.co", "first.last+tag@mail.example.org"])
    def test_valid_emails(self, value):
        assert rules.email(value) is None

    @pytest.mark.parametrize("value", ["nope", "a@b", "a@b.c", "@example.com"])
    def test_invalid_emails(self, value):
        assert rules.email(value).kind == FailureKind.INVALID_FORMAT

    def test_blank_email_passes(self):
        assert rules.email("  ") is None

    @pytest.mark.parametrize(
        "value", ["(123) 456-7890", "123-456-7890", "1234567890", "+1-234-5678900"]
    )
    def test_valid_phones(self, value):
        assert rules.phone(value) is None

    @pytest.mark.parametrize("value", ["call me", "123-abc-7890"])
    def test_invalid_phones(self, value):
        assert rules.phone(value).kind == FailureKind.INVALID_FORMAT

    def test_blank_phone_passes(self):
        assert rules.phone("") is None


class TestNumberRules:
    def test_positive_distinguishes_zero_and_negative(self):
        assert rules.positive(0, "Capacity").kind == FailureKind.NOT_POSITIVE
        assert rules.positive(-1, "Capacity").kind == FailureKind.NOT_NON_NEGATIVE
        assert rules.positive(1, "Capacity") is None

    def test_non_negative(self):
        assert rules.non_negative(0, "Count") is None
        assert rules.non_negative(-5, "Count").kind == FailureKind.NOT_NON_NEGATIVE

    def test_in_range(self):
        assert rules.in_range(5, "N", 1, 10) is None
        assert rules.in_range(0, "N", 1, 10) == ValidationFailure.invalid_range("N", 1, 10)
        assert rules.in_range(11, "N", 1, 10) == ValidationFailure.invalid_range("N", 1, 10)
        assert rules.in_range(10**9, "N", minimum=0) is None


class TestDateRules:
    def test_not_future(self, fixed_clock):
        now = fixed_clock.now()
        assert rules.not_future(now, "Date", fixed_clock) is None
        assert rules.not_future(now - timedelta(days=1), "Date", fixed_clock) is None
        failure = rules.not_future(now + timedelta(seconds=1), "Date", fixed_clock)
        assert failure == ValidationFailure.future_date("Date")

    def test_not_past(self, fixed_clock):
        now = fixed_clock.now()
        assert rules.not_past(now + timedelta(days=1), "Date", fixed_clock) is None
        assert rules.not_past(now - timedelta(days=1), "Date", fixed_clock).kind == FailureKind.CUSTOM

    def test_date_range_ordered(self):
        a = datetime(2024, 1, 1, tzinfo=timezone.utc)
        b = datetime(2024, 2, 1, tzinfo=timezone.utc)
        assert rules.date_range_ordered(a, b) is None
        assert rules.date_range_ordered(a, a) is None
        assert rules.date_range_ordered(b, a) == ValidationFailure.invalid_date_range("Date range")

    def test_naive_datetimes_read_as_utc(self, fixed_clock):
        naive_now = fixed_clock.now().replace(tzinfo=None)
        assert rules.not_future(naive_now, "Date", fixed_clock) is None
        assert rules.not_future(naive_now + timedelta(hours=1), "Date", fixed_clock) == (
            ValidationFailure.future_date("Date")
        )
        assert rules.not_past(naive_now - timedelta(hours=1), "Date", fixed_clock) is not None
        naive = datetime(2024, 1, 1)
        aware = datetime(2024, 2, 1, tzinfo=timezone.utc)
        assert rules.date_range_ordered(naive, aware) is None
        assert rules.date_range_ordered(aware, naive) is not None


class TestCustom:
    def test_custom_always_fails(self):
        assert rules.custom("F", "bad").detail == "bad"

    def test_custom_if(self):
        assert rules.custom_if(False, "F", "bad") is None
        assert rules.custom_if(True, "F", "bad") == ValidationFailure.custom("F", "bad")


class TestAggregation:
    def test_collect_errors_drops_none_and_keeps_order(self):
        first = ValidationFailure.empty_string("A")
        second = ValidationFailure.not_positive("B")
        assert rules.collect_errors(None, first, None, second) == [first, second]

    def test_collect_errors_accepts_iterable(self):
        first = ValidationFailure.empty_string("A")
        assert rules.collect_errors([None, first]) == [first]

    def test_collect_errors_all_none(self):
        assert rules.collect_errors(None, None) == []

    def test_to_result_success_when_empty(self):
        assert rules.to_result([]) == OK

    def test_to_result_wraps_failures(self):
        failure = ValidationFailure.empty_string("A")
        result = rules.to_result([failure])
        assert result.is_failure
        assert isinstance(result.error, ValidationError)
        assert result.error.failures == (failure,)

    def test_validate_runs_every_rule(self):
        result = rules.validate(
            rules.not_empty("", "Name"),
            rules.positive(0, "Capacity"),
            rules.not_empty("ok", "Other"),
        )
        kinds = [f.kind for f in result.error.failures]
        assert kinds == [FailureKind.EMPTY_STRING, FailureKind.NOT_POSITIVE]
