"""Tests for response shaping helpers and the Page contract."""

import pytest

from domain.errors import ResponseShapeError
from domain.responses import Page, unwrap_object, unwrap_page
from tools.shaping import (
    booking_status,
    count_by,
    field_or_unknown,
    is_active_booking,
    numeric_range,
    page_summary,
    percentage,
)

from tests.conftest import booking


class TestPage:
    def test_unwrap_page(self) -> None:
        page = unwrap_page({"bookings": {"data": [{"booking_id": "1"}], "total": 9}}, "bookings")
        assert page.returned == 1
        assert page.total == 9

    def test_null_field_is_empty_page(self) -> None:
        page = unwrap_page({"bookings": None}, "bookings")
        assert page.data == []
        assert page.total is None

    def test_missing_field_raises(self) -> None:
        with pytest.raises(ResponseShapeError):
            unwrap_page({"members": {"data": []}}, "accounts")

    def test_non_page_raises(self) -> None:
        with pytest.raises(ResponseShapeError):
            unwrap_page({"accounts": {"data": "nope"}}, "accounts")

    def test_unwrap_object(self) -> None:
        assert unwrap_object({"booking": None}, "booking") is None
        assert unwrap_object({"booking": {"booking_id": "1"}}, "booking") == {"booking_id": "1"}
        with pytest.raises(ResponseShapeError):
            unwrap_object({"booking": [1, 2]}, "booking")

    def test_payload_is_not_mutated(self) -> None:
        payload = {"bookings": {"data": [{"booking_id": "1"}], "total": 1}}
        snapshot = {"bookings": {"data": [{"booking_id": "1"}], "total": 1}}
        page = unwrap_page(payload, "bookings")
        page_summary(page)
        assert payload == snapshot


class TestSummaries:
    def test_remote_total_is_reported(self) -> None:
        page = Page(data=[{}] * 50, total=137)
        assert page_summary(page) == {"returned": 50, "total": 137, "totalSource": "remote"}

    def test_missing_total_falls_back_to_returned(self) -> None:
        page = Page(data=[{}] * 3)
        assert page_summary(page) == {"returned": 3, "total": 3, "totalSource": "returned"}

    def test_count_by(self) -> None:
        records = [{"status": "ACTIVE"}, {"status": "ACTIVE"}, {"status": None}]
        assert count_by(records, field_or_unknown("status")) == {"ACTIVE": 2, "unknown": 1}

    def test_numeric_range(self) -> None:
        assert numeric_range([10, 20, 45]) == {"min": 10, "max": 45, "average": 25.0}
        assert numeric_range([]) is None

    def test_percentage(self) -> None:
        assert percentage(1, 3) == 33
        assert percentage(5, 0) == 0


class TestBookingStatus:
    @pytest.mark.parametrize("flags, expected", [
        ({"is_canceled": True, "is_approved": True}, "canceled"),
        ({"is_rejected": True, "is_new": True}, "rejected"),
        ({"is_approved": True, "is_new": True}, "approved"),
        ({"is_new": True}, "pending"),
        ({}, "unknown"),
    ])
    def test_priority_order(self, flags, expected) -> None:
        assert booking_status(booking("B1", **flags)) == expected

    def test_active_booking(self) -> None:
        assert is_active_booking(booking("B1", is_approved=True))
        assert not is_active_booking(booking("B1", is_approved=True, is_canceled=True))
        assert not is_active_booking(booking("B1", is_approved=True, is_rejected=True))
        assert not is_active_booking(booking("B1", is_new=True))
