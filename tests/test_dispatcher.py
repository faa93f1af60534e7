"""Tests for the dispatcher: routing, gating and error conversion."""

import pytest

from domain.errors import RemoteGraphQLError, TransportError

from tests.conftest import booking

BOOKINGS_PAGE = {"bookings": {"data": [booking("B1", is_approved=True)], "total": 1}}


@pytest.mark.asyncio
async def test_unknown_tool(make_dispatcher, stub_service) -> None:
    result = await make_dispatcher().invoke("optix_teleport", {})
    assert result.is_error
    assert result.text == "Unsupported tool: optix_teleport"
    assert stub_service.calls == []


@pytest.mark.asyncio
async def test_business_tools_absent_for_generic_profile(make_dispatcher) -> None:
    result = await make_dispatcher(extended=False).invoke("optix_list_bookings", {})
    assert result.is_error
    assert "Unsupported tool" in result.text


@pytest.mark.asyncio
@pytest.mark.parametrize("name, args", [
    ("optix_cancel_booking", {"bookingId": "B1"}),
    ("optix_create_member", {"email": "new@example.com"}),
    ("optix_update_booking", {}),
])
async def test_mutation_gating_makes_no_network_call(make_dispatcher, stub_service, name, args) -> None:
    result = await make_dispatcher(allow_mutations=False).invoke(name, args)
    assert result.is_error
    assert "Mutations are disabled" in result.text
    assert "ALLOW_MUTATIONS" in result.text
    assert stub_service.calls == []


@pytest.mark.asyncio
async def test_mutation_runs_when_allowed(make_dispatcher, stub_service) -> None:
    stub_service.queue({"bookingsCommit": {"bookings": [{"booking_id": "B1", "is_canceled": True}]}})
    result = await make_dispatcher(allow_mutations=True).invoke("optix_cancel_booking", {"bookingId": "B1"})
    assert not result.is_error, result.text
    assert len(stub_service.calls) == 1
    assert stub_service.calls[0].variables == {"booking_id": "B1"}


@pytest.mark.asyncio
async def test_validation_error_makes_no_network_call(make_dispatcher, stub_service) -> None:
    result = await make_dispatcher().invoke("optix_list_bookings", {"limit": 500})
    assert result.is_error
    assert result.text.startswith("Invalid arguments:")
    assert "limit" in result.text
    assert stub_service.calls == []


@pytest.mark.asyncio
async def test_end_before_start_is_a_validation_error(make_dispatcher, stub_service) -> None:
    result = await make_dispatcher().invoke(
        "optix_check_availability",
        {"resourceId": "R1", "start": "2025-10-06T10:00:00Z", "end": "2025-10-06T09:00:00Z"},
    )
    assert result.is_error
    assert "Invalid arguments" in result.text
    assert stub_service.calls == []


@pytest.mark.asyncio
async def test_transport_error(make_dispatcher, stub_service) -> None:
    stub_service.queue(TransportError("Bad Gateway", status=502))
    result = await make_dispatcher().invoke("optix_list_bookings", {})
    assert result.is_error
    assert "HTTP 502" in result.text
    assert "Bad Gateway" in result.text


@pytest.mark.asyncio
async def test_remote_errors_are_serialized(make_dispatcher, stub_service) -> None:
    stub_service.queue(RemoteGraphQLError([{"message": "Cannot query field 'cost' on type 'Booking'"}]))
    result = await make_dispatcher().invoke("optix_list_bookings", {})
    assert result.is_error
    assert "Cannot query field 'cost'" in result.text


@pytest.mark.asyncio
async def test_unexpected_payload_shape(make_dispatcher, stub_service) -> None:
    stub_service.queue({"members": {"data": []}})
    result = await make_dispatcher().invoke("optix_list_members", {})
    assert result.is_error
    assert result.text.startswith("Unexpected response shape")


@pytest.mark.asyncio
async def test_unexpected_exception_never_escapes(make_dispatcher, stub_service, caplog) -> None:
    stub_service.queue(RuntimeError("boom"))
    result = await make_dispatcher().invoke("optix_list_bookings", {})
    assert result.is_error
    assert "boom" in result.text
    assert "Unexpected error in tool optix_list_bookings" in caplog.text


@pytest.mark.asyncio
async def test_read_only_tools_are_idempotent(make_dispatcher, stub_service) -> None:
    dispatcher = make_dispatcher()
    stub_service.queue(BOOKINGS_PAGE, BOOKINGS_PAGE)
    first = await dispatcher.invoke("optix_list_bookings", {"limit": 5})
    second = await dispatcher.invoke("optix_list_bookings", {"limit": 5})
    assert first.text == second.text
    assert stub_service.calls[0].variables == stub_service.calls[1].variables


@pytest.mark.asyncio
async def test_none_arguments_are_treated_as_empty(make_dispatcher, stub_service) -> None:
    stub_service.queue(BOOKINGS_PAGE)
    result = await make_dispatcher().invoke("optix_list_bookings", None)
    assert not result.is_error
