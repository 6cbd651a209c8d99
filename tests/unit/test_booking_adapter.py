"""Tests for the booking adapter."""

import json
from datetime import date

import httpx
import pytest

from backend.app.adapters.bookings import BookingSubmissionError, create_booking
from backend.app.models.booking import BookingRequest, SerializedDay

BASE_URL = "http://bookings.test/api"


@pytest.fixture
def booking_request() -> BookingRequest:
    return BookingRequest(
        destination_id="d1",
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 2),
        guests=2,
        custom_plan=[SerializedDay(date=date(2025, 6, 1), hotel=None, places=[])],
        total_cost=0,
    )


@pytest.mark.asyncio
async def test_create_booking_posts_camel_case_body(booking_request: BookingRequest) -> None:
    """Test a successful booking."""
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json={"_id": "b42", "status": "pending"})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    record = await create_booking(booking_request, BASE_URL, client=client)

    assert record.booking_id == "b42"
    assert record.status == "pending"
    assert captured["url"] == "http://bookings.test/api/bookings"
    body = captured["body"]
    assert isinstance(body, dict)
    assert body["destinationId"] == "d1"
    assert body["customPlan"][0]["date"] == "2025-06-01"
    assert body["customPlan"][0]["hotel"] is None
    assert "hotel" in body["customPlan"][0]
    assert "carRental" not in body
    assert "paymentMethod" not in body

    await client.aclose()


@pytest.mark.asyncio
async def test_rejection_message_passed_through(booking_request: BookingRequest) -> None:
    """Test that the service's error text reaches the caller verbatim."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "Hotel h1 is sold out for 2025-06-01"})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with pytest.raises(BookingSubmissionError) as exc_info:
        await create_booking(booking_request, BASE_URL, client=client)

    assert exc_info.value.message == "Hotel h1 is sold out for 2025-06-01"
    assert exc_info.value.status_code == 400

    await client.aclose()


@pytest.mark.asyncio
async def test_plain_text_error(booking_request: BookingRequest) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="maintenance")

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with pytest.raises(BookingSubmissionError) as exc_info:
        await create_booking(booking_request, BASE_URL, client=client)

    assert exc_info.value.message == "maintenance"

    await client.aclose()


@pytest.mark.asyncio
async def test_network_failure_raises_submission_error(booking_request: BookingRequest) -> None:
    """Test that transport errors are wrapped."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with pytest.raises(BookingSubmissionError) as exc_info:
        await create_booking(booking_request, BASE_URL, client=client)

    assert exc_info.value.status_code is None
    assert "connection refused" in exc_info.value.message

    await client.aclose()


@pytest.mark.asyncio
async def test_unexpected_response_body(booking_request: BookingRequest) -> None:
    """Test a 2xx body that is not a booking record."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with pytest.raises(BookingSubmissionError):
        await create_booking(booking_request, BASE_URL, client=client)

    await client.aclose()
