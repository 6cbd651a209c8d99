"""Booking adapter - hand a finished plan to the booking-creation service."""

import logging

import httpx

from backend.app.models.booking import BookingRecord, BookingRequest
from backend.app.planning.errors import TripPlanError
from backend.app.utils.metrics import booking_submissions_total

logger = logging.getLogger(__name__)


class BookingSubmissionError(TripPlanError):
    """Booking service rejected or never received the booking."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Best user-facing message from an error response, passed through verbatim."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "message", "detail"):
            if isinstance(body.get(key), str) and body[key]:
                return str(body[key])
    return response.text or response.reason_phrase or "Failed to save booking"


async def create_booking(
    request: BookingRequest,
    base_url: str,
    client: httpx.AsyncClient | None = None,
    timeout: float = 8.0,
) -> BookingRecord:
    """POST the booking request to {base_url}/bookings.

    Args:
        request: Serialized plan
        base_url: Booking service base URL
        client: Optional httpx client (for testing with mocks)
        timeout: Request timeout in seconds when no client is given

    Returns:
        The created booking record

    Raises:
        BookingSubmissionError: On HTTP error status, network failure or a
            response that is not a booking record
    """
    url = f"{base_url.rstrip('/')}/bookings"
    body = request.to_wire()

    close_client = False
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)
        close_client = True

    try:
        response = await client.post(url, json=body)
        if response.is_error:
            message = _error_message(response)
            booking_submissions_total.labels(outcome="rejected").inc()
            logger.warning(
                f"[create_booking] status={response.status_code} message={message}"
            )
            raise BookingSubmissionError(message, status_code=response.status_code)

        data = response.json()
        record = BookingRecord.model_validate(data)
    except httpx.HTTPError as e:
        booking_submissions_total.labels(outcome="error").inc()
        logger.error(f"[create_booking] request failed: {e}")
        raise BookingSubmissionError(str(e) or "Failed to save booking") from e
    except ValueError as e:
        # Undecodable JSON or a body that is not a booking record
        booking_submissions_total.labels(outcome="error").inc()
        logger.error(f"[create_booking] unexpected response: {e}")
        raise BookingSubmissionError("Booking service returned an unexpected response") from e
    finally:
        if close_client:
            await client.aclose()

    booking_submissions_total.labels(outcome="created").inc()
    logger.info(f"[create_booking] booking_id={record.booking_id} status={record.status}")
    return record
