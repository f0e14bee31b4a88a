import logging
from datetime import datetime, timezone
from typing import List, Optional

from booking_schemas import Booking, BookingDetail, BookingDetailService
from persistence.mappers import booking_detail_from_row, booking_detail_service_from_row, booking_from_row
from persistence.queries import get_query

logger = logging.getLogger(__name__)


def as_naive_utc(value: datetime) -> datetime:
    # columns are naive; aware values are stored as UTC wall-clock time
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class TransactionWriter:
    """
    Writes a booking and everything it owns through one open transaction
    (booking -> booking details -> detail services).
    The session must already be inside a transaction; committing or rolling
    back is the caller's job. Each insert returns the stored row, and the
    structure built so far is kept on `self.partial` so a failed write can
    still be reported.
    """

    def __init__(self, session):
        self.session = session
        self.partial: Optional[Booking] = None

    def insert_booking(self, booking: Booking) -> Booking:
        row = self.session.execute(
            get_query("CREATE_BOOKING"),
            {
                "night": booking.night,
                "check_in": as_naive_utc(booking.check_in),
                "check_out": as_naive_utc(booking.check_out),
                "user_id": booking.user_id,
                "customer_id": booking.customer_id,
                "total_price": booking.total_price,
            },
        ).one()
        return booking_from_row(row)

    def insert_detail(self, booking_id: int, detail: BookingDetail) -> BookingDetail:
        row = self.session.execute(
            get_query("CREATE_BOOKING_DETAIL"),
            {"booking_id": booking_id, "room_id": detail.room_id, "sub_total": detail.sub_total},
        ).one()
        return booking_detail_from_row(row)

    def insert_service(self, detail_id: int, service: BookingDetailService) -> BookingDetailService:
        row = self.session.execute(
            get_query("CREATE_BOOKING_DETAIL_SERVICE"),
            {
                "booking_detail_id": detail_id,
                "service_id": service.service_id,
                "service_name": service.service_name,
            },
        ).one()
        return booking_detail_service_from_row(row)

    def write(self, booking: Booking) -> Booking:
        """
        Insert the booking, then each detail, then each service of that detail.
        The first failing insert propagates; nothing after it is attempted.
        Until the parent insert succeeds `partial` is a copy of the input.
        """
        self.partial = booking.model_copy(deep=True)

        stored = self.insert_booking(booking)
        self.partial = stored
        if booking.booking_details is None:
            return stored

        details: List[BookingDetail] = []
        stored.booking_details = details
        for detail in booking.booking_details:
            stored_detail = self.insert_detail(stored.id, detail)
            details.append(stored_detail)
            if detail.services is None:
                continue

            services: List[BookingDetailService] = []
            stored_detail.services = services
            for service in detail.services:
                services.append(self.insert_service(stored_detail.id, service))

        logger.debug("wrote booking %s with %d details", stored.id, len(details))
        return stored
