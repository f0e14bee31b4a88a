"""
BookingStore: record-level access to bookings, their details and services,
plus the day/month/year reporting sheets.

Every method opens its own session from the factory given at construction.
Driver and mapping failures are wrapped in StoreError as soon as they happen;
nothing is retried.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Union

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from booking_schemas import Booking, SheetData
from txn_manager import TransactionWriter, as_naive_utc
from .errors import BookingNotFound, StoreError
from .mappers import booking_detail_from_row, booking_detail_service_from_row, booking_from_row, sheet_data_from_row
from .queries import get_query

logger = logging.getLogger(__name__)

_FAILURES = (SQLAlchemyError, ValidationError)


def _as_date(day: Union[date, str]) -> date:
    if isinstance(day, datetime):
        return as_naive_utc(day).date()
    if isinstance(day, date):
        return day
    try:
        return date.fromisoformat(str(day).strip())
    except ValueError:
        raise ValueError(f"invalid date: {day!r}") from None


def _as_int(value, name: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"invalid {name}: {value!r}") from None


def day_range(day):
    start = datetime.combine(_as_date(day), datetime.min.time())
    return start, start + timedelta(days=1)


def month_range(month, year):
    m = _as_int(month, "month")
    y = _as_int(year, "year")
    if not 1 <= m <= 12:
        raise ValueError(f"invalid month: {month!r}")
    start = datetime(y, m, 1)
    end = datetime(y + 1, 1, 1) if m == 12 else datetime(y, m + 1, 1)
    return start, end


def year_range(year):
    y = _as_int(year, "year")
    if not 1 <= y < 9999:
        raise ValueError(f"invalid year: {year!r}")
    return datetime(y, 1, 1), datetime(y + 1, 1, 1)


class BookingStore:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def get(self, booking_id: int) -> Booking:
        """Fetch one booking with its details, each detail with its services."""
        try:
            with self.session_factory() as db:
                row = db.execute(get_query("GET_BOOKING"), {"id": booking_id}).one_or_none()
                if row is None:
                    raise BookingNotFound(booking_id)
                booking = booking_from_row(row)

                details = []
                for detail_row in db.execute(get_query("GET_ALL_BOOKING_DETAILS"), {"booking_id": booking.id}):
                    details.append(booking_detail_from_row(detail_row))
                for detail in details:
                    rows = db.execute(get_query("GET_ALL_BOOKING_DETAIL_SERVICES"), {"booking_detail_id": detail.id})
                    detail.services = [booking_detail_service_from_row(r) for r in rows]
                booking.booking_details = details
                return booking
        except _FAILURES as e:
            raise StoreError(f"get booking {booking_id} failed: {e}", original=e) from e

    def get_all(self, limit: int, offset: int) -> List[Booking]:
        """Page through bookings by id. Details are not loaded."""
        if limit < 0 or offset < 0:
            raise ValueError("limit and offset must be >= 0")
        try:
            with self.session_factory() as db:
                rows = db.execute(get_query("GET_ALL_BOOKINGS"), {"limit": limit, "offset": offset})
                return [booking_from_row(r) for r in rows]
        except _FAILURES as e:
            raise StoreError(f"list bookings failed: {e}", original=e) from e

    def create(self, booking: Booking) -> Booking:
        """
        Insert the booking with all of its details and their services in one
        transaction. On any failure the transaction is rolled back and the
        StoreError carries the partially built structure as `partial`.
        """
        writer = None
        try:
            with self.session_factory() as db:
                with db.begin():
                    writer = TransactionWriter(db)
                    stored = writer.write(booking)
        except _FAILURES as e:
            partial = writer.partial if writer is not None else booking
            logger.warning("create booking rolled back: %s", e)
            raise StoreError(f"create booking failed: {e}", original=e, partial=partial) from e

        logger.info(
            "created booking %s (%d details)",
            stored.id,
            len(stored.booking_details or []),
        )
        return stored

    def update_status(self, booking_id: int, is_agree: bool, information: str) -> Booking:
        """Set the approval flag and information text; returns the updated record."""
        try:
            with self.session_factory() as db:
                with db.begin():
                    row = db.execute(
                        get_query("UPDATE_BOOKING_STATUS"),
                        {"id": booking_id, "is_agree": is_agree, "information": information},
                    ).one_or_none()
                    if row is None:
                        raise BookingNotFound(booking_id)
                    booking = booking_from_row(row)
        except _FAILURES as e:
            raise StoreError(f"update booking {booking_id} failed: {e}", original=e) from e

        logger.info("booking %s status set to is_agree=%s", booking_id, is_agree)
        return booking

    def delete(self, booking_id: int) -> None:
        # a missing id is not an error; affected rows are not checked
        try:
            with self.session_factory() as db:
                with db.begin():
                    db.execute(get_query("DELETE_BOOKING"), {"id": booking_id})
        except SQLAlchemyError as e:
            raise StoreError(f"delete booking {booking_id} failed: {e}", original=e) from e
        logger.info("deleted booking %s", booking_id)

    def get_one_day(self, day: Union[date, str]) -> List[SheetData]:
        start, end = day_range(day)
        return self._sheet("GET_BOOKING_ONE_DAY", start, end)

    def get_one_month(self, month: Union[int, str], year: Union[int, str]) -> List[SheetData]:
        start, end = month_range(month, year)
        return self._sheet("GET_BOOKING_ONE_MONTH", start, end)

    def get_one_year(self, year: Union[int, str]) -> List[SheetData]:
        start, end = year_range(year)
        return self._sheet("GET_BOOKING_ONE_YEAR", start, end)

    def _sheet(self, query_name: str, start: datetime, end: datetime) -> List[SheetData]:
        logger.debug("%s between %s and %s", query_name, start, end)
        try:
            with self.session_factory() as db:
                rows = db.execute(get_query(query_name), {"period_start": start, "period_end": end})
                return [sheet_data_from_row(r) for r in rows]
        except _FAILURES as e:
            raise StoreError(f"{query_name} failed: {e}", original=e) from e
