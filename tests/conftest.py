from datetime import datetime, timedelta

import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from booking_schemas import Booking, BookingDetail, BookingDetailService
from persistence.crud import BookingStore
from persistence.db import init_db, make_engine, make_session_factory


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", echo=False, poolclass=StaticPool)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def store(session_factory):
    return BookingStore(session_factory)


@pytest.fixture
def reject_broken(engine):
    """Make the database refuse any row whose room_id/service_id/user_id is 'broken'."""
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TRIGGER reject_broken_booking BEFORE INSERT ON bookings "
            "WHEN NEW.user_id = 'broken' BEGIN SELECT RAISE(ABORT, 'broken booking'); END"
        ))
        conn.execute(text(
            "CREATE TRIGGER reject_broken_detail BEFORE INSERT ON booking_details "
            "WHEN NEW.room_id = 'broken' BEGIN SELECT RAISE(ABORT, 'broken detail'); END"
        ))
        conn.execute(text(
            "CREATE TRIGGER reject_broken_service BEFORE INSERT ON booking_detail_services "
            "WHEN NEW.service_id = 'broken' BEGIN SELECT RAISE(ABORT, 'broken service'); END"
        ))


@pytest.fixture
def count_rows(session_factory):
    def _count(table):
        with session_factory() as db:
            return db.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()
    return _count


@pytest.fixture
def make_booking():
    """Build an unsaved booking with `details` rooms, each carrying `services` add-ons."""

    def _make(details=2, services=3, check_in=datetime(2024, 5, 1, 14, 0), user_id="user_1", customer_id="cust_1"):
        booking_details = []
        for d in range(details):
            booking_details.append(BookingDetail(
                room_id=f"room-{d + 1}",
                sub_total=100.0 * (d + 1),
                services=[
                    BookingDetailService(service_id=f"svc-{s + 1}", service_name=f"Service {s + 1}")
                    for s in range(services)
                ],
            ))
        return Booking(
            night=2,
            check_in=check_in,
            check_out=check_in + timedelta(days=2),
            user_id=user_id,
            customer_id=customer_id,
            total_price=sum(d.sub_total for d in booking_details),
            booking_details=booking_details,
        )

    return _make
