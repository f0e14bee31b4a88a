import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from txn_manager import TransactionWriter


def test_writer_threads_parent_ids_down(session_factory, make_booking):
    with session_factory() as db:
        with db.begin():
            stored = TransactionWriter(db).write(make_booking(details=2, services=2))

    assert all(d.booking_id == stored.id for d in stored.booking_details)
    assert all(s.booking_detail_id == d.id for d in stored.booking_details for s in d.services)


def test_writer_leaves_commit_to_the_caller(session_factory, make_booking, count_rows):
    with session_factory() as db:
        db.begin()
        TransactionWriter(db).write(make_booking(details=1, services=1))
        db.rollback()

    assert count_rows("bookings") == 0
    assert count_rows("booking_detail_services") == 0


def test_writer_keeps_partial_on_failure(session_factory, make_booking, reject_broken):
    booking = make_booking(details=2, services=1)
    booking.booking_details[1].room_id = "broken"

    with session_factory() as db:
        db.begin()
        writer = TransactionWriter(db)
        with pytest.raises(SQLAlchemyError):
            writer.write(booking)
        db.rollback()
        assert db.execute(text("SELECT COUNT(*) FROM booking_details")).scalar_one() == 0

    assert writer.partial.id is not None
    assert [d.room_id for d in writer.partial.booking_details] == ["room-1"]


def test_writer_with_empty_service_list(session_factory, make_booking):
    with session_factory() as db:
        with db.begin():
            stored = TransactionWriter(db).write(make_booking(details=1, services=0))

    assert stored.booking_details[0].services == []
