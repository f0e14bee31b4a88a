"""
Run this script to see the booking store end to end against a local SQLite file:
 - create a booking with two rooms and a few services (one transaction)
 - read it back with details and services
 - approve it
 - print the monthly sheet
 - delete it
"""

import logging
from datetime import datetime

from booking_schemas import Booking, BookingDetail, BookingDetailService
from persistence.crud import BookingStore
from persistence.db import SessionLocal, init_db


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    init_db()
    store = BookingStore(SessionLocal)

    room1 = BookingDetail(
        room_id="room-101",
        sub_total=300.0,
        services=[
            BookingDetailService(service_id="svc-breakfast", service_name="Breakfast"),
            BookingDetailService(service_id="svc-laundry", service_name="Laundry"),
        ],
    )

    room2 = BookingDetail(
        room_id="room-102",
        sub_total=240.0,
        services=[BookingDetailService(service_id="svc-breakfast", service_name="Breakfast")],
    )

    booking = Booking(
        night=3,
        check_in=datetime(2024, 5, 1, 14, 0),
        check_out=datetime(2024, 5, 4, 12, 0),
        user_id="user_123",
        customer_id="cust_456",
        total_price=room1.sub_total + room2.sub_total,
        booking_details=[room1, room2],
    )

    print("=== Create ===")
    created = store.create(booking)
    print(f"Booking {created.id} created at {created.created_at}")
    for d in created.booking_details:
        print(f"- detail {d.id}: room={d.room_id}, sub_total={d.sub_total}, services={[s.service_name for s in d.services]}")

    print("\n=== Read ===")
    fetched = store.get(created.id)
    print(f"Booking {fetched.id}: {fetched.night} nights, user={fetched.user_id}, total={fetched.total_price}")
    for d in fetched.booking_details:
        print(f"- detail {d.id}: room={d.room_id}, services={[s.service_name for s in d.services]}")

    print("\n=== Approve ===")
    approved = store.update_status(created.id, True, "Paid at front desk")
    print(f"is_agree={approved.is_agree}, information={approved.information!r}")

    print("\n=== May 2024 sheet ===")
    for row in store.get_one_month(5, 2024):
        print(f"- #{row.booking_id} {row.check_in:%Y-%m-%d} -> {row.check_out:%Y-%m-%d} "
              f"user={row.user_name} customer={row.customer_name} total={row.total_price}")

    store.delete(created.id)
    print(f"\nBooking {created.id} deleted")


if __name__ == "__main__":
    main()
