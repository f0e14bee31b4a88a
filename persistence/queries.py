"""
Named SQL statements used by the booking store.

Every statement is a parameterized `text()` clause with typed bind parameters
and typed result columns, so the same SQL runs on SQLite (3.35+ for RETURNING)
and PostgreSQL and rows come back as Python values on both.
"""

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text, bindparam, text

_BOOKING_COLUMNS = dict(
    id=Integer,
    night=Integer,
    check_in=DateTime,
    check_out=DateTime,
    user_id=String,
    customer_id=String,
    is_agree=Boolean,
    information=Text,
    total_price=Float,
    created_at=DateTime,
    updated_at=DateTime,
    is_deleted=Boolean,
)

_DETAIL_COLUMNS = dict(
    id=Integer,
    booking_id=Integer,
    room_id=String,
    sub_total=Float,
    created_at=DateTime,
    updated_at=DateTime,
    is_deleted=Boolean,
)

_SERVICE_COLUMNS = dict(
    id=Integer,
    booking_detail_id=Integer,
    service_id=String,
    service_name=String,
    created_at=DateTime,
    updated_at=DateTime,
    is_deleted=Boolean,
)

_SHEET_COLUMNS = dict(
    booking_id=Integer,
    check_in=DateTime,
    check_out=DateTime,
    user_name=String,
    customer_name=String,
    is_agree=Boolean,
    information=Text,
    total_price=Float,
)

_BOOKING_SELECT = (
    "b.id, b.night, b.check_in, b.check_out, b.user_id, b.customer_id, b.is_agree, "
    "b.information, b.total_price, b.created_at, b.updated_at, b.is_deleted"
)

_BOOKING_RETURNING = (
    "id, night, check_in, check_out, user_id, customer_id, is_agree, "
    "information, total_price, created_at, updated_at, is_deleted"
)

_DETAIL_RETURNING = "id, booking_id, room_id, sub_total, created_at, updated_at, is_deleted"

_SERVICE_RETURNING = "id, booking_detail_id, service_id, service_name, created_at, updated_at, is_deleted"

# user/customer names fall back to the raw id when no lookup row exists
_SHEET_SELECT = """
    SELECT b.id AS booking_id, b.check_in, b.check_out,
           COALESCE(u.name, b.user_id) AS user_name,
           COALESCE(c.name, b.customer_id) AS customer_name,
           b.is_agree, b.information, b.total_price
    FROM bookings b
    LEFT JOIN users u ON u.id = b.user_id
    LEFT JOIN customers c ON c.id = b.customer_id
    WHERE b.is_deleted = false
      AND b.check_in >= :period_start AND b.check_in < :period_end
    ORDER BY b.check_in, b.id
"""


def _period_query():
    return (
        text(_SHEET_SELECT)
        .bindparams(bindparam("period_start", type_=DateTime), bindparam("period_end", type_=DateTime))
        .columns(**_SHEET_COLUMNS)
    )


GET_BOOKING = text(
    f"SELECT {_BOOKING_SELECT} FROM bookings b WHERE b.id = :id AND b.is_deleted = false"
).columns(**_BOOKING_COLUMNS)

GET_ALL_BOOKINGS = text(
    f"SELECT {_BOOKING_SELECT} FROM bookings b WHERE b.is_deleted = false "
    "ORDER BY b.id LIMIT :limit OFFSET :offset"
).columns(**_BOOKING_COLUMNS)

GET_ALL_BOOKING_DETAILS = text(
    f"SELECT {_DETAIL_RETURNING} FROM booking_details "
    "WHERE booking_id = :booking_id AND is_deleted = false ORDER BY id"
).columns(**_DETAIL_COLUMNS)

GET_ALL_BOOKING_DETAIL_SERVICES = text(
    f"SELECT {_SERVICE_RETURNING} FROM booking_detail_services "
    "WHERE booking_detail_id = :booking_detail_id AND is_deleted = false ORDER BY id"
).columns(**_SERVICE_COLUMNS)

CREATE_BOOKING = (
    text(
        "INSERT INTO bookings (night, check_in, check_out, user_id, customer_id, total_price, "
        "is_agree, information, is_deleted, created_at) "
        "VALUES (:night, :check_in, :check_out, :user_id, :customer_id, :total_price, "
        "false, '', false, CURRENT_TIMESTAMP) "
        f"RETURNING {_BOOKING_RETURNING}"
    )
    .bindparams(bindparam("check_in", type_=DateTime), bindparam("check_out", type_=DateTime))
    .columns(**_BOOKING_COLUMNS)
)

CREATE_BOOKING_DETAIL = text(
    "INSERT INTO booking_details (booking_id, room_id, sub_total, is_deleted, created_at) "
    "VALUES (:booking_id, :room_id, :sub_total, false, CURRENT_TIMESTAMP) "
    f"RETURNING {_DETAIL_RETURNING}"
).columns(**_DETAIL_COLUMNS)

CREATE_BOOKING_DETAIL_SERVICE = text(
    "INSERT INTO booking_detail_services (booking_detail_id, service_id, service_name, is_deleted, created_at) "
    "VALUES (:booking_detail_id, :service_id, :service_name, false, CURRENT_TIMESTAMP) "
    f"RETURNING {_SERVICE_RETURNING}"
).columns(**_SERVICE_COLUMNS)

UPDATE_BOOKING_STATUS = (
    text(
        "UPDATE bookings SET is_agree = :is_agree, information = :information, "
        "updated_at = CURRENT_TIMESTAMP "
        f"WHERE id = :id AND is_deleted = false RETURNING {_BOOKING_RETURNING}"
    )
    .bindparams(bindparam("is_agree", type_=Boolean))
    .columns(**_BOOKING_COLUMNS)
)

DELETE_BOOKING = text("DELETE FROM bookings WHERE id = :id")

GET_BOOKING_ONE_DAY = _period_query()
GET_BOOKING_ONE_MONTH = _period_query()
GET_BOOKING_ONE_YEAR = _period_query()

QUERIES = {
    "GET_BOOKING": GET_BOOKING,
    "GET_ALL_BOOKINGS": GET_ALL_BOOKINGS,
    "GET_ALL_BOOKING_DETAILS": GET_ALL_BOOKING_DETAILS,
    "GET_ALL_BOOKING_DETAIL_SERVICES": GET_ALL_BOOKING_DETAIL_SERVICES,
    "CREATE_BOOKING": CREATE_BOOKING,
    "CREATE_BOOKING_DETAIL": CREATE_BOOKING_DETAIL,
    "CREATE_BOOKING_DETAIL_SERVICE": CREATE_BOOKING_DETAIL_SERVICE,
    "UPDATE_BOOKING_STATUS": UPDATE_BOOKING_STATUS,
    "DELETE_BOOKING": DELETE_BOOKING,
    "GET_BOOKING_ONE_DAY": GET_BOOKING_ONE_DAY,
    "GET_BOOKING_ONE_MONTH": GET_BOOKING_ONE_MONTH,
    "GET_BOOKING_ONE_YEAR": GET_BOOKING_ONE_YEAR,
}


def get_query(name: str):
    """Return the statement registered under `name` (KeyError if unknown)."""
    try:
        return QUERIES[name]
    except KeyError:
        raise KeyError(f"unknown query: {name}") from None
