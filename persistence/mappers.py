from booking_schemas import Booking, BookingDetail, BookingDetailService, SheetData


def booking_from_row(row) -> Booking:
    return Booking(
        id=row.id,
        night=row.night,
        check_in=row.check_in,
        check_out=row.check_out,
        user_id=row.user_id,
        customer_id=row.customer_id,
        is_agree=bool(row.is_agree),
        information=row.information or "",
        total_price=row.total_price,
        created_at=row.created_at,
        updated_at=row.updated_at,
        is_deleted=bool(row.is_deleted),
    )


def booking_detail_from_row(row) -> BookingDetail:
    return BookingDetail(
        id=row.id,
        booking_id=row.booking_id,
        room_id=row.room_id,
        sub_total=row.sub_total,
        created_at=row.created_at,
        updated_at=row.updated_at,
        is_deleted=bool(row.is_deleted),
    )


def booking_detail_service_from_row(row) -> BookingDetailService:
    return BookingDetailService(
        id=row.id,
        booking_detail_id=row.booking_detail_id,
        service_id=row.service_id,
        service_name=row.service_name,
        created_at=row.created_at,
        updated_at=row.updated_at,
        is_deleted=bool(row.is_deleted),
    )


def sheet_data_from_row(row) -> SheetData:
    return SheetData(
        booking_id=row.booking_id,
        check_in=row.check_in,
        check_out=row.check_out,
        user_name=str(row.user_name),
        customer_name=str(row.customer_name),
        is_agree=bool(row.is_agree),
        information=row.information or "",
        total_price=row.total_price,
    )
