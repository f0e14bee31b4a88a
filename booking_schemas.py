from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class BookingDetailService(BaseModel):
    id: Optional[int] = None
    booking_detail_id: Optional[int] = None
    service_id: str
    service_name: str            # snapshot of the service name at booking time
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_deleted: bool = False


class BookingDetail(BaseModel):
    id: Optional[int] = None
    booking_id: Optional[int] = None
    room_id: str
    sub_total: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_deleted: bool = False
    services: Optional[List[BookingDetailService]] = None


class Booking(BaseModel):
    id: Optional[int] = None
    night: int                   # stay length in nights
    check_in: datetime
    check_out: datetime
    user_id: str                 # owning user
    customer_id: str
    is_agree: bool = False       # approval flag
    information: str = ""
    total_price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_deleted: bool = False
    booking_details: Optional[List[BookingDetail]] = None


class SheetData(BaseModel):
    """Flattened reporting row for the day/month/year sheets."""

    booking_id: int
    check_in: datetime
    check_out: datetime
    user_name: str
    customer_name: str
    is_agree: bool
    information: str
    total_price: float
