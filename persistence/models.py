from sqlalchemy import Column, Integer, String, Float, Text, Boolean, DateTime, ForeignKey, func
from .db import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    name = Column(String(128), nullable=False)


class CustomerModel(Base):
    __tablename__ = "customers"

    id = Column(String, primary_key=True)
    name = Column(String(128), nullable=False)


class BookingModel(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    night = Column(Integer, nullable=False)
    check_in = Column(DateTime, nullable=False, index=True)
    check_out = Column(DateTime, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    customer_id = Column(String, index=True, nullable=False)
    is_agree = Column(Boolean, nullable=False, default=False, server_default="0")
    information = Column(Text, nullable=False, default="", server_default="")
    total_price = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False, server_default="0")


class BookingDetailModel(Base):
    __tablename__ = "booking_details"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id", ondelete="CASCADE"), index=True, nullable=False)
    room_id = Column(String, index=True, nullable=False)
    sub_total = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False, server_default="0")


class BookingDetailServiceModel(Base):
    __tablename__ = "booking_detail_services"

    id = Column(Integer, primary_key=True, index=True)
    booking_detail_id = Column(Integer, ForeignKey("booking_details.id", ondelete="CASCADE"), index=True, nullable=False)
    service_id = Column(String, index=True, nullable=False)
    service_name = Column(String(128), nullable=False)  # snapshot at booking time
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False, server_default="0")
