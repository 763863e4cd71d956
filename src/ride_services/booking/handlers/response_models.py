from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from ride_services.booking.domain.entity import Booking


class LocationData(BaseModel):
    lat: float
    lng: float
    address: str | None = None


class BookingData(BaseModel):
    """配車予約データのレスポンスモデル"""

    booking_id: str
    user_name: str
    user_phone: str
    start_location: LocationData
    end_location: LocationData
    tier: str
    distance: str
    fare: str
    status: str
    taxi_id: str | None = None
    eta: int | None = None
    timestamp: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class BookingListResponse(BaseModel):
    """予約一覧レスポンスモデル"""

    bookings: list[BookingData]
    count: int


def _value(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=booking.id,
        user_name=booking.user_name,
        user_phone=booking.user_phone,
        start_location=LocationData(**booking.start_location.to_dict()),
        end_location=LocationData(**booking.end_location.to_dict()),
        tier=_value(booking.tier),
        distance=str(booking.distance),
        fare=str(booking.fare),
        status=_value(booking.status),
        taxi_id=booking.taxi_id,
        eta=booking.eta,
        timestamp=booking.timestamp,
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_booking_data(booking)).model_dump()


def to_list_response(bookings: list[Booking]) -> dict:
    """Booking の一覧をレスポンス辞書に変換する"""
    return BookingListResponse(
        bookings=[to_booking_data(booking) for booking in bookings],
        count=len(bookings),
    ).model_dump()
