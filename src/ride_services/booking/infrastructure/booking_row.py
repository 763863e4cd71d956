import json
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.enum import BookingStatus, TaxiTier
from ride_services.booking.domain.value_object import Location
from ride_services.shared.domain.exception import MalformedRecordException
from ride_services.shared.utils import to_decimal


class LocationColumn(BaseModel):
    """pickup_location / drop_location 列（JSONB）"""

    lat: float
    lng: float
    address: str | None = None


class BookingRow(BaseModel):
    """bookings テーブルの 1 行

    created_at はサーバー側で採番される参照専用の列。
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    user_name: str
    user_phone: str
    pickup_location: LocationColumn
    drop_location: LocationColumn
    taxi_tier: str
    distance: Decimal
    fare: Decimal
    status: str
    taxi_id: str | None = None
    eta: int | None = None
    timestamp: int
    created_at: str | None = None

    @field_validator("pickup_location", "drop_location", mode="before")
    @classmethod
    def parse_json_column(cls, v):
        """Data API は JSON 列を文字列で返すことがある"""
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator("distance", "fare", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return to_decimal(v)


def _enum_value(value) -> str:
    return value.value if isinstance(value, Enum) else value


def _to_enum(enum_cls: type[Enum], value: str):
    """既知の値は Enum に、未知の値は文字列のまま返す"""
    try:
        return enum_cls(value)
    except ValueError:
        return value


def to_row(booking: Booking) -> BookingRow:
    """ドメインエンティティを行に変換する"""
    return BookingRow(
        id=booking.id,
        user_name=booking.user_name or "",
        user_phone=booking.user_phone or "",
        pickup_location=booking.start_location.to_dict(),
        drop_location=booking.end_location.to_dict(),
        taxi_tier=_enum_value(booking.tier),
        distance=booking.distance,
        fare=booking.fare,
        status=_enum_value(booking.status),
        taxi_id=booking.taxi_id,
        eta=booking.eta,
        timestamp=booking.timestamp,
    )


def from_row(row: BookingRow) -> Booking:
    """行をドメインエンティティに変換する"""
    return Booking(
        id=row.id,
        user_name=row.user_name,
        user_phone=row.user_phone,
        start_location=Location.from_dict(row.pickup_location.model_dump()),
        end_location=Location.from_dict(row.drop_location.model_dump()),
        tier=_to_enum(TaxiTier, row.taxi_tier),
        distance=row.distance,
        fare=row.fare,
        status=_to_enum(BookingStatus, row.status),
        taxi_id=row.taxi_id,
        eta=row.eta,
        timestamp=row.timestamp,
    )


def from_record(record: dict) -> Booking:
    """Data API のレコード（dict）を検証してドメインエンティティに変換する"""
    record_id = record.get("id") if isinstance(record, dict) else None
    try:
        return from_row(BookingRow.model_validate(record))
    except ValidationError as e:
        raise MalformedRecordException(
            f"Malformed booking row id={record_id!r}: "
            f"{e.error_count()} invalid field(s)"
        ) from e
    except ValueError as e:
        raise MalformedRecordException(
            f"Malformed booking row id={record_id!r}: {e}"
        ) from e
