from decimal import Decimal

import pytest

from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.enum import BookingStatus, TaxiTier
from ride_services.booking.domain.value_object import Location


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "BK1",
        user_name: str = "Taro",
        user_phone: str = "555-0100",
        timestamp: int = 1_700_000_000_000,
        status: BookingStatus = BookingStatus.PENDING,
        tier: TaxiTier = TaxiTier.ECONOMY,
        distance: Decimal = Decimal("7.40"),
        fare: Decimal = Decimal("2450.00"),
        taxi_id: str | None = None,
        eta: int | None = None,
    ) -> Booking:
        return Booking(
            id=booking_id,
            user_name=user_name,
            user_phone=user_phone,
            start_location=Location(lat=35.681, lng=139.767),
            end_location=Location(lat=35.658, lng=139.701, address="Shibuya"),
            tier=tier,
            distance=distance,
            fare=fare,
            timestamp=timestamp,
            status=status,
            taxi_id=taxi_id,
            eta=eta,
        )

    return _factory


@pytest.fixture
def create_record():
    """Data API (formatRecordsAs=JSON) が返すレコードを生成する Factory fixture"""

    def _factory(
        booking_id: str = "BK1",
        user_phone: str = "555-0100",
        timestamp: int = 1_700_000_000_000,
        status: str = "assigned",
        **overrides,
    ) -> dict:
        record = {
            "id": booking_id,
            "user_name": "Taro",
            "user_phone": user_phone,
            "pickup_location": '{"lat": 35.681, "lng": 139.767}',
            "drop_location": '{"lat": 35.658, "lng": 139.701, "address": "Shibuya"}',
            "taxi_tier": "economy",
            "distance": "7.40",
            "fare": "2450.00",
            "status": status,
            "taxi_id": "TX-7",
            "eta": 4,
            "timestamp": timestamp,
            "created_at": "2023-11-14 22:13:20.000000",
        }
        record.update(overrides)
        return record

    return _factory
