import time
import uuid
from decimal import Decimal
from typing import Callable, TypedDict

from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.enum import BookingStatus, TaxiTier
from ride_services.booking.domain.value_object import Location


class RideDetails(TypedDict):
    """配車依頼の入力データ構造"""

    user_name: str
    user_phone: str
    start_location: Location
    end_location: Location
    tier: str
    distance: Decimal
    fare: Decimal


def _now_millis() -> int:
    return int(time.time() * 1000)


class BookingFactory:
    """配車予約エンティティのファクトリ

    - 予約 ID と生成時刻の採番
    - プリミティブ型から Enum への変換
    - 初期状態の設定
    """

    def __init__(self, clock: Callable[[], int] = _now_millis) -> None:
        self._clock = clock

    def create(self, ride_details: RideDetails) -> Booking:
        """新規予約エンティティを生成する

        Args:
            ride_details: 配車依頼の内容

        Returns:
            Booking: 生成された予約エンティティ（pending 状態）
        """
        return Booking(
            id=self.next_id(),
            user_name=ride_details["user_name"],
            user_phone=ride_details["user_phone"],
            start_location=ride_details["start_location"],
            end_location=ride_details["end_location"],
            tier=TaxiTier(ride_details["tier"]),
            distance=ride_details["distance"],
            fare=ride_details["fare"],
            timestamp=self._clock(),
            status=BookingStatus.PENDING,
        )

    @staticmethod
    def next_id() -> str:
        return f"BK{uuid.uuid4().hex[:12].upper()}"
