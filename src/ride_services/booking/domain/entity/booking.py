from decimal import Decimal

from ride_services.booking.domain.enum import BookingStatus, TaxiTier
from ride_services.booking.domain.value_object import Location
from ride_services.shared.domain import Entity


class Booking(Entity[str]):
    """配車予約

    乗車地点から降車地点までの 1 件の配車依頼。
    timestamp は生成時刻（エポックミリ秒）で、以後変更しない。
    tier / status は永続化層に未知の値が入っている場合、文字列のまま保持する。
    """

    def __init__(
        self,
        id: str,
        user_name: str,
        user_phone: str,
        start_location: Location,
        end_location: Location,
        tier: TaxiTier | str,
        distance: Decimal,
        fare: Decimal,
        timestamp: int,
        status: BookingStatus | str = BookingStatus.PENDING,
        taxi_id: str | None = None,
        eta: int | None = None,
    ) -> None:
        super().__init__(id)
        self._user_name = user_name
        self._user_phone = user_phone
        self._start_location = start_location
        self._end_location = end_location
        self._tier = tier
        self._distance = distance
        self._fare = fare
        self._timestamp = timestamp
        self._status = status
        self._taxi_id = taxi_id
        self._eta = eta

    @property
    def user_name(self) -> str:
        return self._user_name

    @property
    def user_phone(self) -> str:
        return self._user_phone

    @property
    def start_location(self) -> Location:
        return self._start_location

    @property
    def end_location(self) -> Location:
        return self._end_location

    @property
    def tier(self) -> TaxiTier | str:
        return self._tier

    @property
    def distance(self) -> Decimal:
        return self._distance

    @property
    def fare(self) -> Decimal:
        return self._fare

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def status(self) -> BookingStatus | str:
        return self._status

    @property
    def taxi_id(self) -> str | None:
        return self._taxi_id

    @property
    def eta(self) -> int | None:
        return self._eta
