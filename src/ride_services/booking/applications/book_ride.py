from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.factory import BookingFactory, RideDetails
from ride_services.booking.domain.repository import BookingRepository
from ride_services.shared.domain import Result


class BookRideService:
    """配車予約のユースケース"""

    def __init__(
        self, repository: BookingRepository, factory: BookingFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def book(self, ride_details: RideDetails) -> tuple[Booking, Result[None]]:
        """予約を生成して保存する

        保存に失敗しても生成済みの予約は返す（退避・再送は呼び出し側の判断）。
        """
        booking = self._factory.create(ride_details)
        result = self._repository.create(booking)
        return booking, result
