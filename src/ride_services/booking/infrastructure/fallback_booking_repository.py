from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.enum import BookingStatus
from ride_services.booking.domain.repository import (
    DEFAULT_RECENT_LIMIT,
    BookingRepository,
)
from ride_services.shared.domain import Result
from ride_services.shared.utils import get_logger

logger = get_logger("booking")


class FallbackBookingRepository(BookingRepository):
    """primary が失敗した場合に fallback（端末ローカル）へ切り替えるデコレータ

    primary の失敗理由は区別しない。重複 ID による失敗でも fallback に書き込む。
    """

    def __init__(
        self, primary: BookingRepository, fallback: BookingRepository
    ) -> None:
        self._primary = primary
        self._fallback = fallback

    def create(self, booking: Booking) -> Result[None]:
        result = self._primary.create(booking)
        if result.success:
            return result
        logger.warning(
            "Saving booking to fallback store",
            extra={
                "booking_id": getattr(booking, "id", None),
                "error": result.error,
            },
        )
        return self._fallback.create(booking)

    def list_by_user(self, user_phone: str) -> Result[list[Booking]]:
        result = self._primary.list_by_user(user_phone)
        if result.success:
            return result
        logger.warning(
            "Reading user bookings from fallback store", extra={"error": result.error}
        )
        return self._fallback.list_by_user(user_phone)

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> Result[list[Booking]]:
        result = self._primary.list_recent(limit)
        if result.success:
            return result
        logger.warning(
            "Reading recent bookings from fallback store",
            extra={"error": result.error},
        )
        return self._fallback.list_recent(limit)

    def update_status(
        self, booking_id: str, status: BookingStatus | str
    ) -> Result[None]:
        result = self._primary.update_status(booking_id, status)
        if result.success:
            return result
        logger.warning(
            "Updating booking status in fallback store",
            extra={"booking_id": booking_id, "error": result.error},
        )
        return self._fallback.update_status(booking_id, status)
