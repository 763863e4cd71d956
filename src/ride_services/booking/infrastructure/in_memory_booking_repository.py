from datetime import datetime, timezone

from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.enum import BookingStatus
from ride_services.booking.domain.repository import (
    DEFAULT_RECENT_LIMIT,
    BookingRepository,
)
from ride_services.booking.infrastructure.booking_row import (
    BookingRow,
    from_row,
    to_row,
)
from ride_services.booking.infrastructure.errors import describe_error
from ride_services.shared.domain import DuplicateResourceException, Result
from ride_services.shared.utils import get_logger

logger = get_logger("booking")


class InMemoryBookingRepository(BookingRepository):
    """プロセス内メモリに行を保持する BookingRepository 実装

    端末ローカルの退避先、およびテスト用の代替ストアとして使う。
    """

    def __init__(self) -> None:
        self._rows: dict[str, BookingRow] = {}

    def create(self, booking: Booking) -> Result[None]:
        try:
            row = to_row(booking)
            if row.id in self._rows:
                raise DuplicateResourceException(f"Booking already exists: {row.id}")
        except Exception as e:
            logger.warning("Error saving booking locally", extra={"error": str(e)})
            return Result.fail(describe_error(e))

        created_at = datetime.now(timezone.utc).isoformat()
        self._rows[row.id] = row.model_copy(update={"created_at": created_at})
        return Result.ok()

    def list_by_user(self, user_phone: str) -> Result[list[Booking]]:
        return self._list(
            [row for row in self._rows.values() if row.user_phone == user_phone]
        )

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> Result[list[Booking]]:
        """0 以下の limit は空リスト"""
        try:
            count = max(int(limit), 0)
        except (TypeError, ValueError) as e:
            return Result.fail(describe_error(e), data=[])
        return self._list(list(self._rows.values()), count)

    def update_status(
        self, booking_id: str, status: BookingStatus | str
    ) -> Result[None]:
        value = status.value if isinstance(status, BookingStatus) else status
        row = self._rows.get(booking_id)
        if row is None:
            logger.warning(
                "No local booking matched status update",
                extra={"booking_id": booking_id},
            )
            return Result.ok()
        self._rows[booking_id] = row.model_copy(update={"status": value})
        return Result.ok()

    def _list(
        self, rows: list[BookingRow], limit: int | None = None
    ) -> Result[list[Booking]]:
        ordered = sorted(rows, key=lambda row: row.timestamp, reverse=True)
        if limit is not None:
            ordered = ordered[:limit]
        try:
            bookings = [from_row(row) for row in ordered]
        except Exception as e:
            logger.warning("Error reading local bookings", extra={"error": str(e)})
            return Result.fail(describe_error(e), data=[])
        return Result.ok(bookings)
