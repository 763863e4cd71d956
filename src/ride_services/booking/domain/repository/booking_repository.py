from abc import ABC, abstractmethod

from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.enum import BookingStatus
from ride_services.shared.domain import Result

DEFAULT_RECENT_LIMIT = 50


class BookingRepository(ABC):
    """配車予約レポジトリのインターフェース

    - 各操作は 1 回の永続化呼び出しで完結する
    - 失敗は例外ではなく Result として返す
    """

    @abstractmethod
    def create(self, booking: Booking) -> Result[None]:
        """予約を 1 件登録する（同一 ID の再登録は失敗）"""
        raise NotImplementedError

    @abstractmethod
    def list_by_user(self, user_phone: str) -> Result[list[Booking]]:
        """電話番号に一致する予約を新しい順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> Result[list[Booking]]:
        """全予約から新しい順に最大 limit 件を取得する"""
        raise NotImplementedError

    @abstractmethod
    def update_status(
        self, booking_id: str, status: BookingStatus | str
    ) -> Result[None]:
        """予約のステータスのみを更新する"""
        raise NotImplementedError
