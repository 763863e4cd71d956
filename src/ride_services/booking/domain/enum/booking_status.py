from enum import Enum


class BookingStatus(str, Enum):
    """配車予約ステータス

    pending → assigned → in-progress → completed、
    終端以外の状態からは cancelled へ遷移する（遷移の強制は呼び出し側の責務）。
    """

    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
