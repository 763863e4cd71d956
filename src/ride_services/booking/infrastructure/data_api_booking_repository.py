import json
import os
import re

import boto3
from botocore.exceptions import ClientError

from ride_services.booking.domain.entity import Booking
from ride_services.booking.domain.enum import BookingStatus
from ride_services.booking.domain.repository import (
    DEFAULT_RECENT_LIMIT,
    BookingRepository,
)
from ride_services.booking.infrastructure.booking_row import (
    BookingRow,
    from_record,
    to_row,
)
from ride_services.booking.infrastructure.errors import (
    describe_error,
    is_duplicate_key_error,
)
from ride_services.shared.domain import DuplicateResourceException, Result
from ride_services.shared.utils import get_logger

logger = get_logger("booking")

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_COLUMNS = (
    "id, user_name, user_phone, pickup_location, drop_location, taxi_tier, "
    'distance, fare, status, taxi_id, eta, "timestamp"'
)


def _string_param(name: str, value: str | None, type_hint: str | None = None) -> dict:
    if value is None:
        return {"name": name, "value": {"isNull": True}}
    param: dict = {"name": name, "value": {"stringValue": value}}
    if type_hint:
        param["typeHint"] = type_hint
    return param


def _long_param(name: str, value: int | None) -> dict:
    if value is None:
        return {"name": name, "value": {"isNull": True}}
    return {"name": name, "value": {"longValue": int(value)}}


class DataApiBookingRepository(BookingRepository):
    """RDS Data API（Aurora PostgreSQL）を使用した BookingRepository の具象実装"""

    def __init__(
        self,
        resource_arn: str | None = None,
        secret_arn: str | None = None,
        database: str | None = None,
        table_name: str | None = None,
        client=None,
    ) -> None:
        self.resource_arn = resource_arn or os.getenv("DATA_API_RESOURCE_ARN")
        self.secret_arn = secret_arn or os.getenv("DATA_API_SECRET_ARN")
        self.database = database or os.getenv("DATA_API_DATABASE", "postgres")
        self.table_name = table_name or os.getenv("BOOKINGS_TABLE_NAME", "bookings")
        if not _IDENTIFIER.match(self.table_name):
            raise ValueError(f"Invalid table name: {self.table_name}")
        self.client = client or boto3.client(
            "rds-data", endpoint_url=os.getenv("DATA_API_ENDPOINT_URL") or None
        )

    def create(self, booking: Booking) -> Result[None]:
        """予約をDBに保存する"""
        try:
            self._insert(to_row(booking))
        except Exception as e:
            logger.exception(
                "Error saving booking",
                extra={"booking_id": getattr(booking, "id", None)},
            )
            return Result.fail(describe_error(e))
        return Result.ok()

    def list_by_user(self, user_phone: str) -> Result[list[Booking]]:
        """電話番号で予約を検索する（新しい順）"""
        sql = (
            f'SELECT {_COLUMNS}, created_at FROM "{self.table_name}" '
            'WHERE user_phone = :user_phone ORDER BY "timestamp" DESC'
        )
        try:
            bookings = self._select(sql, [_string_param("user_phone", user_phone)])
        except Exception as e:
            logger.exception("Error fetching user bookings")
            return Result.fail(describe_error(e), data=[])
        return Result.ok(bookings)

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> Result[list[Booking]]:
        """直近の予約を取得する

        limit はそのまま DB に渡す（0 以下の扱いは DB に従う）。
        """
        sql = (
            f'SELECT {_COLUMNS}, created_at FROM "{self.table_name}" '
            'ORDER BY "timestamp" DESC LIMIT :limit'
        )
        try:
            bookings = self._select(sql, [_long_param("limit", limit)])
        except Exception as e:
            logger.exception("Error fetching recent bookings", extra={"limit": limit})
            return Result.fail(describe_error(e), data=[])
        return Result.ok(bookings)

    def update_status(
        self, booking_id: str, status: BookingStatus | str
    ) -> Result[None]:
        """予約のステータスを更新する

        ステータス値は検証しない。対象行が無くても成功として扱う。
        """
        value = status.value if isinstance(status, BookingStatus) else status
        sql = f'UPDATE "{self.table_name}" SET status = :status WHERE id = :id'
        try:
            response = self._execute(
                sql,
                [_string_param("status", value), _string_param("id", booking_id)],
            )
        except Exception as e:
            logger.exception("Error updating booking", extra={"booking_id": booking_id})
            return Result.fail(describe_error(e))

        if response.get("numberOfRecordsUpdated", 0) == 0:
            logger.warning(
                "No booking matched status update",
                extra={"booking_id": booking_id, "status": value},
            )
        return Result.ok()

    def _insert(self, row: BookingRow) -> None:
        sql = (
            f'INSERT INTO "{self.table_name}" ({_COLUMNS}) VALUES '
            "(:id, :user_name, :user_phone, :pickup_location, :drop_location, "
            ":taxi_tier, :distance, :fare, :status, :taxi_id, :eta, :timestamp)"
        )
        try:
            self._execute(sql, self._to_parameters(row))
        except ClientError as e:
            if is_duplicate_key_error(e):
                raise DuplicateResourceException(
                    f"Booking already exists: {row.id}"
                ) from e
            raise

    def _select(self, sql: str, parameters: list[dict]) -> list[Booking]:
        response = self._execute(sql, parameters, formatRecordsAs="JSON")
        records = json.loads(response.get("formattedRecords") or "[]")
        return [from_record(record) for record in records]

    def _execute(self, sql: str, parameters: list[dict], **kwargs) -> dict:
        return self.client.execute_statement(
            resourceArn=self.resource_arn,
            secretArn=self.secret_arn,
            database=self.database,
            sql=sql,
            parameters=parameters,
            **kwargs,
        )

    def _to_parameters(self, row: BookingRow) -> list[dict]:
        """行を Data API の名前付きパラメータに変換する（未設定値は明示的な NULL）"""
        return [
            _string_param("id", row.id),
            _string_param("user_name", row.user_name),
            _string_param("user_phone", row.user_phone),
            _string_param(
                "pickup_location",
                row.pickup_location.model_dump_json(exclude_none=True),
                "JSON",
            ),
            _string_param(
                "drop_location",
                row.drop_location.model_dump_json(exclude_none=True),
                "JSON",
            ),
            _string_param("taxi_tier", row.taxi_tier),
            _string_param("distance", str(row.distance), "DECIMAL"),
            _string_param("fare", str(row.fare), "DECIMAL"),
            _string_param("status", row.status),
            _string_param("taxi_id", row.taxi_id),
            _long_param("eta", row.eta),
            _long_param("timestamp", row.timestamp),
        ]
