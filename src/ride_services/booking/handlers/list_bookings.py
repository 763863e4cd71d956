from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from ride_services.booking.domain.repository import DEFAULT_RECENT_LIMIT
from ride_services.booking.handlers.response_models import to_list_response
from ride_services.booking.infrastructure.data_api_booking_repository import (
    DataApiBookingRepository,
)
from ride_services.shared.utils import api_response

logger = Logger()

repository = DataApiBookingRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler

    user_phone 指定時はその利用者の予約、無指定時は直近 limit 件を返す。
    """
    params = event.query_string_parameters or {}
    user_phone = params.get("user_phone")

    if user_phone:
        logger.info("Listing user bookings")
        result = repository.list_by_user(user_phone)
    else:
        try:
            limit = int(params.get("limit", DEFAULT_RECENT_LIMIT))
        except ValueError:
            return api_response(400, {"message": "limit must be an integer"})
        logger.info("Listing recent bookings", extra={"limit": limit})
        result = repository.list_recent(limit)

    if not result.success:
        return api_response(502, {"message": result.error, "bookings": [], "count": 0})

    return api_response(200, to_list_response(result.data or []))
