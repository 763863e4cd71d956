from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from ride_services.booking.handlers.request_models import UpdateBookingStatusRequest
from ride_services.booking.infrastructure.data_api_booking_repository import (
    DataApiBookingRepository,
)
from ride_services.shared.utils import api_response

logger = Logger()

repository = DataApiBookingRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約ステータス更新 Lambda Handler"""

    path_params = event.path_parameters or {}
    booking_id = path_params.get("booking_id")

    if not booking_id:
        return api_response(400, {"message": "booking_id is required"})

    try:
        request = UpdateBookingStatusRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return api_response(
            400, {"message": "Invalid request body", "errors": e.errors()}
        )

    logger.info(
        "Updating booking status",
        extra={"booking_id": booking_id, "status": request.status},
    )
    result = repository.update_status(booking_id, request.status)

    if not result.success:
        return api_response(502, {"message": result.error})

    return api_response(
        200,
        {
            "status": "success",
            "data": {"booking_id": booking_id, "status": request.status},
        },
    )
