from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from ride_services.booking.applications.book_ride import BookRideService
from ride_services.booking.domain.factory import BookingFactory, RideDetails
from ride_services.booking.domain.value_object import Location
from ride_services.booking.handlers.request_models import CreateBookingRequest
from ride_services.booking.handlers.response_models import to_response
from ride_services.booking.infrastructure.data_api_booking_repository import (
    DataApiBookingRepository,
)
from ride_services.shared.utils import api_response

logger = Logger()

repository = DataApiBookingRepository()
factory = BookingFactory()
service = BookRideService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """配車予約登録 Lambda Handler"""
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        logger.info("Invalid create booking request", extra={"errors": e.error_count()})
        return api_response(
            400, {"message": "Invalid request body", "errors": e.errors()}
        )

    ride_details: RideDetails = {
        "user_name": request.user_name,
        "user_phone": request.user_phone,
        "start_location": Location(**request.start_location.model_dump()),
        "end_location": Location(**request.end_location.model_dump()),
        "tier": request.tier.value,
        "distance": request.distance,
        "fare": request.fare,
    }
    booking, result = service.book(ride_details)

    if not result.success:
        return api_response(502, {"message": result.error, "booking_id": booking.id})

    return api_response(201, to_response(booking))
