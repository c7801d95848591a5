from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.reservation.applications.cancel_flight import CancelFlightService
from services.reservation.domain.value_object import ReservationId
from services.reservation.handlers.request_models import CancelRequest
from services.reservation.handlers.response_models import ReservationResponse
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    error_reason,
    error_response,
    header_value,
    parse_body,
)
from services.user.applications.extract_caller import AuthContextExtractor
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)
from services.user.infrastructure.jwt_token_service import JwtTokenService

logger = Logger()

extractor = AuthContextExtractor(
    repository=DynamoDBUserRepository(), token_service=JwtTokenService.from_env()
)
service = CancelFlightService(repository=DynamoDBReservationRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト予約キャンセル Lambda Handler

    POST /reservations/cancel
    """
    logger.info("Received cancel flight request")

    try:
        caller = extractor.extract(header_value(event, "Authorization"))
        request = parse_body(event, CancelRequest)
        reservation = service.cancel(
            caller, ReservationId(value=request.reservation_id)
        )
    except (DomainException, ValidationError) as e:
        logger.info("Cancel flight rejected", extra={"reason": error_reason(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to cancel flight")
        return error_response(e)

    logger.info("Flight canceled", extra={"reservation_id": str(reservation.id)})
    return api_response(
        200, ReservationResponse(message="Successfully canceled flight").model_dump()
    )
