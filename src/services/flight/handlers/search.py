import os

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.flight.applications.find_flight import DEFAULT_CAPACITY, FindFlightService
from services.flight.handlers.request_models import FlightSearchRequest
from services.flight.handlers.response_models import to_response
from services.flight.infrastructure.open_sky_client import OpenSkyClient
from services.shared.domain import DomainException, UpstreamServiceException
from services.shared.utils import (
    api_response,
    error_reason,
    error_response,
    parse_body,
)

logger = Logger()

service = FindFlightService(
    provider=OpenSkyClient.from_env(),
    capacity=int(os.getenv("FLIGHT_DEFAULT_CAPACITY", str(DEFAULT_CAPACITY))),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト検索 Lambda Handler

    POST /flights/search
    """
    try:
        request = parse_body(event, FlightSearchRequest)
        logger.info(
            "Searching departures",
            extra={
                "airport": request.departure_airport,
                "begin": request.begin,
                "end": request.end,
            },
        )
        flights = service.find(
            {
                "departure_airport": request.departure_airport,
                "begin": request.begin,
                "end": request.end,
            }
        )
    except (DomainException, ValidationError) as e:
        logger.info("Flight search rejected", extra={"reason": error_reason(e)})
        return error_response(e)
    except UpstreamServiceException as e:
        logger.exception("Flight provider failed")
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to search flights")
        return error_response(e)

    logger.info("Departures found", extra={"count": len(flights)})
    return api_response(200, to_response(flights))
