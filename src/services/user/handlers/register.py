from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    error_reason,
    error_response,
    parse_body,
)
from services.user.applications.register_user import RegisterUserService
from services.user.domain.factory import UserFactory
from services.user.handlers.request_models import UserDataRequest, to_user_details
from services.user.handlers.response_models import to_response
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)
from services.user.infrastructure.passlib_password_hasher import (
    PasslibPasswordHasher,
)

logger = Logger()

repository = DynamoDBUserRepository()
factory = UserFactory(hasher=PasslibPasswordHasher())
service = RegisterUserService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー登録 Lambda Handler

    POST /users/register
    """
    logger.info("Received register user request")

    try:
        request = parse_body(event, UserDataRequest)
        user = service.register(to_user_details(request))
    except (DomainException, ValidationError) as e:
        logger.info("Register user rejected", extra={"reason": error_reason(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to register user")
        return error_response(e)

    logger.info("User registered", extra={"user_id": str(user.id)})
    return api_response(
        200, to_response(200, "Successfully registered user account", user)
    )
