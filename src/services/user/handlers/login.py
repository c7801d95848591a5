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
    header_value,
    parse_body,
)
from services.user.applications.login_user import LoginService
from services.user.handlers.request_models import LoginRequest
from services.user.handlers.response_models import AuthorizationResponse
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)
from services.user.infrastructure.jwt_token_service import JwtTokenService
from services.user.infrastructure.passlib_password_hasher import (
    PasslibPasswordHasher,
)

logger = Logger()

service = LoginService(
    repository=DynamoDBUserRepository(),
    hasher=PasslibPasswordHasher(),
    token_service=JwtTokenService.from_env(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ログイン Lambda Handler

    POST /users/login
    """
    logger.info("Received login request")

    try:
        request = parse_body(event, LoginRequest)
        token = service.login(
            {"email": request.email, "password": request.password},
            header_value(event, "Authorization"),
        )
    except (DomainException, ValidationError) as e:
        logger.info("Login rejected", extra={"reason": error_reason(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to log in")
        return error_response(e)

    return api_response(
        200,
        AuthorizationResponse(
            status_code=200, message="Successfully logged in", token=token
        ).model_dump(by_alias=True),
    )
