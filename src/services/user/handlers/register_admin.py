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
from services.user.applications.extract_caller import AuthContextExtractor
from services.user.applications.register_admin import RegisterAdminService
from services.user.domain.factory import UserFactory
from services.user.handlers.request_models import UserDataRequest, to_user_details
from services.user.handlers.response_models import to_response
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)
from services.user.infrastructure.jwt_token_service import JwtTokenService
from services.user.infrastructure.passlib_password_hasher import (
    PasslibPasswordHasher,
)

logger = Logger()

repository = DynamoDBUserRepository()
extractor = AuthContextExtractor(
    repository=repository, token_service=JwtTokenService.from_env()
)
factory = UserFactory(hasher=PasslibPasswordHasher())
service = RegisterAdminService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """管理者ユーザー登録 Lambda Handler

    POST /users/admin/register
    """
    logger.info("Received register admin request")

    try:
        caller = extractor.extract(header_value(event, "Authorization"))
        request = parse_body(event, UserDataRequest)
        user = service.register(caller, to_user_details(request))
    except (DomainException, ValidationError) as e:
        logger.info("Register admin rejected", extra={"reason": error_reason(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to register admin")
        return error_response(e)

    logger.info("Admin registered", extra={"user_id": str(user.id)})
    return api_response(
        200, to_response(200, "Successfully registered admin user account", user)
    )
