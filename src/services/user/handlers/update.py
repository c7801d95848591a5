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
from services.user.applications.update_user import UpdateDetails, UpdateUserService
from services.user.domain.value_object import UserId
from services.user.handlers.request_models import UpdateDataRequest
from services.user.handlers.response_models import to_response
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)
from services.user.infrastructure.passlib_password_hasher import (
    PasslibPasswordHasher,
)

logger = Logger()

service = UpdateUserService(
    repository=DynamoDBUserRepository(), hasher=PasslibPasswordHasher()
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー情報更新 Lambda Handler

    PUT /users/{user_id}
    """
    path_params = event.path_parameters or {}
    user_id = path_params.get("user_id")

    if not user_id:
        return api_response(400, {"message": "user_id is required"})

    logger.info("Received update user request", extra={"user_id": user_id})

    try:
        request = parse_body(event, UpdateDataRequest)
        user = service.update(UserId(value=user_id), _to_update_details(request))
    except (DomainException, ValidationError) as e:
        logger.info("Update user rejected", extra={"reason": error_reason(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to update user")
        return error_response(e)

    return api_response(202, to_response(202, "User data updated", user))


def _to_update_details(request: UpdateDataRequest) -> UpdateDetails:
    """リクエストボディから UpdateDetails を構築する"""
    return {
        "first_name": request.first_name,
        "last_name": request.last_name,
        "email": request.email,
        "password": request.password,
        "picture_url": request.picture_url,
    }
