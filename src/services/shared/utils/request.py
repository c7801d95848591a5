import json
from typing import TypeVar

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import BaseModel

from services.shared.domain.exception import InvalidDataException

M = TypeVar("M", bound=BaseModel)


def header_value(event: APIGatewayProxyEvent, name: str) -> str | None:
    """ヘッダーを大文字小文字を区別せずに取得する"""
    headers = event.raw_event.get("headers") or {}
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value
    return None


def parse_body(event: APIGatewayProxyEvent, model: type[M]) -> M:
    """リクエストボディを JSON として読み込み、モデルで検証する"""
    try:
        payload = json.loads(event.decoded_body or "{}")
    except json.JSONDecodeError as e:
        raise InvalidDataException("Request body must be valid JSON") from e
    return model.model_validate(payload)
