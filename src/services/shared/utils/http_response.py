import json

from pydantic import ValidationError

from services.shared.domain.exception import (
    AuthException,
    DuplicatedDataException,
    DuplicateResourceException,
    EntityNotFoundException,
    ForbiddenException,
    InvalidBusinessArgumentException,
    InvalidDataException,
    UpstreamServiceException,
)

# 具象クラスを先に判定する（InvalidTokenException 等は AuthException に含まれる）
_STATUS_BY_EXCEPTION: list[tuple[type[Exception], int]] = [
    (ForbiddenException, 403),
    (AuthException, 401),
    (InvalidBusinessArgumentException, 400),
    (InvalidDataException, 400),
    (ValidationError, 400),
    (DuplicatedDataException, 409),
    (DuplicateResourceException, 409),
    (EntityNotFoundException, 404),
    (UpstreamServiceException, 502),
]


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def status_code_for(error: Exception) -> int:
    """例外の種類から HTTP ステータスコードを決定する"""
    for exception_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(error, exception_type):
            return status_code
    return 500


def error_response(error: Exception) -> dict:
    """例外をエラーレスポンスに変換する

    メッセージは呼び出し側が判定に利用するため、そのまま返す。
    """
    status_code = status_code_for(error)
    if status_code == 500:
        return api_response(500, {"message": "Internal server error"})
    if isinstance(error, ValidationError):
        return api_response(
            400,
            {
                "message": "Invalid request body",
                "errors": error.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            },
        )
    return api_response(status_code, {"message": str(error)})


def error_reason(error: Exception) -> str | list:
    """ログ出力用にエラー内容を要約する

    ValidationError は入力値（パスワード等）を含むため、項目の位置と種別のみ返す。
    """
    if isinstance(error, ValidationError):
        return [
            {"loc": list(detail["loc"]), "type": detail["type"]}
            for detail in error.errors(include_url=False, include_input=False)
        ]
    return str(error)
