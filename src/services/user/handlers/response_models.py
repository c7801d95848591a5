from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from services.user.domain.entity import User

_CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserData(BaseModel):
    """公開用ユーザーデータ（パスワードハッシュは含めない）"""

    model_config = _CAMEL_CASE

    id: str
    first_name: str
    last_name: str
    email: str
    picture_url: str | None
    is_admin: bool


class UserResponse(BaseModel):
    """ユーザー操作のレスポンスモデル"""

    model_config = _CAMEL_CASE

    status_code: int
    message: str
    user: UserData


class AuthorizationResponse(BaseModel):
    """ログインのレスポンスモデル"""

    model_config = _CAMEL_CASE

    status_code: int
    message: str
    token: str


def to_user_data(user: User) -> UserData:
    """User エンティティを公開用データに変換する"""
    return UserData(
        id=str(user.id),
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        picture_url=user.picture_url,
        is_admin=user.is_admin,
    )


def to_response(status_code: int, message: str, user: User) -> dict:
    """User エンティティをレスポンス辞書に変換する"""
    return UserResponse(
        status_code=status_code,
        message=message,
        user=to_user_data(user),
    ).model_dump(by_alias=True)
