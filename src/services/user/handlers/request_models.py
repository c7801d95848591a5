from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.user.domain.factory import UserDetails

_CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserDataRequest(BaseModel):
    """ユーザー登録リクエストスキーマ（一般・管理者共通）"""

    model_config = _CAMEL_CASE

    first_name: str = Field(..., description="名", examples=["Alice"])
    last_name: str = Field(..., description="姓", examples=["Smith"])
    email: str = Field(
        ..., min_length=1, description="メールアドレス", examples=["alice@x.io"]
    )
    password: str = Field(..., min_length=1, description="パスワード")
    picture_url: str | None = Field(default=None, description="プロフィール画像URL")


class LoginRequest(BaseModel):
    """ログインリクエストスキーマ"""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UpdateDataRequest(BaseModel):
    """ユーザー更新リクエストスキーマ（全項目任意）"""

    model_config = _CAMEL_CASE

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    picture_url: str | None = None


def to_user_details(request: UserDataRequest) -> UserDetails:
    """リクエストボディから UserDetails を構築する"""
    return {
        "first_name": request.first_name,
        "last_name": request.last_name,
        "email": request.email,
        "password": request.password,
        "picture_url": request.picture_url,
    }
