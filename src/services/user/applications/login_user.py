from typing import TypedDict

from services.shared.domain.exception import (
    AuthException,
    BadCredentialsException,
    EntityNotFoundException,
)
from services.user.domain.repository import UserRepository
from services.user.domain.service import PasswordHasher, TokenService


class LoginCredentials(TypedDict):
    """ログインの入力データ構造"""

    email: str
    password: str


class LoginService:
    """ログインサービス

    認証に成功した場合のみトークンを発行する。
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._repository = repository
        self._hasher = hasher
        self._token_service = token_service

    def login(self, credentials: LoginCredentials, authorization: str | None) -> str:
        """ログインしてトークンを返す

        Args:
            credentials: メールアドレスとパスワード
            authorization: リクエストの Authorization ヘッダー（存在すればログイン済み）

        Returns:
            str: 発行したトークン
        """
        user = self._repository.find_by_email(credentials["email"])
        if user is None:
            raise EntityNotFoundException("User with given data does not exist")
        if authorization is not None:
            raise AuthException("You cannot log in while you are logged in")
        if not self._hasher.verify(credentials["password"], str(user.password_hash)):
            raise BadCredentialsException("Bad credentials")

        return self._token_service.issue(user.email)
