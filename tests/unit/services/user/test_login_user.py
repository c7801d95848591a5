from unittest.mock import MagicMock

import pytest

from services.shared.domain.exception import (
    AuthException,
    BadCredentialsException,
    EntityNotFoundException,
)
from services.user.applications.login_user import LoginService


class TestLoginService:
    """LoginService のテスト"""

    @pytest.fixture
    def service(self, user_repository, hasher, token_service):
        return LoginService(
            repository=user_repository, hasher=hasher, token_service=token_service
        )

    @pytest.fixture
    def alice(self, create_user, user_repository, hasher):
        user = create_user(email="alice@x.io", password_hash=hasher.hash("p1"))
        user_repository.save(user)
        return user

    def test_login_returns_token_for_email(self, service, alice, token_service):
        """ログインに成功すると subject がメールアドレスのトークンを返す"""
        token = service.login({"email": "alice@x.io", "password": "p1"}, None)

        assert token
        assert token_service.subject(token) == "alice@x.io"

    def test_unknown_email_is_not_found(self, service):
        """存在しないメールアドレスは EntityNotFoundException"""
        with pytest.raises(
            EntityNotFoundException, match="User with given data does not exist"
        ):
            service.login({"email": "nobody@x.io", "password": "p1"}, None)

    def test_login_while_logged_in_is_rejected(self, service, alice):
        """Authorization ヘッダー付きでのログインは AuthException"""
        token = service.login({"email": "alice@x.io", "password": "p1"}, None)

        with pytest.raises(
            AuthException, match="You cannot log in while you are logged in"
        ):
            service.login(
                {"email": "alice@x.io", "password": "p1"}, f"Bearer {token}"
            )

    def test_unknown_email_check_precedes_header_check(self, service):
        """ユーザーの存在確認はヘッダーチェックより先に行われる"""
        with pytest.raises(EntityNotFoundException):
            service.login({"email": "nobody@x.io", "password": "p1"}, "Bearer x")

    def test_wrong_password_is_rejected(self, service, alice):
        """パスワードが一致しない場合は BadCredentialsException"""
        with pytest.raises(BadCredentialsException):
            service.login({"email": "alice@x.io", "password": "wrong"}, None)

    def test_token_is_not_issued_on_failure(self, mock_repository, hasher, create_user):
        """認証に失敗した場合トークンは発行されない"""
        mock_repository.find_by_email.return_value = create_user(
            password_hash=hasher.hash("p1")
        )
        token_service = MagicMock()
        service = LoginService(
            repository=mock_repository, hasher=hasher, token_service=token_service
        )

        with pytest.raises(BadCredentialsException):
            service.login({"email": "alice@x.io", "password": "bad"}, None)

        token_service.issue.assert_not_called()
