import os
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest
from passlib.context import CryptContext

# ハンドラーはインポート時に環境変数を読むため、テスト収集前に設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "skyflow-test")
os.environ.setdefault(
    "JWT_SECRET_ARN", "arn:aws:secretsmanager:ap-northeast-1:123456789012:secret:jwt"
)
os.environ.setdefault(
    "OPENSKY_CREDENTIALS_SECRET_ARN",
    "arn:aws:secretsmanager:ap-northeast-1:123456789012:secret:opensky",
)
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "skyflow-test")

from services.reservation.domain.entity import Reservation  # noqa: E402
from services.reservation.domain.repository import ReservationRepository  # noqa: E402
from services.reservation.domain.value_object import ReservationId  # noqa: E402
from services.shared.domain.exception import (  # noqa: E402
    DuplicateResourceException,
    EntityNotFoundException,
)
from services.user.domain.entity import User  # noqa: E402
from services.user.domain.repository import UserRepository  # noqa: E402
from services.user.domain.value_object import UserId  # noqa: E402
from services.user.infrastructure.jwt_token_service import JwtTokenService  # noqa: E402
from services.user.infrastructure.passlib_password_hasher import (  # noqa: E402
    PasslibPasswordHasher,
)


class InMemoryUserRepository(UserRepository):
    """テスト用のインメモリ UserRepository"""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}

    def save(self, user: User) -> None:
        if self.exists_by_email(user.email):
            raise DuplicateResourceException(f"User already exists: {user.email}")
        self.users[user.id] = user

    def update(self, user: User) -> None:
        if user.id not in self.users:
            raise EntityNotFoundException(f"User not found: {user.id}")
        self.users[user.id] = user

    def find_by_id(self, user_id: UserId) -> User | None:
        return self.users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None


class InMemoryReservationRepository(ReservationRepository):
    """テスト用のインメモリ ReservationRepository"""

    def __init__(self) -> None:
        self.reservations: dict[ReservationId, Reservation] = {}

    def save(self, reservation: Reservation) -> None:
        self.reservations[reservation.id] = reservation

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        return self.reservations.get(reservation_id)

    def delete(self, reservation: Reservation) -> None:
        if self.reservations.pop(reservation.id, None) is None:
            raise EntityNotFoundException(f"Reservation not found: {reservation.id}")


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def reservation_repository():
    return InMemoryReservationRepository()


@pytest.fixture
def hasher():
    """テスト用にラウンド数を下げたハッシャー"""
    return PasslibPasswordHasher(
        CryptContext(schemes=["pbkdf2_sha256"], pbkdf2_sha256__rounds=1000)
    )


@pytest.fixture
def token_service():
    return JwtTokenService(secret_provider=lambda: "test-secret")


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する Factory fixture"""

    def _factory(
        body: str | None = None,
        headers: dict | None = None,
        path_parameters: dict | None = None,
        http_method: str = "POST",
        path: str = "/",
    ) -> dict:
        return {
            "resource": path,
            "path": path,
            "httpMethod": http_method,
            "headers": headers or {},
            "multiValueHeaders": None,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": path_parameters,
            "stageVariables": None,
            "requestContext": {
                "resourcePath": path,
                "httpMethod": http_method,
                "requestId": "request-id",
                "stage": "prod",
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory
