import pytest

from services.user.domain.entity import User
from services.user.domain.value_object import PasswordHash, UserId


@pytest.fixture
def create_user():
    """User を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        user_id: str = "user-1",
        first_name: str = "Alice",
        last_name: str = "Smith",
        email: str = "alice@x.io",
        password_hash: str = "hashed",
        picture_url: str | None = "https://example.com/alice.png",
        is_admin: bool = False,
    ) -> User:
        return User(
            id=UserId(value=user_id),
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=PasswordHash(password_hash),
            picture_url=picture_url,
            is_admin=is_admin,
        )

    return _factory


@pytest.fixture
def user_details():
    """UserDetails を生成する Factory fixture"""

    def _factory(
        email: str = "alice@x.io",
        password: str = "p1",
        first_name: str = "Alice",
        last_name: str = "Smith",
        picture_url: str | None = None,
    ):
        return {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "password": password,
            "picture_url": picture_url,
        }

    return _factory
