from typing import TypedDict

from services.user.domain.entity import User
from services.user.domain.service import PasswordHasher
from services.user.domain.value_object import PasswordHash, UserId


class UserDetails(TypedDict):
    """ユーザー登録の入力データ構造"""

    first_name: str
    last_name: str
    email: str
    password: str
    picture_url: str | None


class UserFactory:
    """ユーザーエンティティのファクトリ

    - ID の採番
    - 平文パスワードのハッシュ化
    - 権限（一般 / 管理者）の設定
    """

    def __init__(self, hasher: PasswordHasher) -> None:
        self._hasher = hasher

    def create(self, details: UserDetails, is_admin: bool = False) -> User:
        """新規ユーザーエンティティを生成する

        Args:
            details: 登録情報
            is_admin: 管理者として登録するか

        Returns:
            User: 生成されたユーザーエンティティ
        """
        return User(
            id=UserId.generate(),
            first_name=details["first_name"],
            last_name=details["last_name"],
            email=details["email"],
            password_hash=PasswordHash(self._hasher.hash(details["password"])),
            picture_url=details["picture_url"],
            is_admin=is_admin,
        )
