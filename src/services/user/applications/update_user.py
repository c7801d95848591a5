from typing import TypedDict

from services.shared.domain.exception import (
    DuplicatedDataException,
    DuplicateResourceException,
    EntityNotFoundException,
)
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository
from services.user.domain.service import PasswordHasher
from services.user.domain.value_object import PasswordHash, UserId


class UpdateDetails(TypedDict, total=False):
    """ユーザー更新の入力データ構造（部分更新）"""

    first_name: str | None
    last_name: str | None
    email: str | None
    password: str | None
    picture_url: str | None


class UpdateUserService:
    """ユーザー情報更新サービス

    認証・所有者チェックは行わない。
    """

    def __init__(self, repository: UserRepository, hasher: PasswordHasher) -> None:
        self._repository = repository
        self._hasher = hasher

    def update(self, user_id: UserId, details: UpdateDetails) -> User:
        """指定された項目のみ更新する（None・空文字の項目は変更しない）"""
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundException("User not found")

        # 自分自身の現在のメールアドレスが指定された場合も重複として扱う
        email = details.get("email")
        if email is not None and self._repository.exists_by_email(email):
            raise DuplicatedDataException("User with given email already exists")

        user.rename(details.get("first_name"), details.get("last_name"))
        user.change_email(email)
        password = details.get("password")
        if password:
            user.change_password(PasswordHash(self._hasher.hash(password)))
        user.change_picture(details.get("picture_url"))

        try:
            self._repository.update(user)
        except DuplicateResourceException as e:
            raise DuplicatedDataException(
                "User with given email already exists"
            ) from e
        return user
