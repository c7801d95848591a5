from services.shared.domain.exception import (
    DuplicateResourceException,
    ForbiddenException,
)
from services.user.domain.entity import User
from services.user.domain.factory import UserDetails, UserFactory
from services.user.domain.repository import UserRepository


class RegisterUserService:
    """一般ユーザー登録サービス（認証不要）"""

    def __init__(self, repository: UserRepository, factory: UserFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, details: UserDetails) -> User:
        """一般ユーザーを登録する"""
        if self._repository.exists_by_email(details["email"]):
            raise ForbiddenException("Email is taken")

        user = self._factory.create(details, is_admin=False)
        try:
            self._repository.save(user)
        except DuplicateResourceException as e:
            # 同一メールアドレスの同時登録
            raise ForbiddenException("Email is taken") from e
        return user
