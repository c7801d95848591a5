from abc import abstractmethod
from typing import Optional

from services.shared.domain import Repository
from services.user.domain.entity import User
from services.user.domain.value_object import UserId


class UserRepository(Repository[User, UserId]):
    """ユーザーレポジトリ"""

    @abstractmethod
    def save(self, user: User) -> None:
        """新規ユーザーを永続化する

        メールアドレスが既に使われている場合は DuplicateResourceException
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> None:
        """既存ユーザーを更新する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> Optional[User]:
        """ユーザーIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """メールアドレスで検索"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """メールアドレスが登録済みか"""
        raise NotImplementedError
