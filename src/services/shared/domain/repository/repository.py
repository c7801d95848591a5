from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - 具象実装（DynamoDB, インメモリ等）は差し替え可能
    """

    @abstractmethod
    def save(self, entity: T) -> None:
        """新規エンティティを永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDでエンティティを検索する"""
        raise NotImplementedError
