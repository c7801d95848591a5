from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from services.shared.domain.exception import ForbiddenException

if TYPE_CHECKING:
    from services.user.domain.entity import User


@dataclass(frozen=True)
class CallerContext:
    """リクエスト元の認証情報

    トークンから取り出したメールアドレスと、それに対応するユーザー。
    ユーザーが存在しない場合 user は None。
    """

    email: str
    user: User | None

    def require_user(self) -> User:
        """ログイン済みユーザーを返す"""
        if self.user is None:
            raise ForbiddenException("You need to be logged in")
        return self.user
