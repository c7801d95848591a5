from services.shared.domain import Entity
from services.user.domain.value_object import PasswordHash, UserId


class User(Entity[UserId]):
    """ユーザー"""

    def __init__(
        self,
        id: UserId,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: PasswordHash,
        picture_url: str | None = None,
        is_admin: bool = False,
    ) -> None:
        super().__init__(id)

        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._password_hash = password_hash
        self._picture_url = picture_url
        self._is_admin = is_admin

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> PasswordHash:
        return self._password_hash

    @property
    def picture_url(self) -> str | None:
        return self._picture_url

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    def rename(self, first_name: str | None, last_name: str | None) -> None:
        """氏名を変更する（未指定・空文字の項目は変更しない）"""
        if first_name:
            self._first_name = first_name
        if last_name:
            self._last_name = last_name

    def change_email(self, email: str | None) -> None:
        """メールアドレスを変更する"""
        if email:
            self._email = email

    def change_password(self, password_hash: PasswordHash) -> None:
        """パスワードを変更する"""
        self._password_hash = password_hash

    def change_picture(self, picture_url: str | None) -> None:
        """プロフィール画像を変更する"""
        if picture_url:
            self._picture_url = picture_url
