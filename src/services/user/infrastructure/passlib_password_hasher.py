from passlib.context import CryptContext

from services.user.domain.service import PasswordHasher


class PasslibPasswordHasher(PasswordHasher):
    """passlib を使用した PasswordHasher の具象実装"""

    def __init__(self, context: CryptContext | None = None) -> None:
        self._context = context or CryptContext(
            schemes=["pbkdf2_sha256"], deprecated="auto"
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        return self._context.verify(password, password_hash)
