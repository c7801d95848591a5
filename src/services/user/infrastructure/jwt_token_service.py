import os
from datetime import datetime, timedelta, timezone
from typing import Callable

from jose import JWTError, jwt

from services.shared.domain.exception import InvalidTokenException
from services.shared.infrastructure.secrets_manager_secret import SecretsManagerSecret
from services.user.domain.service import TokenService

ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenService(TokenService):
    """HS256 署名の JWT を使用した TokenService の具象実装"""

    def __init__(
        self,
        secret_provider: Callable[[], str],
        expiration: timedelta = timedelta(hours=24),
        leeway: timedelta = timedelta(0),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Args:
            secret_provider: 署名用シークレットを返す関数（遅延取得のため）
            expiration: トークンの有効期間
            leeway: 有効期限検証時に許容する時刻のずれ
            clock: 発行時刻の取得元
        """
        self._secret_provider = secret_provider
        self._expiration = expiration
        self._leeway = leeway
        self._clock = clock

    def issue(self, email: str) -> str:
        """トークンを発行する"""
        issued_at = self._clock()
        claims = {
            "sub": email,
            "iat": issued_at,
            "exp": issued_at + self._expiration,
        }
        return jwt.encode(claims, self._secret_provider(), algorithm=ALGORITHM)

    def subject(self, token: str) -> str:
        """トークンを検証して subject を返す"""
        try:
            claims = jwt.decode(
                token,
                self._secret_provider(),
                algorithms=[ALGORITHM],
                options={
                    "require_sub": True,
                    "require_exp": True,
                    "leeway": int(self._leeway.total_seconds()),
                },
            )
        except JWTError as e:
            raise InvalidTokenException("Invalid or expired token") from e
        return claims["sub"]

    @classmethod
    def from_env(cls) -> "JwtTokenService":
        """Lambda の環境変数から生成する

        JWT_SECRET_ARN: 署名用シークレット（Secrets Manager）
        JWT_EXPIRATION_SECONDS: 有効期間（秒）
        JWT_LEEWAY_SECONDS: 許容する時刻のずれ（秒）
        """
        secret = SecretsManagerSecret(os.environ["JWT_SECRET_ARN"])
        return cls(
            secret_provider=secret.value,
            expiration=timedelta(
                seconds=int(os.getenv("JWT_EXPIRATION_SECONDS", "86400"))
            ),
            leeway=timedelta(seconds=int(os.getenv("JWT_LEEWAY_SECONDS", "0"))),
        )
