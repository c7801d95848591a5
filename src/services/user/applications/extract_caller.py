from services.shared.domain.exception import ForbiddenException
from services.user.domain.repository import UserRepository
from services.user.domain.service import TokenService
from services.user.domain.value_object import CallerContext

BEARER_PREFIX = "Bearer "


class AuthContextExtractor:
    """Authorization ヘッダーからリクエスト元を解決する

    ロールの判定は行わない（各ユースケースで判定する）。
    """

    def __init__(self, repository: UserRepository, token_service: TokenService) -> None:
        self._repository = repository
        self._token_service = token_service

    def extract(self, authorization: str | None) -> CallerContext:
        """ヘッダー値から CallerContext を生成する

        接頭辞 "Bearer " は形式を確認せずに先頭7文字を取り除く。
        形式が異なる場合はトークン検証で InvalidTokenException となる。
        """
        if authorization is None:
            raise ForbiddenException("You are not authorized")

        token = authorization[len(BEARER_PREFIX) :]
        email = self._token_service.subject(token)
        return CallerContext(email=email, user=self._repository.find_by_email(email))
