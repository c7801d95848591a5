from abc import ABC, abstractmethod


class TokenService(ABC):
    """Bearer トークンの発行・検証

    トークンは自己完結しており、サーバー側に状態を持たない。
    """

    @abstractmethod
    def issue(self, email: str) -> str:
        """subject をメールアドレスとするトークンを発行する"""
        raise NotImplementedError

    @abstractmethod
    def subject(self, token: str) -> str:
        """署名・有効期限を検証し subject を返す

        検証に失敗した場合は InvalidTokenException
        """
        raise NotImplementedError
