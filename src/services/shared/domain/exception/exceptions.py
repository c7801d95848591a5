class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ForbiddenException(DomainException):
    """権限がない、または未認証の場合"""

    pass


class AuthException(DomainException):
    """認証フローに違反した場合（ログイン済みでのログインなど）"""

    pass


class InvalidTokenException(AuthException):
    """トークンの署名・有効期限の検証に失敗した場合"""

    pass


class BadCredentialsException(AuthException):
    """パスワードが一致しない場合"""

    pass


class InvalidBusinessArgumentException(DomainException):
    """現在の状態に対してリクエストが業務的に不正な場合"""

    pass


class InvalidDataException(DomainException):
    """リクエストの形式が不正な場合（メールアドレスの形式など）"""

    pass


class DuplicatedDataException(DomainException):
    """一意制約に違反する値が指定された場合"""

    pass


class EntityNotFoundException(DomainException):
    """参照先のエンティティが存在しない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class UpstreamServiceException(Exception):
    """外部サービスとの通信・レスポンス解析に失敗した場合"""

    pass
