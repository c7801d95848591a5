from services.shared.domain.exception import (
    DuplicateResourceException,
    ForbiddenException,
    InvalidBusinessArgumentException,
    InvalidDataException,
)
from services.user.domain.entity import User
from services.user.domain.factory import UserDetails, UserFactory
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import CallerContext


class RegisterAdminService:
    """管理者ユーザー登録サービス

    判定順序: 呼び出し元の権限 → メールアドレス形式 → メールアドレス重複
    """

    def __init__(self, repository: UserRepository, factory: UserFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, caller: CallerContext, details: UserDetails) -> User:
        """管理者ユーザーを登録する

        トークンの subject に対応するユーザーが存在しない場合、
        権限チェックは行われずに登録処理へ進む。
        """
        if caller.user is not None and not caller.user.is_admin:
            raise InvalidBusinessArgumentException(
                "You cannot register new admin as standard user"
            )
        if not self._is_well_formed(details["email"]):
            raise InvalidDataException("Wrong register input")
        if self._repository.exists_by_email(details["email"]):
            raise ForbiddenException("Email is taken")

        user = self._factory.create(details, is_admin=True)
        try:
            self._repository.save(user)
        except DuplicateResourceException as e:
            raise ForbiddenException("Email is taken") from e
        return user

    @staticmethod
    def _is_well_formed(email: str) -> bool:
        return "@" in email and "." in email
