from .entity import User as User
from .factory import UserDetails as UserDetails
from .factory import UserFactory as UserFactory
from .repository import UserRepository as UserRepository
from .service import PasswordHasher as PasswordHasher
from .service import TokenService as TokenService
from .value_object import CallerContext as CallerContext
from .value_object import PasswordHash as PasswordHash
from .value_object import UserId as UserId
