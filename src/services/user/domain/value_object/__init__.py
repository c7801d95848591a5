from .caller_context import CallerContext as CallerContext
from .password_hash import PasswordHash as PasswordHash
from .user_id import UserId as UserId
