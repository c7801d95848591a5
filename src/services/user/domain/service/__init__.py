from .password_hasher import PasswordHasher as PasswordHasher
from .token_service import TokenService as TokenService
