from .user_factory import UserDetails as UserDetails
from .user_factory import UserFactory as UserFactory
