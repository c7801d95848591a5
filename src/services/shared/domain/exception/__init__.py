from .exceptions import (
    AuthException,
    BadCredentialsException,
    DomainException,
    DuplicatedDataException,
    DuplicateResourceException,
    EntityNotFoundException,
    ForbiddenException,
    InvalidBusinessArgumentException,
    InvalidDataException,
    InvalidTokenException,
    UpstreamServiceException,
)

__all__ = [
    "DomainException",
    "ForbiddenException",
    "AuthException",
    "InvalidTokenException",
    "BadCredentialsException",
    "InvalidBusinessArgumentException",
    "InvalidDataException",
    "DuplicatedDataException",
    "EntityNotFoundException",
    "DuplicateResourceException",
    "UpstreamServiceException",
]
