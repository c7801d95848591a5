from .entity import Entity as Entity
from .exception import (
    AuthException as AuthException,
)
from .exception import (
    BadCredentialsException as BadCredentialsException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicatedDataException as DuplicatedDataException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    EntityNotFoundException as EntityNotFoundException,
)
from .exception import (
    ForbiddenException as ForbiddenException,
)
from .exception import (
    InvalidBusinessArgumentException as InvalidBusinessArgumentException,
)
from .exception import (
    InvalidDataException as InvalidDataException,
)
from .exception import (
    InvalidTokenException as InvalidTokenException,
)
from .exception import (
    UpstreamServiceException as UpstreamServiceException,
)
from .repository import Repository as Repository
