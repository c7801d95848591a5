from .http_response import api_response as api_response
from .http_response import error_reason as error_reason
from .http_response import error_response as error_response
from .request import header_value as header_value
from .request import parse_body as parse_body
