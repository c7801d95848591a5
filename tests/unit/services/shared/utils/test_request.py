import pytest
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain.exception import InvalidDataException
from services.shared.utils import header_value, parse_body
from services.user.handlers.request_models import LoginRequest


class TestHeaderValue:
    """header_value のテスト"""

    def test_lookup_is_case_insensitive(self, api_event):
        event = APIGatewayProxyEvent(api_event(headers={"authorization": "Bearer t"}))

        assert header_value(event, "Authorization") == "Bearer t"

    def test_missing_header_returns_none(self, api_event):
        event = APIGatewayProxyEvent(api_event())

        assert header_value(event, "Authorization") is None


class TestParseBody:
    """parse_body のテスト"""

    def test_valid_body(self, api_event):
        event = APIGatewayProxyEvent(
            api_event(body='{"email": "alice@x.io", "password": "p1"}')
        )

        request = parse_body(event, LoginRequest)

        assert request.email == "alice@x.io"

    def test_invalid_json_raises_invalid_data(self, api_event):
        event = APIGatewayProxyEvent(api_event(body="not json"))

        with pytest.raises(InvalidDataException):
            parse_body(event, LoginRequest)
