import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import requests
from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from services.flight.domain.service import FlightProvider
from services.flight.domain.value_object import OpenSkyFlight
from services.shared.domain.exception import UpstreamServiceException
from services.shared.infrastructure.secrets_manager_secret import SecretsManagerSecret

logger = Logger(child=True)

DEFAULT_BASE_URL = "https://opensky-network.org/api"
DEFAULT_TIMEOUT_SECONDS = 4.0

# API Gateway の統合タイムアウト (29 秒) 未満に収める
REQUEST_BUDGET_SECONDS = 25.0

# 読み取りタイムアウトは再試行しない
RETRY = Retry(
    total=2,
    read=0,
    backoff_factor=0.5,
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET"],
    respect_retry_after_header=False,
)


def worst_case_seconds(timeout: float, retry: Retry = RETRY) -> float:
    """全試行がタイムアウトした場合の所要時間（バックオフ込み）

    timeout は接続・読み取りのそれぞれに適用されるため、1 試行あたり 2 倍となる。
    """
    attempts = retry.total + 1
    # urllib3 は初回の再試行では待機しない
    backoff = sum(retry.backoff_factor * 2 ** (n - 1) for n in range(2, attempts))
    return attempts * 2 * timeout + backoff


class Endpoint(str, Enum):
    """OpenSky REST API のエンドポイント"""

    DEPARTURE = "/flights/departure"


@dataclass(frozen=True)
class Credentials:
    """OpenSky の Basic 認証情報"""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password=***)"


class OpenSkyFlightPayload(BaseModel):
    """OpenSky のレスポンス要素スキーマ（未知の項目は無視）"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    icao24: str | None = None
    first_seen: int | None = None
    est_departure_airport: str | None = None
    last_seen: int | None = None
    est_arrival_airport: str | None = None
    callsign: str | None = None
    est_departure_airport_horiz_distance: int | None = None
    est_departure_airport_vert_distance: int | None = None
    est_arrival_airport_horiz_distance: int | None = None
    est_arrival_airport_vert_distance: int | None = None
    departure_airport_candidates_count: int | None = None
    arrival_airport_candidates_count: int | None = None


_payload_adapter = TypeAdapter(list[OpenSkyFlightPayload])


class OpenSkyClient(FlightProvider):
    """OpenSky REST API を使用した FlightProvider の具象実装"""

    def __init__(
        self,
        credentials_provider: Callable[[], Credentials],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        if worst_case_seconds(timeout) > REQUEST_BUDGET_SECONDS:
            raise ValueError(
                f"OpenSky timeout {timeout}s exceeds the request budget "
                f"of {REQUEST_BUDGET_SECONDS}s"
            )
        self._credentials_provider = credentials_provider
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or self._create_session()

    @staticmethod
    def _create_session() -> requests.Session:
        """接続エラーと 429 / 5xx をリトライするセッションを生成する"""
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=RETRY)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def departures(self, airport: str, begin: str, end: str) -> list[OpenSkyFlight]:
        """出発便を取得する"""
        body = self._get(
            Endpoint.DEPARTURE, {"airport": airport, "begin": begin, "end": end}
        )
        if body is None:
            return []
        return self._parse(body)

    def _get(self, endpoint: Endpoint, params: dict[str, str]) -> str | None:
        """Basic 認証付きで GET し、レスポンスボディを返す

        OpenSky は該当便がない場合 404 を返すため None とする。
        """
        url = f"{self._base_url}{endpoint.value}"
        credentials = self._credentials()
        try:
            response = self._session.get(
                url,
                params=params,
                auth=(credentials.username, credentials.password),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("OpenSky request failed", extra={"url": url, "error": str(e)})
            raise UpstreamServiceException(f"OpenSky request failed: {e}") from e

        if response.status_code == 404:
            logger.info("No flights found", extra={"params": params})
            return None
        if not response.ok:
            logger.error(
                "OpenSky returned an error",
                extra={"url": url, "status_code": response.status_code},
            )
            raise UpstreamServiceException(
                f"OpenSky returned status {response.status_code}"
            )
        return response.text

    def _credentials(self) -> Credentials:
        """認証情報を取得する（取得失敗は外部サービスのエラーとして扱う）"""
        try:
            return self._credentials_provider()
        except (BotoCoreError, ClientError, KeyError, ValueError) as e:
            logger.error("Failed to load OpenSky credentials", extra={"error": str(e)})
            raise UpstreamServiceException("Failed to load OpenSky credentials") from e

    def _parse(self, body: str) -> list[OpenSkyFlight]:
        """JSON 配列をドメインの OpenSkyFlight に変換する"""
        try:
            payloads = _payload_adapter.validate_json(body)
        except ValidationError as e:
            raise UpstreamServiceException(
                "Failed to parse OpenSky response"
            ) from e
        return [OpenSkyFlight(**payload.model_dump()) for payload in payloads]

    @classmethod
    def from_env(cls) -> "OpenSkyClient":
        """Lambda の環境変数から生成する

        OPENSKY_CREDENTIALS_SECRET_ARN: {"username": ..., "password": ...}
        OPENSKY_BASE_URL: API のベース URL
        OPENSKY_TIMEOUT_SECONDS: タイムアウト（秒）
        """
        secret = SecretsManagerSecret(os.environ["OPENSKY_CREDENTIALS_SECRET_ARN"])

        def credentials_provider() -> Credentials:
            values = secret.json()
            return Credentials(username=values["username"], password=values["password"])

        return cls(
            credentials_provider=credentials_provider,
            base_url=os.getenv("OPENSKY_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(
                os.getenv("OPENSKY_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            ),
        )
