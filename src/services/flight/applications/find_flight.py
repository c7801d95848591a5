from typing import TypedDict

from services.flight.domain.service import FlightProvider
from services.flight.domain.value_object import Flight

# TODO: 機材ごとの座席数が取得できるようになったら置き換える
DEFAULT_CAPACITY = 30


class FlightSearch(TypedDict):
    """フライト検索条件

    begin / end は UNIX 時間（秒）の文字列で、検証せずにそのまま渡す。
    """

    departure_airport: str
    begin: str
    end: str


class FindFlightService:
    """フライト検索サービス"""

    def __init__(
        self, provider: FlightProvider, capacity: int = DEFAULT_CAPACITY
    ) -> None:
        self._provider = provider
        self._capacity = capacity

    def find(self, search: FlightSearch) -> list[Flight]:
        """出発便を検索し、座席数を付与して返す（順序は外部サービスのまま）"""
        departures = self._provider.departures(
            airport=search["departure_airport"],
            begin=search["begin"],
            end=search["end"],
        )
        return [Flight.from_open_sky(flight, self._capacity) for flight in departures]
