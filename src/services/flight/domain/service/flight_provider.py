from abc import ABC, abstractmethod

from services.flight.domain.value_object import OpenSkyFlight


class FlightProvider(ABC):
    """外部の航空データサービス"""

    @abstractmethod
    def departures(self, airport: str, begin: str, end: str) -> list[OpenSkyFlight]:
        """指定空港から指定期間に出発した便を返す

        通信・解析に失敗した場合は UpstreamServiceException
        """
        raise NotImplementedError
