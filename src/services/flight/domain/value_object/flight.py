from __future__ import annotations

from dataclasses import asdict, dataclass

from .open_sky_flight import OpenSkyFlight


@dataclass(frozen=True, kw_only=True)
class Flight(OpenSkyFlight):
    """検索結果のフライト

    OpenSky のレコードに座席数を付与したもの。永続化はしない。
    """

    capacity: int

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("Capacity cannot be negative")

    @classmethod
    def from_open_sky(cls, flight: OpenSkyFlight, capacity: int) -> Flight:
        """OpenSkyFlight に座席数を付与して生成する"""
        return cls(**asdict(flight), capacity=capacity)
