from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class OpenSkyFlight:
    """OpenSky の出発便レコード

    時刻は UNIX 時間（秒）。推定できなかった項目は None。
    """

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
