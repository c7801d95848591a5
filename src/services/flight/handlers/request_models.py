from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FlightSearchRequest(BaseModel):
    """フライト検索リクエストスキーマ

    begin / end は UNIX 時間（秒）。文字列のまま外部サービスへ渡す。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "departureAirport": "EPWA",
                    "begin": "1517227200",
                    "end": "1517230800",
                }
            ]
        },
    )

    departure_airport: str = Field(..., min_length=1, description="出発空港（ICAO）")
    begin: str = Field(..., min_length=1, description="検索開始時刻")
    end: str = Field(..., min_length=1, description="検索終了時刻")
