from pydantic import BaseModel


class ReservationResponse(BaseModel):
    """予約操作のレスポンスモデル"""

    message: str
