import os
from datetime import date

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.reservation.domain.entity import Reservation
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ReservationId
from services.shared.domain.exception import (
    DuplicateResourceException,
    EntityNotFoundException,
)
from services.user.domain.value_object import UserId


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, reservation: Reservation) -> None:
        """予約をDBに保存する"""

        item = {
            "PK": f"RESERVATION#{reservation.id}",
            "SK": "RESERVATION",
            "entity_type": "RESERVATION",
            "reservation_id": str(reservation.id),
            "user_id": str(reservation.user_id),
            "departure_date": reservation.departure_date.isoformat(),
            "arrival_date": reservation.arrival_date.isoformat(),
            "departure_airport": reservation.departure_airport,
            "arrival_airport": reservation.arrival_airport,
            "airline": reservation.airline,
            "travel_class": reservation.travel_class,
            "seat_number": reservation.seat_number,
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                ) from e
            raise

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"RESERVATION#{reservation_id}", "SK": "RESERVATION"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def delete(self, reservation: Reservation) -> None:
        """予約を削除する"""
        try:
            self.table.delete_item(
                Key={"PK": f"RESERVATION#{reservation.id}", "SK": "RESERVATION"},
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise EntityNotFoundException(
                    f"Reservation not found: {reservation.id}"
                ) from e
            raise

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Reservation(
            id=ReservationId(value=item["reservation_id"]),
            user_id=UserId(value=item["user_id"]),
            departure_date=date.fromisoformat(item["departure_date"]),
            arrival_date=date.fromisoformat(item["arrival_date"]),
            departure_airport=item["departure_airport"],
            arrival_airport=item["arrival_airport"],
            airline=item["airline"],
            travel_class=item["travel_class"],
            seat_number=item["seat_number"],
        )
