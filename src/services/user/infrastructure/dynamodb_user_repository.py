import os

import boto3
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from services.shared.domain.exception import (
    DuplicateResourceException,
    EntityNotFoundException,
)
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import PasswordHash, UserId

_serializer = TypeSerializer()


def _marshal(item: dict) -> dict:
    """低レベル API 用に DynamoDB の型表現へ変換する"""
    return {key: _serializer.serialize(value) for key, value in item.items()}


class DynamoDBUserRepository(UserRepository):
    """DynamoDBを使用したUserRepository の具象実装

    ユーザー本体のアイテムと、メールアドレスの一意性を保証する
    ガードアイテムを同一トランザクションで書き込む。

    - USER#{user_id} / PROFILE : ユーザー本体
    - EMAIL#{email} / EMAIL    : メールアドレス → user_id
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.client = self.dynamodb.meta.client

    def save(self, user: User) -> None:
        """新規ユーザーをDBに保存する"""
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": _marshal(self._to_item(user)),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": _marshal(self._to_email_item(user)),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                ]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise DuplicateResourceException(
                    f"User already exists: {user.email}"
                ) from e
            raise

    def update(self, user: User) -> None:
        """ユーザーを更新する（メールアドレス変更時はガードアイテムも付け替える）"""
        current = self.table.get_item(
            Key={"PK": f"USER#{user.id}", "SK": "PROFILE"},
            ConsistentRead=True,
        ).get("Item")
        if current is None:
            raise EntityNotFoundException(f"User not found: {user.id}")

        transact_items: list[dict] = [
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": _marshal(self._to_item(user)),
                    "ConditionExpression": "attribute_exists(PK)",
                }
            }
        ]
        if current["email"] != user.email:
            transact_items.append(
                {
                    "Delete": {
                        "TableName": self.table_name,
                        "Key": _marshal(
                            {"PK": f"EMAIL#{current['email']}", "SK": "EMAIL"}
                        ),
                    }
                }
            )
            transact_items.append(
                {
                    "Put": {
                        "TableName": self.table_name,
                        "Item": _marshal(self._to_email_item(user)),
                        "ConditionExpression": "attribute_not_exists(PK)",
                    }
                }
            )

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise DuplicateResourceException(
                    f"Email already in use: {user.email}"
                ) from e
            raise

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索"""
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "PROFILE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: str) -> User | None:
        """メールアドレスで検索"""
        response = self.table.get_item(
            Key={"PK": f"EMAIL#{email}", "SK": "EMAIL"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(UserId(value=item["user_id"]))

    def exists_by_email(self, email: str) -> bool:
        """メールアドレスが登録済みか"""
        response = self.table.get_item(
            Key={"PK": f"EMAIL#{email}", "SK": "EMAIL"},
            ConsistentRead=True,
            ProjectionExpression="PK",
        )
        return "Item" in response

    def _to_item(self, user: User) -> dict:
        return {
            "PK": f"USER#{user.id}",
            "SK": "PROFILE",
            "entity_type": "USER",
            "user_id": str(user.id),
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "password_hash": str(user.password_hash),
            "picture_url": user.picture_url,
            "is_admin": user.is_admin,
        }

    def _to_email_item(self, user: User) -> dict:
        return {
            "PK": f"EMAIL#{user.email}",
            "SK": "EMAIL",
            "entity_type": "USER_EMAIL",
            "user_id": str(user.id),
        }

    def _to_entity(self, item: dict) -> User:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return User(
            id=UserId(value=item["user_id"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
            email=item["email"],
            password_hash=PasswordHash(item["password_hash"]),
            picture_url=item.get("picture_url"),
            is_admin=bool(item.get("is_admin", False)),
        )
