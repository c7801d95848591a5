import json
from typing import Any

import boto3


class SecretsManagerSecret:
    """Secrets Manager のシークレットを遅延取得する

    初回アクセス時にのみ API を呼び出し、以降は Lambda コンテナの
    ライフサイクル中キャッシュした値を返す。
    """

    def __init__(self, secret_arn: str, client: Any | None = None) -> None:
        self._secret_arn = secret_arn
        self._client = client
        self._cache: str | None = None

    def value(self) -> str:
        """シークレット文字列を返す"""
        if self._cache is None:
            if self._client is None:
                self._client = boto3.client("secretsmanager")
            response = self._client.get_secret_value(SecretId=self._secret_arn)
            self._cache = response["SecretString"]
        return self._cache

    def json(self) -> dict:
        """JSON 形式のシークレットを辞書として返す"""
        return json.loads(self.value())
