from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct


class Secrets(Construct):
    """Secrets Manager Construct

    - JWT 署名用シークレット（自動生成）
    - OpenSky の Basic 認証情報（username はデプロイ後に設定する）
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.jwt_secret = secretsmanager.Secret(
            self,
            "JwtSigningSecret",
            secret_name="/skyflow/jwt-signing-key",
            generate_secret_string=secretsmanager.SecretStringGenerator(
                exclude_punctuation=True,
                password_length=64,
            ),
        )

        self.opensky_credentials = secretsmanager.Secret(
            self,
            "OpenSkyCredentials",
            secret_name="/skyflow/opensky-credentials",
            generate_secret_string=secretsmanager.SecretStringGenerator(
                secret_string_template='{"username": "change-me"}',
                generate_string_key="password",
            ),
        )
