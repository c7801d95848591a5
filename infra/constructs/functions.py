import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs.layers import LAYER_RUNTIME


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        jwt_secret: secretsmanager.ISecret,
        opensky_credentials: secretsmanager.ISecret,
        opensky_base_url: str = "https://opensky-network.org/api",
        flight_default_capacity: int = 30,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._common_layer = common_layer

        token_environment = {
            "JWT_SECRET_ARN": jwt_secret.secret_arn,
            "JWT_EXPIRATION_SECONDS": "86400",
        }

        # user-service
        self.user_register = self._create_function(
            "UserRegisterLambda",
            "services.user.handlers.register.lambda_handler",
            "user-service",
        )
        self.user_register_admin = self._create_function(
            "UserRegisterAdminLambda",
            "services.user.handlers.register_admin.lambda_handler",
            "user-service",
            token_environment,
        )
        self.user_login = self._create_function(
            "UserLoginLambda",
            "services.user.handlers.login.lambda_handler",
            "user-service",
            token_environment,
        )
        self.user_update = self._create_function(
            "UserUpdateLambda",
            "services.user.handlers.update.lambda_handler",
            "user-service",
        )

        # reservation-service
        self.reservation_book = self._create_function(
            "ReservationBookLambda",
            "services.reservation.handlers.book.lambda_handler",
            "reservation-service",
            token_environment,
        )
        self.reservation_cancel = self._create_function(
            "ReservationCancelLambda",
            "services.reservation.handlers.cancel.lambda_handler",
            "reservation-service",
            token_environment,
        )

        # flight-service
        self.flight_search = self._create_function(
            "FlightSearchLambda",
            "services.flight.handlers.search.lambda_handler",
            "flight-service",
            {
                "OPENSKY_BASE_URL": opensky_base_url,
                "OPENSKY_CREDENTIALS_SECRET_ARN": opensky_credentials.secret_arn,
                "OPENSKY_TIMEOUT_SECONDS": "4",
                "FLIGHT_DEFAULT_CAPACITY": str(flight_default_capacity),
            },
            timeout=Duration.seconds(30),
        )

        for fn in [
            self.user_register,
            self.user_register_admin,
            self.user_login,
            self.user_update,
            self.reservation_book,
            self.reservation_cancel,
        ]:
            table.grant_read_write_data(fn)

        for fn in [
            self.user_register_admin,
            self.user_login,
            self.reservation_book,
            self.reservation_cancel,
        ]:
            jwt_secret.grant_read(fn)

        opensky_credentials.grant_read(self.flight_search)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        environment: dict[str, str] | None = None,
        timeout: Duration = Duration.seconds(10),
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=LAYER_RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            timeout=timeout,
            memory_size=512,
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **(environment or {}),
            },
        )
