from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    認証は各 Lambda で Authorization ヘッダーを検証するため、
    API Gateway 側では Authorizer を設定しない。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        user_register: _lambda.Function,
        user_register_admin: _lambda.Function,
        user_login: _lambda.Function,
        user_update: _lambda.Function,
        reservation_book: _lambda.Function,
        reservation_cancel: _lambda.Function,
        flight_search: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "SkyflowRestApi",
            rest_api_name="Skyflow Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        # /users
        users = self.rest_api.root.add_resource("users")
        users.add_resource("register").add_method(
            "POST", apigw.LambdaIntegration(user_register)
        )
        users.add_resource("admin").add_resource("register").add_method(
            "POST", apigw.LambdaIntegration(user_register_admin)
        )
        users.add_resource("login").add_method(
            "POST", apigw.LambdaIntegration(user_login)
        )
        users.add_resource("{user_id}").add_method(
            "PUT", apigw.LambdaIntegration(user_update)
        )

        # /reservations
        reservations = self.rest_api.root.add_resource("reservations")
        reservations.add_method("POST", apigw.LambdaIntegration(reservation_book))
        reservations.add_resource("cancel").add_method(
            "POST", apigw.LambdaIntegration(reservation_cancel)
        )

        # /flights/search
        self.rest_api.root.add_resource("flights").add_resource("search").add_method(
            "POST", apigw.LambdaIntegration(flight_search)
        )
