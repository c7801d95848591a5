from aws_cdk import Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers, Secrets


class SkyflowStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")
        secrets = Secrets(self, "Secrets")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            jwt_secret=secrets.jwt_secret,
            opensky_credentials=secrets.opensky_credentials,
        )

        Api(
            self,
            "Api",
            user_register=fns.user_register,
            user_register_admin=fns.user_register_admin,
            user_login=fns.user_login,
            user_update=fns.user_update,
            reservation_book=fns.reservation_book,
            reservation_cancel=fns.reservation_cancel,
            flight_search=fns.flight_search,
        )
