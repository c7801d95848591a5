import aws_cdk as core
import aws_cdk.assertions as assertions
import pytest

from skyflow_stack import SkyflowStack


@pytest.fixture(scope="module")
def template():
    # Layer のバンドリングを行わずに合成する
    app = core.App(context={"aws:cdk:bundling-stacks": []})
    stack = SkyflowStack(app, "SkyflowStack")
    return assertions.Template.from_stack(stack)


class TestSkyflowStack:
    """SkyflowStack のテスト"""

    def test_single_table(self, template):
        """PK / SK を持つテーブルが1つだけ作成される"""
        template.resource_count_is("AWS::DynamoDB::Table", 1)
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {
                "KeySchema": [
                    {"AttributeName": "PK", "KeyType": "HASH"},
                    {"AttributeName": "SK", "KeyType": "RANGE"},
                ],
                "BillingMode": "PAY_PER_REQUEST",
            },
        )

    def test_functions(self, template):
        """エンドポイントごとに Lambda 関数が作成される"""
        template.resource_count_is("AWS::Lambda::Function", 7)
        template.has_resource_properties(
            "AWS::Lambda::Function",
            {
                "Handler": "services.flight.handlers.search.lambda_handler",
                "Environment": {
                    "Variables": assertions.Match.object_like(
                        {"FLIGHT_DEFAULT_CAPACITY": "30"}
                    )
                },
            },
        )

    def test_secrets(self, template):
        template.resource_count_is("AWS::SecretsManager::Secret", 2)

    def test_api_methods(self, template):
        """REST API のメソッドがルートごとに作成される"""
        template.resource_count_is("AWS::ApiGateway::RestApi", 1)
        template.resource_count_is("AWS::ApiGateway::Method", 7)
        template.has_resource_properties(
            "AWS::ApiGateway::Method", {"HttpMethod": "PUT"}
        )
