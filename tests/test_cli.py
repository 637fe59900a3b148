import json
from pathlib import Path

from click.testing import CliRunner

from auto_swagger.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliGenerateSwagger:
    def test_prints_swagger_document(self):
        runner = CliRunner()
        result = runner.invoke(main, ["generate-swagger", str(FIXTURES / "serverless.yml")])

        assert result.exit_code == 0
        doc = json.loads(result.output)
        assert doc["swagger"] == "2.0"
        assert doc["info"]["title"] == "Users API"
        assert doc["host"] == "api.example.com"
        assert doc["basePath"] == "/dev"
        assert doc["securityDefinitions"]["x-api-key"]["in"] == "header"

    def test_routes_and_override_files(self):
        runner = CliRunner()
        result = runner.invoke(main, ["generate-swagger", str(FIXTURES / "serverless.yml")])
        doc = json.loads(result.output)

        assert list(doc["paths"]) == ["/foo", "/bar", "/users/{id}", "/users", "/users/{userId}/orders"]
        assert doc["paths"]["/foo"]["get"]["summary"] == "second foo"
        assert doc["paths"]["/bar"]["get"]["summary"] == "only in base"
        assert set(doc["definitions"]) == {"NewUser", "User"}
        assert "name" in doc["definitions"]["User"]["properties"]
        assert doc["tags"] == [{"name": "users"}]
        assert "/internal/health" not in doc["paths"]

        get_user = doc["paths"]["/users/{id}"]["get"]
        assert get_user["parameters"] == [
            {"in": "path", "name": "id", "required": True, "type": "string"},
            {"in": "query", "name": "verbose", "required": False, "type": "boolean"},
        ]
        assert get_user["responses"] == {"200": {"description": "200 response"}}
        assert get_user["security"] == [{"x-api-key": []}]

        create_user = doc["paths"]["/users"]["post"]
        assert create_user["parameters"][0]["schema"] == {"$ref": "#/definitions/NewUser"}
        assert create_user["responses"]["201"]["schema"] == {"$ref": "#/definitions/User"}
        assert create_user["responses"]["400"] == {"description": "Invalid payload"}

    def test_output_file(self, tmp_path):
        output = tmp_path / "out" / "swagger.json"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate-swagger", str(FIXTURES / "serverless.yml"),
            "-o", str(output),
            "--indent", "2",
        ])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["swagger"] == "2.0"

    def test_missing_override_file_aborts(self, tmp_path):
        config = tmp_path / "serverless.yml"
        config.write_text(
            "custom:\n  autoswagger:\n    swaggerFiles: [missing.json]\n"
            "functions:\n  fn:\n    events:\n      - http: {method: GET, path: /a}\n"
        )
        runner = CliRunner()
        result = runner.invoke(main, ["generate-swagger", str(config)])

        assert result.exit_code == 1
        assert "missing.json" in result.output
        assert '"swagger"' not in result.output

    def test_malformed_override_file_aborts(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"item": {"name": "x"}}')
        config = tmp_path / "serverless.yml"
        config.write_text(
            "custom:\n  autoswagger:\n    swaggerFiles: [broken.json]\n"
            "functions:\n  fn:\n    events:\n      - http: {method: GET, path: /a}\n"
        )
        runner = CliRunner()
        result = runner.invoke(main, ["generate-postman", str(config)])

        assert result.exit_code == 1
        assert "'item' must be a list" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_missing_service_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate-swagger", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output


class TestCliGeneratePostman:
    def test_prints_collection(self):
        runner = CliRunner()
        result = runner.invoke(main, ["generate-postman", str(FIXTURES / "serverless.yml")])

        assert result.exit_code == 0
        doc = json.loads(result.output)
        assert doc["info"]["name"] == "Users API"
        assert doc["host"] == "api.example.com"
        assert [item["name"] for item in doc["item"]] == ["getUser", "Create a user", "listOrders"]

        orders = doc["item"][2]["request"]
        assert orders["url"]["raw"] == "https://api.example.com/users/:userId/orders"
        assert orders["url"]["variable"] == [{"key": "userId", "value": ""}]
        assert orders["url"]["query"] == [{"key": "page", "value": ""}, {"key": "size", "value": ""}]
        assert orders["header"] == [{"key": "x-request-id", "value": "", "type": "text"}]

    def test_default_config_path(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            Path("serverless.yml").write_text(
                "functions:\n  ping:\n    events:\n      - httpApi: {method: GET, path: /ping}\n"
            )
            result = runner.invoke(main, ["generate-postman"])

        assert result.exit_code == 0
        doc = json.loads(result.output)
        assert doc["item"][0]["request"]["url"]["path"] == ["ping"]
