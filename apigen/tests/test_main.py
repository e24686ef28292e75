import json
from pathlib import Path
from unittest.mock import patch

import pytest

from apigen.main import main, run

COMPILE_INPUT = """
functions:
  list:
    events:
      - http:
          method: get
          path: items
          cors: true
  create:
    events:
      - http: POST items
resourceLogicalIds:
  items: ApiGatewayResourceItems
"""


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "compile.yml"
    path.write_text(COMPILE_INPUT, encoding="utf-8")
    return path


class TestRun:
    """Tests for the compile entry point."""

    def test_writes_output(self, input_file, tmp_path, compiler_config):
        output = tmp_path / "out" / "methods.json"

        content = run(input_file, output_path=output, compiler_config=compiler_config)

        assert output.exists()
        document = json.loads(output.read_text(encoding="utf-8"))
        assert json.loads(content) == document
        assert list(document["Resources"]) == [
            "ApiGatewayMethodItemsGet",
            "ApiGatewayMethodItemsPost",
            "ApiGatewayMethodItemsOptions",
        ]
        assert document["MethodDependencies"] == [
            "ApiGatewayMethodItemsGet",
            "ApiGatewayMethodItemsPost",
        ]

    def test_yaml_output(self, input_file, compiler_config):
        content = run(input_file, output_format="yaml", compiler_config=compiler_config)

        assert "ApiGatewayMethodItemsOptions:" in content

    def test_missing_input(self, tmp_path, compiler_config):
        with pytest.raises(FileNotFoundError):
            run(tmp_path / "missing.yml", compiler_config=compiler_config)


class TestMain:
    """Tests for the command line."""

    def test_stdout(self, input_file, capsys):
        with patch("apigen.main.setup_logging"):
            main(["--input", str(input_file), "--rest-api-id", "MyApi"])

        document = json.loads(capsys.readouterr().out)
        properties = document["Resources"]["ApiGatewayMethodItemsGet"]["Properties"]
        assert properties["RestApiId"] == {"Ref": "MyApi"}

    def test_configuration_error_exits_1(self, tmp_path):
        bad_input = tmp_path / "bad.yml"
        bad_input.write_text(
            "functions:\n  a:\n    events:\n      - http: 42\n"
            "resourceLogicalIds:\n  items: ApiGatewayResourceItems\n",
            encoding="utf-8",
        )

        with patch("apigen.main.setup_logging"):
            with pytest.raises(SystemExit) as exc_info:
                main(["--input", str(bad_input)])

        assert exc_info.value.code == 1

    def test_missing_input_exits_1(self, tmp_path):
        with patch("apigen.main.setup_logging"):
            with pytest.raises(SystemExit) as exc_info:
                main(["--input", str(Path(tmp_path) / "missing.yml")])

        assert exc_info.value.code == 1
