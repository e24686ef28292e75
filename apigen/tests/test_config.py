from apigen.config import CompilerConfig


def test_defaults(monkeypatch):
    names = ["REST_API_LOGICAL_ID", "ALLOW_DUPLICATE_METHODS", "OUTPUT_FORMAT", "LOG_FORMAT"]
    for name in names:
        monkeypatch.delenv(f"APIGEN_{name}", raising=False)

    config = CompilerConfig(_env_file=None)

    assert config.REST_API_LOGICAL_ID == "ApiGatewayRestApi"
    assert config.RESOURCE_ID_PREFIX == "ApiGatewayResource"
    assert config.ALLOW_DUPLICATE_METHODS is False
    assert config.OUTPUT_FORMAT == "json"
    assert config.LOG_CONFIG_PATH.endswith("logging.yml")
    assert config.LOG_FORMAT == "json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("APIGEN_REST_API_LOGICAL_ID", "MyApi")
    monkeypatch.setenv("APIGEN_ALLOW_DUPLICATE_METHODS", "true")
    monkeypatch.setenv("APIGEN_OUTPUT_FORMAT", "yaml")

    config = CompilerConfig(_env_file=None)

    assert config.REST_API_LOGICAL_ID == "MyApi"
    assert config.ALLOW_DUPLICATE_METHODS is True
    assert config.OUTPUT_FORMAT == "yaml"
