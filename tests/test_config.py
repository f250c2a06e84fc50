import pytest
import yaml

from graphgate import GraphgateError
from graphgate.cli.config import GraphgateConfig, import_string, load_config


def test_load_missing_file_without_env(tmp_path):
    assert load_config(tmp_path / "graphgate.yaml", environ={}) is None


def test_load_from_yaml(tmp_path):
    path = tmp_path / "graphgate.yaml"
    path.write_text(yaml.dump({
        "schema": "sample_schema:schema",
        "tracing": True,
        "log_level": "debug",
        "server": {"port": 9000, "path": "/api/graphql", "cors_origins": ["https://example.com"]},
    }))

    config = load_config(path, environ={})
    assert config.schema == "sample_schema:schema"
    assert config.tracing is True
    assert config.debug is True
    assert config.log_level == "DEBUG"
    assert config.server.port == 9000
    assert config.server.host == "127.0.0.1"
    assert config.server.path == "/api/graphql"
    assert config.server.cors_origins == ["https://example.com"]


def test_env_overrides_file(tmp_path):
    path = tmp_path / "graphgate.yaml"
    path.write_text(yaml.dump({"schema": "a:b", "server": {"port": 9000}}))

    config = load_config(path, environ={
        "GRAPHGATE_SCHEMA": "sample_schema:schema",
        "GRAPHGATE_PORT": "9100",
        "GRAPHGATE_HOST": "0.0.0.0",
        "GRAPHGATE_DEBUG": "false",
    })
    assert config.schema == "sample_schema:schema"
    assert config.server.port == 9100
    assert config.server.host == "0.0.0.0"
    assert config.debug is False


def test_env_schema_without_file(tmp_path):
    config = load_config(tmp_path / "missing.yaml", environ={"GRAPHGATE_SCHEMA": "sample_schema:schema"})
    assert config.schema == "sample_schema:schema"
    assert config.server.port == 8000


def test_save_round_trips(tmp_path):
    path = tmp_path / "graphgate.yaml"
    original = GraphgateConfig(schema="sample_schema:schema", context="sample_schema:build_context")
    original.save(path)
    assert load_config(path, environ={}) == original


def test_import_string():
    from sample_schema import schema

    assert import_string("sample_schema:schema") is schema


@pytest.mark.parametrize("path", ["sample_schema", "missing_module_xyz:schema", "sample_schema:missing"])
def test_import_string_errors(path):
    with pytest.raises(GraphgateError):
        import_string(path)
