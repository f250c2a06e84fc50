from graphgate import GraphQLOptions
from graphgate.cli import app
from graphgate.cli.config import GraphgateConfig, load_config
from graphgate.cli.main import build_options


def test_init_writes_config(tmp_path, capsys):
    path = tmp_path / "graphgate.yaml"
    assert app(["--config", str(path), "init", "--schema", "sample_schema:schema"]) == 0
    assert load_config(path, environ={}).schema == "sample_schema:schema"
    assert "Created" in capsys.readouterr().out


def test_init_refuses_to_overwrite(tmp_path):
    path = tmp_path / "graphgate.yaml"
    path.write_text("schema: a:b\n")
    assert app(["--config", str(path), "init"]) == 1
    assert app(["--config", str(path), "init", "--force"]) == 0


def test_check_prints_root_types(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("GRAPHGATE_SCHEMA", raising=False)
    path = tmp_path / "graphgate.yaml"
    GraphgateConfig(schema="sample_schema:schema").save(path)

    assert app(["--config", str(path), "check"]) == 0
    out = capsys.readouterr().out
    assert "query: Query" in out
    assert "mutation: Mutation" in out
    assert "subscription: Subscription" in out


def test_check_without_config(tmp_path, monkeypatch):
    monkeypatch.delenv("GRAPHGATE_SCHEMA", raising=False)
    assert app(["--config", str(tmp_path / "missing.yaml"), "check"]) == 1


def test_build_options_static_context():
    options = build_options(GraphgateConfig(schema="sample_schema:schema", tracing=True))
    assert isinstance(options, GraphQLOptions)
    assert options.tracing is True
    assert options.context is None


def test_build_options_callable_context_makes_factory():
    config = GraphgateConfig(schema="sample_schema:schema", context="sample_schema:build_context")
    factory = build_options(config)
    assert callable(factory)
    options = factory("req")
    assert options.context == {"user": "from-request", "request": "req"}
