import pytest

from agentql_mcp import main as main_module
from agentql_mcp.app.tool.registry import Registry


@pytest.fixture
def runs(monkeypatch):
    started = []
    monkeypatch.setattr(Registry, "run", lambda self: started.append(self.settings))
    return started


def test_invalid_config_exits_nonzero(runs):
    with pytest.raises(SystemExit) as exc:
        main_module.main(["--mode", "carrier-pigeon"])
    assert exc.value.code == 1
    assert runs == []


def test_eager_key_check_exits_nonzero(runs, monkeypatch):
    monkeypatch.setattr(
        main_module,
        "load_settings",
        lambda argv: main_module.Settings(agentql_api_key="", require_api_key=True),
    )
    with pytest.raises(SystemExit) as exc:
        main_module.main([])
    assert exc.value.code == 1
    assert runs == []


def test_missing_key_is_deferred_by_default(runs):
    main_module.main(["--agentql_api_key", "", "--mode", "rest", "--port", "9999"])
    assert len(runs) == 1
    assert runs[0].port == 9999


def test_server_error_exits_nonzero(monkeypatch):
    def boom(self):
        raise OSError("address already in use")

    monkeypatch.setattr(Registry, "run", boom)
    with pytest.raises(SystemExit) as exc:
        main_module.main(["--mode", "rest"])
    assert exc.value.code == 1
