import pytest

from rocviz import config


def test_defaults(monkeypatch):
    monkeypatch.delenv("ROCVIZ_N_POINTS", raising=False)
    monkeypatch.delenv("ROCVIZ_RUN_LOG", raising=False)
    monkeypatch.delenv("ROCVIZ_BASE_URL", raising=False)
    assert config.default_n_points() == 100
    assert config.run_log_path() is None
    assert config.base_url() == "http://127.0.0.1:8000"


def test_overrides(monkeypatch):
    monkeypatch.setenv("ROCVIZ_N_POINTS", "25")
    monkeypatch.setenv("ROCVIZ_RUN_LOG", "/tmp/roc.csv")
    assert config.default_n_points() == 25
    assert config.run_log_path() == "/tmp/roc.csv"


def test_bad_n_points(monkeypatch):
    monkeypatch.setenv("ROCVIZ_N_POINTS", "many")
    with pytest.raises(RuntimeError):
        config.default_n_points()


def test_max_n_points(monkeypatch):
    monkeypatch.delenv("ROCVIZ_MAX_N_POINTS", raising=False)
    assert config.max_n_points() == 100_000
    monkeypatch.setenv("ROCVIZ_MAX_N_POINTS", "500")
    assert config.max_n_points() == 500
