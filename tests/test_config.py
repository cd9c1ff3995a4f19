import os

import pytest
from pydantic import ValidationError

from minimarkup import MarkupConfig, MiniMarkup
from minimarkup.config import MarkupEnv
from minimarkup.env import load_env, set_class_var_by_env


def test_set_class_var_by_env(monkeypatch: pytest.MonkeyPatch):

    class Env:
        depth: int = 1
        verbose: bool = False
        names: list[str]
        ports: tuple[int, ...] = ()
        missing: str
        _private: int = 0

    monkeypatch.setenv("DEPTH", "12")
    monkeypatch.setenv("VERBOSE", "True")
    monkeypatch.setenv("NAMES", "a, b,,c")
    monkeypatch.setenv("PORTS", "1,2")
    monkeypatch.setenv("_PRIVATE", "5")
    injected = set_class_var_by_env(Env)
    assert Env.depth == 12
    assert Env.verbose is True
    assert Env.names == ["a", "b", "c"]
    assert Env.ports == (1, 2)
    assert Env.missing is None
    assert Env._private == 0
    assert "_private" not in injected

    monkeypatch.setenv("DEPTH", "deep")
    with pytest.raises(ValueError, match="DEPTH"):
        set_class_var_by_env(Env)


def test_load_env_once(tmp_path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / ".env"
    path.write_text("MINIMARKUP_TEST_VALUE=from-file\n")
    monkeypatch.delenv("MINIMARKUP_TEST_VALUE", raising=False)
    assert load_env(path)
    assert not load_env(path)
    assert os.environ["MINIMARKUP_TEST_VALUE"] == "from-file"
    monkeypatch.delenv("MINIMARKUP_TEST_VALUE")


def test_config_validation():
    assert MarkupConfig().max_depth == 64
    assert MarkupConfig(max_depth="3").max_depth == 3
    with pytest.raises(ValidationError):
        MarkupConfig(max_depth=0)
    assert MarkupConfig(max_depth=100).max_depth == 100
    with pytest.raises(ValidationError):
        MarkupConfig(max_depth=5000)


def test_config_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(MarkupEnv, "minimarkup_max_depth",
                        MarkupEnv.minimarkup_max_depth)
    monkeypatch.setattr(MarkupEnv, "minimarkup_log_trees",
                        MarkupEnv.minimarkup_log_trees)
    monkeypatch.setenv("MINIMARKUP_MAX_DEPTH", "2")
    monkeypatch.setenv("MINIMARKUP_LOG_TREES", "1")
    config = MarkupConfig.from_env(reload=True)
    assert config == MarkupConfig(max_depth=2, log_trees=True)

    mm = MiniMarkup(config=config)
    assert mm.parse_tree("<a><b><c>x").children[0].children[0].children[
        0].raw

    monkeypatch.setenv("MINIMARKUP_MAX_DEPTH", "0")
    with pytest.raises(ValidationError):
        MarkupConfig.from_env(reload=True)
