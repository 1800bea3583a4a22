import importlib

from markov_text import config


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv('MARKOV_ORDER', '3')
    monkeypatch.setenv('MARKOV_SEED', '11')
    monkeypatch.setenv('MARKOV_LOG_LEVEL', 'debug')
    try:
        reloaded = importlib.reload(config)
        assert reloaded.DEFAULT_ORDER == 3
        assert reloaded.DEFAULT_SEED == 11
        assert reloaded.LOG_LEVEL == 'DEBUG'
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_bad_integer_falls_back(monkeypatch, capsys):
    monkeypatch.setenv('MARKOV_LENGTH', 'lots')
    try:
        reloaded = importlib.reload(config)
        assert reloaded.DEFAULT_LENGTH == 16
        assert "MARKOV_LENGTH" in capsys.readouterr().out
    finally:
        monkeypatch.undo()
        importlib.reload(config)
