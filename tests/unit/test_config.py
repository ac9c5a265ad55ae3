import pytest

from config import TimelineConfig, load_config

_ENV_VARS = ["TIMELINE_LOG_LEVEL", "TIMELINE_SHOW_DATA", "TIMELINE_BULLETS", "TIMELINE_DEMO_SLEEP_MS"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the picture.
    monkeypatch.setattr("config.dotenv.load_dotenv", lambda *args, **kwargs: False)


def test_load_config_defaults():
    cfg = load_config().timeline
    assert cfg.log_level == "WARNING"
    assert cfg.show_data is True
    assert cfg.bullets is None
    assert cfg.demo_sleep_ms == 250


def test_load_config_parses_optional_fields(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TIMELINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TIMELINE_SHOW_DATA", "off")
    monkeypatch.setenv("TIMELINE_BULLETS", "x, y ,z")
    monkeypatch.setenv("TIMELINE_DEMO_SLEEP_MS", "10")

    cfg = load_config().timeline
    assert cfg.log_level == "DEBUG"
    assert cfg.show_data is False
    assert cfg.bullets == ["x", "y", "z"]
    assert cfg.demo_sleep_ms == 10


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("TIMELINE_SHOW_DATA", "maybe"),
        ("TIMELINE_DEMO_SLEEP_MS", "soon"),
        ("TIMELINE_DEMO_SLEEP_MS", "-5"),
        ("TIMELINE_LOG_LEVEL", "LOUD"),
        ("TIMELINE_BULLETS", "x,x"),
    ],
)
def test_load_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_config()


def test_timeline_config_rejects_empty_bullet_list():
    with pytest.raises(ValueError):
        TimelineConfig(bullets=[])
