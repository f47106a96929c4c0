import pytest
from pydantic import ValidationError

from topng.core.config import load_settings
from topng.core.shapes import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("TOPNG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TOPNG_PAUSE", raising=False)

    s = load_settings()

    assert s.log_level == "WARNING"
    assert s.pause == "auto"


def test_values_normalized(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TOPNG_LOG_LEVEL", " debug ")
    monkeypatch.setenv("TOPNG_PAUSE", "NEVER")

    s = load_settings()

    assert s.log_level == "DEBUG"
    assert s.pause == "never"


def test_empty_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TOPNG_LOG_LEVEL", "")
    monkeypatch.setenv("TOPNG_PAUSE", "")

    s = load_settings()

    assert s.log_level == "WARNING"
    assert s.pause == "auto"


@pytest.mark.parametrize(
    ("variable", "value"),
    [("TOPNG_LOG_LEVEL", "loud"), ("TOPNG_PAUSE", "sometimes")],
)
def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch, variable: str, value: str):
    monkeypatch.setenv(variable, value)

    with pytest.raises(ValidationError):
        load_settings()


def test_settings_frozen():
    s = Settings()

    with pytest.raises(ValidationError):
        s.pause = "always"
