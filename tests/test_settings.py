"""Тесты настроек"""

import pytest
from pydantic import ValidationError

from settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DEFAULT_CULTURE", "RESOURCE_PACKAGE", "RESOURCE_DIR", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"LOCALIZATION_{name}", raising=False)


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.DEFAULT_CULTURE == "de-DE"
    assert settings.RESOURCE_PACKAGE == "text_resources"
    assert settings.RESOURCE_DIR is None
    assert settings.RESOURCE_BASE_NAME == "texts"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FILE is False


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("LOCALIZATION_DEFAULT_CULTURE", "ru_RU")
    monkeypatch.setenv("LOCALIZATION_RESOURCE_DIR", str(tmp_path))
    monkeypatch.setenv("LOCALIZATION_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.DEFAULT_CULTURE == "ru-RU"
    assert settings.RESOURCE_DIR == tmp_path
    assert settings.LOG_LEVEL == "DEBUG"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LOCALIZATION_DEFAULT_CULTURE=en-GB\nLOCALIZATION_LOG_FILE=true\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.DEFAULT_CULTURE == "en-GB"
    assert settings.LOG_FILE is True


@pytest.mark.parametrize("field, value", [
    ("DEFAULT_CULTURE", "not a culture"),
    ("LOG_LEVEL", "LOUD"),
])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_default_culture_means_system_culture(value):
    assert Settings(_env_file=None, DEFAULT_CULTURE=value).DEFAULT_CULTURE is None
