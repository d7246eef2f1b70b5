"""Tests for meal config loading."""

import tempfile
from pathlib import Path

import pytest

from neis.meal.config import MealConfig, load_config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ("NEIS_API_URL", "NEIS_OFFICE_CODE", "NEIS_SCHOOL_CODE"):
        monkeypatch.delenv(name, raising=False)


def _write_toml(content: bytes) -> Path:
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(content)
    return Path(f.name)


def test_load_config_defaults():
    """Loading with no path returns all defaults."""
    config = load_config()
    assert isinstance(config, MealConfig)
    assert config.api.base_url == "https://open.neis.go.kr/hub/mealServiceDietInfo"
    assert config.api.timeout == 10.0
    assert config.school.office_code == "J10"
    assert config.school.school_code == "7530079"
    assert config.display.strip_allergens is True


def test_load_config_nonexistent_file():
    """Loading a nonexistent file returns defaults."""
    config = load_config("/nonexistent/path.toml")
    assert config.school.office_code == "J10"


def test_load_config_from_toml():
    """Loading a valid TOML file populates config."""
    path = _write_toml(b"""\
[api]
base_url = "http://localhost:8000/meal"
timeout = 3

[school]
office_code = "B10"
school_code = "7010057"

[display]
strip_allergens = false
""")
    try:
        config = load_config(path)
    finally:
        path.unlink()

    assert config.api.base_url == "http://localhost:8000/meal"
    assert config.api.timeout == 3.0
    assert config.school.office_code == "B10"
    assert config.school.school_code == "7010057"
    assert config.display.strip_allergens is False


def test_load_config_partial_toml():
    """Sections missing from the file keep their defaults."""
    path = _write_toml(b'[school]\nschool_code = "7010057"\n')
    try:
        config = load_config(path)
    finally:
        path.unlink()

    assert config.school.school_code == "7010057"
    assert config.school.office_code == "J10"
    assert config.display.strip_allergens is True


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("NEIS_OFFICE_CODE", "B10")
    monkeypatch.setenv("NEIS_SCHOOL_CODE", "7010057")
    monkeypatch.setenv("NEIS_API_URL", "http://localhost/meal")

    config = load_config()

    assert config.school.office_code == "B10"
    assert config.school.school_code == "7010057"
    assert config.api.base_url == "http://localhost/meal"


def test_file_wins_over_env(monkeypatch):
    monkeypatch.setenv("NEIS_SCHOOL_CODE", "7010057")
    path = _write_toml(b'[school]\nschool_code = "1234567"\n')
    try:
        config = load_config(path)
    finally:
        path.unlink()

    assert config.school.school_code == "1234567"
