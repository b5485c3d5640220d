from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir
from core.domain.models import LookupConfig


def test_defaults_match_lookup_api():
    config = AppSettings().lookup_config()
    assert config.endpoint == "https://sb-ssl.google.com/safebrowsing/api/lookup"
    assert (config.client, config.appver, config.pver) == ("safebrowsing", "1.0", "3.0")
    assert AppSettings().key_file == Path("categorization.key")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SAFEBROWSING_CLIENT", "myclient")
    monkeypatch.setenv("SAFEBROWSING_HTTP_TIMEOUT_SECONDS", "3.5")
    config = AppSettings().lookup_config()
    assert config.client == "myclient"
    assert config.timeout_seconds == 3.5


def test_dotenv_in_working_directory(workdir):
    (workdir / ".env").write_text("SAFEBROWSING_PVER=4.0\n", encoding="utf-8")
    assert AppSettings().pver == "4.0"


def test_lookup_config_is_immutable():
    config = AppSettings().lookup_config()
    with pytest.raises(ValidationError):
        config.endpoint = "https://elsewhere.test"


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("SAFEBROWSING_HTTP_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings()


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "safebrowsing"


def test_lookup_config_has_no_defaults_of_its_own():
    with pytest.raises(ValidationError):
        LookupConfig()
    assert AppSettings(endpoint="https://mock.test/lookup").lookup_config().endpoint == "https://mock.test/lookup"
