import pytest

from safety_client.config import AppSettings, ConfigurationError

ENV_VARS = (
    "SAFETY_API_BASE_URL",
    "SAFETY_TIMEOUT_SECONDS",
    "SAFETY_TOKEN_STORE_PATH",
    "SAFETY_LOGIN_ROUTE",
    "SAFETY_ENV_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep a developer's .env in the working directory out of the picture.
    monkeypatch.chdir(tmp_path)


def test_defaults_point_at_local_development_backend():
    settings = AppSettings.from_env()

    assert settings.base_url == "http://localhost:3001"
    assert settings.api_url == "http://localhost:3001/api/v1"
    assert settings.timeout_seconds == 10
    assert settings.login_route == "/auth/login"
    assert settings.token_store_path.endswith("token_store.json")


def test_base_url_from_environment_drops_trailing_slash(monkeypatch):
    monkeypatch.setenv("SAFETY_API_BASE_URL", "https://api.safety.example/")

    settings = AppSettings.from_env()

    assert settings.api_url == "https://api.safety.example/api/v1"


def test_env_file_values_fill_unset_variables(monkeypatch, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text('# comment\nSAFETY_API_BASE_URL="http://staging.test:8080"\n', encoding="utf-8")
    monkeypatch.setenv("SAFETY_ENV_FILE", str(env_file))

    settings = AppSettings.from_env()

    assert settings.base_url == "http://staging.test:8080"


def test_settings_are_immutable():
    settings = AppSettings.from_env()

    with pytest.raises(AttributeError):
        settings.timeout_seconds = 30


@pytest.mark.parametrize(
    "name,value",
    [
        ("SAFETY_TIMEOUT_SECONDS", "0"),
        ("SAFETY_TIMEOUT_SECONDS", "ten"),
        ("SAFETY_API_BASE_URL", "localhost:3001"),
        ("SAFETY_LOGIN_ROUTE", "auth/login"),
    ],
)
def test_invalid_settings_raise_configuration_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        AppSettings.from_env()


def test_env_file_in_working_directory_is_read(tmp_path):
    (tmp_path / ".env").write_text("SAFETY_TIMEOUT_SECONDS=25\n", encoding="utf-8")

    assert AppSettings.from_env().timeout_seconds == 25


def test_real_environment_wins_over_env_file(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("SAFETY_TIMEOUT_SECONDS=25\n", encoding="utf-8")
    monkeypatch.setenv("SAFETY_TIMEOUT_SECONDS", "5")

    assert AppSettings.from_env().timeout_seconds == 5
