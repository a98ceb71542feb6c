"""
Тесты загрузки конфигурации
"""
import pytest

from config.settings import Config
from core.exceptions import ConfigurationError

ENV_KEYS = ("DB_HOST", "DB_DATABASE", "DB_USER", "DB_PASSWORD", "DB_PORT",
            "APP_NAME", "LOG_LEVEL", "LOG_DIR", "APP_LOCALE")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        # Сначала setenv, чтобы откатились и значения, загруженные из .env
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    # load_dotenv не должен найти .env разработчика
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestConfig:

    def test_defaults(self, clean_env):
        clean_env.setenv("DB_DATABASE", "records")
        clean_env.setenv("DB_USER", "app")
        config = Config()
        assert config.database.host == "localhost"
        assert config.database.port == 5432
        assert config.database.password == ""
        assert config.app.log_level == "INFO"
        assert config.app.default_locale == ""

    def test_required_database(self, clean_env):
        clean_env.setenv("DB_USER", "app")
        with pytest.raises(ConfigurationError):
            Config()

    def test_bad_port_falls_back(self, clean_env):
        clean_env.setenv("DB_DATABASE", "records")
        clean_env.setenv("DB_USER", "app")
        clean_env.setenv("DB_PORT", "not-a-port")
        assert Config().database.port == 5432

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("DB_DATABASE=records\nDB_USER=app\nAPP_LOCALE=ru_RU\nLOG_LEVEL=debug\n", encoding="utf-8")
        config = Config(str(env_file))
        assert config.database.database == "records"
        assert config.app.default_locale == "ru_RU"
        assert config.app.log_level == "DEBUG"

    def test_to_dict_hides_password(self, clean_env):
        clean_env.setenv("DB_DATABASE", "records")
        clean_env.setenv("DB_USER", "app")
        clean_env.setenv("DB_PASSWORD", "secret")
        assert "secret" not in str(Config().to_dict())

    def test_connection_string(self, clean_env):
        clean_env.setenv("DB_DATABASE", "records")
        clean_env.setenv("DB_USER", "app")
        assert "dbname=records" in Config().database.get_connection_string()
