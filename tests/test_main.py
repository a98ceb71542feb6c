"""
Тесты запуска приложения
"""
from unittest.mock import Mock, patch

import main
from console.interpreter import CommandInterpreter
from core.database import DatabaseManager
from core.exceptions import ConfigurationError, DatabaseConnectionError
from utils.i18n import ENGLISH, RUSSIAN, Locale


class TestInitialLocale:

    def test_first_usable_candidate_wins(self):
        assert main.initial_locale(None, "ru_RU") == RUSSIAN
        assert main.initial_locale("en", "ru_RU") == ENGLISH

    def test_falls_back_to_system_locale(self):
        with patch("main.system_locale", return_value=Locale("de", "DE")):
            assert main.initial_locale(None, "") == Locale("de", "DE")


class TestMain:

    def test_build_interpreter_composes_layers(self, translator):
        db_manager = Mock(spec=DatabaseManager)
        interpreter = main.build_interpreter(db_manager, translator, ENGLISH)
        assert isinstance(interpreter, CommandInterpreter)
        assert interpreter.service.repository.db_manager is db_manager
        assert interpreter.locale == ENGLISH

    def test_configuration_error_exits_with_1(self, capsys):
        with patch("main.Config", side_effect=ConfigurationError("DB_DATABASE")):
            assert main.main([]) == 1
        assert "DB_DATABASE" in capsys.readouterr().err

    def test_connection_error_exits_with_1(self, tmp_path, capsys):
        config = Mock()
        config.app.log_dir = str(tmp_path)
        config.app.log_level = "DEBUG"
        config.app.default_locale = "en"
        config.to_dict.return_value = {}
        with patch("main.Config", return_value=config), \
                patch("main.configure_logging"), \
                patch("main.DatabaseManager") as manager_cls:
            manager_cls.return_value.__enter__.side_effect = DatabaseConnectionError("refused")
            assert main.main([]) == 1
        assert capsys.readouterr().err.strip() != ""

    def test_runs_session_and_closes_connection(self, tmp_path):
        config = Mock()
        config.app.log_dir = str(tmp_path)
        config.app.log_level = "DEBUG"
        config.app.default_locale = ""
        config.to_dict.return_value = {}
        with patch("main.Config", return_value=config), \
                patch("main.configure_logging"), \
                patch("main.DatabaseManager") as manager_cls, \
                patch("main.build_interpreter") as build:
            assert main.main(["--locale", "ru"]) == 0
        build.return_value.run.assert_called_once()
        assert build.call_args[0][2] == Locale("ru")
        assert build.call_args[0][0] is manager_cls.return_value.__enter__.return_value
        manager_cls.return_value.__exit__.assert_called_once()

    def test_incomplete_bundle_exits_with_1(self, tmp_path, capsys):
        config = Mock()
        config.app.log_dir = str(tmp_path)
        config.app.log_level = "DEBUG"
        config.to_dict.return_value = {}
        with patch("main.Config", return_value=config), \
                patch("main.configure_logging"), \
                patch("main.MESSAGES", {"en": {}, "ru": {}}), \
                patch("main.DatabaseManager") as manager_cls:
            assert main.main([]) == 1
        manager_cls.assert_not_called()
        assert "prompt.command" in capsys.readouterr().err
