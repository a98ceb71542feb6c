"""
MODULE: main
RESPONSIBILITY: Bootstrap the console: config, logging, DB, composition, loop.
ALLOWED: argparse, sys, loguru, config, core, services, console, utils.
FORBIDDEN: Command handling (see console.interpreter), SQL.
ERRORS: Exit code 1 on configuration or connection failure.

Точка входа консольного приложения для работы с таблицей entities.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from config.messages import MESSAGES, REQUIRED_KEYS
from config.settings import Config
from console.interpreter import CommandInterpreter
from core.database import DatabaseManager
from core.exceptions import ConfigurationError, DatabaseConnectionError, MessageNotFoundError
from services.record_repository import RecordRepository
from services.record_service import RecordService
from utils.i18n import ENGLISH, Locale, Translator, system_locale
from utils.logger_config import configure_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Console for creating, reading, updating and deleting rows of the entities table.",
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        default=None,
        help="Path to a .env file (default: .env in the working directory).",
    )
    parser.add_argument(
        "--locale",
        dest="locale",
        default=None,
        help="Initial locale, e.g. en or ru_RU (default: APP_LOCALE or the system locale).",
    )
    return parser.parse_args(argv)


def initial_locale(*candidates: Optional[str]) -> Locale:
    """Первая заданная локаль из кандидатов, иначе локаль системы."""
    for candidate in candidates:
        parsed = Locale.parse(candidate)
        if parsed is not None:
            return parsed
    return system_locale()


def build_interpreter(db_manager: DatabaseManager, translator: Translator, locale: Locale) -> CommandInterpreter:
    """Сборка слоёв: хранилище -> сервис -> интерпретатор."""
    repository = RecordRepository(db_manager)
    service = RecordService(repository)
    return CommandInterpreter(service, translator, locale)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    translator = Translator(MESSAGES, fallback=ENGLISH)

    try:
        config = Config(args.env_file)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(config.app.log_dir, config.app.log_level)
    logger.info(f"Запуск {config.app.app_name}: {config.to_dict()}")

    try:
        translator.check_keys(REQUIRED_KEYS)
    except MessageNotFoundError as e:
        logger.error(f"Неполный набор сообщений: {e}")
        print(f"Message bundle error: {e}", file=sys.stderr)
        return 1

    locale = initial_locale(args.locale, config.app.default_locale)
    try:
        # Сюда доходит только ошибка подключения
        with DatabaseManager(config.database) as db_manager:
            build_interpreter(db_manager, translator, locale).run()
    except DatabaseConnectionError:
        print(translator.translate("error.persistence", None, locale), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
