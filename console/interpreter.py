"""
Интерпретатор команд консоли.

Цикл: приглашение -> чтение строки -> разбор -> вызов сервиса -> вывод
локализованного результата. Ошибка отдельной команды не завершает сессию;
сессию завершают только exit и конец ввода.
"""
import sys
from enum import Enum
from typing import Callable, Dict, List, Optional, TextIO

from loguru import logger

from console.commands import Verb, parse_id, parse_line
from core.exceptions import (
    CommandError,
    DatabaseConnectionError,
    DatabaseQueryError,
    RecordNotFoundError,
    UnknownLanguageError,
)
from core.interfaces import ITranslator
from core.models import Record
from services.record_service import RecordService
from utils.i18n import Locale, resolve_language_code, system_locale


class SessionState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandInterpreter:
    """
    Построчный интерпретатор команд над RecordService

    Attributes:
        locale: Активная локаль сессии (меняется только командой lang)
        state: RUNNING или TERMINATED
    """

    def __init__(
        self,
        service: RecordService,
        translator: ITranslator,
        locale: Optional[Locale] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.service = service
        self.translator = translator
        self.locale = locale or system_locale()
        self.state = SessionState.RUNNING
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._handlers: Dict[Verb, Callable[..., List[str]]] = {
            Verb.FIND_ALL: self._find_all,
            Verb.FIND: self._find,
            Verb.ADD: self._add,
            Verb.EDIT: self._edit,
            Verb.DELETE: self._delete,
            Verb.LANG: self._lang,
            Verb.EXIT: self._exit,
        }

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def _t(self, key: str, *args) -> str:
        return self.translator.translate(key, args, self.locale)

    def format_record(self, record: Record) -> str:
        return self._t("entity.format", record.id, record.name)

    def run(self) -> None:
        """Блокирующий цикл чтения команд до exit или конца ввода."""
        logger.info(f"Сессия начата, локаль {self.locale.tag}")
        while self.running:
            self._write(self._t("prompt.command"))
            try:
                line = self._stdin.readline()
                if not line:
                    # Конец ввода - обычное завершение
                    self.state = SessionState.TERMINATED
                    break
                outputs = self.process_line(line)
            except KeyboardInterrupt:
                # Ctrl-C при ожидании ввода или во время команды
                logger.info("Сессия прервана пользователем")
                self.state = SessionState.TERMINATED
                break
            for output in outputs:
                self._write(output)
        logger.info("Сессия завершена")

    def process_line(self, line: str) -> List[str]:
        """
        Выполнение одной строки ввода

        Args:
            line: Строка команды

        Returns:
            Локализованные строки вывода (возможно, ни одной)
        """
        try:
            command = parse_line(line)
            if command is None:
                return []
            logger.debug(f"Команда {command.verb.value} {command.args}")
            return self._handlers[command.verb](*command.args)
        except CommandError as e:
            logger.debug(f"Ошибка команды '{line.strip()}': {type(e).__name__} {e.detail}")
            return [self._t(e.message_key)]
        except (DatabaseQueryError, DatabaseConnectionError) as e:
            logger.exception(f"Ошибка БД при выполнении '{line.strip()}': {e}")
            return [self._t("error.persistence")]

    def _write(self, text: str) -> None:
        self._stdout.write(text + "\n")
        self._stdout.flush()

    # ---- обработчики команд ----

    def _find_all(self) -> List[str]:
        return [self.format_record(record) for record in self.service.list_all()]

    def _find(self, raw_id: str) -> List[str]:
        record = self.service.get_by_id(parse_id(raw_id))
        if record is None:
            raise RecordNotFoundError(raw_id)
        return [self.format_record(record)]

    def _add(self, name: str) -> List[str]:
        if self.service.create(name) > 0:
            return [self._t("success.add")]
        return [self._t("error.add")]

    def _edit(self, raw_id: str, name: str) -> List[str]:
        record_id = parse_id(raw_id)
        if self.service.update(record_id, name) <= 0:
            raise RecordNotFoundError(raw_id)
        return [self._t("success.update")]

    def _delete(self, raw_id: str) -> List[str]:
        record_id = parse_id(raw_id)
        if self.service.delete(record_id) <= 0:
            raise RecordNotFoundError(raw_id)
        return [self._t("success.delete")]

    def _lang(self, code: str) -> List[str]:
        new_locale = resolve_language_code(code)
        if new_locale is None:
            raise UnknownLanguageError(code)
        self.locale = new_locale
        logger.info(f"Локаль изменена на {new_locale.tag}")
        return [self._t("info.language.changed", new_locale.display_language())]

    def _exit(self) -> List[str]:
        self.state = SessionState.TERMINATED
        return []
