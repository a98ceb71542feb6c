"""
Разбор строки ввода в команду.

Команда определяется точным совпадением первого слова (без учёта регистра):
"addendum" не считается командой add. Последний аргумент забирает остаток
строки целиком, поэтому имя может содержать пробелы.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from core.exceptions import (
    InvalidIdError,
    MissingParameterError,
    UnexpectedParameterError,
    UnknownCommandError,
)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Диапазон INTEGER в PostgreSQL
ID_MIN = -2**31
ID_MAX = 2**31 - 1


class Verb(str, Enum):
    """Команды консоли и число их аргументов"""
    FIND_ALL = "find-all"
    FIND = "find"
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"
    LANG = "lang"
    EXIT = "exit"

    @property
    def arity(self) -> int:
        return _ARITY[self]


_ARITY = {
    Verb.FIND_ALL: 0,
    Verb.FIND: 1,
    Verb.ADD: 1,
    Verb.EDIT: 2,
    Verb.DELETE: 1,
    Verb.LANG: 1,
    Verb.EXIT: 0,
}


@dataclass(frozen=True)
class Command:
    verb: Verb
    args: Tuple[str, ...] = ()


def parse_line(line: str) -> Optional[Command]:
    """
    Классифицирует строку по первому слову и выделяет аргументы.

    :param line: Строка, введённая пользователем
    :return: Command или None для пустой строки
    :raises UnknownCommandError: Первое слово не является командой
    :raises MissingParameterError: Аргументов меньше, чем нужно команде
    :raises UnexpectedParameterError: Аргументы у команды без параметров
    """
    text = line.strip()
    if not text:
        return None

    head = text.split(None, 1)
    try:
        verb = Verb(head[0].lower())
    except ValueError:
        raise UnknownCommandError(head[0]) from None

    if verb.arity == 0:
        if len(head) > 1:
            raise UnexpectedParameterError(head[1])
        return Command(verb)

    parts = text.split(None, verb.arity)
    if len(parts) != verb.arity + 1:
        raise MissingParameterError(verb.value)
    return Command(verb, tuple(parts[1:]))


def parse_id(token: str) -> int:
    """
    Разбирает ID записи.

    :raises InvalidIdError: Не целое число или вне диапазона INTEGER
    """
    value = token.strip()
    if not _ID_PATTERN.fullmatch(value):
        raise InvalidIdError(token)
    record_id = int(value)
    if not ID_MIN <= record_id <= ID_MAX:
        raise InvalidIdError(token)
    return record_id
