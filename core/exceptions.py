"""
MODULE: core.exceptions
RESPONSIBILITY: Define core-specific exception classes.
ALLOWED: Inheriting from ConsoleAppError.
FORBIDDEN: Business logic.
ERRORS: None.

Пользовательские исключения приложения
"""

class ConsoleAppError(Exception):
    """Базовое исключение приложения"""
    pass

class DatabaseConnectionError(ConsoleAppError):
    """Ошибка подключения к базе данных"""
    pass

class DatabaseQueryError(ConsoleAppError):
    """Ошибка выполнения запроса к базе данных"""
    pass

class ConfigurationError(ConsoleAppError):
    """Ошибка конфигурации приложения"""
    pass


class MessageNotFoundError(ConsoleAppError):
    """Сообщение не найдено ни для активной, ни для резервной локали"""

    def __init__(self, key: str, locale_tag: str):
        super().__init__(f"Нет сообщения '{key}' для локали '{locale_tag}'")
        self.key = key
        self.locale_tag = locale_tag


class CommandError(ConsoleAppError):
    """
    Ошибка обработки команды, показываемая пользователю

    Attributes:
        message_key: Ключ локализованного сообщения
    """
    message_key = "error.unknown.command"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message_key)
        self.detail = detail

class MissingParameterError(CommandError):
    """Строка не разбилась на нужное число частей"""
    message_key = "error.missing.parameter"

class UnexpectedParameterError(CommandError):
    """Лишние аргументы у команды без параметров"""
    message_key = "error.unexpected.parameter"

class InvalidIdError(CommandError):
    """ID не является целым числом"""
    message_key = "error.invalid.id"

class RecordNotFoundError(CommandError):
    """Записи с таким ID нет"""
    message_key = "error.not.found"

class UnknownCommandError(CommandError):
    """Первое слово строки не является командой"""
    message_key = "error.unknown.command"

class UnknownLanguageError(CommandError):
    """Код языка не поддерживается"""
    message_key = "error.unknown.language"
