"""
MODULE: config.messages
RESPONSIBILITY: Message templates for every supported locale.
ALLOWED: Plain data.
FORBIDDEN: Lookup logic (see utils.i18n).
ERRORS: None.

Шаблоны сообщений консоли по тегам локалей.
Подстановки позиционные: {0}, {1} (str.format).
"""

MESSAGES = {
    "en": {
        "prompt.command": "Enter command (find-all, find <id>, add <name>, edit <id> <name>, delete <id>, lang <en|ru>, exit):",
        "entity.format": "Entity{{id={0}, name={1}}}",
        "error.not.found": "Entity not found.",
        "error.invalid.id": "Invalid id: an integer is expected.",
        "error.missing.parameter": "Missing parameter for the command.",
        "error.unexpected.parameter": "The command does not take parameters.",
        "error.unknown.command": "Unknown command.",
        "error.unknown.language": "Unknown language. Supported: en, ru.",
        "error.persistence": "The operation failed: the database is unavailable or rejected the request.",
        "info.language.changed": "Language changed to {0}.",
        "success.add": "Entity added.",
        "error.add": "Entity was not added.",
        "success.update": "Entity updated.",
        "success.delete": "Entity deleted.",
    },
    "ru": {
        "prompt.command": "Введите команду (find-all, find <id>, add <имя>, edit <id> <имя>, delete <id>, lang <en|ru>, exit):",
        "entity.format": "Сущность{{id={0}, имя={1}}}",
        "error.not.found": "Сущность не найдена.",
        "error.invalid.id": "Неверный id: ожидается целое число.",
        "error.missing.parameter": "Не указан параметр команды.",
        "error.unexpected.parameter": "Команда не принимает параметров.",
        "error.unknown.command": "Неизвестная команда.",
        "error.unknown.language": "Неизвестный язык. Поддерживаются: en, ru.",
        "error.persistence": "Операция не выполнена: база данных недоступна или отклонила запрос.",
        "info.language.changed": "Язык изменён на {0}.",
        "success.add": "Сущность добавлена.",
        "error.add": "Сущность не добавлена.",
        "success.update": "Сущность обновлена.",
        "success.delete": "Сущность удалена.",
    },
}

# Ключи, которые обязана содержать каждая локаль
REQUIRED_KEYS = (
    "prompt.command",
    "error.not.found",
    "error.invalid.id",
    "error.missing.parameter",
    "error.unknown.command",
    "error.unknown.language",
    "info.language.changed",
    "entity.format",
    "success.add",
    "error.add",
    "success.update",
    "success.delete",
    "error.unexpected.parameter",
    "error.persistence",
)
