"""
Утилиты проекта: логирование и локализация.
"""
from .logger_config import configure_logging, get_logger
from .i18n import ENGLISH, RUSSIAN, Locale, Translator, resolve_language_code, system_locale

__all__ = [
    'configure_logging',
    'get_logger',
    'ENGLISH',
    'RUSSIAN',
    'Locale',
    'Translator',
    'resolve_language_code',
    'system_locale',
]
