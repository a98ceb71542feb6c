"""
Локализация сообщений консоли.

Шаблоны загружаются один раз при старте и дальше не меняются.
Если ключа нет в активной локали, используется резервная (английская).
"""
import locale as _locale
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Sequence

from loguru import logger

from core.exceptions import MessageNotFoundError


# Название языка на нём самом, как его показывает getDisplayLanguage(locale)
_DISPLAY_LANGUAGES = {
    "en": "English",
    "ru": "русский",
}


@dataclass(frozen=True)
class Locale:
    """Язык и (необязательно) регион."""
    language: str
    country: str = ""

    @property
    def tag(self) -> str:
        return f"{self.language}_{self.country}" if self.country else self.language

    def display_language(self) -> str:
        """Название языка в самой локали ("English", "русский")."""
        return _DISPLAY_LANGUAGES.get(self.language, self.language)

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Locale"]:
        """
        Разбирает строку вида "ru_RU.UTF-8", "en-US" или "en".

        :param value: Строка локали из окружения или конфигурации
        :return: Locale или None для пустых значений и "C"/"POSIX"
        """
        if not value:
            return None
        value = value.split(".", 1)[0].split("@", 1)[0].replace("-", "_").strip()
        if not value or value.upper() in ("C", "POSIX"):
            return None
        language, _, country = value.partition("_")
        if not language.isalpha():
            return None
        return cls(language.lower(), country.upper())


ENGLISH = Locale("en")
RUSSIAN = Locale("ru", "RU")

SUPPORTED_LANGUAGES = {
    "en": ENGLISH,
    "ru": RUSSIAN,
}


def resolve_language_code(code: str) -> Optional[Locale]:
    """Код команды lang -> Locale; None для неподдерживаемого кода."""
    return SUPPORTED_LANGUAGES.get(code.strip().lower())


def system_locale() -> Locale:
    """
    Локаль процесса по умолчанию.

    Сначала locale.getlocale(), затем переменные LC_ALL, LC_MESSAGES, LANG.
    Если ничего пригодного не задано, возвращается английская локаль.
    """
    candidates = []
    try:
        candidates.append(_locale.getlocale()[0])
    except ValueError as e:
        logger.debug(f"Не удалось определить локаль процесса: {e}")
    candidates.extend(os.environ.get(name) for name in ("LC_ALL", "LC_MESSAGES", "LANG"))

    for candidate in candidates:
        parsed = Locale.parse(candidate)
        if parsed is not None:
            return parsed
    return ENGLISH


class Translator:
    """Поиск шаблона по (ключ, локаль) и подстановка аргументов."""

    def __init__(self, messages: Mapping[str, Mapping[str, str]], fallback: Locale = ENGLISH):
        """
        :param messages: Тег локали -> ключ -> шаблон
        :param fallback: Локаль, используемая при отсутствии ключа в активной
        """
        self._messages = MappingProxyType({
            tag: MappingProxyType(dict(templates)) for tag, templates in messages.items()
        })
        self.fallback = fallback

    def _candidate_tags(self, locale: Locale):
        tags = [locale.tag, locale.language, self.fallback.tag, self.fallback.language]
        seen = set()
        for tag in tags:
            if tag not in seen:
                seen.add(tag)
                yield tag

    def resolve(self, key: str, locale: Locale) -> str:
        """
        Шаблон сообщения без подстановки аргументов.

        :raises MessageNotFoundError: Ключа нет ни в локали, ни в резервной
        """
        for tag in self._candidate_tags(locale):
            bundle = self._messages.get(tag)
            if bundle is not None and key in bundle:
                return bundle[key]
        raise MessageNotFoundError(key, locale.tag)

    def translate(self, key: str, args: Optional[Sequence[Any]], locale: Locale) -> str:
        """
        Локализованное сообщение.

        :param key: Ключ сообщения, например "error.not.found"
        :param args: Позиционные аргументы шаблона или None
        :param locale: Активная локаль
        :return: Готовая строка
        """
        template = self.resolve(key, locale)
        return template.format(*(args or ()))

    def check_keys(self, keys: Iterable[str]) -> None:
        """
        Проверка набора сообщений при старте.

        Ключ, которого нет в резервной локали, не найдётся ни для какой
        локали. Пропуски в остальных локалях закрывает резервная.

        :param keys: Ключи, обязательные для работы консоли
        :raises MessageNotFoundError: Ключа нет в резервной локали
        """
        for key in keys:
            self.resolve(key, self.fallback)
            for tag, bundle in self._messages.items():
                if key not in bundle:
                    logger.warning(f"В локали {tag} нет сообщения '{key}', используется {self.fallback.tag}")
