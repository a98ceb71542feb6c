"""
MODULE: core.interfaces
RESPONSIBILITY: Define Protocols for dependency injection.
ALLOWED: Typing imports, Protocol.
FORBIDDEN: Implementation details, concrete classes (except data structures).
ERRORS: None.

Интерфейсы (Protocol) для модульного проектирования

Определяет контракты между интерпретатором команд, сервисом и хранилищем,
обеспечивая слабую связанность и возможность тестирования.
"""

from typing import Protocol, Optional, List, Sequence, Any

from core.models import Record


class IRecordRepository(Protocol):
    """Интерфейс для хранилища записей"""

    def find_all(self) -> List[Record]:
        """Получение всех записей (порядок не гарантируется)"""
        ...

    def find_by_id(self, record_id: int) -> Optional[Record]:
        """Получение записи по ID; None, если записи нет"""
        ...

    def insert(self, name: str) -> int:
        """Добавление записи, возвращает количество затронутых строк"""
        ...

    def update(self, record_id: int, name: str) -> int:
        """Изменение имени записи, возвращает количество затронутых строк"""
        ...

    def delete(self, record_id: int) -> int:
        """Удаление записи, возвращает количество затронутых строк"""
        ...


class ITranslator(Protocol):
    """Интерфейс для локализации сообщений"""

    def translate(self, key: str, args: Optional[Sequence[Any]], locale: Any) -> str:
        """Получение локализованного сообщения по ключу"""
        ...
