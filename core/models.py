"""
MODULE: core.models
RESPONSIBILITY: Define domain data structures (dataclasses).
ALLOWED: Dataclasses, Typing.
FORBIDDEN: Business logic, database operations.
ERRORS: None.

Модель записи таблицы entities.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Record:
    """
    Запись хранилища

    Значения, возвращаемые вызывающему коду, являются независимыми снимками
    строки таблицы и не связаны с хранилищем.

    Attributes:
        id: Идентификатор, назначенный хранилищем
        name: Имя, заданное пользователем
    """
    id: int
    name: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Record":
        """Создание записи из строки результата (RealDictCursor)"""
        return cls(id=int(row["id"]), name=row["name"])
