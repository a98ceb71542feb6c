"""
Сервис для работы с записями.

Тонкий слой над хранилищем: одна операция на каждый CRUD-глагол,
без дополнительных бизнес-правил (пустые имена принимаются как есть).
"""

from typing import List, Optional

from core.interfaces import IRecordRepository
from core.models import Record


class RecordService:
    """Сервис для работы с записями."""

    def __init__(self, repository: IRecordRepository):
        self.repository = repository

    def list_all(self) -> List[Record]:
        """Все записи (возможно, пустой список)."""
        return self.repository.find_all()

    def get_by_id(self, record_id: int) -> Optional[Record]:
        """Запись по ID или None."""
        return self.repository.find_by_id(record_id)

    def create(self, name: str) -> int:
        """Создание записи; > 0 затронутых строк означает успех."""
        return self.repository.insert(name)

    def update(self, record_id: int, name: str) -> int:
        """Изменение имени; 0 затронутых строк означает, что ID нет."""
        return self.repository.update(record_id, name)

    def delete(self, record_id: int) -> int:
        """Удаление записи; 0 затронутых строк означает, что ID нет."""
        return self.repository.delete(record_id)
