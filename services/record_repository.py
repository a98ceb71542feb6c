"""
MODULE: services.record_repository
RESPONSIBILITY: Persist Record rows in the `entities` table.
ALLOWED: typing, loguru, core.database, core.models.
FORBIDDEN: Business logic outside DB operations, message rendering.
ERRORS: DatabaseQueryError, DatabaseConnectionError (propagated).

Репозиторий записей.

Таблица: entities(id SERIAL PRIMARY KEY, name TEXT).
Порядок строк в find_all не гарантируется.
"""

from typing import List, Optional
from loguru import logger

from core.database import DatabaseManager
from core.models import Record


class RecordRepository:
    """Репозиторий для работы с таблицей entities"""

    TABLE_NAME = "entities"

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    def find_all(self) -> List[Record]:
        """Получение всех записей"""
        query = f"SELECT id, name FROM {self.TABLE_NAME}"
        results = self.db_manager.execute_query(query)
        return [Record.from_row(row) for row in results]

    def find_by_id(self, record_id: int) -> Optional[Record]:
        """Получение записи по ID; None, если строки нет"""
        query = f"SELECT id, name FROM {self.TABLE_NAME} WHERE id = %s"
        results = self.db_manager.execute_query(query, (record_id,))
        if not results:
            logger.debug(f"Запись id={record_id} не найдена")
            return None
        return Record.from_row(results[0])

    def insert(self, name: str) -> int:
        """Добавление записи; id назначает БД"""
        query = f"INSERT INTO {self.TABLE_NAME} (name) VALUES (%s)"
        affected = self.db_manager.execute_update(query, (name,))
        logger.info(f"Добавлена запись '{name}', затронуто строк: {affected}")
        return affected

    def update(self, record_id: int, name: str) -> int:
        """Изменение имени записи"""
        query = f"UPDATE {self.TABLE_NAME} SET name = %s WHERE id = %s"
        affected = self.db_manager.execute_update(query, (name, record_id))
        logger.info(f"Обновление записи id={record_id}, затронуто строк: {affected}")
        return affected

    def delete(self, record_id: int) -> int:
        """Удаление записи"""
        query = f"DELETE FROM {self.TABLE_NAME} WHERE id = %s"
        affected = self.db_manager.execute_update(query, (record_id,))
        logger.info(f"Удаление записи id={record_id}, затронуто строк: {affected}")
        return affected
