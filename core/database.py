"""
MODULE: core.database
RESPONSIBILITY: Low-level PostgreSQL connection management.
ALLOWED: psycopg2, loguru.
FORBIDDEN: Business logic, specific record operations (use repositories).
ERRORS: DatabaseConnectionError, DatabaseQueryError.

Менеджер базы данных консольного приложения

Одно подключение на сессию: приложение однопользовательское и синхронное,
поэтому пул соединений и Singleton не нужны.
"""

import psycopg2
from psycopg2.extras import RealDictCursor
from typing import List, Dict, Any, Optional, Tuple
from loguru import logger

from config.settings import DatabaseConfig
from core.exceptions import DatabaseConnectionError, DatabaseQueryError


class DatabaseManager:
    """
    Менеджер для работы с PostgreSQL базой данных

    Предоставляет методы для выполнения SQL запросов
    с автоматической обработкой ошибок и логированием.

    Attributes:
        db_config: Конфигурация подключения к БД
        connection: Активное подключение к PostgreSQL
    """

    def __init__(self, db_config: DatabaseConfig):
        """
        Инициализация менеджера базы данных

        Args:
            db_config: Конфигурация подключения к БД
        """
        self.db_config = db_config
        self.connection: Optional[psycopg2.extensions.connection] = None

    def connect(self) -> None:
        """
        Установка соединения с базой данных

        Создает подключение к PostgreSQL используя параметры из конфигурации.
        Использует RealDictCursor для возврата результатов в виде словарей.

        Raises:
            DatabaseConnectionError: При ошибке подключения
        """
        try:
            self.connection = psycopg2.connect(
                host=self.db_config.host,
                database=self.db_config.database,
                user=self.db_config.user,
                password=self.db_config.password,
                port=self.db_config.port,
                cursor_factory=RealDictCursor
            )
            logger.info(f"Успешное подключение к БД: {self.db_config.database}")

        except psycopg2.OperationalError as e:
            error_msg = f"Ошибка подключения к БД {self.db_config.database}: {e}"
            logger.error(error_msg)
            raise DatabaseConnectionError(error_msg) from e

    def _require_connection(self) -> None:
        if self.connection is None or self.connection.closed:
            raise DatabaseConnectionError("Нет активного подключения к БД")

    def _fail(self, error: psycopg2.Error, error_msg: str) -> None:
        """
        Откат транзакции после ошибки и перевод её в исключение приложения

        Raises:
            DatabaseConnectionError: Сервер разорвал соединение
            DatabaseQueryError: Остальные ошибки запроса
        """
        logger.error(error_msg)
        if self.connection.closed:
            raise DatabaseConnectionError(error_msg) from error
        try:
            self.connection.rollback()
        except psycopg2.Error as rollback_error:
            logger.warning(f"Не удалось откатить транзакцию: {rollback_error}")
            if self.connection.closed:
                raise DatabaseConnectionError(error_msg) from error
        raise DatabaseQueryError(error_msg) from error

    def execute_query(self, query: str, params: Optional[Tuple] = None) -> List[Dict[str, Any]]:
        """
        Выполнение SELECT запроса

        Args:
            query: SQL запрос
            params: Параметры для запроса

        Returns:
            Список словарей с результатами

        Raises:
            DatabaseQueryError: При ошибке выполнения запроса
        """
        self._require_connection()

        try:
            with self.connection.cursor(cursor_factory=RealDictCursor) as cursor:
                cursor.execute(query, params or ())
                result = [dict(row) for row in cursor.fetchall()] if cursor.description is not None else []
            # SELECT тоже открывает транзакцию, закрываем её сразу
            self.connection.commit()
            logger.debug(f"Выполнен SELECT запрос, возвращено {len(result)} строк")
            return result

        except psycopg2.Error as e:
            self._fail(e, f"Ошибка выполнения запроса: {e}\nЗапрос: {query}")

    def execute_update(self, query: str, params: Optional[Tuple] = None) -> int:
        """
        Выполнение INSERT/UPDATE/DELETE запроса

        Returns:
            Количество затронутых строк

        Raises:
            DatabaseQueryError: При ошибке выполнения запроса
        """
        self._require_connection()

        try:
            with self.connection.cursor() as cursor:
                cursor.execute(query, params or ())
                affected_rows = cursor.rowcount
            self.connection.commit()
            logger.debug(f"Выполнен DML запрос, затронуто строк: {affected_rows}")
            return affected_rows

        except psycopg2.Error as e:
            self._fail(e, f"Ошибка выполнения DML запроса: {e}\nЗапрос: {query}")

    def close(self) -> None:
        """Закрытие соединения с БД"""
        try:
            if self.connection is not None and not self.connection.closed:
                self.connection.close()
                logger.info("Соединение с БД закрыто")
        except psycopg2.Error as e:
            logger.warning(f"Ошибка при закрытии соединения с БД: {e}")
        finally:
            self.connection = None

    def __enter__(self):
        """Поддержка контекстного менеджера"""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Автоматическое закрытие соединения"""
        self.close()
