"""
Настройка логирования для проекта.
Логи выводятся только в файлы: stdout занят диалогом с пользователем.
"""
from pathlib import Path

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def configure_logging(log_dir: str = "logs", level: str = "INFO") -> Path:
    """
    Переключает loguru на файловые обработчики.

    :param log_dir: Директория для app.log и errors.log
    :param level: Минимальный уровень для app.log
    :return: Путь к директории логов
    """
    # Удаляем стандартный обработчик loguru (который выводит в консоль)
    logger.remove()

    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)

    logger.add(
        path / "app.log",
        level=level,
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        format=LOG_FORMAT,
        encoding="utf-8",
    )

    # Добавляем обработчик для ошибок в файл
    logger.add(
        path / "errors.log",
        level="ERROR",
        rotation="1 week",
        compression="zip",
        format=LOG_FORMAT,
        backtrace=True,
        diagnose=False,
        encoding="utf-8",
    )
    return path


def get_logger():
    """Возвращает настроенный logger."""
    return logger
