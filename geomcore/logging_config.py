"""
Logging — настройка логгера пакета geomcore

Модули библиотеки пишут только DEBUG-записи через
logging.getLogger(__name__):
- фабрики: приведение запрошенных dimension/measures
- линейный солвер: причина отсутствия решения

Библиотека сама handlers не добавляет; приложение или тест вызывает
setup_logging, чтобы увидеть эти записи.
"""

import logging
import sys
from typing import Final, Optional

# =============================================================================
# ПАРАМЕТРЫ ЛОГИРОВАНИЯ
# =============================================================================

PACKAGE_LOGGER_NAME: Final[str] = "geomcore"

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Настройка логгера "geomcore": вывод в stdout и, опционально, в файл.

    Повторный вызов заменяет ранее установленные handlers, поэтому записи
    не дублируются.

    Args:
        level: Уровень логгера и handlers (logging.DEBUG для записей библиотеки)
        log_file: Путь к файлу лога (перезаписывается); None — только stdout

    Returns:
        Настроенный логгер пакета
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging initialized.")
    return package_logger
