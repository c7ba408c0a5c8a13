# -*- coding: utf-8 -*-
"""
Настройка логирования для edubase с использованием loguru.
"""
import logging
import sys

from loguru import logger

from edubase.config.settings import settings

# Удаляем стандартный хендлер loguru
logger.remove()


class InterceptHandler(logging.Handler):
    """Перехватывает стандартные логи и перенаправляет их в loguru."""

    def emit(self, record):
        # Пропускаем uvicorn INFO логи (Will watch, Uvicorn running, etc.)
        if record.name.startswith("uvicorn") and record.levelno == logging.INFO:
            return

        if record.name.startswith(("httpx", "httpcore")):
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# Настраиваем перехват всех стандартных логов
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

log_level = settings.log_level.upper()

console_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Формат для системных сообщений (без файловых путей)
system_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>SYSTEM</cyan> | "
    "<level>{message}</level>"
)

logger.add(
    sys.stdout,
    format=console_format,
    level="DEBUG" if settings.debug else log_level,
    colorize=True,
    backtrace=False,
    diagnose=False,
    filter=lambda record: record["extra"].get("system") is not True,
)

logger.add(
    sys.stdout,
    format=system_format,
    level=log_level,
    colorize=True,
    backtrace=False,
    diagnose=False,
    filter=lambda record: record["extra"].get("system") is True,
)


def configure_logger(name: str = "edubase"):
    """
    Возвращает общий логгер приложения.

    Args:
        name: Имя логгера (привязывается как extra["component"])

    Returns:
        loguru.Logger: Настроенный логгер
    """
    return logger.bind(component=name)


def get_system_logger():
    """
    Получает логгер для системных сообщений без файловых путей.

    Returns:
        loguru.Logger: Настроенный логгер для системных сообщений
    """
    return logger.bind(system=True)
