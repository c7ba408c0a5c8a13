# -*- coding: utf-8 -*-
"""
Перенаправление логов uvicorn, FastAPI и SQLAlchemy в loguru.
"""

import logging

from edubase.config.logger import InterceptHandler

INTERCEPTED_LOGGERS = (
    "uvicorn",
    "uvicorn.error",
    "fastapi",
    "sqlalchemy.engine",
    "sqlalchemy.pool",
)


def setup_uvicorn_logging() -> None:
    """Настраивает перехват логов uvicorn для единообразного вывода."""
    for logger_name in (*INTERCEPTED_LOGGERS, "uvicorn.access"):
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers.clear()
        logger_obj.propagate = False

    for logger_name in INTERCEPTED_LOGGERS:
        logging.getLogger(logger_name).handlers = [InterceptHandler()]

    # SQLAlchemy пишет только предупреждения и ошибки
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
