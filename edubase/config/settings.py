# -*- coding: utf-8 -*-
"""
edubase/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Этот модуль загружает конфигурацию из .env файла или переменных окружения,
предоставляя централизованную систему управления настройками.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Корень проекта (каталог с pyproject.toml)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ROOT_ENV_PATH = (BASE_DIR / ".env").resolve()
PACKAGE_ENV_PATH = (BASE_DIR / "edubase" / ".env").resolve()


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из .env файла."""

    # Приоритет: 1) корневой .env файл, 2) .env пакета, 3) только окружение
    _env_file = None
    if ROOT_ENV_PATH.exists():
        _env_file = ROOT_ENV_PATH
    elif PACKAGE_ENV_PATH.exists():
        _env_file = PACKAGE_ENV_PATH

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str | None = None
    postgres_db: str = "edubase"
    postgres_user: str = "edubase"
    postgres_password: str = "edubase"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    sql_echo: bool = False

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # Конфигурация логирования
    log_level: str = "INFO"
    debug: bool = False

    # Конфигурация CORS
    cors_allow_origins: str = ""
    cors_allow_credentials: bool = True

    def get_allowed_origins(self) -> list[str]:
        """Формирует список разрешённых origins для CORS."""
        if self.cors_allow_origins:
            return [
                origin.strip()
                for origin in self.cors_allow_origins.split(",")
                if origin.strip()
            ]
        return ["*"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.database_url:
            self.database_url = self._build_database_url()

    def _build_database_url(self) -> str:
        """Собрать URL базы данных из отдельных компонентов."""
        driver = "postgresql+asyncpg"
        return f"{driver}://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ROOT_ENV_PATH.exists():
            return f"root: {ROOT_ENV_PATH}"
        elif PACKAGE_ENV_PATH.exists():
            return f"package: {PACKAGE_ENV_PATH}"
        else:
            return "environment variables only"


settings = Settings()
