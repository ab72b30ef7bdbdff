"""
Модуль base.py - настройки сервиса.

Агрегирует параметры конфигурации в один объект Settings:
- Логирование (logging)
- Окружение и env-файл (paths)
- База данных (database)
- Идентификация запроса (identity)
- Побочные эффекты: аудит, уведомления (side_effects)
- Приглашения (invitations)
- Хранилище вложений (storage)
- Кэш представлений (cache)

Экспортируемые объекты:
- Settings: Главный класс настроек приложения (через pydantic-settings).
"""

import logging
import os
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import PostgresDsn, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class PathSettings(BaseSettings):
    """
    Определение корня проекта и используемого env-файла.

    Атрибуты класса:
        PROJECT_ROOT (Path): Корневая директория проекта.
        APP_DIR (Path): Директория с исходным кодом приложения (src).
    """

    @staticmethod
    def find_project_root() -> Path:
        """
        Находит корень проекта по маркерным файлам (.git, pyproject.toml).

        Returns:
            Path: Путь к корню проекта или текущая директория.
        """
        current_dir = Path.cwd()
        markers = [".git", "pyproject.toml"]

        for parent in [current_dir, *current_dir.parents]:
            if any((parent / marker).exists() for marker in markers):
                return parent

        logger.warning(
            "Не удалось определить корень проекта, используем текущую директорию"
        )
        return current_dir

    PROJECT_ROOT: ClassVar[Path] = find_project_root()
    APP_DIR: ClassVar[Path] = PROJECT_ROOT / "src"

    @staticmethod
    def get_env_file_and_type() -> tuple[Path, str]:
        """
        Определяет путь к env-файлу и тип окружения.

        - ENV_FILE задан явно: test, если в имени есть ".env.test", иначе custom.
        - Есть .env.dev: development.
        - Иначе .env и production.

        Returns:
            tuple[Path, str]: Путь к env-файлу и тип окружения.
        """
        env_file_path = os.getenv("ENV_FILE")
        if env_file_path:
            env_path = Path(env_file_path)
            env_type = "test" if ".env.test" in str(env_path) else "custom"
        elif Path(".env.dev").exists():
            env_path = Path(".env.dev")
            env_type = "development"
        else:
            env_path = Path(".env")
            env_type = "production"
        logger.info("Запуск в режиме: %s", env_type.upper())
        logger.info("Конфигурация: %s", env_path)

        return env_path, env_type


env_file_path, app_env = PathSettings.get_env_file_and_type()


class _EnvSettings(BaseSettings):
    """Общая конфигурация чтения env-файла для групп настроек."""

    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


class LoggingSettings(_EnvSettings):
    """
    Конфигурация логирования.

    Атрибуты:
        LOG_LEVEL (str): Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FORMAT (str): Формат консольного вывода (pretty, json).
        LOG_FILE (Optional[str]): Путь к файлу логов; пусто - только консоль.
        ENCODING (str): Кодировка файла логов.
        FILE_MODE (str): Режим открытия файла логов.
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "pretty"
    LOG_FILE: Optional[str] = None
    ENCODING: str = "utf-8"
    FILE_MODE: str = "a"

    PRETTY_FORMAT: str = (
        "\033[1;36m%(asctime)s\033[0m - \033[1;32m%(name)s\033[0m - "
        "\033[1;33m%(levelname)s\033[0m - %(message)s"
    )
    JSON_FIELDS: str = "%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s"

    @property
    def is_json_format(self) -> bool:
        """Проверяет, используется ли JSON формат"""
        return self.LOG_FORMAT.lower() == "json"


class DatabaseSettings(_EnvSettings):
    """
    Подключение к PostgreSQL.

    Если задан DATABASE_URL, он используется как есть (например, sqlite+aiosqlite
    в тестовом окружении); иначе DSN собирается из POSTGRES_*.
    """

    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: SecretStr = SecretStr("postgres")
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DATABASE: str = "tracker"
    ECHO: bool = False
    POOL_SIZE: int = 10

    @property
    def database_dsn(self) -> PostgresDsn:
        """
        Создает DSN для подключения к PostgreSQL.

        Returns:
            PostgresDsn: DSN для драйвера asyncpg.
        """
        return PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD.get_secret_value(),
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            path=self.POSTGRES_DATABASE,
        )

    @property
    def url(self) -> str:
        """Строка подключения для SQLAlchemy."""
        return self.DATABASE_URL or str(self.database_dsn)

    @property
    def engine_params(self) -> Dict[str, Any]:
        """Параметры create_async_engine."""
        params: Dict[str, Any] = {"echo": self.ECHO, "pool_pre_ping": True}
        if self.url.startswith("postgresql"):
            params["pool_size"] = self.POOL_SIZE
        return params

    @property
    def session_params(self) -> Dict[str, Any]:
        """Параметры async_sessionmaker."""
        return {"autocommit": False, "autoflush": False, "expire_on_commit": False}


class IdentitySettings(_EnvSettings):
    """
    Имена заголовков, в которых провайдер сессий (gateway) передаёт
    идентификатор и email аутентифицированного пользователя.
    """

    USER_ID_HEADER: str = "X-User-Id"
    USER_EMAIL_HEADER: str = "X-User-Email"


class SideEffectSettings(_EnvSettings):
    """
    Параметры best-effort побочных эффектов (журнал активности, уведомления,
    инвалидация кэша представлений).

    Атрибуты:
        SIDE_EFFECT_MAX_ATTEMPTS (int): Сколько раз пробуем выполнить эффект.
        SIDE_EFFECT_RETRY_DELAY (float): Пауза между попытками, секунды.
        SIDE_EFFECT_CONCURRENCY (int): Сколько эффектов одной команды
            выполняется одновременно; не больше размера пула соединений.
    """

    SIDE_EFFECT_MAX_ATTEMPTS: int = 3
    SIDE_EFFECT_RETRY_DELAY: float = 0.05
    SIDE_EFFECT_CONCURRENCY: int = 5


class InvitationSettings(_EnvSettings):
    """Срок жизни приглашения в workspace."""

    INVITATION_EXPIRE_DAYS: int = 7


class StorageSettings(_EnvSettings):
    """S3-совместимое хранилище вложений (AWS S3, MinIO)."""

    AWS_ENDPOINT: Optional[str] = None
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[SecretStr] = None
    AWS_BUCKET_NAME: str = "attachments"


class CacheSettings(_EnvSettings):
    """
    Кэш отрендеренных представлений проектов.

    Без REDIS_URL инвалидация только пишется в лог.
    """

    REDIS_URL: Optional[str] = None
    VIEW_CACHE_PREFIX: str = "view"


class Settings(BaseSettings):
    """
    Главный класс настроек приложения.

    Атрибуты:
        logging (LoggingSettings): Настройки логирования.
        database (DatabaseSettings): Подключение к БД.
        identity (IdentitySettings): Заголовки идентификации.
        side_effects (SideEffectSettings): Повторы побочных эффектов.
        invitations (InvitationSettings): Срок жизни приглашений.
        storage (StorageSettings): Хранилище вложений.
        cache (CacheSettings): Кэш представлений.

    Свойства:
        app_params (dict): Параметры для FastAPI.
        uvicorn_params (dict): Параметры для запуска uvicorn.
    """

    app_env: str = app_env

    logging: LoggingSettings = LoggingSettings()
    database: DatabaseSettings = DatabaseSettings()
    identity: IdentitySettings = IdentitySettings()
    side_effects: SideEffectSettings = SideEffectSettings()
    invitations: InvitationSettings = InvitationSettings()
    storage: StorageSettings = StorageSettings()
    cache: CacheSettings = CacheSettings()

    TITLE: str = "Tracker Governance Service"
    DESCRIPTION: str = "API управления изменениями задач, участниками и уведомлениями"
    VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    @property
    def app_params(self) -> dict:
        """
        Параметры для инициализации FastAPI приложения.

        Returns:
            Dict с настройками FastAPI
        """
        from src.core.lifespan import lifespan

        return {
            "title": self.TITLE,
            "description": self.DESCRIPTION,
            "version": self.VERSION,
            "swagger_ui_parameters": {"defaultModelsExpandDepth": -1},
            "lifespan": lifespan,
        }

    @property
    def cors_params(self) -> dict:
        """Параметры CORSMiddleware."""
        return {
            "allow_origins": self.CORS_ALLOW_ORIGINS,
            "allow_credentials": True,
            "allow_methods": ["*"],
            "allow_headers": ["*"],
        }

    @property
    def uvicorn_params(self) -> dict:
        """
        Параметры для запуска uvicorn сервера.

        Returns:
            Dict с настройками uvicorn
        """
        return {
            "host": self.HOST,
            "port": self.PORT,
            "proxy_headers": True,
            "forwarded_allow_ips": "*",
            "log_level": self.logging.LOG_LEVEL.lower(),
        }
