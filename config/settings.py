"""
Configuración centralizada del sistema

Carga variables de entorno y proporciona acceso a configuración
en todo el proyecto.

Uso:
    from config.settings import get_settings

    settings = get_settings()
    client = StoreClient.from_settings(settings)

DATABASE_URL y DATABASE_KEY son obligatorias: si faltan, la construcción
de Settings falla al arrancar el proceso.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import SecretStr, field_validator

from config.constants import ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT
from config.environments import Environment, get_config


# Campos que toman su valor del perfil de entorno si no vienen del exterior
_PROFILE_FIELDS = (
    "DEBUG",
    "DATABASE_ECHO",
    "DATABASE_POOL_SIZE",
    "DATABASE_MAX_OVERFLOW",
    "DATABASE_POOL_TIMEOUT",
    "DATABASE_POOL_RECYCLE",
    "DATABASE_POOL_PRE_PING",
    "LOG_LEVEL",
)


class Settings(BaseSettings):
    """
    Configuración del sistema con soporte multi-entorno.

    Todas las configuraciones se cargan desde variables de entorno
    o archivo .env. Los parámetros de pool y logging no definidos
    explícitamente se completan con el perfil del entorno.
    """

    # =========================================================================
    # ENTORNO
    # =========================================================================
    ENVIRONMENT: Environment = Environment.DEVELOPMENT
    DEBUG: bool = False

    # =========================================================================
    # INFORMACIÓN DEL PROYECTO
    # =========================================================================
    PROJECT_NAME: str = "Invoice Dashboard Data"
    VERSION: str = "1.0.0"

    # =========================================================================
    # ALMACÉN DE DATOS
    # =========================================================================
    DATABASE_URL: str
    DATABASE_KEY: SecretStr
    DATABASE_ECHO: bool = False

    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 1800  # Reciclar conexiones cada 30 min
    DATABASE_POOL_PRE_PING: bool = True

    # =========================================================================
    # DASHBOARD
    # =========================================================================
    LATEST_INVOICES_LIMIT: int = LATEST_INVOICES_LIMIT
    ITEMS_PER_PAGE: int = ITEMS_PER_PAGE
    CURRENCY_SYMBOL: str = "$"

    # =========================================================================
    # LOGGING
    # =========================================================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # json o console
    LOG_DIR: str = "logs"

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str, info) -> str:
        """Valida que haya endpoint y que no se use SQLite en producción"""
        if not v.strip():
            raise ValueError("DATABASE_URL no puede estar vacío")
        values = info.data
        if values.get("ENVIRONMENT") == Environment.PRODUCTION:
            if "sqlite" in v.lower():
                raise ValueError("SQLite no está permitido en producción. Use PostgreSQL.")
        return v

    @field_validator("DATABASE_KEY")
    @classmethod
    def validate_database_key(cls, v: SecretStr, info) -> SecretStr:
        """Valida que la llave de acceso esté configurada en producción"""
        values = info.data
        if values.get("ENVIRONMENT") == Environment.PRODUCTION:
            if not v.get_secret_value():
                raise ValueError("DATABASE_KEY es obligatorio en producción")
        return v

    @field_validator("LATEST_INVOICES_LIMIT", "ITEMS_PER_PAGE")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Límites y tamaños de página deben ser >= 1"""
        if v < 1:
            raise ValueError("debe ser mayor o igual a 1")
        return v

    def apply_environment_profile(self) -> "Settings":
        """
        Completa con el perfil del entorno los campos no definidos.

        Returns:
            La misma instancia, para encadenar
        """
        profile = get_config(self.ENVIRONMENT)
        for name in _PROFILE_FIELDS:
            if name not in self.model_fields_set and hasattr(profile, name):
                setattr(self, name, getattr(profile, name))
        return self

    def get_async_database_url(self) -> str:
        """Retorna la URL de base de datos para async"""
        url = self.DATABASE_URL

        # Convertir URL sync a async si es necesario
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif url.startswith("sqlite:///"):
            return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)

        return url

    def is_production(self) -> bool:
        """Verifica si está en producción."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Verifica si está en desarrollo."""
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Construye la configuración del proceso una sola vez.

    Raises:
        pydantic.ValidationError: si falta DATABASE_URL o DATABASE_KEY
    """
    return Settings().apply_environment_profile()
