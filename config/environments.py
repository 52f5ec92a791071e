"""
Configuración Multi-Entorno

Define perfiles de configuración para development, staging y production.
"""

from enum import Enum
from typing import Dict, Type


class Environment(str, Enum):
    """Entornos disponibles"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class BaseConfig:
    """Configuración base compartida"""
    PROJECT_NAME: str = "Invoice Dashboard Data"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Database defaults
    DATABASE_ECHO: bool = False

    # Pool de conexiones - Valores base
    DATABASE_POOL_SIZE: int = 5  # Conexiones base mantenidas
    DATABASE_MAX_OVERFLOW: int = 10  # Conexiones extra en picos
    DATABASE_POOL_TIMEOUT: int = 30  # Segundos esperando conexión
    DATABASE_POOL_RECYCLE: int = 1800  # Reciclar cada 30 min
    DATABASE_POOL_PRE_PING: bool = True  # Verificar conexión viva

    LOG_LEVEL: str = "INFO"


class DevelopmentConfig(BaseConfig):
    """Configuración para desarrollo"""
    DEBUG: bool = True
    DATABASE_ECHO: bool = True
    LOG_LEVEL: str = "DEBUG"


class StagingConfig(BaseConfig):
    """Configuración para staging"""
    LOG_LEVEL: str = "INFO"

    # El dashboard dispara hasta tres consultas simultáneas por request
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 10


class ProductionConfig(BaseConfig):
    """
    Configuración para producción.

    Pool dimensionado para el fan-out de las tarjetas de resumen:
    - 15 conexiones base siempre disponibles
    - 15 conexiones extra para picos (hasta 30 total)
    - Recycle cada 30 min para evitar conexiones stale
    """
    LOG_LEVEL: str = "WARNING"

    DATABASE_POOL_SIZE: int = 15
    DATABASE_MAX_OVERFLOW: int = 15
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 1800
    DATABASE_POOL_PRE_PING: bool = True


def get_config(env: Environment) -> Type[BaseConfig]:
    """
    Obtiene la configuración según el entorno.

    Args:
        env: Entorno seleccionado

    Returns:
        Clase de configuración correspondiente
    """
    configs: Dict[Environment, Type[BaseConfig]] = {
        Environment.DEVELOPMENT: DevelopmentConfig,
        Environment.STAGING: StagingConfig,
        Environment.PRODUCTION: ProductionConfig,
    }
    return configs.get(env, DevelopmentConfig)
