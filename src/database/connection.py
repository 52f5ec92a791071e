"""
Conexión al Almacén de Datos

Gestiona la conexión async a PostgreSQL (producción) o SQLite (desarrollo
y tests). El cliente se construye explícitamente desde la configuración y
se pasa a quien lo necesite; no hay instancias globales.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from config.settings import Settings
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Base para los modelos
Base = declarative_base()


def create_store_engine(settings: Settings) -> AsyncEngine:
    """
    Crea el engine async según la configuración.

    La llave de acceso se inyecta como password en URLs de servidor;
    SQLite no la usa.

    Args:
        settings: Configuración del proceso

    Returns:
        Engine async listo para usar
    """
    database_url = make_url(settings.get_async_database_url())

    if database_url.get_backend_name() == "sqlite":
        db_path = database_url.database
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        return create_async_engine(
            database_url,
            echo=settings.DATABASE_ECHO,
            connect_args={"check_same_thread": False}
        )

    key = settings.DATABASE_KEY.get_secret_value()
    if key:
        database_url = database_url.set(password=key)

    # PostgreSQL async con connection pooling
    return create_async_engine(
        database_url,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        pool_pre_ping=settings.DATABASE_POOL_PRE_PING
    )


class StoreClient:
    """
    Cliente del almacén para dependency injection.

    Cada consulta abre su propia sesión, de modo que varias consultas
    concurrentes nunca comparten sesión.

    Uso:
        client = StoreClient.from_settings(get_settings())
        async with client.session() as db:
            ...
        await client.close()
    """

    def __init__(self, engine: AsyncEngine):
        self.engine: Optional[AsyncEngine] = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "StoreClient":
        """Construye el cliente a partir de la configuración."""
        client = cls(create_store_engine(settings))
        logger.info(f"Cliente del almacén inicializado ({client.engine.url.get_backend_name()})")
        return client

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Proporciona una sesión de sólo lectura.

        Uso:
            async with client.session() as db:
                result = await db.execute(query)
        """
        if self.engine is None:
            raise RuntimeError("StoreClient cerrado")

        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Crea las tablas (sólo almacenes locales y tests)."""
        # Importar modelos para registrarlos
        from src.database import models  # noqa

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Cierra las conexiones."""
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None
