"""
Pytest Configuration and Fixtures

Configuración global de pytest y fixtures compartidos.
"""

import os
import sys
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

# Agregar el directorio raíz al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Entorno de test (antes de importar cualquier módulo que lea Settings)
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_KEY", "test-key")
os.environ.setdefault("LOG_DIR", "")

from config.settings import Settings
from src.dashboard.service import DashboardQueryService
from src.database.connection import StoreClient
from src.database.models import Customer, Invoice, Revenue
from tests.factories import add_all_async


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
def store_settings(tmp_path) -> Settings:
    """
    Configuración apuntando a un SQLite en archivo temporal.

    Se usa archivo (no :memory:) para que las consultas concurrentes
    obtengan conexiones separadas.
    """
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'dashboard.db'}",
        DATABASE_KEY="test-key",
        DATABASE_ECHO=False,
    )


@pytest_asyncio.fixture
async def store_client(store_settings) -> AsyncGenerator[StoreClient, None]:
    """Cliente del almacén con el esquema creado."""
    client = StoreClient.from_settings(store_settings)
    await client.create_tables()
    yield client
    await client.close()


@pytest_asyncio.fixture
async def db_session(store_client) -> AsyncGenerator[AsyncSession, None]:
    """Proporciona una sesión async para preparar datos."""
    async with store_client.session() as session:
        yield session


@pytest.fixture
def service(store_client) -> DashboardQueryService:
    """Servicio del dashboard con valores por defecto."""
    return DashboardQueryService(store_client)


# ============================================================================
# SAMPLE DATA FIXTURES
# ============================================================================

@pytest.fixture
def sample_customers() -> list:
    """Cuatro clientes; Amy Burns no tiene facturas."""
    return [
        {"id": "cust-delba", "name": "Delba de Oliveira",
         "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
        {"id": "cust-lee", "name": "Lee Robinson",
         "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
        {"id": "cust-hector", "name": "Hector Simpson",
         "email": "hector@simpson.com", "image_url": "/customers/hector-simpson.png"},
        {"id": "cust-amy", "name": "Amy Burns",
         "email": "amy@burns.com", "image_url": "/customers/amy-burns.png"},
    ]


@pytest.fixture
def sample_invoices() -> list:
    """
    Siete facturas en centavos.

    Pagado: 3040 + 44800 = 47840
    Pendiente: 15795 + 20348 + 34577 + 54246 = 124966
    inv-07 está "overdue" y no suma en ningún total.
    """
    return [
        {"id": "inv-01", "customer_id": "cust-delba", "amount": 15795,
         "status": "pending", "date": date(2022, 12, 6)},
        {"id": "inv-02", "customer_id": "cust-lee", "amount": 20348,
         "status": "pending", "date": date(2022, 11, 14)},
        {"id": "inv-03", "customer_id": "cust-hector", "amount": 3040,
         "status": "paid", "date": date(2022, 10, 29)},
        {"id": "inv-04", "customer_id": "cust-delba", "amount": 44800,
         "status": "paid", "date": date(2023, 9, 10)},
        {"id": "inv-05", "customer_id": "cust-lee", "amount": 34577,
         "status": "pending", "date": date(2023, 8, 5)},
        {"id": "inv-06", "customer_id": "cust-hector", "amount": 54246,
         "status": "pending", "date": date(2023, 7, 16)},
        {"id": "inv-07", "customer_id": "cust-delba", "amount": 666,
         "status": "overdue", "date": date(2023, 6, 27)},
    ]


@pytest.fixture
def sample_revenue() -> list:
    """Dos meses de ingresos."""
    return [
        {"month": "Jan", "revenue": 2000},
        {"month": "Feb", "revenue": 1800},
    ]


@pytest_asyncio.fixture
async def seeded_store(
    store_client,
    sample_customers,
    sample_invoices,
    sample_revenue
) -> StoreClient:
    """Cliente del almacén con los datos de ejemplo cargados."""
    async with store_client.session() as db:
        await add_all_async(db, [Customer(**c) for c in sample_customers])
        await add_all_async(db, [Invoice(**i) for i in sample_invoices])
        await add_all_async(db, [Revenue(**r) for r in sample_revenue])
    return store_client


@pytest.fixture
def seeded_service(seeded_store) -> DashboardQueryService:
    """Servicio del dashboard sobre los datos de ejemplo."""
    return DashboardQueryService(seeded_store)
