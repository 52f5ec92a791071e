"""
Queries de Cliente

Funciones async de sólo lectura sobre customers.
"""

from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.database.models import Customer
from src.database.queries.base import contains_pattern, LIKE_ESCAPE


async def count_customers_async(db: AsyncSession) -> Optional[int]:
    """Cuenta todos los clientes."""
    result = await db.execute(select(func.count()).select_from(Customer))
    return result.scalar()


async def get_customers_list_async(db: AsyncSession) -> List[RowMapping]:
    """
    Lista id y nombre de todos los clientes, por nombre ascendente.

    Args:
        db: Sesión de base de datos

    Returns:
        Filas con id, name
    """
    result = await db.execute(
        select(Customer.id, Customer.name).order_by(Customer.name.asc(), Customer.id)
    )
    return list(result.mappings().all())


async def search_customers_with_invoices_async(
    db: AsyncSession,
    query: Optional[str]
) -> List[Customer]:
    """
    Busca clientes por nombre y carga sus facturas.

    Args:
        db: Sesión de base de datos
        query: Texto buscado en el nombre (case-insensitive)

    Returns:
        Clientes con la relación invoices ya cargada
    """
    result = await db.execute(
        select(Customer)
        .options(selectinload(Customer.invoices))
        .where(Customer.name.ilike(contains_pattern(query), escape=LIKE_ESCAPE))
        .order_by(Customer.name.asc(), Customer.id)
    )
    return list(result.scalars().all())
