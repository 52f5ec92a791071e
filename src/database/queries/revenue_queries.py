"""
Queries de Ingresos

Lectura de la tabla revenue (pre-agregada, sin transformación).
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.models import Revenue


async def get_revenue_async(db: AsyncSession) -> List[Revenue]:
    """
    Obtiene todas las filas de ingresos.

    Args:
        db: Sesión de base de datos

    Returns:
        Lista de filas tal como están almacenadas
    """
    result = await db.execute(select(Revenue))
    return list(result.scalars().all())
