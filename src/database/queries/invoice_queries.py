"""
Queries de Factura

Funciones async de sólo lectura sobre invoices (con join a customers).
No capturan errores: la traducción a errores de dominio la hace el
servicio del dashboard.
"""

from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.models import Invoice, Customer
from src.database.queries.base import PageRange, contains_pattern, LIKE_ESCAPE


def _customer_name_matches(query: Optional[str]):
    """Condición ILIKE sobre el nombre del cliente."""
    return Customer.name.ilike(contains_pattern(query), escape=LIKE_ESCAPE)


async def get_latest_invoices_async(db: AsyncSession, limit: int) -> List[RowMapping]:
    """
    Obtiene las facturas más recientes con datos del cliente.

    Args:
        db: Sesión de base de datos
        limit: Número máximo de facturas

    Returns:
        Filas con id, amount, name, email, image_url
    """
    result = await db.execute(
        select(
            Invoice.id,
            Invoice.amount,
            Customer.name,
            Customer.email,
            Customer.image_url,
        )
        .join(Customer, Invoice.customer_id == Customer.id)
        .order_by(Invoice.date.desc(), Invoice.id)
        .limit(limit)
    )
    return list(result.mappings().all())


async def search_invoices_async(
    db: AsyncSession,
    query: Optional[str],
    page_range: PageRange
) -> List[RowMapping]:
    """
    Busca facturas por nombre de cliente con paginación por rango.

    Args:
        db: Sesión de base de datos
        query: Texto buscado en el nombre del cliente (case-insensitive)
        page_range: Rango [start, end] de filas

    Returns:
        Filas de la tabla de facturas, fecha descendente
    """
    result = await db.execute(
        select(
            Invoice.id,
            Invoice.customer_id,
            Customer.name,
            Customer.email,
            Customer.image_url,
            Invoice.date,
            Invoice.amount,
            Invoice.status,
        )
        .join(Customer, Invoice.customer_id == Customer.id)
        .where(_customer_name_matches(query))
        .order_by(Invoice.date.desc(), Invoice.id)
        .offset(page_range.offset)
        .limit(page_range.limit)
    )
    return list(result.mappings().all())


async def count_invoices_async(db: AsyncSession, query: Optional[str] = None) -> Optional[int]:
    """
    Cuenta facturas cuyo cliente coincide con la búsqueda.

    Args:
        db: Sesión de base de datos
        query: Texto buscado (None o vacío cuenta todas)

    Returns:
        Número de facturas, o None si el almacén no devolvió conteo
    """
    result = await db.execute(
        select(func.count(Invoice.id))
        .join(Customer, Invoice.customer_id == Customer.id)
        .where(_customer_name_matches(query))
    )
    return result.scalar()


async def count_all_invoices_async(db: AsyncSession) -> Optional[int]:
    """Cuenta todas las facturas, sin join."""
    result = await db.execute(select(func.count()).select_from(Invoice))
    return result.scalar()


async def get_invoice_status_amounts_async(db: AsyncSession) -> List[RowMapping]:
    """Obtiene (status, amount) de todas las facturas."""
    result = await db.execute(select(Invoice.status, Invoice.amount))
    return list(result.mappings().all())


async def get_invoice_by_id_async(db: AsyncSession, invoice_id: str) -> RowMapping:
    """
    Obtiene una factura por su ID.

    Args:
        db: Sesión de base de datos
        invoice_id: ID de la factura

    Returns:
        Fila con id, customer_id, amount, status

    Raises:
        NoResultFound: si no existe
        MultipleResultsFound: si hay más de una
    """
    result = await db.execute(
        select(
            Invoice.id,
            Invoice.customer_id,
            Invoice.amount,
            Invoice.status,
        ).where(Invoice.id == invoice_id)
    )
    return result.mappings().one()
