"""
Queries de Base de Datos

Módulo que exporta todas las funciones de consulta (async, sólo lectura).
"""

# Helpers
from src.database.queries.base import (
    PageRange,
    contains_pattern,
    LIKE_ESCAPE,
)

# Queries de ingresos
from src.database.queries.revenue_queries import (
    get_revenue_async,
)

# Queries de factura
from src.database.queries.invoice_queries import (
    get_latest_invoices_async,
    search_invoices_async,
    count_invoices_async,
    count_all_invoices_async,
    get_invoice_status_amounts_async,
    get_invoice_by_id_async,
)

# Queries de cliente
from src.database.queries.customer_queries import (
    count_customers_async,
    get_customers_list_async,
    search_customers_with_invoices_async,
)

__all__ = [
    # Helpers
    'PageRange',
    'contains_pattern',
    'LIKE_ESCAPE',

    # Revenue
    'get_revenue_async',

    # Invoice
    'get_latest_invoices_async',
    'search_invoices_async',
    'count_invoices_async',
    'count_all_invoices_async',
    'get_invoice_status_amounts_async',
    'get_invoice_by_id_async',

    # Customer
    'count_customers_async',
    'get_customers_list_async',
    'search_customers_with_invoices_async',
]
