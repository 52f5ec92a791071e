"""
Capa de Acceso a Datos del Dashboard

Consultas de sólo lectura sobre invoices, customers y revenue,
con los resultados ya preparados para la UI.

Uso:
    from src.dashboard import DashboardQueryService
"""

from src.dashboard.service import DashboardQueryService, sum_by_status
from src.dashboard.result import Ok, Failure, Result, capture
from src.dashboard.schemas import (
    Revenue,
    LatestInvoice,
    CardSummary,
    InvoiceTableRow,
    InvoiceForm,
    CustomerField,
    CustomerTableRow,
)

__all__ = [
    "DashboardQueryService",
    "sum_by_status",
    "Ok",
    "Failure",
    "Result",
    "capture",
    "Revenue",
    "LatestInvoice",
    "CardSummary",
    "InvoiceTableRow",
    "InvoiceForm",
    "CustomerField",
    "CustomerTableRow",
]
