"""
Constantes del sistema

Define valores que no cambian durante la ejecución.
"""

from enum import Enum


class InvoiceStatus(str, Enum):
    """Estados de factura que cuentan para los totales del dashboard"""
    PENDING = "pending"
    PAID = "paid"


# ============================================================================
# DASHBOARD
# ============================================================================

# Montos almacenados en centavos
CENTS_PER_UNIT = 100

# Valores por defecto de las consultas
LATEST_INVOICES_LIMIT = 5
ITEMS_PER_PAGE = 6

# Paginación visible: con 7 páginas o menos se muestran todas
PAGINATION_MAX_VISIBLE = 7
PAGINATION_ELLIPSIS = "..."


# ============================================================================
# MENSAJES DE ERROR (contrato visible para el llamador)
# ============================================================================

class FailureMessage(str, Enum):
    """Mensaje fijo por operación del dashboard"""
    REVENUE = "Failed to fetch revenue data."
    LATEST_INVOICES = "Failed to fetch the latest invoices."
    CARD_DATA = "Failed to fetch card data."
    INVOICES = "Failed to fetch invoices."
    INVOICE_PAGES = "Failed to fetch total number of invoices."
    INVOICE = "Failed to fetch invoice."
    CUSTOMERS = "Failed to fetch all customers."
    CUSTOMER_TABLE = "Failed to fetch customer table."
