"""
View Models del Dashboard

Schemas Pydantic que la capa de presentación consume. Se recalculan en
cada request y nunca se persisten. La validación confirma que las filas
del almacén traen todos los campos requeridos.

Uso:
    from src.dashboard.schemas import CardSummary, LatestInvoice
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Schema base con configuración común."""
    model_config = ConfigDict(from_attributes=True, frozen=True)


class Revenue(BaseSchema):
    """Ingreso mensual (sin transformar)."""
    month: str
    revenue: int


class LatestInvoice(BaseSchema):
    """Factura reciente con identidad del cliente."""
    id: str
    amount: str = Field(..., description="Monto formateado (ej: $1,234.56)")
    name: str
    email: str
    image_url: str


class CardSummary(BaseSchema):
    """Resumen de las tarjetas del dashboard."""
    number_of_customers: int = 0
    number_of_invoices: int = 0
    total_paid_invoices: str
    total_pending_invoices: str


class InvoiceTableRow(BaseSchema):
    """Fila de la tabla paginada de facturas."""
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: dt.date
    amount: int = Field(..., description="Monto en centavos")
    status: str


class InvoiceForm(BaseSchema):
    """Factura para el formulario de edición."""
    id: str
    customer_id: str
    amount: float = Field(..., description="Monto en unidades (centavos / 100)")
    status: str


class CustomerField(BaseSchema):
    """Cliente para listas de selección."""
    id: str
    name: str


class CustomerTableRow(BaseSchema):
    """Fila de la tabla de clientes con totales."""
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
