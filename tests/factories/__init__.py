"""
Factories para Tests

Proporciona factories para crear objetos de prueba de forma limpia y reutilizable.
Sigue el patrón Factory de factory-boy para testing.

Uso:
    from tests.factories import CustomerFactory, InvoiceFactory, add_all_async

    customer = CustomerFactory.build()
    invoices = InvoiceFactory.build_batch(3, customer_id=customer.id)
    await add_all_async(db, [customer, *invoices])
"""

from tests.factories.base import BaseFactory, add_all_async
from tests.factories.customer import CustomerFactory
from tests.factories.invoice import InvoiceFactory
from tests.factories.revenue import RevenueFactory

__all__ = [
    "BaseFactory",
    "add_all_async",
    "CustomerFactory",
    "InvoiceFactory",
    "RevenueFactory",
]
