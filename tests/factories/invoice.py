"""
Factory para Invoice

Facturas con monto en centavos, estado y fecha.
"""

import uuid

import factory
from factory import Faker, LazyFunction

from config.constants import InvoiceStatus
from src.database.models import Invoice
from tests.factories.base import BaseFactory


class InvoiceFactory(BaseFactory):
    """
    Factory para crear facturas.

    customer_id es obligatorio: las facturas siempre pertenecen
    a un cliente existente.

    Ejemplos:
        invoice = InvoiceFactory.build(customer_id=customer.id)
        invoice = InvoiceFactory.build(customer_id=customer.id, pagada=True)
        invoices = InvoiceFactory.build_batch(7, customer_id=customer.id)
    """

    class Meta:
        model = Invoice

    id = LazyFunction(lambda: str(uuid.uuid4()))
    customer_id = None
    amount = Faker("random_int", min=100, max=100000)
    status = InvoiceStatus.PENDING.value
    date = Faker("date_between", start_date="-2y", end_date="today")

    class Params:
        """
        Variantes comunes.

        Uso:
            pagada = InvoiceFactory.build(customer_id=cid, pagada=True)
            vencida = InvoiceFactory.build(customer_id=cid, vencida=True)
        """
        pagada = factory.Trait(
            status=InvoiceStatus.PAID.value
        )

        # Estado fuera de los totales del dashboard
        vencida = factory.Trait(
            status="overdue"
        )
