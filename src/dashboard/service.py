"""
Servicio de Consultas del Dashboard

Envuelve el cliente del almacén y expone las lecturas que usa la UI:
ingresos, últimas facturas, tarjetas de resumen, búsqueda paginada de
facturas, factura individual, lista de clientes y tabla de clientes.

Todas las operaciones son async y sin estado. Ante un error del almacén
o un resultado esperado ausente, se registra el detalle y se lanza un
DataAccessError con el mensaje fijo de la operación.

Uso:
    client = StoreClient.from_settings(settings)
    service = DashboardQueryService.from_settings(client, settings)
    summary = await service.get_card_summary()
"""

import asyncio
import math
from contextlib import contextmanager
from typing import Awaitable, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import MultipleResultsFound, NoResultFound, SQLAlchemyError

from config.constants import (
    FailureMessage,
    InvoiceStatus,
    ITEMS_PER_PAGE,
    LATEST_INVOICES_LIMIT,
)
from config.settings import Settings
from src.dashboard.schemas import (
    CardSummary,
    CustomerField,
    CustomerTableRow,
    InvoiceForm,
    InvoiceTableRow,
    LatestInvoice,
    Revenue,
)
from src.database.connection import StoreClient
from src.database.queries import (
    PageRange,
    count_all_invoices_async,
    count_customers_async,
    count_invoices_async,
    get_customers_list_async,
    get_invoice_by_id_async,
    get_invoice_status_amounts_async,
    get_latest_invoices_async,
    get_revenue_async,
    search_customers_with_invoices_async,
    search_invoices_async,
)
from src.utils.errors import (
    AggregateQueryError,
    DataAccessError,
    NotFoundError,
    StoreError,
    log_data_access_error,
)
from src.utils.formatting import cents_to_units, format_currency
from src.utils.logger import LogContext, get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Sub-consultas de las tarjetas de resumen, en el orden del gather
CARD_QUERIES = ("invoice_count", "customer_count", "invoice_status")


def sum_by_status(invoices: Iterable[Tuple[str, int]]) -> Tuple[int, int]:
    """
    Acumula montos pagados y pendientes.

    Los estados distintos de "paid" y "pending" no suman en ninguno
    de los dos totales.

    Args:
        invoices: Pares (status, amount en centavos)

    Returns:
        (total pagado, total pendiente) en centavos
    """
    paid = 0
    pending = 0
    for status, amount in invoices:
        if status == InvoiceStatus.PAID.value:
            paid += amount
        elif status == InvoiceStatus.PENDING.value:
            pending += amount
    return paid, pending


def _require_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} debe ser >= 1 (recibido {value})")


class DashboardQueryService:
    """Consultas de sólo lectura del dashboard de facturación."""

    def __init__(
        self,
        client: StoreClient,
        latest_limit: int = LATEST_INVOICES_LIMIT,
        page_size: int = ITEMS_PER_PAGE,
        currency_symbol: str = "$"
    ):
        self.client = client
        self.latest_limit = latest_limit
        self.page_size = page_size
        self.currency_symbol = currency_symbol

    @classmethod
    def from_settings(cls, client: StoreClient, settings: Settings) -> "DashboardQueryService":
        """Construye el servicio con los valores por defecto configurados."""
        return cls(
            client,
            latest_limit=settings.LATEST_INVOICES_LIMIT,
            page_size=settings.ITEMS_PER_PAGE,
            currency_symbol=settings.CURRENCY_SYMBOL,
        )

    # ------------------------------------------------------------------
    # Helpers internos
    # ------------------------------------------------------------------

    def _money(self, cents: int) -> str:
        return format_currency(cents, symbol=self.currency_symbol)

    async def _run(self, query: Callable[..., Awaitable[T]], *args) -> T:
        """Ejecuta una query en su propia sesión."""
        async with self.client.session() as db:
            return await query(db, *args)

    @contextmanager
    def _translate_errors(self, operation: str, message: FailureMessage) -> Iterator[None]:
        """
        Convierte errores del almacén en errores de dominio.

        NoResultFound / MultipleResultsFound -> NotFoundError
        Otros SQLAlchemyError, errores de red del driver y filas inválidas -> StoreError
        """
        try:
            yield
        except DataAccessError:
            raise
        except (NoResultFound, MultipleResultsFound) as e:
            error = NotFoundError(message.value, operation=operation)
            log_data_access_error(error, e)
            raise error from None
        except (SQLAlchemyError, OSError, asyncio.TimeoutError, ValidationError) as e:
            error = StoreError(message.value, operation=operation)
            log_data_access_error(error, e)
            raise error from None

    def _not_found(self, operation: str, message: FailureMessage, detail: str) -> NotFoundError:
        error = NotFoundError(message.value, operation=operation)
        log_data_access_error(error, LookupError(detail))
        return error

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------

    async def get_revenue(self) -> List[Revenue]:
        """Obtiene todas las filas de ingresos, sin transformar."""
        with LogContext(operation="get_revenue"):
            with self._translate_errors("get_revenue", FailureMessage.REVENUE):
                rows = await self._run(get_revenue_async)
                revenue = [Revenue.model_validate(row) for row in rows]

            logger.debug(f"Ingresos obtenidos: {len(revenue)} filas")
            return revenue

    async def get_latest_invoices(self, limit: Optional[int] = None) -> List[LatestInvoice]:
        """
        Obtiene las últimas facturas con el monto formateado.

        Args:
            limit: Máximo de facturas (default: configurado, 5)
        """
        limit = self.latest_limit if limit is None else limit
        _require_positive("limit", limit)

        with LogContext(operation="get_latest_invoices"):
            with self._translate_errors("get_latest_invoices", FailureMessage.LATEST_INVOICES):
                rows = await self._run(get_latest_invoices_async, limit)
                invoices = [
                    LatestInvoice(
                        id=row["id"],
                        amount=self._money(row["amount"]),
                        name=row["name"],
                        email=row["email"],
                        image_url=row["image_url"],
                    )
                    for row in rows
                ]

            logger.debug(f"Últimas facturas obtenidas: {len(invoices)}")
            return invoices

    async def get_card_summary(self) -> CardSummary:
        """
        Obtiene los datos de las tarjetas de resumen.

        Lanza tres consultas concurrentes (conteo de facturas, conteo de
        clientes y status/amount de todas las facturas) y espera a que
        terminen todas. Si alguna falla, falla la operación completa.
        """
        operation = "get_card_summary"
        with LogContext(operation=operation):
            results = await asyncio.gather(
                self._run(count_all_invoices_async),
                self._run(count_customers_async),
                self._run(get_invoice_status_amounts_async),
                return_exceptions=True,
            )

            failures = [
                (name, result)
                for name, result in zip(CARD_QUERIES, results)
                if isinstance(result, BaseException)
            ]
            if failures:
                error = AggregateQueryError(
                    FailureMessage.CARD_DATA.value,
                    failed=[name for name, _ in failures],
                    operation=operation,
                )
                for _, cause in failures:
                    log_data_access_error(error, cause)
                raise error from None

            invoice_count, customer_count, status_rows = results
            paid, pending = sum_by_status(
                (row["status"], row["amount"]) for row in status_rows
            )

            with self._translate_errors(operation, FailureMessage.CARD_DATA):
                summary = CardSummary(
                    number_of_customers=customer_count or 0,
                    number_of_invoices=invoice_count or 0,
                    total_paid_invoices=self._money(paid),
                    total_pending_invoices=self._money(pending),
                )

            logger.debug(
                f"Resumen: {summary.number_of_invoices} facturas, "
                f"{summary.number_of_customers} clientes"
            )
            return summary

    async def search_invoices(
        self,
        query: Optional[str],
        page: int,
        page_size: Optional[int] = None
    ) -> List[InvoiceTableRow]:
        """
        Busca facturas por nombre de cliente, paginadas por rango.

        Args:
            query: Texto buscado (case-insensitive, subcadena)
            page: Página (1-based)
            page_size: Filas por página (default: configurado, 6)
        """
        page_size = self.page_size if page_size is None else page_size
        page_range = PageRange.for_page(page, page_size)

        with LogContext(operation="search_invoices"):
            with self._translate_errors("search_invoices", FailureMessage.INVOICES):
                rows = await self._run(search_invoices_async, query, page_range)
                invoices = [InvoiceTableRow.model_validate(dict(row)) for row in rows]

            logger.debug(
                f"Búsqueda de facturas '{query or ''}' página {page}: {len(invoices)} filas"
            )
            return invoices

    async def count_invoice_pages(self, query: Optional[str], page_size: Optional[int] = None) -> int:
        """
        Calcula el número de páginas para una búsqueda de facturas.

        Args:
            query: Mismo filtro que search_invoices
            page_size: Filas por página (default: configurado, 6)

        Returns:
            ceil(coincidencias / page_size)
        """
        operation = "count_invoice_pages"
        page_size = self.page_size if page_size is None else page_size
        _require_positive("page_size", page_size)

        with LogContext(operation=operation):
            with self._translate_errors(operation, FailureMessage.INVOICE_PAGES):
                count = await self._run(count_invoices_async, query)

            if count is None:
                raise self._not_found(
                    operation, FailureMessage.INVOICE_PAGES, "El almacén no devolvió conteo"
                ) from None

            pages = math.ceil(count / page_size)
            logger.debug(f"Facturas '{query or ''}': {count} -> {pages} páginas")
            return pages

    async def get_invoice_by_id(self, invoice_id: str) -> InvoiceForm:
        """
        Obtiene una factura por ID, con el monto en unidades.

        Raises:
            NotFoundError: si no hay exactamente una factura con ese ID
        """
        with LogContext(operation="get_invoice_by_id"):
            with self._translate_errors("get_invoice_by_id", FailureMessage.INVOICE):
                row = await self._run(get_invoice_by_id_async, invoice_id)
                invoice = InvoiceForm(
                    id=row["id"],
                    customer_id=row["customer_id"],
                    amount=cents_to_units(row["amount"]),
                    status=row["status"],
                )

            logger.debug(f"Factura obtenida: {invoice.id}")
            return invoice

    async def get_customers_list(self) -> List[CustomerField]:
        """Lista id y nombre de todos los clientes, por nombre."""
        with LogContext(operation="get_customers_list"):
            with self._translate_errors("get_customers_list", FailureMessage.CUSTOMERS):
                rows = await self._run(get_customers_list_async)
                customers = [CustomerField.model_validate(dict(row)) for row in rows]

            logger.debug(f"Clientes obtenidos: {len(customers)}")
            return customers

    async def search_customers(self, query: Optional[str]) -> List[CustomerTableRow]:
        """
        Busca clientes por nombre con totales de sus facturas.

        Args:
            query: Texto buscado (case-insensitive, subcadena)
        """
        with LogContext(operation="search_customers"):
            with self._translate_errors("search_customers", FailureMessage.CUSTOMER_TABLE):
                customers = await self._run(search_customers_with_invoices_async, query)

                rows = []
                for customer in customers:
                    paid, pending = sum_by_status(
                        (invoice.status, invoice.amount) for invoice in customer.invoices
                    )
                    rows.append(CustomerTableRow(
                        id=customer.id,
                        name=customer.name,
                        email=customer.email,
                        image_url=customer.image_url,
                        total_invoices=len(customer.invoices),
                        total_pending=self._money(pending),
                        total_paid=self._money(paid),
                    ))

            logger.debug(f"Tabla de clientes '{query or ''}': {len(rows)} filas")
            return rows
