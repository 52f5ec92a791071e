"""
Utilidades de Formateo

Formateo de montos, fechas y ayudas de presentación para el dashboard.
Los montos llegan siempre en centavos (enteros).
"""

import math
from datetime import date, datetime
from typing import List, Sequence, Tuple, Union

from config.constants import (
    CENTS_PER_UNIT,
    PAGINATION_ELLIPSIS,
    PAGINATION_MAX_VISIBLE,
)

PageItem = Union[int, str]


def cents_to_units(cents: int) -> float:
    """
    Convierte centavos a unidades de moneda.

    Args:
        cents: Monto en centavos

    Returns:
        Monto en unidades (división simple, sin redondeo adicional)
    """
    return cents / CENTS_PER_UNIT


def format_currency(cents: int, symbol: str = "$") -> str:
    """
    Formatea un monto en centavos como moneda.

    Args:
        cents: Monto en centavos
        symbol: Símbolo de moneda

    Returns:
        String formateado (ej: 123456 -> "$1,234.56")
    """
    amount = cents_to_units(cents)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_date_to_local(value: Union[date, datetime, str], locale: str = "en-US") -> str:
    """
    Formatea una fecha para mostrarla en tablas.

    Args:
        value: Fecha o string ISO (YYYY-MM-DD)
        locale: "en-US" (Dec 6, 2022) o cualquier otro (6 Dec 2022)

    Returns:
        Fecha legible
    """
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])

    month = value.strftime("%b")
    if locale == "en-US":
        return f"{month} {value.day}, {value.year}"
    return f"{value.day} {month} {value.year}"


def generate_y_axis(revenue: Sequence[int]) -> Tuple[List[str], int]:
    """
    Calcula las etiquetas del eje Y del gráfico de ingresos.

    Args:
        revenue: Valores de ingreso mensuales (unidades)

    Returns:
        (etiquetas de mayor a menor, tope del eje)
    """
    highest = max(revenue, default=0)
    top_label = math.ceil(highest / 1000) * 1000

    labels = [f"${i // 1000}K" for i in range(top_label, -1, -1000)]
    return labels, top_label


def generate_pagination(current_page: int, total_pages: int) -> List[PageItem]:
    """
    Genera la tira de números de página con elipsis.

    Args:
        current_page: Página actual (1-based)
        total_pages: Total de páginas

    Returns:
        Lista de páginas y elipsis
    """
    if total_pages <= PAGINATION_MAX_VISIBLE:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, PAGINATION_ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, PAGINATION_ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        PAGINATION_ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        PAGINATION_ELLIPSIS,
        total_pages,
    ]
