"""
Helpers de Consulta

Utilidades comunes a todas las queries: rangos de paginación y
patrones de búsqueda case-insensitive.
"""

from dataclasses import dataclass
from typing import Optional

# Caracter de escape para patrones LIKE
LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class PageRange:
    """
    Rango de filas [start, end] inclusivo y 0-based.

    Uso:
        rng = PageRange.for_page(page=2, page_size=6)
        rng.start, rng.end  # (6, 11)
    """
    start: int
    end: int

    @classmethod
    def for_page(cls, page: int, page_size: int) -> "PageRange":
        """
        Calcula el rango de una página.

        Args:
            page: Número de página (1-based)
            page_size: Filas por página

        Raises:
            ValueError: si page o page_size son menores que 1
        """
        if page < 1:
            raise ValueError(f"page debe ser >= 1 (recibido {page})")
        if page_size < 1:
            raise ValueError(f"page_size debe ser >= 1 (recibido {page_size})")

        start = (page - 1) * page_size
        return cls(start=start, end=start + page_size - 1)

    @property
    def offset(self) -> int:
        return self.start

    @property
    def limit(self) -> int:
        return self.end - self.start + 1


def contains_pattern(query: Optional[str]) -> str:
    """
    Construye el patrón ILIKE '%query%' escapando comodines.

    Args:
        query: Texto buscado (None equivale a vacío)

    Returns:
        Patrón para usar con ilike(..., escape=LIKE_ESCAPE)
    """
    text = query or ""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"
