"""
Sistema Centralizado de Manejo de Errores

Proporciona:
- Tipos de error categorizados (StoreError, NotFoundError, AggregateQueryError)
- Mensaje fijo por operación, visible para el llamador
- Correlation IDs para soporte técnico
- Logging estructurado del detalle original (nunca expuesto al llamador)
"""

import logging
from enum import Enum
from typing import Optional, Dict, Any, Sequence

from src.utils.logger import (
    get_logger,
    new_correlation_id,
    get_correlation_id,
    log_exception,
)

logger = get_logger(__name__)


# ============================================================================
# ERROR CATEGORIES
# ============================================================================

class ErrorCategory(str, Enum):
    """Categorías de error para clasificación."""
    STORE = "STORE"
    NOT_FOUND = "NOT_FOUND"
    AGGREGATE = "AGGREGATE"


class ErrorSeverity(str, Enum):
    """Severidad del error para priorización."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# ============================================================================
# CUSTOM EXCEPTIONS
# ============================================================================

class DataAccessError(Exception):
    """
    Excepción base de la capa de acceso a datos.

    El mensaje es el texto fijo de la operación; el detalle del
    almacén sólo se registra en los logs.
    """

    category: ErrorCategory = ErrorCategory.STORE
    severity: ErrorSeverity = ErrorSeverity.HIGH

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.correlation_id = get_correlation_id() or new_correlation_id()

    def to_dict(self) -> Dict[str, Any]:
        """Convierte el error a diccionario para logging."""
        return {
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "operation": self.operation,
            "correlation_id": self.correlation_id,
        }


class StoreError(DataAccessError):
    """El almacén reportó un error para la consulta."""

    category = ErrorCategory.STORE
    severity = ErrorSeverity.HIGH


class NotFoundError(DataAccessError):
    """Faltó un resultado esperado (fila única o conteo)."""

    category = ErrorCategory.NOT_FOUND
    severity = ErrorSeverity.LOW


class AggregateQueryError(DataAccessError):
    """Falló una o más de varias sub-consultas concurrentes."""

    category = ErrorCategory.AGGREGATE
    severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        failed: Sequence[str] = (),
        operation: Optional[str] = None
    ):
        super().__init__(message, operation=operation)
        self.failed = tuple(failed)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["failed"] = list(self.failed)
        return data


# ============================================================================
# LOGGING
# ============================================================================

def log_data_access_error(
    error: DataAccessError,
    cause: Optional[BaseException] = None,
    log_level: int = logging.ERROR
) -> None:
    """
    Loggea un DataAccessError junto con el error original del almacén.

    Args:
        error: Error de dominio que se va a lanzar
        cause: Error original (sólo para diagnóstico)
        log_level: Nivel de logging (default: ERROR)
    """
    error_dict = error.to_dict()
    if cause is not None:
        error_dict["cause"] = f"{type(cause).__name__}: {cause}"

    logger.log(
        log_level,
        f"[{error.correlation_id[:8]}] {error.category.value}: {error.message}",
        extra={"extra_data": error_dict}
    )
    if cause is not None:
        log_exception(logger, f"Detalle de {error.operation or 'consulta'}", cause)


__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "DataAccessError",
    "StoreError",
    "NotFoundError",
    "AggregateQueryError",
    "log_data_access_error",
]
