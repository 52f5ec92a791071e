"""
Utilidades del Sistema

Módulo que exporta todas las utilidades:
- Logger: Logging estructurado con contexto
- Errors: Errores de acceso a datos
- Formatting: Montos, fechas y paginación
"""

# Logger
from src.utils.logger import (
    get_logger,
    setup_logging,
    new_correlation_id,
    get_correlation_id,
    LogContext,
    log_exception,
)

# Errors
from src.utils.errors import (
    ErrorCategory,
    ErrorSeverity,
    DataAccessError,
    StoreError,
    NotFoundError,
    AggregateQueryError,
    log_data_access_error,
)

# Formatting
from src.utils.formatting import (
    cents_to_units,
    format_currency,
    format_date_to_local,
    generate_y_axis,
    generate_pagination,
)

__all__ = [
    # Logger
    'get_logger',
    'setup_logging',
    'new_correlation_id',
    'get_correlation_id',
    'LogContext',
    'log_exception',

    # Errors
    'ErrorCategory',
    'ErrorSeverity',
    'DataAccessError',
    'StoreError',
    'NotFoundError',
    'AggregateQueryError',
    'log_data_access_error',

    # Formatting
    'cents_to_units',
    'format_currency',
    'format_date_to_local',
    'generate_y_axis',
    'generate_pagination',
]
