"""
Sistema de Logging Estructurado

Configura el logging para toda la aplicación con:
- Salida a consola (colores en desarrollo, JSON en producción)
- Archivo rotativo para errores
- Soporte para contexto (correlation ID, operación en curso)
"""

import logging
import json
import uuid
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional
from contextvars import ContextVar

# Context variables para información de contexto
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)
operation_var: ContextVar[Optional[str]] = ContextVar('operation', default=None)


# ============================================================================
# FORMATTERS
# ============================================================================

class ColoredFormatter(logging.Formatter):
    """
    Formatter con colores para desarrollo.
    """

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        record.correlation_id = (correlation_id_var.get() or '-')[:8]
        record.operation = operation_var.get() or '-'

        # Colorear una copia para no contaminar los demás handlers
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, '')
        colored.levelname = f"{color}{record.levelname}{self.RESET}"

        return super().format(colored)


class JSONFormatter(logging.Formatter):
    """
    Formatter JSON para producción.

    Genera logs estructurados fáciles de procesar por herramientas
    como ELK Stack, Datadog, etc.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = correlation_id_var.get()
        if correlation_id:
            log_data["correlation_id"] = correlation_id

        operation = operation_var.get()
        if operation:
            log_data["operation"] = operation

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
            }

        # Agregar campos extra
        if hasattr(record, 'extra_data'):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data, ensure_ascii=False, default=str)


# ============================================================================
# LOGGER CONFIGURATION
# ============================================================================

_configured = False


def setup_logging(
    environment: str = "development",
    log_level: str = "INFO",
    log_dir: Optional[str] = "logs",
    log_format: str = "console"
) -> None:
    """
    Configura el sistema de logging según el entorno.

    Args:
        environment: Entorno (development, staging, production)
        log_level: Nivel de log (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directorio para archivos de log (None desactiva archivos)
        log_format: "json" o "console"; producción siempre usa JSON
    """
    global _configured

    if _configured:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Limpiar handlers existentes
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if environment == "production" or log_format == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s | %(levelname)-8s | %(correlation_id)s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%H:%M:%S'
        ))

    root_logger.addHandler(console_handler)

    if log_dir:
        logs_path = Path(log_dir)
        logs_path.mkdir(parents=True, exist_ok=True)

        error_handler = RotatingFileHandler(
            logs_path / "errors.log",
            maxBytes=50*1024*1024,  # 50MB
            backupCount=10,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(error_handler)

    _configured = True

    root_logger.info(
        f"Logging configurado: environment={environment}, level={log_level}"
    )


def reset_logging() -> None:
    """Permite reconfigurar el logging (usado en tests)."""
    global _configured
    _configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Obtiene un logger configurado para el módulo especificado.

    Args:
        name: Nombre del módulo (típicamente __name__)

    Returns:
        Logger configurado
    """
    if not _configured:
        try:
            from config.settings import get_settings
            settings = get_settings()
            setup_logging(
                environment=settings.ENVIRONMENT.value,
                log_level=settings.LOG_LEVEL,
                log_dir=settings.LOG_DIR,
                log_format=settings.LOG_FORMAT
            )
        except Exception:
            # Sin configuración válida: consola con valores por defecto
            setup_logging(log_dir=None)

    return logging.getLogger(name)


# ============================================================================
# CONTEXT MANAGEMENT
# ============================================================================

def new_correlation_id() -> str:
    """
    Genera y establece un nuevo correlation ID.

    Returns:
        El correlation ID generado
    """
    cid = str(uuid.uuid4())
    correlation_id_var.set(cid)
    return cid


def get_correlation_id() -> Optional[str]:
    """Obtiene el correlation ID actual."""
    return correlation_id_var.get()


class LogContext:
    """
    Context manager para establecer contexto de logging temporalmente.

    Uso:
        with LogContext(operation="get_revenue"):
            logger.info("Este log incluirá el contexto")
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        operation: Optional[str] = None,
        auto_correlation: bool = True
    ):
        self.correlation_id = correlation_id
        self.operation = operation
        self.auto_correlation = auto_correlation

        self._prev_correlation = None
        self._prev_operation = None

    def __enter__(self):
        self._prev_correlation = correlation_id_var.get()
        self._prev_operation = operation_var.get()

        if self.correlation_id:
            correlation_id_var.set(self.correlation_id)
        elif self.auto_correlation and not self._prev_correlation:
            correlation_id_var.set(str(uuid.uuid4()))

        if self.operation:
            operation_var.set(self.operation)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Restaurar estado anterior
        correlation_id_var.set(self._prev_correlation)
        operation_var.set(self._prev_operation)
        return False


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def log_exception(logger: logging.Logger, message: str, exc: BaseException) -> None:
    """
    Loggea una excepción con contexto completo.

    Args:
        logger: Logger a usar
        message: Mensaje descriptivo
        exc: Excepción a loggear
    """
    logger.error(
        f"{message}: {type(exc).__name__}: {str(exc)}",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={
            "extra_data": {
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            }
        }
    )
