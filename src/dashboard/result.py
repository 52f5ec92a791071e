"""
Resultado Tipado

Forma alternativa de consumir el servicio: en lugar de capturar
excepciones, el llamador recibe Ok(valor) o Failure(error).

Uso:
    result = await capture(service.get_card_summary())
    if result.is_ok:
        render(result.value)
    else:
        show(str(result.error))
"""

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

from src.utils.errors import DataAccessError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Operación exitosa."""
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Operación fallida con su error de dominio."""
    error: DataAccessError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Failure]


async def capture(operation: Awaitable[T]) -> "Result[T]":
    """
    Ejecuta una operación del servicio y empaqueta su resultado.

    Sólo los DataAccessError se convierten en Failure; cualquier otra
    excepción (ej: ValueError por argumentos inválidos) se propaga.

    Args:
        operation: Corutina del servicio (ej: service.get_revenue())

    Returns:
        Ok con el valor o Failure con el error
    """
    try:
        return Ok(await operation)
    except DataAccessError as e:
        return Failure(e)
