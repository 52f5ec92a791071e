"""
Tests para el resultado tipado (Ok / Failure).
"""

import pytest

from src.dashboard.result import Failure, Ok, capture
from src.utils.errors import NotFoundError, StoreError


async def _returns(value):
    return value


async def _raises(error):
    raise error


class TestOkFailure:
    """Tests para Ok y Failure."""

    def test_ok(self):
        """Ok expone el valor."""
        result = Ok(3)
        assert result.is_ok is True
        assert result.is_failure is False
        assert result.unwrap() == 3

    def test_failure_unwrap_raises(self):
        """unwrap de Failure relanza el error de dominio."""
        error = StoreError("Failed to fetch revenue data.")
        result = Failure(error)

        assert result.is_ok is False
        assert result.is_failure is True
        with pytest.raises(StoreError) as exc_info:
            result.unwrap()
        assert exc_info.value is error


class TestCapture:
    """Tests para capture."""

    @pytest.mark.asyncio
    async def test_success(self):
        """Una corutina exitosa produce Ok."""
        result = await capture(_returns([1, 2]))
        assert isinstance(result, Ok)
        assert result.value == [1, 2]

    @pytest.mark.asyncio
    async def test_data_access_error(self):
        """Un DataAccessError produce Failure."""
        result = await capture(_raises(NotFoundError("Failed to fetch invoice.")))

        assert isinstance(result, Failure)
        assert str(result.error) == "Failed to fetch invoice."

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        """Errores de programación no se empaquetan."""
        with pytest.raises(ValueError):
            await capture(_raises(ValueError("page debe ser >= 1")))
