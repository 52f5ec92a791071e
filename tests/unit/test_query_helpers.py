"""
Tests para los helpers de consulta (rangos y patrones ILIKE).
"""

import pytest

from src.database.queries.base import PageRange, contains_pattern


class TestPageRange:
    """Tests para PageRange."""

    def test_first_page(self):
        """La primera página empieza en 0."""
        rng = PageRange.for_page(1, 6)
        assert (rng.start, rng.end) == (0, 5)

    def test_second_page(self):
        """La segunda página sigue sin huecos."""
        rng = PageRange.for_page(2, 6)
        assert (rng.start, rng.end) == (6, 11)

    @pytest.mark.parametrize("page", [1, 2, 3, 10])
    @pytest.mark.parametrize("page_size", [1, 6, 25])
    def test_range_formula(self, page, page_size):
        """from=(p-1)*s, to=p*s-1, limit=s."""
        rng = PageRange.for_page(page, page_size)

        assert rng.start == (page - 1) * page_size
        assert rng.end == page * page_size - 1
        assert rng.offset == rng.start
        assert rng.limit == page_size

    def test_consecutive_pages_are_contiguous(self):
        """El fin de una página es el anterior al inicio de la siguiente."""
        first = PageRange.for_page(3, 7)
        second = PageRange.for_page(4, 7)
        assert second.start == first.end + 1

    @pytest.mark.parametrize("page,page_size", [(0, 6), (-1, 6), (1, 0)])
    def test_invalid_values(self, page, page_size):
        """Página o tamaño menores que 1 se rechazan."""
        with pytest.raises(ValueError):
            PageRange.for_page(page, page_size)


class TestContainsPattern:
    """Tests para contains_pattern."""

    def test_wraps_with_wildcards(self):
        """Búsqueda por subcadena."""
        assert contains_pattern("lee") == "%lee%"

    def test_empty_and_none(self):
        """Vacío o None coinciden con todo."""
        assert contains_pattern("") == "%%"
        assert contains_pattern(None) == "%%"

    def test_escapes_wildcards(self):
        """% y _ del usuario se buscan literalmente."""
        assert contains_pattern("50%") == "%50\\%%"
        assert contains_pattern("a_b") == "%a\\_b%"

    def test_escapes_escape_char(self):
        """La barra invertida se duplica."""
        assert contains_pattern("a\\b") == "%a\\\\b%"
