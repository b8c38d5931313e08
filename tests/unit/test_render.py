"""
Тесты для текстового дампа OwnedMatrix

Проверяет:
1. Row-major порядок строк и ячеек
2. Выравнивание по ширине
3. Пустую матрицу
4. Отсутствие мутаций
"""

import pytest

from src.core.buffers import InvalidArgument, OwnedMatrix, format_matrix
from src.core.config import EMPTY_RENDER


class TestFormatMatrix:
    """Тесты format_matrix"""

    def test_row_major_dump(self) -> None:
        matrix = OwnedMatrix(2)
        matrix[0, 1] = 10
        assert format_matrix(matrix) == " 0 10\n 0  0"

    def test_negative_values_widen_cells(self) -> None:
        matrix = OwnedMatrix(2, fill=1)
        matrix[1, 1] = -5
        assert format_matrix(matrix) == " 1  1\n 1 -5"

    def test_explicit_width_and_separator(self) -> None:
        matrix = OwnedMatrix(2, fill=3)
        assert format_matrix(matrix, cell_width=3, separator="|") == "  3|  3\n  3|  3"

    def test_empty_matrix(self) -> None:
        assert format_matrix(OwnedMatrix(0)) == EMPTY_RENDER

    def test_released_matrix_renders_empty(self) -> None:
        matrix = OwnedMatrix(3)
        matrix.release()
        assert format_matrix(matrix) == EMPTY_RENDER

    def test_line_count(self) -> None:
        assert len(format_matrix(OwnedMatrix(5)).splitlines()) == 5

    def test_read_only(self) -> None:
        """Форматирование не меняет матрицу"""
        matrix = OwnedMatrix(3, fill=2)
        matrix[2, 0] = 8
        before = matrix.copy()

        format_matrix(matrix)
        str(matrix)

        assert matrix == before

    def test_negative_width_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="cell_width"):
            format_matrix(OwnedMatrix(1), cell_width=-1)
