"""
Render — текстовый дамп OwnedMatrix

Read-only форматирование: одна строка на ряд, ячейки в row-major порядке,
выровнены по ширине самого длинного значения. Матрица не изменяется.
"""

from typing import Optional

from src.core.buffers.owned_matrix import InvalidArgument, OwnedMatrix
from src.core.config import DEFAULT_SEPARATOR, EMPTY_RENDER


def format_matrix(
    matrix: OwnedMatrix,
    cell_width: Optional[int] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Человекочитаемый дамп всех ячеек.

    Args:
        matrix: Матрица для форматирования
        cell_width: Ширина ячейки (default: по самому длинному значению)
        separator: Разделитель ячеек в строке

    Returns:
        Многострочная строка; EMPTY_RENDER для пустой матрицы

    Raises:
        InvalidArgument: Если cell_width отрицательный

    Examples:
        >>> m = OwnedMatrix(2)
        >>> m[0, 1] = 10
        >>> print(format_matrix(m))
         0 10
         0  0
    """
    if cell_width is not None and cell_width < 0:
        raise InvalidArgument(f"cell_width must be non-negative, got {cell_width}")

    rows = matrix.rows()
    if not rows:
        return EMPTY_RENDER

    if cell_width is None:
        cell_width = max(len(str(value)) for row in rows for value in row)

    return "\n".join(
        separator.join(str(value).rjust(cell_width) for value in row) for row in rows
    )
