"""
MatrixSnapshot — неизменяемый снапшот OwnedMatrix

Immutable Pydantic модель значений матрицы в момент снятия снапшота.
Совместима с JSON Schema (contracts/schema/owned_matrix.json).
Снапшот никогда не разделяет хранилище с исходной матрицей.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, StrictInt, model_validator

if TYPE_CHECKING:
    from src.core.buffers.owned_matrix import OwnedMatrix


class MatrixSnapshot(BaseModel):
    """
    Снапшот квадратной матрицы в row-major порядке.

    Immutable модель (frozen=True): изменения делаются на OwnedMatrix,
    после чего снимается новый снапшот.
    """

    size: StrictInt = Field(..., ge=0, description="Длина стороны квадратной сетки")
    cells: tuple[StrictInt, ...] = Field(
        default=(), description="size * size значений в row-major порядке"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_cell_count(self) -> "MatrixSnapshot":
        """Количество ячеек должно быть ровно size * size."""
        expected = self.size * self.size
        if len(self.cells) != expected:
            raise ValueError(
                f"cells must contain size*size={expected} values, got {len(self.cells)}"
            )
        return self

    @classmethod
    def from_matrix(cls, matrix: "OwnedMatrix") -> "MatrixSnapshot":
        """
        Снапшот текущих значений матрицы.

        Args:
            matrix: Исходная матрица (не изменяется)

        Returns:
            Новый MatrixSnapshot
        """
        return cls(
            size=matrix.size,
            cells=tuple(value for _, _, value in matrix.iter_cells()),
        )

    def to_matrix(self) -> "OwnedMatrix":
        """Новая OwnedMatrix с независимым хранилищем."""
        from src.core.buffers.owned_matrix import OwnedMatrix

        return OwnedMatrix.from_snapshot(self)

    def cell(self, row: int, col: int) -> int:
        """
        Значение ячейки (row, col).

        Raises:
            IndexError: Если индекс вне [0, size)
        """
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) out of range for size {self.size}")
        return self.cells[row * self.size + col]
