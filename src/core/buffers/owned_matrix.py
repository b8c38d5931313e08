"""
OwnedMatrix — квадратный целочисленный буфер с value semantics

Модуль реализует value type, который эксклюзивно владеет квадратной сеткой
целых чисел размера size × size:
- Конструирование с явным размером и значением заполнения
- Глубокое копирование (copy_of, copy.copy, copy.deepcopy)
- Глубокое присваивание с перевыделением при смене размера
- Проверка границ при любом доступе к ячейкам
- Детерминированное освобождение (release / context manager)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size == 0 ⇔ хранилище отсутствует (_cells is None)
2. size > 0 ⇒ ровно size * size инициализированных int, row-major
3. Два разных экземпляра никогда не разделяют хранилище
4. Каждая операция либо полностью успешна, либо не меняет состояние
5. Повторный release безопасен (идемпотентность)

ПРЕДСТАВЛЕНИЕ:
    Один плоский список длины size * size, индекс ячейки (row, col)
    вычисляется как row * size + col.
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional, cast

from src.core.config import DEFAULT_FILL
from src.core.logging_config import get_logger

if TYPE_CHECKING:
    from src.core.domain.snapshot import MatrixSnapshot

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """Базовое исключение для всех ошибок OwnedMatrix."""

    pass


class InvalidArgument(MatrixError, ValueError):
    """
    Нарушение контракта вызывающей стороны.

    Возникает при:
    - отрицательном или нецелом размере
    - нецелом значении ячейки или fill
    - нецелом индексе
    - попытке присвоить объект, не являющийся OwnedMatrix
    """

    pass


class OutOfRange(MatrixError, IndexError):
    """
    Индекс ячейки вне диапазона [0, size).

    Отрицательные индексы не "заворачиваются" с конца, как у list,
    а считаются выходом за границы.
    """

    pass


# =============================================================================
# STATE
# =============================================================================


class MatrixState(str, Enum):
    """Состояние владения хранилищем"""

    EMPTY = "EMPTY"
    ALLOCATED = "ALLOCATED"


# =============================================================================
# VALIDATION HELPERS
# =============================================================================


def _is_int(value: object) -> bool:
    # bool является подклассом int, но ячейкой матрицы быть не должен
    return isinstance(value, int) and not isinstance(value, bool)


def _require_int(value: object, name: str) -> int:
    if not _is_int(value):
        raise InvalidArgument(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    return value  # type: ignore[return-value]


def _validate_size(size: object) -> int:
    size = _require_int(size, "size")
    if size < 0:
        raise InvalidArgument(f"size must be non-negative, got {size}")
    return size


# =============================================================================
# OWNED MATRIX
# =============================================================================


class OwnedMatrix:
    """
    Квадратная матрица целых чисел, эксклюзивно владеющая своим хранилищем.

    Состояния: EMPTY (size == 0) и ALLOCATED(size).
    Переходы:
        OwnedMatrix(0)         → EMPTY
        OwnedMatrix(n > 0)     → ALLOCATED(n)
        assign_from(other)     → состояние other
        release()              → EMPTY

    Examples:
        >>> m = OwnedMatrix(3)
        >>> m.set(1, 1, 42)
        >>> m.get(1, 1)
        42
        >>> with OwnedMatrix(2, fill=7) as scoped:
        ...     scoped[0, 1]
        7
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int = 0, fill: int = DEFAULT_FILL):
        """
        Args:
            size: Длина стороны квадратной сетки (>= 0)
            fill: Начальное значение каждой ячейки

        Raises:
            InvalidArgument: Если size отрицательный или не int, fill не int
        """
        size = _validate_size(size)
        fill = _require_int(fill, "fill")

        self._size: int = size
        self._cells: Optional[list[int]] = [fill] * (size * size) if size > 0 else None

        if size > 0:
            logger.debug("Allocated %dx%d matrix (fill=%d)", size, size, fill)

    # -------------------------------------------------------------------------
    # Copy construction
    # -------------------------------------------------------------------------

    @classmethod
    def copy_of(cls, other: "OwnedMatrix") -> "OwnedMatrix":
        """
        Глубокая копия: новый экземпляр с независимым хранилищем.

        Args:
            other: Исходная матрица (не изменяется)

        Returns:
            Новая матрица того же размера с поэлементно равными ячейками

        Raises:
            InvalidArgument: Если other не является OwnedMatrix
        """
        if not isinstance(other, OwnedMatrix):
            raise InvalidArgument(f"Cannot copy from {type(other).__name__}")

        clone = cls.__new__(cls)
        clone._size = other._size
        clone._cells = list(other._cells) if other._cells is not None else None

        if clone._size > 0:
            logger.debug("Copied %dx%d matrix into new storage", clone._size, clone._size)
        return clone

    def copy(self) -> "OwnedMatrix":
        """Глубокая копия (эквивалент OwnedMatrix.copy_of(self))."""
        return type(self).copy_of(self)

    def __copy__(self) -> "OwnedMatrix":
        # Value semantics: даже "поверхностная" копия не разделяет хранилище
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "OwnedMatrix":
        clone = self.copy()
        memo[id(self)] = clone
        return clone

    # -------------------------------------------------------------------------
    # Assignment
    # -------------------------------------------------------------------------

    def assign_from(self, other: "OwnedMatrix") -> "OwnedMatrix":
        """
        Глубокое присваивание значений другой матрицы.

        Алгоритм:
        1. other is self → no-op
        2. other.size != self.size → сначала выделяется новое хранилище,
           затем старое отпускается (атомарность при ошибке выделения)
        3. Размеры совпадают → значения перезаписываются in-place

        Args:
            other: Источник (не изменяется)

        Returns:
            self (для цепочек вызовов)

        Raises:
            InvalidArgument: Если other не является OwnedMatrix
        """
        if not isinstance(other, OwnedMatrix):
            raise InvalidArgument(f"Cannot assign from {type(other).__name__}")

        if other is self:
            logger.debug("Self-assignment ignored")
            return self

        if other._size != self._size:
            new_cells = list(other._cells) if other._cells is not None else None
            logger.debug(
                "Reallocating matrix storage: %dx%d -> %dx%d",
                self._size,
                self._size,
                other._size,
                other._size,
            )
            self._cells = new_cells
            self._size = other._size
            return self

        if self._cells is not None and other._cells is not None:
            self._cells[:] = other._cells
        return self

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    def _offset(self, row: object, col: object) -> int:
        row = _require_int(row, "row")
        col = _require_int(col, "col")
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise OutOfRange(f"Cell ({row}, {col}) out of range for {self._size}x{self._size} matrix")
        return row * self._size + col

    def get(self, row: int, col: int) -> int:
        """
        Чтение ячейки.

        Raises:
            OutOfRange: Если row или col вне [0, size)
            InvalidArgument: Если row или col не int
        """
        offset = self._offset(row, col)
        # _offset пропускает только size > 0, значит хранилище выделено
        return cast(list[int], self._cells)[offset]

    def set(self, row: int, col: int, value: int) -> None:
        """
        Запись ячейки. При ошибке матрица не изменяется.

        Raises:
            OutOfRange: Если row или col вне [0, size)
            InvalidArgument: Если row, col или value не int
        """
        offset = self._offset(row, col)
        value = _require_int(value, "value")
        cast(list[int], self._cells)[offset] = value

    def __getitem__(self, key: tuple[int, int]) -> int:
        row, col = self._unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: object) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise InvalidArgument(f"Matrix index must be a (row, col) tuple, got {key!r}")
        return key[0], key[1]

    # -------------------------------------------------------------------------
    # Release
    # -------------------------------------------------------------------------

    def release(self) -> None:
        """
        Освобождение хранилища и переход в EMPTY.

        Идемпотентно: повторный вызов ничего не делает.
        """
        if self._cells is None:
            return

        logger.debug("Released %dx%d matrix", self._size, self._size)
        self._cells = None
        self._size = 0

    close = release

    def __enter__(self) -> "OwnedMatrix":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Длина стороны сетки"""
        return self._size

    @property
    def state(self) -> MatrixState:
        return MatrixState.EMPTY if self._cells is None else MatrixState.ALLOCATED

    @property
    def is_empty(self) -> bool:
        return self._cells is None

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Снимок значений построчно (копия, не view)"""
        if self._cells is None:
            return ()
        n = self._size
        return tuple(tuple(self._cells[r * n : (r + 1) * n]) for r in range(n))

    def iter_cells(self) -> Iterator[tuple[int, int, int]]:
        """Итератор (row, col, value) в row-major порядке"""
        if self._cells is None:
            return
        n = self._size
        for offset, value in enumerate(self._cells):
            yield offset // n, offset % n, value

    def __len__(self) -> int:
        return self._size * self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OwnedMatrix):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    # Изменяемый value type: хешировать нельзя
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OwnedMatrix(size={self._size}, state={self.state.value})"

    def __str__(self) -> str:
        from src.core.buffers.render import format_matrix

        return format_matrix(self)

    # -------------------------------------------------------------------------
    # Snapshot bridge
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> "MatrixSnapshot":
        """Неизменяемый снапшот (pydantic) текущих значений"""
        from src.core.domain.snapshot import MatrixSnapshot

        return MatrixSnapshot.from_matrix(self)

    @classmethod
    def from_snapshot(cls, snapshot: "MatrixSnapshot") -> "OwnedMatrix":
        """Новая матрица со значениями из снапшота"""
        matrix = cls(snapshot.size)
        if matrix._cells is not None:
            matrix._cells[:] = snapshot.cells
        return matrix
