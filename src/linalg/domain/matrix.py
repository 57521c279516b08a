"""
Matrix — плотная 2-D матрица как immutable value object

Immutable Pydantic модель: плоский буфер values (row-major) + Dimensions.
Элемент (r, c) хранится по индексу r * columns + c.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(values) == dimensions.elements на любом пути конструирования
2. Dimensions неотрицательные
3. Любая "модифицирующая" операция возвращает новый экземпляр

МОДЕЛЬ ОШИБОК:
Операции с нарушаемыми предусловиями (matrix-matrix арифметика без
применимого broadcasting, from_values с неверным количеством элементов,
broadcast, dot_product с несовместимыми формами) возвращают None.
Скалярные операции, invert_sign, sum, log никогда не падают.

BINARY DISPATCH (+, -, *, /) для A op B:
1. A.dimensions == B.dimensions → поэлементно
2. A.broadcast(B.dimensions) успешен → op(A', B)
3. B.broadcast(A.dimensions) успешен → op(A, B')
4. Иначе → None
Вычитание определено как A + (-B), отдельного примитива нет.
"""

import logging
import random as _random
from enum import Enum
from typing import Any, Callable, Iterable, Sequence

import jsonschema
from pydantic import BaseModel, Field, model_validator

from src.linalg.config import DEFAULT_MATRIX_CONFIG, MatrixConfig
from src.linalg.contracts import validate_matrix_rows
from src.linalg.domain.dimensions import Dimensions
from src.linalg.kernels import elementwise, products, reductions
from src.linalg.kernels.broadcasting import broadcast_values
from src.linalg.kernels.numerical_safeguards import validate_non_negative_int

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS & EXCEPTIONS
# =============================================================================


class SumDirection(str, Enum):
    """Направление суммирования в Matrix.sum"""

    ROWS = "rows"  # Сумма каждой строки → столбец rows × 1
    COLUMNS = "columns"  # Сумма каждого столбца → строка 1 × columns


class MatrixContractViolation(ValueError):
    """
    Nested-row вход не является непустым прямоугольным массивом чисел.

    Бросается только Matrix.from_rows.
    """

    pass


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Плотная 2-D матрица float.

    Конструкторы:
    - Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    - Matrix.from_values([1.0, 2.0, 3.0, 4.0], Dimensions(rows=2, columns=2))
    - Matrix.zeros(dimensions)
    - Matrix.random(dimensions, multiplier=1.0)
    - Matrix(values=..., dimensions=...) — с валидацией инварианта
    """

    values: tuple[float, ...] = Field(..., description="Плоский буфер (row-major)")
    dimensions: Dimensions = Field(..., description="Форма матрицы")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_shape(self) -> "Matrix":
        """Количество элементов должно совпадать с формой."""
        validate_non_negative_int(self.dimensions.rows, "dimensions.rows")
        validate_non_negative_int(self.dimensions.columns, "dimensions.columns")
        if len(self.values) != self.dimensions.elements:
            raise ValueError(
                f"values length {len(self.values)} does not match "
                f"dimensions.elements {self.dimensions.elements}"
            )
        return self

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        """
        Матрица из nested-row представления.

        Строки конкатенируются по порядку;
        dimensions = (len(rows), len(rows[0])).

        Raises:
            MatrixContractViolation: Если rows пустой, содержит пустые или
                нечисловые строки, либо строки разной длины
        """
        try:
            payload = [list(row) for row in rows]
        except TypeError as e:
            raise MatrixContractViolation(
                f"rows must be a sequence of sequences: {e}"
            ) from e

        try:
            validate_matrix_rows(payload)
        except jsonschema.ValidationError as e:
            raise MatrixContractViolation(f"Invalid matrix rows: {e.message}") from e

        columns = len(payload[0])
        for index, row in enumerate(payload):
            if len(row) != columns:
                raise MatrixContractViolation(
                    f"Row {index} has {len(row)} elements, expected {columns}"
                )

        values = tuple(value for row in payload for value in row)
        return cls(
            values=values,
            dimensions=Dimensions(rows=len(payload), columns=columns),
        )

    @classmethod
    def from_values(
        cls, values: Sequence[float], dimensions: Dimensions
    ) -> "Matrix | None":
        """
        Матрица из плоского буфера и формы.

        Returns:
            Matrix или None, если len(values) != dimensions.elements
            (или форма отрицательная)
        """
        if dimensions.rows < 0 or dimensions.columns < 0:
            logger.debug("from_values rejected: negative dimensions %r", dimensions)
            return None

        if len(values) != dimensions.elements:
            logger.debug(
                "from_values rejected: %d values for %r", len(values), dimensions
            )
            return None

        return cls(values=tuple(values), dimensions=dimensions)

    @classmethod
    def zeros(cls, dimensions: Dimensions) -> "Matrix":
        """Матрица заданной формы, заполненная 0.0."""
        return cls(values=(0.0,) * max(dimensions.elements, 0), dimensions=dimensions)

    @classmethod
    def random(
        cls,
        dimensions: Dimensions,
        multiplier: float | None = None,
        rng: _random.Random | None = None,
        config: MatrixConfig | None = None,
    ) -> "Matrix":
        """
        Матрица со случайными значениями.

        Каждый элемент независимо и равномерно выбирается из
        [config.random_low, config.random_high] (по умолчанию [0, 1000])
        и умножается на multiplier.

        Args:
            dimensions: Форма матрицы
            multiplier: Множитель (default: config.default_multiplier = 1.0)
            rng: Генератор для воспроизводимых значений (default: модуль random)
            config: Конфигурация (default: DEFAULT_MATRIX_CONFIG)
        """
        config = config or DEFAULT_MATRIX_CONFIG
        if multiplier is None:
            multiplier = config.default_multiplier
        uniform = rng.uniform if rng is not None else _random.uniform

        values = tuple(
            uniform(config.random_low, config.random_high) * multiplier
            for _ in range(max(dimensions.elements, 0))
        )
        return cls(values=values, dimensions=dimensions)

    def _with_values(self, values: Sequence[float]) -> "Matrix":
        return Matrix(values=tuple(values), dimensions=self.dimensions)

    # =========================================================================
    # VIEWS
    # =========================================================================

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)"""
        return self.dimensions.as_tuple()

    def rows(self) -> tuple[tuple[float, ...], ...]:
        """Nested-row представление (обратное к from_rows)."""
        columns = self.dimensions.columns
        return tuple(
            self.values[i * columns : (i + 1) * columns]
            for i in range(self.dimensions.rows)
        )

    # =========================================================================
    # SCALAR OPERATIONS
    # =========================================================================

    def add_scalar(self, scalar: float) -> "Matrix":
        """Прибавление скаляра к каждому элементу."""
        return self._with_values(elementwise.add_scalar(self.values, scalar))

    def multiply_by_scalar(self, scalar: float) -> "Matrix":
        """Умножение каждого элемента на скаляр."""
        return self._with_values(elementwise.multiply_by_scalar(self.values, scalar))

    def invert_sign(self) -> "Matrix":
        """Смена знака каждого элемента."""
        return self._with_values(elementwise.invert_sign(self.values))

    # =========================================================================
    # BROADCASTING
    # =========================================================================

    def broadcast(self, to: Dimensions) -> "Matrix | None":
        """
        Расширение матрицы до формы to через тайлинг.

        Паттерны (первый совпавший):
        1. to.rows == rows и to.columns кратно columns → повтор каждого элемента
        2. to.columns == columns и to.rows кратно rows → повтор всего буфера

        Returns:
            Новая матрица формы to или None
        """
        values = broadcast_values(
            self.values,
            self.dimensions.rows,
            self.dimensions.columns,
            to.rows,
            to.columns,
        )
        if values is None:
            return None
        return Matrix.from_values(values, to)

    def _apply_elementwise(
        self,
        other: "Matrix",
        operation: Callable[[Sequence[float], Sequence[float]], list[float]],
    ) -> "Matrix | None":
        if self.dimensions == other.dimensions:
            return self._with_values(operation(self.values, other.values))

        broadcasted = self.broadcast(other.dimensions)
        if broadcasted is not None:
            return other._with_values(operation(broadcasted.values, other.values))

        broadcasted = other.broadcast(self.dimensions)
        if broadcasted is not None:
            return self._with_values(operation(self.values, broadcasted.values))

        logger.debug(
            "Elementwise %s rejected: %r and %r are not broadcast-compatible",
            operation.__name__,
            self.dimensions,
            other.dimensions,
        )
        return None

    # =========================================================================
    # REDUCTIONS & MAPS
    # =========================================================================

    def sum(self, direction: SumDirection | None = None) -> "float | Matrix":
        """
        Суммирование.

        Args:
            direction: None — сумма всех элементов (float);
                SumDirection.ROWS — столбец rows × 1 из сумм строк;
                SumDirection.COLUMNS — строка 1 × columns из сумм столбцов

        Накопление — левая свёртка от 0.0 в порядке хранения.
        """
        rows, columns = self.shape

        if direction is None:
            return reductions.sum_all(self.values)

        direction = SumDirection(direction)
        if direction is SumDirection.ROWS:
            return Matrix(
                values=tuple(reductions.sum_rows(self.values, rows, columns)),
                dimensions=Dimensions(rows=rows, columns=1),
            )
        return Matrix(
            values=tuple(reductions.sum_columns(self.values, rows, columns)),
            dimensions=Dimensions(rows=1, columns=columns),
        )

    def log(self) -> "Matrix":
        """Поэлементный натуральный логарифм (0 → -inf, x < 0 → nan)."""
        return self._with_values(elementwise.log(self.values))

    # =========================================================================
    # PRODUCTS
    # =========================================================================

    def dot_product(self, other: "Matrix") -> "Matrix | None":
        """
        Матричное умножение.

        Returns:
            Матрица формы (self.rows, other.columns) или None,
            если self.columns != other.rows
        """
        values = products.dot_product(
            self.values,
            self.dimensions.rows,
            self.dimensions.columns,
            other.values,
            other.dimensions.rows,
            other.dimensions.columns,
        )
        if values is None:
            return None
        return Matrix.from_values(
            values,
            Dimensions(rows=self.dimensions.rows, columns=other.dimensions.columns),
        )

    def transpose(self) -> "Matrix":
        """Транспонированная матрица формы dimensions.transpose."""
        values = products.transpose(
            self.values, self.dimensions.rows, self.dimensions.columns
        )
        return Matrix(values=tuple(values), dimensions=self.dimensions.transpose)

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: Any) -> "Matrix | None":
        if isinstance(other, Matrix):
            return self._apply_elementwise(other, elementwise.add)
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Any) -> "Matrix":
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __sub__(self, other: Any) -> "Matrix | None":
        if isinstance(other, Matrix):
            return self + other.invert_sign()
        if _is_scalar(other):
            return self + (-other)
        return NotImplemented

    def __rsub__(self, other: Any) -> "Matrix":
        if _is_scalar(other):
            return other + self.invert_sign()
        return NotImplemented

    def __mul__(self, other: Any) -> "Matrix | None":
        if isinstance(other, Matrix):
            return self._apply_elementwise(other, elementwise.multiply)
        if _is_scalar(other):
            return self.multiply_by_scalar(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Matrix":
        if _is_scalar(other):
            return self.multiply_by_scalar(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> "Matrix | None":
        if isinstance(other, Matrix):
            return self._apply_elementwise(other, elementwise.divide)
        return NotImplemented

    def __neg__(self) -> "Matrix":
        return self.invert_sign()

    def __matmul__(self, other: Any) -> "Matrix | None":
        if isinstance(other, Matrix):
            return self.dot_product(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows()!r}, dimensions={self.dimensions!r})"
