"""
Products — извлечение строк/столбцов и матричное умножение

Dot product реализован классическим тройным циклом O(n · m · k) без
блочной оптимизации:

    C[i, j] = Σ_k A[i, k] * B[k, j]

Строка i матрицы A и столбец j матрицы B извлекаются через get_row/get_column,
затем считается скалярное произведение с накоплением слева направо от 0.0.

Границы индексов строгие: 0 <= index < rows (для строк) и
0 <= index < columns (для столбцов). Индекс вне диапазона → None.
"""

import logging
from typing import Sequence

logger = logging.getLogger(__name__)


# =============================================================================
# ROW / COLUMN EXTRACTION
# =============================================================================


def get_row(
    values: Sequence[float], rows: int, columns: int, index: int
) -> list[float] | None:
    """
    Строка index как непрерывный срез [index * columns, (index + 1) * columns).

    Returns:
        Список длины columns или None, если index вне [0, rows)
    """
    if not 0 <= index < rows:
        logger.debug("Row index %d out of range for %d rows", index, rows)
        return None

    offset = columns * index
    return list(values[offset : offset + columns])


def get_column(
    values: Sequence[float], rows: int, columns: int, index: int
) -> list[float] | None:
    """
    Столбец index: элементы с плоскими индексами index + i * columns.

    Returns:
        Новый список длины rows или None, если index вне [0, columns)
    """
    if not 0 <= index < columns:
        logger.debug("Column index %d out of range for %d columns", index, columns)
        return None

    return [values[index + i * columns] for i in range(rows)]


# =============================================================================
# PRODUCTS
# =============================================================================


def inner_product(left: Sequence[float], right: Sequence[float]) -> float | None:
    """
    Скалярное произведение двух векторов одинаковой длины.

    Накопление строго слева направо от 0.0.

    Returns:
        Сумма попарных произведений или None при разной длине
    """
    if len(left) != len(right):
        logger.debug(
            "Inner product rejected: lengths %d and %d differ", len(left), len(right)
        )
        return None

    value = 0.0
    for a, b in zip(left, right):
        value = value + a * b
    return value


def dot_product(
    left: Sequence[float],
    left_rows: int,
    left_columns: int,
    right: Sequence[float],
    right_rows: int,
    right_columns: int,
) -> list[float] | None:
    """
    Матричное умножение плоских буферов.

    Args:
        left: Буфер A формы (left_rows, left_columns)
        right: Буфер B формы (right_rows, right_columns)

    Returns:
        Буфер формы (left_rows, right_columns) или None, если
        left_columns != right_rows
    """
    if left_columns != right_rows:
        logger.debug(
            "Dot product rejected: (%d, %d) x (%d, %d)",
            left_rows,
            left_columns,
            right_rows,
            right_columns,
        )
        return None

    # Столбцы B не зависят от i, извлекаем один раз
    right_columns_cache: list[list[float]] = []
    for j in range(right_columns):
        column = get_column(right, right_rows, right_columns, j)
        if column is None:
            return None
        right_columns_cache.append(column)

    result: list[float] = []
    for i in range(left_rows):
        row = get_row(left, left_rows, left_columns, i)
        if row is None:
            return None

        for column in right_columns_cache:
            value = inner_product(row, column)
            if value is None:
                return None
            result.append(value)

    return result


def transpose(values: Sequence[float], rows: int, columns: int) -> list[float]:
    """
    Транспонирование: строки результата — столбцы источника.

    Returns:
        Буфер формы (columns, rows)
    """
    result: list[float] = []
    for j in range(columns):
        column = get_column(values, rows, columns, j)
        if column is not None:
            result.extend(column)
    return result
