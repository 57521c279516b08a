"""
Reductions — суммирование плоских буферов по всей матрице и по направлениям

Порядок накопления фиксирован (левая свёртка от 0.0 в порядке хранения),
поэтому результаты воспроизводимы бит-в-бит.
"""

from typing import Sequence

from src.linalg.kernels.numerical_safeguards import left_fold_sum


def sum_all(values: Sequence[float]) -> float:
    """Сумма всех элементов."""
    return left_fold_sum(values)


def sum_rows(values: Sequence[float], rows: int, columns: int) -> list[float]:
    """
    Сумма каждой логической строки.

    Строка i — непрерывный срез [i * columns, (i + 1) * columns).

    Returns:
        Список длины rows (столбец rows × 1)
    """
    return [
        left_fold_sum(values[i * columns : (i + 1) * columns]) for i in range(rows)
    ]


def sum_columns(values: Sequence[float], rows: int, columns: int) -> list[float]:
    """
    Сумма каждого логического столбца.

    Столбец j — элементы с плоскими индексами j, j + columns, j + 2 * columns, ...
    (по одному элементу из каждой строки).

    Returns:
        Список длины columns (строка 1 × columns)
    """
    return [
        left_fold_sum(values[j + i * columns] for i in range(rows))
        for j in range(columns)
    ]
