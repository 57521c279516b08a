"""
Broadcasting — расширение матрицы до большей формы через тайлинг

Допустимы ровно два паттерна (проверяются в этом порядке, первый совпавший
применяется):

1. Column-tiling: target_rows == rows и target_columns % columns == 0.
   Каждый элемент источника (в row-major обходе) повторяется
   amount = target_columns // columns раз подряд:
       [[a, b], [c, d]] → (2, 4) → [[a, a, b, b], [c, c, d, d]]

2. Row-tiling: target_columns == columns и target_rows % rows == 0.
   Вся последовательность значений конкатенируется
   amount = target_rows // rows раз:
       [[a, b], [c, d]] → (4, 2) → [[a, b], [c, d], [a, b], [c, d]]

Если ни один паттерн не подходит, результат None. Источник с нулевой
размерностью не расширяется (деление на ноль в вычислении amount).
"""

import logging
from typing import Sequence

logger = logging.getLogger(__name__)


def tile_columns(values: Sequence[float], amount: int) -> list[float]:
    """Повтор каждого элемента amount раз подряд."""
    tiled: list[float] = []
    for value in values:
        tiled.extend([value] * amount)
    return tiled


def tile_rows(values: Sequence[float], amount: int) -> list[float]:
    """Конкатенация всей последовательности amount раз."""
    return list(values) * amount


def broadcast_values(
    values: Sequence[float],
    rows: int,
    columns: int,
    target_rows: int,
    target_columns: int,
) -> list[float] | None:
    """
    Расширение плоского буфера формы (rows, columns) до (target_rows, target_columns).

    Args:
        values: Плоский буфер источника (row-major)
        rows: Количество строк источника
        columns: Количество столбцов источника
        target_rows: Количество строк цели
        target_columns: Количество столбцов цели

    Returns:
        Новый плоский буфер длины target_rows * target_columns или None,
        если ни один паттерн broadcasting не применим
    """
    if rows <= 0 or columns <= 0:
        logger.debug(
            "Broadcast rejected: zero-sized source (%d, %d)", rows, columns
        )
        return None

    if target_rows < 0 or target_columns < 0:
        logger.debug(
            "Broadcast rejected: negative target (%d, %d)", target_rows, target_columns
        )
        return None

    if target_rows == rows and target_columns % columns == 0:
        return tile_columns(values, target_columns // columns)

    if target_columns == columns and target_rows % rows == 0:
        return tile_rows(values, target_rows // rows)

    logger.debug(
        "Broadcast rejected: (%d, %d) is not tileable to (%d, %d)",
        rows,
        columns,
        target_rows,
        target_columns,
    )
    return None
