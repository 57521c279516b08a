"""
Numerical Safeguards — численные примитивы для плотных матриц

Модуль содержит базовые операции над последовательностями float, на которых
построены все матричные ядра:
- Суммирование левой свёрткой (строго в порядке хранения)
- IEEE-754 семантика деления и логарифма (без Python exceptions)
- Epsilon-сравнения float для тестов и проверок
- Валидация входных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок накопления суммы фиксирован: ((0.0 + x0) + x1) + ... + xn
2. Деление на ноль даёт inf/-inf/nan, а не ZeroDivisionError
3. log(0) = -inf, log(x < 0) = nan, а не ValueError
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# СУММИРОВАНИЕ
# =============================================================================


def left_fold_sum(values: Iterable[float]) -> float:
    """
    Сумма левой свёрткой, начиная с 0.0.

    Встроенный sum() (Python 3.12+) и math.fsum используют компенсированное
    суммирование и дают другой результат на float, поэтому здесь явный цикл.

    Examples:
        >>> left_fold_sum([0.0, 0.0, 2.1, 3.3])
        5.4
        >>> left_fold_sum([])
        0.0
    """
    total = 0.0
    for value in values:
        total = total + value
    return total


# =============================================================================
# IEEE-754 ОПЕРАЦИИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-754 семантикой.

    Python бросает ZeroDivisionError при делении float на ноль; здесь
    результат совпадает с аппаратным делением:
    - x / 0.0 при x > 0 → +inf (с учётом знака нуля)
    - x / 0.0 при x < 0 → -inf
    - 0.0 / 0.0 или nan / 0.0 → nan

    Examples:
        >>> ieee_divide(13.1, 8.0)
        1.6375
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм с IEEE-754 семантикой.

    Examples:
        >>> ieee_log(1.0)
        0.0
        >>> ieee_log(0.0)
        -inf
    """
    if math.isnan(value):
        return math.nan
    if value == 0.0:
        return -math.inf
    if value < 0.0:
        return math.nan
    return math.log(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение неотрицательное целое.

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
