"""
Elementwise — поэлементные операции над плоскими буферами

Все функции работают с плоскими последовательностями float в row-major
порядке и возвращают новый list; исходные данные не изменяются.

Бинарные операции требуют буферов одинаковой длины: проверку формы
(Dimensions) выполняет вызывающая сторона, здесь контролируется только длина.
"""

from typing import Callable, Sequence

from src.linalg.kernels.numerical_safeguards import ieee_divide, ieee_log


# =============================================================================
# SCALAR MAPS
# =============================================================================


def add_scalar(values: Sequence[float], scalar: float) -> list[float]:
    """Прибавление скаляра к каждому элементу."""
    return [value + scalar for value in values]


def multiply_by_scalar(values: Sequence[float], scalar: float) -> list[float]:
    """Умножение каждого элемента на скаляр."""
    return [value * scalar for value in values]


def invert_sign(values: Sequence[float]) -> list[float]:
    """Смена знака каждого элемента."""
    return [-value for value in values]


def log(values: Sequence[float]) -> list[float]:
    """
    Поэлементный натуральный логарифм.

    Нулевые и отрицательные значения дают -inf / nan (IEEE-754).
    """
    return [ieee_log(value) for value in values]


# =============================================================================
# BINARY OPERATIONS
# =============================================================================


def _zip_with(
    left: Sequence[float],
    right: Sequence[float],
    operation: Callable[[float, float], float],
) -> list[float]:
    if len(left) != len(right):
        raise ValueError(
            f"Buffers must have equal length, got {len(left)} and {len(right)}"
        )
    return [operation(a, b) for a, b in zip(left, right)]


def add(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Поэлементное сложение."""
    return _zip_with(left, right, lambda a, b: a + b)


def multiply(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Поэлементное умножение (Hadamard product)."""
    return _zip_with(left, right, lambda a, b: a * b)


def divide(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """
    Поэлементное деление.

    Деление на ноль не бросает исключение: результат inf/-inf/nan.
    """
    return _zip_with(left, right, ieee_divide)
