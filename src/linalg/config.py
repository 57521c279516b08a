"""
Конфигурация linalg

Frozen dataclass конфигурации с defaults. Экземпляр передаётся в фабрики
Matrix явно; если не передан, используется DEFAULT_MATRIX_CONFIG.
"""

from dataclasses import dataclass

from src.linalg.kernels.numerical_safeguards import validate_finite


@dataclass(frozen=True)
class MatrixConfig:
    """Конфигурация фабрик Matrix.

    Параметры Matrix.random:
    - random_low / random_high: границы равномерного распределения (включительно)
    - default_multiplier: множитель, если не передан явно
    """

    random_low: float = 0.0
    random_high: float = 1000.0
    default_multiplier: float = 1.0

    def __post_init__(self) -> None:
        validate_finite(self.random_low, "random_low")
        validate_finite(self.random_high, "random_high")
        validate_finite(self.default_multiplier, "default_multiplier")

        if self.random_low > self.random_high:
            raise ValueError(
                f"random_low must be <= random_high, got {self.random_low} > {self.random_high}"
            )


DEFAULT_MATRIX_CONFIG = MatrixConfig()
