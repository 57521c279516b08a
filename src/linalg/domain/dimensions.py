"""
Dimensions — форма матрицы (rows, columns)

Immutable Pydantic модель. Равенство структурное (оба поля равны),
экземпляры hashable. Отрицательные значения на этом уровне не запрещены:
жёсткую проверку выполняет Matrix.
"""

from pydantic import BaseModel, Field


class Dimensions(BaseModel):
    """
    Форма матрицы.

    Производные величины:
    - elements = rows * columns
    - transpose = Dimensions(rows=columns, columns=rows)
    """

    rows: int = Field(..., description="Количество строк")
    columns: int = Field(..., description="Количество столбцов")

    model_config = {"frozen": True}  # Immutable

    @property
    def elements(self) -> int:
        """Количество всех элементов матрицы."""
        return self.rows * self.columns

    @property
    def transpose(self) -> "Dimensions":
        """Форма транспонированной матрицы."""
        return Dimensions(rows=self.columns, columns=self.rows)

    @property
    def T(self) -> "Dimensions":
        return self.transpose

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def __repr__(self) -> str:
        return f"Dimensions(rows={self.rows}, columns={self.columns})"
