"""
Тесты арифметических операторов Matrix

Проверяемые инварианты:
1. Скалярные операции: все коммутативные варианты (m op s, s op m)
2. m - s == m + (-s), s - m == s + (-m)
3. Matrix-matrix dispatch: равные формы → broadcast A → broadcast B → None
4. Деление по IEEE-754 (inf/nan вместо исключения)
5. Неподдерживаемые операнды → TypeError
"""

import math

import pytest

from src.linalg.domain import Dimensions, Matrix


@pytest.fixture
def matrix() -> Matrix:
    return Matrix.from_rows([[8.0, 5.3], [2.5, 1.2]])


@pytest.fixture
def matrix2() -> Matrix:
    return Matrix.from_rows([[13.1, 1.98], [2.2, 0.87]])


@pytest.fixture
def matrix3() -> Matrix:
    """2 × 4: broadcast-совместима с 2 × 2 через column-tiling"""
    return Matrix.from_rows([[13.1, 1.98, 2.2, 0.87], [2.2, 0.87, 1.2, 3.76]])


@pytest.fixture
def mismatched() -> Matrix:
    """3 × 3: несовместима с 2 × 2"""
    return Matrix.zeros(Dimensions(rows=3, columns=3)) + 1.0


# =============================================================================
# SCALAR OPERATORS
# =============================================================================


class TestScalarOperators:
    """Тесты операторов с float"""

    @pytest.fixture
    def values_matrix(self) -> Matrix:
        return Matrix.from_rows([[10.0, 12.3, 0.34], [0.1, 0.2, 1.2]])

    def test_add(self, values_matrix: Matrix) -> None:
        assert (values_matrix + 2.0).values[0] == 12.0

    def test_subtract(self, values_matrix: Matrix) -> None:
        assert (values_matrix - 2.0).values[0] == 8.0

    def test_multiply(self, values_matrix: Matrix) -> None:
        assert (values_matrix * 2.0).values[0] == 20.0

    def test_invert_sign(self, values_matrix: Matrix) -> None:
        assert values_matrix.invert_sign().values[0] == -10.0

    def test_unary_minus(self, values_matrix: Matrix) -> None:
        assert -values_matrix == values_matrix.invert_sign()

    def test_scalar_minus_matrix(self, values_matrix: Matrix) -> None:
        """s - m == s + (-m)"""
        result = 2.0 - values_matrix
        assert result == 2.0 + values_matrix.invert_sign()
        assert result.values[0] == -8.0

    def test_add_commutative(self, values_matrix: Matrix) -> None:
        assert values_matrix + 3.5 == 3.5 + values_matrix

    def test_multiply_commutative(self, values_matrix: Matrix) -> None:
        assert values_matrix * 3.5 == 3.5 * values_matrix

    def test_subtract_is_add_negated(self, values_matrix: Matrix) -> None:
        """m - s == m + (-s)"""
        assert values_matrix - 0.7 == values_matrix + (-0.7)

    def test_int_scalar(self, values_matrix: Matrix) -> None:
        assert (values_matrix + 2).values[0] == 12.0
        assert (2 * values_matrix).values[0] == 20.0

    def test_shape_preserved(self, values_matrix: Matrix) -> None:
        assert (values_matrix * 0.5).dimensions == values_matrix.dimensions

    def test_source_not_modified(self, values_matrix: Matrix) -> None:
        """Операция возвращает новый экземпляр"""
        before = values_matrix.values
        _ = values_matrix + 1.0
        assert values_matrix.values == before

    def test_named_methods(self, values_matrix: Matrix) -> None:
        assert values_matrix.add_scalar(2.0) == values_matrix + 2.0
        assert values_matrix.multiply_by_scalar(2.0) == values_matrix * 2.0

    def test_scalar_division_not_supported(self, values_matrix: Matrix) -> None:
        with pytest.raises(TypeError):
            values_matrix / 2.0  # type: ignore[operator]

        with pytest.raises(TypeError):
            2.0 / values_matrix  # type: ignore[operator]

    def test_unsupported_operand(self, values_matrix: Matrix) -> None:
        with pytest.raises(TypeError):
            values_matrix + "1"  # type: ignore[operator]

    def test_bool_is_not_a_scalar(self, values_matrix: Matrix) -> None:
        with pytest.raises(TypeError):
            values_matrix * True  # type: ignore[operator]


# =============================================================================
# MATRIX OPERATORS
# =============================================================================


class TestMatrixOperators:
    """Тесты matrix-matrix операторов"""

    def test_add(self, matrix: Matrix, matrix2: Matrix) -> None:
        result = matrix + matrix2
        assert result is not None
        assert result.values[0] == 21.1

    def test_add_broadcast_left(self, matrix: Matrix, matrix3: Matrix) -> None:
        """2×2 + 2×4: левый операнд расширяется column-tiling"""
        result = matrix + matrix3
        assert result is not None
        assert len(result.values) == 8
        assert result.values[0] == 21.1
        assert result.dimensions == Dimensions(rows=2, columns=4)

    def test_subtract(self, matrix: Matrix, matrix2: Matrix) -> None:
        result = matrix - matrix2
        assert result is not None
        assert result.values[0] == -5.1

    def test_subtract_is_add_inverted(self, matrix: Matrix, matrix2: Matrix) -> None:
        assert matrix - matrix2 == matrix + matrix2.invert_sign()

    def test_multiply(self, matrix: Matrix, matrix2: Matrix) -> None:
        result = matrix * matrix2
        assert result is not None
        assert result.values[0] == 104.8

    def test_multiply_broadcast_left(self, matrix: Matrix, matrix3: Matrix) -> None:
        result = matrix * matrix3
        assert result is not None
        assert len(result.values) == 8
        assert result.values[0] == 104.8

    def test_multiply_broadcast_right(self, matrix: Matrix, matrix3: Matrix) -> None:
        """2×4 * 2×2: левый не расширяется до 2×2, расширяется правый"""
        result = matrix3 * matrix
        assert result is not None
        assert result.dimensions == Dimensions(rows=2, columns=4)
        assert result.values[0] == 104.8
        assert result.values[1] == pytest.approx(1.98 * 8.0)
        assert result.values[2] == pytest.approx(2.2 * 5.3)

    def test_divide(self, matrix: Matrix, matrix2: Matrix) -> None:
        result = matrix2 / matrix
        assert result is not None
        assert result.values[0] == 1.6375

    def test_row_tiling_dispatch(self) -> None:
        """1×2 + 2×2: левый операнд повторяется построчно"""
        row = Matrix.from_rows([[1.0, 2.0]])
        square = Matrix.from_rows([[10.0, 20.0], [30.0, 40.0]])
        result = row + square
        assert result == Matrix.from_rows([[11.0, 22.0], [31.0, 42.0]])

    def test_column_vector_dispatch(self) -> None:
        """2×1 * 2×3: каждый элемент столбца повторяется по строке"""
        column = Matrix.from_rows([[1.0], [2.0]])
        block = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert column * block == Matrix.from_rows([[1.0, 2.0, 3.0], [8.0, 10.0, 12.0]])
        assert block * column == Matrix.from_rows([[1.0, 2.0, 3.0], [8.0, 10.0, 12.0]])

    @pytest.mark.parametrize(
        "operation",
        [
            lambda a, b: a + b,
            lambda a, b: a - b,
            lambda a, b: a * b,
            lambda a, b: a / b,
        ],
    )
    def test_incompatible_shapes_fail(
        self, matrix: Matrix, mismatched: Matrix, operation
    ) -> None:
        """2×2 op 3×3 → None (ни один паттерн broadcasting не подходит)"""
        assert operation(matrix, mismatched) is None
        assert operation(mismatched, matrix) is None

    def test_divide_by_zero_is_ieee(self) -> None:
        """Деление на ноль даёт inf/-inf/nan без исключения"""
        numerator = Matrix.from_rows([[1.0, -1.0, 0.0]])
        result = numerator / Matrix.zeros(numerator.dimensions)
        assert result is not None
        assert result.values[0] == math.inf
        assert result.values[1] == -math.inf
        assert math.isnan(result.values[2])

    def test_zero_sized_operands_same_shape(self) -> None:
        empty = Matrix.zeros(Dimensions(rows=0, columns=2))
        assert empty + empty == empty

    def test_zero_sized_operand_tiles_to_empty(self, matrix: Matrix) -> None:
        """2×2 + 0×2: row-tiling с amount = 0 даёт пустой результат"""
        empty = Matrix.zeros(Dimensions(rows=0, columns=2))
        assert matrix + empty == empty
        assert empty + matrix == empty

    def test_zero_sized_operand_incompatible(self, matrix: Matrix) -> None:
        empty = Matrix.zeros(Dimensions(rows=0, columns=3))
        assert matrix + empty is None
