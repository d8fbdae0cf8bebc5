"""
Matrices — генераторы матриц преобразования и точное умножение

Два взаимоисключающих метода конверсии:
- Offset (Taylor shift): верхнетреугольная Pascal-матрица
  M[r][c] = C(power, k) * offset^k, power = size-1-r, k = c-r
- Multiples (substitution): диагональная матрица factor^(size-1-i)

Строка цифр (big-endian), умноженная на матрицу, даёт вектор коэффициентов
числа в целевой позиционной системе до нормализации цифр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все элементы — int или Rational (никаких float)
2. columns(N) != rows(M) → MatrixDimensionMismatch (ошибка программиста)
3. Делимость оснований для multiples проверяет вызывающий код
"""

from typing import Sequence

from radixshift.core.math.combinatorics import binomial
from radixshift.core.math.rational import Number, Rational, as_rational

Matrix = list[list[Number]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixDimensionMismatch(Exception):
    """
    Несовпадение размерностей при умножении матриц.

    Класс ошибок программиста (дефект вызывающего кода), а не пользовательского
    ввода. Pipeline не перехватывает это исключение.
    """
    pass


# =============================================================================
# ГЕНЕРАТОРЫ
# =============================================================================


def pascal_offset_matrix(size: int, offset: int) -> Matrix:
    """
    Pascal/offset матрица для Taylor shift.

    Кодирует разложение (target + offset)^power по биному Ньютона.

    Args:
        size: Размер квадратной матрицы (длина вектора цифр)
        offset: source_base - target_base (любой знак, в т.ч. 0)

    Returns:
        Верхнетреугольная матрица size×size из Rational

    Examples:
        >>> [[str(x) for x in row] for row in pascal_offset_matrix(2, 3)]
        [['1', '3'], ['0', '1']]
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    matrix: Matrix = [[Rational(0) for _ in range(size)] for _ in range(size)]
    for r in range(size):
        power = size - 1 - r
        for c in range(r, size):
            k = c - r
            matrix[r][c] = Rational(binomial(power, k) * offset ** k)
    return matrix


def multiples_factor(source_base: int, target_base: int) -> Rational:
    """
    Масштабный множитель для multiples метода.

    - |target| > |source| (дробное направление): 1 / (target / source)
    - иначе: source / target

    Оба варианта равны Rational(source, target); предусловие — одно основание
    делит другое (здесь не проверяется).
    """
    if abs(target_base) > abs(source_base):
        return Rational(1, target_base // source_base)
    return Rational(source_base // target_base)


def diagonal_power_matrix(size: int, factor: Number) -> Matrix:
    """
    Диагональная матрица степеней factor для multiples метода.

    Позиция i (0 = старший разряд) содержит factor^(size-1-i).
    Перекрёстного смешивания разрядов нет.

    Args:
        size: Размер квадратной матрицы
        factor: Масштабный множитель (int или Rational)

    Returns:
        Диагональная матрица size×size из Rational
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    factor = as_rational(factor)
    matrix: Matrix = [[Rational(0) for _ in range(size)] for _ in range(size)]
    for i in range(size):
        matrix[i][i] = factor ** (size - 1 - i)
    return matrix


def identity_matrix(size: int) -> Matrix:
    """Единичная матрица size×size (Rational)."""
    return diagonal_power_matrix(size, 1)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def matrix_multiply(n: Sequence[Sequence[Number]], m: Sequence[Sequence[Number]]) -> Matrix:
    """
    Точное умножение N × M.

    Целочисленные элементы N продвигаются в Rational(value, 1).
    Чистая функция: входы не модифицируются.

    Args:
        n: Матрица строк-цифр (int или Rational)
        m: Матрица преобразования

    Returns:
        Матрица Rational размера rows(N) × columns(M)

    Raises:
        MatrixDimensionMismatch: Если columns(N) != rows(M)
    """
    rows_n = len(n)
    cols_n = len(n[0]) if rows_n else 0
    rows_m = len(m)
    cols_m = len(m[0]) if rows_m else 0

    if rows_n and cols_n != rows_m:
        raise MatrixDimensionMismatch(
            f"Matrix dimension mismatch: {rows_n}x{cols_n} * {rows_m}x{cols_m}"
        )

    for row in n:
        if len(row) != cols_n:
            raise MatrixDimensionMismatch(
                f"Ragged left matrix: expected {cols_n} columns, got {len(row)}"
            )

    result: Matrix = []
    for i in range(rows_n):
        out_row: list[Number] = []
        for j in range(cols_m):
            acc = Rational(0)
            for k in range(cols_n):
                acc = acc + as_rational(n[i][k]) * as_rational(m[k][j])
            out_row.append(acc)
        result.append(out_row)
    return result


# =============================================================================
# ДИАГНОСТИКА
# =============================================================================


def format_matrix(matrix: Sequence[Sequence[Number]], width: int) -> list[str]:
    """
    Текстовое представление матрицы: "[ a b c ]" с выравниванием вправо.

    Args:
        matrix: Матрица для отображения
        width: Минимальная ширина каждой ячейки

    Returns:
        Список строк (по одной на строку матрицы)
    """
    return [
        "[ " + " ".join(str(value).rjust(width) for value in row) + " ]"
        for row in matrix
    ]
