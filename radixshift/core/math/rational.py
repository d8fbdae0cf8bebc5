"""
Rational — точная рациональная арифметика произвольной точности

Модуль предоставляет value-тип Rational (numerator/denominator на Python int)
и объединённый числовой тип Number = int | Rational, который используется
во всех матрицах конверсии.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 всегда (знак переносится в numerator при конструировании)
2. Нулевой знаменатель никогда не конструируется (ZeroDenominatorError)
3. Никаких float: все операции точные, без накопления погрешности
4. Результаты add/multiply сокращаются по gcd (ограничение роста чисел)
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Union


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDenominatorError(ZeroDivisionError):
    """Попытка сконструировать Rational с нулевым знаменателем."""
    pass


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True, eq=False)
class Rational:
    """
    Точная дробь numerator/denominator.

    Не обязана быть в несократимом виде: сравнение выполняется
    перекрёстным умножением, поэтому Rational(2, 4) == Rational(1, 2).

    Examples:
        >>> str(Rational(3, -6))
        '-3/6'
        >>> str(Rational(4, 2).reduced())
        '2'
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDenominatorError(
                f"Rational denominator must be non-zero, got {self.numerator}/0"
            )

        # Знак всегда в числителе
        if self.denominator < 0:
            object.__setattr__(self, "numerator", -self.numerator)
            object.__setattr__(self, "denominator", -self.denominator)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Number") -> "Rational":
        if isinstance(other, int):
            other = Rational(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    def __mul__(self, other: "Number") -> "Rational":
        if isinstance(other, int):
            other = Rational(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return multiply(self, other)

    __rmul__ = __mul__

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def __pow__(self, exponent: int) -> "Rational":
        if exponent < 0:
            if self.numerator == 0:
                raise ZeroDivisionError("0 cannot be raised to a negative power")
            return Rational(self.denominator ** -exponent, self.numerator ** -exponent)
        return Rational(self.numerator ** exponent, self.denominator ** exponent)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            other = Rational(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return self.numerator * other.denominator == other.numerator * self.denominator

    def __hash__(self) -> int:
        # Совпадает с hash(int) и hash(Fraction) для равных значений
        reduced = self.reduced()
        if reduced.denominator == 1:
            return hash(reduced.numerator)
        return hash(Fraction(reduced.numerator, reduced.denominator))

    # -------------------------------------------------------------------------
    # Утилиты
    # -------------------------------------------------------------------------

    @property
    def is_integer(self) -> bool:
        """True если значение целое (знаменатель делит числитель)."""
        return self.numerator % self.denominator == 0

    def reduced(self) -> "Rational":
        """Несократимая форма (gcd-сокращение)."""
        g = math.gcd(self.numerator, self.denominator)
        if g <= 1:
            return self
        return Rational(self.numerator // g, self.denominator // g)

    def split(self) -> tuple[int, int]:
        """
        Разделение на целую часть и остаток числителя.

        Returns:
            (floor(n/d), n mod d), остаток всегда в [0, d)

        Examples:
            >>> Rational(7, 2).split()
            (3, 1)
            >>> Rational(-7, 2).split()
            (-4, 1)
        """
        return divmod(self.numerator, self.denominator)

    def __int__(self) -> int:
        if not self.is_integer:
            raise ValueError(f"Rational {self} is not an integer")
        return self.numerator // self.denominator

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


Number = Union[int, Rational]


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def as_rational(value: Number) -> Rational:
    """
    Продвижение int → Rational(value, 1).

    Raises:
        TypeError: если value не int и не Rational (в т.ч. float и bool)
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    raise TypeError(f"Expected int or Rational, got {type(value).__name__}")


def add(a: Rational, b: Rational) -> Rational:
    """(a.n*b.d + b.n*a.d) / (a.d*b.d), сокращённое."""
    return Rational(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    ).reduced()


def multiply(a: Rational, b: Rational) -> Rational:
    """(a.n*b.n) / (a.d*b.d), сокращённое."""
    return Rational(
        a.numerator * b.numerator,
        a.denominator * b.denominator,
    ).reduced()

