"""
Normalization — двухфазная нормализация коэффициентов в канонические цифры

Вход: строка коэффициентов (int/Rational, big-endian) = цифры × матрица
преобразования, и целевое основание (|base| >= 2, знак любой).
Выход: канонические цифры в [0, |base|), строка, журнал переносов.

ФАЗЫ:
1. Fraction sweep (слева направо): дробный остаток rem/d позиции i
   переносится в позицию i+1 как (rem * base) / d. После фазы все позиции — int.
2. Carry (справа налево): r = value mod |base| в [0, |base|),
   q = (value - r) / base; q добавляется в следующий старший разряд,
   при необходимости вектор растёт на один разряд и новый разряд
   тоже обрабатывается.

Фаза 2 работает над little-endian копией (рост = append), разворот только
при выводе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все цифры результата в [0, |base|)
2. Нет ведущих нулей, кроме значения 0 (ровно одна цифра)
3. Канонический вход возвращается без изменений с пустым журналом
4. Значение сохраняется точно (кроме TRUNCATE на последней позиции, exact=False)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from radixshift.core.domain.alphabet import BASE62_ALPHABET, DigitAlphabet
from radixshift.core.math.rational import Number, Rational, as_rational

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS / EXCEPTIONS
# =============================================================================


class TruncationPolicy(str, Enum):
    """Поведение при ненулевом дробном остатке на последней позиции."""

    TRUNCATE = "truncate"  # floor, exact=False, запись в журнал
    STRICT = "strict"  # NonTerminatingExpansion


class NonTerminatingExpansion(ValueError):
    """Дробный остаток на младшем разряде при TruncationPolicy.STRICT."""
    pass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class NormalizationResult:
    """Результат нормализации одной строки коэффициентов."""

    digits: tuple[int, ...]
    result_string: str
    carry_log: tuple[str, ...]

    # False если дробный остаток был отброшен (TRUNCATE)
    exact: bool = True

    # True если значение отрицательно при положительном основании
    negative: bool = False


# =============================================================================
# PUBLIC API
# =============================================================================


def normalize_coefficients(
    coefficients: Sequence[Number],
    base: int,
    alphabet: DigitAlphabet = BASE62_ALPHABET,
    truncation: TruncationPolicy = TruncationPolicy.TRUNCATE,
) -> NormalizationResult:
    """
    Нормализация строки коэффициентов в канонические цифры основания base.

    Args:
        coefficients: Коэффициенты (big-endian), int или Rational
        base: Целевое основание, |base| >= 2 (может быть отрицательным)
        alphabet: Таблица символов для отображения цифр
        truncation: Политика для непрерывающегося дробного остатка

    Returns:
        NormalizationResult

    Raises:
        ValueError: Если |base| < 2
        NonTerminatingExpansion: При truncation=STRICT и ненулевом остатке

    Examples:
        >>> normalize_coefficients([2, -19, 47], 16).result_string
        'FF'
    """
    if abs(base) < 2:
        raise ValueError(f"|base| must be >= 2, got {base}")

    carry_log: list[str] = []
    values = [as_rational(c) for c in coefficients] or [Rational(0)]

    integers, exact = _sweep_fractions(values, base, truncation, carry_log)

    negative = False
    if base > 0 and expand_digits(integers, base) < 0:
        # В положительном основании у отрицательного значения нет
        # неотрицательной записи: нормализуем модуль
        negative = True
        integers = [-v for v in integers]
        carry_log.append("negative value: normalizing magnitude")

    little_endian = _propagate_carries(list(reversed(integers)), base, carry_log)
    digits = _strip_leading_zeros(list(reversed(little_endian)))

    result_string = alphabet.render(digits)
    if negative:
        result_string = "-" + result_string

    logger.debug(
        "normalized %d coefficients in base %d -> %s (%d carry steps)",
        len(values),
        base,
        result_string,
        len(carry_log),
    )

    return NormalizationResult(
        digits=tuple(digits),
        result_string=result_string,
        carry_log=tuple(carry_log),
        exact=exact,
        negative=negative,
    )


def expand_digits(digits: Sequence[int], base: int) -> int:
    """
    Значение big-endian вектора цифр: sum d_i * base^i (схема Горнера).

    Examples:
        >>> expand_digits([1, 9, 9], -10)
        19
    """
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


# =============================================================================
# PHASES
# =============================================================================


def _sweep_fractions(
    values: list[Rational],
    base: int,
    truncation: TruncationPolicy,
    carry_log: list[str],
) -> tuple[list[int], bool]:
    """Фаза 1: перенос дробных остатков слева направо."""
    size = len(values)
    integers: list[int] = []
    exact = True

    for i in range(size):
        current = values[i]
        q, rem = current.split()
        place = size - 1 - i

        if rem != 0:
            if i + 1 < size:
                pushed = Rational(rem * base, current.denominator)
                values[i + 1] = values[i + 1] + pushed
                carry_log.append(
                    f"place {place}: {current} -> {q}, push {pushed} into place {place - 1}"
                )
            else:
                if truncation == TruncationPolicy.STRICT:
                    raise NonTerminatingExpansion(
                        f"Non-terminating expansion in base {base}: "
                        f"remainder {rem}/{current.denominator} at the last place"
                    )
                exact = False
                carry_log.append(
                    f"place {place}: {current} -> {q}, truncated remainder {rem}/{current.denominator}"
                )
                logger.warning(
                    "truncated remainder %d/%d at the last place (base %d)",
                    rem,
                    current.denominator,
                    base,
                )

        integers.append(q)

    return integers, exact


def _propagate_carries(digits: list[int], base: int, carry_log: list[str]) -> list[int]:
    """Фаза 2: переносы от младшего разряда к старшему (little-endian in-place)."""
    modulus = abs(base)
    place = 0

    while place < len(digits):
        value = digits[place]
        r = value % modulus
        q = (value - r) // base
        digits[place] = r

        if q != 0:
            if place + 1 < len(digits):
                digits[place + 1] += q
                carry_log.append(f"place {place}: {value} -> digit {r}, carry {q}")
            else:
                digits.append(q)
                carry_log.append(
                    f"place {place}: {value} -> digit {r}, carry {q} into new place {place + 1}"
                )

        place += 1

    return digits


def _strip_leading_zeros(digits: list[int]) -> list[int]:
    start = 0
    while start < len(digits) - 1 and digits[start] == 0:
        start += 1
    return digits[start:] or [0]
