"""STAGE 3: Матрица преобразования и умножение

- Векторы цифр дополняются ведущими нулями до max_length пакета (матрица N)
- offset: Pascal матрица с offset = source - target
- multiples: диагональная матрица степеней factor = source / target
- R = N × M (одна матрица M на весь пакет, только чтение)
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from radixshift.core.domain.models import ConversionMethod, NumberEntry
from radixshift.core.math.matrices import (
    Matrix,
    diagonal_power_matrix,
    matrix_multiply,
    multiples_factor,
    pascal_offset_matrix,
)

logger = logging.getLogger(__name__)

OFFSET_TITLE = "Offset Method (Taylor Shift)"
MULTIPLES_TITLE = "Multiples Method (Substitution)"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Stage03Result:
    """Результат STAGE 3."""

    input_matrix: Matrix
    transform_matrix: Matrix
    result_matrix: Matrix
    size: int

    title: str
    subtitle: str


# =============================================================================
# STAGE 3
# =============================================================================


class Stage03Transform:
    """STAGE 3: построение N, M и R = N × M."""

    def evaluate(
        self,
        entries: Sequence[NumberEntry],
        size: int,
        source_base: int,
        target_base: int,
        method: ConversionMethod,
    ) -> Stage03Result:
        """Оценка STAGE 3.

        Args:
            entries: разобранные числа (порядок сохраняется в строках N и R)
            size: max_length пакета
            source_base: исходное основание
            target_base: целевое основание
            method: метод после STAGE 1 (для multiples делимость уже проверена)

        Returns:
            Stage03Result с тремя матрицами и подписями для диагностики
        """
        input_matrix: Matrix = [pad_digits(entry.digits, size) for entry in entries]

        if method == ConversionMethod.MULTIPLES:
            factor = multiples_factor(source_base, target_base)
            transform_matrix = diagonal_power_matrix(size, factor)
            title = MULTIPLES_TITLE
            subtitle = f"Factor: {factor}, Matrix: Diagonal Powers"
        else:
            offset = source_base - target_base
            transform_matrix = pascal_offset_matrix(size, offset)
            title = OFFSET_TITLE
            subtitle = f"Offset: {offset}, Matrix: Pascal Triangle"

        result_matrix = matrix_multiply(input_matrix, transform_matrix)

        logger.debug("%s: %s, size=%d, rows=%d", title, subtitle, size, len(entries))

        return Stage03Result(
            input_matrix=input_matrix,
            transform_matrix=transform_matrix,
            result_matrix=result_matrix,
            size=size,
            title=title,
            subtitle=subtitle,
        )


def pad_digits(digits: Sequence[int], size: int) -> list[int]:
    """Дополнение ведущими нулями до size."""
    if len(digits) > size:
        raise ValueError(f"digit vector longer than matrix size: {len(digits)} > {size}")
    return [0] * (size - len(digits)) + list(digits)
