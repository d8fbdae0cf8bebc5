"""Stages — шаги пакетной конверсии в фиксированном порядке.

- STAGE 0: Валидация запроса (предусловия пакета)
- STAGE 1: Выбор метода (fallback multiples → offset)
- STAGE 2: Разбор строк (NumberEntry / LineError)
- STAGE 3: Матрица преобразования и умножение
- STAGE 4: Нормализация строк результата
"""

from .stage_00_request import BatchPreconditionError, Stage00RequestValidation, Stage00Result
from .stage_01_method import MethodCompatibilityError, Stage01MethodSelection, Stage01Result
from .stage_02_parsing import Stage02LineParsing, Stage02Result
from .stage_03_transform import Stage03Result, Stage03Transform, pad_digits
from .stage_04_normalization import Stage04Normalization, Stage04Result

__all__ = [
    "BatchPreconditionError",
    "Stage00RequestValidation",
    "Stage00Result",
    "MethodCompatibilityError",
    "Stage01MethodSelection",
    "Stage01Result",
    "Stage02LineParsing",
    "Stage02Result",
    "Stage03Transform",
    "Stage03Result",
    "pad_digits",
    "Stage04Normalization",
    "Stage04Result",
]
