"""STAGE 0: Валидация запроса (предусловия пакета)

Проверяет основания и метод до любой вычислительной работы.

Нарушения (фатальны для всего пакета, частичного результата нет):
- пустое или нечисловое поле основания
- основание 0 или ±1
- |base| вне [min_base_magnitude, max_base_magnitude]
- неизвестный метод
"""

from dataclasses import dataclass
from typing import Sequence, Union

from pydantic import ValidationError

from radixshift.core.domain.bases import validate_base
from radixshift.core.domain.models import ConversionMethod, ConversionRequest
from radixshift.pipeline.config import ConverterConfig


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BatchPreconditionError(ValueError):
    """Невалидный запрос: пакет прерывается до начала конверсии."""
    pass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Stage00Result:
    """Результат STAGE 0."""

    request: ConversionRequest
    details: str


# =============================================================================
# STAGE 0
# =============================================================================


class Stage00RequestValidation:
    """STAGE 0: построение и проверка ConversionRequest.

    Порядок проверок:
    1. Pydantic модель (разбор оснований, 2 <= |base| <= 62, метод)
    2. Сужение границ из конфигурации
    """

    def __init__(self, config: ConverterConfig):
        self.config = config

    def evaluate(
        self,
        source_base: Union[int, str],
        target_base: Union[int, str],
        method: Union[ConversionMethod, str],
        lines: Union[str, Sequence[str]],
    ) -> Stage00Result:
        """Оценка STAGE 0.

        Args:
            source_base: исходное основание (int или текст поля)
            target_base: целевое основание (int или текст поля)
            method: запрошенный метод
            lines: строки чисел или единый текст с переводами строк

        Returns:
            Stage00Result с валидным запросом

        Raises:
            BatchPreconditionError: при любом нарушении предусловий
        """
        if isinstance(lines, str):
            lines = lines.split("\n")

        try:
            request = ConversionRequest(
                source_base=source_base,
                target_base=target_base,
                method=method,
                lines=tuple(lines),
            )
        except ValidationError as e:
            reasons = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise BatchPreconditionError(f"Invalid conversion request: {reasons}") from e

        for name, value in (
            ("source_base", request.source_base),
            ("target_base", request.target_base),
        ):
            try:
                validate_base(
                    value,
                    name,
                    min_magnitude=self.config.min_base_magnitude,
                    max_magnitude=self.config.max_base_magnitude,
                )
            except ValueError as e:
                raise BatchPreconditionError(f"Invalid conversion request: {e}") from e

        return Stage00Result(
            request=request,
            details=(
                f"PASS: source={request.source_base}, target={request.target_base}, "
                f"method={request.method.value}, lines={len(request.lines)}"
            ),
        )
