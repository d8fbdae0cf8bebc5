"""
Models — модели запроса, входных чисел и результатов конверсии

Входные модели (ConversionRequest, NumberEntry) — immutable Pydantic модели
с валидацией на границе. Результаты — frozen dataclasses (содержат Rational).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, field_validator

from radixshift.core.domain.bases import MAX_BASE_MAGNITUDE, validate_base
from radixshift.core.math.matrices import Matrix
from radixshift.core.math.rational import Rational


# =============================================================================
# ENUMS
# =============================================================================


class ConversionMethod(str, Enum):
    """Метод конверсии."""

    OFFSET = "offset"
    MULTIPLES = "multiples"


class ParseErrorKind(str, Enum):
    """Причина отклонения входной строки."""

    UNKNOWN_SYMBOL = "unknown_symbol"
    DIGIT_OUT_OF_RANGE = "digit_out_of_range"


# =============================================================================
# INPUT MODELS
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос на пакетную конверсию.

    Основания принимаются как int или строка с целым числом (поле ввода).
    Пустые, нечисловые, нулевые, ±1 и |base| > 62 основания отклоняются.
    """

    source_base: int = Field(..., description="Исходное основание (знак любой)")
    target_base: int = Field(..., description="Целевое основание (знак любой)")
    method: ConversionMethod = Field(
        default=ConversionMethod.OFFSET, description="Запрошенный метод"
    )
    lines: tuple[str, ...] = Field(default=(), description="Строки с числами")

    model_config = {"frozen": True}

    @field_validator("source_base", "target_base", mode="before")
    @classmethod
    def parse_base_text(cls, v: Any) -> Any:
        """Разбор строкового значения основания."""
        if isinstance(v, str):
            text = v.strip()
            if not text:
                raise ValueError("base must not be empty")
            try:
                return int(text)
            except ValueError:
                raise ValueError(f"base must be an integer, got {v!r}") from None
        return v

    @field_validator("source_base", "target_base")
    @classmethod
    def validate_base_range(cls, v: int, info) -> int:
        """Проверка 2 <= |base| <= 62."""
        validate_base(v, info.field_name)
        return v

    def swapped(self) -> "ConversionRequest":
        """Запрос с переставленными основаниями."""
        return ConversionRequest(
            source_base=self.target_base,
            target_base=self.source_base,
            method=self.method,
            lines=self.lines,
        )


class NumberEntry(BaseModel):
    """Разобранная входная строка: исходный текст и цифры (big-endian)."""

    line_number: int = Field(..., ge=1, description="Номер строки во входе (1-based)")
    original_text: str = Field(..., min_length=1, description="Исходный текст")
    digits: tuple[Annotated[int, Field(ge=0, lt=MAX_BASE_MAGNITUDE)], ...] = Field(
        ..., min_length=1, description="Цифры, старший разряд первым"
    )

    model_config = {"frozen": True}


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class LineError:
    """Ошибка разбора одной строки (строка пропускается, пакет продолжается)."""

    line_number: int
    original_text: str
    kind: ParseErrorKind
    symbol: str
    message: str


@dataclass(frozen=True)
class ConversionResult:
    """Результат конверсии одного числа."""

    line_number: int
    original_text: str
    row_index: int

    raw_coefficients: tuple[Rational, ...]
    canonical_digits: tuple[int, ...]
    result_string: str
    carry_log: tuple[str, ...]

    exact: bool = True
    negative: bool = False


@dataclass(frozen=True)
class BatchDiagnostics:
    """Матрицы пакета (для прозрачности/отладки)."""

    title: str
    subtitle: str
    input_matrix: Matrix = field(default_factory=list)
    transform_matrix: Matrix = field(default_factory=list)
    result_matrix: Matrix = field(default_factory=list)


@dataclass(frozen=True)
class BatchConversion:
    """Итог пакетной конверсии."""

    source_base: int
    target_base: int
    method_requested: ConversionMethod
    method_used: ConversionMethod
    method_substituted: bool

    results: tuple[ConversionResult, ...]
    errors: tuple[LineError, ...]
    diagnostics: Optional[BatchDiagnostics]
    warnings: tuple[str, ...] = ()

    @property
    def output(self) -> str:
        """Результаты через перевод строки, в порядке входа."""
        return "\n".join(r.result_string for r in self.results)

    def to_payload(self) -> dict[str, Any]:
        """JSON-совместимое представление (контракт conversion_batch)."""
        return {
            "source_base": self.source_base,
            "target_base": self.target_base,
            "method_requested": self.method_requested.value,
            "method_used": self.method_used.value,
            "method_substituted": self.method_substituted,
            "output": self.output,
            "results": [
                {
                    "line_number": r.line_number,
                    "original_text": r.original_text,
                    "result_string": r.result_string,
                    "raw_coefficients": [str(c) for c in r.raw_coefficients],
                    "canonical_digits": list(r.canonical_digits),
                    "carry_log": list(r.carry_log),
                    "exact": r.exact,
                    "negative": r.negative,
                }
                for r in self.results
            ],
            "errors": [
                {
                    "line_number": e.line_number,
                    "original_text": e.original_text,
                    "kind": e.kind.value,
                    "message": e.message,
                }
                for e in self.errors
            ],
            "warnings": list(self.warnings),
        }
