"""Конфигурация пакетного конвертера.

Политики:
- FallbackPolicy — что делать, если запрошен multiples метод для оснований,
  не связанных делимостью
- TruncationPolicy — что делать с непрерывающимся дробным остатком
"""

from dataclasses import dataclass
from enum import Enum

from radixshift.core.domain.alphabet import BASE62_ALPHABET, DigitAlphabet
from radixshift.core.domain.bases import MAX_BASE_MAGNITUDE, MIN_BASE_MAGNITUDE
from radixshift.core.math.normalization import TruncationPolicy


class FallbackPolicy(str, Enum):
    """Политика при несовместимости multiples метода с основаниями."""

    WARN = "warn"  # замена на offset + предупреждение в результате и логе
    SILENT = "silent"  # замена на offset, только флаг method_substituted
    REJECT = "reject"  # MethodCompatibilityError, пакет не выполняется


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация BatchConverter.

    Границы оснований могут только сужать [2, 62]; алфавит должен
    покрывать max_base_magnitude символов.
    """

    fallback_policy: FallbackPolicy = FallbackPolicy.WARN
    truncation_policy: TruncationPolicy = TruncationPolicy.TRUNCATE
    alphabet: DigitAlphabet = BASE62_ALPHABET

    min_base_magnitude: int = MIN_BASE_MAGNITUDE
    max_base_magnitude: int = MAX_BASE_MAGNITUDE

    # Матрицы пакета в результате (BatchConversion.diagnostics)
    diagnostics_enabled: bool = True

    def __post_init__(self) -> None:
        if not MIN_BASE_MAGNITUDE <= self.min_base_magnitude <= self.max_base_magnitude:
            raise ValueError(
                f"min_base_magnitude must be in [{MIN_BASE_MAGNITUDE}, max_base_magnitude], "
                f"got {self.min_base_magnitude}"
            )
        if self.max_base_magnitude > MAX_BASE_MAGNITUDE:
            raise ValueError(
                f"max_base_magnitude must be <= {MAX_BASE_MAGNITUDE}, got {self.max_base_magnitude}"
            )
        if len(self.alphabet) < self.max_base_magnitude:
            raise ValueError(
                f"alphabet has {len(self.alphabet)} symbols, "
                f"max_base_magnitude={self.max_base_magnitude} requires more"
            )
