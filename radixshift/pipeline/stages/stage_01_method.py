"""STAGE 1: Выбор метода конверсии

Правила:
- offset → всегда применим
- multiples → только если source % target == 0 или target % source == 0
- multiples для несовместимых оснований → FallbackPolicy:
  WARN (offset + предупреждение), SILENT (offset + флаг), REJECT (исключение)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from radixshift.core.domain.bases import is_divisor_pair
from radixshift.core.domain.models import ConversionMethod, ConversionRequest
from radixshift.pipeline.config import FallbackPolicy

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MethodCompatibilityError(ValueError):
    """Multiples метод запрошен для оснований без отношения делимости."""
    pass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Stage01Result:
    """Результат STAGE 1."""

    method_requested: ConversionMethod
    method_used: ConversionMethod
    substituted: bool
    warning: Optional[str]
    details: str


# =============================================================================
# STAGE 1
# =============================================================================


class Stage01MethodSelection:
    """STAGE 1: проверка применимости метода и fallback на offset."""

    def __init__(self, fallback_policy: FallbackPolicy = FallbackPolicy.WARN):
        self.fallback_policy = fallback_policy

    def evaluate(self, request: ConversionRequest) -> Stage01Result:
        """Оценка STAGE 1.

        Raises:
            MethodCompatibilityError: при FallbackPolicy.REJECT и несовместимых основаниях
        """
        requested = request.method

        if requested == ConversionMethod.OFFSET or is_divisor_pair(
            request.source_base, request.target_base
        ):
            return Stage01Result(
                method_requested=requested,
                method_used=requested,
                substituted=False,
                warning=None,
                details=f"PASS: method={requested.value}",
            )

        message = (
            f"Multiples method requires one base to be a multiple of the other "
            f"(source={request.source_base}, target={request.target_base})"
        )

        if self.fallback_policy == FallbackPolicy.REJECT:
            raise MethodCompatibilityError(message)

        warning = None
        if self.fallback_policy == FallbackPolicy.WARN:
            warning = f"{message}; offset method used instead"
            logger.warning(warning)
        else:
            logger.debug("multiples -> offset substitution (silent): %s", message)

        return Stage01Result(
            method_requested=requested,
            method_used=ConversionMethod.OFFSET,
            substituted=True,
            warning=warning,
            details=f"SUBSTITUTED: multiples -> offset ({self.fallback_policy.value})",
        )
