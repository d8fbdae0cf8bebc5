"""BatchConverter — единственная точка входа пакетной конверсии.

Порядок стадий фиксирован:
STAGE 0 (запрос) → STAGE 1 (метод) → STAGE 2 (разбор строк)
→ STAGE 3 (матрицы) → STAGE 4 (нормализация)

Ошибки:
- BatchPreconditionError / MethodCompatibilityError — пакет не выполняется
- LineError — строка пропускается, остальные строки обрабатываются
- MatrixDimensionMismatch — дефект, не перехватывается
"""

import logging
from typing import Any, Optional, Sequence, Union

from radixshift.core.contracts import (
    CONVERSION_BATCH,
    CONVERSION_REQUEST,
    SchemaLoader,
    default_schema_loader,
)
from radixshift.core.domain.models import (
    BatchConversion,
    BatchDiagnostics,
    ConversionMethod,
    ConversionRequest,
)
from radixshift.pipeline.config import ConverterConfig
from radixshift.pipeline.stages import (
    Stage00RequestValidation,
    Stage01MethodSelection,
    Stage02LineParsing,
    Stage03Transform,
    Stage04Normalization,
)
from radixshift.pipeline.stages.stage_03_transform import MULTIPLES_TITLE, OFFSET_TITLE

logger = logging.getLogger(__name__)


class BatchConverter:
    """Пакетный конвертер чисел между основаниями.

    Stateless между вызовами: матрицы и векторы создаются заново на каждый запрос.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        schema_loader: Optional[SchemaLoader] = None,
    ):
        self.config = config or ConverterConfig()
        self.schema_loader = schema_loader or default_schema_loader()

        self._stage00 = Stage00RequestValidation(self.config)
        self._stage01 = Stage01MethodSelection(self.config.fallback_policy)
        self._stage02 = Stage02LineParsing(self.config.alphabet)
        self._stage03 = Stage03Transform()
        self._stage04 = Stage04Normalization(
            alphabet=self.config.alphabet,
            truncation=self.config.truncation_policy,
        )

    def convert(
        self,
        source_base: Union[int, str],
        target_base: Union[int, str],
        method: Union[ConversionMethod, str] = ConversionMethod.OFFSET,
        lines: Union[str, Sequence[str]] = (),
    ) -> BatchConversion:
        """Конверсия пакета строк.

        Args:
            source_base: исходное основание (int или текст поля ввода)
            target_base: целевое основание
            method: offset или multiples
            lines: строки чисел или текст с переводами строк

        Returns:
            BatchConversion: результаты (в порядке входа), ошибки строк, диагностика

        Raises:
            BatchPreconditionError: невалидные основания/метод
            MethodCompatibilityError: multiples без делимости при FallbackPolicy.REJECT
        """
        stage00 = self._stage00.evaluate(source_base, target_base, method, lines)
        return self._run(stage00.request)

    def convert_request(self, request: ConversionRequest) -> BatchConversion:
        """Конверсия готового ConversionRequest (границы конфигурации проверяются заново)."""
        stage00 = self._stage00.evaluate(
            request.source_base, request.target_base, request.method, request.lines
        )
        return self._run(stage00.request)

    def _run(self, request: ConversionRequest) -> BatchConversion:
        stage01 = self._stage01.evaluate(request)
        stage02 = self._stage02.evaluate(request.lines, request.source_base)
        logger.debug("stage 1: %s; stage 2: %s", stage01.details, stage02.details)

        warnings = (stage01.warning,) if stage01.warning else ()

        if not stage02.entries:
            logger.info(
                "no valid lines in batch (%d errors), nothing to convert", len(stage02.errors)
            )
            diagnostics = None
            if self.config.diagnostics_enabled:
                title = (
                    MULTIPLES_TITLE
                    if stage01.method_used == ConversionMethod.MULTIPLES
                    else OFFSET_TITLE
                )
                diagnostics = BatchDiagnostics(title=title, subtitle="No valid input lines")
            return BatchConversion(
                source_base=request.source_base,
                target_base=request.target_base,
                method_requested=stage01.method_requested,
                method_used=stage01.method_used,
                method_substituted=stage01.substituted,
                results=(),
                errors=stage02.errors,
                diagnostics=diagnostics,
                warnings=warnings,
            )

        stage03 = self._stage03.evaluate(
            stage02.entries,
            stage02.max_length,
            request.source_base,
            request.target_base,
            stage01.method_used,
        )
        stage04 = self._stage04.evaluate(stage02.entries, stage03.result_matrix, request.target_base)

        diagnostics = None
        if self.config.diagnostics_enabled:
            diagnostics = BatchDiagnostics(
                title=stage03.title,
                subtitle=stage03.subtitle,
                input_matrix=stage03.input_matrix,
                transform_matrix=stage03.transform_matrix,
                result_matrix=stage03.result_matrix,
            )

        logger.info(
            "converted %d lines base %d -> %d (%s), %d errors; %s",
            len(stage04.results),
            request.source_base,
            request.target_base,
            stage01.method_used.value,
            len(stage02.errors),
            stage04.details,
        )

        return BatchConversion(
            source_base=request.source_base,
            target_base=request.target_base,
            method_requested=stage01.method_requested,
            method_used=stage01.method_used,
            method_substituted=stage01.substituted,
            results=stage04.results,
            errors=stage02.errors,
            diagnostics=diagnostics,
            warnings=warnings,
        )

    def convert_payload(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Конверсия JSON-запроса (контракты conversion_request / conversion_batch).

        Raises:
            jsonschema.ValidationError: если payload не соответствует контракту
            BatchPreconditionError: если запрос нарушает границы конфигурации
        """
        self.schema_loader.validate(CONVERSION_REQUEST, payload)

        batch = self.convert(
            payload["source_base"],
            payload["target_base"],
            payload.get("method", ConversionMethod.OFFSET.value),
            payload["lines"],
        )

        result = batch.to_payload()
        self.schema_loader.validate(CONVERSION_BATCH, result)
        return result
