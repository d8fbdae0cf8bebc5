"""
Тесты для стадий пакетной конверсии (STAGE 0-4)

Покрытие:
- STAGE 0: предусловия запроса, границы конфигурации
- STAGE 1: выбор метода и FallbackPolicy
- STAGE 2: разбор строк, изоляция ошибок
- STAGE 3: дополнение нулями, матрицы обоих методов
- STAGE 4: нормализация строк
"""

import logging

import pytest

from radixshift.core.domain.models import (
    ConversionMethod,
    ConversionRequest,
    NumberEntry,
    ParseErrorKind,
)
from radixshift.core.math.rational import Rational
from radixshift.pipeline.config import ConverterConfig, FallbackPolicy
from radixshift.pipeline.stages import (
    BatchPreconditionError,
    MethodCompatibilityError,
    Stage00RequestValidation,
    Stage01MethodSelection,
    Stage02LineParsing,
    Stage03Transform,
    Stage04Normalization,
    pad_digits,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def stage00():
    return Stage00RequestValidation(ConverterConfig())


@pytest.fixture
def stage02():
    return Stage02LineParsing()


def make_entry(line_number: int, text: str, digits) -> NumberEntry:
    """Helper: NumberEntry без разбора."""
    return NumberEntry(line_number=line_number, original_text=text, digits=tuple(digits))


# =============================================================================
# ТЕСТЫ: STAGE 0
# =============================================================================


class TestStage00:
    """Тесты STAGE 0: предусловия."""

    def test_pass(self, stage00):
        result = stage00.evaluate(10, 16, "offset", ["255"])
        assert result.request.source_base == 10
        assert result.details.startswith("PASS")

    def test_text_lines_split(self, stage00):
        result = stage00.evaluate("10", "2", ConversionMethod.OFFSET, "5\n\n6")
        assert result.request.lines == ("5", "", "6")

    @pytest.mark.parametrize(
        "source, target",
        [("", 10), ("abc", 10), (0, 10), (10, 1), (10, -1), (63, 10), (10, -70)],
    )
    def test_precondition_violations(self, stage00, source, target):
        with pytest.raises(BatchPreconditionError, match="Invalid conversion request"):
            stage00.evaluate(source, target, "offset", ["1"])

    def test_unknown_method(self, stage00):
        with pytest.raises(BatchPreconditionError, match="method"):
            stage00.evaluate(10, 16, "fast", ["1"])

    def test_config_narrows_range(self):
        stage = Stage00RequestValidation(ConverterConfig(max_base_magnitude=36))
        with pytest.raises(BatchPreconditionError, match="between -36 and 36"):
            stage.evaluate(62, 10, "offset", ["1"])


# =============================================================================
# ТЕСТЫ: STAGE 1
# =============================================================================


def make_request(source: int, target: int, method: str) -> ConversionRequest:
    return ConversionRequest(source_base=source, target_base=target, method=method)


class TestStage01:
    """Тесты STAGE 1: выбор метода."""

    def test_offset_always_allowed(self):
        result = Stage01MethodSelection().evaluate(make_request(10, 16, "offset"))
        assert result.method_used == ConversionMethod.OFFSET
        assert result.substituted is False

    def test_multiples_compatible(self):
        result = Stage01MethodSelection().evaluate(make_request(16, 4, "multiples"))
        assert result.method_used == ConversionMethod.MULTIPLES
        assert result.substituted is False
        assert result.warning is None

    def test_multiples_fractional_direction(self):
        result = Stage01MethodSelection().evaluate(make_request(2, 8, "multiples"))
        assert result.method_used == ConversionMethod.MULTIPLES

    def test_fallback_warn(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = Stage01MethodSelection(FallbackPolicy.WARN).evaluate(
                make_request(10, 16, "multiples")
            )
        assert result.method_requested == ConversionMethod.MULTIPLES
        assert result.method_used == ConversionMethod.OFFSET
        assert result.substituted is True
        assert "offset method used instead" in result.warning
        assert "offset method used instead" in caplog.text

    def test_fallback_silent(self):
        result = Stage01MethodSelection(FallbackPolicy.SILENT).evaluate(
            make_request(10, 16, "multiples")
        )
        assert result.method_used == ConversionMethod.OFFSET
        assert result.substituted is True
        assert result.warning is None

    def test_fallback_reject(self):
        with pytest.raises(MethodCompatibilityError, match="multiple of the other"):
            Stage01MethodSelection(FallbackPolicy.REJECT).evaluate(
                make_request(10, 16, "multiples")
            )


# =============================================================================
# ТЕСТЫ: STAGE 2
# =============================================================================


class TestStage02:
    """Тесты STAGE 2: разбор строк."""

    def test_error_isolation(self, stage02):
        """["1A", "Z!", "2B"] в base 16: одна ошибка, два числа, порядок сохранён."""
        result = stage02.evaluate(["1A", "Z!", "2B"], 16)

        assert [e.original_text for e in result.entries] == ["1A", "2B"]
        assert [e.line_number for e in result.entries] == [1, 3]
        assert len(result.errors) == 1

        error = result.errors[0]
        assert error.original_text == "Z!"
        assert error.kind == ParseErrorKind.UNKNOWN_SYMBOL
        assert error.symbol == "!"
        assert error.line_number == 2

    def test_digit_out_of_range(self, stage02):
        result = stage02.evaluate(["1G"], 16)
        error = result.errors[0]
        assert error.kind == ParseErrorKind.DIGIT_OUT_OF_RANGE
        assert error.symbol == "G"
        assert error.message == "Digit 'G' too large for Base 16"

    def test_unknown_symbol_reported_before_range(self, stage02):
        """Неизвестный символ имеет приоритет над цифрой вне диапазона."""
        result = stage02.evaluate(["G-"], 16)
        assert result.errors[0].kind == ParseErrorKind.UNKNOWN_SYMBOL
        assert result.errors[0].symbol == "-"

    def test_blank_lines_skipped(self, stage02):
        result = stage02.evaluate(["", "  7 ", "   ", "x"], 10)
        assert len(result.entries) == 1
        assert result.entries[0].line_number == 2
        assert result.entries[0].original_text == "7"
        assert result.errors[0].line_number == 4

    def test_negative_source_base_uses_magnitude(self, stage02):
        result = stage02.evaluate(["F"], -16)
        assert result.entries[0].digits == (15,)

    def test_max_length(self, stage02):
        result = stage02.evaluate(["1", "12345", "12"], 10)
        assert result.max_length == 5

    def test_no_entries(self, stage02):
        result = stage02.evaluate(["!", ""], 10)
        assert result.entries == ()
        assert result.max_length == 0

    def test_case_sensitive(self, stage02):
        result = stage02.evaluate(["a"], 16)
        assert result.errors[0].kind == ParseErrorKind.DIGIT_OUT_OF_RANGE


# =============================================================================
# ТЕСТЫ: STAGE 3
# =============================================================================


class TestStage03:
    """Тесты STAGE 3: матрицы."""

    def test_offset(self):
        entries = [make_entry(1, "255", [2, 5, 5]), make_entry(2, "1", [1])]
        result = Stage03Transform().evaluate(entries, 3, 10, 16, ConversionMethod.OFFSET)

        assert result.input_matrix == [[2, 5, 5], [0, 0, 1]]
        assert result.transform_matrix[0] == [1, -12, 36]
        assert result.result_matrix == [[2, -19, 47], [0, 0, 1]]
        assert result.title == "Offset Method (Taylor Shift)"
        assert result.subtitle == "Offset: -6, Matrix: Pascal Triangle"

    def test_multiples(self):
        entries = [make_entry(1, "FF", [15, 15])]
        result = Stage03Transform().evaluate(entries, 2, 16, 4, ConversionMethod.MULTIPLES)

        assert result.result_matrix == [[60, 15]]
        assert result.title == "Multiples Method (Substitution)"
        assert result.subtitle == "Factor: 4, Matrix: Diagonal Powers"

    def test_multiples_fractional(self):
        entries = [make_entry(1, "10", [1, 0])]
        result = Stage03Transform().evaluate(entries, 2, 2, 8, ConversionMethod.MULTIPLES)

        assert result.result_matrix == [[Rational(1, 4), 0]]
        assert result.subtitle == "Factor: 1/4, Matrix: Diagonal Powers"

    def test_pad_digits(self):
        assert pad_digits([1, 2], 4) == [0, 0, 1, 2]
        with pytest.raises(ValueError):
            pad_digits([1, 2], 1)


# =============================================================================
# ТЕСТЫ: STAGE 4
# =============================================================================


class TestStage04:
    """Тесты STAGE 4: нормализация."""

    def test_normalizes_each_row(self):
        entries = [make_entry(1, "255", [2, 5, 5]), make_entry(3, "1", [1])]
        result = Stage04Normalization().evaluate(entries, [[2, -19, 47], [0, 0, 1]], 16)

        assert [r.result_string for r in result.results] == ["FF", "1"]
        assert [r.row_index for r in result.results] == [0, 1]
        assert [r.line_number for r in result.results] == [1, 3]
        assert result.results[0].raw_coefficients == (2, -19, 47)

    def test_rows_mismatch(self):
        with pytest.raises(ValueError, match="mismatch"):
            Stage04Normalization().evaluate([make_entry(1, "1", [1])], [], 10)
