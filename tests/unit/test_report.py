"""Тесты для render_batch_report (plain-text отчёт по пакету)."""

from radixshift.core.math.matrices import format_matrix
from radixshift.pipeline import BatchConverter, ConverterConfig, render_batch_report


def test_offset_report():
    batch = BatchConverter().convert(10, 16, "offset", ["255", "G"])
    report = render_batch_report(batch)

    assert "Error \"G\": Digit 'G' too large for Base 10" in report
    assert "Offset Method (Taylor Shift)" in report
    assert "Offset: -6, Matrix: Pascal Triangle" in report
    assert "Input Matrix N:" in report
    assert "Transform Matrix (Size 3x3):" in report
    assert "Result Matrix R = N * M:" in report
    assert "255 -> Base 16" in report
    assert "Row 0: [2, -19, 47]" in report
    assert "Normalized: FF" in report


def test_block_order():
    """Ошибки → матрицы → числа."""
    batch = BatchConverter().convert(16, 10, "offset", ["1A", "Z!"])
    report = render_batch_report(batch)

    assert report.index("Error") < report.index("Input Matrix N:")
    assert report.index("Input Matrix N:") < report.index("1A -> Base 10")
    assert not report.endswith("\n")


def test_matrix_rows_rendered():
    batch = BatchConverter().convert(10, 16, "offset", ["255"])
    report = render_batch_report(batch)

    for row in format_matrix(batch.diagnostics.transform_matrix, 8):
        assert row in report


def test_multiples_report_with_warning():
    batch = BatchConverter().convert(10, 16, "multiples", ["255"])
    report = render_batch_report(batch)

    assert report.startswith("Warning: ")
    assert "offset method used instead" in report
    assert "Offset Method (Taylor Shift)" in report


def test_fractional_coefficients_rendered():
    batch = BatchConverter().convert(2, 8, "multiples", ["10"])
    report = render_batch_report(batch)

    assert "Factor: 1/4, Matrix: Diagonal Powers" in report
    assert "Row 0: [1/4, 0]" in report
    assert "Normalized: 2" in report


def test_no_valid_lines():
    batch = BatchConverter().convert(2, 10, "offset", ["9"])
    report = render_batch_report(batch)

    assert "No valid input lines" in report
    assert "Input Matrix N:" not in report


def test_without_diagnostics():
    batch = BatchConverter(ConverterConfig(diagnostics_enabled=False)).convert(
        10, 2, "offset", ["5"]
    )
    report = render_batch_report(batch)

    assert "Matrix" not in report
    assert report == "5 -> Base 2\nRow 0: [5]\nNormalized: 101"
