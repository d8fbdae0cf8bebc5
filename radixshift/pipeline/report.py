"""Текстовый отчёт по пакету: матрицы N, M, R и шаги по каждому числу."""

from radixshift.core.domain.models import BatchConversion
from radixshift.core.math.matrices import format_matrix

# Ширина ячеек для матриц N, M, R
INPUT_CELL_WIDTH = 4
TRANSFORM_CELL_WIDTH = 8
RESULT_CELL_WIDTH = 10


def render_batch_report(batch: BatchConversion) -> str:
    """Plain-text отчёт пакета (без HTML).

    Порядок блоков: ошибки строк, предупреждения, матрицы, числа.
    """
    lines: list[str] = []

    for error in batch.errors:
        lines.append(f'Error "{error.original_text}": {error.message}')

    for warning in batch.warnings:
        lines.append(f"Warning: {warning}")

    if lines:
        lines.append("")

    diagnostics = batch.diagnostics
    if diagnostics is not None:
        lines.append(diagnostics.title)
        lines.append(diagnostics.subtitle)
        lines.append("")

        if diagnostics.input_matrix:
            size = len(diagnostics.transform_matrix)
            lines.append("Input Matrix N:")
            lines.extend(format_matrix(diagnostics.input_matrix, INPUT_CELL_WIDTH))
            lines.append("")
            lines.append(f"Transform Matrix (Size {size}x{size}):")
            lines.extend(format_matrix(diagnostics.transform_matrix, TRANSFORM_CELL_WIDTH))
            lines.append("")
            lines.append("Result Matrix R = N * M:")
            lines.extend(format_matrix(diagnostics.result_matrix, RESULT_CELL_WIDTH))
            lines.append("")

    for result in batch.results:
        coefficients = ", ".join(str(c) for c in result.raw_coefficients)
        lines.append(f"{result.original_text} -> Base {batch.target_base}")
        lines.append(f"Row {result.row_index}: [{coefficients}]")
        lines.append(f"Normalized: {result.result_string}")
        if not result.exact:
            lines.append("(remainder truncated at the last place)")
        lines.append("")

    return "\n".join(lines).rstrip("\n")
