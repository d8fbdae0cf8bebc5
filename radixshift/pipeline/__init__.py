"""Pipeline — пакетная конверсия чисел между основаниями.

- BatchConverter: единственная точка входа
- ConverterConfig: политики fallback/truncation, алфавит, границы оснований
- render_batch_report: текстовый отчёт с матрицами
"""

from .config import ConverterConfig, FallbackPolicy
from .orchestrator import BatchConverter
from .report import render_batch_report
from .stages import BatchPreconditionError, MethodCompatibilityError

__all__ = [
    "BatchConverter",
    "ConverterConfig",
    "FallbackPolicy",
    "BatchPreconditionError",
    "MethodCompatibilityError",
    "render_batch_report",
]
