"""STAGE 4: Нормализация строк результата

Каждая строка R нормализуется независимо (общего состояния нет).
"""

from dataclasses import dataclass
from typing import Sequence

from radixshift.core.domain.alphabet import BASE62_ALPHABET, DigitAlphabet
from radixshift.core.domain.models import ConversionResult, NumberEntry
from radixshift.core.math.matrices import Matrix
from radixshift.core.math.normalization import TruncationPolicy, normalize_coefficients
from radixshift.core.math.rational import as_rational


@dataclass(frozen=True)
class Stage04Result:
    """Результат STAGE 4."""

    results: tuple[ConversionResult, ...]
    details: str


class Stage04Normalization:
    """STAGE 4: строки R → канонические цифры целевого основания."""

    def __init__(
        self,
        alphabet: DigitAlphabet = BASE62_ALPHABET,
        truncation: TruncationPolicy = TruncationPolicy.TRUNCATE,
    ):
        self.alphabet = alphabet
        self.truncation = truncation

    def evaluate(
        self,
        entries: Sequence[NumberEntry],
        result_matrix: Matrix,
        target_base: int,
    ) -> Stage04Result:
        if len(entries) != len(result_matrix):
            raise ValueError(
                f"entries/result rows mismatch: {len(entries)} != {len(result_matrix)}"
            )

        results = []
        for row_index, (entry, row) in enumerate(zip(entries, result_matrix)):
            normalized = normalize_coefficients(
                row, target_base, alphabet=self.alphabet, truncation=self.truncation
            )
            results.append(
                ConversionResult(
                    line_number=entry.line_number,
                    original_text=entry.original_text,
                    row_index=row_index,
                    raw_coefficients=tuple(as_rational(c) for c in row),
                    canonical_digits=normalized.digits,
                    result_string=normalized.result_string,
                    carry_log=normalized.carry_log,
                    exact=normalized.exact,
                    negative=normalized.negative,
                )
            )

        inexact = sum(1 for r in results if not r.exact)
        return Stage04Result(
            results=tuple(results),
            details=f"normalized={len(results)}, inexact={inexact}",
        )
