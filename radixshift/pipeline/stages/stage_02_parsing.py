"""STAGE 2: Разбор строк во входные числа

Каждая непустая строка (после strip) даёт либо NumberEntry, либо LineError.
Ошибки строки не прерывают пакет: строка пропускается, разбор продолжается.

Порядок проверок строки:
1. Все символы есть в алфавите (иначе UNKNOWN_SYMBOL, первый неизвестный символ)
2. Все цифры < |source_base| (иначе DIGIT_OUT_OF_RANGE, первая такая цифра)
"""

from dataclasses import dataclass
from typing import Sequence, Union

from radixshift.core.domain.alphabet import BASE62_ALPHABET, DigitAlphabet
from radixshift.core.domain.models import LineError, NumberEntry, ParseErrorKind


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Stage02Result:
    """Результат STAGE 2."""

    entries: tuple[NumberEntry, ...]
    errors: tuple[LineError, ...]

    # Максимальная длина вектора цифр (размер матрицы преобразования)
    max_length: int

    details: str


# =============================================================================
# STAGE 2
# =============================================================================


class Stage02LineParsing:
    """STAGE 2: разбор строк в цифры исходного основания."""

    def __init__(self, alphabet: DigitAlphabet = BASE62_ALPHABET):
        self.alphabet = alphabet

    def evaluate(self, lines: Sequence[str], source_base: int) -> Stage02Result:
        """Оценка STAGE 2.

        Args:
            lines: строки входа (номера строк 1-based, пустые строки пропускаются)
            source_base: исходное основание

        Returns:
            Stage02Result с успешными и ошибочными строками в порядке входа
        """
        entries: list[NumberEntry] = []
        errors: list[LineError] = []

        for line_number, raw_line in enumerate(lines, start=1):
            text = raw_line.strip()
            if not text:
                continue

            parsed = self.parse_line(line_number, text, source_base)
            if isinstance(parsed, LineError):
                errors.append(parsed)
            else:
                entries.append(parsed)

        max_length = max((len(e.digits) for e in entries), default=0)

        return Stage02Result(
            entries=tuple(entries),
            errors=tuple(errors),
            max_length=max_length,
            details=f"parsed={len(entries)}, errors={len(errors)}, max_length={max_length}",
        )

    def parse_line(
        self, line_number: int, text: str, source_base: int
    ) -> Union[NumberEntry, LineError]:
        """Разбор одной строки (без исключений)."""
        values: list[int] = []
        for symbol in text:
            value = self.alphabet.value_of(symbol)
            if value is None:
                return LineError(
                    line_number=line_number,
                    original_text=text,
                    kind=ParseErrorKind.UNKNOWN_SYMBOL,
                    symbol=symbol,
                    message=f"Character '{symbol}' not found in map.",
                )
            values.append(value)

        limit = abs(source_base)
        for symbol, value in zip(text, values):
            if value >= limit:
                return LineError(
                    line_number=line_number,
                    original_text=text,
                    kind=ParseErrorKind.DIGIT_OUT_OF_RANGE,
                    symbol=symbol,
                    message=f"Digit '{symbol}' too large for Base {limit}",
                )

        return NumberEntry(line_number=line_number, original_text=text, digits=tuple(values))
