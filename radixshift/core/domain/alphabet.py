"""
DigitAlphabet — двунаправленная таблица символ ↔ значение цифры

Единственный источник порядка алфавита. Остальные модули получают таблицу
по ссылке (по умолчанию BASE62_ALPHABET) и не строят порядок заново.
"""

import string
from typing import Final, Iterable, Mapping, Optional

BASE62_SYMBOLS: Final[str] = string.digits + string.ascii_uppercase + string.ascii_lowercase

UNKNOWN_SYMBOL: Final[str] = "?"


class DigitAlphabet:
    """
    Иммутабельная инъективная таблица символов.

    Examples:
        >>> BASE62_ALPHABET.value_of("z")
        61
        >>> BASE62_ALPHABET.symbol_of(62)
        '?'
    """

    __slots__ = ("_symbols", "_values")

    def __init__(self, symbols: str):
        if not symbols:
            raise ValueError("Alphabet must contain at least one symbol")

        values: dict[str, int] = {}
        for index, symbol in enumerate(symbols):
            if symbol in values:
                raise ValueError(f"Duplicate symbol {symbol!r} in alphabet")
            values[symbol] = index

        self._symbols: str = symbols
        self._values: Mapping[str, int] = values

    @property
    def symbols(self) -> str:
        return self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def value_of(self, symbol: str) -> Optional[int]:
        """Значение символа или None если символа нет в таблице (case-sensitive)."""
        return self._values.get(symbol)

    def symbol_of(self, value: int) -> str:
        """Символ цифры или '?' для значений вне [0, len)."""
        if 0 <= value < len(self._symbols):
            return self._symbols[value]
        return UNKNOWN_SYMBOL

    def render(self, digits: Iterable[int]) -> str:
        """Строка из последовательности цифр."""
        return "".join(self.symbol_of(d) for d in digits)

    def __repr__(self) -> str:
        return f"DigitAlphabet({self._symbols!r})"


BASE62_ALPHABET: Final[DigitAlphabet] = DigitAlphabet(BASE62_SYMBOLS)
