"""radixshift — точная конверсия чисел между позиционными системами счисления.

Поддерживаются отрицательные основания и основания, связанные целым или
дробным множителем. Вся арифметика точная (Python int / Rational).
"""

__version__ = "0.1.0"
