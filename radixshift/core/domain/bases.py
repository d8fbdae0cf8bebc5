"""
Bases — границы и совместимость оснований

Единственный допустимый способ проверки:
- допустимости основания (2 <= |base| <= 62)
- применимости multiples метода (одно основание делит другое)
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

MIN_BASE_MAGNITUDE: Final[int] = 2

MAX_BASE_MAGNITUDE: Final[int] = 62


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(
    value: int,
    name: str,
    min_magnitude: int = MIN_BASE_MAGNITUDE,
    max_magnitude: int = MAX_BASE_MAGNITUDE,
) -> None:
    """
    Валидация основания системы счисления.

    Args:
        value: Основание (знак любой)
        name: Имя параметра (для сообщения об ошибке)
        min_magnitude: Минимальный модуль (default: 2)
        max_magnitude: Максимальный модуль (default: 62)

    Raises:
        ValueError: Если основание 0, ±1 или |value| > max_magnitude
    """
    if abs(value) > max_magnitude:
        raise ValueError(
            f"{name} must be between -{max_magnitude} and {max_magnitude}, got {value}"
        )

    if abs(value) < min_magnitude:
        raise ValueError(
            f"{name} must be >= {min_magnitude} or <= -{min_magnitude}, got {value}"
        )


def is_divisor_pair(source_base: int, target_base: int) -> bool:
    """
    Применим ли multiples метод: source % target == 0 или target % source == 0.

    Examples:
        >>> is_divisor_pair(16, 4)
        True
        >>> is_divisor_pair(2, 8)
        True
        >>> is_divisor_pair(10, 16)
        False
    """
    if source_base == 0 or target_base == 0:
        return False
    return source_base % target_base == 0 or target_base % source_base == 0


def describe_method_availability(source_base: int, target_base: int) -> str:
    """Подсказка о доступности multiples метода для пары оснований."""
    if target_base != 0 and source_base % target_base == 0:
        return (
            f"Source ({source_base}) is a multiple of Target ({target_base}). "
            "Multiples method available."
        )
    if source_base != 0 and target_base % source_base == 0:
        return (
            f"Target ({target_base}) is a multiple of Source ({source_base}). "
            "Multiples method available (fractional factor)."
        )
    return "Multiples method requires one base to be a multiple of the other."
