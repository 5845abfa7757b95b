"""
Numerical Safeguards — Overflow-safe примитивы для конверсии доменов

Модуль обеспечивает численную корректность rescale-арифметики:
- Clamp значения в [min, max] (порядок сравнений фиксирован, NaN → max)
- Целочисленное деление с усечением к нулю
- Точный подъём int/float в Fraction для смешанной арифметики
- Вычисление extent = max - min в extent_type с проверкой переполнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. extent никогда не вычисляется с wraparound: не помещается → ExtentOverflowError
2. Деление целых усекает к нулю, а не к -inf (в отличие от оператора //)
3. Все операции детерминированы и воспроизводимы
"""

import math
from fractions import Fraction
from typing import Final

from bounded_cast.core.math.numeric_types import NumericType, Number
from bounded_cast.errors import ExtentOverflowError

# =============================================================================
# ДОПУСКИ
# =============================================================================

# Допуск round-trip A → B → A для float доменов (float32 даёт ~7 значащих цифр)
DEFAULT_ROUND_TRIP_TOL: Final[float] = 1e-6


# =============================================================================
# ПРОВЕРКИ ЗНАЧЕНИЙ
# =============================================================================


def is_valid_float(value: Number) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    int и Fraction всегда конечны.
    """
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def is_integral_number(value: Number) -> bool:
    """int (но не bool) — целочисленный операнд rescale-арифметики"""
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# CLAMP И ДЕЛЕНИЕ
# =============================================================================


def clamp(value: Number, min_value: Number, max_value: Number) -> Number:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Вычисляется как max(min_value, min(max_value, value)): сначала верхняя
    граница, потом нижняя. При таком порядке NaN насыщается до max_value,
    а для инвертированного диапазона (min > max) результат равен min_value.

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(float("nan"), 0.0, 1.0)
        1.0
    """
    return max(min_value, min(max_value, value))


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор // в Python округляет к -inf; здесь частное усекается к нулю,
    как при делении целых fixed-width типов.

    Raises:
        ZeroDivisionError: denominator == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def to_exact(value: Number) -> Fraction:
    """
    Точный подъём значения в Fraction.

    float переводится без потерь (двоичная дробь), поэтому вся смешанная
    арифметика выполняется без промежуточного округления.

    Raises:
        ValueError: NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot lift non-finite value to exact arithmetic: {value}")
    return Fraction(value)


# =============================================================================
# EXTENT
# =============================================================================


def compute_extent(lower: Number, upper: Number, extent_type: NumericType) -> Number:
    """
    Вычисление extent = upper - lower в extent_type.

    Разность считается точно и только затем приводится к extent_type, поэтому
    беззнаковый value_type (где upper - lower в том же типе дал бы wraparound)
    не искажает результат.

    Args:
        lower: Нижняя граница домена
        upper: Верхняя граница домена
        extent_type: Тип extent

    Returns:
        Для целого extent_type — int, для float — float, для EXACT — int/Fraction.
        Для инвертированного домена (lower > upper) extent отрицательный и на
        вместимость не проверяется.

    Raises:
        ExtentOverflowError: Неотрицательный extent не помещается в extent_type

    Examples:
        >>> compute_extent(0, 65535, NumericType.INT32)
        65535
        >>> compute_extent(-1.0, 1.0, NumericType.FLOAT64)
        2.0
    """
    if extent_type.is_integral:
        difference = math.trunc(upper) - math.trunc(lower)
    else:
        difference = to_exact(upper) - to_exact(lower)

    if difference >= 0 and not extent_type.contains(difference):
        raise ExtentOverflowError(
            f"Extent {upper} - {lower} = {difference} does not fit extent type "
            f"{extent_type.value} (max {extent_type.highest})"
        )

    # Целый extent уже точен; cast() сделал бы wrap для отрицательного extent
    if extent_type.is_integral:
        return difference
    if extent_type is NumericType.EXACT and difference.denominator == 1:
        return int(difference)
    return extent_type.cast(difference)
